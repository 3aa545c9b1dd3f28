from content_api.server import main

main()
