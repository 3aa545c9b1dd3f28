"""Content API Package — HTTP CRUD service for the content resource.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
