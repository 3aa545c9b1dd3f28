"""Core Layer — pure logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from api/, infrastructure/, or db/

Design Decisions:
    - Functional core separated from imperative shell
"""
