"""
Per-domain repository modules for database access.

Functions take an open ``Session`` and commit their own writes.
"""
