"""SQLite persistence for the current document.

Kept on the stdlib sqlite3 driver; the file holds one table (``texts``) with a
single row so external tools can open and inspect it directly.
"""
