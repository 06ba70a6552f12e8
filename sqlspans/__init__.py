"""
# SQL-Spans: __init__.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Span-based highlighting of SQL scripts.
"""
