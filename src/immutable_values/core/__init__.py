"""
Core domain value types and their serialization contracts.

Nothing here performs I/O apart from loading the bundled JSON schemas.
"""
