# tests/unit/__init__.py
"""
Unit tests for AutoFollow components.

Unit tests validate individual functions and classes in isolation against
the mock game client, with no live client and no file I/O beyond tmp_path.
"""
