"""
Core utilities shared across the fitclub backend.

This package hosts configuration, logging setup and the password encoder.
Services depend on these primitives instead of reading os.environ or
building hashers on their own.
"""
