"""
Core application utilities shared by every layer.

This package provides:
- Application-level settings (separate from DB settings)
- Logging setup with per-request correlation ids
- Domain exceptions and enums
- Password hashing, JWT helpers and FastAPI dependencies
"""
