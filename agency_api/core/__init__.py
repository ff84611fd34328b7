"""
Core utilities shared across the agency API.

This package hosts configuration (env vars), logging setup, password hashing
and HTTP middleware. Services and routers depend on these primitives instead of
reading the environment or calling argon2 directly.
"""
