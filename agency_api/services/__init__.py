"""
High-level use cases for the agency API.

Each service module orchestrates the repository and the password hasher to
implement business rules (create account, partial update, create profile).

Routers (FastAPI endpoints) call these services instead of touching SQLAlchemy
sessions directly.
"""
