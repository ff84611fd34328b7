"""
Persistence adapters.

Services depend on the repository rather than opening SQLAlchemy sessions
themselves; the repository is bound to an explicit ``Database`` handle.
"""
