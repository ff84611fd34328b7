"""
FastAPI routers grouped by domain (users, profiles, pages).

Each file inside this package exposes an APIRouter that is included by the
app factory in app.py.
"""
