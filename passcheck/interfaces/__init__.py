"""
Interfaces layer package.

Contains request adapters, FastAPI routers and Pydantic schemas.
No business logic belongs here.
Routes hand requests to adapters and return their responses.
"""
