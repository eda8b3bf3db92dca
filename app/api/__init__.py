"""
API/Presentation Layer
======================

HTTP API layer using FastAPI.
This layer handles HTTP requests and responses.

Contains:
- Controllers: FastAPI route handlers (v1)
- Dependencies: resolution of components from the DI container
- Routes: registration of routers on the application
"""
