"""
API v1 Package
===============

Version 1 API controllers.
"""
from .user_controller import router as user_router, UserHandler

__all__ = ["user_router", "UserHandler"]
