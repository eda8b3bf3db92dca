"""
Application Layer
=================

Application services and use cases.
This layer orchestrates domain entities and repositories.

Contains:
- Use Cases: Business operations (create user)
- Services: Application services that coordinate use cases
- DTOs: Request/response models shared with the API layer
"""
