"""
Infrastructure layer.

Implements the ports defined in the application layer and handles all
external concerns:

- Persistence (SQLAlchemy repository and ORM mapping)
- Web framework (FastAPI routers, schemas, middleware)
- Dependency injection helpers

This layer depends on domain and application layers,
but they do not depend on it.
"""
