"""
Domain layer.

The domain layer contains the business rules for users. It has no
dependencies on the web framework or the database.

This layer contains:
- Entities: Objects with identity and lifecycle
- Value Objects: Immutable objects defined by attributes
- Domain Services: Stateless calculations over entities
"""
