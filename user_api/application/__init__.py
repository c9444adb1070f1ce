"""
Application layer.

The application layer orchestrates domain objects and defines the
operations available to the HTTP layer. It depends on the domain and
on protocols for the store; concrete adapters live in infrastructure.

This layer contains:
- Services: Orchestrate domain logic and logging per operation
- DTOs: Data transfer objects returned to the HTTP layer
- Protocols: Interfaces for the store and the service itself
- Pagination: Page normalization and page metadata
"""
