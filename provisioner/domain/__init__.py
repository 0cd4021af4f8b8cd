"""
Domain layer.

The domain layer contains the core business rules of the provisioner.
It has no dependencies on external frameworks or infrastructure.

This layer contains:
- Entities: Project, Environment, Application, RemoteRepository
- Value Objects: Typed UUID identifiers
- Domain exceptions: Validation failures raised before any port is used
"""
