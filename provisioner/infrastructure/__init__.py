"""
Infrastructure layer.

The infrastructure layer contains implementations of ports defined
in the application layer. It handles all external concerns:

- Persistence (SQLAlchemy repositories and mappers)
- Web framework (FastAPI routers, pydantic schemas)
- External services (GitHub REST API)

This layer depends on domain and application layers,
but they do not depend on it.
"""
