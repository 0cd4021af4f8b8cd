"""
Project bounded context - Domain layer.

This context handles the organizational resource tree:
- Projects owned by a user
- Environments (development, staging, production) inside a project
- Applications deployed into an environment
"""
