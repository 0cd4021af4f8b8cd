"""
Application layer.

The application layer orchestrates domain objects and defines the boundaries
of the system. It contains use cases that represent the operations available
to external actors.

This layer contains:
- Commands: Creation requests carrying raw input values
- Use Cases: Sequence provider calls with persistence
- Ports: Protocols implemented by persistence and provider adapters
"""
