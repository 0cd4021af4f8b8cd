"""
Project bounded context - Application layer.

Contains the creation use cases for projects, environments and applications.
"""
