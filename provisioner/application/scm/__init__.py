"""
Source-control bounded context - Application layer.

Contains the remote repository provisioning use case and provider ports.
"""
