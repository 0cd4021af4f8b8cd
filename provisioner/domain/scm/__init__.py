"""
Source-control bounded context - Domain layer.

Remote repositories created at the source-control provider and
recorded against the application they belong to.
"""
