"""
Project infrastructure: SQLAlchemy repositories and HTTP routers for
projects, environments and applications.
"""
