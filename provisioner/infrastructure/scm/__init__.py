"""
Source-control infrastructure: the GitHub adapter, the remote repository
store and its HTTP router.
"""
