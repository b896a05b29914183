"""
Domain modules - roles, users, and the repository registry.
"""
