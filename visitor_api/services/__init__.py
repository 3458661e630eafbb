"""
Use cases for the visitor API.

Routers call these services instead of touching the repository directly.
"""
