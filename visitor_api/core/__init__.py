"""
Core utilities shared across the visitor API.

Configuration and logging setup live here so routers/services never read
os.environ directly.
"""
