"""Visitor registration API."""
from visitor_api.app import create_app

__all__ = ["create_app"]
