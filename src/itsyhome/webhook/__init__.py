"""
HTTP front end for the command surface.
"""
from .server import create_app, error_body, success_body

__all__ = ["create_app", "error_body", "success_body"]
