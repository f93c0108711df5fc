"""HTTP API for the Auth Gateway."""

from auth_gateway.api.app import create_app

__all__ = ["create_app"]
