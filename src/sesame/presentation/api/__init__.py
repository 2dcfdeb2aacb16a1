"""HTTP adapter for the login router."""

from sesame.presentation.api.app import API_VERSION, create_app
from sesame.presentation.api.dependencies import build_auth_service

__all__ = [
    "API_VERSION",
    "build_auth_service",
    "create_app",
]
