"""Presentation routers."""

from sesame.presentation.routers.login_router import LoginRouter

__all__ = [
    "LoginRouter",
]
