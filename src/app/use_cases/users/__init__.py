"""
User Use Cases

Business logic for the authenticated user's own account.
"""

from .load_current_user_use_case import LoadCurrentUserUseCase

__all__ = [
    "LoadCurrentUserUseCase",
]
