"""Domain layer: entities and repository ports for users."""

from .entities import User, UserFields
from .repositories import UserRepository

__all__ = ["User", "UserFields", "UserRepository"]
