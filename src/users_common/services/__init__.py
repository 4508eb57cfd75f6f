"""Common services package."""

from users_common.services.exceptions import ServiceError, UserNotFoundError
from users_common.services.user_service import CosmosUserService, InMemoryUserService, UserService

__all__ = [
    "CosmosUserService",
    "InMemoryUserService",
    "ServiceError",
    "UserNotFoundError",
    "UserService",
]
