"""Service layer exceptions."""


class ServiceError(Exception):
    """Base class for predictable service-layer exceptions."""


class UserNotFoundError(ServiceError):
    """Raised when no user exists for the requested id (-> HTTP 404)."""

    message = "No User found in db with the given id to perform the operation"

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(f"{self.message}: {user_id}")
