"""User service with in-memory and Cosmos DB implementations."""

import itertools
import logging
import threading
from abc import ABC, abstractmethod
from typing import Any

from azure.cosmos import CosmosClient
from azure.cosmos.exceptions import CosmosResourceNotFoundError
from azure.identity import DefaultAzureCredential

from users_common.models.user import User
from users_common.services.exceptions import UserNotFoundError

logger = logging.getLogger(__name__)


class UserService(ABC):
    """Abstract interface for user service."""

    @abstractmethod
    def add_user(self, user: User) -> User:
        """Store a new user and return it with its assigned id.

        Any id present on ``user`` is ignored.
        """
        pass

    @abstractmethod
    def get_user(self, user_id: int) -> User:
        """Get a user by ID.

        Raises:
            UserNotFoundError: If no user has the given id
        """
        pass

    @abstractmethod
    def list_users(self) -> list[User]:
        """List all users."""
        pass

    @abstractmethod
    def update_user(self, user: User) -> User:
        """Replace the stored user that has the same id as ``user``.

        Raises:
            UserNotFoundError: If no user has the given id
        """
        pass

    @abstractmethod
    def delete_user(self, user_id: int) -> None:
        """Delete a user.

        Raises:
            UserNotFoundError: If no user has the given id
        """
        pass


class InMemoryUserService(UserService):
    """Service for managing users in memory."""

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def add_user(self, user: User) -> User:
        with self._lock:
            stored = user.model_copy(update={"id": next(self._ids)})
            self._users[stored.id] = stored
        logger.info("Added user %s", stored.id)
        return stored.model_copy()

    def get_user(self, user_id: int) -> User:
        with self._lock:
            user = self._users.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user.model_copy()

    def list_users(self) -> list[User]:
        with self._lock:
            return [self._users[user_id].model_copy() for user_id in sorted(self._users)]

    def update_user(self, user: User) -> User:
        with self._lock:
            if user.id not in self._users:
                raise UserNotFoundError(user.id)
            self._users[user.id] = user.model_copy()
        logger.info("Updated user %s", user.id)
        return user.model_copy()

    def delete_user(self, user_id: int) -> None:
        with self._lock:
            if self._users.pop(user_id, None) is None:
                raise UserNotFoundError(user_id)
        logger.info("Deleted user %s", user_id)


class CosmosUserService(UserService):
    """Cosmos DB implementation of UserService.

    Documents are keyed by the string form of the user id and partitioned
    on ``/user_id``.
    """

    def __init__(
        self,
        cosmos_endpoint: str,
        cosmos_key: str | None = None,
        database_name: str = "users",
        container_name: str = "users",
        use_managed_identity: bool = False,
    ) -> None:
        """Initialize Cosmos DB user service.

        Args:
            cosmos_endpoint: Cosmos DB endpoint URL
            cosmos_key: Cosmos DB key (if not using managed identity)
            database_name: Database name
            container_name: Container name for users
            use_managed_identity: Use managed identity for authentication
        """

        if use_managed_identity:
            credential = DefaultAzureCredential()
            self.client = CosmosClient(cosmos_endpoint, credential)
        else:
            if not cosmos_key:
                raise ValueError("cosmos_key is required when not using managed identity")
            self.client = CosmosClient(cosmos_endpoint, cosmos_key)

        self.database = self.client.get_database_client(database_name)
        self.container = self.database.get_container_client(container_name)

    @staticmethod
    def _to_document(user: User) -> dict[str, Any]:
        return {
            **user.model_dump(by_alias=True),
            "id": str(user.id),
            "user_id": user.id,
        }

    @staticmethod
    def _to_user(doc: dict[str, Any]) -> User:
        return User(
            id=doc["user_id"],
            email=doc["email"],
            first_name=doc.get("firstName"),
            last_name=doc.get("lastName"),
            password=doc.get("password"),
        )

    def _next_id(self) -> int:
        # Not atomic across writers; create_item rejects a clashing id.
        query = "SELECT VALUE MAX(c.user_id) FROM c"
        items = list(self.container.query_items(query=query, enable_cross_partition_query=True))
        current = items[0] if items and items[0] is not None else 0
        return int(current) + 1

    def add_user(self, user: User) -> User:
        stored = user.model_copy(update={"id": self._next_id()})
        self.container.create_item(
            body=self._to_document(stored),
            enable_automatic_id_generation=False,
        )
        logger.info("Added user %s", stored.id)
        return stored

    def get_user(self, user_id: int) -> User:
        try:
            user_doc = self.container.read_item(item=str(user_id), partition_key=user_id)
        except CosmosResourceNotFoundError as e:
            raise UserNotFoundError(user_id) from e
        return self._to_user(user_doc)

    def list_users(self) -> list[User]:
        query = "SELECT * FROM c ORDER BY c.user_id"
        items = list(self.container.query_items(query=query, enable_cross_partition_query=True))
        return [self._to_user(item) for item in items]

    def update_user(self, user: User) -> User:
        try:
            self.container.replace_item(item=str(user.id), body=self._to_document(user))
        except CosmosResourceNotFoundError as e:
            raise UserNotFoundError(user.id) from e
        logger.info("Updated user %s", user.id)
        return user

    def delete_user(self, user_id: int) -> None:
        try:
            self.container.delete_item(item=str(user_id), partition_key=user_id)
        except CosmosResourceNotFoundError as e:
            raise UserNotFoundError(user_id) from e
        logger.info("Deleted user %s", user_id)
