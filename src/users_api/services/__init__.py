"""Service initialization and dependency injection."""

import logging

from fastapi import Depends

from users_api.config import Settings, get_settings
from users_common.services.user_service import CosmosUserService, InMemoryUserService, UserService

logger = logging.getLogger(__name__)

# Service instances cache
_services_cache: dict[str, UserService] = {}


def get_user_service(settings: Settings = Depends(get_settings)) -> UserService:
    """Get the user service instance.

    Uses Cosmos DB when an endpoint is configured and an in-memory store
    otherwise. The instance is created once per process.

    Args:
        settings: Application settings

    Returns:
        UserService instance
    """
    if "user_service" not in _services_cache:
        if settings.azure_cosmosdb_endpoint:
            use_managed_identity = settings.azure_cosmosdb_key is None

            _services_cache["user_service"] = CosmosUserService(
                cosmos_endpoint=settings.azure_cosmosdb_endpoint,
                cosmos_key=settings.azure_cosmosdb_key,
                database_name=settings.database_name,
                container_name=settings.cosmos_users_container,
                use_managed_identity=use_managed_identity,
            )
            logger.info("Initialized CosmosUserService")
        else:
            _services_cache["user_service"] = InMemoryUserService()
            logger.info("Initialized InMemoryUserService")

    return _services_cache["user_service"]


def reset_services() -> None:
    """Drop cached service instances."""
    _services_cache.clear()
