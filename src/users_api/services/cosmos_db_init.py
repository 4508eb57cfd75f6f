"""Cosmos DB initialization service."""

import logging

from azure.cosmos import CosmosClient, PartitionKey, exceptions
from azure.identity import DefaultAzureCredential

from users_api.config import Settings

logger = logging.getLogger(__name__)


class CosmosDbInitializer:
    """Create the users database and container if they don't exist."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.client: CosmosClient | None = None
        self.database = None

    def connect(self) -> None:
        """Create connection to Cosmos DB."""
        endpoint = self.settings.azure_cosmosdb_endpoint
        if not endpoint:
            logger.info("Cosmos DB endpoint not configured, users are kept in memory")
            return

        credential = self.settings.azure_cosmosdb_key or DefaultAzureCredential()
        try:
            self.client = CosmosClient(url=endpoint, credential=credential)
            logger.info("Connected to Cosmos DB at %s", endpoint)
        except Exception as e:
            logger.error("Failed to connect to Cosmos DB: %s", e)
            raise

    def initialize_database(self) -> None:
        """Create database if it doesn't exist."""
        if not self.client:
            return

        try:
            self.database = self.client.create_database_if_not_exists(id=self.settings.database_name)
            logger.info("Database '%s' initialized", self.settings.database_name)
        except Exception as e:
            logger.error("Failed to initialize database: %s", e)
            raise

    def initialize_users_container(self) -> None:
        """Create the users container, partitioned on ``/user_id``."""
        if not self.database:
            return

        container = self.settings.cosmos_users_container
        options = {}
        # The emulator requires provisioned throughput
        if "localhost" in (self.settings.azure_cosmosdb_endpoint or "").lower():
            options["offer_throughput"] = 400

        try:
            self.database.create_container_if_not_exists(
                id=container,
                partition_key=PartitionKey(path="/user_id"),
                **options,
            )
            logger.info("Container '%s' initialized with partition key '/user_id'", container)
        except exceptions.CosmosResourceExistsError:
            logger.info("Container '%s' already exists", container)
        except Exception as e:
            logger.error("Failed to create container '%s': %s", container, e)
            raise

    def initialize(self) -> None:
        """Run full initialization: connect, create database and container."""
        self.connect()
        self.initialize_database()
        self.initialize_users_container()


async def initialize_cosmos_db(settings: Settings) -> None:
    """Initialize Cosmos DB during application startup.

    Failures are fatal only in production.

    Args:
        settings: Application settings
    """
    initializer = CosmosDbInitializer(settings)
    try:
        initializer.initialize()
    except Exception as e:
        logger.error("Failed to initialize Cosmos DB: %s", e)
        if settings.environment == "production":
            raise
        logger.warning("Continuing without Cosmos DB initialization (%s mode)", settings.environment)
