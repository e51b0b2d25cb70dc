"""
Database connection management
"""

from pymongo import AsyncMongoClient

from ..config import settings
from ..logging import get_logger
from .mongo import MongoDocumentStore
from .store import DocumentStore

logger = get_logger(__name__)


def create_client(mongodb_url: str | None = None) -> AsyncMongoClient:
    """Create the process-wide MongoDB client.

    The client owns its own connection pool and is shared by every request;
    it does not connect until the first operation.
    """
    url = mongodb_url or settings.mongodb_url
    client: AsyncMongoClient = AsyncMongoClient(url, tz_aware=True)
    logger.info("Database client created", database_name=settings.database_name)
    return client


def create_store(client: AsyncMongoClient, database_name: str | None = None) -> MongoDocumentStore:
    """Wrap a database of ``client`` in the document store interface."""
    return MongoDocumentStore(client[database_name or settings.database_name])


async def close_client(client: AsyncMongoClient) -> None:
    await client.close()
    logger.info("Database client closed")


async def check_database_connection(store: DocumentStore) -> tuple[bool, str | None]:
    """
    Test the database connection and return helpful error messages.

    Returns:
        tuple: (success: bool, error_message: str | None)
    """
    try:
        await store.ping()
        return True, None
    except Exception as e:
        error_str = str(e)

        if "Authentication failed" in error_str:
            return False, (
                f"Database authentication failed: {error_str}\n"
                f"Please check the credentials in TASKBOARD_MONGODB_URL."
            )
        if "timed out" in error_str or "Connection refused" in error_str:
            return False, (
                f"Cannot connect to database server: {error_str}\n"
                f"The database server appears to be down or unreachable.\n"
                f"Please check that MongoDB is running and accessible."
            )
        return False, f"Database connection error ({type(e).__name__}): {error_str}"
