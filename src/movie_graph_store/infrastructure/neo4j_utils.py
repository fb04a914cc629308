import asyncio
import re
from typing import Optional

from loguru import logger
from neo4j import AsyncDriver, AsyncGraphDatabase
from neo4j.exceptions import ServiceUnavailable

from ..config import Neo4jSettingsModel, runtime_settings
from .neo4j_repository import Neo4jMovieRepository


def mask_uri(uri: str) -> str:
    """Mask sensitive parts of a URI for logging."""
    return re.sub(r"://([^:/@]+):([^@]+)@", r"://\1:***@", uri)


def mask_username(username: str) -> str:
    """Mask a username for logging."""
    if len(username) <= 2:
        return "***"
    return username[:2] + "*" * (len(username) - 2)


async def create_neo4j_driver(settings: Neo4jSettingsModel) -> AsyncDriver:
    """Create and verify a new Neo4j driver using the provided settings."""
    if not settings.uri or not settings.user or not settings.password:
        raise ServiceUnavailable("Neo4j connection details are incomplete in settings.")

    logger.info(
        f"Initializing Neo4j driver for URI: {mask_uri(settings.uri)} "
        f"(user {mask_username(settings.user)})"
    )
    driver = AsyncGraphDatabase.driver(
        settings.uri,
        auth=(settings.user, settings.password),
        max_connection_lifetime=3600,
        max_connection_pool_size=50,
        connection_acquisition_timeout=60,
    )
    try:
        await driver.verify_connectivity()
    except Exception as e:
        logger.error(f"Failed to connect to Neo4j at {mask_uri(settings.uri)}: {e}")
        await driver.close()
        raise
    logger.info("Neo4j driver initialized and connectivity verified.")
    return driver


class Neo4jDriverManager:
    """Lock-guarded holder of the shared Neo4j driver."""

    def __init__(self, settings: Optional[Neo4jSettingsModel] = None) -> None:
        self._settings = settings
        self._driver: Optional[AsyncDriver] = None
        self._lock = asyncio.Lock()

    @property
    def settings(self) -> Neo4jSettingsModel:
        return self._settings or runtime_settings.neo4j

    async def get_driver(self) -> AsyncDriver:
        async with self._lock:
            if self._driver is None:
                self._driver = await create_neo4j_driver(self.settings)
            return self._driver

    async def close(self) -> None:
        async with self._lock:
            if self._driver is not None:
                logger.info("Closing Neo4j driver.")
                await self._driver.close()
                self._driver = None


driver_manager = Neo4jDriverManager()


async def get_neo4j_driver() -> AsyncDriver:
    """Return the shared Neo4j driver, creating it on first use."""
    return await driver_manager.get_driver()


async def close_neo4j_driver() -> None:
    """Close the shared Neo4j driver if it is open."""
    await driver_manager.close()


async def get_movie_store(
    settings: Optional[Neo4jSettingsModel] = None,
) -> Neo4jMovieRepository:
    """Build a movie repository over the shared driver."""
    settings = settings or driver_manager.settings
    driver = await get_neo4j_driver()
    return Neo4jMovieRepository(
        driver,
        default_database=settings.database,
        query_timeout=settings.query_timeout,
    )
