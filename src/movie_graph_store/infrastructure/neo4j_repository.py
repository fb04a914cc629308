"""Neo4j movie repository implementation."""
from typing import Optional

from loguru import logger
from neo4j import AsyncDriver, AsyncManagedTransaction, AsyncSession, unit_of_work

from ..domain.interfaces import MovieRepository
from ..domain.models.movie import MovieRecord
from .result_mapper import ResultCursor, drain_movies
from .session_options import SessionOptions

MOVIE_BY_TITLE_QUERY = "MATCH (m:Movie) WHERE m.title = $title RETURN m"


class Neo4jMovieRepository(MovieRepository):
    """MovieRepository backed by Neo4j.

    Keeps no per-call state; one instance may serve concurrent callers.
    """

    def __init__(
        self,
        driver: AsyncDriver,
        *,
        default_database: Optional[str] = None,
        query_timeout: Optional[float] = None,
    ) -> None:
        self._driver = driver
        self._default_database = default_database
        self._query_timeout = query_timeout

    def session_options(self, database: Optional[str] = None) -> SessionOptions:
        """Options for a session scoped to ``database`` or the default one."""
        return SessionOptions.for_database(database or self._default_database)

    async def find_movies_by_title(
        self,
        title: str,
        database: Optional[str] = None,
    ) -> list[MovieRecord]:
        """
        Return the movies whose title equals ``title``, in result order.

        Opens one read session per call and always closes it, including when
        the query or the row mapping fails. Driver errors are logged and
        re-raised unchanged; undecodable rows raise ``MappingError``.
        """
        options = self.session_options(database)
        db_label = options.database or "<default>"

        @unit_of_work(timeout=self._query_timeout)
        async def _read_movies(tx: AsyncManagedTransaction) -> list[MovieRecord]:
            result = await tx.run(MOVIE_BY_TITLE_QUERY, {"title": title})
            return await drain_movies(ResultCursor(result))

        session = self._driver.session(**options.to_session_kwargs())
        try:
            logger.debug(f"Looking up movies titled '{title}' on database '{db_label}'.")
            movies = await session.execute_read(_read_movies)
        except Exception as e:
            logger.error(f"Error looking up movies on database '{db_label}': {e}")
            await self._close_after_failure(session)
            raise
        except BaseException:
            # Cancellation and interrupts still release the session
            logger.warning(f"Movie lookup on database '{db_label}' was interrupted.")
            await self._close_after_failure(session)
            raise
        await session.close()

        logger.info(
            f"Movie lookup on database '{db_label}' returned {len(movies)} records."
        )
        return movies

    @staticmethod
    async def _close_after_failure(session: AsyncSession) -> None:
        try:
            await session.close()
        except Exception as close_error:
            # The lookup failure is the one reported to the caller
            logger.warning(f"Error closing session after failed lookup: {close_error}")
