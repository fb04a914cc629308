"""Shared fixtures: mocked Neo4j driver primitives."""

import os
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest


def make_movie_node(title="Title", tagline="Tagline", released=2000) -> dict:
    """Return a node-like property mapping for a ``:Movie``."""
    return {"title": title, "tagline": tagline, "released": released}


def make_result(rows) -> MagicMock:
    """Mock ``AsyncResult`` handing out one row per ``fetch(1)`` call."""
    result = MagicMock(name="AsyncResult")
    result.fetch = AsyncMock(side_effect=[[row] for row in rows] + [[]])
    return result


@pytest.fixture
def neo4j_mocks():
    """
    Factory building a mocked driver -> session -> transaction chain.

    Each ``tx.run`` call returns a fresh result over ``rows``; the results are
    collected in ``mocks.results`` for later inspection.
    """

    def _make(rows=()):
        rows = list(rows)
        results = []

        def _run(query, parameters=None, **kwargs):
            result = make_result(rows)
            results.append(result)
            return result

        tx = MagicMock(name="AsyncManagedTransaction")
        tx.run = AsyncMock(side_effect=_run)

        async def _execute_read(work, *args, **kwargs):
            return await work(tx, *args, **kwargs)

        session = MagicMock(name="AsyncSession")
        session.execute_read = AsyncMock(side_effect=_execute_read)
        session.close = AsyncMock(return_value=None)

        driver = MagicMock(name="AsyncDriver")
        driver.session = MagicMock(return_value=session)

        return SimpleNamespace(driver=driver, session=session, tx=tx, results=results)

    return _make


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Drop NEO4J_* / APP__* variables and run from an empty directory."""
    for name in list(os.environ):
        if name.upper().startswith(("NEO4J_", "APP__")):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def movie_node():
    """Factory fixture for movie node property mappings."""
    return make_movie_node
