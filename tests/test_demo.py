"""
Tests for the demo driver.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch
from pymongo.errors import AutoReconnect, ServerSelectionTimeoutError

from trainerdb import demo
from trainerdb.exceptions import RepositoryError


@pytest.mark.asyncio
async def test_run_demo_leaves_everyone_but_marcus(mongo_client, test_settings):
    remaining = await demo.run_demo(mongo_client, test_settings)

    assert {t.name for t in remaining} == {"Leticia Presoto", "Magali", "Cacau"}
    assert all(t.id for t in remaining)


@pytest.fixture
def patched_demo(test_settings):
    """Patch connection helpers so main() runs without a server."""
    client = MagicMock()
    with patch.object(demo, "get_settings", return_value=test_settings), \
            patch.object(demo, "configure_logging"), \
            patch.object(demo, "create_client", return_value=client), \
            patch.object(demo, "init_database", new=AsyncMock()) as init_database, \
            patch.object(demo, "run_demo", new=AsyncMock(return_value=[])) as run_demo, \
            patch.object(demo, "drop_database", new=AsyncMock()) as drop_database, \
            patch.object(demo, "close_database", new=AsyncMock()) as close_database:
        yield {
            "client": client,
            "init_database": init_database,
            "run_demo": run_demo,
            "drop_database": drop_database,
            "close_database": close_database,
        }


@pytest.mark.asyncio
async def test_main_success(patched_demo):
    assert await demo.main() == 0

    patched_demo["run_demo"].assert_called_once()
    patched_demo["drop_database"].assert_called_once()
    patched_demo["close_database"].assert_called_once_with(patched_demo["client"])


@pytest.mark.asyncio
async def test_main_connection_failure_is_fatal(patched_demo):
    patched_demo["init_database"].side_effect = ServerSelectionTimeoutError("down")

    assert await demo.main() == 1

    patched_demo["run_demo"].assert_not_called()
    patched_demo["drop_database"].assert_not_called()
    patched_demo["close_database"].assert_called_once()


@pytest.mark.asyncio
async def test_main_repository_failure_stops_run(patched_demo):
    patched_demo["run_demo"].side_effect = RepositoryError("create", "connection lost")

    assert await demo.main() == 1

    patched_demo["drop_database"].assert_called_once()
    patched_demo["close_database"].assert_called_once()


@pytest.mark.asyncio
async def test_main_drop_failure_after_repository_failure(patched_demo):
    patched_demo["run_demo"].side_effect = RepositoryError("create", "connection lost")
    patched_demo["drop_database"].side_effect = AutoReconnect("connection lost")

    assert await demo.main() == 1

    patched_demo["drop_database"].assert_called_once()
    patched_demo["close_database"].assert_called_once_with(patched_demo["client"])


@pytest.mark.asyncio
async def test_main_drop_failure_after_success(patched_demo):
    patched_demo["drop_database"].side_effect = ServerSelectionTimeoutError("down")

    assert await demo.main() == 1

    patched_demo["run_demo"].assert_called_once()
    patched_demo["close_database"].assert_called_once_with(patched_demo["client"])
