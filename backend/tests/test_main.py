"""
OrderDesk Backend - Application Lifecycle Tests
=================================================

What:  Startup/shutdown behavior of the lifespan and the CLI entry point.
How:   Drives `lifespan(app)` directly; setup_logging is patched out so the
       test run's logging configuration stays intact.
"""

from unittest.mock import patch

import pytest

from orderdesk import database as db_module
from orderdesk.__main__ import main as cli_main
from orderdesk.config import settings
from orderdesk.exceptions import ConfigurationError, DatabaseUnavailableError
from orderdesk.main import app, lifespan


class TestLifespan:

    @pytest.mark.asyncio
    async def test_startup_creates_pool_and_shutdown_disposes(self, sqlite_url):
        with patch("orderdesk.main.setup_logging"), \
             patch.object(settings, "database_url", sqlite_url):
            async with lifespan(app):
                assert db_module.engine is not None

        assert db_module.engine is None

    @pytest.mark.asyncio
    async def test_missing_database_url_aborts_startup(self):
        with patch("orderdesk.main.setup_logging"), \
             patch.object(settings, "database_url", None):
            with pytest.raises(ConfigurationError, match="DATABASE_URL"):
                async with lifespan(app):
                    pytest.fail("startup should not complete")

    @pytest.mark.asyncio
    async def test_unreachable_database_aborts_startup(self, tmp_path):
        url = f"sqlite+aiosqlite:///{tmp_path / 'nope' / 'x.db'}"
        with patch("orderdesk.main.setup_logging"), \
             patch.object(settings, "database_url", url):
            with pytest.raises(DatabaseUnavailableError):
                async with lifespan(app):
                    pytest.fail("startup should not complete")

        assert db_module.engine is None


class TestEntryPoint:

    def test_missing_database_url_exits_nonzero(self):
        with patch("orderdesk.__main__.setup_logging"), \
             patch("orderdesk.__main__.uvicorn") as mock_uvicorn, \
             patch.object(settings, "database_url", None):
            with pytest.raises(SystemExit) as exc_info:
                cli_main()

        assert exc_info.value.code == 1
        mock_uvicorn.run.assert_not_called()

    def test_runs_uvicorn_on_configured_address(self):
        with patch("orderdesk.__main__.setup_logging"), \
             patch("orderdesk.__main__.uvicorn") as mock_uvicorn, \
             patch.object(settings, "database_url", "postgresql+asyncpg://u@h/db"):
            cli_main()

        kwargs = mock_uvicorn.run.call_args.kwargs
        assert kwargs["host"] == settings.backend_host
        assert kwargs["port"] == settings.backend_port
        assert mock_uvicorn.run.call_args.args[0] is app
