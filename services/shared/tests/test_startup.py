"""Testes para o lifespan de inicialização do banco."""

import pytest
from unittest.mock import MagicMock
from fastapi import FastAPI

from shared.startup import database_lifespan, database_lifespan_factory


class TestDatabaseLifespan:

    @pytest.mark.asyncio
    async def test_initializer_runs_once_before_yield(self):
        initializer = MagicMock(return_value={"theme": 3})
        on_shutdown = MagicMock()

        async with database_lifespan(
            FastAPI(),
            service_name="test-service",
            initializer=initializer,
            on_shutdown=on_shutdown,
        ):
            initializer.assert_called_once_with()
            on_shutdown.assert_not_called()

        on_shutdown.assert_called_once_with()

    @pytest.mark.asyncio
    async def test_initializer_failure_is_fatal_without_retry(self):
        initializer = MagicMock(side_effect=RuntimeError("access denied"))

        with pytest.raises(RuntimeError, match="access denied"):
            async with database_lifespan(
                FastAPI(),
                service_name="test-service",
                initializer=initializer,
            ):
                pytest.fail("o serviço não deveria subir")

        assert initializer.call_count == 1

    @pytest.mark.asyncio
    async def test_factory_returns_lifespan_bound_to_initializer(self):
        initializer = MagicMock(return_value={})
        lifespan = database_lifespan_factory(service_name="test-service", initializer=initializer)

        async with lifespan(FastAPI()):
            pass

        initializer.assert_called_once_with()
