"""Shared pytest fixtures and configuration for all tests."""

from unittest.mock import MagicMock

import pytest

from humadero.core.config import Settings


@pytest.fixture
def demo_settings() -> Settings:
    """Settings with no database configured."""
    return Settings(SUPABASE_URL=None, SUPABASE_KEY=None, ENVIRONMENT="production")


@pytest.fixture
def dev_settings() -> Settings:
    """Development settings; error details are echoed to clients."""
    return Settings(
        SUPABASE_URL="https://example.supabase.co",
        SUPABASE_KEY="test-key",
        ENVIRONMENT="development",
    )


@pytest.fixture
def menu_rows() -> list[dict]:
    """Fixture providing catalog rows as the database returns them."""
    return [
        {"id": 10, "nombre": "Gringa", "precio": 35, "categoria": "comida", "descripcion": None, "popular": True},
        {"id": 11, "nombre": "Horchata", "precio": 20, "categoria": "bebidas", "descripcion": "Agua de horchata", "popular": False},
        {"id": 12, "nombre": "Churros", "precio": 30, "categoria": "postres", "descripcion": None, "popular": False},
        {"id": 13, "nombre": "Jamaica", "precio": 20, "categoria": "bebidas", "descripcion": None, "popular": False},
    ]


@pytest.fixture
def mock_supabase(menu_rows: list[dict]) -> MagicMock:
    """Supabase client whose query builders all resolve to the same table mock."""
    client = MagicMock()
    table = client.table.return_value
    table.select.return_value.order.return_value.execute.return_value = MagicMock(data=menu_rows)
    table.select.return_value.eq.return_value.order.return_value.execute.return_value = MagicMock(
        data=[r for r in menu_rows if r["categoria"] == "bebidas"]
    )
    table.select.return_value.limit.return_value.execute.return_value = MagicMock(data=[{"id": 10}])
    table.insert.return_value.execute.side_effect = lambda: MagicMock(data=[table.insert.call_args.args[0]])
    return client


@pytest.fixture
def failing_supabase() -> MagicMock:
    """Supabase client whose every query raises as if the network were down."""
    client = MagicMock()
    table = client.table.return_value
    error = ConnectionError("connection refused")
    table.select.return_value.order.return_value.execute.side_effect = error
    table.select.return_value.eq.return_value.order.return_value.execute.side_effect = error
    table.select.return_value.limit.return_value.execute.side_effect = error
    table.insert.return_value.execute.side_effect = error
    return client
