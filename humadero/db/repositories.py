"""Supabase table access for the catalog and for orders.

Every backend failure (network, timeout, PostgREST rejection) surfaces as a
PersistenceError; callers decide whether to degrade or to fail.
"""

import logging
from typing import Any, Dict, List

from pydantic import ValidationError as ModelValidationError
from supabase import Client

from humadero.core.errors import PersistenceError
from humadero.schemas.menu import MenuItem

logger = logging.getLogger(__name__)


def _rows(res: Any) -> List[Dict[str, Any]]:
    return getattr(res, "data", []) or []


class MenuRepository:
    def __init__(self, client: Client, table_name: str = "menu") -> None:
        self.client = client
        self.table_name = table_name

    def _to_items(self, rows: List[Dict[str, Any]]) -> List[MenuItem]:
        items = []
        for row in rows:
            try:
                items.append(MenuItem.model_validate(row))
            except ModelValidationError as e:
                logger.warning(f"Skipping malformed {self.table_name} row {row.get('id')!r}: {e.error_count()} error(s)")
        return items

    def fetch_all(self) -> List[MenuItem]:
        try:
            res = self.client.table(self.table_name).select("*").order("id").execute()
        except Exception as e:
            raise PersistenceError("No se pudo leer el menú", detail=str(e)) from e
        return self._to_items(_rows(res))

    def fetch_by_category(self, category: str) -> List[MenuItem]:
        try:
            res = (
                self.client.table(self.table_name)
                .select("*")
                .eq("categoria", category)
                .order("id")
                .execute()
            )
        except Exception as e:
            raise PersistenceError("No se pudo leer el menú", detail=str(e)) from e
        return self._to_items(_rows(res))

    def ping(self) -> None:
        """Cheapest existence query; raises PersistenceError when unreachable."""
        try:
            self.client.table(self.table_name).select("id").limit(1).execute()
        except Exception as e:
            raise PersistenceError("Base de datos no disponible", detail=str(e)) from e


class OrderRepository:
    def __init__(self, client: Client, table_name: str = "pedidos") -> None:
        self.client = client
        self.table_name = table_name

    def insert(self, row: Dict[str, Any]) -> Dict[str, Any]:
        """Insert one order and return the stored row."""
        try:
            res = self.client.table(self.table_name).insert(row).execute()
        except Exception as e:
            raise PersistenceError("No se pudo guardar el pedido", detail=str(e)) from e
        return (_rows(res) or [row])[0]
