"""Menu catalog: database contents when reachable, built-in fallback otherwise.

Reads degrade silently to the fallback list (flagged with a warning) so the
menu stays available; this is the opposite of the order write path.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from humadero.core.errors import PersistenceError
from humadero.data.menu import FALLBACK_MENU
from humadero.db.repositories import MenuRepository
from humadero.schemas.menu import CATEGORIES, MenuItem, MenuSnapshot

logger = logging.getLogger(__name__)

WARNING_NOT_CONFIGURED = "Base de datos no configurada; se muestra el menú de respaldo"
WARNING_UNAVAILABLE = "Base de datos no disponible; se muestra el menú de respaldo"


def group_by_category(items: Iterable[MenuItem]) -> Dict[str, List[MenuItem]]:
    groups: Dict[str, List[MenuItem]] = {cat: [] for cat in CATEGORIES}
    for item in items:
        groups[item.categoria].append(item)
    return groups


class MenuCatalog:
    def __init__(
        self,
        repository: Optional[MenuRepository] = None,
        fallback: Sequence[MenuItem] = FALLBACK_MENU,
    ) -> None:
        self.repository = repository
        self.fallback = tuple(fallback)

    def _fallback_snapshot(self, warning: str) -> MenuSnapshot:
        return MenuSnapshot(groups=group_by_category(self.fallback), source="fallback", warning=warning)

    def get_all(self) -> MenuSnapshot:
        if self.repository is None:
            return self._fallback_snapshot(WARNING_NOT_CONFIGURED)
        try:
            items = self.repository.fetch_all()
        except PersistenceError as e:
            logger.warning(f"Menu read failed, serving fallback: {e.detail or e.message}")
            return self._fallback_snapshot(WARNING_UNAVAILABLE)
        return MenuSnapshot(groups=group_by_category(items), source="database")

    def fetch_category(self, category: str) -> Tuple[List[MenuItem], Optional[str]]:
        """Items for one category and the source ("database" or "fallback") they came from.

        Unknown categories are answered without reading anything, so the source is None.
        """
        if category not in CATEGORIES:
            return [], None
        if self.repository is not None:
            try:
                return self.repository.fetch_by_category(category), "database"
            except PersistenceError as e:
                logger.warning(f"Menu read for {category!r} failed, serving fallback: {e.detail or e.message}")
        return [item for item in self.fallback if item.categoria == category], "fallback"

    def get_by_category(self, category: str) -> List[MenuItem]:
        return self.fetch_category(category)[0]
