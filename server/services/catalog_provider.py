"""
Catalog Provider abstraction.

Supplies the offering catalog to the advisor engine.
Implementations: JSON file (CATALOG_JSON_PATH), in-memory list (tests, admin reloads).
"""

import json
from pathlib import Path
from typing import Dict, List, Optional, Protocol, Union


class CatalogProvider(Protocol):
    """Protocol for catalog access."""

    def get_offerings(
        self,
        limit: Optional[int] = None,
        offset: int = 0,
        active_only: bool = False,
    ) -> List[Dict]:
        """
        Return catalog rows, optionally paginated.
        limit=None means return all.
        """
        ...

    def get_offering(self, offering_id: str) -> Optional[Dict]:
        """Get one offering row by id."""
        ...

    def reload(self) -> int:
        """Re-read the backing source; return the number of rows."""
        ...


def _page(rows: List[Dict], limit: Optional[int], offset: int, active_only: bool) -> List[Dict]:
    if active_only:
        rows = [r for r in rows if r.get("ativo", r.get("active", True)) is not False]
    if offset:
        rows = rows[offset:]
    if limit is not None:
        rows = rows[:limit]
    return rows


class InMemoryCatalogProvider:
    """
    Catalog provider backed by a list of dicts.
    Used by tests and when the catalog is pushed rather than read from disk.
    """

    def __init__(self, offerings: Optional[List[Dict]] = None):
        self._offerings: List[Dict] = [dict(o) for o in offerings or []]
        self._by_id = {str(o.get("id")): o for o in self._offerings if o.get("id") is not None}

    def get_offerings(
        self,
        limit: Optional[int] = None,
        offset: int = 0,
        active_only: bool = False,
    ) -> List[Dict]:
        return _page(list(self._offerings), limit, offset, active_only)

    def get_offering(self, offering_id: str) -> Optional[Dict]:
        return self._by_id.get(offering_id)

    def reload(self) -> int:
        return len(self._offerings)


class JsonCatalogProvider:
    """
    Catalog provider backed by a JSON file holding a list of offerings.
    Path comes from CATALOG_JSON_PATH (default data/offerings.json).
    """

    def __init__(self, catalog_path: Union[Path, str]):
        self._catalog_path = Path(catalog_path)
        self._offerings: List[Dict] = []
        self._by_id: Dict[str, Dict] = {}
        self.reload()

    @property
    def path(self) -> Path:
        return self._catalog_path

    def reload(self) -> int:
        if not self._catalog_path.exists():
            raise FileNotFoundError(f"Catalog JSON not found: {self._catalog_path}")
        with open(self._catalog_path, encoding="utf-8") as f:
            data = json.load(f)
        # Accept either a bare list or {"offerings": [...]}
        if isinstance(data, dict):
            data = data.get("offerings") or data.get("planos") or []
        if not isinstance(data, list):
            raise TypeError(f"Catalog JSON must hold a list of offerings: {self._catalog_path}")
        self._offerings = data
        self._by_id = {str(o.get("id")): o for o in data if o.get("id") is not None}
        return len(self._offerings)

    def get_offerings(
        self,
        limit: Optional[int] = None,
        offset: int = 0,
        active_only: bool = False,
    ) -> List[Dict]:
        return _page(list(self._offerings), limit, offset, active_only)

    def get_offering(self, offering_id: str) -> Optional[Dict]:
        return self._by_id.get(offering_id)
