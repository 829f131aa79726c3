"""Application state: catalog provider, session context store and scoring config."""

from typing import Dict, List, Optional

from advisor.models.config import ScoringConfig
from advisor.models.offering import Offering, ensure_offerings

from .config import ServerConfig, get_config
from .services import CatalogProvider, ContextStore, JsonCatalogProvider


class AppState:
    """Global application state."""

    def __init__(
        self,
        config: ServerConfig,
        catalog: Optional[CatalogProvider] = None,
        scoring_config: Optional[ScoringConfig] = None,
    ):
        self.config = config
        self.scoring_config = scoring_config or config.load_scoring_config()
        self.sessions = ContextStore()

        self.catalog: Optional[CatalogProvider] = catalog
        self.catalog_error: Optional[str] = None
        if self.catalog is None:
            try:
                self.catalog = JsonCatalogProvider(config.catalog_json_path)
                print(f"[startup] Catalog provider: JSON ({config.catalog_json_path})")
            except (FileNotFoundError, TypeError, ValueError) as e:
                self.catalog_error = str(e)
                print(f"[startup] WARNING: Failed to load catalog: {e}")

    @property
    def is_loaded(self) -> bool:
        return self.catalog is not None

    def offering_rows(self) -> List[Dict]:
        return self.catalog.get_offerings() if self.catalog else []

    def offerings(self) -> List[Offering]:
        """The full catalog as Offering models (inactive rows included; the filter drops them)."""
        return ensure_offerings(self.offering_rows())


_state: Optional[AppState] = None


def get_state() -> AppState:
    global _state
    if _state is None:
        _state = AppState(get_config())
    return _state


def set_state(state: Optional[AppState]) -> None:
    """Replace (or with None, reset) the global state. Used by tests."""
    global _state
    _state = state
