"""
Server Configuration

Loads configuration from environment variables and provides defaults.
Supports loading from .env file using python-dotenv.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from advisor.models.config import POLICY_CONTEXTUAL, POLICY_NAMES, ScoringConfig

# Single .env at the project root
root_env = Path(__file__).resolve().parent.parent / ".env"
if root_env.exists():
    load_dotenv(root_env)

BASE_DIR = Path(__file__).resolve().parent.parent


@dataclass
class ServerConfig:
    """Server configuration."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000

    # Catalog JSON (list of offerings with the storefront's camelCase keys)
    catalog_json_path: Path = BASE_DIR / "data" / "offerings.json"
    # Optional JSON merged over the default ScoringConfig
    scoring_config_path: Optional[Path] = None

    default_policy: str = POLICY_CONTEXTUAL
    default_page_size: int = 10

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Load configuration from environment variables."""

        def _path_env(key: str, default: Optional[Path] = None) -> Optional[Path]:
            v = os.getenv(key)
            if not v:
                return default
            p = Path(v)
            return p if p.is_absolute() else (BASE_DIR / p).resolve()

        policy = os.getenv("DEFAULT_POLICY", POLICY_CONTEXTUAL).strip().lower()
        if policy not in POLICY_NAMES:
            policy = POLICY_CONTEXTUAL

        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            catalog_json_path=_path_env("CATALOG_JSON_PATH", BASE_DIR / "data" / "offerings.json"),
            scoring_config_path=_path_env("SCORING_CONFIG_PATH"),
            default_policy=policy,
            default_page_size=int(os.getenv("DEFAULT_PAGE_SIZE", "10")),
        )

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate the configuration.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        if not self.catalog_json_path.exists():
            errors.append(f"Catalog JSON not found: {self.catalog_json_path}")

        if self.scoring_config_path and not self.scoring_config_path.exists():
            errors.append(f"Scoring config not found: {self.scoring_config_path}")

        if self.default_page_size < 1:
            errors.append(f"DEFAULT_PAGE_SIZE must be positive, got {self.default_page_size}")

        return len(errors) == 0, errors

    def load_scoring_config(self) -> ScoringConfig:
        """ScoringConfig from scoring_config_path (merged over defaults), or the defaults."""
        data = {}
        if self.scoring_config_path and self.scoring_config_path.exists():
            with open(self.scoring_config_path) as f:
                data = json.load(f)
        data.setdefault("default_policy", self.default_policy)
        return ScoringConfig.from_dict(data)


# Global config instance
_config: Optional[ServerConfig] = None


def get_config() -> ServerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ServerConfig.from_env()
    return _config


def reload_config() -> ServerConfig:
    """Reload configuration from environment."""
    global _config
    _config = None
    return get_config()
