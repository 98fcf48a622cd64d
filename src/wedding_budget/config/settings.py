"""
Centralized settings and input bounds for the wedding budget calculator.
"""
import logging
import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional

from ..engine.models import WeddingInput

logger = logging.getLogger(__name__)


def get_project_root() -> Path:
    """Get the project root directory (where pyproject.toml lives)."""
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / 'pyproject.toml').exists():
            return parent
    # Fallback to 4 levels up from this file
    return Path(__file__).resolve().parent.parent.parent.parent


def _env_int(name: str, default: int) -> int:
    """Read an integer env var, keeping the default when it is malformed."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer, using %s", name, raw, default)
        return default


@dataclass
class Settings:
    """Application settings with sensible defaults."""

    # Project paths
    project_root: Path

    # Form defaults
    default_input: WeddingInput = field(default_factory=WeddingInput)

    # Input widget bounds (guest count is advisory, not enforced by the engine)
    min_guests: int = 10
    max_guests: int = 500
    guest_step: int = 5
    min_misc_budget: int = 0
    max_misc_budget: int = 100_000
    misc_budget_step: int = 500

    # Runtime
    log_level: str = "INFO"
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    @classmethod
    def load(cls, project_root: Optional[Path] = None) -> 'Settings':
        """Load settings from the project structure and environment."""
        root = project_root or get_project_root()

        return cls(
            project_root=root,
            log_level=os.getenv('WEDDING_BUDGET_LOG_LEVEL', 'INFO'),
            api_host=os.getenv('WEDDING_BUDGET_API_HOST', '0.0.0.0'),
            api_port=_env_int('WEDDING_BUDGET_API_PORT', 8000),
        )

    def guest_count_hint(self) -> str:
        """Range and step shown beside the guest count field."""
        return (
            f"Typical guest counts run {self.min_guests}-{self.max_guests}, "
            f"in steps of {self.guest_step}"
        )


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings
