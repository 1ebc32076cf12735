"""
Configuration — Centralized settings management

Config hierarchy (highest to lowest priority):
  1. Environment variables (TRAITDEX_CATALOG, TRAITDEX_FORMAT, TRAITDEX_SYMBOLS)
  2. Project config (.traitdex/config.yaml)
  3. User config (~/.traitdex/config.yaml)
  4. Defaults

Command-line flags (--catalog, --format) override all of these in cli.py.
"""

import os
import sys
import yaml
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional, Dict, Any

from .output import VALID_FORMATS
from .presentation.symbols import get_symbols


VALID_SYMBOLS = ("unicode", "ascii", "auto")

ENV_CATALOG = "TRAITDEX_CATALOG"
ENV_FORMAT = "TRAITDEX_FORMAT"
ENV_SYMBOLS = "TRAITDEX_SYMBOLS"


@dataclass
class DisplayConfig:
    """Display preferences."""
    symbols: str = "auto"  # "unicode" | "ascii" | "auto"
    format: str = "auto"   # "auto" | "list" | "detail" | "json"

    def validate(self) -> Optional[str]:
        """Validate config. Returns error message or None if valid."""
        if self.symbols not in VALID_SYMBOLS:
            return f"Unknown symbols setting '{self.symbols}'. Valid: {', '.join(VALID_SYMBOLS)}"

        if self.format not in VALID_FORMATS:
            return f"Unknown format '{self.format}'. Valid: {', '.join(VALID_FORMATS)}"
        return None


@dataclass
class CatalogConfig:
    """Catalog source. Empty path = catalog bundled with the package."""
    path: Optional[str] = None

    def validate(self) -> Optional[str]:
        if self.path:
            suffix = Path(self.path).suffix.lower()
            if suffix not in (".json", ".yaml", ".yml"):
                return f"Unsupported catalog file type '{suffix}'. Valid: .json, .yaml, .yml"
        return None


@dataclass
class Config:
    """Application configuration."""
    display: DisplayConfig = field(default_factory=DisplayConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "display": {
                "symbols": self.display.symbols,
                "format": self.display.format
            },
            "catalog": {
                "path": self.catalog.path
            }
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """Create from dictionary."""
        display_data = data.get("display") or {}
        catalog_data = data.get("catalog") or {}

        return cls(
            display=DisplayConfig(
                symbols=display_data.get("symbols", "auto"),
                format=display_data.get("format", "auto")
            ),
            catalog=CatalogConfig(
                path=catalog_data.get("path") or None
            )
        )


class ConfigManager:
    """
    Manages configuration loading and persistence.

    Hierarchy:
      1. Environment
      2. Project config (.traitdex/config.yaml)
      3. User config (~/.traitdex/config.yaml)
      4. Defaults
    """

    CONFIG_DIR = ".traitdex"
    CONFIG_FILE = "config.yaml"

    def __init__(self, project_dir: Optional[Path] = None, user_dir: Optional[Path] = None):
        self.project_dir = Path(project_dir) if project_dir else Path.cwd()
        self.user_dir = Path(user_dir) if user_dir else Path.home() / self.CONFIG_DIR
        self._config: Optional[Config] = None

    @property
    def project_config_path(self) -> Path:
        return self.project_dir / self.CONFIG_DIR / self.CONFIG_FILE

    @property
    def user_config_path(self) -> Path:
        return self.user_dir / self.CONFIG_FILE

    def load(self) -> Config:
        """Load configuration from all sources (cached per manager)."""
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}

        # Layer 1: User config
        config_data = self._merge(config_data, self._read(self.user_config_path))

        # Layer 2: Project config (higher priority)
        config_data = self._merge(config_data, self._read(self.project_config_path))

        # Layer 3: Environment overrides
        if os.environ.get(ENV_CATALOG):
            config_data.setdefault("catalog", {})["path"] = os.environ[ENV_CATALOG]
        if os.environ.get(ENV_FORMAT):
            config_data.setdefault("display", {})["format"] = os.environ[ENV_FORMAT]
        if os.environ.get(ENV_SYMBOLS):
            config_data.setdefault("display", {})["symbols"] = os.environ[ENV_SYMBOLS]

        self._config = Config.from_dict(config_data)
        return self._config

    def _read(self, path: Path) -> Dict[str, Any]:
        """Read one YAML config file; unreadable or malformed files are skipped."""
        if not path.exists():
            return {}
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            print(f"Warning: Ignoring config {path}: {e}", file=sys.stderr)
            return {}
        if not isinstance(data, dict):
            print(f"Warning: Ignoring config {path}: expected a mapping", file=sys.stderr)
            return {}

        sections: Dict[str, Any] = {}
        for key, value in data.items():
            if not isinstance(value, dict):
                print(f"Warning: Ignoring section '{key}' in {path}: expected a mapping", file=sys.stderr)
                continue
            sections[key] = value
        return sections

    def catalog_path(self) -> Optional[Path]:
        """Configured catalog path (relative paths resolve against the project dir)."""
        path = self.load().catalog.path
        if not path:
            return None
        path = Path(path).expanduser()
        if not path.is_absolute():
            path = self.project_dir / path
        return path

    def save_project(self, config: Config):
        """Save configuration to project config file."""
        self._write(self.project_config_path, config)

    def save_user(self, config: Config):
        """Save configuration to user config file."""
        self._write(self.user_config_path, config)

    def _write(self, path: Path, config: Config):
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w') as f:
            yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)
        self._config = config

    def set(self, key: str, value: str, scope: str = "project") -> Optional[str]:
        """
        Set a configuration value.

        Args:
            key: Dot-separated key (e.g., "display.format")
            value: Value to set ("" clears catalog.path)
            scope: "project" or "user"

        Returns:
            Error message or None if successful
        """
        # Rejected values leave the loaded config untouched
        config = Config.from_dict(self.load().to_dict())

        parts = key.split(".")
        if len(parts) != 2:
            return f"Invalid key format: {key}. Use 'section.setting' (e.g., 'display.format')"

        section, setting = parts

        if section == "display":
            if setting == "symbols":
                config.display.symbols = value
            elif setting == "format":
                config.display.format = value
            else:
                return f"Unknown display setting: {setting}. Valid: symbols, format"
            error = config.display.validate()
            if error:
                return error

        elif section == "catalog":
            if setting == "path":
                config.catalog.path = value or None
            else:
                return f"Unknown catalog setting: {setting}. Valid: path"
            error = config.catalog.validate()
            if error:
                return error
        else:
            return f"Unknown section: {section}. Valid: display, catalog"

        if scope == "project":
            self.save_project(config)
        else:
            self.save_user(config)

        return None

    def get(self, key: str) -> Optional[str]:
        """Get a configuration value."""
        config = self.load()

        parts = key.split(".")
        if len(parts) != 2:
            return None

        section, setting = parts

        if section == "display":
            if setting == "symbols":
                return config.display.symbols
            elif setting == "format":
                return config.display.format
        elif section == "catalog":
            if setting == "path":
                return config.catalog.path

        return None

    def _merge(self, base: Dict, override: Dict) -> Dict:
        """Deep merge two dicts, override wins."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge(result[key], value)
            else:
                result[key] = value
        return result

    def display(self) -> str:
        """Format config for display."""
        config = self.load()
        symbols = get_symbols(config.display.symbols)

        catalog = config.catalog.path or "(bundled)"
        project_marker = symbols.check_pass if self.project_config_path.exists() else "-"
        user_marker = symbols.check_pass if self.user_config_path.exists() else "-"

        lines = [
            "Configuration:",
            "",
            "Display:",
            f"  Symbols: {config.display.symbols}",
            f"  Format: {config.display.format}",
            "",
            "Catalog:",
            f"  Path: {catalog}",
            "",
            "Config files:",
            f"  {user_marker} User: {self.user_config_path}",
            f"  {project_marker} Project: {self.project_config_path}",
        ]

        return "\n".join(lines)


def get_config(project_dir: Optional[Path] = None) -> Config:
    """Load configuration for a project."""
    return ConfigManager(project_dir).load()
