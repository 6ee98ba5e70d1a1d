"""
config.py - Configuration model for Showreel
"""

from pathlib import Path
from typing import Optional, Tuple
from pydantic import BaseModel, Field, field_validator
from rich.console import Console
import sys

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib

console = Console(stderr=True)

DEFAULT_CONFIG_DIR = Path("~/.config/showreel")
DEFAULT_CONFIG_NAME = "config.toml"


class CatalogConfig(BaseModel):
    url: str = Field(
        default="http://127.0.0.1:8080/api",
        description="Base URL of the catalog JSON API (shows and episode torrents)"
    )
    api_key: str = ""
    timeout: int = Field(default=20, description="Total seconds allowed per catalog request")
    max_retries: int = Field(default=3, ge=1)


class CollectionConfig(BaseModel):
    path: Path = DEFAULT_CONFIG_DIR / "collection.json"

    def resolved_path(self) -> Path:
        return self.path.expanduser()


class PlayerConfig(BaseModel):
    """How the external downloader/player is spawned."""

    command: str = "webtorrent"
    output_dir: str = Field(
        default="",
        description="Download directory handed to webtorrent (empty = system temp dir)"
    )
    port_range: Tuple[int, int] = (8000, 8999)

    @field_validator("port_range")
    @classmethod
    def _ordered_ports(cls, value: Tuple[int, int]) -> Tuple[int, int]:
        low, high = value
        if low > high:
            raise ValueError("port_range must be [low, high]")
        return value


class LoggingConfig(BaseModel):
    debug: bool = False
    log_file: str = ""


class ShowreelConfig(BaseModel):
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    collection: CollectionConfig = Field(default_factory=CollectionConfig)
    player: PlayerConfig = Field(default_factory=PlayerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    config_path: Optional[Path] = None


def resolve_config_path(args_config: Optional[str]) -> Path:
    """Pick the config file: explicit path/dir, then ./config.toml, then the user config dir."""
    if args_config:
        p = Path(args_config).expanduser()
        if p.is_dir():
            p = p / DEFAULT_CONFIG_NAME
        return p

    cwd_candidate = Path.cwd() / DEFAULT_CONFIG_NAME
    if cwd_candidate.exists():
        return cwd_candidate
    return (DEFAULT_CONFIG_DIR / DEFAULT_CONFIG_NAME).expanduser()


def load_config(config_path: Path) -> ShowreelConfig:
    """Load configuration from TOML file, falling back to defaults when it is absent"""

    if not config_path.exists():
        return ShowreelConfig()

    try:
        with open(config_path, "rb") as f:
            config_data = tomllib.load(f)

        return ShowreelConfig(
            catalog=CatalogConfig(**config_data.get("catalog", {})),
            collection=CollectionConfig(**config_data.get("collection", {})),
            player=PlayerConfig(**config_data.get("player", {})),
            logging=LoggingConfig(**config_data.get("logging", {})),
            config_path=config_path
        )

    except Exception as e:
        console.print(f"[red][ERROR][/red] Error loading configuration {config_path}: {e}")
        sys.exit(1)
