"""Application configuration using pydantic-settings."""

import functools
from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from study_recommender.models.technique import StudyTechnique, TechniqueCatalog

logger = structlog.get_logger()

BUNDLED_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "techniques.yaml"


def _find_project_root() -> Path:
    """Find project root by locating pyproject.toml."""
    current = Path(__file__).resolve()
    for parent in [current] + list(current.parents):
        if (parent / "pyproject.toml").exists():
            return parent
    return Path(__file__).resolve().parent.parent.parent


class YamlSettingsSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from settings.yaml."""

    def get_field_value(self, field_name: str) -> tuple[Any, str, bool]:
        """Not used - we implement __call__ instead."""
        return None, "", False

    def __call__(self) -> dict[str, Any]:
        """Load settings from YAML file."""
        yaml_path = _find_project_root() / "config" / "settings.yaml"
        if not yaml_path.exists():
            return {}

        with open(yaml_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        # Flatten nested structure to match Settings field names
        flattened = {}
        if "server" in data:
            flattened["host"] = data["server"].get("host")
            flattened["port"] = data["server"].get("port")
        if "engine" in data:
            flattened["default_limit"] = data["engine"].get("default_limit")
            flattened["max_limit"] = data["engine"].get("max_limit")
        if "catalog" in data:
            flattened["catalog_path"] = data["catalog"].get("path")

        return {k: v for k, v in flattened.items() if v is not None}


class Settings(BaseSettings):
    """Application settings loaded from environment and config files."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # Engine
    default_limit: int = Field(default=5, ge=1)
    max_limit: int = Field(default=10, ge=1)

    # Catalog (None selects the bundled catalog)
    catalog_path: Path | None = Field(default=None)

    def clamp_limit(self, limit: int | None) -> int:
        """Resolve a requested result count against the configured bounds."""
        if limit is None:
            limit = self.default_limit
        return max(0, min(limit, self.max_limit))

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customise settings sources to include YAML file.

        Priority order (highest to lowest):
        1. init_settings (arguments passed to Settings())
        2. env_settings (environment variables)
        3. dotenv_settings (.env file)
        4. YamlSettingsSource (settings.yaml)
        5. file_secret_settings
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlSettingsSource(settings_cls),
            file_secret_settings,
        )


@functools.lru_cache
def get_settings() -> Settings:
    """Get application settings singleton."""
    return Settings()


@functools.lru_cache
def load_technique_catalog(path: Path | None = None) -> TechniqueCatalog:
    """Load the study technique catalog from YAML.

    The result is cached per path, so the catalog is read once per process
    and shared by every caller.

    Args:
        path: Catalog file. Defaults to the catalog bundled with the package.

    Returns:
        Frozen catalog in file order.
    """
    catalog_path = Path(path) if path is not None else BUNDLED_CATALOG_PATH
    if not catalog_path.exists():
        raise FileNotFoundError(f"Technique catalog not found: {catalog_path}")
    with open(catalog_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    techniques = [StudyTechnique(**entry) for entry in data.get("techniques", [])]
    catalog = TechniqueCatalog(techniques)
    logger.info("technique_catalog_loaded", path=str(catalog_path), count=len(catalog))
    return catalog
