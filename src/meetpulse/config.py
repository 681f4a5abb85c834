"""
Configuration loader for MeetPulse.
Loads configuration from YAML files and environment variables.
"""

from typing import Dict, Any, Optional
from pathlib import Path
import yaml
import os
from pydantic import BaseModel, ConfigDict
import logging

logger = logging.getLogger(__name__)


class MeetPulseConfig(BaseModel):
    """Main MeetPulse configuration."""

    model_config = ConfigDict(extra="allow")

    # Environment
    environment: str = "development"
    debug: bool = True

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_prefix: str = "/api"
    frontend_url: str = "http://localhost:5173"

    # Store
    database_type: str = "supabase"  # or "sqlite"
    sqlite_path: str = "meetpulse.db"
    supabase_url: str = ""
    supabase_key: str = ""

    # AI insights
    openai_model: str = "gpt-4o-mini"

    # Logging
    log_level: str = "INFO"


class ConfigLoader:
    """Load and manage MeetPulse configuration."""

    def __init__(self, config_dir: str = "config"):
        """
        Initialize config loader.

        Args:
            config_dir: Directory containing config files
        """
        self.config_dir = Path(config_dir)
        self.config: Optional[MeetPulseConfig] = None
        self.load()

    def load(self) -> MeetPulseConfig:
        """Load configuration from YAML and environment variables."""

        env = os.getenv("MEETPULSE_ENV", "development")
        config_file = self.config_dir / f"{env}.yaml"

        default_config = self._load_yaml(self.config_dir / "default.yaml")

        if config_file.exists():
            default_config.update(self._load_yaml(config_file))
        else:
            logger.warning(f"Config file not found: {config_file}, using defaults")

        default_config.update(self._load_from_env())
        default_config.setdefault("environment", env)

        self.config = MeetPulseConfig(**default_config)

        logger.info(f"Configuration loaded (environment: {env}, store: {self.config.database_type})")

        return self.config

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        """Load YAML config file."""
        if not path.exists():
            return {}

        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f)
                return data or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load YAML config {path}: {e}")
            return {}

    def _load_from_env(self) -> Dict[str, Any]:
        """Load configuration from environment variables."""
        config = {}

        if port := os.getenv("MEETPULSE_API_PORT") or os.getenv("PORT"):
            config["api_port"] = int(port)
        if frontend_url := os.getenv("FRONTEND_URL"):
            config["frontend_url"] = frontend_url
        if log_level := os.getenv("MEETPULSE_LOG_LEVEL"):
            config["log_level"] = log_level

        if database_type := os.getenv("DATABASE_TYPE"):
            config["database_type"] = database_type
        if sqlite_path := os.getenv("SQLITE_DB_PATH"):
            config["sqlite_path"] = sqlite_path
        if supabase_url := os.getenv("SUPABASE_URL"):
            config["supabase_url"] = supabase_url
        if supabase_key := os.getenv("SUPABASE_KEY"):
            config["supabase_key"] = supabase_key

        if openai_model := os.getenv("OPENAI_MODEL"):
            config["openai_model"] = openai_model

        return config

    def get(self) -> MeetPulseConfig:
        """Get current configuration."""
        if not self.config:
            self.load()
        return self.config


# Global config instance
_global_config_loader: Optional[ConfigLoader] = None


def get_config() -> MeetPulseConfig:
    """Get the global MeetPulse configuration."""
    global _global_config_loader
    if _global_config_loader is None:
        _global_config_loader = ConfigLoader()
    return _global_config_loader.get()
