#!/usr/bin/env python3
"""
Configuration settings using Pydantic for environment variable loading
"""

import os
import re
from typing import Optional, Dict, Any

import yaml
from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file if it exists
load_dotenv()

# ${VAR} or $VAR, where $VAR must end at a word boundary
_ENV_REFERENCE = re.compile(r"\$\{(\w+)\}|\$(\w+)\b")


class LoggingSettings(BaseSettings):
    """Logging configuration settings (LOG_LEVEL, LOG_FORMAT, LOG_FILE)"""
    model_config = SettingsConfigDict(env_prefix="LOG_", extra="ignore")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None


class DiscoverySettings(BaseSettings):
    """Group discovery settings (DISCOVERY_* environment variables)"""
    model_config = SettingsConfigDict(env_prefix="DISCOVERY_", extra="ignore")

    worker_id: str = "worker-0"

    # Pods are left out of per-owner groups unless enabled; those groups are
    # costly in large topologies.
    include_pod_members: bool = False

    # Threads used to resolve pod owners; the group fold itself is sequential
    resolve_workers: int = Field(1, ge=1)


class Settings(BaseSettings):
    """Main settings class that includes all sub-settings"""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    environment: str = "development"
    debug: bool = False

    # Component settings
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    discovery: DiscoverySettings = Field(default_factory=DiscoverySettings)

    def get_config_dict(self) -> Dict[str, Any]:
        """Convert settings to the nested dictionary consumed by the discovery worker"""
        return {
            "discovery": {
                "worker_id": self.discovery.worker_id,
                "include_pod_members": self.discovery.include_pod_members,
                "resolve_workers": self.discovery.resolve_workers
            },
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
                "file": self.logging.file
            }
        }

    @classmethod
    def load_from_yaml_with_env_override(cls, yaml_path: str) -> "Settings":
        """Load settings from YAML file and override with environment variables"""
        yaml_config = {}
        if os.path.exists(yaml_path):
            with open(yaml_path, 'r') as f:
                yaml_content = expand_env_references(f.read())
                yaml_config = yaml.safe_load(yaml_content) or {}

        return Settings(
            environment=yaml_config.get("environment", "development"),
            debug=yaml_config.get("debug", False),
            logging=LoggingSettings(**yaml_config.get("logging", {})),
            discovery=DiscoverySettings(**yaml_config.get("discovery", {}))
        )


def expand_env_references(content: str) -> str:
    """Replace ${VAR} and $VAR with environment values; unknown variables are left as written"""
    def replace(match):
        name = match.group(1) or match.group(2)
        return os.environ.get(name, match.group(0))

    return _ENV_REFERENCE.sub(replace, content)


# Global settings instance
settings = Settings()
