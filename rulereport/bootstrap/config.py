"""
bootstrap/config.py - Factory and logging configuration

Configuration is loaded from a JSON file, environment variables, or defaults.
Environment variables use the RULEREPORT_ prefix.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from pathlib import Path
import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _parse_properties(raw: Optional[str]) -> Dict[str, Any]:
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"RULEREPORT_DEFAULT_PROPERTIES is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ValueError("RULEREPORT_DEFAULT_PROPERTIES must be a JSON object")
    return data


@dataclass
class FactoryConfig:
    """Report factory configuration."""

    # Applied to every new root outcome, below caller properties
    default_result_properties: Dict[str, Any] = field(default_factory=dict)

    # Dotted module paths scanned for rule and report classes, in search order
    provider_modules: List[str] = field(default_factory=list)

    @classmethod
    def from_env(cls) -> "FactoryConfig":
        modules = os.getenv("RULEREPORT_PROVIDERS", "")
        return cls(
            default_result_properties=_parse_properties(
                os.getenv("RULEREPORT_DEFAULT_PROPERTIES")
            ),
            provider_modules=[m.strip() for m in modules.split(",") if m.strip()],
        )


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    log_file: Optional[str] = None
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        return cls(
            level=os.getenv("RULEREPORT_LOG_LEVEL", "INFO"),
            format=os.getenv("RULEREPORT_LOG_FORMAT", DEFAULT_LOG_FORMAT),
            log_file=os.getenv("RULEREPORT_LOG_FILE"),
            json_logs=os.getenv("RULEREPORT_JSON_LOGS", "false").lower() == "true",
        )


@dataclass
class RuleReportConfig:
    """Root configuration."""

    factory: FactoryConfig = field(default_factory=FactoryConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "RuleReportConfig":
        """Create configuration from environment variables."""
        return cls(
            factory=FactoryConfig.from_env(),
            logging=LoggingConfig.from_env(),
        )

    @classmethod
    def from_file(cls, filepath: str) -> "RuleReportConfig":
        """Load configuration from JSON file."""
        path = Path(filepath)
        if not path.exists():
            logger.warning(f"Config file not found: {filepath}, using defaults")
            return cls.from_env()

        with open(path) as f:
            data = json.load(f)

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "RuleReportConfig":
        """Create config from dictionary, on top of the environment."""
        config = cls.from_env()

        if "factory" in data:
            for key, value in data["factory"].items():
                if hasattr(config.factory, key):
                    setattr(config.factory, key, value)

        if "logging" in data:
            for key, value in data["logging"].items():
                if hasattr(config.logging, key):
                    setattr(config.logging, key, value)

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Serialize config to dictionary."""
        return {
            "factory": {
                "default_result_properties": dict(self.factory.default_result_properties),
                "provider_modules": list(self.factory.provider_modules),
            },
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
                "log_file": self.logging.log_file,
                "json_logs": self.logging.json_logs,
            },
        }


# Global config instance
_config: Optional[RuleReportConfig] = None


def load_config(filepath: Optional[str] = None) -> RuleReportConfig:
    """
    Load configuration from file or environment.

    Args:
        filepath: Optional path to JSON config file

    Returns:
        RuleReportConfig instance
    """
    global _config

    if filepath:
        _config = RuleReportConfig.from_file(filepath)
    elif Path("./rulereport.json").exists():
        logger.info("Loading config from: ./rulereport.json")
        _config = RuleReportConfig.from_file("./rulereport.json")
    else:
        _config = RuleReportConfig.from_env()

    return _config


def get_config() -> RuleReportConfig:
    """Get current configuration, loading if needed."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Forget the loaded configuration."""
    global _config
    _config = None
