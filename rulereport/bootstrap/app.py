"""
bootstrap/app.py - Logging setup and factory construction

The library itself installs no log handlers. Applications call setup_logging()
once, then create_factory() to get a ReportFactory wired from configuration.
"""

from __future__ import annotations
from typing import Optional
import json
import logging
import sys

from ..registry.providers import Provider
from ..reporting.factory import ReportFactory
from .config import LoggingConfig, RuleReportConfig, get_config

logger = logging.getLogger(__name__)


class JSONFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps({
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        })


def setup_logging(config: Optional[LoggingConfig] = None) -> None:
    """
    Configure logging for the rulereport loggers.

    Args:
        config: Logging settings (defaults to the loaded configuration)
    """
    config = config or get_config().logging
    log_level = getattr(logging, config.level.upper(), logging.INFO)

    if config.json_logs:
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(config.format)

    package_logger = logging.getLogger("rulereport")
    package_logger.setLevel(log_level)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)
    package_logger.addHandler(console_handler)

    # File handler
    if config.log_file:
        file_handler = logging.FileHandler(config.log_file)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(log_level)
        package_logger.addHandler(file_handler)


def create_factory(config: Optional[RuleReportConfig] = None) -> ReportFactory:
    """
    Build a ReportFactory from configuration.

    Provider modules are imported and appended in the configured order.
    Modules that cannot be imported are skipped with a warning.
    """
    config = config or get_config()
    factory = ReportFactory(
        default_result_properties=config.factory.default_result_properties,
    )

    for module_path in config.factory.provider_modules:
        try:
            provider = Provider.from_module(module_path)
        except ImportError as e:
            logger.warning(f"Provider module not available: {module_path}: {e}")
            continue
        factory.append_provider(provider)

    logger.info(f"Report factory ready with {len(factory.providers)} providers")
    return factory
