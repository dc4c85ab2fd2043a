"""
bootstrap/ - Configuration, logging setup and factory construction.
"""

from .config import (
    RuleReportConfig,
    FactoryConfig,
    LoggingConfig,
    load_config,
    get_config,
    reset_config,
)

from .app import (
    JSONFormatter,
    setup_logging,
    create_factory,
)

__all__ = [
    # Config
    "RuleReportConfig",
    "FactoryConfig",
    "LoggingConfig",
    "load_config",
    "get_config",
    "reset_config",
    # App
    "JSONFormatter",
    "setup_logging",
    "create_factory",
]
