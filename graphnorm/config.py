# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load configuration from environment variables / .env file.
#   The traversal and normalization functions take explicit
#   arguments and never read this; the CLI and the snapshot
#   store do.
#
# CLASSES:
# --------
# - TraversalConfig (dataclass)
#     circular_placeholder: str  (default "[Circular]")
#     root_key: str              (default "_root")
#
# - OutputConfig (dataclass)
#     snapshot_dir: str          (default "snapshots/")
#     json_indent: int           (default 2)
#
# - AppConfig (dataclass)
#     traversal: TraversalConfig
#     output: OutputConfig
#     log_level: str             (default "WARNING")
#
# FUNCTION:
# ---------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# - reset_config() -> None
#     Drop the singleton so the next get_config() re-reads the environment.
#
# USAGE:
# ------
#   from graphnorm.config import get_config
#   config = get_config()
#   print(config.traversal.circular_placeholder)
#
# ==============================================

import os
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv

from .traversal.walker import CIRCULAR_PLACEHOLDER
from .traversal.reducer import ROOT_KEY


@dataclass
class TraversalConfig:
    """Traversal defaults used by the CLI."""
    circular_placeholder: str = CIRCULAR_PLACEHOLDER
    root_key: str = ROOT_KEY


@dataclass
class OutputConfig:
    """Where and how normalized graphs are written."""
    snapshot_dir: str = "snapshots/"
    json_indent: int = 2


@dataclass
class AppConfig:
    """Main application configuration."""
    traversal: TraversalConfig = field(default_factory=TraversalConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    log_level: str = "WARNING"


# Singleton instance
_config_instance: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    traversal_config = TraversalConfig(
        circular_placeholder=os.getenv("GRAPHNORM_CIRCULAR_PLACEHOLDER", CIRCULAR_PLACEHOLDER),
        root_key=os.getenv("GRAPHNORM_ROOT_KEY", ROOT_KEY)
    )

    output_config = OutputConfig(
        snapshot_dir=os.getenv("GRAPHNORM_SNAPSHOT_DIR", "snapshots/"),
        json_indent=int(os.getenv("GRAPHNORM_JSON_INDENT", "2"))
    )

    _config_instance = AppConfig(
        traversal=traversal_config,
        output=output_config,
        log_level=os.getenv("GRAPHNORM_LOG_LEVEL", "WARNING").upper()
    )

    return _config_instance


def reset_config() -> None:
    """Forget the cached configuration (used by tests)."""
    global _config_instance
    _config_instance = None
