# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load configuration from environment variables / .env file and
#   hand typed config objects to the rest of the package.
#
# CLASSES:
# --------
# - AppConfig (dataclass)
#     metadata_dir: str   (default "metadata/")  → where catalogs are saved
#     log_level: str      (default "WARNING")    → CLI logging level;
#                                                   unknown names fall back to WARNING
#
# FUNCTIONS:
# ----------
# - load_config() -> AppConfig
#     Load .env using python-dotenv and build a fresh AppConfig.
#
# - get_config() -> AppConfig
#     Same, but returns one singleton on repeated calls.
#
# ENVIRONMENT:
# ------------
#   MATCLASS_METADATA_DIR, MATCLASS_LOG_LEVEL
#
# ==============================================

import logging
import os
from dataclasses import dataclass
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv


@dataclass
class AppConfig:
    """Main application configuration."""
    metadata_dir: str = "metadata/"
    log_level: str = "WARNING"


# Singleton instance
_config_instance: Optional[AppConfig] = None


def load_config() -> AppConfig:
    """
    Build configuration from environment variables / .env file.

    Variables already set in the environment win over the .env file.

    Returns:
        AppConfig: Application configuration
    """
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    log_level = os.getenv("MATCLASS_LOG_LEVEL", "WARNING").strip().upper()
    # getLevelName() returns an int only for registered level names
    if not isinstance(logging.getLevelName(log_level), int):
        log_level = "WARNING"

    return AppConfig(
        metadata_dir=os.getenv("MATCLASS_METADATA_DIR", "metadata/"),
        log_level=log_level,
    )


def get_config() -> AppConfig:
    """Return the process-wide configuration, loading it on first use."""
    global _config_instance

    if _config_instance is None:
        _config_instance = load_config()

    return _config_instance
