"""Central configuration and environment bootstrap for the application.

Responsibilities:
- bootstrap environment from payroll_desk/.env (python-dotenv)
- expose get_runtime_config() built from environment variables
- provide small logging configuration helper
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Tuple

from dotenv import load_dotenv

_logger = logging.getLogger(__name__)

DEFAULT_APP_NAME = "Payroll Desk"
DEFAULT_ORG = "PayrollDesk"
DEFAULT_WINDOW_TITLE = "Payroll System"
DEFAULT_WINDOW_SIZE = (600, 500)
DEFAULT_LOG_LEVEL = "INFO"

_env_loaded = False


def bootstrap_env(app_root: Optional[str] = None) -> None:
    """Load .env file located in payroll_desk/ if present and configure basic logging.

    This function is safe to call multiple times.
    """
    global _env_loaded

    # Configure short, timestamped logging if not already configured
    configure_logging()
    if _env_loaded:
        return

    if app_root is None:
        # package path (this file lives in payroll_desk/config)
        app_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

    env_path = os.path.join(app_root, ".env")
    if os.path.exists(env_path):
        load_dotenv(env_path, override=False)
        _logger.info(f"Chargé .env depuis: {env_path}")
    else:
        _logger.debug("Aucun fichier .env trouvé (valeurs par défaut utilisées)")
    _env_loaded = True


def _parse_log_level(value: Optional[str]) -> int:
    if not value:
        return logging.INFO
    level = logging.getLevelName(value.strip().upper())
    if isinstance(level, int):
        return level
    _logger.warning(f"PAYROLL_LOG_LEVEL invalide: {value!r}, INFO utilisé")
    return logging.INFO


def _parse_window_size(value: Optional[str]) -> Tuple[int, int]:
    """Parse "LARGEURxHAUTEUR" (ex: "600x500")."""
    if not value:
        return DEFAULT_WINDOW_SIZE
    try:
        w, h = value.lower().replace(" ", "").split("x", 1)
        width, height = int(w), int(h)
        if width <= 0 or height <= 0:
            raise ValueError("dimensions nulles ou négatives")
        return width, height
    except ValueError:
        _logger.warning(
            f"PAYROLL_WINDOW_SIZE invalide: {value!r}, "
            f"{DEFAULT_WINDOW_SIZE[0]}x{DEFAULT_WINDOW_SIZE[1]} utilisé"
        )
        return DEFAULT_WINDOW_SIZE


def get_runtime_config() -> dict:
    """Return a runtime configuration dictionary.

    Keys:
      - app_name, org_name, env
      - window_title, window_width, window_height
      - log_level: int
    """
    width, height = _parse_window_size(os.getenv("PAYROLL_WINDOW_SIZE"))
    return {
        "app_name": os.getenv("PAYROLL_APP_NAME", DEFAULT_APP_NAME),
        "org_name": os.getenv("PAYROLL_ORG", DEFAULT_ORG),
        "env": os.getenv("APP_ENV", "production"),
        "window_title": os.getenv("PAYROLL_WINDOW_TITLE", DEFAULT_WINDOW_TITLE),
        "window_width": width,
        "window_height": height,
        "log_level": _parse_log_level(os.getenv("PAYROLL_LOG_LEVEL", DEFAULT_LOG_LEVEL)),
    }


def configure_logging(level: Optional[int] = None) -> None:
    """Basic logging configuration used by the application.

    Sets a short timestamped format if no handlers are configured yet.
    """
    if logging.getLogger().handlers:
        # Assume logging already configured
        return
    if level is None:
        level = _parse_log_level(os.getenv("PAYROLL_LOG_LEVEL", DEFAULT_LOG_LEVEL))
    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    logging.basicConfig(level=level, format=fmt, datefmt="%Y-%m-%d %H:%M:%S")
    _logger.debug("Logging initialisé")


__all__ = [
    "bootstrap_env",
    "configure_logging",
    "get_runtime_config",
    "DEFAULT_WINDOW_TITLE",
    "DEFAULT_WINDOW_SIZE",
]
