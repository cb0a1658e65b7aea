"""Settings loaded from environment variables.

All variables use the QUICK_TASKS_ prefix. Missing or malformed values
fall back to the defaults below.
"""
import logging
import os
import sys
from dataclasses import dataclass
from typing import Optional

ENV_PREFIX = "QUICK_TASKS"


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_log_level(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default


def _default_qt_platform() -> Optional[str]:
    # Linux 下默认使用 xcb
    return "xcb" if sys.platform == "linux" else None


@dataclass(frozen=True)
class Settings:
    log_level: int = logging.INFO
    qt_platform: Optional[str] = None
    window_width: int = 420
    window_height: int = 720

    def apply_qt_platform(self):
        """Export QT_QPA_PLATFORM unless the environment already chose one"""
        if self.qt_platform and "QT_QPA_PLATFORM" not in os.environ:
            os.environ["QT_QPA_PLATFORM"] = self.qt_platform


def load_settings() -> Settings:
    platform = os.getenv(_k("QT_PLATFORM"))
    if platform is None or platform.strip() == "":
        platform = _default_qt_platform()
    return Settings(
        log_level=_env_log_level(_k("LOG_LEVEL"), logging.INFO),
        qt_platform=platform,
        window_width=_env_int(_k("WINDOW_WIDTH"), 420),
        window_height=_env_int(_k("WINDOW_HEIGHT"), 720),
    )
