"""ロギングモジュール."""

from .setup import LOG_LEVELS, setup_logging


__all__ = ["LOG_LEVELS", "setup_logging"]
