"""Constants and environment-derived defaults."""

from .config import Config

__all__ = ["Config"]
