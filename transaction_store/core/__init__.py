"""Configuration, logging and the result container."""

from .config import Settings, get_settings
from .result import Result, ResultStateError

__all__ = ["Result", "ResultStateError", "Settings", "get_settings"]
