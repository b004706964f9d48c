"""Base exception for ant-cache.

All library errors inherit from AntCacheError and carry an error code and a
details dictionary so callers can log or report them uniformly.
"""

from typing import Any, Dict, Optional


class AntCacheError(Exception):
    """Base exception for all ant-cache errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging and reporting."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }
