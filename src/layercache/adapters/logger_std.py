"""Standard logging adapter."""

import logging
import sys
from typing import Any

TRACE = 5
logging.addLevelName(TRACE, "TRACE")


class StdLoggerAdapter:
    """Standard Python logging implementation of LoggerPort."""

    def __init__(self, name: str = "layercache", level: str = "INFO"):
        """Initialize logger."""
        self.logger = logging.getLogger(name)
        self.logger.setLevel(_resolve_level(level))

        if not self.logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def trace(self, message: str, **kwargs: Any) -> None:
        """Log trace message."""
        self._log(TRACE, message, kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log debug message."""
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log info message."""
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log warning message."""
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log error message."""
        self._log(logging.ERROR, message, kwargs)

    def log_operation(
        self,
        op: str,
        counts: dict[str, int],
        durations: dict[str, float],
        **kwargs: Any,
    ) -> None:
        """Log structured operation summary."""
        self.info(
            f"Operation completed: {op}",
            counts=counts,
            durations={k: round(v, 3) for k, v in durations.items()},
            **kwargs,
        )

    def _log(self, level: int, message: str, kwargs: dict[str, Any]) -> None:
        if not self.logger.isEnabledFor(level):
            return
        if kwargs:
            context = " ".join(f"{k}={v}" for k, v in kwargs.items())
            message = f"{message} {context}"
        self.logger.log(level, message)


def _resolve_level(level: str) -> int:
    name = level.upper()
    if name == "TRACE":
        return TRACE
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved
