"""Structured logging for indentation tree operations.

Records carry the emitting component and, when one is configured, the
correlation ID of the tree that produced them, so a chain of mutations
can be followed through a log.
"""

import logging
from typing import Any, Dict, Optional


class CorrelationLogger:
    """Thin wrapper over ``logging.Logger`` that stamps tree context on records.

    Only the levels the library emits at are exposed: DEBUG for splices and
    validation findings, WARNING for strict-mode rejections.
    """

    def __init__(
        self,
        name: str,
        correlation_id: Optional[str] = None,
        component: Optional[str] = None
    ) -> None:
        self.logger = logging.getLogger(name)
        self.correlation_id = correlation_id
        self.component = component or name.rpartition(".")[2]

    def _extra(self, fields: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        # Caller fields win over the stamped context on key clashes
        return {
            "component": self.component,
            "correlation_id": self.correlation_id,
            **(fields or {}),
        }

    def is_debug_enabled(self) -> bool:
        """Return True when DEBUG records would be emitted."""
        return self.logger.isEnabledFor(logging.DEBUG)

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        self.logger.debug(message, extra=self._extra(extra))

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        self.logger.warning(message, extra=self._extra(extra))


def get_logger(
    name: str,
    correlation_id: Optional[str] = None,
    component: Optional[str] = None
) -> CorrelationLogger:
    """Return a CorrelationLogger for module ``name``.

    ``component`` defaults to the last dotted segment of ``name``.
    """
    return CorrelationLogger(name, correlation_id, component)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for command-line use."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(levelname)s %(name)s: %(message)s",
    )
