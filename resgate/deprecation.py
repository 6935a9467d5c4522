"""Log deprecated protocol features once per service and feature."""

from __future__ import annotations

import enum
import logging
import threading
from typing import Callable, Optional

_log = logging.getLogger(__name__)


class Feature(enum.Flag):
    """Deprecated protocol features."""

    MODEL_CHANGE_EVENT = 1
    NEW_CALL_REQUEST = 2


_MESSAGES = {
    Feature.MODEL_CHANGE_EVENT: (
        "model change event v1.0 detected\n"
        "    Legacy support will be removed after 2020-03-31."
    ),
    Feature.NEW_CALL_REQUEST: (
        "new call request v1.1 detected\n"
        "    Legacy support will be removed after 2021-11-30."
    ),
}


class DeprecationTracker:
    """Report each deprecated feature once for every service name."""

    def __init__(self, error: Optional[Callable[[str], None]] = None) -> None:
        self._error = error if error is not None else _log.error
        self._lock = threading.Lock()
        self._logged: dict[str, Feature] = {}

    def report(self, rid: str, feature: Feature) -> bool:
        """Log a deprecation warning for the service owning rid; return True if logged."""
        name = rid.split(".", 1)[0]
        with self._lock:
            seen = self._logged.get(name, Feature(0))
            if seen & feature:
                return False
            message = _MESSAGES.get(feature)
            if message is None:
                self._error(f"Invalid deprecation feature type: {feature.value}")
                return False
            self._logged[name] = seen | feature
            self._error(f"Deprecation warning for service [{name}] - {message}")
            return True