"""Access responses from a RES service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from resgate.errors import ERR_ACCESS_DENIED, ResError


@dataclass
class Access:
    """Result of an access request: get permission, allowed call methods, or an error.

    `call` is "*" for all methods, or a comma separated list of method names.
    """

    get: bool = False
    call: str = ""
    error: Optional[ResError] = None

    def can_get(self) -> bool:
        """Return True if get access is granted; raise the denial error otherwise."""
        if self.error is not None:
            raise self.error
        if self.get:
            return True
        raise ERR_ACCESS_DENIED

    def can_call(self, action: str) -> bool:
        """Return True if calling the action is granted; raise the denial error otherwise."""
        if self.error is not None:
            raise self.error
        if self.call == "*":
            return True
        if self.call and action in self.call.split(","):
            return True
        raise ERR_ACCESS_DENIED