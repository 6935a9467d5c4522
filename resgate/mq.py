"""Interfaces of a client to a messaging system."""

from __future__ import annotations

from typing import Callable, Optional, Protocol

from resgate import errors

# Callback receiving a subject, a payload and an error, with either payload or error set.
Response = Callable[[str, Optional[bytes], Optional[BaseException]], None]

# Passed to a Response when a request has no responders.
ERR_NO_RESPONDERS = errors.ERR_NOT_FOUND
# Passed to a Response when a request times out.
ERR_REQUEST_TIMEOUT = errors.ERR_TIMEOUT
# Passed to a Response when the subject exceeds the maximum control line size.
ERR_SUBJECT_TOO_LONG = errors.ERR_SUBJECT_TOO_LONG


class Unsubscriber(Protocol):
    """Something that can cancel a subscription."""

    def unsubscribe(self) -> None:
        """Cancel the subscription; raise on failure."""


class Client(Protocol):
    """A client connection to a messaging system."""

    def connect(self) -> None:
        """Establish the connection; raise on failure."""

    def send_request(self, subject: str, payload: bytes, callback: Response) -> None:
        """Send an asynchronous request; callback is called once from another thread."""

    def subscribe(self, namespace: str, callback: Response) -> Unsubscriber:
        """Subscribe to all events on a namespace, such as "event." + resource."""

    def close(self) -> None:
        """Close the connection."""

    def is_closed(self) -> bool:
        """Report whether the connection has been closed."""

    def set_closed_handler(self, callback: Callable[[Optional[BaseException]], None]) -> None:
        """Set the handler called when the connection closes."""