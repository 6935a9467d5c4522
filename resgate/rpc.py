"""Decoding and dispatch of RES client requests, and encoding of responses and events."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Protocol

from resgate.errors import (
    ERR_INVALID_PARAMS,
    ERR_INVALID_REQUEST,
    ERR_NO_SUBSCRIPTION,
    ResError,
    internal_error,
    res_error,
)

ResourcesCallback = Callable[[Optional["Resources"], Optional[BaseException]], None]
ResultCallback = Callable[[Any, Optional[BaseException]], None]

_HTML_ESCAPES = (
    ("<", "\\u003c"),
    (">", "\\u003e"),
    ("&", "\\u0026"),
    ("\u2028", "\\u2028"),
    ("\u2029", "\\u2029"),
)

_FORBIDDEN_RID_CHARS = frozenset("?*>")


class Requester(Protocol):
    """What a client connection offers to perform RES requests."""

    def reply(self, data: bytes) -> None:
        """Send encoded data to the client."""

    def get_resource(self, rid: str, callback: ResourcesCallback) -> None:
        """Fetch a resource without subscribing."""

    def subscribe_resource(self, rid: str, callback: ResourcesCallback) -> None:
        """Subscribe to a resource."""

    def unsubscribe_resource(self, rid: str, count: int, callback: Callable[[bool], None]) -> None:
        """Remove count direct subscriptions; callback gets whether it succeeded."""

    def call_resource(self, rid: str, action: str, params: Any, callback: ResultCallback) -> None:
        """Call a method on a resource."""

    def auth_resource(self, rid: str, action: str, params: Any, callback: ResultCallback) -> None:
        """Call an auth method on a resource."""

    def new_resource(self, rid: str, params: Any, callback: ResultCallback) -> None:
        """Create a new resource."""

    def set_version(self, protocol: str) -> str:
        """Set the client protocol version and return the server's; raise on failure."""

    def protocol_version(self) -> int:
        """Return the client protocol version as an integer."""


@dataclass
class Resources:
    """Resources to send to a client, keyed by resource ID."""

    models: dict[str, Any] = field(default_factory=dict)
    collections: dict[str, Any] = field(default_factory=dict)
    errors: dict[str, ResError] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form, leaving out empty groups."""
        out: dict[str, Any] = {}
        if self.models:
            out["models"] = self.models
        if self.collections:
            out["collections"] = self.collections
        if self.errors:
            out["errors"] = {rid: err.to_dict() for rid, err in self.errors.items()}
        return out


def _default(obj: Any) -> Any:
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _encode(obj: Any) -> bytes:
    text = json.dumps(obj, default=_default, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    for char, escaped in _HTML_ESCAPES:
        text = text.replace(char, escaped)
    return text.encode("utf-8")


def _is_rid_char(char: str) -> bool:
    return "!" <= char <= "~" and char not in _FORBIDDEN_RID_CHARS


def is_valid_rid_part(part: str) -> bool:
    """Report whether part is a non-empty resource ID part without separators or wildcards."""
    return bool(part) and all(_is_rid_char(c) and c != "." for c in part)


def is_valid_rid(rid: str, allow_query: bool) -> bool:
    """Report whether rid is a valid resource ID, optionally followed by a query."""
    name, sep, _ = rid.partition("?")
    if sep and not allow_query:
        return False
    return all(is_valid_rid_part(part) for part in name.split("."))


@dataclass
class Request:
    """A decoded RES client request; params is None when absent or null."""

    method: str
    id: int
    params: Any = None

    def success_response(self, result: Any) -> bytes:
        """Encode a successful response holding result; a None result is left out."""
        out: dict[str, Any] = {}
        if result is not None:
            out["result"] = result
        out["id"] = self.id
        return _encode(out)

    def error_response(self, err: BaseException) -> bytes:
        """Encode an error response; errors other than ResError become internal errors."""
        rerr = res_error(err)
        try:
            return _encode({"error": rerr, "id": self.id})
        except (TypeError, ValueError) as encode_err:
            return self.error_response(internal_error(encode_err))


def new_event(rid: str, event: str, data: Any) -> bytes:
    """Encode an event on a resource to be sent to the client."""
    out: dict[str, Any] = {"event": f"{rid}.{event}"}
    if data is not None:
        out["data"] = data
    return _encode(out)


def _decode_request(data: bytes | str) -> Request:
    raw = json.loads(data)
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError("request must be a JSON object")
    method = raw.get("method")
    if method is None:
        method = ""
    elif not isinstance(method, str):
        raise ValueError("request method must be a string")
    rid = raw.get("id")
    if rid is None:
        raise ValueError("Request is missing id property")
    if isinstance(rid, bool) or not isinstance(rid, int) or rid < 0:
        raise ValueError("request id must be a non-negative integer")
    return Request(method=method, id=rid, params=raw.get("params"))


def _version_protocol(params: Any) -> str:
    if params is None:
        return ""
    if not isinstance(params, dict):
        raise ERR_INVALID_PARAMS
    protocol = params.get("protocol")
    if protocol is None:
        return ""
    if not isinstance(protocol, str):
        raise ERR_INVALID_PARAMS
    return protocol


def _unsubscribe_count(params: Any) -> int:
    if params is None:
        return 1
    if not isinstance(params, dict):
        raise ERR_INVALID_PARAMS
    count = params.get("count")
    if count is None:
        return 1
    if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
        raise ERR_INVALID_PARAMS
    return count


def handle_request(data: bytes | str, requester: Requester) -> None:
    """Decode a client request and dispatch it to the requester.

    Raises ValueError if the data is not a request with an id. Any other
    problem is replied to the client as an error response.
    """
    req = _decode_request(data)

    def reply_result(result: Any, err: Optional[BaseException]) -> None:
        if err is not None:
            requester.reply(req.error_response(err))
        else:
            requester.reply(req.success_response(result))

    action, sep, rid = req.method.partition(".")
    if not sep:
        if req.method != "version":
            requester.reply(req.error_response(ERR_INVALID_REQUEST))
            return
        try:
            protocol = _version_protocol(req.params)
        except ResError as err:
            requester.reply(req.error_response(err))
            return
        try:
            version = requester.set_version(protocol)
        except Exception as err:  # reported to the client
            requester.reply(req.error_response(err))
            return
        requester.reply(req.success_response({"protocol": version}))
        return

    method = ""
    if action in ("call", "auth"):
        rid, sep, method = rid.rpartition(".")
        if not sep or not is_valid_rid_part(method):
            requester.reply(req.error_response(ERR_INVALID_REQUEST))
            return

    if not is_valid_rid(rid, True):
        requester.reply(req.error_response(ERR_INVALID_REQUEST))
        return

    if action == "get":
        requester.get_resource(rid, reply_result)
    elif action == "subscribe":
        requester.subscribe_resource(rid, reply_result)
    elif action == "unsubscribe":
        try:
            count = _unsubscribe_count(req.params)
        except ResError as err:
            requester.reply(req.error_response(err))
            return

        def reply_unsubscribe(ok: bool) -> None:
            if ok:
                requester.reply(req.success_response(None))
            else:
                requester.reply(req.error_response(ERR_NO_SUBSCRIPTION))

        requester.unsubscribe_resource(rid, count, reply_unsubscribe)
    elif action == "call":
        requester.call_resource(rid, method, req.params, reply_result)
    elif action == "auth":
        requester.auth_resource(rid, method, req.params, reply_result)
    elif action == "new":
        requester.new_resource(rid, req.params, reply_result)
    else:
        requester.reply(req.error_response(ERR_INVALID_REQUEST))