# resgate

Building blocks for a gateway that speaks the RES protocol. Such a gateway
takes requests from clients and passes them to services over a message queue.
It also keeps clients up to date with models and collections.

The package has no runtime dependencies.

## Modules

- `resgate.errors` defines `ResError`, an exception that carries a `code`, a
  `message` and optional `data`. `to_dict()` gives its JSON form. The module
  also holds the standard `CODE_*` constants and the ready-made `ERR_*` errors.
  - `res_error(err)` returns `err` unchanged if it is a `ResError`. Any other
    error is wrapped as a `system.internalError`.
  - `internal_error(err)` always does that wrapping.
  - `is_error(err, code)` checks whether `err` is a `ResError` with the given
    code.
- `resgate.mq` defines the `Client` and `Unsubscriber` protocols that a
  messaging backend implements. It also defines the errors a backend passes to
  a response callback: `ERR_NO_RESPONDERS`, `ERR_REQUEST_TIMEOUT` and
  `ERR_SUBJECT_TOO_LONG`.
- `resgate.pattern` provides `parse_resource_pattern(pattern)`, which returns a
  `ResourcePattern`. Matching uses NATS-style wildcards: `*` matches a single
  token and a trailing `>` matches the rest of the name.
  - An invalid pattern gives a pattern whose `is_valid()` returns `False`.
  - `match()` on an invalid pattern matches nothing.
- `resgate.throttle` provides `Throttle(limit)`, which runs at most `limit`
  callbacks at a time.
  - `add(callback)` calls the callback right away on the calling thread when a
    slot is free. Otherwise it queues the callback.
  - Each running callback must finish with `done()`, which starts the next
    queued callback on a new thread.
  - Calling `done()` when nothing is running raises `RuntimeError`.
- `resgate.access` provides `Access(get, call, error)`, which evaluates the
  permissions a service returns.
  - `call` is either `"*"` or a comma-separated list of method names.
  - `can_get()` and `can_call(action)` return `True` when access is granted.
  - When access is not granted, they raise the stored `error` if there is one,
    and `ERR_ACCESS_DENIED` otherwise.
- `resgate.deprecation` provides `DeprecationTracker`.
  - `report(rid, feature)` logs a warning for a deprecated `Feature` once per
    service name, which is the first token of `rid`. It returns whether it
    logged.
  - Messages go to the `error` callable passed to the tracker. Without one they
    go to the module logger.
- `resgate.diff` provides `collection_diff(a, b)` and `apply_events(values,
  events)`.
  - `collection_diff(a, b)` returns `CollectionEvent` items that turn collection
    `a` into `b`. All removes come first, in descending index order. The adds
    follow, in ascending index order. The events are based on the longest
    common subsequence.
  - `apply_events(values, events)` replays events on a copy of the values.
    - An index out of bounds raises `IndexError`.
    - An unknown event raises `ValueError`.
- `resgate.rpc` provides `handle_request(data, requester)`, which decodes a
  client request and dispatches it to a `Requester`. It handles `version`,
  `get`, `subscribe`, `unsubscribe`, `call`, `auth` and `new`.
  - Data that is not a JSON request with an id raises `ValueError`.
  - Any other problem is sent to the client as an error reply through
    `requester.reply`.
  - Other helpers in the module:
    - `is_valid_rid(rid, allow_query)` and `is_valid_rid_part(part)` validate
      resource IDs.
    - `Request.success_response` and `Request.error_response` encode replies.
    - `new_event(rid, event, data)` encodes events.
    - `Resources` collects models, collections and errors to send back.

## Examples

Matching resource names against a pattern:

```python
from resgate.pattern import parse_resource_pattern

pattern = parse_resource_pattern("test.*.model")
assert pattern.is_valid()
assert pattern.match("test.foo.model")
assert not pattern.match("test.model")
```

Diffing two collections:

```python
from resgate.diff import apply_events, collection_diff

old = ["a", "b", "c"]
new = ["a", "c", "d"]
events = collection_diff(old, new)
assert apply_events(old, events) == new
```

Checking call access:

```python
from resgate.access import Access
from resgate.errors import ResError

access = Access(get=True, call="foo,new")
assert access.can_call("new")
try:
    access.can_call("bar")
except ResError as err:
    assert err.code == "system.accessDenied"
```

Validating resource IDs:

```python
from resgate.rpc import is_valid_rid

assert is_valid_rid("test.model?foo=bar", True)
assert not is_valid_rid("test..model", True)
```

## What it does not do

This package is not a running gateway. It has no WebSocket or HTTP server and
no resource cache. `resgate.mq` only describes the messaging client
interface; it does not implement one. A `Requester` and an `mq.Client` have to
be supplied by the code that uses the package.

## Running the tests

```
pip install -e ".[test]"
pytest
```