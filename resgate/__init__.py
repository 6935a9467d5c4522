"""Building blocks for a RES protocol gateway: errors, patterns, access, throttling, diffs and request dispatch."""

__version__ = "0.1.0"
__all__ = ["access", "deprecation", "diff", "errors", "mq", "pattern", "rpc", "throttle"]