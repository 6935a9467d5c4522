"""Resource patterns using NATS style wildcard matching."""

from __future__ import annotations

from dataclasses import dataclass

_PWC = "*"
_FWC = ">"
_SEP = "."


@dataclass(frozen=True)
class ResourcePattern:
    """A parsed resource pattern; the empty pattern is invalid."""

    pattern: str = ""
    has_wild: bool = False

    def is_valid(self) -> bool:
        """Report whether the pattern is valid."""
        return len(self.pattern) > 0

    def match(self, name: str) -> bool:
        """Report whether the resource name matches the pattern."""
        pattern = self.pattern
        if not pattern:
            return False
        if not self.has_wild:
            return name == pattern

        slen = len(name)
        plen = len(pattern)
        if plen > slen:
            return False

        si = pi = 0
        while True:
            c = pattern[pi]
            if c == _FWC:
                return True
            if c == _PWC:
                pi += 1
                while name[si] != _SEP:
                    si += 1
                    if si >= slen:
                        return pi == plen
            elif name[si] != c:
                return False
            pi += 1
            si += 1
            if si >= slen:
                return pi == plen
            if pi >= plen:
                return False


def parse_resource_pattern(pattern: str) -> ResourcePattern:
    """Parse a pattern string; an invalid pattern gives an invalid ResourcePattern."""
    if not pattern:
        return ResourcePattern()

    plen = len(pattern)
    offset = 0
    token_wild = False
    any_wild = False
    for i, c in enumerate(pattern + _SEP):
        if c == _SEP:
            if offset == i:
                return ResourcePattern()
            if token_wild:
                if i - offset > 1:
                    return ResourcePattern()
                token_wild = False
            offset = i + 1
        elif c == _PWC:
            any_wild = token_wild = True
        elif c == _FWC:
            if i < plen - 1:
                return ResourcePattern()
            any_wild = token_wild = True

    return ResourcePattern(pattern, any_wild)