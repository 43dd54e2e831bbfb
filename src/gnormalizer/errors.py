from __future__ import annotations

from typing import Any, Mapping, Optional


# ============================================================
# Normalized errors
# ============================================================

class GNormalizerError(Exception):
    """
    Base exception for graph normalization errors.

    Attributes:
        message: Human-readable description.
        code: Machine-readable, UPPER_SNAKE_CASE error code.
        details: Additional machine context (line numbers, counts).
    """

    def __init__(
        self,
        message: str = "",
        *,
        code: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = dict(details or {})

    def __str__(self) -> str:
        base = self.message or self.__class__.__name__
        if self.code:
            base += f" [code={self.code}]"
        if self.details:
            base += f" details={self.details}"
        return base


class MalformedLineError(GNormalizerError, ValueError):
    """
    A non-blank, non-comment line did not split into exactly two tokens.

    This error is fatal to the edge stream that raised it: no further
    lines are pulled and the stream re-raises it on every later pull.
    """

    def __init__(self, line: str, *, line_number: int, token_count: int, **kw: Any):
        kw.setdefault("code", "MALFORMED_LINE")
        kw.setdefault("details", {"line_number": line_number, "token_count": token_count})
        super().__init__(
            f"Line {line_number} must contain exactly 2 nodes, found {token_count}: {line!r}",
            **kw,
        )
        self.line = line
        self.line_number = line_number
        self.token_count = token_count


class ConfigError(GNormalizerError, ValueError):
    """Invalid parser or pipeline configuration."""

    def __init__(self, message: str, **kw: Any):
        kw.setdefault("code", "BAD_CONFIG")
        super().__init__(message, **kw)
