from __future__ import annotations


class RemapError(ValueError):
    """Base class for failures that abort a remap run (no partial output)."""


class MalformedDateLiteral(RemapError):
    def __init__(self, literal: str, reason: str) -> None:
        super().__init__(f"Bad date literal ({reason}): {literal}")
        self.literal = literal
        self.reason = reason


class DrawingTooWide(RemapError):
    def __init__(self, spread: int, width: int) -> None:
        super().__init__(
            f"Drawing uses {spread} columns but the rolling window only shows {width}. "
            "Trim or shift the template before remapping."
        )
        self.spread = spread
        self.width = width


class UnavoidableFutureDate(RemapError):
    def __init__(self) -> None:
        super().__init__(
            "Cannot align drawing without using future days in the current week. "
            "Adjust the template to land earlier."
        )
