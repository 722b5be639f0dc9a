from __future__ import annotations


class InvalidColor(ValueError):
    """Raised when a string is not a valid color expression.

    ``position`` is the offset in ``text`` where parsing gave up.
    """

    def __init__(self, text: str, position: int = 0, reason: str = "invalid color string"):
        self.text = text
        self.position = position
        self.reason = reason
        super().__init__(f"{reason} at offset {position} in {text!r}")
