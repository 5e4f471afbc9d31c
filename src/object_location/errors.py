"""Errors raised by the strict parse entry point."""

from typing import Any


class ObjectLocationParseError(ValueError):
    """Raised by parse() when the source does not describe a bucket and object key."""

    def __init__(self, source: Any) -> None:
        super().__init__(
            f"The provided object location is not valid. Value provided: {source}"
        )
        self.source = source
