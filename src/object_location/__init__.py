"""Parse and render bucket/key object locations."""

from .errors import ObjectLocationParseError
from .location import parse, try_parse
from .logging_config import configure_logging
from .models import (
    BucketAndKey,
    ObjectLocation,
    ParseFailure,
    ParseResult,
    ParseSuccess,
)

__version__ = "0.1.0"
__all__ = [
    "BucketAndKey",
    "ObjectLocation",
    "ObjectLocationParseError",
    "ParseFailure",
    "ParseResult",
    "ParseSuccess",
    "configure_logging",
    "parse",
    "try_parse",
]
