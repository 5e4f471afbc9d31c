"""
Object location parsing. Single place for bucket/key string handling.

Accepted forms:
  composite string:  bucket/prefix/.../name[.ext]
  structured pair:   BucketAndKey(bucket=..., key=...) or {"bucket": ..., "key": ...}

A structured pair is joined as "{bucket}/{key}" and parsed with the same
grammar as a string, so both forms validate identically.

Grammar: a bucket segment, zero or more folder segments, then a filename
segment with no dot or with one dot followed by an alphanumeric extension.
Empty segments are rejected anywhere.

Parser behaviour: try_parse returns ParseFailure for invalid input and never
raises; parse raises ObjectLocationParseError.
"""

import logging
import re
from collections.abc import Mapping
from typing import Any

from .errors import ObjectLocationParseError
from .models import BucketAndKey, ObjectLocation, ParseFailure, ParseResult, ParseSuccess

logger = logging.getLogger(__name__)

_LOCATION_RE = re.compile(
    r"([^/]+?)"  # bucket
    r"((?:/[^/]+)*)"  # folders, each with its leading slash
    r"(/[^/.]+(?:\.[A-Za-z0-9]+)?)"  # filename, with its leading slash
)


def _canonical_source(source: Any) -> str | None:
    """Return the single-string form of source, or None if it is neither a string nor a bucket/key pair."""
    if isinstance(source, str):
        return source
    if isinstance(source, BucketAndKey):
        return f"{source.bucket}/{source.key}"
    if isinstance(source, Mapping):
        bucket = source.get("bucket")
        key = source.get("key")
        if isinstance(bucket, str) and isinstance(key, str):
            return f"{bucket}/{key}"
    return None


def try_parse(source: Any) -> ParseResult:
    """
    Parse an object location without raising.

    Args:
        source: e.g. "my-bucket/audio/2024/take.wav" or
            BucketAndKey(bucket="my-bucket", key="audio/2024/take.wav").

    Returns:
        ParseSuccess with the ObjectLocation, or ParseFailure if the input is invalid.
    """
    location = _canonical_source(source)
    if location is None:
        logger.debug("Rejected object location of type %s", type(source).__name__)
        return ParseFailure()
    match = _LOCATION_RE.fullmatch(location)
    if not match:
        logger.debug("Rejected object location %r", location)
        return ParseFailure()
    bucket, folders, name = match.groups()
    prefix = folders[1:] or None
    filename = name[1:]
    key = f"{prefix}/{filename}" if prefix else filename
    return ParseSuccess(
        value=ObjectLocation(bucket=bucket, prefix=prefix, key=key, filename=filename)
    )


def parse(source: Any) -> ObjectLocation:
    """Like try_parse but raises ObjectLocationParseError if invalid."""
    result = try_parse(source)
    if not result.success:
        raise ObjectLocationParseError(source)
    return result.value
