"""Pydantic models for object locations, structured bucket/key input, and parse results."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator


class BucketAndKey(BaseModel):
    """Structured form of an object location: the bucket and the full object key."""

    model_config = ConfigDict(frozen=True)

    bucket: str = Field(..., description="Bucket name, e.g. my-bucket")
    key: str = Field(..., description="Object key, e.g. audio/2024/take.wav")


class ObjectLocation(BaseModel):
    """
    Location of a stored object, split into bucket, prefix, key and filename.

    Build instances with parse() or try_parse(); both accept either the
    composite string form (bucket/prefix/.../name.ext) or a BucketAndKey pair.
    Instances are frozen.
    """

    model_config = ConfigDict(frozen=True)

    bucket: str = Field(..., description="First path segment")
    prefix: str | None = Field(
        None,
        description="Folders between bucket and filename; None when the key is a bare filename",
    )
    key: str = Field(..., description="Full object key (prefix + filename)")
    filename: str = Field(..., description="Last path segment, extension included")

    @model_validator(mode="after")
    def check_key_matches_parts(self) -> "ObjectLocation":
        if not self.bucket or "/" in self.bucket:
            raise ValueError(f"bucket must be a single non-empty segment: {self.bucket!r}")
        if not self.filename or "/" in self.filename:
            raise ValueError(f"filename must be a single non-empty segment: {self.filename!r}")
        expected = f"{self.prefix}/{self.filename}" if self.prefix else self.filename
        if self.key != expected:
            raise ValueError(f"key {self.key!r} does not match prefix and filename")
        return self

    @computed_field  # type: ignore[prop-decorator]
    @property
    def extension(self) -> str | None:
        """File extension of the filename including the dot, or None if there is no dot."""
        parts = self.filename.split(".")
        if len(parts) == 1:
            return None
        return f".{parts[-1]}"

    @classmethod
    def parse(cls, source: Any) -> "ObjectLocation":
        from .location import parse

        return parse(source)

    @classmethod
    def try_parse(cls, source: Any) -> "ParseSuccess | ParseFailure":
        from .location import try_parse

        return try_parse(source)

    def to_bucket_and_key(self) -> BucketAndKey:
        return BucketAndKey(bucket=self.bucket, key=self.key)

    def __str__(self) -> str:
        return f"{self.bucket}/{self.key}"


# --- try_parse results (tagged by success) ---

class ParseSuccess(BaseModel):
    """Successful try_parse result carrying the parsed location."""

    model_config = ConfigDict(frozen=True)

    success: Literal[True] = True
    value: ObjectLocation


class ParseFailure(BaseModel):
    """Failed try_parse result. Carries no detail about why the input was rejected."""

    model_config = ConfigDict(frozen=True)

    success: Literal[False] = False


ParseResult = ParseSuccess | ParseFailure
