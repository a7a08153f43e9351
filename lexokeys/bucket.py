from __future__ import annotations

import logging
from typing import Any, Mapping, NamedTuple, Optional, Union

from pydantic import ValidationError

from .errors import BucketMismatchError, ConfigurationError, MalformedKeyError
from .generator import KeyGenerator
from .models import BucketConfig

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = "|"
DEFAULT_TAG = "0"


class BucketKey(NamedTuple):
    tag: str
    key: str


class Bucket:
    """Namespaces keys as ``"<tag><separator><key>"``.

    Keys with different tags live in independent sequences; ordering work is
    delegated to the wrapped generator, which may be shared between buckets.
    The tag is not checked for the separator: a tag containing it cannot be
    split back.
    """

    __slots__ = ("_separator", "_default_tag", "_generator")

    def __init__(
        self,
        separator: str = DEFAULT_SEPARATOR,
        default_tag: str = DEFAULT_TAG,
        generator: Optional[KeyGenerator] = None,
    ) -> None:
        if len(separator) != 1:
            raise ConfigurationError(
                f"separator must be a single character, got {separator!r}",
                {"separator": separator},
            )
        if not default_tag:
            raise ConfigurationError("default tag must not be empty")
        self._separator = separator
        self._default_tag = default_tag
        self._generator = generator if generator is not None else KeyGenerator()
        logger.debug(f"Bucket ready: separator={separator!r} default_tag={default_tag!r}")

    @classmethod
    def from_config(cls, config: Union[BucketConfig, Mapping[str, Any], None] = None) -> "Bucket":
        if not isinstance(config, BucketConfig):
            try:
                config = BucketConfig.model_validate(dict(config or {}))
            except ValidationError as exc:
                raise ConfigurationError(f"invalid bucket configuration: {exc}") from exc
        return cls(config.separator, config.default_tag, KeyGenerator.from_config(config.generator))

    @property
    def separator(self) -> str:
        return self._separator

    @property
    def default_tag(self) -> str:
        return self._default_tag

    @property
    def generator(self) -> KeyGenerator:
        return self._generator

    # === Public API ===

    def between(self, prev_key: Optional[str] = None, next_key: Optional[str] = None) -> str:
        tag = ""
        prev_bare: Optional[str] = None
        if prev_key:
            tag, prev_bare = self.split(prev_key)

        next_bare: Optional[str] = None
        if next_key:
            next_tag, next_bare = self.split(next_key)
            if tag and tag != next_tag:
                raise BucketMismatchError(
                    f"bucket mismatch: {tag!r} != {next_tag!r}",
                    {"prev": prev_key, "next": next_key},
                )
            tag = next_tag

        key = self._generator.between(prev_bare, next_bare)
        return self.join(tag, key)

    def after(self, key: str) -> str:
        return self.between(key, None)

    def before(self, key: str) -> str:
        return self.between(None, key)

    def split(self, bucket_key: str) -> BucketKey:
        tag, sep, key = bucket_key.partition(self._separator)
        if not sep or not tag or not key:
            raise MalformedKeyError(
                f"{bucket_key!r} is not in the format <tag>{self._separator}<key>",
                {"key": bucket_key},
            )
        return BucketKey(tag, key)

    def join(self, tag: str, key: str) -> str:
        return f"{tag or self._default_tag}{self._separator}{key}"
