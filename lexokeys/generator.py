from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from .charset import Alphabet, CharacterSet, default_alphabet, validate_character_set
from .errors import ConfigurationError, ExhaustionError, MalformedKeyError, OrderingError
from .models import GeneratorConfig

logger = logging.getLogger(__name__)

INITIAL_LENGTH = 6


class KeyGenerator:
    """Produces lexicographically sortable keys between two optional bounds.

    ``None`` and ``""`` both mean "unbounded" on that side. The generator only
    holds its character set and initial key, so one instance can be shared
    freely.
    """

    __slots__ = ("_charset", "_initial", "_growth")

    def __init__(self, character_set: Optional[CharacterSet] = None, initial: Optional[str] = None) -> None:
        charset = character_set if character_set is not None else default_alphabet()
        validate_character_set(charset)
        if initial:
            foreign = [ch for ch in initial if ch not in charset]
            if foreign:
                raise ConfigurationError(
                    f"initial key {initial!r} uses characters outside the set",
                    {"initial": initial, "characters": "".join(foreign)},
                )
        else:
            initial = charset.midpoint(charset.min(), charset.max()) * INITIAL_LENGTH

        # a two-character set has min() as its midpoint; growing with it would
        # leave nothing between the old and the grown key
        growth = charset.midpoint(charset.min(), charset.max())
        if growth == charset.min():
            growth = charset.successor(growth)
            if growth is None:
                raise ConfigurationError("character set has nothing after its minimum")

        self._charset = charset
        self._initial = initial
        self._growth = growth
        logger.debug(f"KeyGenerator ready: initial={initial!r}")

    @classmethod
    def from_config(cls, config: Union[GeneratorConfig, Mapping[str, Any], None] = None) -> "KeyGenerator":
        if not isinstance(config, GeneratorConfig):
            try:
                config = GeneratorConfig.model_validate(dict(config or {}))
            except ValidationError as exc:
                raise ConfigurationError(f"invalid generator configuration: {exc}") from exc
        return cls(Alphabet(config.characters), config.initial)

    @property
    def character_set(self) -> CharacterSet:
        return self._charset

    @property
    def initial(self) -> str:
        return self._initial

    # === Public API ===

    def between(self, prev_key: Optional[str] = None, next_key: Optional[str] = None) -> str:
        """Return a key strictly greater than ``prev_key`` and strictly less than ``next_key``."""
        if not prev_key and not next_key:
            return self._initial
        if prev_key:
            self._check_key(prev_key)
        if next_key:
            self._check_key(next_key)

        if not next_key:
            return self._increment(prev_key)
        if not prev_key:
            return self._decrement(next_key)
        if prev_key >= next_key:
            raise OrderingError(
                f"prev key ({prev_key!r}) must be strictly less than next key ({next_key!r})",
                {"prev": prev_key, "next": next_key},
            )
        return self._split(prev_key, next_key)

    def after(self, key: str) -> str:
        return self.between(key, None)

    def before(self, key: str) -> str:
        return self.between(None, key)

    # === Helpers ===

    def _check_key(self, key: str) -> None:
        for ch in key:
            if ch not in self._charset:
                raise MalformedKeyError(
                    f"key {key!r} contains {ch!r} which is not part of the character set",
                    {"key": key, "character": ch},
                )

    def _increment(self, key: str) -> str:
        cs = self._charset
        chars = list(key)
        for i in range(len(chars) - 1, -1, -1):
            bumped = cs.successor(chars[i])
            if bumped is not None:
                chars[i] = bumped
                chars[i + 1 :] = cs.min() * (len(chars) - i - 1)
                return "".join(chars)

        # Appending min() would leave no room between key and the result
        # ("000" -> "0000"); the second smallest character keeps a gap.
        above_min = cs.successor(cs.min())
        if above_min is None:
            raise ExhaustionError(
                f"character set has nothing after its minimum {cs.min()!r}",
                {"prev": key},
            )
        return key + above_min

    def _decrement(self, key: str) -> str:
        cs = self._charset
        chars = list(key)
        for i in range(len(chars) - 1, -1, -1):
            lowered = cs.predecessor(chars[i])
            if lowered is not None:
                chars[i] = lowered
                chars[i + 1 :] = cs.max() * (len(chars) - i - 1)
                return "".join(chars)
        raise ExhaustionError(
            f"cannot generate a key before {key!r}: it consists only of the minimum character {cs.min()!r}",
            {"next": key},
        )

    def _split(self, prev_key: str, next_key: str) -> str:
        cs = self._charset
        width = max(len(prev_key), len(next_key))
        low = prev_key.ljust(width, cs.min())
        high = next_key.ljust(width, cs.min())
        if low == high:
            # next_key is prev_key followed by min() characters only; the only
            # keys between them are prev_key padded with fewer min() characters
            if len(next_key) - len(prev_key) > 1:
                return prev_key + cs.min()
            raise ExhaustionError(
                f"no key exists between {prev_key!r} and {next_key!r}",
                {"prev": prev_key, "next": next_key},
            )

        for i in range(width):
            p, n = low[i], high[i]
            if p == n:
                continue
            mid = cs.midpoint(p, n)
            tail = cs.min() * (width - i - 1)
            if mid > p:
                return low[:i] + mid + tail
            if mid < n and high[:i] > low[:i]:
                return high[:i] + mid + tail

        logger.debug(f"No split between {prev_key!r} and {next_key!r}, growing key")
        return low + self._growth
