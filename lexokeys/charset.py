"""Ordered alphabets used to build keys."""

from __future__ import annotations

import logging
from typing import Dict, Iterator, Optional, Protocol, Tuple

from .errors import ConfigurationError, MalformedKeyError

logger = logging.getLogger(__name__)

ALPHANUMERIC = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


class CharacterSet(Protocol):
    """Anything the generator can walk through in a total order.

    ``midpoint`` treats the set as circular: when ``b`` ranks before ``a`` the
    range wraps past the maximum back to the minimum.

    With ``"0123456789"``:
        midpoint("2", "5") == "3"
        midpoint("8", "2") == "0"   (8 9 0 1 2)
    """

    def min(self) -> str: ...

    def max(self) -> str: ...

    def successor(self, char: str) -> Optional[str]: ...

    def predecessor(self, char: str) -> Optional[str]: ...

    def midpoint(self, a: str, b: str) -> str: ...

    def __contains__(self, char: object) -> bool: ...


def _supported(char: str) -> bool:
    return len(char) == 1 and char.isascii() and char.isprintable()


class Alphabet:
    """Immutable ascending set of printable ASCII characters."""

    __slots__ = ("_chars", "_ranks")

    def __init__(self, chars: str) -> None:
        ordered = sorted(chars)
        ranks: Dict[str, int] = {}
        for i, ch in enumerate(ordered):
            if not _supported(ch):
                raise ConfigurationError(
                    f"invalid character set: {ch!r} is not a printable ASCII character",
                    {"character": ch},
                )
            if ch in ranks:
                raise ConfigurationError(
                    f"invalid character set: {ch!r} is duplicated",
                    {"character": ch},
                )
            ranks[ch] = i
        if len(ordered) < 2:
            raise ConfigurationError(
                "invalid character set: at least two characters are required",
                {"characters": "".join(ordered)},
            )
        self._chars: Tuple[str, ...] = tuple(ordered)
        self._ranks = ranks

    def rank(self, char: str) -> Optional[int]:
        return self._ranks.get(char)

    def _rank_of(self, char: str) -> int:
        index = self._ranks.get(char)
        if index is None:
            raise MalformedKeyError(
                f"character {char!r} is not part of the character set",
                {"character": char},
            )
        return index

    def min(self) -> str:
        return self._chars[0]

    def max(self) -> str:
        return self._chars[-1]

    def successor(self, char: str) -> Optional[str]:
        index = self._rank_of(char)
        if index == len(self._chars) - 1:
            return None
        return self._chars[index + 1]

    def predecessor(self, char: str) -> Optional[str]:
        index = self._rank_of(char)
        if index == 0:
            return None
        return self._chars[index - 1]

    def midpoint(self, a: str, b: str) -> str:
        size = len(self._chars)
        index_a = self._rank_of(a)
        index_b = self._rank_of(b)
        if index_b < index_a:
            index_b += size
        return self._chars[((index_a + index_b) // 2) % size]

    def validate(self) -> None:
        validate_character_set(self)

    def __contains__(self, char: object) -> bool:
        return isinstance(char, str) and char in self._ranks

    def __len__(self) -> int:
        return len(self._chars)

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __str__(self) -> str:
        return "".join(self._chars)

    def __repr__(self) -> str:
        return f"Alphabet({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._chars == other._chars

    def __hash__(self) -> int:
        return hash(self._chars)


def validate_character_set(charset: CharacterSet) -> None:
    """Check that walking the set in both directions is strictly monotonic.

    Catches custom ordering tables whose neighbour operations disagree with
    the characters they claim to hold.
    """
    current = charset.min()
    while True:
        nxt = charset.successor(current)
        if nxt is None:
            break
        if current >= nxt:
            raise ConfigurationError(
                f"invalid character set: {current!r} >= {nxt!r}",
                {"left": current, "right": nxt},
            )
        current = nxt
    if current != charset.max():
        raise ConfigurationError(
            f"invalid character set: forward walk ended at {current!r}, expected {charset.max()!r}",
            {"last": current},
        )

    current = charset.max()
    while True:
        prev = charset.predecessor(current)
        if prev is None:
            break
        if current <= prev:
            raise ConfigurationError(
                f"invalid character set: {current!r} <= {prev!r}",
                {"left": prev, "right": current},
            )
        current = prev
    if current != charset.min():
        raise ConfigurationError(
            f"invalid character set: backward walk ended at {current!r}, expected {charset.min()!r}",
            {"last": current},
        )


def default_alphabet() -> Alphabet:
    """Build the built-in alphanumeric alphabet, validated.

    Raises ConfigurationError instead of failing at import time.
    """
    alphabet = Alphabet(ALPHANUMERIC)
    validate_character_set(alphabet)
    logger.debug(f"Built default alphabet with {len(alphabet)} characters")
    return alphabet
