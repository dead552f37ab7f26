"""Argument checks, list helpers, console input and stream-style formatting."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Iterator, Sequence, Sized
from typing import Any, Optional, TextIO, TypeVar

T = TypeVar("T")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def require_non_null(obj: Optional[T]) -> T:
    """Return ``obj`` unchanged, or raise ValueError if it is None."""
    if obj is None:
        raise ValueError("object can't be null.")
    return obj


def remove_object(items: Iterable[T], target: T) -> list[T]:
    """Return a new list without every element that is ``target`` itself."""
    return [item for item in items if item is not target]


def set_to_list(items: Iterable[T]) -> list[T]:
    """Return the members of a set as a list."""
    return list(items)


def delete_val(val: T, items: Iterable[T]) -> list[T]:
    """Return a new list without every element that is ``val`` itself."""
    return remove_object(items, val)


def should_be_positive(val: Any) -> None:
    """Raise ValueError unless ``val`` is greater than zero."""
    if val <= 0:
        raise ValueError("val must be positive.")


def length_should_be(text: str, minimum: int, maximum: int) -> None:
    """Raise ValueError unless the length of ``text`` lies in [minimum, maximum]."""
    if len(text) > maximum or len(text) < minimum:
        raise ValueError(f"{text} size should be {minimum} ~ {maximum}.")


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def handle_input(
    minimum: int,
    maximum: int,
    stream: Optional[TextIO] = None,
    out: Optional[TextIO] = None,
) -> int:
    """Prompt until an integer within [minimum, maximum] is read, and return it.

    Raises EOFError when the input runs out and ValueError on a token that
    is not an integer.
    """
    stream = sys.stdin if stream is None else stream
    out = sys.stdout if out is None else out
    tokens = _tokens(stream)
    while True:
        print(f"請選擇數值介於{minimum}~{maximum}之間!!!", file=out)
        try:
            token = next(tokens)
        except StopIteration:
            raise EOFError("no more input") from None
        try:
            value = int(token)
        except ValueError:
            raise ValueError(f"not an integer: {token!r}") from None
        if minimum <= value <= maximum:
            return value


def input_multiple_nums(stream: Optional[TextIO] = None) -> list[int]:
    """Read the first non-empty line and return its leading integers, sorted and unique.

    Reading stops at the first text that does not start an integer.
    """
    stream = sys.stdin if stream is None else stream
    line = ""
    while not line:
        raw = stream.readline()
        if raw == "":
            raise EOFError("no more input")
        line = raw.rstrip("\r\n")

    numbers: set[int] = set()
    pos = 0
    while match := _LEADING_INT.match(line, pos):
        numbers.add(int(match.group(1)))
        pos = match.end()
    return sorted(numbers)


def val_should_bigger(val: Any, minimum: int) -> None:
    """Raise ValueError if ``val`` is smaller than ``minimum``."""
    if val < minimum:
        raise ValueError(f"val  should bigger than {minimum}.")


def val_should_be(val: Any, minimum: int, maximum: int) -> None:
    """Raise ValueError unless ``val`` lies in [minimum, maximum]."""
    if val > maximum or val < minimum:
        raise ValueError(f" val should be {minimum} ~ {maximum}.")


def size_should_be(items: Sized, val: int) -> None:
    """Raise ValueError unless ``items`` holds exactly ``val`` elements."""
    if len(items) != val:
        raise ValueError("arr size should be val")


def size_should_bigger(items: Sized, val: int) -> None:
    """Raise ValueError if ``items`` holds fewer than ``val`` elements."""
    if len(items) < val:
        raise ValueError("arr size should bigger than val")


def size_should_smaller(items: Sized, val: int) -> None:
    """Raise ValueError if ``items`` holds more than ``val`` elements."""
    if len(items) > val:
        raise ValueError("arr size should Smaller than val")


def array_should_not_be_empty(items: Sized) -> None:
    """Raise ValueError if ``items`` is empty."""
    if len(items) == 0:
        raise ValueError("arr can't be empty")


def _format_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


def to_string(value: Any) -> str:
    """Format a value as an output stream would; lists become ``[a , b , c]``."""
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return "[" + " , ".join(_format_scalar(item) for item in value) + "]"
    return _format_scalar(value)