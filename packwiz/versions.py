"""FlexVer version ordering and management of a pack's acceptable game versions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import cmp_to_key
from itertools import zip_longest
from typing import Iterable

_DIGITS = frozenset("0123456789")


class AcceptableVersionsError(ValueError):
    """Raised when a change to the acceptable versions list is not valid."""


class _Kind(Enum):
    NUMERIC = "numeric"
    LEXICAL = "lexical"
    PRERELEASE = "prerelease"


@dataclass(frozen=True)
class _Component:
    kind: _Kind
    text: str


def _make_component(numeric: bool, text: str) -> _Component:
    if numeric:
        return _Component(_Kind.NUMERIC, text)
    if len(text) > 1 and text[0] == "-":
        return _Component(_Kind.PRERELEASE, text)
    return _Component(_Kind.LEXICAL, text)


def _decompose(version: str) -> list[_Component]:
    if not version:
        return []
    components: list[_Component] = []
    accum: list[str] = []
    last_was_number = version[0] in _DIGITS
    for ch in version:
        if ch == "+":
            # Build metadata (appendix) is ignored
            break
        number = ch in _DIGITS
        if number != last_was_number or (ch == "-" and accum and accum[0] != "-"):
            components.append(_make_component(last_was_number, "".join(accum)))
            accum = []
            last_was_number = number
        accum.append(ch)
    components.append(_make_component(last_was_number, "".join(accum)))
    return components


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _strip_leading_zeros(digits: str) -> str:
    if len(digits) == 1:
        return digits
    stripped = digits.lstrip("0")
    return stripped or digits[-1]


def _compare_text(a: str, b: str) -> int:
    return (a > b) - (a < b)


def _compare_components(a: _Component | None, b: _Component | None) -> int:
    if a is None:
        if b is None:
            return 0
        return -_compare_components(b, None)
    if b is None:
        # A pre-release sorts before the absence of a component
        return -1 if a.kind is _Kind.PRERELEASE else 1
    if a.kind is _Kind.NUMERIC and b.kind is _Kind.NUMERIC:
        x = _strip_leading_zeros(a.text)
        y = _strip_leading_zeros(b.text)
        if len(x) != len(y):
            return _sign(len(x) - len(y))
        return _compare_text(x, y)
    return _compare_text(a.text, b.text)


def compare_versions(a: str, b: str) -> int:
    """Compare two version strings with FlexVer; returns -1, 0 or 1."""
    for x, y in zip_longest(_decompose(a), _decompose(b)):
        result = _compare_components(x, y)
        if result:
            return result
    return 0


def version_less(a: str, b: str) -> bool:
    """True if version ``a`` sorts before version ``b``."""
    return compare_versions(a, b) < 0


def sort_versions(versions: Iterable[str]) -> list[str]:
    """Return the versions sorted from lowest to highest."""
    return sorted(versions, key=cmp_to_key(compare_versions))


def dedupe_versions(versions: Iterable[str]) -> list[str]:
    """Drop repeated versions, keeping the last occurrence of each."""
    items = list(versions)
    seen: set[str] = set()
    kept: list[str] = []
    for version in reversed(items):
        if version not in seen:
            seen.add(version)
            kept.append(version)
    kept.reverse()
    return kept


def is_sorted(versions: Iterable[str]) -> bool:
    """True if no version is followed by a lower one."""
    items = list(versions)
    return not any(version_less(nxt, cur) for cur, nxt in zip(items, items[1:]))


def parse_acceptable_versions(text: str) -> list[str]:
    """Split a comma separated version list and remove duplicates."""
    return dedupe_versions(text.split(","))


def add_acceptable_version(current: Iterable[str], version: str) -> list[str]:
    """Return a sorted list with ``version`` added."""
    items = list(current)
    if version in items:
        raise AcceptableVersionsError(
            f"Version {version} is already in your acceptable versions list!"
        )
    items.append(version)
    return sort_versions(items)


def remove_acceptable_version(current: Iterable[str], version: str) -> list[str]:
    """Return a sorted list with ``version`` removed."""
    items = list(current)
    if version not in items:
        raise AcceptableVersionsError(
            f"Version {version} is not in your acceptable versions list!"
        )
    items.remove(version)
    return sort_versions(items)