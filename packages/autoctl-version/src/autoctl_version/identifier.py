# SPDX-License-Identifier: MIT
"""Pre-release and build metadata identifiers.

A version's pre-release and build parts are dot-separated lists of
identifiers. Each identifier is either numeric (ASCII digits only) or
alphanumeric, which decides how it is ordered:
- Numeric identifiers compare by value: 9 < 10
- Numeric identifiers always sort before alphanumeric ones: 9 < alpha
- Alphanumeric identifiers compare lexically in ASCII order: alpha < beta
"""

from __future__ import annotations

from dataclasses import dataclass


def _is_ascii_digits(token: str) -> bool:
    # str.isdigit() also accepts non-ASCII digits such as "²"
    return token.isascii() and token.isdigit()


@dataclass(frozen=True, slots=True)
class Identifier:
    """A single dot-separated token of a pre-release or build string.

    Attributes:
        raw: Original token text, rendered verbatim
        is_numeric: True if the token consists only of ASCII digits
        numeric_value: Parsed value of a numeric token (0 otherwise)
    """

    raw: str
    is_numeric: bool = False
    numeric_value: int = 0

    @classmethod
    def from_token(cls, token: str) -> Identifier:
        """Classify a token and build an Identifier from it.

        Examples:
            >>> Identifier.from_token("12")
            Identifier(raw='12', is_numeric=True, numeric_value=12)
            >>> Identifier.from_token("rc")
            Identifier(raw='rc', is_numeric=False, numeric_value=0)
        """
        if _is_ascii_digits(token):
            return cls(raw=token, is_numeric=True, numeric_value=int(token))
        return cls(raw=token)

    def compare(self, other: Identifier) -> int:
        """Compare two identifiers by semantic versioning precedence.

        Returns:
            -1 if self < other
            0 if self == other
            1 if self > other
        """
        if self.is_numeric and other.is_numeric:
            if self.numeric_value == other.numeric_value:
                return 0
            return -1 if self.numeric_value < other.numeric_value else 1
        if self.is_numeric:
            return -1
        if other.is_numeric:
            return 1
        if self.raw == other.raw:
            return 0
        # Grammar restricts identifiers to ASCII, so code point order is byte order
        return -1 if self.raw < other.raw else 1

    def sort_key(self) -> tuple[int, int, str]:
        """Return a tuple ordered the same way as compare()."""
        if self.is_numeric:
            return (0, self.numeric_value, "")
        return (1, 0, self.raw)

    def __str__(self) -> str:
        return self.raw


def parse_identifiers(text: str) -> list[Identifier]:
    """Split a dot-separated pre-release or build string into Identifiers."""
    return [Identifier.from_token(token) for token in text.split(".")]


def join_identifiers(identifiers: list[Identifier]) -> str:
    """Render identifiers back to their dot-separated form."""
    return ".".join(identifier.raw for identifier in identifiers)


def compare_identifiers(left: list[Identifier], right: list[Identifier]) -> int:
    """Compare two identifier lists element by element.

    When one list is a strict prefix of the other, the shorter list is lesser.
    """
    for a, b in zip(left, right):
        result = a.compare(b)
        if result != 0:
            return result

    if len(left) != len(right):
        return -1 if len(left) < len(right) else 1

    return 0
