import re
from dataclasses import dataclass
from typing import List, Tuple, TypeVar, Union

from .errors import (
    EmptyFieldError,
    EmptyVersionError,
    InvalidIntegerError,
    InvalidPrefixError,
    MalformedVersionError,
    VersionError,
)
from .field import Field

__all__ = [
    "PREFIX",
    "ResultTuple",
    "Version",
    "parse",
    "try_parse",
]

T = TypeVar("T")
E = TypeVar("E")

# Type alias for shorthand.
ResultTuple = Union[Tuple[T, None], Tuple[None, E]]

PREFIX = "v"
SEPARATOR = "."
N_FIELDS = len(Field)

# Signed 64-bit range.
_INT_MIN = -(2 ** 63)
_INT_MAX = 2 ** 63 - 1
_INT_RE = re.compile(r"[+-]?[0-9]+")


def _num(s: str) -> int:
    # `int()` alone would also accept whitespace, underscores and non-ASCII digits.
    if _INT_RE.fullmatch(s) is None:
        raise InvalidIntegerError(s)
    n = int(s)
    if not _INT_MIN <= n <= _INT_MAX:
        raise InvalidIntegerError(s)
    return n


def _str(n: int) -> str:
    return f"{n:d}"


# `v<major>.<minor>.<patch>` only; no pre-release or build metadata.
@dataclass(frozen=True, eq=True)
class Version:
    major: int
    minor: int
    patch: int

    @classmethod
    def parse(cls, s: str) -> "Version":
        """

        Parse a version string of the form ``v<major>.<minor>.<patch>``.

        Args:
            s (str): version string

        Returns:
            :class:`Version`: parsed version

        Exceptions:
            Raise a subclass of :class:`~buildver.errors.VersionError` at the first failing step.

        Example:

            >>> Version.parse("v1.2.3")
            Version(major=1, minor=2, patch=3)

        """
        if s == "":
            raise EmptyVersionError()
        if s[0] != PREFIX:
            raise InvalidPrefixError(s)

        rest = s[len(PREFIX):]
        segments = rest.split(SEPARATOR)
        if len(segments) != N_FIELDS:
            raise MalformedVersionError(rest, len(segments))

        values: List[int] = []
        for i, segment in enumerate(segments):
            if segment == "":
                raise EmptyFieldError(Field.of(i))
            values.append(_num(segment))

        return cls(values[Field.MAJOR], values[Field.MINOR], values[Field.PATCH])

    def format(self) -> str:
        return f"{PREFIX}{_str(self.major)}{SEPARATOR}{_str(self.minor)}{SEPARATOR}{_str(self.patch)}"

    def __str__(self) -> str:
        return self.format()

    def major_str(self) -> str:
        return _str(self.major)

    def minor_str(self) -> str:
        return _str(self.minor)

    def patch_str(self) -> str:
        return _str(self.patch)


def parse(s: str) -> Version:
    return Version.parse(s)


def try_parse(s: str) -> ResultTuple[Version, VersionError]:
    """Like :func:`parse`, but return ``(version, None)`` or ``(None, error)`` instead of raising."""
    try:
        return Version.parse(s), None
    except VersionError as e:
        return None, e
