from .field import Field

__all__ = [
    "VersionError",
    "EmptyVersionError",
    "InvalidPrefixError",
    "MalformedVersionError",
    "EmptyFieldError",
    "InvalidIntegerError",
]


class VersionError(ValueError):
    """Base class of every failure raised while parsing a version string."""


class EmptyVersionError(VersionError):
    def __init__(self) -> None:
        super().__init__("version string is empty")


class InvalidPrefixError(VersionError):
    def __init__(self, version: str) -> None:
        super().__init__(f"missing version prefix: {version}")
        self.version = version


class MalformedVersionError(VersionError):
    def __init__(self, rest: str, count: int) -> None:
        super().__init__(f"version does not conform to semantic version format: {rest}")
        self.rest = rest
        self.count = count


class EmptyFieldError(VersionError):
    def __init__(self, field: Field) -> None:
        super().__init__(f"{field!s} has empty versions")
        self.field = field


class InvalidIntegerError(VersionError):
    def __init__(self, token: str) -> None:
        super().__init__(f"{token}: invalid integer")
        self.token = token
