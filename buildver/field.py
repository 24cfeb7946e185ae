import enum


class Field(enum.IntEnum):
    """Role of a dot-separated position in a version string."""

    MAJOR = 0
    MINOR = 1
    PATCH = 2

    @classmethod
    def of(cls, index: int) -> "Field":
        try:
            return cls(index)
        except ValueError:
            # Unreachable from the parser, which only yields 0, 1 and 2.
            return cls.MAJOR

    def __str__(self) -> str:
        return self.name.lower()
