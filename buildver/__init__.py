from . import errors  # noqa: F401
from ._version import __version__  # noqa: F401
from .envvar import EnvVar  # noqa: F401
from .errors import (  # noqa: F401
    EmptyFieldError,
    EmptyVersionError,
    InvalidIntegerError,
    InvalidPrefixError,
    MalformedVersionError,
    VersionError,
)
from .field import Field  # noqa: F401
from .version import Version, parse, try_parse  # noqa: F401
