import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ._version import __version__
from .version import PREFIX

__all__ = [
    "EnvVar",
]


@dataclass
class EnvVar:
    """
    Utility class to get the version string to report from environment variables.
    """

    # Version string, e.g. `v1.2.3`.
    buildver_version: Optional[str]
    # Text file holding the version string, written at build time.
    buildver_version_file: Optional[Path]

    @classmethod
    def load(cls) -> "EnvVar":
        """
        Load environment variables into dataclass.

        Both variables are optional.
        """

        buildver_version = os.environ.get("BUILDVER_VERSION")

        x = os.environ.get("BUILDVER_VERSION_FILE")
        buildver_version_file = None if x is None else Path(x)

        return cls(
            buildver_version=buildver_version,
            buildver_version_file=buildver_version_file,
        )

    def version_string(self) -> str:
        """
        Resolve the version string to report.

        Notes:
            Precedence is `BUILDVER_VERSION`, then `BUILDVER_VERSION_FILE`, then the version of this package.

        Exceptions:
            Raise :class:`~RuntimeError` if the version file cannot be read.
        """
        if self.buildver_version is not None:
            return self.buildver_version
        if self.buildver_version_file is not None:
            try:
                return self.buildver_version_file.read_text(encoding="utf-8").strip()
            except (OSError, UnicodeDecodeError) as e:
                raise RuntimeError(f"cannot read version file: {self.buildver_version_file}: {e}") from e
        return f"{PREFIX}{__version__}"
