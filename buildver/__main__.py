import argparse
import logging
import sys
from typing import List, Optional

from .envvar import EnvVar
from .errors import VersionError
from .version import Version


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="buildver", description="Validate and report a build version.")
    parser.add_argument(
        "version",
        nargs="?",
        help="version string (default: $BUILDVER_VERSION, $BUILDVER_VERSION_FILE or the package version)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    try:
        s = args.version if args.version is not None else EnvVar.load().version_string()
        version = Version.parse(s)
    except (VersionError, RuntimeError) as e:
        logging.error(f"{e}")
        return 1

    logging.info(f"Running version: {version}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
