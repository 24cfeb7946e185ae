import pytest


@pytest.mark.parametrize(
    "from_, import_",
    [
        ("buildver", "Version, parse, try_parse"),
        ("buildver", "EnvVar, Field"),
        ("buildver", "VersionError, EmptyVersionError, InvalidPrefixError"),
        ("buildver", "MalformedVersionError, EmptyFieldError, InvalidIntegerError"),
        ("buildver.__main__", "main"),
    ],
)
def test_import_buildver(from_: str, import_: str) -> None:
    exec(f"""from {from_} import {import_}""")
