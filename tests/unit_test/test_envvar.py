from pathlib import Path

import pytest
from buildver import __version__
from buildver.envvar import EnvVar


@pytest.fixture(autouse=True)
def clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BUILDVER_VERSION", raising=False)
    monkeypatch.delenv("BUILDVER_VERSION_FILE", raising=False)


def test_load_unset() -> None:
    env = EnvVar.load()
    assert env == EnvVar(buildver_version=None, buildver_version_file=None)
    assert env.version_string() == f"v{__version__}"


def test_load_version(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BUILDVER_VERSION", "v1.2.3")
    assert EnvVar.load().version_string() == "v1.2.3"


def test_load_version_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    path = tmp_path / "version.txt"
    path.write_text("v4.5.6\n")
    monkeypatch.setenv("BUILDVER_VERSION_FILE", str(path))

    env = EnvVar.load()
    assert env.buildver_version_file == path
    assert env.version_string() == "v4.5.6"


def test_version_takes_precedence_over_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    path = tmp_path / "version.txt"
    path.write_text("v4.5.6")
    monkeypatch.setenv("BUILDVER_VERSION_FILE", str(path))
    monkeypatch.setenv("BUILDVER_VERSION", "v1.2.3")
    assert EnvVar.load().version_string() == "v1.2.3"


def test_missing_version_file(tmp_path: Path) -> None:
    env = EnvVar(buildver_version=None, buildver_version_file=tmp_path / "missing.txt")
    with pytest.raises(RuntimeError):
        env.version_string()


def test_undecodable_version_file(tmp_path: Path) -> None:
    path = tmp_path / "version.txt"
    path.write_bytes(b"\xff\xfe")
    env = EnvVar(buildver_version=None, buildver_version_file=path)
    with pytest.raises(RuntimeError):
        env.version_string()
