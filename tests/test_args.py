"""Tests for command line args."""

from pathlib import Path
from unittest.mock import Mock

import pytest

from pathmapper.args import Args
from pathmapper.errors import ConfigError


def _working_dir(path: Path | None) -> Path:
    return Args.working_dir.fget(Mock(spec=Args, path=path))


class TestWorkingDir:
    """Test resolution of the working directory."""

    def test_defaults_to_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without --path the current directory is used."""
        monkeypatch.chdir(tmp_path)
        assert _working_dir(None) == tmp_path.resolve()

    def test_relative_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Relative paths are resolved against the current directory."""
        (tmp_path / "sub").mkdir()
        monkeypatch.chdir(tmp_path)
        assert _working_dir(Path("sub")) == (tmp_path / "sub").resolve()

    def test_missing_directory(self, tmp_path: Path) -> None:
        """A directory that does not exist is a config error."""
        with pytest.raises(ConfigError, match="missing"):
            _working_dir(tmp_path / "missing")
