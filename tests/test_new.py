"""Tests for pybake.commands.new."""

from pathlib import Path

import pytest

from helpers import failure_of, value_of
from pybake.commands.new import DEFAULT_MAIN_C, create_project, new_project
from pybake.domain.errors import BakeError, InvalidProjectName


class Args:
    def __init__(self, directory: Path, name: str):
        self.dir = directory
        self.name = name


class TestCreateProject:
    def test_layout(self, tmp_path: Path) -> None:
        directory = create_project(tmp_path, "hello")

        assert directory == tmp_path / "hello"
        assert (directory / "bake.toml").read_text() == 'name="hello"\n'
        assert (directory / "src" / "main.c").read_text() == DEFAULT_MAIN_C
        assert (directory / ".gitignore").read_text() == "bin/\n"

    @pytest.mark.parametrize("name", ["1hello", "hello world", "", "he.llo", "hello\n"])
    def test_invalid_name(self, tmp_path: Path, name: str) -> None:
        with pytest.raises(InvalidProjectName):
            create_project(tmp_path, name)
        assert list(tmp_path.iterdir()) == []

    @pytest.mark.parametrize("name", ["_hello", "my-project", "Proj_2"])
    def test_valid_name(self, tmp_path: Path, name: str) -> None:
        assert create_project(tmp_path, name).is_dir()

    def test_existing_directory(self, tmp_path: Path) -> None:
        (tmp_path / "hello").mkdir()

        with pytest.raises(BakeError) as info:
            create_project(tmp_path, "hello")
        assert isinstance(info.value.__cause__, FileExistsError)


class TestNewProject:
    def test_success(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert value_of(new_project(Args(tmp_path, "hello"))) == 0
        assert "Created" in capsys.readouterr().out

    def test_failure(self, tmp_path: Path) -> None:
        assert isinstance(failure_of(new_project(Args(tmp_path, "9lives"))), InvalidProjectName)
