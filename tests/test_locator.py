"""Tests for find_env_file."""
from unittest.mock import patch

from dot_env.locator import find_env_file


def test_finds_default_file_in_cwd(workdir):
    (workdir / ".env").write_text("A=1\n")
    found = find_env_file()
    assert found is not None
    assert found.name == ".env"
    assert found.parent.resolve() == workdir.resolve()


def test_custom_filename(workdir):
    (workdir / "prod.env").write_text("A=1\n")
    assert find_env_file("prod.env").name == "prod.env"
    assert find_env_file(".env") is None


def test_empty_filename_is_not_found(workdir):
    (workdir / ".env").write_text("A=1\n")
    assert find_env_file("") is None


def test_name_match_is_case_sensitive(workdir):
    (workdir / ".ENV").write_text("A=1\n")
    found = find_env_file(".env")
    # case-insensitive filesystems still report the on-disk spelling
    assert found is None


def test_directories_are_ignored(workdir):
    (workdir / ".env").mkdir()
    assert find_env_file() is None


def test_subdirectories_are_not_searched(workdir):
    sub = workdir / "config"
    sub.mkdir()
    (sub / ".env").write_text("A=1\n")
    assert find_env_file() is None


def test_explicit_directory(tmp_path):
    (tmp_path / ".env").write_text("A=1\n")
    assert find_env_file(directory=tmp_path) == tmp_path / ".env"


def test_missing_directory_is_not_found(tmp_path):
    assert find_env_file(directory=tmp_path / "missing") is None


def test_unreadable_directory_is_not_found(tmp_path):
    with patch("dot_env.locator.os.scandir", side_effect=PermissionError("denied")):
        assert find_env_file(directory=tmp_path) is None


def test_load_with_unreadable_directory_returns_false(tmp_path):
    from dot_env import Env, MemoryEnvironmentBackend

    env = Env(backend=MemoryEnvironmentBackend())
    with patch("dot_env.locator.os.scandir", side_effect=PermissionError("denied")):
        assert env.load(directory=tmp_path) is False
