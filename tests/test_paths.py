from pathlib import Path

import pytest

from swift_cli import paths
from swift_cli.arguments import RawArguments
from swift_cli.exceptions import CacheIOError, UsageError
from swift_cli.paths import (
    DEFAULT_CACHE_FILENAME,
    CacheLocation,
    CachePolicy,
    clear_cache,
    expand_path,
    resolve_cache,
    resolve_paths,
)


@pytest.fixture
def cache_root(tmp_path, monkeypatch):
    root = tmp_path / "user-cache"
    monkeypatch.setattr(paths, "user_cache_dir", lambda: str(root))
    return root


def test_expand_home(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert expand_path("~/x") == tmp_path / "x"


def test_expand_relative_to_cwd(tmp_path):
    assert expand_path("y/z", cwd=tmp_path) == tmp_path / "y" / "z"


def test_expand_absolute_ignores_cwd(tmp_path):
    assert expand_path("/abs/file.swift", cwd=tmp_path) == Path("/abs/file.swift")


def test_expand_uses_process_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert expand_path("a.swift") == Path.cwd() / "a.swift"


def test_output_with_multiple_inputs_is_usage_error(tmp_path, cache_root):
    arguments = RawArguments(flags={"output": "out"}, inputs=("a.swift", "b.swift"))
    with pytest.raises(UsageError, match="only valid for a single input file"):
        resolve_paths(arguments, cwd=tmp_path)
    assert not (tmp_path / "out").exists()


def test_output_with_single_input(tmp_path, cache_root):
    arguments = RawArguments(flags={"output": "out.swift"}, inputs=("a.swift",))
    resolved = resolve_paths(arguments, cwd=tmp_path)
    assert resolved.inputs == [tmp_path / "a.swift"]
    assert resolved.output == tmp_path / "out.swift"


def test_inputs_keep_order(tmp_path, cache_root):
    arguments = RawArguments(inputs=("b", "a", "c"))
    resolved = resolve_paths(arguments, cwd=tmp_path)
    assert resolved.inputs == [tmp_path / "b", tmp_path / "a", tmp_path / "c"]
    assert resolved.output is None


def test_empty_output_is_usage_error(tmp_path, cache_root):
    with pytest.raises(UsageError, match="--output option expects a value"):
        resolve_paths(RawArguments(flags={"output": ""}, inputs=("a",)), cwd=tmp_path)


def test_default_cache_location(cache_root):
    location = resolve_cache(None)
    assert location.policy is CachePolicy.DEFAULT
    assert location.path == cache_root / "swiftformat" / DEFAULT_CACHE_FILENAME
    assert (cache_root / "swiftformat").is_dir()
    assert not location.path.exists()


def test_ignore_touches_nothing(cache_root):
    location = resolve_cache("ignore")
    assert location.policy is CachePolicy.DISABLED
    assert location.path is None
    assert not cache_root.exists()


def test_clear_resolves_default_location(cache_root):
    location = resolve_cache("clear")
    assert location.policy is CachePolicy.CLEAR
    assert location.path == cache_root / "swiftformat" / DEFAULT_CACHE_FILENAME


def test_explicit_directory_gets_default_filename(tmp_path, cache_root):
    target = tmp_path / "caches"
    target.mkdir()
    location = resolve_cache(str(target))
    assert location.policy is CachePolicy.EXPLICIT
    assert location.path == target / DEFAULT_CACHE_FILENAME


def test_explicit_file_path(tmp_path, cache_root):
    location = resolve_cache("my.cache", cwd=tmp_path)
    assert location.path == tmp_path / "my.cache"


def test_empty_cache_value_is_usage_error(cache_root):
    with pytest.raises(UsageError, match="--cache option expects a value"):
        resolve_cache("")


def test_cache_directory_failure_disables_cache(tmp_path, monkeypatch):
    blocker = tmp_path / "not-a-directory"
    blocker.write_text("x")
    monkeypatch.setattr(paths, "user_cache_dir", lambda: str(blocker))
    location = resolve_cache(None)
    assert location.policy is CachePolicy.DISABLED
    assert location.path is None
    assert "failed to create cache directory" in location.warning


def test_clear_cache_removes_file(tmp_path):
    cache_file = tmp_path / DEFAULT_CACHE_FILENAME
    cache_file.write_text("data")
    assert clear_cache(CacheLocation(policy=CachePolicy.CLEAR, path=cache_file)) is True
    assert not cache_file.exists()


def test_clear_cache_without_file(tmp_path):
    location = CacheLocation(policy=CachePolicy.CLEAR, path=tmp_path / "missing.cache")
    assert clear_cache(location) is False


def test_clear_cache_failure(tmp_path):
    directory = tmp_path / "cache-dir"
    directory.mkdir()
    (directory / "inner").write_text("x")
    with pytest.raises(CacheIOError, match="failed to delete cache file"):
        clear_cache(CacheLocation(policy=CachePolicy.CLEAR, path=directory))
