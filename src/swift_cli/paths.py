"""Resolves input, output and cache locations from raw arguments."""
import os
from enum import Enum
from pathlib import Path

from platformdirs import user_cache_dir
from pydantic import BaseModel, ConfigDict, model_validator

from .arguments import RawArguments
from .exceptions import CacheIOError, UsageError

CACHE_DIRECTORY_NAME = "swiftformat"
DEFAULT_CACHE_FILENAME = "swiftformat.cache"


class CachePolicy(str, Enum):
    DEFAULT = "default"
    EXPLICIT = "explicit"
    DISABLED = "disabled"
    CLEAR = "clear"


class CacheLocation(BaseModel):
    model_config = ConfigDict(frozen=True)

    policy: CachePolicy
    path: Path | None = None
    warning: str | None = None


class ResolvedPaths(BaseModel):
    model_config = ConfigDict(frozen=True)

    inputs: list[Path]
    output: Path | None = None
    cache: CacheLocation

    @model_validator(mode="after")
    def _single_input_for_output(self) -> "ResolvedPaths":
        if self.output is not None and len(self.inputs) > 1:
            raise ValueError("output location requires exactly one input location")
        return self


def expand_path(path: str, cwd: Path | None = None) -> Path:
    """Expand '~' and make path absolute against cwd. The path need not exist."""
    base = Path(cwd) if cwd is not None else Path.cwd()
    return Path(os.path.normpath(base / os.path.expanduser(path)))


def default_cache_directory() -> Path:
    return Path(user_cache_dir()) / CACHE_DIRECTORY_NAME


def _default_location(policy: CachePolicy) -> CacheLocation:
    directory = default_cache_directory()
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        fallback = CachePolicy.CLEAR if policy is CachePolicy.CLEAR else CachePolicy.DISABLED
        return CacheLocation(
            policy=fallback,
            warning=f"failed to create cache directory at: {directory}, {e.strerror or e}",
        )
    return CacheLocation(policy=policy, path=directory / DEFAULT_CACHE_FILENAME)


def resolve_cache(value: str | None, cwd: Path | None = None) -> CacheLocation:
    """Turn the --cache value (or its absence) into a cache location.

    A directory that cannot be created disables caching and carries a
    warning instead of failing the run.
    """
    if value is None:
        return _default_location(CachePolicy.DEFAULT)
    if value == "":
        raise UsageError("--cache option expects a value.")
    if value == "ignore":
        return CacheLocation(policy=CachePolicy.DISABLED)
    if value == "clear":
        return _default_location(CachePolicy.CLEAR)
    path = expand_path(value, cwd)
    if path.is_dir():
        path = path / DEFAULT_CACHE_FILENAME
    return CacheLocation(policy=CachePolicy.EXPLICIT, path=path)


def clear_cache(location: CacheLocation) -> bool:
    """Delete the cache file if present. Returns whether a file was removed."""
    if location.path is None or not location.path.exists():
        return False
    try:
        location.path.unlink()
    except OSError as e:
        raise CacheIOError(f"failed to delete cache file at: {location.path}") from e
    return True


def resolve_inputs(arguments: RawArguments, cwd: Path | None = None) -> list[Path]:
    return [expand_path(arguments.positional(n), cwd) for n in range(1, len(arguments.inputs) + 1)]


def resolve_output(inputs: list[Path], value: str | None, cwd: Path | None = None) -> Path | None:
    if value is None:
        return None
    if value == "":
        raise UsageError("--output option expects a value.")
    if len(inputs) > 1:
        raise UsageError("--output argument is only valid for a single input file")
    return expand_path(value, cwd)


def resolve_paths(arguments: RawArguments, cwd: Path | None = None) -> ResolvedPaths:
    """Resolve inputs, output and cache in that order; usage errors come before any filesystem change."""
    inputs = resolve_inputs(arguments, cwd)
    output = resolve_output(inputs, arguments.get("output"), cwd)
    cache_value = arguments.get("cache")
    if cache_value == "":
        raise UsageError("--cache option expects a value.")
    return ResolvedPaths(inputs=inputs, output=output, cache=resolve_cache(cache_value, cwd))
