"""Chooses and runs exactly one execution mode for an invocation."""
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, TextIO

import typer

from swift_formatter import (
    BatchProcessor,
    CacheError,
    ErrorKind,
    FormatOptions,
    FormatterEngine,
    FormatWriteError,
    format_arguments,
    infer_options,
)
from swift_formatter.files import write_text_atomic

from . import exit_codes
from .arguments import RawArguments
from .config import Settings
from .exceptions import CacheIOError, OutputWriteError, ParseError, UsageError
from .help import HELP_TEXT, version_text
from .options import resolve_options
from .paths import CacheLocation, CachePolicy, clear_cache, expand_path, resolve_paths
from .stdin import StdinSession


@dataclass
class ExecutionResult:
    files_written: int
    files_checked: int
    elapsed: float
    io_failures: int = 0
    parse_failures: int = 0

    @property
    def exit_code(self) -> int:
        if self.io_failures:
            return exit_codes.IO_ERROR
        if self.parse_failures:
            return exit_codes.PARSE_ERROR
        return exit_codes.SUCCESS


def format_elapsed(seconds: float) -> str:
    """Seconds rounded to the nearest 10ms, e.g. '0.12s'."""
    return f"{round(seconds, 2):g}s"


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'' if count == 1 else 's'}"


class Dispatcher:
    def __init__(
        self,
        settings: Settings | None = None,
        stdin: TextIO | None = None,
        echo: Callable[..., None] = typer.echo,
        cwd: Path | None = None,
    ):
        self.settings = settings or Settings()
        self.stdin = stdin
        self.echo = echo
        self.cwd = cwd

    def run(self, arguments: RawArguments) -> ExecutionResult | None:
        """Run one invocation. Errors are raised as SwiftFormatError subclasses."""
        options = resolve_options(arguments)

        if "help" in arguments:
            self.echo(HELP_TEXT)
            return None
        if "version" in arguments:
            self.echo(version_text())
            return None
        if "inferoptions" in arguments:
            self.infer(arguments.get("inferoptions"))
            return None

        paths = resolve_paths(arguments, self.cwd)
        if paths.cache.warning:
            self.echo(f"error: {paths.cache.warning}")
        if paths.cache.policy is CachePolicy.CLEAR:
            self.clear(paths.cache)
            return None

        if not paths.inputs:
            self.run_stdin(options, paths.output)
            return None
        return self.run_batch(options, paths.inputs, paths.output, paths.cache)

    def infer(self, value: str | None) -> None:
        if not value:
            raise UsageError("--inferoptions argument was not a valid path")
        root = expand_path(value, self.cwd)
        self.echo("inferring swiftformat options from source file(s)...")
        start = time.perf_counter()
        count, options = infer_options(root, self.settings.extensions)
        elapsed = time.perf_counter() - start
        self.echo(f"options inferred from {_plural(count, 'file')} in {format_elapsed(elapsed)}")
        self.echo("")
        self.echo(format_arguments(options))
        self.echo("")

    def clear(self, cache: CacheLocation) -> None:
        if cache.path is not None:
            clear_cache(cache)
            self.echo("swiftformat cache cleared")

    def run_batch(
        self,
        options: FormatOptions,
        inputs,
        output: Path | None,
        cache: CacheLocation,
    ) -> ExecutionResult:
        self.echo("running swiftformat...")
        start = time.perf_counter()
        processor = BatchProcessor(options, cache_path=cache.path, extensions=self.settings.extensions)
        try:
            results = processor.process(inputs, output)
        except FormatWriteError as e:
            raise OutputWriteError(str(e)) from e
        except CacheError as e:
            raise CacheIOError(str(e)) from e
        elapsed = time.perf_counter() - start

        for warning in results.warnings:
            self.echo(f"error: {warning}")
        for error in results.errors:
            self.echo(f"error: {error.message}")
        self.echo(
            f"swiftformat completed. {results.written}/{_plural(results.checked, 'file')} "
            f"updated in {format_elapsed(elapsed)}"
        )
        return ExecutionResult(
            files_written=results.written,
            files_checked=results.checked,
            elapsed=round(elapsed, 2),
            io_failures=results.count(ErrorKind.IO),
            parse_failures=results.count(ErrorKind.PARSE),
        )

    def run_stdin(self, options: FormatOptions, output: Path | None) -> None:
        engine = FormatterEngine(options)

        def format_and_write(text: str) -> str | None:
            result = engine.format_string(text)
            if result.errors:
                raise ParseError("could not parse input")
            if output is None:
                return result.source
            try:
                write_text_atomic(output, result.source)
            except FormatWriteError as e:
                raise OutputWriteError(f"failed to write file: {output}") from e
            return None

        session = StdinSession(
            self.stdin if self.stdin is not None else sys.stdin,
            format_and_write,
            probe_timeout=self.settings.stdin_probe_timeout,
            timeout=self.settings.stdin_timeout,
        )
        session.start()
        if not session.wait_for_input():
            # Nothing piped in: show usage instead of blocking on a terminal
            self.echo(HELP_TEXT)
            return

        formatted = session.result()
        if output is not None:
            self.echo("swiftformat completed successfully")
        elif formatted:
            self.echo(formatted, nl=not formatted.endswith(options.linebreak))
