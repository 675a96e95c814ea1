from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

from .cache import FormatCache
from .engine import FormatterEngine
from .errors import CacheError
from .files import iter_source_files, read_source, write_text_atomic
from .models import BatchResults, ErrorKind, FileError, FormatOptions

DEFAULT_EXTENSIONS = (".swift",)


class BatchProcessor:
    """Formats every source file under the given inputs.

    Results go back to the input files, or to ``output`` when one is given
    (a file for a single file input, otherwise a directory mirroring the
    input tree). With a cache path, files whose content matches what was
    last written with the same options are skipped without being parsed.
    """

    def __init__(
        self,
        options: FormatOptions,
        cache_path: Optional[Path] = None,
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    ):
        self.options = options
        self.cache_path = cache_path
        self.extensions = tuple(extensions)
        self.engine = FormatterEngine(options)

    def process(self, inputs: List[Path], output: Optional[Path] = None) -> BatchResults:
        results = BatchResults()
        cache = self._open_cache(results)
        try:
            for input_path in inputs:
                if not input_path.exists():
                    results.errors.append(FileError(input_path, f"file not found at: {input_path}"))
                    continue
                for source_path, target_path in self._targets(input_path, output):
                    self._process_file(source_path, target_path, cache, results)
        finally:
            if cache is not None:
                cache.close()
        return results

    def _open_cache(self, results: BatchResults) -> Optional[FormatCache]:
        """Open the cache, or run without one when it cannot be opened."""
        if not self.cache_path:
            return None
        try:
            return FormatCache(self.cache_path, self.options)
        except CacheError as e:
            results.warnings.append(str(e))
            return None

    def _targets(self, input_path: Path, output: Optional[Path]) -> Iterator[Tuple[Path, Path]]:
        if input_path.is_file():
            if output is None:
                yield input_path, input_path
            elif output.is_dir():
                yield input_path, output / input_path.name
            else:
                yield input_path, output
            return
        for source_path in iter_source_files(input_path, self.extensions):
            if output is None:
                yield source_path, source_path
            else:
                yield source_path, output / source_path.relative_to(input_path)

    def _process_file(
        self, source_path: Path, target_path: Path, cache: Optional[FormatCache], results: BatchResults
    ) -> None:
        results.checked += 1
        try:
            source = read_source(source_path)
        except (OSError, UnicodeDecodeError) as e:
            results.errors.append(FileError(source_path, f"failed to read file: {source_path}, {e}"))
            return

        in_place = target_path == source_path
        if cache is not None and in_place and cache.is_current(source_path, source):
            return

        result = self.engine.format_string(source)
        if result.errors:
            results.errors.append(FileError(source_path, f"{result.errors[0]} in {source_path}", ErrorKind.PARSE))
            return

        if in_place:
            changed = result.source != source
        else:
            changed = self._target_differs(target_path, result.source)
        if changed:
            write_text_atomic(target_path, result.source)
            results.written += 1
        if cache is not None:
            cache.store(target_path, result.source)

    @staticmethod
    def _target_differs(target_path: Path, text: str) -> bool:
        # An unreadable target is overwritten
        try:
            return read_source(target_path) != text
        except (OSError, UnicodeDecodeError):
            return True
