import os
import tempfile
from pathlib import Path
from typing import Iterable, Iterator

from .errors import FormatWriteError


def iter_source_files(root: Path, extensions: Iterable[str]) -> Iterator[Path]:
    """Yield source files under root in a stable order, skipping hidden entries."""
    suffixes = {e.lower() for e in extensions}
    if root.is_file():
        yield root
        return
    for path in sorted(root.rglob("*")):
        relative = path.relative_to(root)
        if any(part.startswith(".") for part in relative.parts):
            continue
        if path.is_file() and path.suffix.lower() in suffixes:
            yield path


def read_source(path: Path) -> str:
    # newline="" keeps \r\n and \r intact so linebreaks can be inferred and normalized
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def write_text_atomic(path: Path, text: str) -> None:
    """Write text next to path and move it into place, so readers never see a partial file."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(text)
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
    except OSError as e:
        raise FormatWriteError(path, e.strerror or str(e)) from e
