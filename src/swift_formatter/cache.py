import hashlib
import sqlite3
from dataclasses import asdict
from pathlib import Path
from typing import Optional

from .errors import CacheError
from .models import FormatOptions


def options_signature(options: FormatOptions) -> str:
    """Stable text form of the options; a change invalidates every cached entry."""
    return repr(sorted((key, str(value)) for key, value in asdict(options).items()))


class FormatCache:
    """SQLite store of the content hash each file had after it was last formatted."""

    def __init__(self, cache_path: Path, options: FormatOptions):
        self.cache_path = Path(cache_path)
        self.signature = options_signature(options)
        try:
            self.cache_path.parent.mkdir(parents=True, exist_ok=True)
            self.conn = sqlite3.connect(str(self.cache_path))
            with self.conn:
                self.conn.execute("""
                    CREATE TABLE IF NOT EXISTS files (
                        file_path TEXT PRIMARY KEY,
                        file_hash TEXT NOT NULL
                    )
                """)
        except (OSError, sqlite3.Error) as e:
            raise CacheError(f"failed to open cache file at: {self.cache_path}, {e}") from e

    def _hash(self, text: str) -> str:
        return hashlib.md5((self.signature + "\0" + text).encode("utf-8")).hexdigest()

    def get_file_hash(self, file_path: Path) -> Optional[str]:
        row = self.conn.execute(
            "SELECT file_hash FROM files WHERE file_path = ?", (str(Path(file_path).resolve()),)
        ).fetchone()
        return row[0] if row else None

    def is_current(self, file_path: Path, text: str) -> bool:
        """True when text is exactly what this cache last recorded for file_path."""
        return self.get_file_hash(file_path) == self._hash(text)

    def store(self, file_path: Path, text: str) -> None:
        try:
            with self.conn:
                self.conn.execute(
                    "INSERT OR REPLACE INTO files (file_path, file_hash) VALUES (?, ?)",
                    (str(Path(file_path).resolve()), self._hash(text)),
                )
        except sqlite3.Error as e:
            raise CacheError(f"failed to update cache file at: {self.cache_path}, {e}") from e

    def close(self) -> None:
        self.conn.close()
