import os
import tempfile
from pathlib import Path


class FileUserTable:
    """Plain-text user table on the local filesystem (implements UserTablePort)."""

    def __init__(self, path: str | Path, encoding: str = "utf-8", atomic_writes: bool = True):
        self.path = Path(path)
        self.encoding = encoding
        self.atomic_writes = atomic_writes

    def exists(self) -> bool:
        return self.path.is_file()

    def read_lines(self) -> list[str]:
        if not self.exists():
            return []
        # Undecodable bytes survive as surrogates so one bad line cannot sink the read
        with open(self.path, encoding=self.encoding, errors="surrogateescape") as f:
            # Only the line terminator goes; trailing spaces belong to the last field
            return [line.rstrip("\r\n") for line in f if line.strip()]

    def overwrite(self, text: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if not self.atomic_writes:
            with open(self.path, "w", encoding=self.encoding) as f:
                f.write(text)
            return

        # Write a sibling temp file, then swap it in
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding=self.encoding) as f:
                f.write(text)
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise
