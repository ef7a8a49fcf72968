"""Atomic file writes (temp file + rename)."""

import os
import tempfile
from pathlib import Path


def atomic_write_text(path: Path, content: str) -> None:
    """Write `content` to `path` so readers see either the old or the new file.

    The temp file is created in the destination directory to stay on the same
    filesystem, then moved into place with os.replace(). On any failure the
    temp file is removed and the existing file is left untouched.

    Raises:
        OSError: If the directory cannot be created or the write/rename fails
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_path = tempfile.mkstemp(
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp",
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise
