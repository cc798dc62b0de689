import os
import tempfile
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

from app.logging.logger import Log


@contextmanager
def scoped_temp_file(
    data: bytes,
    *,
    prefix: str,
    suffix: str = "",
    directory: str | None = None,
) -> Generator[Path, None, None]:
    """Write ``data`` to a private temp file and delete it on exit.

    The file is removed whether the body returns or raises.
    """
    fd, name = tempfile.mkstemp(prefix=prefix, suffix=suffix, dir=directory or None)
    path = Path(name)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        yield path
    finally:
        path.unlink(missing_ok=True)
        Log.debug(f"Removed temp file {path.name}")
