import logging
import os
from pathlib import Path
import tempfile

from visitorgen.errors import output_root_error

logger = logging.getLogger(__name__)

# ==================================================
# Atomic File Output
# ==================================================

def package_directory(output_root: Path, package: str) -> Path:
    """
    Creates `<output_root>/<package as path>` and returns it.
    """
    directory = Path(output_root).joinpath(*package.split("."))
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise output_root_error(str(directory), exc) from exc
    return directory


def write_atomically(path: Path, text: str) -> Path:
    """
    Replaces `path` with `text` in one step; a failed write leaves the previous
    file untouched and no temporary file behind.
    """
    target = Path(path)
    try:
        fd, temp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
    except OSError as exc:
        raise output_root_error(str(target), exc) from exc

    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(text)
        os.chmod(temp_name, 0o644)
        os.replace(temp_name, target)
    except OSError as exc:
        try:
            os.unlink(temp_name)
        except FileNotFoundError:
            pass
        raise output_root_error(str(target), exc) from exc

    logger.debug("Wrote %d characters to %s", len(text), target)
    return target
