"""All-or-nothing writing of the two make files."""
from __future__ import annotations

import os
import tempfile
from pathlib import Path

import structlog

logger = structlog.get_logger()

MAKE_FILENAME = "drupal-org.make"
CORE_MAKE_FILENAME = "drupal-org-core.make"


def make_paths(output_dir: Path) -> tuple[Path, Path]:
    """Return the (full, core) make file paths inside output_dir."""
    return output_dir / MAKE_FILENAME, output_dir / CORE_MAKE_FILENAME


def _write_temp(directory: Path, target: Path, text: str) -> Path:
    fd, name = tempfile.mkstemp(dir=directory, prefix=f".{target.name}.", suffix=".tmp")
    path = Path(name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
        # mkstemp creates owner-only files
        path.chmod(0o644)
    except BaseException:
        path.unlink(missing_ok=True)
        raise
    return path


def _restore(path: Path, previous: bytes | None) -> None:
    if previous is None:
        path.unlink(missing_ok=True)
    else:
        path.write_bytes(previous)


def write_make_files(make_text: str, core_text: str, output_dir: Path) -> tuple[Path, Path]:
    """Write drupal-org.make and drupal-org-core.make.

    Both files are staged as temporaries in output_dir and renamed into
    place only once both are complete. Existing files are overwritten.

    Args:
        make_text: Encoded full make file.
        core_text: Encoded core-only make file.
        output_dir: Directory receiving both files.

    Returns:
        Tuple of (full, core) paths written.

    Raises:
        OSError: If either file cannot be written.
        UnicodeEncodeError: If the text is not encodable as UTF-8.

    On any failure the temporaries are removed and both targets keep
    their previous content.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    make_path, core_path = make_paths(output_dir)

    staged: list[Path] = []
    previous = make_path.read_bytes() if make_path.exists() else None
    try:
        staged.append(_write_temp(output_dir, make_path, make_text))
        staged.append(_write_temp(output_dir, core_path, core_text))
        os.replace(staged[0], make_path)
        try:
            os.replace(staged[1], core_path)
        except BaseException:
            _restore(make_path, previous)
            raise
    finally:
        # Renamed temporaries no longer exist
        for tmp in staged:
            tmp.unlink(missing_ok=True)

    logger.info("make_files_written", make=str(make_path), core=str(core_path))
    return make_path, core_path
