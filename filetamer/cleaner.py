"""Cleanup of matched files: deletion or archiving."""

from __future__ import annotations

import contextlib
import logging
import os
import tarfile
import zipfile
import zlib
from collections.abc import Callable, Sequence
from pathlib import Path

from .config import CleanupOptions

logger = logging.getLogger(__name__)

DEFAULT_ARCHIVE = "archive.zip"


def clean(
    files: Sequence[Path],
    source_root: str | Path,
    opts: CleanupOptions,
    dry_run: bool,
) -> None:
    """Delete or archive ``files`` as ``opts`` says; failures are logged."""
    if opts.archive:
        if dry_run:
            logger.info(
                "[DRY RUN] Would archive %d files to %s", len(files), opts.archive_output
            )
            return
        try:
            archive_files(files, source_root, opts)
        except (OSError, ValueError, zlib.error) as exc:
            logger.error("Archive error: %s", exc)
    elif opts.delete:
        for path in files:
            delete_file(path, dry_run)
    else:
        for path in files:
            logger.info("No cleanup action for %s", path)


def delete_file(path: str | Path, dry_run: bool) -> None:
    """Delete one file, or only report it on a dry run; failures are logged."""
    if dry_run:
        logger.info("[DRY RUN] Would delete %s", path)
        return
    try:
        os.remove(path)
    except OSError as exc:
        logger.error("Failed to delete %s: %s", path, exc)
    else:
        logger.info("Deleted %s", path)


def _discard(path: Path, opts: CleanupOptions) -> None:
    if not opts.keep_original:
        with contextlib.suppress(OSError):
            os.remove(path)


def _archive_zip(
    files: Sequence[Path], source_root: Path, opts: CleanupOptions, out_path: Path
) -> None:
    with zipfile.ZipFile(
        out_path,
        "w",
        compression=zipfile.ZIP_DEFLATED,
        compresslevel=opts.compression_level,
    ) as archive:
        for path in map(Path, files):
            archive.write(path, arcname=path.name)
            _discard(path, opts)
            logger.info("Archived %s into %s", path, out_path)


def _tar_into(
    archive: tarfile.TarFile,
    label: str,
    files: Sequence[Path],
    source_root: Path,
    opts: CleanupOptions,
    out_path: Path,
) -> None:
    for path in map(Path, files):
        archive.add(path, arcname=path.relative_to(source_root).as_posix(), recursive=False)
        _discard(path, opts)
        logger.info("Added %s to %s %s", path, label, out_path)


def _archive_tar(
    files: Sequence[Path], source_root: Path, opts: CleanupOptions, out_path: Path
) -> None:
    with tarfile.open(out_path, "w") as archive:
        _tar_into(archive, "TAR", files, source_root, opts, out_path)


def _archive_targz(
    files: Sequence[Path], source_root: Path, opts: CleanupOptions, out_path: Path
) -> None:
    with tarfile.open(out_path, "w:gz", compresslevel=opts.compression_level) as archive:
        _tar_into(archive, "TAR GZ", files, source_root, opts, out_path)


_WRITERS: dict[str, Callable[[Sequence[Path], Path, CleanupOptions, Path], None]] = {
    "zip": _archive_zip,
    "tar": _archive_tar,
    "targz": _archive_targz,
}


def archive_files(
    files: Sequence[Path], source_root: str | Path, opts: CleanupOptions
) -> None:
    """Write ``files`` into an archive of ``opts.archive_format``.

    Raises ValueError for an unknown format and OSError on I/O failure.
    """
    writer = _WRITERS.get(opts.archive_format)
    if writer is None:
        raise ValueError(f"Unsupported archive format: {opts.archive_format}")
    out_path = Path(opts.archive_output) if opts.archive_output is not None else Path(DEFAULT_ARCHIVE)
    writer(files, Path(source_root), opts, out_path)