"""Moving or copying matched files into a target directory."""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Sequence
from pathlib import Path

from .config import TransferOptions

logger = logging.getLogger(__name__)


def destination_for(
    src: str | Path,
    source_root: str | Path,
    target_root: str | Path,
    opts: TransferOptions,
) -> Path | None:
    """Return where ``src`` goes under ``target_root``, or None for a path with no name.

    When the destination already exists, ``opts.conflict_suffix`` is added to
    the file stem.
    """
    src = Path(src)
    rel: Path | None = None
    if opts.preserve_structure:
        try:
            rel = src.relative_to(source_root)
        except ValueError:
            rel = None
    if rel is None:
        if not src.name:
            return None
        rel = Path(src.name)

    dest = Path(target_root) / rel
    if dest.exists():
        stem = dest.stem or "file"
        dest = dest.with_name(f"{stem}{opts.conflict_suffix}{dest.suffix}")
        logger.info("Conflict detected, renaming to %s", dest)
    return dest


def move_files(
    files: Sequence[Path],
    source_root: str | Path,
    target_root: str | Path,
    opts: TransferOptions,
    dry_run: bool,
) -> None:
    """Move or copy each file into ``target_root``; failures are logged."""
    verb = "copy" if opts.copy else "move"
    for src in map(Path, files):
        dest = destination_for(src, source_root, target_root, opts)
        if dest is None:
            logger.error("Skipping invalid path: %s", src)
            continue

        if dry_run:
            logger.info("[DRY RUN] Would create directory %s", dest.parent)
            logger.info("[DRY RUN] Would %s %s → %s", verb, src, dest)
            continue

        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.error("Failed to create directory %s: %s", dest.parent, exc)
            continue

        try:
            if opts.copy:
                shutil.copy(src, dest)
            else:
                os.replace(src, dest)
        except OSError as exc:
            logger.error("Failed to %s %s: %s", verb, src, exc)
        else:
            logger.info("%s → %s", "Copied" if opts.copy else "Moved", dest)