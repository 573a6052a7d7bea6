"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from pathlib import Path


def iter_files(
    directory: Path,
    *,
    follow_symlinks: bool = True,
    on_error: Callable[[OSError], None] | None = None,
) -> Iterator[Path]:
    """Yield every regular file below ``directory``.

    Symlinked directories are descended into when ``follow_symlinks`` is set,
    and symlinked files count as regular files when their target is one.
    Directories that cannot be listed are reported to ``on_error`` and
    skipped. A missing ``directory`` yields nothing.
    """

    for root, _, files in os.walk(str(directory), onerror=on_error, followlinks=follow_symlinks):
        root_path = Path(root)
        for name in files:
            candidate = root_path / name
            try:
                is_file = candidate.is_file()
                if not follow_symlinks and candidate.is_symlink():
                    is_file = False
            except OSError as exc:
                if on_error is not None:
                    on_error(exc)
                continue
            if is_file:
                yield candidate


__all__ = ["iter_files"]
