# src/rps_sims/utils/io.py

from __future__ import annotations

from itertools import count
from pathlib import Path


def experiment_dir(root: str | Path, name: str) -> Path:
    """Create (if needed) and return the output folder for one run."""
    path = Path(root) / name
    path.mkdir(parents=True, exist_ok=True)
    return path


def next_free_path(path: str | Path) -> Path:
    """
    First of `path`, `stem_2.ext`, `stem_3.ext`, ... that does not exist yet,
    so repeated runs never overwrite a saved recording or video.
    Multi-part suffixes such as ``.pkl.xz`` stay together.
    """
    path = Path(path)
    if not path.exists():
        return path
    suffix = "".join(path.suffixes)
    stem = path.name[: len(path.name) - len(suffix)] if suffix else path.name
    for i in count(2):
        candidate = path.with_name(f"{stem}_{i}{suffix}")
        if not candidate.exists():
            return candidate
