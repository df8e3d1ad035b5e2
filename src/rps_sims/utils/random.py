# src/rps_sims/utils/random.py

from __future__ import annotations

import zlib
from typing import Dict
import numpy as np

# spawn positions and initial headings draw from separate streams, so
# changing one population count does not reshuffle every heading
SPAWN_STREAM = "spawn"
HEADING_STREAM = "heading"

_seed: int | None = None
_streams: Dict[str, np.random.Generator] = {}


def seed_all(seed: int | None) -> None:
    """
    Reseed the game. Every named stream restarts from `seed` on its next
    draw; None gives fresh entropy (a different game every run).
    """
    global _seed
    _seed = None if seed is None else int(seed)
    _streams.clear()


def current_seed() -> int | None:
    return _seed


def rng(stream: str = SPAWN_STREAM) -> np.random.Generator:
    """Generator for a named stream. Draws within a stream are order dependent."""
    gen = _streams.get(stream)
    if gen is None:
        if _seed is None:
            gen = np.random.default_rng()
        else:
            gen = np.random.default_rng(
                np.random.SeedSequence(_seed, spawn_key=(_stream_key(stream),))
            )
        _streams[stream] = gen
    return gen


def _stream_key(stream: str) -> int:
    # crc32 instead of hash(), which is salted per process
    return zlib.crc32(stream.encode("utf-8"))
