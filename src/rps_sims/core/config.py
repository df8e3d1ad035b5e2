# src/rps_sims/core/config.py

from __future__ import annotations
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Iterator, Mapping

from .entity import EntityType, DEFAULT_SPEED, radius_for_viewport

# accepted spellings for the per-type counts
_COUNT_KEYS = {
    "count_rock": ("count_rock", "countRock", "initialRock", "rock"),
    "count_paper": ("count_paper", "countPaper", "initialPaper", "paper"),
    "count_scissors": ("count_scissors", "countScissors", "initialScissors", "scissors"),
}


@dataclass
class GameConfig:
    """How many entities of each type to spawn. Negative counts mean zero."""
    count_rock: int = 10
    count_paper: int = 10
    count_scissors: int = 10

    def __post_init__(self):
        self.count_rock = max(int(self.count_rock), 0)
        self.count_paper = max(int(self.count_paper), 0)
        self.count_scissors = max(int(self.count_scissors), 0)

    def counts(self) -> Iterator[tuple[EntityType, int]]:
        yield EntityType.ROCK, self.count_rock
        yield EntityType.PAPER, self.count_paper
        yield EntityType.SCISSORS, self.count_scissors

    @property
    def total(self) -> int:
        return self.count_rock + self.count_paper + self.count_scissors

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "GameConfig":
        kwargs = {}
        for name, aliases in _COUNT_KEYS.items():
            for key in aliases:
                if key in data and data[key] is not None:
                    kwargs[name] = data[key]
                    break
        return cls(**kwargs)


@dataclass
class SimConfig:
    width: float = 800.0
    height: float = 600.0
    viewport: str = "normal"          # "normal" or "compact"
    radius: float | None = None       # None -> viewport default
    speed: float = DEFAULT_SPEED
    spawn_margin: float = 20.0
    max_dt: float | None = 0.1        # cap on a single step, None = uncapped
    game: GameConfig = field(default_factory=GameConfig)
    seed: int | None = None

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Arena size must be positive, got {self.width}x{self.height}")
        if self.radius is not None and self.radius <= 0:
            raise ValueError(f"radius must be > 0, got {self.radius}")
        if self.max_dt is not None and self.max_dt <= 0:
            raise ValueError(f"max_dt must be > 0 or None, got {self.max_dt}")
        # validates the viewport name
        radius_for_viewport(self.viewport)
        if min(self.width, self.height) < 2 * self.entity_radius:
            raise ValueError(
                f"Arena {self.width}x{self.height} is smaller than one entity (radius {self.entity_radius})"
            )

    @property
    def entity_radius(self) -> float:
        if self.radius is not None:
            return float(self.radius)
        return radius_for_viewport(self.viewport)

    @classmethod
    def from_args(cls, args, base: "SimConfig | None" = None) -> "SimConfig":
        """
        Build from an argparse namespace. Flags left at None keep the value
        from `base` (e.g. a loaded preset), or the dataclass default.
        """
        kwargs = asdict(base) if base is not None else {}
        for f in fields(cls):
            name = f.name
            #first special cases
            if name == 'game':
                game = dict(kwargs.get('game') or {})
                for key in _COUNT_KEYS:
                    if getattr(args, key, None) is not None:
                        game[key] = getattr(args, key)
                kwargs[name] = GameConfig.from_mapping(game)
            #all other cases
            elif getattr(args, name, None) is not None:
                kwargs[name] = getattr(args, name)
        return cls(**kwargs)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SimConfig":
        """Build from a resolved preset dict (see utils.preset_loader)."""
        names = {f.name for f in fields(cls)}
        unknown = set(data) - names
        if unknown:
            raise ValueError(f"Unknown SimConfig keys: {sorted(unknown)}")
        kwargs = dict(data)
        if "game" in kwargs:
            kwargs["game"] = GameConfig.from_mapping(kwargs["game"] or {})
        return cls(**kwargs)
