from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from rps_sims.core.config import SimConfig

PRESET_DIR = Path(__file__).resolve().parent.parent / "presets"


@dataclass(frozen=True)
class LoadedPreset:
    preset_path: Path
    resolved: Dict[str, Any]
    loaded_files: Tuple[Path, ...]  # includes + preset itself

    def to_sim_config(self) -> SimConfig:
        return SimConfig.from_dict(self.resolved)


def _deep_merge(base: Any, override: Any) -> Any:
    """
    Merge override into base and return merged value.

      - dict + dict: recursive merge
      - anything else: override replaces base
    """
    if isinstance(base, dict) and isinstance(override, dict):
        out = dict(base)
        for k, v in override.items():
            out[k] = _deep_merge(out[k], v) if k in out else v
        return out
    if isinstance(override, list):
        return list(override)
    return override


def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML root must be a mapping/dict: {path}")
    return data


def resolve_preset_path(name_or_path: str | Path) -> Path:
    """
    Accept either a path to a YAML file or the bare name of a bundled preset
    (e.g. "classic" -> rps_sims/presets/classic.yaml).
    """
    path = Path(name_or_path).expanduser()
    if path.suffix in (".yaml", ".yml") and path.exists():
        return path.resolve()
    bundled = PRESET_DIR / f"{name_or_path}.yaml"
    if bundled.exists():
        return bundled
    raise FileNotFoundError(f"No preset file or bundled preset named {name_or_path!r}")


def load_preset(preset: str | Path) -> LoadedPreset:
    """
    Load a preset YAML that may contain:

      include:
        - base.yaml

    Included files are merged first, in order; the preset's own keys win.
    """
    preset_path = resolve_preset_path(preset)
    preset_data = _load_yaml(preset_path)

    include_list = preset_data.pop("include", None) or []
    if not isinstance(include_list, list):
        raise ValueError(f"'include' must be a list in {preset_path}")

    loaded: List[Path] = []
    merged: Dict[str, Any] = {}

    for rel in include_list:
        if not isinstance(rel, str):
            raise ValueError(f"include entries must be strings. Got {type(rel)} in {preset_path}")
        inc_path = (preset_path.parent / rel).expanduser().resolve()
        merged = _deep_merge(merged, _load_yaml(inc_path))
        loaded.append(inc_path)

    merged = _deep_merge(merged, preset_data)
    loaded.append(preset_path)

    return LoadedPreset(
        preset_path=preset_path,
        resolved=merged,
        loaded_files=tuple(loaded),
    )
