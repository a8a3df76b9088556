from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml


class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


def load_yaml(path: str | Path) -> DotDict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return DotDict(data)


def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg


@dataclass
class SolverConfig:
    block_side: int = 3
    log_level: str = "INFO"
    json: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SolverConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        cfg = cls(**dict(data))
        cfg.block_side = int(cfg.block_side)
        cfg.log_level = str(cfg.log_level).upper()
        return cfg


def load_config(path: str | Path | None = None, **overrides) -> SolverConfig:
    """File values (if any) first, then non-None overrides on top."""
    cfg: Dict[str, Any] = dict(load_yaml(path)) if path else {}
    return SolverConfig.from_mapping(merge_overrides(cfg, **overrides))
