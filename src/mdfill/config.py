from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Union

import tomlkit

__all__ = ["MdfillConfig", "load_config", "default_check_invariants"]

# Mirrors NODE_ENV: anything other than "production" keeps the checks on.
ENV_VAR = "MDFILL_ENV"


def default_check_invariants() -> bool:
    return os.environ.get(ENV_VAR, "").strip().lower() != "production"


@dataclass
class MdfillConfig:
    """
    Configuration for mdfill. Pass it explicitly to the functions that take one.
    """
    # Run check_no_adjacent_whitespace() after every split_text() call.
    check_invariants: bool = field(default_factory=default_check_invariants)

    # Preprocessing steps applied by mdfill.preprocess.preprocess()
    merge_texts: bool = True
    split_sentences: bool = True

    # Preset handed to markdown-it-py
    markdown_preset: str = "commonmark"
    # Turn bare URLs into links (needs linkify-it-py)
    linkify: bool = True

    def as_dict(self):
        return self.__dict__


def load_config(path: Union[str, Path]) -> MdfillConfig:
    """Return a :class:`MdfillConfig` initialised from *path* (TOML).

    Unknown keys are ignored; a ``[mdfill]`` table is used when present,
    otherwise the top level of the document.  A value whose type differs
    from the field default (``linkify = "no"``) raises :class:`TypeError`.
    """
    cfg = MdfillConfig()
    toml_data = tomlkit.parse(Path(path).read_text(encoding="utf-8"))
    table = toml_data.get("mdfill", toml_data)

    # Only apply keys that actually exist on MdfillConfig to avoid surprises.
    valid_fields = {f.name for f in fields(cfg)}
    for key, val in table.items():
        if key not in valid_fields:
            continue
        value = val.unwrap() if hasattr(val, "unwrap") else val
        expected = type(getattr(cfg, key))
        if type(value) is not expected:
            raise TypeError(
                f"{path}: {key} must be {expected.__name__}, got {type(value).__name__}"
            )
        setattr(cfg, key, value)
    return cfg
