"""Load Elo system definitions from TOML files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from domain.config_base import BaseSystemConfig, load_system_config, load_system_configs
from domain.ratings.elo.calculator import (
    DEFAULT_INITIAL_RATING,
    DEFAULT_K_FACTOR,
    DEFAULT_SCALE_FACTOR,
    EloParameters,
)


@dataclass(frozen=True)
class EloSystemConfig(BaseSystemConfig):
    """Configuration for one Elo ladder."""

    parameters: EloParameters

    def as_config_json(self) -> dict[str, Any]:
        return {
            "initial_rating": self.parameters.initial_rating,
            "k_factor": self.parameters.k_factor,
            "scale_factor": self.parameters.scale_factor,
        }


def load_elo_system_configs(config_dir: Path) -> list[EloSystemConfig]:
    """Load and validate all Elo system TOML config files in a directory."""
    return load_system_configs(
        config_dir,
        _parse_elo_system_config,
        duplicate_name_label="elo",
    )


def load_elo_system_config(file_path: Path) -> EloSystemConfig:
    """Load and validate a single Elo system TOML config file."""
    return load_system_config(file_path, _parse_elo_system_config)


def _parse_elo_system_config(raw: dict[str, Any], file_path: Path) -> EloSystemConfig:
    system_raw = raw.get("system", {})
    elo_raw = raw.get("elo", {})

    name = str(system_raw.get("name", "")).strip()
    if not name:
        raise ValueError(f"{file_path}: [system].name is required")

    description_value = system_raw.get("description")
    description = None if description_value is None else str(description_value)

    initial_rating_value = elo_raw.get("initial_rating", DEFAULT_INITIAL_RATING)
    if isinstance(initial_rating_value, float) and not initial_rating_value.is_integer():
        raise ValueError(f"{file_path}: [elo].initial_rating must be a whole number")

    parameters = EloParameters(
        initial_rating=int(initial_rating_value),
        k_factor=float(elo_raw.get("k_factor", DEFAULT_K_FACTOR)),
        scale_factor=float(elo_raw.get("scale_factor", DEFAULT_SCALE_FACTOR)),
    )
    _validate_parameters(file_path=file_path, parameters=parameters)

    return EloSystemConfig(
        name=name,
        description=description,
        file_path=file_path,
        parameters=parameters,
    )


def _validate_parameters(*, file_path: Path, parameters: EloParameters) -> None:
    if parameters.k_factor <= 0.0:
        raise ValueError(f"{file_path}: [elo].k_factor must be > 0")
    if parameters.scale_factor <= 0.0:
        raise ValueError(f"{file_path}: [elo].scale_factor must be > 0")
