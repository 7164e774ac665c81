from dataclasses import dataclass
import json
import math
from pathlib import Path
from typing import Any, Dict, Union

import jmespath

import hexapod.constants as constants
from hexapod import labels


class ConfigurationError(ValueError):
    """Raised when a parameter file or value is unusable."""


@dataclass(frozen=True)
class HexapodParameters:
    """Geometry and safety thresholds of the hexapod. Read once, never mutated."""

    body_radius: float = constants.BODY_RADIUS
    default_body_height: float = constants.BODY_HEIGHT

    coxa_length: float = constants.COXA_LENGTH
    coxa_radius: float = constants.COXA_RADIUS
    femur_length: float = constants.FEMUR_LENGTH
    tibia_length: float = constants.TIBIA_LENGTH

    floor_margin: float = constants.FLOOR_MARGIN

    leg_count: int = constants.LEG_COUNT
    leg_interval_deg: float = constants.LEG_INTERVAL_DEG

    # jmespath expression for every field, relative to the JSON document root
    BODY_RADIUS = 'hexapod.body.radius'
    BODY_HEIGHT = 'hexapod.body.height'
    COXA_LENGTH = 'hexapod.coxa.length'
    COXA_RADIUS = 'hexapod.coxa.radius'
    FEMUR_LENGTH = 'hexapod.femur.length'
    TIBIA_LENGTH = 'hexapod.tibia.length'
    FLOOR_MARGIN = 'hexapod.floor_margin'
    LEG_COUNT = 'hexapod.legs.count'
    LEG_INTERVAL = 'hexapod.legs.interval'

    def __post_init__(self):
        for name in ('body_radius', 'default_body_height', 'coxa_length', 'coxa_radius', 'floor_margin'):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or not math.isfinite(value) or value < 0:
                raise ConfigurationError(labels.CONFIG_INVALID_VALUE.format(name, value))

        for name in ('femur_length', 'tibia_length', 'leg_interval_deg'):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or not math.isfinite(value) or value <= 0:
                raise ConfigurationError(labels.CONFIG_INVALID_VALUE.format(name, value))

        if not isinstance(self.leg_count, int) or self.leg_count <= 0:
            raise ConfigurationError(labels.CONFIG_INVALID_VALUE.format('leg_count', self.leg_count))

    @property
    def max_reach(self) -> float:
        """Longest femur pivot to foot distance (F + T)."""
        return self.femur_length + self.tibia_length

    @property
    def min_reach(self) -> float:
        """Shortest femur pivot to foot distance |F - T|."""
        return abs(self.femur_length - self.tibia_length)

    @classmethod
    def _field_paths(cls) -> Dict[str, str]:
        return {
            'body_radius': cls.BODY_RADIUS,
            'default_body_height': cls.BODY_HEIGHT,
            'coxa_length': cls.COXA_LENGTH,
            'coxa_radius': cls.COXA_RADIUS,
            'femur_length': cls.FEMUR_LENGTH,
            'tibia_length': cls.TIBIA_LENGTH,
            'floor_margin': cls.FLOOR_MARGIN,
            'leg_count': cls.LEG_COUNT,
            'leg_interval_deg': cls.LEG_INTERVAL,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HexapodParameters':
        """
        Build parameters from a nested configuration document.

        Keys missing from the document keep their defaults, e.g.
        ``{"hexapod": {"femur": {"length": 0.6}}}`` only overrides the femur.
        """
        values = {}
        for field_name, search_pattern in cls._field_paths().items():
            value = jmespath.search(search_pattern, data)
            if value is not None:
                values[field_name] = value

        return cls(**values)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> 'HexapodParameters':
        """Load parameters from a JSON file. Raises FileNotFoundError if it is missing."""
        json_path = Path(path)
        if not json_path.exists():
            raise FileNotFoundError(f"Hexapod parameters file not found: {json_path}")

        with open(json_path, 'r', encoding='utf-8') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(labels.CONFIG_INVALID_JSON.format(json_path, e)) from e

        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Nested document that ``from_dict`` reads back into equal parameters."""
        document: Dict[str, Any] = {}
        for field_name, path in self._field_paths().items():
            *parents, leaf = path.split('.')
            node = document
            for key in parents:
                node = node.setdefault(key, {})
            node[leaf] = getattr(self, field_name)
        return document
