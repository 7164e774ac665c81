from dataclasses import dataclass, replace
from enum import Enum
import math
from typing import Iterable, Tuple

import numpy as np

POSE_PARAMETERS = ('x', 'y', 'z', 'roll', 'pitch', 'yaw')
JOINT_PARAMETERS = ('gamma', 'beta', 'alpha')
POINT_PARAMETERS = ('x', 'y', 'z')


@dataclass
class Point:
    """A 3D point or vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: 'Point') -> 'Point':
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: 'Point') -> 'Point':
        return Point(self.x - other.x, self.y - other.y, self.z - other.z)

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def scale(self, factor: float) -> 'Point':
        return Point(self.x * factor, self.y * factor, self.z * factor)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def distance_to(self, other: 'Point') -> float:
        return (self - other).length()

    def lerp(self, other: 'Point', ratio: float) -> 'Point':
        return Point(
            self.x + (other.x - self.x) * ratio,
            self.y + (other.y - self.y) * ratio,
            self.z + (other.z - self.z) * ratio,
        )

    def copy(self) -> 'Point':
        return Point(self.x, self.y, self.z)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    @classmethod
    def from_array(cls, values: Iterable[float]) -> 'Point':
        x, y, z = (float(v) for v in list(values)[:3])
        return cls(x, y, z)

    def is_close(self, other: 'Point', tol: float) -> bool:
        return abs(self.x - other.x) <= tol and abs(self.y - other.y) <= tol and abs(self.z - other.z) <= tol


@dataclass
class Pose:
    """Body position and orientation. Angles are in radians, applied roll, pitch, yaw (XYZ)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    roll: float = 0.0
    pitch: float = 0.0
    yaw: float = 0.0

    @property
    def position(self) -> Point:
        return Point(self.x, self.y, self.z)

    @property
    def orientation(self) -> Tuple[float, float, float]:
        return self.roll, self.pitch, self.yaw

    def copy(self) -> 'Pose':
        return replace(self)

    def with_value(self, parameter: str, value: float) -> 'Pose':
        """Return a copy of this pose with one parameter replaced."""
        if parameter not in POSE_PARAMETERS:
            raise ValueError(f"Unknown pose parameter: {parameter}")
        return replace(self, **{parameter: value})

    def is_close(self, other: 'Pose', tol: float) -> bool:
        return all(abs(getattr(self, p) - getattr(other, p)) <= tol for p in POSE_PARAMETERS)


@dataclass
class JointAngles:
    """Joint angles (radians) for one leg."""

    gamma: float = 0.0  # Coxa yaw
    beta: float = 0.0  # Femur pitch
    alpha: float = 0.0  # Tibia pitch

    def copy(self) -> 'JointAngles':
        return replace(self)

    def with_value(self, parameter: str, value: float) -> 'JointAngles':
        if parameter not in JOINT_PARAMETERS:
            raise ValueError(f"Unknown joint parameter: {parameter}")
        return replace(self, **{parameter: value})

    def has_nan(self) -> bool:
        return math.isnan(self.gamma) or math.isnan(self.beta) or math.isnan(self.alpha)

    def is_close(self, other: 'JointAngles', tol: float) -> bool:
        return all(abs(getattr(self, p) - getattr(other, p)) <= tol for p in JOINT_PARAMETERS)


class KinematicsFailure(Enum):
    """Why a solve was rejected. Returned as a value, never raised."""

    BELOW_FLOOR = 'below_floor'
    UNREACHABLE = 'unreachable'
    GROUND_CLEARANCE = 'ground_clearance'
    # Aggregate: at least one leg failed a whole-body update
    IK_FAILURE = 'ik_failure'
