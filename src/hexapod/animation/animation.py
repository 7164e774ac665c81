from enum import Enum
import itertools
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union

import hexapod.constants as constants
from hexapod.models import POSE_PARAMETERS, Point, Pose

from .bezier import Bezier
from .easing import Easing, clamp_t, ease

ENDPOINTS = 'endpoints'
ANIMATABLE_PROPERTIES = POSE_PARAMETERS + (ENDPOINTS,)

_animation_ids = itertools.count(1)


class Direction(Enum):
    NORMAL = 'normal'
    REVERSE = 'reverse'
    ALTERNATE = 'alternate'
    ALTERNATE_REVERSE = 'alternate-reverse'

    @property
    def starts_reversed(self) -> bool:
        return self in (Direction.REVERSE, Direction.ALTERNATE_REVERSE)

    @property
    def alternates(self) -> bool:
        return self in (Direction.ALTERNATE, Direction.ALTERNATE_REVERSE)


class Animation:
    """
    Keyframed trajectory of body pose parameters and leg endpoints.

    Each pose parameter (x, y, z, roll, pitch, yaw) takes an ordered list of
    scalar keypoints. ``endpoints`` takes an ordered list of keyframes, each one
    a sequence with one target Point per leg. Every property is turned into a
    single Bezier curve over its keypoints, so the trajectory starts on the
    first keypoint and ends on the last.

    Playback settings use chained setters:

        Animation({'z': [0.17, 0.3]}).set_duration(0.8).set_easing('ease-out')

    The descriptor itself is never changed by playback.
    """

    def __init__(self, keypoints: Mapping[str, Sequence]):
        self._id = next(_animation_ids)
        self._curves: Dict[str, Bezier] = {}
        self._endpoint_curves: List[Bezier] = []

        self._timescale = constants.DEFAULT_TIMESCALE
        self._iterations = 0
        self._direction = Direction.NORMAL
        self._duration = constants.DEFAULT_DURATION
        self._easing = Easing.EASE_IN_OUT

        for name, points in keypoints.items():
            if name not in ANIMATABLE_PROPERTIES:
                raise ValueError(f"Unknown animation property: {name}")
            if len(points) == 0:
                raise ValueError(f"Animation property {name} has no keypoints")

            if name == ENDPOINTS:
                self._endpoint_curves = self._build_endpoint_curves(points)
            else:
                self._curves[name] = Bezier([float(p) for p in points])

    @staticmethod
    def _build_endpoint_curves(keyframes: Sequence[Sequence[Point]]) -> List[Bezier]:
        leg_count = len(keyframes[0])
        for keyframe in keyframes:
            if len(keyframe) != leg_count:
                raise ValueError(f"Endpoint keyframes must all hold {leg_count} points, got {len(keyframe)}")

        return [Bezier([keyframe[leg].copy() for keyframe in keyframes]) for leg in range(leg_count)]

    def __repr__(self) -> str:
        return f"Animation(id={self._id}, properties={self.properties})"

    @property
    def id(self) -> int:
        return self._id

    @property
    def properties(self) -> List[str]:
        names = list(self._curves)
        if self._endpoint_curves:
            names.append(ENDPOINTS)
        return names

    @property
    def endpoint_count(self) -> int:
        """Number of legs the endpoint keyframes drive, 0 when endpoints are not animated."""
        return len(self._endpoint_curves)

    def has(self, name: str) -> bool:
        if name == ENDPOINTS:
            return bool(self._endpoint_curves)
        return name in self._curves

    # -----------------------------------------------------------------------
    # Playback settings
    # -----------------------------------------------------------------------
    @property
    def timescale(self) -> float:
        return self._timescale

    def set_timescale(self, value: float) -> 'Animation':
        if value < 0:
            raise ValueError(f"Timescale must not be negative: {value}")
        self._timescale = value
        return self

    @property
    def iterations(self) -> int:
        return self._iterations

    def set_iterations(self, value: int) -> 'Animation':
        if value < 0:
            raise ValueError(f"Iteration count must not be negative: {value}")
        self._iterations = int(value)
        return self

    @property
    def direction(self) -> Direction:
        return self._direction

    def set_direction(self, value: Union[Direction, str]) -> 'Animation':
        self._direction = Direction(value)
        return self

    @property
    def duration(self) -> float:
        return self._duration

    def set_duration(self, value: float) -> 'Animation':
        if value < 0:
            raise ValueError(f"Duration must not be negative: {value}")
        self._duration = value
        return self

    @property
    def easing(self) -> Easing:
        return self._easing

    def set_easing(self, value: Union[Easing, str]) -> 'Animation':
        self._easing = Easing(value)
        return self

    # -----------------------------------------------------------------------
    # Sampling
    # -----------------------------------------------------------------------
    def ease(self, t: float) -> float:
        return ease(t, self._easing)

    def at(self, t: float, name: str) -> Optional[float]:
        """Value of pose parameter ``name`` at eased time ``t``, None if it is not animated."""
        if name not in ANIMATABLE_PROPERTIES or name == ENDPOINTS:
            raise ValueError(f"Not a pose parameter: {name}")

        curve = self._curves.get(name)
        if curve is None:
            return None
        return curve.at(clamp_t(self.ease(t)))

    def endpoints_at(self, t: float) -> Optional[List[Point]]:
        if not self._endpoint_curves:
            return None
        eased = clamp_t(self.ease(t))
        return [curve.at(eased) for curve in self._endpoint_curves]

    def sample(self, t: float, pose: Pose, endpoints: Sequence[Point]) -> Tuple[Pose, List[Point]]:
        """
        Pose and endpoints at time ``t``.

        Parameters and endpoints the animation does not drive keep the values
        of ``pose`` and ``endpoints``.
        """
        values = {}
        for name in POSE_PARAMETERS:
            value = self.at(t, name)
            values[name] = getattr(pose, name) if value is None else value

        sampled = self.endpoints_at(t)
        if sampled is None:
            sampled = [endpoint.copy() for endpoint in endpoints]

        return Pose(**values), sampled
