from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Union

from hexapod.models import JointAngles, Point, Pose


class EventTopic(Enum):
    POSE_CHANGED = "pose_changed"
    JOINT_ANGLES_CHANGED = "joint_angles_changed"
    ENDPOINT_POSITIONS_CHANGED = "endpoint_positions_changed"
    ANIMATION_STARTED = "animation_started"
    ANIMATION_FINISHED = "animation_finished"
    ANIMATION_STOPPED = "animation_stopped"


@dataclass
class PosePayload:
    pose: Pose


@dataclass
class JointAnglesPayload:
    joint_angles: List[JointAngles] = field(default_factory=list)


@dataclass
class EndpointsPayload:
    endpoints: List[Point] = field(default_factory=list)


@dataclass
class AnimationPayload:
    # Typed loosely to keep messaging free of the animation package
    animation: Any
    reason: Optional[str] = None


EventPayload = Union[PosePayload, JointAnglesPayload, EndpointsPayload, AnimationPayload]
