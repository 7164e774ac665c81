from ._event import (
    AnimationPayload,
    EndpointsPayload,
    EventPayload,
    EventTopic,
    JointAnglesPayload,
    PosePayload,
)
from ._event_bus import EventBus, EventHandler

__all__ = [
    "AnimationPayload",
    "EndpointsPayload",
    "EventBus",
    "EventHandler",
    "EventPayload",
    "EventTopic",
    "JointAnglesPayload",
    "PosePayload",
]
