from typing import Callable, List, Optional, Sequence

import hexapod.constants as constants
from hexapod.configuration import HexapodParameters, ParametersProvider
from hexapod.messaging import EndpointsPayload, EventBus, EventTopic, JointAnglesPayload, PosePayload
from hexapod.models import JointAngles, Point, Pose


class HexapodModel:
    """
    Last known good pose, joint angles and endpoints.

    The model follows the body through its events, so it only ever holds
    committed state. Readers get copies and cannot mutate it by accident.
    Besides the kinematic state it keeps the leg selection and the active input
    category the user interface works with.
    """

    def __init__(self, parameters: Optional[HexapodParameters] = None, leg_count: Optional[int] = None):
        parameters = parameters or ParametersProvider().parameters
        count = leg_count or parameters.leg_count

        self._pose = Pose(z=parameters.default_body_height)
        self._endpoints = [Point(*constants.DEFAULT_ENDPOINT) for _ in range(count)]
        self._joint_angles = [JointAngles() for _ in range(count)]

        self._selected_legs: List[int] = []
        self._category = 'body'
        self._unsubscribers: List[Callable[[], None]] = []

    def bind(self, event_bus: EventBus) -> None:
        """Follow the committed state published on ``event_bus``."""
        self.unbind()
        self._unsubscribers = [
            event_bus.subscribe(EventTopic.POSE_CHANGED, self._on_pose_changed),
            event_bus.subscribe(EventTopic.JOINT_ANGLES_CHANGED, self._on_joint_angles_changed),
            event_bus.subscribe(EventTopic.ENDPOINT_POSITIONS_CHANGED, self._on_endpoints_changed),
        ]

    def unbind(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

    def _on_pose_changed(self, payload: PosePayload) -> None:
        self._pose = payload.pose.copy()

    def _on_joint_angles_changed(self, payload: JointAnglesPayload) -> None:
        self.set_joint_angles(payload.joint_angles)

    def _on_endpoints_changed(self, payload: EndpointsPayload) -> None:
        self.set_endpoints(payload.endpoints)

    # -----------------------------------------------------------------------
    # Kinematic state
    # -----------------------------------------------------------------------
    @property
    def pose(self) -> Pose:
        return self._pose.copy()

    @property
    def endpoints(self) -> List[Point]:
        return [endpoint.copy() for endpoint in self._endpoints]

    @property
    def joint_angles(self) -> List[JointAngles]:
        return [angles.copy() for angles in self._joint_angles]

    def set_endpoints(self, endpoints: Sequence[Point]) -> None:
        for index, endpoint in enumerate(endpoints):
            self._endpoints[index] = endpoint.copy()

    def set_joint_angles(self, joint_angles: Sequence[JointAngles]) -> None:
        for index, angles in enumerate(joint_angles):
            self._joint_angles[index] = angles.copy()

    # -----------------------------------------------------------------------
    # Input selection
    # -----------------------------------------------------------------------
    @property
    def selected_legs(self) -> List[int]:
        return list(self._selected_legs)

    def select_legs(self, indexes: Sequence[int]) -> None:
        count = len(self._endpoints)
        for index in indexes:
            if not 0 <= index < count:
                raise ValueError(f"Leg index out of range: {index}")
        self._selected_legs = sorted(set(indexes))

    @property
    def category(self) -> str:
        return self._category

    @category.setter
    def category(self, value: str) -> None:
        if value not in ('body', 'joints', 'endpoints'):
            raise ValueError(f"Unknown category: {value}")
        self._category = value
