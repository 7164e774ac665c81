from typing import Dict, List, Optional, Sequence, Union

from hexapod import labels
from hexapod.configuration import HexapodParameters, ParametersProvider
from hexapod.logger import Logger
from hexapod.messaging import EndpointsPayload, EventBus, EventTopic, JointAnglesPayload, PosePayload
from hexapod.models import JointAngles, KinematicsFailure, Point, Pose

from .leg import Leg
from .utils import sample_circle

log = Logger().setup_logger('Body')


class HexapodBody:
    """
    Coordinates the six legs under one body pose.

    Whole-body updates are atomic: every leg is solved first and the result is
    committed only if all of them succeed. A rejected update leaves the pose,
    joint angles and endpoints exactly as they were.
    """

    def __init__(self, parameters: Optional[HexapodParameters] = None, event_bus: Optional[EventBus] = None):
        self._parameters = parameters or ParametersProvider().parameters
        self._event_bus = event_bus or EventBus()

        self._pose = Pose(z=self._parameters.default_body_height)
        self._last_failures: Dict[int, KinematicsFailure] = {}

        self._legs = [
            Leg(leg_id, origin, self._parameters, self._pose)
            for leg_id, origin in enumerate(self.calculate_coxa_points())
        ]
        log.info(labels.BODY_CREATED.format(len(self._legs)))

    def calculate_coxa_points(self) -> List[Point]:
        """Leg attachment points, sampled on the body circle at the leg interval."""
        points = sample_circle(self._parameters.body_radius, self._parameters.leg_interval_deg)
        return points[: self._parameters.leg_count]

    # -----------------------------------------------------------------------
    # Read access
    # -----------------------------------------------------------------------
    @property
    def parameters(self) -> HexapodParameters:
        return self._parameters

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    @property
    def legs(self) -> List[Leg]:
        return list(self._legs)

    @property
    def pose(self) -> Pose:
        return self._pose.copy()

    @property
    def joint_angles(self) -> List[JointAngles]:
        return [leg.joint_angles for leg in self._legs]

    @property
    def endpoints(self) -> List[Point]:
        return [leg.endpoint for leg in self._legs]

    @property
    def last_failures(self) -> Dict[int, KinematicsFailure]:
        """Per-leg reasons of the most recent rejected update, empty after a success."""
        return dict(self._last_failures)

    # -----------------------------------------------------------------------
    # Solving
    # -----------------------------------------------------------------------
    def _check_count(self, values: Sequence, what: str) -> None:
        if len(values) != len(self._legs):
            raise ValueError(labels.BODY_WRONG_COUNT.format(len(self._legs), what, len(values)))

    def solve_ik(self, pose: Pose, endpoints: Sequence[Point]) -> List[Union[JointAngles, KinematicsFailure]]:
        """Solve every leg without committing anything."""
        self._check_count(endpoints, 'endpoints')
        return [leg.solve_ik(pose, endpoint) for leg, endpoint in zip(self._legs, endpoints)]

    def solve_fk(self, pose: Pose, joint_angles: Sequence[JointAngles]) -> List[Point]:
        """Foot positions for the given joint angles, without committing anything."""
        self._check_count(joint_angles, 'joint angle sets')
        return [leg.solve_fk(pose, angles) for leg, angles in zip(self._legs, joint_angles)]

    def update_body_ik(self, pose: Pose, endpoints: Sequence[Point]) -> bool:
        """
        Move the body to ``pose`` with the feet on ``endpoints``.

        Returns False and changes nothing if any leg cannot be solved.
        """
        solutions = self.solve_ik(pose, endpoints)

        failures = {
            leg_id: solution for leg_id, solution in enumerate(solutions) if isinstance(solution, KinematicsFailure)
        }
        if failures:
            self._last_failures = failures
            log.info(labels.BODY_IK_REJECTED.format({k: v.value for k, v in failures.items()}))
            return False

        self._last_failures = {}
        self._commit(pose, solutions, endpoints)
        return True

    def update_body_fk(self, pose: Pose, joint_angles: Sequence[JointAngles]) -> Union[List[Point], KinematicsFailure]:
        """
        Move the body to ``pose`` with the legs at ``joint_angles``.

        The endpoints found by forward kinematics are committed through
        ``update_body_ik`` so the stored state passes every IK check. Returns the
        endpoints, or ``KinematicsFailure.IK_FAILURE`` if that round trip fails.
        """
        endpoints = self.solve_fk(pose, joint_angles)

        if not self.update_body_ik(pose, endpoints):
            log.info(labels.BODY_FK_REJECTED)
            return KinematicsFailure.IK_FAILURE

        return endpoints

    def _commit(self, pose: Pose, solutions: Sequence[JointAngles], endpoints: Sequence[Point]) -> None:
        self._pose = pose.copy()

        for leg, angles, endpoint in zip(self._legs, solutions, endpoints):
            leg.set_joint_angles(pose, angles, endpoint)

        self._event_bus.publish(EventTopic.POSE_CHANGED, PosePayload(self.pose))
        self._event_bus.publish(EventTopic.ENDPOINT_POSITIONS_CHANGED, EndpointsPayload(self.endpoints))
        self._event_bus.publish(EventTopic.JOINT_ANGLES_CHANGED, JointAnglesPayload(self.joint_angles))
