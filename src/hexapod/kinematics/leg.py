from math import atan2, isnan, nan, pi, sqrt
from typing import List, Optional, Union

import numpy as np

import hexapod.constants as constants
from hexapod import labels
from hexapod.configuration import HexapodParameters
from hexapod.logger import Logger
from hexapod.models import JointAngles, KinematicsFailure, Point, Pose

from .homogeneous_transformations import (
    dh_transform,
    multiply,
    pose_transform,
    rotate_z,
    transform_point,
    translate_xyz,
    world_to_local,
)
from .utils import deg2rad

log = Logger().setup_logger('Leg kinematics')


def _safe_acos(value: float) -> float:
    """acos that returns NaN outside its domain, snapping rounding noise onto the boundary."""
    if isnan(value):
        return nan
    if value > 1.0:
        if value - 1.0 > constants.ACOS_TOLERANCE:
            return nan
        value = 1.0
    elif value < -1.0:
        if -1.0 - value > constants.ACOS_TOLERANCE:
            return nan
        value = -1.0
    return float(np.arccos(value))


class Leg:
    """
    One hexapod leg: coxa (yaw), femur and tibia (pitch).

    The leg's local frame sits at its body attachment point, moved by the body
    pose, and is rotated about z by ``id * 60`` degrees. Targets handed to the
    solvers are expressed relative to leg 0, i.e. a target is rotated by the
    angular offset before it is converted into the local frame.

    Both solvers are pure queries: they compute the frame for the requested
    pose on the side and never touch the committed leg state. Only
    ``set_joint_angles`` changes what the leg reports.
    """

    def __init__(self, leg_id: int, origin: Point, parameters: HexapodParameters, pose: Optional[Pose] = None):
        self._id = leg_id
        self._origin = origin.copy()
        self._parameters = parameters
        self._angular_offset = leg_id * deg2rad(parameters.leg_interval_deg)

        self._pose = pose.copy() if pose else Pose()
        self._joint_angles = JointAngles()
        self._endpoint = self.solve_fk(self._pose, self._joint_angles)

    # -----------------------------------------------------------------------
    # Committed state
    # -----------------------------------------------------------------------
    @property
    def id(self) -> int:
        return self._id

    @property
    def origin(self) -> Point:
        return self._origin.copy()

    @property
    def angular_offset(self) -> float:
        return self._angular_offset

    @property
    def femur_length(self) -> float:
        return self._parameters.femur_length

    @property
    def tibia_length(self) -> float:
        return self._parameters.tibia_length

    @property
    def joint_angles(self) -> JointAngles:
        return self._joint_angles.copy()

    @property
    def endpoint(self) -> Point:
        return self._endpoint.copy()

    @property
    def pose(self) -> Pose:
        return self._pose.copy()

    @property
    def local_frame(self) -> np.ndarray:
        """Transform of the local frame under the committed pose."""
        return self.compute_local_frame(self._pose)

    @property
    def local_frame_position(self) -> Point:
        return Point.from_array(self._frame_position(self._pose))

    def set_joint_angles(self, pose: Pose, angles: JointAngles, endpoint: Optional[Point] = None) -> None:
        """
        Commit a pose and joint angles to this leg.

        The local frame follows the pose. ``endpoint`` is cached as given,
        otherwise it is recomputed with forward kinematics.
        """
        self._pose = pose.copy()
        self._joint_angles = angles.copy()
        self._endpoint = endpoint.copy() if endpoint is not None else self.solve_fk(pose, angles)

    # -----------------------------------------------------------------------
    # Local frame
    # -----------------------------------------------------------------------
    def _frame_position(self, pose: Pose) -> np.ndarray:
        body = pose_transform(pose.x, pose.y, pose.z, pose.roll, pose.pitch, pose.yaw)
        return transform_point(body, self._origin.to_array())

    def compute_local_frame(self, pose: Pose) -> np.ndarray:
        """Local frame transform for ``pose``: attachment point moved by the pose, then rotated by the offset."""
        x, y, z = self._frame_position(pose)
        return translate_xyz(x, y, z) @ rotate_z(self._angular_offset)

    def to_world(self, point: Point) -> Point:
        """Convert a leg-0 relative point into true world coordinates."""
        return Point.from_array(transform_point(rotate_z(self._angular_offset), point.to_array()))

    def from_world(self, point: Point) -> Point:
        """Convert a true world point into leg-0 relative coordinates."""
        return Point.from_array(transform_point(rotate_z(-self._angular_offset), point.to_array()))

    # -----------------------------------------------------------------------
    # Inverse Kinematics
    # -----------------------------------------------------------------------
    def solve_ik(self, pose: Pose, target: Point) -> Union[JointAngles, KinematicsFailure]:
        """
        Joint angles that put the foot on ``target`` with the body at ``pose``.

        Does not move the leg. Returns a ``KinematicsFailure`` when the target
        is below the floor margin, out of reach, behind the coxa, or when the
        pose drops the coxa pivot onto the floor.
        """
        if target.z < -self._parameters.floor_margin:
            log.debug(labels.LEG_IK_FAILED.format(self._id, KinematicsFailure.BELOW_FLOOR.value))
            return KinematicsFailure.BELOW_FLOOR

        frame = self.compute_local_frame(pose)
        h = float(frame[2, 3])

        rotated = transform_point(rotate_z(self._angular_offset), target.to_array())
        target_local = world_to_local(frame, rotated)

        x = float(target_local[0])
        y = float(target_local[1])
        z = target.z

        F = self._parameters.femur_length
        T = self._parameters.tibia_length
        F_squared = F * F
        T_squared = T * T

        xz_projection = sqrt(x * x + y * y) - self._parameters.coxa_length

        AC_squared = (h - z) ** 2 + xz_projection**2
        AC = sqrt(AC_squared)

        # --- Tibia joint (alpha), zero when the leg is fully extended
        alpha = pi - _safe_acos((T_squared + F_squared - AC_squared) / (2 * F * T))

        # --- Femur joint (beta)
        if AC > 0.0:
            beta1 = _safe_acos((F_squared + AC_squared - T_squared) / (2 * F * AC))
        else:
            beta1 = nan
        beta2 = atan2(xz_projection, h - z)
        beta = pi / 2 - (beta1 + beta2)

        # --- Coxa joint (gamma), the foot must stay in front of the coxa
        gamma = atan2(y, x)
        if gamma > pi / 2 or gamma < -pi / 2:
            gamma = nan

        angles = JointAngles(gamma=gamma, beta=beta, alpha=alpha)

        if angles.has_nan():
            log.debug(labels.LEG_IK_FAILED.format(self._id, KinematicsFailure.UNREACHABLE.value))
            return KinematicsFailure.UNREACHABLE

        if h <= self._parameters.coxa_radius:
            log.debug(labels.LEG_IK_FAILED.format(self._id, KinematicsFailure.GROUND_CLEARANCE.value))
            return KinematicsFailure.GROUND_CLEARANCE

        return angles

    # -----------------------------------------------------------------------
    # Forward Kinematics
    # -----------------------------------------------------------------------
    def _chain(self, pose: Pose, angles: JointAngles):
        """Base transform and the three DH link transforms for ``angles``."""
        frame_position = self._frame_position(pose)

        base = rotate_z(self._angular_offset)
        base[0, 3] = frame_position[0]
        base[1, 3] = frame_position[1]

        t1 = dh_transform(self._parameters.coxa_length, pi / 2, 0.0, angles.gamma)
        t2 = dh_transform(self._parameters.femur_length, 0.0, 0.0, angles.beta)
        t3 = dh_transform(self._parameters.tibia_length, 0.0, 0.0, angles.alpha)

        return float(frame_position[2]), base, t1, t2, t3

    def solve_fk(self, pose: Pose, angles: JointAngles) -> Point:
        """
        Foot position (relative to leg 0) for ``angles`` with the body at ``pose``.

        Height is measured down from the local frame: positive beta and alpha
        lower the foot. NaN angles give NaN coordinates.
        """
        h, base, t1, t2, t3 = self._chain(pose, angles)

        foot = transform_point(multiply(base, t1, t2, t3), np.zeros(3))

        final = transform_point(rotate_z(-self._angular_offset), foot)
        final[2] = h - foot[2]
        log.debug(labels.LEG_FK_RESULT.format(self._id, angles.gamma, angles.beta, angles.alpha, *final))

        return Point.from_array(final)

    def joint_positions(self, pose: Pose, angles: JointAngles) -> List[Point]:
        """True world positions of the femur pivot, the knee and the foot."""
        h, base, t1, t2, t3 = self._chain(pose, angles)

        positions = []
        for transform in (multiply(base, t1), multiply(base, t1, t2), multiply(base, t1, t2, t3)):
            joint = transform_point(transform, np.zeros(3))
            positions.append(Point(float(joint[0]), float(joint[1]), h - float(joint[2])))
        return positions
