"""
Homogeneous transform helpers for the hexapod kinematics.

All transforms are 4x4 numpy arrays. Rotations compose intrinsically in
X, Y, Z order (roll, pitch, yaw).
"""

from math import cos, sin

import numpy as np

# ---------------------------------------------------------------------------
# Elementary transforms
# ---------------------------------------------------------------------------


def rotate_x(theta: float) -> np.ndarray:
    """Rotation about X-axis."""
    return np.array(
        [
            [1, 0, 0, 0],
            [0, cos(theta), -sin(theta), 0],
            [0, sin(theta), cos(theta), 0],
            [0, 0, 0, 1],
        ],
        dtype=float,
    )


def rotate_y(theta: float) -> np.ndarray:
    """Rotation about Y-axis."""
    return np.array(
        [
            [cos(theta), 0, sin(theta), 0],
            [0, 1, 0, 0],
            [-sin(theta), 0, cos(theta), 0],
            [0, 0, 0, 1],
        ],
        dtype=float,
    )


def rotate_z(theta: float) -> np.ndarray:
    """Rotation about Z-axis."""
    return np.array(
        [
            [cos(theta), -sin(theta), 0, 0],
            [sin(theta), cos(theta), 0, 0],
            [0, 0, 1, 0],
            [0, 0, 0, 1],
        ],
        dtype=float,
    )


def rotate_xyz(x_ang: float, y_ang: float, z_ang: float) -> np.ndarray:
    """
    Combines rotations about X, Y, and Z axes sequentially.
    Each rotation is post-multiplied (applied on the right).
    """
    return rotate_x(x_ang) @ rotate_y(y_ang) @ rotate_z(z_ang)


def translate_xyz(x: float, y: float, z: float) -> np.ndarray:
    """Translation by the given x, y, z offsets."""
    return np.array(
        [
            [1, 0, 0, x],
            [0, 1, 0, y],
            [0, 0, 1, z],
            [0, 0, 0, 1],
        ],
        dtype=float,
    )


def dh_transform(link_length: float, link_twist: float, link_offset: float, joint_angle: float) -> np.ndarray:
    """
    Denavit-Hartenberg link transform.

    Rotate by ``joint_angle`` about z, translate ``link_offset`` along z,
    translate ``link_length`` along the new x, twist by ``link_twist`` about x.
    """
    c_theta, s_theta = cos(joint_angle), sin(joint_angle)
    c_alpha, s_alpha = cos(link_twist), sin(link_twist)
    a, d = link_length, link_offset

    return np.array(
        [
            [c_theta, -s_theta * c_alpha, s_theta * s_alpha, a * c_theta],
            [s_theta, c_theta * c_alpha, -c_theta * s_alpha, a * s_theta],
            [0, s_alpha, c_alpha, d],
            [0, 0, 0, 1],
        ],
        dtype=float,
    )


# ---------------------------------------------------------------------------
# Composition and frame conversion
# ---------------------------------------------------------------------------


def multiply(*transforms: np.ndarray) -> np.ndarray:
    """Compose transforms left to right."""
    result = np.eye(4)
    for transform in transforms:
        result = result @ transform
    return result


def inverse(transform: np.ndarray) -> np.ndarray:
    """
    Inverse of a rigid homogeneous transform.
    Transposes the rotation matrix and adjusts the translation vector accordingly.
    """
    rotation_matrix = transform[0:3, 0:3]
    translation_vector = transform[0:3, 3]
    inverse_transform = np.eye(4)
    inverse_transform[0:3, 0:3] = rotation_matrix.T
    inverse_transform[0:3, 3] = -rotation_matrix.T @ translation_vector
    return inverse_transform


def transform_point(transform: np.ndarray, point: np.ndarray) -> np.ndarray:
    """Apply a homogeneous transform to a 3D point."""
    homogeneous = np.append(np.asarray(point, dtype=float)[:3], 1.0)
    return (transform @ homogeneous)[:3]


def local_to_world(frame: np.ndarray, point: np.ndarray) -> np.ndarray:
    """Express a point given in ``frame`` coordinates in the parent (world) frame."""
    return transform_point(frame, point)


def world_to_local(frame: np.ndarray, point: np.ndarray) -> np.ndarray:
    """Express a world point in ``frame`` coordinates. Inverse of ``local_to_world``."""
    return transform_point(inverse(frame), point)


def pose_transform(x: float, y: float, z: float, roll: float, pitch: float, yaw: float) -> np.ndarray:
    """
    Body transform: translation applied after the roll, pitch, yaw rotation.

    The body translation itself is not rotated, a point maps to R @ p + t.
    """
    return translate_xyz(x, y, z) @ rotate_xyz(roll, pitch, yaw)
