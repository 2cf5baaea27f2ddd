"""
Quaternion utility functions for racket orientation processing.

All quaternions are in (x, y, z, w) format, matching the wire format sent by
the motion devices and scipy's default scalar-last convention.
"""

import numpy as np


def as_quat(q):
    """
    Convert any 4-sequence to a float64 quaternion array (x, y, z, w).

    Args:
        q: Quaternion-like sequence (x, y, z, w)

    Returns:
        np.ndarray of shape (4,)
    """
    arr = np.asarray(q, dtype=np.float64)
    if arr.shape != (4,):
        raise ValueError(f"Expected a quaternion of shape (4,), got {arr.shape}")
    return arr


def quat_mul(q1, q2):
    """
    Multiply two quaternions (x, y, z, w format).

    The product q1 * q2 applies q2 first, then q1.

    Args:
        q1: First quaternion (x, y, z, w)
        q2: Second quaternion (x, y, z, w)

    Returns:
        Product quaternion (x, y, z, w)
    """
    x1, y1, z1, w1 = q1[0], q1[1], q1[2], q1[3]
    x2, y2, z2, w2 = q2[0], q2[1], q2[2], q2[3]
    return np.array([
        w1*x2 + x1*w2 + y1*z2 - z1*y2,
        w1*y2 - x1*z2 + y1*w2 + z1*x2,
        w1*z2 + x1*y2 - y1*x2 + z1*w2,
        w1*w2 - x1*x2 - y1*y2 - z1*z2,
    ])


def quat_normalize(q):
    """
    Normalize quaternion (x, y, z, w format).

    Degenerate (near-zero) quaternions collapse to identity.

    Args:
        q: Quaternion (x, y, z, w)

    Returns:
        Normalized quaternion
    """
    q = np.asarray(q, dtype=np.float64)
    norm = np.sqrt(q[0]*q[0] + q[1]*q[1] + q[2]*q[2] + q[3]*q[3])
    if not np.isfinite(norm) or norm < 1e-8:
        return np.array([0.0, 0.0, 0.0, 1.0])
    return q / norm


def quat_angle(q1, q2):
    """
    Angle in radians between the rotations represented by q1 and q2.

    Sign-insensitive: q and -q give an angle of zero.
    """
    a = quat_normalize(q1)
    b = quat_normalize(q2)
    # relative rotation a^-1 * b; atan2 stays accurate near zero
    rel = quat_mul(np.array([-a[0], -a[1], -a[2], a[3]]), b)
    return 2.0 * float(np.arctan2(np.linalg.norm(rel[:3]), abs(rel[3])))

