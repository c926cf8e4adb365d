import numpy as np
from typing import Optional

from core.entities.pose_entity import Joint


def is_visible(joint: Optional[Joint], visibility_threshold: float) -> bool:
    """True when the joint is present and detected with enough confidence."""
    return joint is not None and joint.visibility >= visibility_threshold


def joint_angle(
    a: Optional[Joint],
    b: Optional[Joint],
    c: Optional[Joint],
    visibility_threshold: float = 0.5,
) -> Optional[float]:
    """
    Interior angle at vertex b formed by the rays b->a and b->c.

    Args:
        a: First end joint
        b: Vertex joint
        c: Second end joint
        visibility_threshold: Minimum visibility required of all three joints

    Returns:
        Angle in degrees within [0, 180], or None when any joint is absent
        or below the visibility threshold.
    """
    if not all(is_visible(joint, visibility_threshold) for joint in (a, b, c)):
        return None

    radians = np.arctan2(c.y - b.y, c.x - b.x) - np.arctan2(a.y - b.y, a.x - b.x)
    angle = abs(float(np.degrees(radians)))
    if angle > 180.0:
        angle = 360.0 - angle
    return angle


def joint_distance(a: Optional[Joint], b: Optional[Joint]) -> float:
    """Euclidean distance in normalized coordinates, 0 when either joint is absent."""
    if a is None or b is None:
        return 0.0
    return float(np.hypot(a.x - b.x, a.y - b.y))
