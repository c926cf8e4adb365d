import math
import pytest

from core.entities.pose_entity import Joint
from core.service.geometry_service import is_visible, joint_angle, joint_distance


def triplet(angle, vertex=(0.5, 0.5), length=0.1, visibility=1.0):
    """Joints (a, b, c) whose interior angle at b is ``angle`` degrees."""
    bx, by = vertex
    rad = math.radians(angle)
    a = Joint(x=bx + length, y=by, visibility=visibility)
    b = Joint(x=bx, y=by, visibility=visibility)
    c = Joint(x=bx + length * math.cos(rad), y=by + length * math.sin(rad), visibility=visibility)
    return a, b, c


@pytest.mark.parametrize("angle", [0.0, 30.0, 90.0, 135.0, 170.0, 180.0])
def test_joint_angle_matches_construction(angle):
    assert joint_angle(*triplet(angle)) == pytest.approx(angle, abs=1e-6)


def test_joint_angle_is_symmetric_in_end_joints():
    a, b, c = triplet(75.0)
    assert joint_angle(a, b, c) == pytest.approx(joint_angle(c, b, a))


def test_joint_angle_folds_reflex_angles():
    # rays at +170 and -170 degrees differ by 340 around the wrap, 20 inside
    b = Joint(x=0.5, y=0.5)
    a = Joint(x=0.5 + 0.1 * math.cos(math.radians(170)), y=0.5 + 0.1 * math.sin(math.radians(170)))
    c = Joint(x=0.5 + 0.1 * math.cos(math.radians(-170)), y=0.5 + 0.1 * math.sin(math.radians(-170)))
    assert joint_angle(a, b, c) == pytest.approx(20.0)


def test_joint_angle_stays_within_bounds():
    for step in range(0, 360, 7):
        angle = joint_angle(*triplet(float(step)))
        assert 0.0 <= angle <= 180.0


def test_joint_angle_unknown_for_missing_joint():
    a, b, _ = triplet(90.0)
    assert joint_angle(a, b, None) is None


def test_joint_angle_unknown_below_visibility_threshold():
    a, b, c = triplet(90.0)
    dim = Joint(x=c.x, y=c.y, visibility=0.3)
    assert joint_angle(a, b, dim) is None
    assert joint_angle(a, b, dim, visibility_threshold=0.2) == pytest.approx(90.0)


def test_visibility_threshold_is_inclusive():
    joint = Joint(x=0.1, y=0.1, visibility=0.5)
    assert is_visible(joint, 0.5)
    assert not is_visible(joint, 0.51)
    assert not is_visible(None, 0.0)


def test_joint_distance():
    assert joint_distance(Joint(x=0.1, y=0.1), Joint(x=0.4, y=0.5)) == pytest.approx(0.5)
    assert joint_distance(Joint(x=0.1, y=0.1), None) == 0.0


def test_joint_defaults_and_extra_fields():
    joint = Joint.model_validate({"x": 0.2, "y": 0.3, "z": -0.1})
    assert joint.visibility == 1.0
    assert joint.as_tuple() == (0.2, 0.3, 1.0)
