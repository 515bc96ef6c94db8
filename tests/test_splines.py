import numpy as np
import pytest

from wfengine.splines import Bezier

POINTS = [(0.0, 0.0, 0.0), (1.0, 2.0, 0.0), (3.0, 2.0, 1.0), (4.0, 0.0, 2.0)]


def test_endpoints_match_control_points():
    curve = Bezier(POINTS)
    assert np.allclose(curve.position(0.0), POINTS[0])
    assert np.allclose(curve.position(1.0), POINTS[3])


def test_straight_line_midpoint():
    curve = Bezier([(0, 0, 0), (1, 0, 0), (2, 0, 0), (3, 0, 0)])
    assert np.allclose(curve.position(0.5), (1.5, 0.0, 0.0))


def test_tangent_at_start_points_to_second_control_point():
    curve = Bezier(POINTS)
    expected = np.array(POINTS[1]) - np.array(POINTS[0])
    expected /= np.linalg.norm(expected)
    assert np.allclose(curve.tangent(0.0), expected)


@pytest.mark.parametrize("t", [0.0, 0.3, 0.7, 1.0])
def test_tangent_is_unit(t):
    assert np.linalg.norm(Bezier(POINTS).tangent(t)) == pytest.approx(1.0)


def test_orientation_along_negative_z_is_identity():
    curve = Bezier([(0, 0, 0), (0, 0, -1), (0, 0, -2), (0, 0, -3)])
    assert np.allclose(curve.orientation(0.5), [1.0, 0.0, 0.0, 0.0])


@pytest.mark.parametrize("t", [0.1, 0.5, 0.9])
def test_orientation_is_unit_quaternion(t):
    assert np.linalg.norm(Bezier(POINTS).orientation(t)) == pytest.approx(1.0)


@pytest.mark.parametrize("t", [0.2, 0.5, 0.8])
def test_transform_translates_and_faces_tangent(t):
    curve = Bezier(POINTS)
    m = curve.transform(t).matrix
    assert np.allclose(m[:3, 3], curve.position(t))
    assert np.allclose(m[:3, 2], -curve.tangent(t), atol=1e-6)
    rot = m[:3, :3]
    assert np.allclose(rot @ rot.T, np.identity(3), atol=1e-6)


def test_too_few_points_rejected():
    with pytest.raises(ValueError):
        Bezier(POINTS[:3])