import pytest

from photon.matrix import Camera, Matrix4x4, perspective_matrix
from photon.vertex import Vertex3


def test_matrix_defaults_to_zeros():
    m = Matrix4x4()
    assert m.mat == [0.0] * 16


def test_matrix_rejects_wrong_size():
    with pytest.raises(ValueError):
        Matrix4x4([1.0] * 9)


def test_matrix_item_access():
    m = Matrix4x4()
    m[3] = 2
    assert m[3] == 2.0
    assert m.mat[3] == 2.0


def test_perspective_matrix_homogeneous_entry():
    m = perspective_matrix(500, 500, 90.0, 0.1, 1000.0)
    assert m[14] == 1.0


def test_perspective_matrix_square_viewport_at_ninety_degrees():
    m = perspective_matrix(500, 500, 90.0, 0.1, 1000.0)
    assert m[5] == pytest.approx(1.0)
    assert m[0] == pytest.approx(m[5])


def test_perspective_matrix_aspect_ratio():
    m = perspective_matrix(800, 400, 90.0, 0.1, 1000.0)
    assert m[0] / m[5] == pytest.approx(400 / 800)


def test_perspective_matrix_near_offset_invariant():
    m = perspective_matrix(640, 480, 60.0, 0.5, 200.0)
    assert m[11] == pytest.approx(-0.5 * m[10])
    assert m[10] > 1.0


def test_perspective_matrix_other_entries_zero():
    m = perspective_matrix(300, 200)
    used = {0, 5, 10, 11, 14}
    assert all(m[i] == 0.0 for i in range(16) if i not in used)


def test_perspective_matrix_wider_fov_shrinks_factor():
    assert perspective_matrix(100, 100, 120.0)[5] < perspective_matrix(100, 100, 60.0)[5]


@pytest.mark.parametrize("width,height", [(0, 100), (100, 0), (-5, 10)])
def test_perspective_matrix_rejects_bad_viewport(width, height):
    with pytest.raises(ValueError):
        perspective_matrix(width, height)


def test_perspective_matrix_rejects_equal_planes():
    with pytest.raises(ValueError):
        perspective_matrix(100, 100, 90.0, 5.0, 5.0)


def test_camera_defaults_match_renderer_settings():
    cam = Camera()
    assert cam.position == Vertex3(0.0, 0.0, 0.0)
    assert (cam.fov, cam.z_near_plane, cam.z_far_plane) == (90.0, 0.1, 1000.0)