import math

import pytest

from meshview.canvas import Canvas
from meshview.pixel import BLACK, RED, WHITE
from meshview.scene import Mat4, Mesh, Renderer
from meshview.vec3 import Vec3

CUBE_OBJ = """\
# unit cube
v 0 0 0
v 0 1 0
v 1 1 0
v 1 0 0
v 1 1 1
v 1 0 1
v 0 1 1
v 0 0 1
f 1 2 3
f 1 3 4
f 4 3 5
f 4 5 6
f 6 5 7
f 6 7 8
f 8 7 2
f 8 2 1
f 2 7 5
f 2 5 3
f 6 8 1
f 6 1 4
"""


def cube():
    return Mesh.parse_obj(CUBE_OBJ.splitlines())


def test_zero_matrix_transform_skips_division():
    assert Mat4().transform(Vec3(3, 4, 5)) == Vec3(0, 0, 0)


def test_projection_fixed_entries():
    m = Mat4.projection(256, 240).m
    assert m[2][3] == 1.0
    assert m[3][3] == 0.0
    assert m[1][1] == pytest.approx(1.0)
    assert m[0][0] == pytest.approx(m[1][1] * 240 / 256)


def test_projection_maps_near_and_far_planes():
    proj = Mat4.projection(100, 100, 90.0, 0.1, 1000.0)
    assert proj.transform(Vec3(0, 0, 0.1)).z == pytest.approx(0.0, abs=1e-9)
    assert proj.transform(Vec3(0, 0, 1000.0)).z == pytest.approx(1.0)


def test_projection_rejects_bad_sizes():
    with pytest.raises(ValueError):
        Mat4.projection(0, 100)
    with pytest.raises(ValueError):
        Mat4.projection(100, 100, 90.0, 1.0, 1.0)


def test_rotation_zero_is_identity():
    v = Vec3(1.5, -2, 3)
    assert Mat4.rotation_z(0.0).transform(v) == v
    assert Mat4.rotation_x(0.0).transform(v) == v


def test_rotation_z_quarter_turn():
    r = Mat4.rotation_z(math.pi / 2).transform(Vec3(1, 0, 0))
    assert r.x == pytest.approx(0.0, abs=1e-12)
    assert r.y == pytest.approx(1.0)
    assert r.z == pytest.approx(0.0)


@pytest.mark.parametrize("theta", [0.3, 1.0, 2.5, -4.0])
def test_rotations_preserve_length(theta):
    v = Vec3(1, 2, 3)
    assert Mat4.rotation_z(theta).transform(v).length() == pytest.approx(v.length())
    assert Mat4.rotation_x(theta).transform(v).length() == pytest.approx(v.length())


def test_rotation_x_keeps_x():
    r = Mat4.rotation_x(0.7).transform(Vec3(5, 1, 1))
    assert r.x == 5.0


def test_parse_obj_builds_triangles():
    mesh = Mesh.parse_obj(["# comment", "v 0 0 0", "v 1 0 0", "v 0 1 0", "", "f 1 2 3"])
    assert len(mesh.triangles) == 1
    tri = mesh.triangles[0]
    assert tri.points == (Vec3(0, 0, 0), Vec3(1, 0, 0), Vec3(0, 1, 0))


def test_parse_obj_slash_indices_and_extra_records():
    lines = ["v 0 0 0", "vn 0 0 1", "v 1 0 0", "v 0 1 0", "f 3/1/1 2/1/1 1/1/1"]
    mesh = Mesh.parse_obj(lines)
    assert mesh.triangles[0].p0 == Vec3(0, 1, 0)


def test_parse_obj_shared_vertices_are_independent():
    mesh = Mesh.parse_obj(["v 0 0 0", "v 1 0 0", "v 0 1 0", "f 1 2 3", "f 1 3 2"])
    mesh.triangles[0].translate(Vec3(5, 5, 5))
    assert mesh.triangles[1].p0 == Vec3(0, 0, 0)


def test_parse_cube_has_twelve_triangles():
    assert len(cube().triangles) == 12


@pytest.mark.parametrize(
    "lines",
    [
        ["v 0 0 0", "f 1 2 3"],
        ["v 0 0 0", "v 1 0 0", "v 0 1 0", "f 0 1 2"],
        ["v 0 0 0", "v 1 0 0", "f 1 2"],
        ["v 0 zero 0"],
        ["v 0 0 0", "v 1 0 0", "v 0 1 0", "f a b c"],
    ],
)
def test_parse_obj_errors(lines):
    with pytest.raises(ValueError):
        Mesh.parse_obj(lines)


def test_from_obj_reads_file(tmp_path):
    path = tmp_path / "cube.obj"
    path.write_text(CUBE_OBJ, encoding="utf-8")
    assert Mesh.from_obj(path) == cube()


def test_from_obj_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Mesh.from_obj(tmp_path / "missing.obj")


def test_advance_accumulates_theta():
    renderer = Renderer(Mesh(), 64, 60)
    renderer.advance(0.25)
    renderer.advance(0.5)
    assert renderer.theta == pytest.approx(0.75)


def test_project_empty_mesh():
    assert Renderer(Mesh(), 64, 60).project() == []


def test_project_front_face_is_lit_white():
    visible = Renderer(cube(), 64, 60).project()
    assert visible
    assert all(t.fill_color == WHITE for t in visible)


@pytest.mark.parametrize("theta", [0.4, 1.3, 2.9, 5.0])
def test_project_sorted_back_to_front_and_culled(theta):
    renderer = Renderer(cube(), 64, 60, theta=theta)
    visible = renderer.project()
    assert 0 < len(visible) < 12
    depths = [t.depth() for t in visible]
    assert depths == sorted(depths, reverse=True)


def test_render_clears_and_draws():
    canvas = Canvas(64, 60)
    canvas.clear(RED)
    Renderer(cube(), 64, 60).render(canvas, 0.0)
    pixels = canvas.screen.pixels
    assert RED not in pixels
    assert WHITE in pixels
    assert BLACK in pixels


def test_render_empty_mesh_leaves_black_screen():
    canvas = Canvas(16, 16)
    canvas.clear(RED)
    renderer = Renderer(Mesh(), 16, 16)
    renderer.render(canvas, 0.5)
    assert set(canvas.screen.pixels) == {BLACK}
    assert renderer.theta == pytest.approx(0.5)