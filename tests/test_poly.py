import pytest

from yapscad.poly import Circle, Polygon, Square
from yapscad.spatial import Bounds, Vector2, Vector3


def test_polygon_square_scenario():
    p = Polygon([(0, 0), (1, 0), (1, 1), (0, 1)])
    b = p.bounds()
    assert b.minimum == Vector3(0, 0, 0)
    assert b.maximum == Vector3(1, 1, 0)
    assert p.render() == 'polygon([[0,0],[1,0],[1,1],[0,1]]);\n'
    assert p.render().count(';') == 1
    assert p.position() == Vector3()


def test_polygon_full_precision():
    p = Polygon([Vector2(0.125, 1.0 / 3.0), Vector2(-2.5, 10.001)])
    assert p.render() == 'polygon([[0.125,0.3333333333333333],[-2.5,10.001]]);\n'


def test_polygon_keeps_vector_list():
    pts = [Vector2(0, 0), Vector2(2, 0), Vector2(0, 3)]
    p = Polygon(pts)
    assert p.points is pts
    assert p.clone().points is pts
    assert p.bounds() == Bounds(Vector3(0, 0, 0), Vector3(2, 3, 0))


def test_polygon_from_generator():
    p = Polygon((x, x * x) for x in range(3))
    assert p.points == [Vector2(0, 0), Vector2(1, 1), Vector2(2, 4)]


def test_polygon_paths():
    p = Polygon([(0, 0), (4, 0), (0, 4), (1, 1), (2, 1), (1, 2)],
                paths=[[0, 1, 2], [3, 4, 5]])
    assert p.render() == ('polygon([[0,0],[4,0],[0,4],[1,1],[2,1],[1,2]], '
                          '[[0,1,2],[3,4,5]]);\n')


def test_polygon_empty_bounds():
    with pytest.raises(ValueError):
        Polygon([]).bounds()


def test_square():
    s = Square([2, 1])
    assert s.render() == 'square(size = [2.00, 1.00], center = false);\n'
    assert s.bounds() == Bounds(Vector3(), Vector3(2, 1, 0))
    assert s.position() == Vector3(1, 0.5, 0)
    c = Square(2, center=True)
    assert c.render() == 'square(size = [2.00, 2.00], center = true);\n'
    assert c.bounds() == Bounds(Vector3(-1, -1, 0), Vector3(1, 1, 0))
    assert c.position() == Vector3()


def test_circle():
    c = Circle(1.5, resolution=32)
    assert c.render() == 'circle(r = 1.5, $fn = 32);\n'
    assert c.bounds() == Bounds(Vector3(-1.5, -1.5, 0), Vector3(1.5, 1.5, 0))
    assert c.clone().is_same_as(c)
