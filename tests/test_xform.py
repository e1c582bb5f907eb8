import pytest
from yapscad.spatial import Vector3
from yapscad.xform import *
## unit tests for yapSCAD xform.py


def _approx(v):
    return pytest.approx(list(v.components), abs=1e-9)


class TestXform:
    """unit tests for yapSCAD matrix operations"""

    def test_matrix(self):
        foo = Matrix([1,2,3,4,5,6,7,8,9,10,11,12,13,14,15,16])
        bar = Matrix([[1,0,0,1],[0,1,0,1],[0,0,1,1],[0,0,0,1]])
        baz = Vector3(1,2,3)
        I = Matrix()
        a = 10.0
        assert(I.mul(bar).m == bar.m)
        assert(I.mul(foo).m == foo.m)
        assert(I.mul(I).m == I.m)
        assert(foo.mul(bar).m == [[1,2,3,10],[5,6,7,26],[9,10,11,42],[13,14,15,58]])
        assert(foo.mul(baz.to_matrix()).getcol(0) == [18, 46, 74, 102])
        assert(foo.mul(a).m == [[10.0,20.0,30.0,40.0],
                                [50.0,60.0,70.0,80.0],
                                [90.0,100.0,110.0,120.0],
                                [130.0,140.0,150.0,160.0]])
        assert(I.apply(baz) == baz)
        ## homogeneous coordinates test
        assert foo.mul(baz).components == pytest.approx(
            (18.0/102.0, 46.0/102.0, 74.0/102.0))

    def test_shapes(self):
        m = Matrix([1,2,3,4,5,6], 2, 3)
        v = Matrix([1,2,3], 3, 1)
        r = m.mul(v)
        assert (r.rows, r.cols) == (2, 1)
        assert r.m == [[14], [32]]
        t = m.transpose()
        assert (t.rows, t.cols) == (3, 2)
        assert t.getrow(0) == [1, 4]
        with pytest.raises(ValueError):
            m.mul(m)
        with pytest.raises(ValueError):
            Matrix([1,2,3], 2, 2)
        with pytest.raises(ValueError):
            Matrix([[1,2],[3,'x']], 2, 2)
        with pytest.raises(ValueError):
            m.get(2, 0)

    def test_setters(self):
        m = Matrix()
        m.setrow(0, [1, 2, 3, 4])
        m.setcol(3, [9, 9, 9, 9])
        assert m.getrow(0) == [1, 2, 3, 9]
        assert m.get(3, 3) == 9
        with pytest.raises(ValueError):
            m.set(0, 0, True)
        assert Matrix(m) == m

    def test_translation(self):
        T = Translation(Vector3(1, 2, 3))
        assert T.apply(Vector3(1, 1, 1)) == Vector3(2, 3, 4)
        assert Translation(Vector3(1, 2, 3), inverse=True).apply(Vector3(2, 3, 4)) == Vector3(1, 1, 1)

    def test_rotation(self):
        R = Rotation(Vector3(0, 0, 1), 90)
        assert _approx(R.apply(Vector3(1, 0, 0))) == [0, 1, 0]
        E = EulerRotation(Vector3(90, 0, 90))
        # x first: (0,1,0) -> (0,0,1); then z leaves it alone
        assert _approx(E.apply(Vector3(0, 1, 0))) == [0, 0, 1]
        back = EulerRotation(Vector3(90, 0, 90), inverse=True)
        assert _approx(back.apply(E.apply(Vector3(1, 2, 3)))) == [1, 2, 3]
        with pytest.raises(ValueError):
            Rotation(Vector3(0, 0, 0), 45)

    def test_scale(self):
        assert Scale(2).apply(Vector3(1, 2, 3)) == Vector3(2, 4, 6)
        assert Scale(1, 2, 3).apply(Vector3(1, 1, 1)) == Vector3(1, 2, 3)
        assert Scale(Vector3(2, 4, 8), inverse=True).apply(Vector3(2, 4, 8)) == Vector3(1, 1, 1)

    def test_reflection(self):
        M = Reflection(Vector3(1, 0, 0))
        assert M.apply(Vector3(2, 3, 4)) == Vector3(-2, 3, 4)
        D = Reflection(Vector3(1, 1, 0))
        assert _approx(D.apply(Vector3(1, 0, 0))) == [0, -1, 0]
        with pytest.raises(ValueError):
            Reflection(Vector3())
