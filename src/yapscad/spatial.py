## immutable vector and bounding box value types for yapSCAD

## Copyright (c) 2020 Richard W. DeVaul
## Copyright (c) 2020 yapCAD contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""spatial value types for **yapSCAD**

``Vector2`` and ``Vector3`` are small immutable values used for
positions, directions and transform parameters.  ``Bounds`` is an
axis-aligned bounding box described by two ``Vector3`` corners.

Vector equality is *display* equality: two vectors compare equal when
their two-decimal string representations are identical, so
``Vector2(1.004, 0) == Vector2(1.001, 0)`` holds.  Vectors hash their
string as well, which keeps hashing consistent with equality.

"""

from dataclasses import dataclass
import numbers

from yapscad.render import fmt2


def _isnum(x):
    return (not isinstance(x, bool)) and isinstance(x, numbers.Real)


@dataclass(frozen=True, eq=False)
class Vector2:
    """two-dimensional vector, usable as a direction or a point"""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self):
        for v in (self.x, self.y):
            if not _isnum(v):
                raise ValueError(f'bad component passed to Vector2: {v}')

    @property
    def components(self):
        return (self.x, self.y)

    def negate(self):
        return Vector2(-self.x, -self.y)

    def clone(self):
        return Vector2(self.x, self.y)

    def dot(self, other):
        return self.x * other.x + self.y * other.y

    def normalize(self):
        """return this vector divided by the sum of its absolute
        components.  The zero vector is returned unchanged."""
        if self.x == 0 and self.y == 0:
            return self
        s = abs(self.x) + abs(self.y)
        return Vector2(self.x / s, self.y / s)

    @staticmethod
    def average(*positions):
        """return the mean of ``positions``, ``None`` if there are none"""
        return _average(Vector2, positions)

    def to_vector3(self, z=0.0):
        return Vector3(self.x, self.y, z)

    def to_matrix(self):
        """homogeneous 4x1 column matrix ``[x, y, 0, 1]``"""
        from yapscad.xform import Matrix
        return Matrix([self.x, self.y, 0.0, 1.0], 4, 1)

    def __neg__(self):
        return self.negate()

    def __add__(self, other):
        if isinstance(other, Vector2):
            return Vector2(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector2):
            return Vector2(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        if _isnum(other):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other):
        if _isnum(other):
            return Vector2(other * self.x, other * self.y)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Vector2):
            return Vector2(self.x / other.x, self.y / other.y)
        if _isnum(other):
            return Vector2(self.x / other, self.y / other)
        return NotImplemented

    def __rtruediv__(self, other):
        if _isnum(other):
            return Vector2(other / self.x, other / self.y)
        return NotImplemented

    def __iter__(self):
        return iter(self.components)

    def __eq__(self, other):
        if not isinstance(other, (Vector2, Vector3)):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self):
        return hash(str(self))

    def __str__(self):
        return f"[{fmt2(self.x)}, {fmt2(self.y)}]"

    def __repr__(self):
        return f"Vector2({self.x},{self.y})"


@dataclass(frozen=True, eq=False)
class Vector3:
    """three-dimensional vector, usable as a direction or a point"""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self):
        for v in (self.x, self.y, self.z):
            if not _isnum(v):
                raise ValueError(f'bad component passed to Vector3: {v}')

    @property
    def components(self):
        return (self.x, self.y, self.z)

    def negate(self):
        return Vector3(-self.x, -self.y, -self.z)

    def clone(self):
        return Vector3(self.x, self.y, self.z)

    def dot(self, other):
        return self.x * other.x + self.y * other.y + self.z * other.z

    def normalize(self):
        """return this vector divided by the sum of its absolute
        components.  The zero vector is returned unchanged."""
        if self.x == 0 and self.y == 0 and self.z == 0:
            return self
        s = abs(self.x) + abs(self.y) + abs(self.z)
        return Vector3(self.x / s, self.y / s, self.z / s)

    @staticmethod
    def average(*positions):
        """return the mean of ``positions``, ``None`` if there are none"""
        return _average(Vector3, positions)

    def to_matrix(self):
        """homogeneous 4x1 column matrix ``[x, y, z, 1]``"""
        from yapscad.xform import Matrix
        return Matrix([self.x, self.y, self.z, 1.0], 4, 1)

    def __neg__(self):
        return self.negate()

    def __add__(self, other):
        if isinstance(other, Vector3):
            return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector3):
            return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        if _isnum(other):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other):
        if _isnum(other):
            return Vector3(other * self.x, other * self.y, other * self.z)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Vector3):
            return Vector3(self.x / other.x, self.y / other.y, self.z / other.z)
        if _isnum(other):
            return Vector3(self.x / other, self.y / other, self.z / other)
        return NotImplemented

    def __rtruediv__(self, other):
        if _isnum(other):
            return Vector3(other / self.x, other / self.y, other / self.z)
        return NotImplemented

    def __iter__(self):
        return iter(self.components)

    def __eq__(self, other):
        if not isinstance(other, (Vector2, Vector3)):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self):
        return hash(str(self))

    def __str__(self):
        return f"[{fmt2(self.x)}, {fmt2(self.y)}, {fmt2(self.z)}]"

    def __repr__(self):
        return f"Vector3({self.x},{self.y},{self.z})"


def _average(cls, positions):
    if not positions:
        return None
    if len(positions) == 1:
        return positions[0]
    total = cls()
    for p in positions:
        total = total + p
    return total / len(positions)


def vector3(v):
    """coerce ``v`` (a ``Vector3``, ``Vector2``, number or 2/3-sequence)
    into a ``Vector3``.  A single number is used for all three axes."""
    if isinstance(v, Vector3):
        return v
    if isinstance(v, Vector2):
        return v.to_vector3()
    if _isnum(v):
        return Vector3(v, v, v)
    if isinstance(v, (list, tuple)) and len(v) in (2, 3):
        return Vector3(*v)
    raise ValueError(f'cannot convert {v!r} to Vector3')


def vector2(v):
    """coerce ``v`` (a ``Vector2``, number or 2-sequence) into a
    ``Vector2``"""
    if isinstance(v, Vector2):
        return v
    if _isnum(v):
        return Vector2(v, v)
    if isinstance(v, (list, tuple)) and len(v) == 2:
        return Vector2(*v)
    raise ValueError(f'cannot convert {v!r} to Vector2')


@dataclass(frozen=True)
class Bounds:
    """axis-aligned bounding box spanned by ``minimum`` and ``maximum``"""

    minimum: Vector3
    maximum: Vector3

    @classmethod
    def from_points(cls, points):
        pts = [vector3(p) for p in points]
        if not pts:
            raise ValueError('cannot compute bounds of no points')
        return cls(Vector3(min(p.x for p in pts),
                           min(p.y for p in pts),
                           min(p.z for p in pts)),
                   Vector3(max(p.x for p in pts),
                           max(p.y for p in pts),
                           max(p.z for p in pts)))

    @property
    def xmin(self):
        return self.minimum.x

    @property
    def ymin(self):
        return self.minimum.y

    @property
    def zmin(self):
        return self.minimum.z

    @property
    def xmax(self):
        return self.maximum.x

    @property
    def ymax(self):
        return self.maximum.y

    @property
    def zmax(self):
        return self.maximum.z

    @property
    def size(self):
        return self.maximum - self.minimum

    @property
    def center(self):
        return Vector3.average(self.minimum, self.maximum)

    def corners(self):
        """the eight corners of the box"""
        lo, hi = self.minimum, self.maximum
        return [Vector3(x, y, z)
                for x in (lo.x, hi.x)
                for y in (lo.y, hi.y)
                for z in (lo.z, hi.z)]

    def union(self, *others):
        """smallest box containing this box and ``others``"""
        boxes = (self,) + others
        return Bounds(Vector3(min(b.xmin for b in boxes),
                              min(b.ymin for b in boxes),
                              min(b.zmin for b in boxes)),
                      Vector3(max(b.xmax for b in boxes),
                              max(b.ymax for b in boxes),
                              max(b.zmax for b in boxes)))

    def intersection(self, *others):
        """overlap of this box and ``others``.  Disjoint boxes collapse
        to a degenerate box with ``minimum == maximum``."""
        boxes = (self,) + others
        lo = Vector3(max(b.xmin for b in boxes),
                     max(b.ymin for b in boxes),
                     max(b.zmin for b in boxes))
        hi = Vector3(min(b.xmax for b in boxes),
                     min(b.ymax for b in boxes),
                     min(b.zmax for b in boxes))
        hi = Vector3(max(lo.x, hi.x), max(lo.y, hi.y), max(lo.z, hi.z))
        return Bounds(lo, hi)

    def transform(self, m):
        """bounds of this box after applying the affine matrix ``m``"""
        return Bounds.from_points([m.apply(c) for c in self.corners()])

    def __str__(self):
        return f"Bounds({self.minimum}, {self.maximum})"
