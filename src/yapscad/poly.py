## planar primitives for yapSCAD

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

"""
Planar Primitives
=================

Two-dimensional leaf nodes.  They live in the XY plane, so their
bounds always have ``z == 0``.  Extrude them with
``Node.linear_extrude()`` or ``Node.rotate_extrude()`` to obtain
solids.

``Polygon`` renders its points at full precision, unlike the vector
parameters of transforms which use two-decimal display precision.
"""

from yapscad.node import Node
from yapscad.render import StatementBuilder
from yapscad.spatial import Bounds, Vector2, Vector3, vector2


class Polygon(Node):
    """closed figure through an ordered list of points"""

    def __init__(self, points, paths=None, name=None):
        super().__init__(name=name)
        if not isinstance(points, (list, tuple)):
            points = list(points)
        if all(isinstance(p, Vector2) for p in points):
            self.points = points
        else:
            self.points = [vector2(p) for p in points]
        self.paths = paths

    def __repr__(self):
        return 'Polygon({})'.format([p.components for p in self.points])

    def position(self):
        return Vector3()

    def bounds(self):
        return Bounds(Vector3(min(p.x for p in self.points),
                              min(p.y for p in self.points), 0),
                      Vector3(max(p.x for p in self.points),
                              max(p.y for p in self.points), 0))

    def clone(self):
        return Polygon(self.points, self.paths, name=self.name)

    def render(self):
        sb = StatementBuilder('polygon')
        sb.add(None, [[p.x, p.y] for p in self.points])
        sb.add(None, self.paths)
        return sb.statement()


class Square(Node):
    """rectangle of ``size``, with one corner at the origin unless
    ``center`` is true"""

    def __init__(self, size=1.0, center=False, name=None):
        super().__init__(name=name)
        self.size = vector2(size)
        self.center = center

    def __repr__(self):
        return f"Square({self.size!r},{self.center})"

    def position(self):
        if self.center:
            return Vector3()
        return Vector3(self.size.x / 2, self.size.y / 2, 0)

    def bounds(self):
        if self.center:
            half = self.size / 2
            return Bounds(Vector3(-half.x, -half.y, 0), Vector3(half.x, half.y, 0))
        return Bounds(Vector3(), Vector3(self.size.x, self.size.y, 0))

    def clone(self):
        return Square(self.size, self.center, name=self.name)

    def render(self):
        return StatementBuilder('square') \
            .add('size', self.size) \
            .add('center', self.center) \
            .statement()


class Circle(Node):
    """circle of ``radius`` centered on the origin"""

    def __init__(self, radius=1.0, resolution=0, name=None):
        super().__init__(name=name)
        self.radius = radius
        self.resolution = resolution

    def __repr__(self):
        return f"Circle({self.radius},{self.resolution})"

    def position(self):
        return Vector3()

    def bounds(self):
        r = self.radius
        return Bounds(Vector3(-r, -r, 0), Vector3(r, r, 0))

    def clone(self):
        return Circle(self.radius, self.resolution, name=self.name)

    def render(self):
        return StatementBuilder('circle') \
            .add('r', self.radius) \
            .add('$fn', self.resolution) \
            .statement()
