## solid primitives for yapSCAD

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
Solid Primitives
================

Three-dimensional leaf nodes: ``Cube``, ``Sphere`` and ``Cylinder``.
``resolution`` maps to OpenSCAD's ``$fn``; zero leaves the fragment
count to OpenSCAD.
"""

from yapscad.node import Node
from yapscad.render import StatementBuilder
from yapscad.spatial import Bounds, Vector3, vector3


class Cube(Node):
    """box of ``size``, with one corner at the origin unless ``center``
    is true"""

    def __init__(self, size=1.0, center=False, name=None):
        super().__init__(name=name)
        self.size = vector3(size)
        self.center = center

    def __repr__(self):
        return f"Cube({self.size!r},{self.center})"

    def position(self):
        if self.center:
            return Vector3()
        return self.size / 2

    def bounds(self):
        if self.center:
            half = self.size / 2
            return Bounds(half.negate(), half)
        return Bounds(Vector3(), self.size)

    def clone(self):
        return Cube(self.size, self.center, name=self.name)

    def render(self):
        return StatementBuilder('cube') \
            .add('size', self.size) \
            .add('center', self.center) \
            .statement()


class Sphere(Node):
    """sphere of ``radius`` centered on the origin"""

    def __init__(self, radius=1.0, resolution=0, name=None):
        super().__init__(name=name)
        self.radius = radius
        self.resolution = resolution

    def __repr__(self):
        return f"Sphere({self.radius},{self.resolution})"

    def position(self):
        return Vector3()

    def bounds(self):
        r = self.radius
        return Bounds(Vector3(-r, -r, -r), Vector3(r, r, r))

    def clone(self):
        return Sphere(self.radius, self.resolution, name=self.name)

    def render(self):
        return StatementBuilder('sphere') \
            .add('r', self.radius) \
            .add('$fn', self.resolution) \
            .statement()


class Cylinder(Node):
    """Cylinder (or cone) of ``height`` along Z, with bottom radius
    ``radius1`` and top radius ``radius2``.  The base sits on the XY
    plane unless ``center`` is true."""

    def __init__(self, height=1.0, radius1=1.0, radius2=None, center=False,
                 resolution=0, name=None):
        super().__init__(name=name)
        self.height = height
        self.radius1 = radius1
        self.radius2 = radius1 if radius2 is None else radius2
        self.center = center
        self.resolution = resolution

    def __repr__(self):
        return f"Cylinder({self.height},{self.radius1},{self.radius2},{self.center})"

    def position(self):
        if self.center:
            return Vector3()
        return Vector3(0, 0, self.height / 2)

    def bounds(self):
        r = max(self.radius1, self.radius2)
        if self.center:
            h = self.height / 2
            return Bounds(Vector3(-r, -r, -h), Vector3(r, r, h))
        return Bounds(Vector3(-r, -r, 0), Vector3(r, r, self.height))

    def clone(self):
        return Cylinder(self.height, self.radius1, self.radius2, self.center,
                        self.resolution, name=self.name)

    def render(self):
        return StatementBuilder('cylinder') \
            .add('h', self.height) \
            .add('r1', self.radius1) \
            .add('r2', self.radius2) \
            .add('center', self.center) \
            .add('$fn', self.resolution) \
            .statement()
