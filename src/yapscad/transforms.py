## single-child transform nodes for yapSCAD

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
Transform Nodes
===============

Each class in this module wraps exactly one child node and renders an
OpenSCAD transform call followed by the child's script, indented one
level::

    translate(v = [1.00, 2.00, 3.00])
        cube(size = [1.00, 1.00, 1.00], center = false);

Vector parameters print at display precision (two decimals), scalar
parameters at full precision.  Positions and bounds are derived from
the child's through the matching ``yapscad.xform`` matrix.

Transform nodes are normally created through the fluent methods on
``Node`` (``translate()``, ``rotate()``, ...), not directly.
"""

from abc import abstractmethod

from yapscad.node import Node
from yapscad.render import StatementBuilder, single_statement
from yapscad.spatial import Bounds, Vector3
from yapscad.xform import EulerRotation, Reflection, Scale, Translation


class Transform(Node):
    """base class of single-child transform nodes"""

    def __init__(self, child, name=None):
        super().__init__([child], name)

    def __repr__(self):
        return f"{type(self).__name__}({self.child!r})"

    @property
    def child(self):
        return self._children[0]

    @abstractmethod
    def _call(self):
        """return a StatementBuilder holding this transform's call"""

    @abstractmethod
    def _copy(self, child):
        """return a new transform of this kind around ``child``"""

    def _matrix(self):
        """affine matrix applied to the child, None for pass-through"""
        return None

    def position(self):
        m = self._matrix()
        p = self.child.position()
        return p if m is None else m.apply(p)

    def bounds(self):
        m = self._matrix()
        b = self.child.bounds()
        return b if m is None else b.transform(m)

    def clone(self):
        c = self._copy(self.child.clone())
        c.name = self.name
        return c

    def render(self):
        return single_statement(self._call().call(), self.child.render())


class Translated(Transform):
    """child moved by ``vector``"""

    def __init__(self, child, vector, name=None):
        super().__init__(child, name)
        self.vector = vector

    def _call(self):
        return StatementBuilder('translate').add('v', self.vector)

    def _copy(self, child):
        return Translated(child, self.vector)

    def _matrix(self):
        return Translation(self.vector)


class Rotated(Transform):
    """child rotated by the euler angles ``angle`` (degrees, applied
    about X, then Y, then Z)"""

    def __init__(self, child, angle, name=None):
        super().__init__(child, name)
        self.angle = angle

    def _call(self):
        return StatementBuilder('rotate').add('a', self.angle)

    def _copy(self, child):
        return Rotated(child, self.angle)

    def _matrix(self):
        return EulerRotation(self.angle)


class Scaled(Transform):
    """child scaled by the per-axis factors ``scale``"""

    def __init__(self, child, scale, name=None):
        super().__init__(child, name)
        self.scale_factor = scale

    def _call(self):
        return StatementBuilder('scale').add('v', self.scale_factor)

    def _copy(self, child):
        return Scaled(child, self.scale_factor)

    def _matrix(self):
        return Scale(self.scale_factor)


class Mirrored(Transform):
    """child mirrored about the plane through the origin with the
    given ``normal``"""

    def __init__(self, child, normal, name=None):
        super().__init__(child, name)
        self.normal = normal

    def _call(self):
        return StatementBuilder('mirror').add(None, self.normal)

    def _copy(self, child):
        return Mirrored(child, self.normal)

    def _matrix(self):
        return Reflection(self.normal)


class Resized(Transform):
    """child stretched to the dimensions ``size``.  A zero component
    leaves that axis alone."""

    def __init__(self, child, size, name=None):
        super().__init__(child, name)
        self.size = size

    def _call(self):
        return StatementBuilder('resize').add('newsize', self.size)

    def _copy(self, child):
        return Resized(child, self.size)

    def _matrix(self):
        current = self.child.bounds().size
        factors = [n / c if (n != 0 and c != 0) else 1.0
                   for n, c in zip(self.size, current)]
        return Scale(Vector3(*factors))


class Colored(Transform):
    """child drawn in the named color ``color`` with ``opacity``"""

    def __init__(self, child, color, opacity=1.0, name=None):
        super().__init__(child, name)
        self.color_name = color
        self.opacity = opacity

    def _call(self):
        return StatementBuilder('color') \
            .add(None, self.color_name) \
            .add(None, self.opacity)

    def _copy(self, child):
        return Colored(child, self.color_name, self.opacity)


class LinearExtruded(Transform):
    """2D child extruded along Z up to ``height``, optionally along
    ``vector``"""

    def __init__(self, child, height, vector=None, resolution=10, name=None):
        super().__init__(child, name)
        self.height = height
        self.vector = vector
        self.resolution = resolution

    def _call(self):
        return StatementBuilder('linear_extrude') \
            .add('height', self.height) \
            .add('v', self.vector) \
            .add('$fn', self.resolution)

    def _copy(self, child):
        return LinearExtruded(child, self.height, self.vector, self.resolution)

    def position(self):
        p = self.child.position()
        return Vector3(p.x, p.y, self.height / 2.0)

    def bounds(self):
        b = self.child.bounds()
        return Bounds(Vector3(b.xmin, b.ymin, min(0.0, self.height)),
                      Vector3(b.xmax, b.ymax, max(0.0, self.height)))


class RotateExtruded(Transform):
    """2D child revolved around the Z axis through ``angle`` degrees;
    the child's Y axis becomes Z"""

    def __init__(self, child, angle, resolution=10, name=None):
        super().__init__(child, name)
        self.angle = angle
        self.resolution = resolution

    def _call(self):
        return StatementBuilder('rotate_extrude') \
            .add('angle', self.angle) \
            .add('$fn', self.resolution)

    def _copy(self, child):
        return RotateExtruded(child, self.angle, self.resolution)

    def position(self):
        return Vector3(0, 0, self.child.position().y)

    def bounds(self):
        b = self.child.bounds()
        r = max(abs(b.xmin), abs(b.xmax))
        return Bounds(Vector3(-r, -r, b.ymin), Vector3(r, r, b.ymax))
