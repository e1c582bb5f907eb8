## yapSCAD boolean block nodes: union, difference, intersection,
## hull and minkowski

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
Boolean Block Nodes
===================

A ``Boolean`` node holds an ordered list of children and renders as an
OpenSCAD block statement::

    difference()
    {
        cube(size = [2.00, 2.00, 2.00], center = false);
        sphere(r = 1, $fn = 0);
    }

No geometry is computed here; OpenSCAD evaluates the block.  Bounds
and positions are approximations derived from the children.

``Union`` and ``Difference`` are the targets of the ``+`` and ``-``
operators on ``Node``.  Chained expressions such as ``a + b + c``
produce a single ``Union`` with children ``[a, b, c]`` because the
operator appends to an existing ``Union`` in place.
"""

from yapscad.node import Node
from yapscad.render import block
from yapscad.spatial import Bounds, Vector3


class Boolean(Node):
    """Boolean operations on nodes"""

    types = ('union', 'difference', 'intersection', 'hull', 'minkowski')

    def __init__(self, type='union', children=(), name=None):
        if not type in self.types:
            raise ValueError('invalid type passed to Boolean(): {}'.format(type))
        children = list(children)
        if not children:
            raise ValueError('Boolean requires at least one child')
        super().__init__(children, name)
        self.__type = type

    def __repr__(self):
        return f"{type(self).__name__}({self._children})"

    @property
    def type(self):
        return self.__type

    def position(self):
        return Vector3.average(*[c.position() for c in self._children])

    def bounds(self):
        boxes = [c.bounds() for c in self._children]
        return boxes[0].union(*boxes[1:])

    def clone(self):
        children = [c.clone() for c in self._children]
        if type(self) is Boolean:
            c = Boolean(self.type, children)
        else:
            c = type(self)(children)
        c.name = self.name
        return c

    def render(self):
        body = ''.join(c.render() for c in self._children)
        return block(f"{self.__type}()", body)


class Union(Boolean):
    """sum of all children (logical or)"""

    def __init__(self, children=(), name=None):
        super().__init__('union', children, name)


class Difference(Boolean):
    """first child minus all subsequent children (logical and not)"""

    def __init__(self, children=(), name=None):
        super().__init__('difference', children, name)

    def position(self):
        return self._children[0].position()

    def bounds(self):
        return self._children[0].bounds()


class Intersection(Boolean):
    """portion common to all children (logical and)"""

    def __init__(self, children=(), name=None):
        super().__init__('intersection', children, name)

    def bounds(self):
        boxes = [c.bounds() for c in self._children]
        return boxes[0].intersection(*boxes[1:])


class Hull(Boolean):
    """convex hull of all children"""

    def __init__(self, children=(), name=None):
        super().__init__('hull', children, name)


class Minkowski(Boolean):
    """minkowski sum of all children"""

    def __init__(self, children=(), name=None):
        super().__init__('minkowski', children, name)

    def bounds(self):
        boxes = [c.bounds() for c in self._children]
        lo = boxes[0].minimum
        hi = boxes[0].maximum
        for b in boxes[1:]:
            lo = lo + b.minimum
            hi = hi + b.maximum
        return Bounds(lo, hi)
