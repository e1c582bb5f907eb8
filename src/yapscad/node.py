## yapSCAD node base class
## ========================

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

"""the ``Node`` base class for **yapSCAD**

===============
Overview
===============

A ``Node`` is any object, or collection of objects, that becomes an
OpenSCAD script when converted to a string.  There are three kinds:

* leaf primitives (``yapscad.poly``, ``yapscad.solids``) that own
  geometric data;
* transform wrappers (``yapscad.transforms``) around exactly one
  child;
* boolean blocks (``yapscad.combine``) around an ordered list of
  children.

Every node receives a process-unique integer ``id`` from the active
``IdCounter`` when it is constructed.  Nodes record their most recent
attachment point as ``parent``; the reference is weak and does not keep
the parent alive.

Derivation methods such as ``translate()`` or ``union()`` never modify
the receiver, they return a new wrapping node.  The ``+`` and ``-``
operators are the exception: when one operand already is a ``Union``
(resp. ``Difference``) the other operand is appended to it in place and
that same node is returned.

"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
import logging
import numbers
import threading
import weakref

from yapscad.spatial import Vector3, vector3

logger = logging.getLogger(__name__)


class IdCounter:
    """monotonically increasing source of node ids"""

    def __init__(self, start=0):
        self.__last = start
        self.__lock = threading.Lock()

    def __repr__(self):
        return f"IdCounter({self.__last})"

    @property
    def last(self):
        """the most recently issued id"""
        return self.__last

    def next(self):
        with self.__lock:
            self.__last += 1
            return self.__last


_counter = IdCounter()


def active_counter():
    return _counter


@contextmanager
def id_scope(counter=None):
    """issue node ids from ``counter`` (a fresh ``IdCounter`` by
    default) for the duration of the ``with`` block.  Intended for
    tests that need deterministic ids."""
    global _counter
    saved = _counter
    _counter = counter if counter is not None else IdCounter()
    try:
        yield _counter
    finally:
        _counter = saved


def _xyz(x, y, z, what):
    if y is None and z is None:
        return vector3(x)
    if y is None or z is None:
        raise ValueError(f'{what} requires a vector or all of x, y, z')
    return Vector3(x, y, z)


class Node(ABC):
    """abstract base class of everything that renders to OpenSCAD"""

    def __init__(self, children=(), name=None):
        self.__id = _counter.next()
        self.__parent = None
        self.name = name
        self._children = []
        for c in children:
            self._attach(c)

    @property
    def id(self):
        """process-unique id, assigned at construction"""
        return self.__id

    @property
    def parent(self):
        """the node this one was most recently attached to, or None"""
        if self.__parent is None:
            return None
        return self.__parent()

    def _setParent(self, p):
        self.__parent = weakref.ref(p)

    def _attach(self, child):
        if not isinstance(child, Node):
            raise ValueError(f'not a Node instance: {child!r}')
        self._children.append(child)
        child._setParent(self)

    ## contract every concrete node fulfils

    @abstractmethod
    def position(self):
        """Return the computed position of this object as a ``Vector3``.

        For objects that are the aggregate of several operations or
        children this may be an approximation or an average.
        """

    @abstractmethod
    def bounds(self):
        """return the approximate ``Bounds`` of this object"""

    @abstractmethod
    def clone(self):
        """Return a copy of this object and all of its children.

        All nodes in the copy are new instances with new ids, but value
        objects used as parameters (vectors, point lists) are shared
        with the original.
        """

    @abstractmethod
    def render(self):
        """return the OpenSCAD script for this node and its subtree"""

    def __str__(self):
        return self.render()

    def is_same_as(self, other):
        """True if this node and ``other`` render to exactly the same script.

        Both subtrees are rendered on every call, so the cost grows
        with the size of both trees.  Do not use this in place of
        identity comparisons on large or deeply nested structures;
        cache ``render()`` output instead when comparing repeatedly.
        """
        return self.render() == other.render()

    ## traversal

    def children(self, recursive=True, predicate=None):
        """Return the children of this node.

        If ``recursive`` is true, all descendants are returned in
        pre-order, left to right.  Otherwise a new list of the direct
        children is returned.  ``predicate`` (which may also be passed
        as the first argument) filters the recursive result.
        """
        if callable(recursive):
            predicate = recursive
            recursive = True

        if not recursive:
            found = list(self._children)
        else:
            # reversed so that the first child is popped first
            stack = list(reversed(self._children))
            found = []
            while stack:
                child = stack.pop()
                found.append(child)
                stack.extend(reversed(child._children))

        if predicate is not None:
            found = [c for c in found if predicate(c)]
        return found

    ## transforms

    def color(self, name, opacity=1.0):
        """apply a named color and an opacity between 0.0 and 1.0"""
        from yapscad.transforms import Colored
        return Colored(self, name, opacity)

    def mirror(self, x, y=None, z=None):
        """mirror about the plane through the origin with normal ``x``
        (or the normal ``x, y, z``)"""
        from yapscad.transforms import Mirrored
        return Mirrored(self, _xyz(x, y, z, 'mirror'))

    def resize(self, x, y=None, z=None):
        """resize to the given X/Y/Z dimensions"""
        from yapscad.transforms import Resized
        return Resized(self, _xyz(x, y, z, 'resize'))

    def rotate(self, x, y=None, z=None):
        """rotate by the euler angles ``x, y, z`` in degrees.  A single
        number rotates about the Z axis."""
        from yapscad.transforms import Rotated
        if y is None and z is None and isinstance(x, numbers.Real):
            return Rotated(self, Vector3(0, 0, x))
        return Rotated(self, _xyz(x, y, z, 'rotate'))

    def scale(self, x, y=None, z=None):
        """scale by per-axis factors; a single number scales uniformly"""
        from yapscad.transforms import Scaled
        return Scaled(self, _xyz(x, y, z, 'scale'))

    def translate(self, x, y=None, z=None):
        """move by the offset ``x`` (or ``x, y, z``)"""
        from yapscad.transforms import Translated
        return Translated(self, _xyz(x, y, z, 'translate'))

    def linear_extrude(self, height, vector=None, resolution=10):
        from yapscad.transforms import LinearExtruded
        if vector is not None:
            vector = vector3(vector)
        return LinearExtruded(self, height, vector, resolution)

    def rotate_extrude(self, angle, resolution=10):
        from yapscad.transforms import RotateExtruded
        return RotateExtruded(self, angle, resolution)

    ## boolean blocks

    def _block(self, what, others, factory):
        if not others or any(o is None for o in others):
            raise ValueError(f'{what} requires at least one non-null entity')
        return factory([self, *others])

    def union(self, *others):
        """Union of this node and ``others`` (logical or).  May be used
        with 2D or 3D objects, but don't mix them."""
        from yapscad.combine import Union
        return self._block('union', others, Union)

    def difference(self, *others):
        """Subtract ``others`` from this node (logical and not)."""
        from yapscad.combine import Difference
        return self._block('difference', others, Difference)

    def intersection(self, *others):
        """Keep only the portion shared by this node and all ``others``."""
        from yapscad.combine import Intersection
        return self._block('intersection', others, Intersection)

    def hull(self, *others):
        """Convex hull of this node and ``others``."""
        from yapscad.combine import Hull
        return self._block('hull', others, Hull)

    def minkowski(self, *others):
        """Minkowski sum of this node and ``others``."""
        from yapscad.combine import Minkowski
        return self._block('minkowski', others, Minkowski)

    ## operators

    def __add__(self, other):
        from yapscad.combine import Union
        return self._flatten(other, Union)

    def __sub__(self, other):
        from yapscad.combine import Difference
        return self._flatten(other, Difference)

    def _flatten(self, other, cls):
        if not isinstance(other, Node):
            return NotImplemented
        # exact type checks, subclasses do not flatten
        if type(self) is cls:
            logger.debug('appending node %d to %s %d', other.id, cls.__name__, self.id)
            self._attach(other)
            return self
        if type(other) is cls:
            logger.debug('appending node %d to %s %d', self.id, cls.__name__, other.id)
            other._attach(self)
            return other
        return cls([self, other])

    ## output

    def to_file(self, path, settings=None):
        """Write the script for this node to ``path`` (``.scad`` is
        appended when missing) and return a ``ScadInvoker`` for it."""
        from yapscad.io.scad import write_scad
        return write_scad(self, path, settings)
