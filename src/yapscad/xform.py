## generalized matrix transformation operations for 3D homogeneous
## coordinates in yapSCAD

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

from math import *
import numbers

from yapscad.spatial import Vector3, vector3

## a matrix is a rows x cols grid stored as a list of row lists.
## Transform matrices are 4x4 and operate on homogeneous column
## vectors, which is what Vector3.to_matrix() produces.  Matrix-vector
## products (apply()) assume a column vector and return a Vector3.

epsilon = 1e-9


def _isgoodnum(x):
    return (not isinstance(x, bool)) and isinstance(x, numbers.Real)


class Matrix:
    """rows x cols numeric matrix; the default is the 4x4 identity"""

    def __init__(self, a=None, rows=4, cols=4):
        if rows < 1 or cols < 1:
            raise ValueError('bad matrix shape: {}x{}'.format(rows, cols))
        self.rows = rows
        self.cols = cols
        self.m = [[1.0 if i == j else 0.0 for j in range(cols)]
                  for i in range(rows)]

        if isinstance(a, Matrix):
            if (a.rows, a.cols) != (rows, cols):
                raise ValueError('cannot copy {}x{} matrix into {}x{}'.format(
                    a.rows, a.cols, rows, cols))
            for i in range(rows):
                self.setrow(i, a.getrow(i))

        elif isinstance(a, (tuple, list)):
            if len(a) == rows and all(isinstance(r, (tuple, list)) for r in a):
                for i in range(rows):
                    if len(a[i]) != cols:
                        raise ValueError('bad row length in matrix initialization: {}'.format(a[i]))
                    for j in range(cols):
                        self.set(i, j, a[i][j])
            elif len(a) == rows * cols:
                for i in range(rows):
                    for j in range(cols):
                        self.set(i, j, a[i * cols + j])
            else:
                raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))

        elif a is not None:
            raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))

    def __repr__(self):
        return "Matrix({},{},{})".format(self.m, self.rows, self.cols)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self.rows, self.cols) == (other.rows, other.cols) and \
            all(abs(self.m[i][j] - other.m[i][j]) < epsilon
                for i in range(self.rows) for j in range(self.cols))

    __hash__ = None

    #return value indexed by i,j
    def get(self, i, j):
        if i < 0 or i >= self.rows or j < 0 or j >= self.cols:
            raise ValueError('bad index passed to get: {},{}'.format(i, j))
        return self.m[i][j]

    #set value indexed by i,j
    def set(self, i, j, x):
        if i < 0 or i >= self.rows or j < 0 or j >= self.cols:
            raise ValueError('bad index passed to set: {},{}'.format(i, j))
        if not _isgoodnum(x):
            raise ValueError('bad element in matrix: {}'.format(x))
        self.m[i][j] = float(x)

    def getrow(self, i):
        if i < 0 or i >= self.rows:
            raise ValueError('bad row passed to getrow: {}'.format(i))
        return list(self.m[i])

    def getcol(self, j):
        if j < 0 or j >= self.cols:
            raise ValueError('bad column passed to getcol: {}'.format(j))
        return [self.m[i][j] for i in range(self.rows)]

    def setrow(self, i, x):
        if i < 0 or i >= self.rows:
            raise ValueError('bad row index passed to setrow: {}'.format(i))
        if len(x) != self.cols:
            raise ValueError('bad row passed to setrow: {}'.format(x))
        for j in range(self.cols):
            self.set(i, j, x[j])

    def setcol(self, j, x):
        if j < 0 or j >= self.cols:
            raise ValueError('bad column index passed to setcol: {}'.format(j))
        if len(x) != self.rows:
            raise ValueError('bad column passed to setcol: {}'.format(x))
        for i in range(self.rows):
            self.set(i, j, x[i])

    def transpose(self):
        return Matrix([self.getcol(j) for j in range(self.cols)],
                      self.cols, self.rows)

    # matrix multiply.  If x is a matrix, compute MX.  If x is a
    # Vector3, compute Mx for the homogeneous column vector and return
    # a Vector3.  If x is a scalar, compute xM.

    def mul(self, x):
        if isinstance(x, Matrix):
            if self.cols != x.rows:
                raise ValueError('cannot multiply {}x{} by {}x{} matrix'.format(
                    self.rows, self.cols, x.rows, x.cols))
            result = Matrix(None, self.rows, x.cols)
            for i in range(self.rows):
                row = self.m[i]
                for j in range(x.cols):
                    result.m[i][j] = sum(row[k] * x.m[k][j]
                                         for k in range(self.cols))
            return result
        elif _isgoodnum(x):
            return Matrix([[v * x for v in row] for row in self.m],
                          self.rows, self.cols)
        elif hasattr(x, 'to_matrix'):
            return self.apply(x)

        raise ValueError('bad thing passed to mul(): {}'.format(x))

    def apply(self, p):
        """transform point ``p`` (anything ``vector3()`` accepts) by
        this 4x4 affine matrix"""
        if (self.rows, self.cols) != (4, 4):
            raise ValueError('apply() requires a 4x4 matrix')
        col = vector3(p).to_matrix()
        r = self.mul(col)
        w = r.m[3][0]
        if abs(w) < epsilon:
            raise ValueError('degenerate homogeneous coordinate')
        return Vector3(r.m[0][0] / w, r.m[1][0] / w, r.m[2][0] / w)


# return the generalized 4x4 arbitrary axis rotation matrix, angle in
# degrees
def Rotation(axis, angle, inverse=False):
    axis = vector3(axis)
    m = sqrt(axis.dot(axis))
    if m < epsilon:
        raise ValueError('zero-length rotation axis not allowed')
    u = axis / m

    if inverse:
        angle *= -1.0
    rad = radians(angle % 360.0)

    ux = u.x
    uy = u.y
    uz = u.z

    cang = cos(rad)
    cmin = 1.0 - cang
    sang = sin(rad)

    # see http://www.opengl-tutorial.org/assets/faq_quaternions/index.html#Q38
    R = [[cang + ux*ux*cmin, ux*uy*cmin - uz*sang, ux*uz*cmin + uy*sang, 0],
         [uy*ux*cmin + uz*sang, cang + uy*uy*cmin, uy*uz*cmin - ux*sang, 0],
         [uz*ux*cmin - uy*sang, uz*uy*cmin + ux*sang, cang + uz*uz*cmin, 0],
         [0, 0, 0, 1]]

    return Matrix(R)


# OpenSCAD's rotate(a = [x, y, z]) rotates about x, then y, then z
def EulerRotation(angles, inverse=False):
    a = vector3(angles)
    rx = Rotation(Vector3(1, 0, 0), a.x, inverse)
    ry = Rotation(Vector3(0, 1, 0), a.y, inverse)
    rz = Rotation(Vector3(0, 0, 1), a.z, inverse)
    if inverse:
        return rx.mul(ry).mul(rz)
    return rz.mul(ry).mul(rx)


def Translation(delta, inverse=False):
    d = vector3(delta)
    if inverse:
        d = d.negate()
    T = [[1, 0, 0, d.x],
         [0, 1, 0, d.y],
         [0, 0, 1, d.z],
         [0, 0, 0, 1]]
    return Matrix(T)


def Scale(x, y=None, z=None, inverse=False):
    if _isgoodnum(x) and _isgoodnum(y) and _isgoodnum(z):
        s = Vector3(x, y, z)
    else:
        s = vector3(x)

    if inverse:
        s = 1.0 / s

    S = [[s.x, 0, 0, 0],
         [0, s.y, 0, 0],
         [0, 0, s.z, 0],
         [0, 0, 0, 1.0]]
    return Matrix(S)


# reflection about the plane through the origin with the given normal
# (Householder matrix I - 2nn^T); the normal is Euclidean-normalized
def Reflection(normal):
    n = vector3(normal)
    m = sqrt(n.dot(n))
    if m < epsilon:
        raise ValueError('zero-length mirror normal not allowed')
    n = n / m
    c = n.components
    M = [[(1.0 if i == j else 0.0) - 2.0 * c[i] * c[j] for j in range(3)] + [0]
         for i in range(3)]
    M.append([0, 0, 0, 1])
    return Matrix(M)
