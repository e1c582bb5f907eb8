## OpenSCAD statement formatting primitives for yapSCAD
## ========================================================

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

"""text formatting primitives for **yapSCAD**

Everything that ends up in a generated ``.scad`` file passes through
this module.  Two number formats coexist and must not be confused:

* ``fmt2()`` renders a number with exactly two decimals.  It is the
  *display* format used by ``Vector2``/``Vector3`` and therefore by all
  transform parameters that carry a vector.
* ``fmtnum()`` renders a number at full precision (shortest round-trip
  representation).  Leaf primitives use it for their raw geometric
  data, such as polygon points.

Neither formatter consults the host locale, so the decimal separator
is always a dot.

"""

import numbers

INDENT = '    '
NEWLINE = '\n'
TERMINATOR = ';'


def fmt2(x):
    """format ``x`` with two fixed decimals"""
    s = '{:.2f}'.format(float(x))
    # values that round to zero print unsigned
    if s == '-0.00':
        return '0.00'
    return s


def fmtnum(x):
    """format ``x`` at full precision; integral values have no
    fractional part, booleans become ``true``/``false``"""
    if isinstance(x, bool):
        return 'true' if x else 'false'
    if isinstance(x, numbers.Integral):
        return str(int(x))
    x = float(x)
    if x.is_integer():
        return str(int(x))
    return repr(x)


def fmtstr(s):
    """quote a string literal"""
    return '"' + str(s).replace('\\', '\\\\').replace('"', '\\"') + '"'


def fmtlist(values):
    """format a (possibly nested) list of numbers at full precision,
    e.g. ``[[0,0],[1,0.5]]``"""
    if isinstance(values, (list, tuple)):
        return '[' + ','.join(fmtlist(v) for v in values) + ']'
    return fmtnum(values)


def fmtvalue(value):
    """format an arbitrary parameter value for an OpenSCAD call"""
    if isinstance(value, str):
        return fmtstr(value)
    if isinstance(value, (bool, numbers.Number)):
        return fmtnum(value)
    if isinstance(value, (list, tuple)):
        return fmtlist(value)
    # vectors and anything else that knows how to print itself
    return str(value)


def indent(text, level=1):
    """indent every non-empty line of ``text`` by ``level`` levels"""
    pad = INDENT * level
    lines = text.split(NEWLINE)
    return NEWLINE.join(pad + l if l else l for l in lines)


class StatementBuilder:
    """assemble an OpenSCAD call such as ``cube(size = [1.00, 1.00,
    1.00], center = false)``.

    Arguments are emitted in the order they are added.  A ``None`` name
    produces a positional argument; a ``None`` value is skipped
    entirely, which is how optional parameters are left out.
    """

    def __init__(self, keyword):
        self.__keyword = keyword
        self.__args = []

    def __repr__(self):
        return f"StatementBuilder({self.__keyword},{self.__args})"

    @property
    def keyword(self):
        return self.__keyword

    def add(self, name, value):
        if value is None:
            return self
        if name is None:
            self.__args.append(fmtvalue(value))
        else:
            self.__args.append(f"{name} = {fmtvalue(value)}")
        return self

    def call(self):
        """return the call expression without terminator"""
        return f"{self.__keyword}({', '.join(self.__args)})"

    def statement(self):
        """return the call as a terminated statement"""
        return statement(self.call())

    def __str__(self):
        return self.call()


def statement(text):
    """terminate a single statement"""
    return text + TERMINATOR + NEWLINE


def single_statement(outer, body):
    """a call that applies to the statement following it, such as a
    transform; ``body`` is indented one level below ``outer``"""
    return outer + NEWLINE + indent(body)


def block(outer, body):
    """a call followed by a brace-delimited body, such as a boolean
    operation; ``body`` is indented one level inside the braces"""
    inner = indent(body)
    if inner and not inner.endswith(NEWLINE):
        inner += NEWLINE
    return outer + NEWLINE + '{' + NEWLINE + inner + '}' + NEWLINE


def module_block(name, body):
    """wrap ``body`` as the named module ``name()``"""
    return block(f"module {name}()", body)
