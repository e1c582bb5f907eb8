## mounting plate example for yapSCAD
print("example1.py -- yapSCAD mounting plate example")

import logging

from yapscad.logging_config import setup_logging
from yapscad.solids import Cube, Cylinder

setup_logging(logging.INFO)

## a plate with four corner holes, built with the - operator
def plate(width=40, depth=30, thick=4, hole=3.2, inset=5):
    body = Cube([width, depth, thick])
    for x in (inset, width - inset):
        for y in (inset, depth - inset):
            # holes poke through both faces
            body = body - Cylinder(thick + 2, hole / 2, resolution=24) \
                .translate(x, y, -1)
    return body

p = plate()
print(f"plate has {len(p.children(False))} direct children")
print(f"bounds: {p.bounds()}")

filename = "example1-out"
print("\nOutput file name is {}.scad".format(filename))
p.to_file(filename)
