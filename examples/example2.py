## extruded polygon example for yapSCAD
print("example2.py -- yapSCAD extrusion and boolean example")

from yapscad.poly import Circle, Polygon
from yapscad.solids import Sphere

star = Polygon([(0, 10), (2.4, 3.3), (9.5, 3.1), (3.9, -1.3), (5.9, -8.1),
                (0, -4), (-5.9, -8.1), (-3.9, -1.3), (-9.5, 3.1), (-2.4, 3.3)])

badge = star.linear_extrude(2) + Circle(3, 32).linear_extrude(4) \
    + Sphere(1.5, 16).translate(0, 0, 4)
badge = badge.color("gold")

ring = Circle(1, 16).translate(8, 0, 0).rotate_extrude(360, 48)

print(badge.hull(ring.scale(0.5)))
