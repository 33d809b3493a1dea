"""Render the nested-box demo chain to demo.png."""

import logging

from virtual_scaling import Point
from virtual_scaling.demo import FixedPointer, build_demo_boxes, render_boxes
from virtual_scaling.demo.matplotlib_surface import MatplotlibSurface

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

boxes = build_demo_boxes()
pointer = FixedPointer(Point(400, 300))

surface = MatplotlibSurface(800, 800)
for line in render_boxes(surface, boxes, pointer):
    logging.info(line)
surface.save("demo.png")
surface.close()
print("Saved demo.png")
