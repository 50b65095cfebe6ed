"""Grid pathfinding visualizer core.

This package implements a step-wise uniform-cost / weighted A* search over a
2D grid, driven one settled cell per tick so a front end can animate it.
"""

__version__ = "1.0.0"
__author__ = "Grid Search Demo"
