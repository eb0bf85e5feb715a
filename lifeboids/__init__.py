"""Game of Life colonies with timed stepping modes, and flocking boids."""

__version__ = "0.1.0"