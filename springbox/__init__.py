"""A small 2D physics sandbox with bodies, springs, gravitation and collisions."""

__version__ = "0.1.0"