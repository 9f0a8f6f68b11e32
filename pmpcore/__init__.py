"""Core building blocks for polygon mesh processing: vectors, properties,
timing, memory usage, heaps, quadrics, normal cones, barycentric
coordinates, colour maps, tessellation and trackball camera math."""

__version__ = "0.1.0"

__all__ = [
    "barycentric",
    "colormap",
    "heap",
    "memory_usage",
    "normal_cone",
    "properties",
    "quadric",
    "tessellation",
    "timer",
    "trackball",
    "vectors",
]