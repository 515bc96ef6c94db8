"""Game engine building blocks: maths, colours, noise, splines, meshes, terrain, timers, events, entities, input and shader tables."""

__version__ = "0.1.0"

__all__ = [
    "bitfield",
    "colour",
    "entities",
    "events",
    "geometry",
    "input",
    "mesh_factory",
    "noise",
    "shader",
    "splines",
    "terrain",
    "timer",
    "utils",
    "vecmath",
]