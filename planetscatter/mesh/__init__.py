from .bend import bend_mesh, bend_scene, bend_vertices
from .planet import generate_planet_mesh, write_ascii_ply

__all__ = ["bend_mesh", "bend_scene", "bend_vertices", "generate_planet_mesh", "write_ascii_ply"]
