#
# PROJECT: term3d
# MODULE: term3d/mesh.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 6.1
# LOG_REF: 2026-10-19
#

import logging

from .errors import MalformedGeometryError, MeshLoadError
from .math_utils import Vec3

logger = logging.getLogger(__name__)

# Half edge length of the built-in cube, in world units. The default camera
# spans roughly 240 x 320 world units, so a unit cube would cover no cell.
BUILTIN_CUBE_SIZE = 40.0


class Triangle:
    """
    Three vertex positions and their three vertex normals.

    vertices[i] pairs with normals[i]. A triangle never changes after
    construction; rotate_x() hands back a fresh copy.
    """
    __slots__ = ('vertices', 'normals')

    def __init__(self, vertices, normals):
        vertices = tuple(vertices)
        normals = tuple(normals)
        if len(vertices) != 3 or len(normals) != 3:
            raise MalformedGeometryError(
                f"a triangle needs 3 vertices and 3 normals, "
                f"got {len(vertices)} and {len(normals)}")
        object.__setattr__(self, 'vertices', vertices)
        object.__setattr__(self, 'normals', normals)

    def __setattr__(self, name, value):
        raise AttributeError("Triangle is immutable")

    def __repr__(self):
        return f"Triangle(vertices={list(self.vertices)}, normals={list(self.normals)})"

    def __eq__(self, other):
        if isinstance(other, Triangle):
            return self.vertices == other.vertices and self.normals == other.normals
        return NotImplemented

    def __hash__(self):
        return hash((self.vertices, self.normals))

    def rotate_x(self, theta: float) -> 'Triangle':
        return Triangle(
            [v.rotate_x(theta) for v in self.vertices],
            [n.rotate_x(theta) for n in self.normals],
        )

    @classmethod
    def flat(cls, a: Vec3, b: Vec3, c: Vec3) -> 'Triangle':
        """Triangle whose three normals are all the face normal."""
        n = (b - a).cross(c - a).normalize()
        return cls((a, b, c), (n, n, n))


class Mesh:
    """A list of triangles, as read from an OBJ file or built in code."""

    def __init__(self, triangles=None, name="<memory>"):
        self.triangles = list(triangles) if triangles else []
        self.name = name

    def __len__(self):
        return len(self.triangles)

    def __iter__(self):
        return iter(self.triangles)

    @classmethod
    def cube(cls, half_size: float = 1.0) -> 'Mesh':
        """Cube centered at the origin, with flat per-face normals."""
        s = half_size
        corners = [
            Vec3(-s, -s, -s), Vec3( s, -s, -s), Vec3( s,  s, -s), Vec3(-s,  s, -s),
            Vec3(-s, -s,  s), Vec3( s, -s,  s), Vec3( s,  s,  s), Vec3(-s,  s,  s),
        ]
        faces = [
            [0, 3, 2, 1],  # front
            [5, 6, 7, 4],  # back
            [4, 7, 3, 0],  # left
            [1, 2, 6, 5],  # right
            [3, 7, 6, 2],  # top
            [4, 0, 1, 5],  # bottom
        ]
        triangles = []
        for face in faces:
            pts = [corners[i] for i in face]
            for i in range(1, len(pts) - 1):
                triangles.append(Triangle.flat(pts[0], pts[i], pts[i + 1]))
        return cls(triangles, name="<cube>")

    @classmethod
    def from_obj(cls, filename) -> 'Mesh':
        """
        Read a Wavefront OBJ file.

        Understands 'v', 'vn' and 'f' records; face corners may be written
        as v, v/vt, v//vn or v/vt/vn, with 1-based or negative indices.
        Polygons are split into a triangle fan. Corners without a normal
        reference fall back to the flat face normal.

        Raises:
            MeshLoadError: the file is unreadable, malformed, or has no faces.
        """
        positions = []
        normals = []
        triangles = []
        try:
            with open(filename, 'r', encoding='utf-8') as f:
                for lineno, line in enumerate(f, 1):
                    parts = line.split()
                    if not parts:
                        continue
                    tag = parts[0]
                    try:
                        if tag == 'v':
                            positions.append(_parse_vec3(parts))
                        elif tag == 'vn':
                            normals.append(_parse_vec3(parts))
                        elif tag == 'f':
                            corners = [_parse_corner(tok, len(positions), len(normals))
                                       for tok in parts[1:]]
                            if len(corners) < 3:
                                raise ValueError("face with fewer than 3 corners")
                            triangles.extend(_fan(corners, positions, normals))
                    except (ValueError, IndexError) as e:
                        raise MeshLoadError(filename, f"line {lineno}: {e}") from e
        except UnicodeDecodeError as e:
            raise MeshLoadError(filename, f"not a UTF-8 text file (byte {e.start}: {e.reason})") from e
        except OSError as e:
            raise MeshLoadError(filename, e.strerror or str(e)) from e

        if not triangles:
            raise MeshLoadError(filename, "no faces found")

        logger.debug("Loaded %s: %d vertices, %d normals, %d triangles",
                     filename, len(positions), len(normals), len(triangles))
        return cls(triangles, name=str(filename))


def load_mesh(filename=None) -> Mesh:
    """Load an OBJ file, or the built-in cube when no filename is given."""
    if not filename:
        logger.info("No model given, using the built-in cube")
        return Mesh.cube(BUILTIN_CUBE_SIZE)
    return Mesh.from_obj(filename)


def _parse_vec3(parts) -> Vec3:
    if len(parts) < 4:
        raise ValueError(f"'{parts[0]}' needs 3 coordinates")
    return Vec3(float(parts[1]), float(parts[2]), float(parts[3]))


def _resolve_index(token: str, count: int) -> int:
    idx = int(token)
    if idx > 0:
        idx -= 1
    elif idx < 0:
        idx += count
    else:
        raise ValueError("OBJ indices start at 1")
    if idx < 0 or idx >= count:
        raise IndexError(f"index {token} out of range ({count} defined)")
    return idx


def _parse_corner(token: str, n_positions: int, n_normals: int):
    """Split 'v/vt/vn' into (position index, normal index or None)."""
    fields = token.split('/')
    v = _resolve_index(fields[0], n_positions)
    vn = None
    if len(fields) >= 3 and fields[2]:
        vn = _resolve_index(fields[2], n_normals)
    return v, vn


def _fan(corners, positions, normals):
    first = corners[0]
    for i in range(1, len(corners) - 1):
        tri = (first, corners[i], corners[i + 1])
        pts = [positions[v] for v, _ in tri]
        if any(vn is None for _, vn in tri):
            yield Triangle.flat(*pts)
        else:
            yield Triangle(pts, [normals[vn] for _, vn in tri])
