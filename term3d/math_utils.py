#
# PROJECT: term3d
# MODULE: term3d/math_utils.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 3.1
# LOG_REF: 2026-10-19
#

import math


class Vec3:
    """Immutable 3-component vector."""
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float, y: float, z: float):
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))
        object.__setattr__(self, 'z', float(z))

    def __setattr__(self, name, value):
        raise AttributeError("Vec3 is immutable")

    def __repr__(self):
        return f"Vec3({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        raise IndexError("Vec3 index out of range")

    def __eq__(self, other):
        if isinstance(other, Vec3):
            return self.x == other.x and self.y == other.y and self.z == other.z
        return NotImplemented

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __sub__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def cross(self, other) -> 'Vec3':
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> 'Vec3':
        m = self.magnitude()
        if m == 0:
            return Vec3(0, 0, 0)
        return Vec3(self.x / m, self.y / m, self.z / m)

    def rotate_x(self, theta: float) -> 'Vec3':
        """Rotate about the x axis by theta radians; x is left unchanged.

        The OBJ meshes this previews use x as "up", so spinning about x
        turns the model in front of the camera.
        """
        c = math.cos(theta)
        s = math.sin(theta)
        return Vec3(self.x, self.y * c - self.z * s, self.y * s + self.z * c)

    def is_close(self, other, abs_tol: float = 1e-6) -> bool:
        return (math.isclose(self.x, other.x, abs_tol=abs_tol)
                and math.isclose(self.y, other.y, abs_tol=abs_tol)
                and math.isclose(self.z, other.z, abs_tol=abs_tol))
