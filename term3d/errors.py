#
# PROJECT: term3d
# MODULE: term3d/errors.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 7
# LOG_REF: 2026-10-19
#


class Term3DError(Exception):
    """Base class for all errors raised by term3d."""


class MalformedGeometryError(Term3DError, ValueError):
    """A triangle was built without exactly three vertices and three normals."""


class MeshLoadError(Term3DError):
    """A mesh file could not be read or held no usable faces."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not load mesh '{path}': {reason}")
