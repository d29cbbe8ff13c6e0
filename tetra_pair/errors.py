# tetra_pair/errors.py
"""Error kinds raised by the structure evaluator."""


class TetraPairError(RuntimeError):
    """Base class for evaluation failures."""
    pass


class InvalidInputError(TetraPairError, ValueError):
    """Raised when input parameters are outside their physical domain."""
    pass


class GeometryInconsistencyError(TetraPairError):
    """Raised when the solved edges and angles do not form a valid tetrahedron."""
    pass
