from ..types.format_type import DEFAULT_TOLERANCE


def is_close(a: float, b: float, tol: float = DEFAULT_TOLERANCE) -> bool:
    """Check if two floats are equal within an absolute tolerance."""
    return abs(a - b) <= tol
