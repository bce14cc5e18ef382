# =============================================================================
# core/math_tools.py  —  Arithmetic, greeting and geometry handlers
# =============================================================================
#
# Pure functions.  No I/O, no logging, same output for the same input.
# =============================================================================

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def add(a: int, b: int) -> int:
    """Add two integers.

    Python integers never wrap, but a sum outside the signed 64-bit range
    cannot round-trip through most JSON clients, so it is refused.

    Raises:
        OverflowError: the sum is outside [-2**63, 2**63 - 1].
    """
    total = a + b
    if total < INT64_MIN or total > INT64_MAX:
        raise OverflowError(f"{a} + {b} does not fit in a signed 64-bit integer")
    return total


def greet(name: str = "") -> str:
    # An omitted name is interpolated as-is (empty), matching existing clients.
    return f"Hello, {name}! Welcome to MCP on Azure Functions."


def calculate_rectangle_area(width: float, height: float) -> float:
    """Area of a width x height rectangle.  Negative sides are not rejected."""
    return width * height
