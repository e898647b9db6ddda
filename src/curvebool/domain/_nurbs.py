"""Internal NURBS evaluation and knot insertion algorithms.

This is an internal module containing helper functions for NurbsCurve.
Not intended for public use.

Control points are handled in homogeneous form ``(w*x, w*y, w*z, w)`` so that
the same code paths serve rational and non-rational curves.
"""

Homogeneous = tuple[float, float, float, float]

# Parameters this close to a knot are treated as lying on it
KNOT_TOLERANCE = 1e-12


def find_span(n: int, degree: int, u: float, knots: list[float]) -> int:
    """Find the knot span index containing parameter u.

    Binary search over the knot vector (The NURBS Book, A2.1).

    Args:
        n: Index of the last control point
        degree: Curve degree
        u: Parameter value
        knots: Knot vector

    Returns:
        Index k such that knots[k] <= u < knots[k + 1]
    """
    if u >= knots[n + 1]:
        return n
    if u <= knots[degree]:
        return degree

    low = degree
    high = n + 1
    mid = (low + high) // 2
    while u < knots[mid] or u >= knots[mid + 1]:
        if u < knots[mid]:
            high = mid
        else:
            low = mid
        mid = (low + high) // 2
    return mid


def de_boor(
    control: list[Homogeneous],
    knots: list[float],
    degree: int,
    u: float,
) -> Homogeneous:
    """Evaluate a B-spline in homogeneous space with de Boor's algorithm.

    Args:
        control: Homogeneous control points
        knots: Knot vector
        degree: Curve degree
        u: Parameter value inside the curve domain

    Returns:
        Homogeneous point at u
    """
    k = find_span(len(control) - 1, degree, u, knots)
    d = [list(control[j + k - degree]) for j in range(degree + 1)]

    for r in range(1, degree + 1):
        for j in range(degree, r - 1, -1):
            left = knots[j + k - degree]
            denom = knots[j + 1 + k - r] - left
            alpha = 0.0 if denom == 0.0 else (u - left) / denom
            d[j] = [(1.0 - alpha) * d[j - 1][c] + alpha * d[j][c] for c in range(4)]

    x, y, z, w = d[degree]
    return (x, y, z, w)


def insert_knot(
    control: list[Homogeneous],
    knots: list[float],
    degree: int,
    u: float,
) -> tuple[list[Homogeneous], list[float]]:
    """Insert knot u once (Boehm's algorithm).

    Args:
        control: Homogeneous control points
        knots: Knot vector
        degree: Curve degree
        u: Knot value to insert, strictly inside the domain

    Returns:
        Tuple of (new_control, new_knots)
    """
    n = len(control) - 1
    k = find_span(n, degree, u, knots)

    new_control: list[Homogeneous] = []
    for i in range(n + 2):
        if i <= k - degree:
            new_control.append(control[i])
        elif i <= k:
            alpha = (u - knots[i]) / (knots[i + degree] - knots[i])
            prev = control[i - 1]
            cur = control[i]
            new_control.append(
                (
                    alpha * cur[0] + (1.0 - alpha) * prev[0],
                    alpha * cur[1] + (1.0 - alpha) * prev[1],
                    alpha * cur[2] + (1.0 - alpha) * prev[2],
                    alpha * cur[3] + (1.0 - alpha) * prev[3],
                )
            )
        else:
            new_control.append(control[i - 1])

    new_knots = knots[: k + 1] + [u] + knots[k + 1 :]
    return new_control, new_knots


def split(
    control: list[Homogeneous],
    knots: list[float],
    degree: int,
    u: float,
    knot_tolerance: float = KNOT_TOLERANCE,
) -> tuple[tuple[list[Homogeneous], list[float]], tuple[list[Homogeneous], list[float]]]:
    """Split a B-spline at u into head and tail pieces.

    Inserts u until its multiplicity equals the degree, at which point the
    curve passes through a control point that both pieces share.

    Args:
        control: Homogeneous control points
        knots: Knot vector
        degree: Curve degree
        u: Split parameter, strictly inside the domain
        knot_tolerance: Distance under which u snaps onto an existing knot

    Returns:
        ((head_control, head_knots), (tail_control, tail_knots))
    """
    for knot in knots:
        if abs(knot - u) <= knot_tolerance:
            u = knot
            break

    multiplicity = sum(1 for knot in knots if knot == u)
    for _ in range(max(degree - multiplicity, 0)):
        control, knots = insert_knot(control, knots, degree, u)

    first = knots.index(u)
    head = (control[:first], knots[: first + degree] + [u])
    tail = (control[first - 1 :], [u] + knots[first:])
    return head, tail
