"""Span assembly: turning parameter spans into trimmed boundary curves."""

from curvebool.core.traversal import Span
from curvebool.domain import CompoundCurve, NurbsCurve, Region
from curvebool.domain._nurbs import KNOT_TOLERANCE


def trim_span(curve: NurbsCurve, parameters: tuple[float, float]) -> list[NurbsCurve]:
    """Cut the material between two parameters out of a closed curve.

    When ``p0 < p1`` the interior span ``[p0, p1]`` is returned as one piece.
    Otherwise the span wraps across the domain seam and two pieces are
    returned: ``[p0, end]`` followed by ``[start, p1]``, so that their
    concatenation runs continuously through the seam.

    An endpoint on the seam (either domain end, within the knot tolerance)
    needs no cut there, so the piece running through it is kept whole.

    Args:
        curve: Closed host curve
        parameters: (p0, p1) span endpoints

    Returns:
        One or two trimmed curves

    Raises:
        TrimError: If a parameter lies outside the curve domain
    """
    start, end = curve.knots_domain()
    p0, p1 = (_snap_to_seam(p, start, end) for p in parameters)

    if p0 < p1:
        if p0 == start:
            head, _ = curve.try_trim(p1)
            return [head]
        _, tail = curve.try_trim(p0)
        head, _ = tail.try_trim(p1)
        return [head]

    if p1 == start:
        _, tail = curve.try_trim(p0)
        return [tail]

    head, tail = curve.try_trim(p1)
    _, wrapped = tail.try_trim(p0)
    return [wrapped, head]


def _snap_to_seam(parameter: float, start: float, end: float) -> float:
    """Map parameters within the knot tolerance of either domain end onto the start."""
    if abs(parameter - start) <= KNOT_TOLERANCE or abs(parameter - end) <= KNOT_TOLERANCE:
        return start
    return parameter


class SpanAssembler:
    """Builds regions from the span lists produced by graph traversal."""

    def __init__(self, subject: NurbsCurve, clip: NurbsCurve) -> None:
        """Initialize assembler with the two host curves."""
        self.subject = subject
        self.clip = clip

    def assemble(self, spans: list[Span]) -> Region:
        """Trim every span and concatenate the pieces into one boundary.

        Args:
            spans: Spans of one closed boundary, in traversal order

        Returns:
            Region whose exterior holds the trimmed pieces
        """
        pieces: list[NurbsCurve] = []
        for span in spans:
            host = self.subject if span.subject else self.clip
            pieces.extend(trim_span(host, (span.start, span.end)))
        return Region(exterior=CompoundCurve(spans=pieces))
