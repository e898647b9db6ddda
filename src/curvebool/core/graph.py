"""Node graph construction for curve boolean operations.

Turns a set of crossings into two circular node lists, one per input curve,
cross-linked at shared crossings (Greiner-Hormann). Links are plain integer
indices: ``next``/``prev`` index the node's own list and ``cross`` indexes the
other list. The graph lives only for the duration of one boolean call.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple

from curvebool.config import SolverConfig
from curvebool.domain import IntersectionRecord, NurbsCurve, Point
from curvebool.exceptions import NoIntersectionError, OddIntersectionCountError


class BooleanOperation(Enum):
    """Set operation applied to the regions bounded by two curves."""

    UNION = "union"
    INTERSECTION = "intersection"
    DIFFERENCE = "difference"


class Status(Enum):
    """Crossing classification along a curve.

    ENTER: the curve passes from outside to inside the other curve
    EXIT: the curve passes from inside to outside the other curve
    """

    ENTER = "enter"
    EXIT = "exit"

    def invert(self) -> "Status":
        """Return the opposite status."""
        return Status.EXIT if self is Status.ENTER else Status.ENTER


# (invert subject list, invert clip list) per operation
INVERSION_TABLE: dict[BooleanOperation, tuple[bool, bool]] = {
    BooleanOperation.UNION: (True, True),
    BooleanOperation.INTERSECTION: (False, False),
    BooleanOperation.DIFFERENCE: (True, False),
}


class NodeRef(NamedTuple):
    """Address of a node: which list it lives in and its index there."""

    subject: bool
    index: int

    def label(self) -> str:
        """Short human-readable label, e.g. ``A2`` or ``B0``."""
        return f"{'A' if self.subject else 'B'}{self.index}"


@dataclass
class Node:
    """One crossing as seen from one of the two curves.

    Attributes:
        parameter: Crossing parameter on the owning curve
        status: ENTER or EXIT relative to the other curve
        subject: True if owned by the subject (first) curve
        next: Index of the following node in the same list
        prev: Index of the preceding node in the same list
        cross: Index of the partner node in the other list
        record: Index of the source IntersectionRecord
    """

    parameter: float
    status: Status
    subject: bool
    next: int
    prev: int
    cross: int | None
    record: int


@dataclass
class NodeGraph:
    """Two cross-linked circular node lists plus visitation state.

    Attributes:
        subject_nodes: Nodes on the subject curve, in parameter order
        clip_nodes: Nodes on the clip curve, in parameter order
    """

    subject_nodes: list[Node]
    clip_nodes: list[Node]
    _subject_visits: list[int] = field(default_factory=list, init=False, repr=False)
    _clip_visits: list[int] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self.reset()

    def __len__(self) -> int:
        return len(self.subject_nodes)

    def reset(self) -> None:
        """Clear visitation state."""
        self._subject_visits = [0] * len(self.subject_nodes)
        self._clip_visits = [0] * len(self.clip_nodes)

    def nodes(self, subject: bool) -> list[Node]:
        """Return the subject or clip node list."""
        return self.subject_nodes if subject else self.clip_nodes

    def node(self, ref: NodeRef) -> Node:
        """Look up a node by reference."""
        return self.nodes(ref.subject)[ref.index]

    def refs(self, subject: bool) -> list[NodeRef]:
        """References to every node of one list, in list order."""
        return [NodeRef(subject, i) for i in range(len(self.nodes(subject)))]

    def is_visited(self, ref: NodeRef) -> bool:
        """Check whether a node has been visited."""
        return self._visits(ref.subject)[ref.index] > 0

    def mark_visited(self, ref: NodeRef) -> None:
        """Record a visit to a node."""
        self._visits(ref.subject)[ref.index] += 1

    def visit_count(self, ref: NodeRef) -> int:
        """Number of times a node has been visited."""
        return self._visits(ref.subject)[ref.index]

    def all_visited(self) -> bool:
        """Check whether every node in both lists has been visited."""
        return all(self._subject_visits) and all(self._clip_visits)

    def _visits(self, subject: bool) -> list[int]:
        return self._subject_visits if subject else self._clip_visits

    def to_dict(self) -> dict:
        """Serialize nodes for diagnostics and visualization."""
        def dump(subject: bool) -> list[dict]:
            return [
                {
                    "parameter": n.parameter,
                    "status": n.status.value,
                    "next": n.next,
                    "prev": n.prev,
                    "cross": n.cross,
                    "record": n.record,
                    "visits": self.visit_count(NodeRef(subject, i)),
                }
                for i, n in enumerate(self.nodes(subject))
            ]

        return {"subject": dump(True), "clip": dump(False)}


def build_graph(
    records: list[IntersectionRecord],
    subject: NurbsCurve,
    clip: NurbsCurve,
    operation: BooleanOperation,
    config: SolverConfig | None = None,
) -> NodeGraph:
    """Build the cross-linked node graph for a boolean operation.

    Args:
        records: Transversal crossings between subject and clip
        subject: First curve
        clip: Second curve
        operation: Boolean operation, selects the status inversion
        config: Solver configuration (flattening density for containment)

    Returns:
        NodeGraph with seeded and inverted statuses

    Raises:
        NoIntersectionError: If fewer than two crossings were found
        OddIntersectionCountError: If the crossing count is odd
    """
    config = config if config is not None else SolverConfig()
    k = len(records)
    if k < 2:
        raise NoIntersectionError(k)
    if k % 2 != 0:
        raise OddIntersectionCountError(k)

    order_a = sorted(range(k), key=lambda i: records[i].param_a)
    order_b = sorted(range(k), key=lambda i: records[i].param_b)

    # Position of each record in either list, for cross-linking
    position_b = {record: pos for pos, record in enumerate(order_b)}
    position_a = {record: pos for pos, record in enumerate(order_a)}

    division = config.knot_domain_division
    a_seed = _seed_point(subject, [records[i].param_a for i in order_a], records, config)
    b_seed = _seed_point(clip, [records[i].param_b for i in order_b], records, config)
    a_start = not clip.contains(a_seed, division)
    b_start = not subject.contains(b_seed, division)

    invert_a, invert_b = INVERSION_TABLE[operation]

    subject_nodes = _link_list(
        order_a,
        [records[i].param_a for i in order_a],
        position_b,
        subject=True,
        enter_first=a_start,
        invert=invert_a,
    )
    clip_nodes = _link_list(
        order_b,
        [records[i].param_b for i in order_b],
        position_a,
        subject=False,
        enter_first=b_start,
        invert=invert_b,
    )

    return NodeGraph(subject_nodes=subject_nodes, clip_nodes=clip_nodes)


def _link_list(
    order: list[int],
    parameters: list[float],
    partner_position: dict[int, int],
    subject: bool,
    enter_first: bool,
    invert: bool,
) -> list[Node]:
    """Create one circular list with alternating statuses."""
    k = len(order)
    status = Status.ENTER if enter_first else Status.EXIT

    nodes: list[Node] = []
    for i, record in enumerate(order):
        nodes.append(
            Node(
                parameter=parameters[i],
                status=status,
                subject=subject,
                next=(i + 1) % k,
                prev=(i - 1) % k,
                cross=partner_position[record],
                record=record,
            )
        )
        status = status.invert()

    if invert:
        for node in nodes:
            node.status = node.status.invert()

    return nodes


def _seed_point(
    curve: NurbsCurve,
    parameters: list[float],
    records: list[IntersectionRecord],
    config: SolverConfig,
) -> Point:
    """Pick the point whose containment decides the status of the first node.

    This is the curve's start point, unless that point is itself a crossing
    and so lies on the other curve. In that case the midpoint of the arc
    between the last and the first node is used. That arc holds no crossing,
    so it is entirely inside or entirely outside the other curve.

    Args:
        curve: Curve owning the node list
        parameters: Node parameters on this curve, sorted
        records: All crossings
        config: Solver configuration (duplicate distance)

    Returns:
        Point to test for containment
    """
    start, end = curve.knots_domain()
    point = curve.point_at(start)
    if all(point.distance_to(r.point) >= config.minimum_distance for r in records):
        return point

    period = end - start
    middle = (parameters[-1] + parameters[0] + period) / 2
    if middle >= end:
        middle -= period
    return curve.point_at(middle)
