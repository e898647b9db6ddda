"""Curve reader for loading JSON curve documents.

This module provides the CurveReader class for loading curve documents and
converting them into NurbsCurve domain models. Documents are validated with
Pydantic before any curve is built.
"""

import json
from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, Field, ValidationError

from curvebool.domain import NurbsCurve, Point
from curvebool.exceptions import CurveFormatError, CurveLoadError, InvalidCurveError

Coordinate = Annotated[list[float], Field(min_length=2, max_length=3)]


def _to_point(coordinate: list[float]) -> Point:
    return Point(*coordinate)


class CircleSpec(BaseModel):
    """A full circle given by center and radius."""

    kind: Literal["circle"]
    center: Coordinate
    radius: float = Field(gt=0.0)

    def build(self) -> NurbsCurve:
        return NurbsCurve.circle(_to_point(self.center), self.radius)


class PolygonSpec(BaseModel):
    """A closed polygon given by its vertices."""

    kind: Literal["polygon"]
    points: list[Coordinate] = Field(min_length=3)

    def build(self) -> NurbsCurve:
        return NurbsCurve.polygon([_to_point(p) for p in self.points])


class NurbsSpec(BaseModel):
    """A general NURBS curve given by its raw definition."""

    kind: Literal["nurbs"]
    degree: int = Field(ge=1)
    knots: list[float]
    control_points: list[Coordinate]
    weights: list[float] | None = None

    def build(self) -> NurbsCurve:
        weights = self.weights if self.weights is not None else [1.0] * len(self.control_points)
        return NurbsCurve(
            control_points=tuple(_to_point(p) for p in self.control_points),
            weights=tuple(weights),
            knots=tuple(self.knots),
            degree=self.degree,
        )


CurveSpec = Annotated[CircleSpec | PolygonSpec | NurbsSpec, Field(discriminator="kind")]


class CurveDocument(BaseModel):
    """Top-level curve document."""

    curves: list[CurveSpec] = Field(min_length=1)


class CurveReader:
    """Loads JSON curve documents and builds curve domain models.

    Example:
        reader = CurveReader(Path("shapes.json"))
        reader.load()
        subject, clip = reader.pair()
    """

    def __init__(self, path: Path) -> None:
        """Initialize the curve reader.

        Args:
            path: Path to the JSON curve document
        """
        self._path = path
        self._curves: list[NurbsCurve] | None = None

    def load(self) -> None:
        """Load, validate and build every curve in the document.

        Raises:
            CurveLoadError: If the file does not exist or is not valid JSON
            CurveFormatError: If the document does not match the schema or a
                curve definition is inconsistent
        """
        if not self._path.exists():
            raise CurveLoadError(str(self._path), "file not found")

        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            raise CurveLoadError(str(self._path), str(e)) from e
        except json.JSONDecodeError as e:
            raise CurveLoadError(str(self._path), f"invalid JSON: {e}") from e

        try:
            document = CurveDocument.model_validate(raw)
        except ValidationError as e:
            raise CurveFormatError(str(self._path), _summarize(e)) from e

        curves: list[NurbsCurve] = []
        for index, entry in enumerate(document.curves):
            try:
                curve = entry.build()
            except InvalidCurveError as e:
                raise CurveFormatError(str(self._path), f"curve {index}: {e.reason}") from e
            if not curve.is_closed(tolerance=1e-9 * max(1.0, _extent(curve))):
                raise CurveFormatError(str(self._path), f"curve {index}: curve is not closed")
            curves.append(curve)

        self._curves = curves

    @property
    def curves(self) -> list[NurbsCurve]:
        """Return the loaded curves.

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        if self._curves is None:
            raise RuntimeError("Curves not loaded. Call load() first.")
        return list(self._curves)

    def pair(self) -> tuple[NurbsCurve, NurbsCurve]:
        """Return (subject, clip) from a document holding exactly two curves.

        Raises:
            RuntimeError: If the document has not been loaded yet
            CurveFormatError: If the document does not hold exactly two curves
        """
        curves = self.curves
        if len(curves) != 2:
            raise CurveFormatError(
                str(self._path), f"expected exactly 2 curves, found {len(curves)}"
            )
        return curves[0], curves[1]


def _extent(curve: NurbsCurve) -> float:
    """Largest absolute control point coordinate, used to scale closure checks."""
    return max(
        max(abs(p.x), abs(p.y), abs(p.z)) for p in curve.control_points
    )


def _summarize(error: ValidationError) -> str:
    """Condense a Pydantic validation error into one line."""
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)
