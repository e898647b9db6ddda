"""Region writer for saving boolean results.

This module provides the RegionWriter class for writing the regions of a
boolean operation, together with the crossings and the final node graph, as a
JSON document.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from curvebool import __version__
from curvebool.core.boolean import BooleanResult
from curvebool.core.graph import BooleanOperation
from curvebool.domain import CompoundCurve
from curvebool.exceptions import RegionSaveError


def sample_boundary(boundary: CompoundCurve, division: int) -> list[list[float]]:
    """Sample a compound boundary into one polyline.

    Consecutive spans share an end point; the shared point is emitted once.

    Args:
        boundary: Boundary to sample
        division: Segments per knot span of each piece

    Returns:
        List of [x, y] coordinates
    """
    points: list[list[float]] = []
    for span in boundary:
        samples = span.flatten(division)
        if points:
            samples = samples[1:]
        points.extend([p.x, p.y] for _, p in samples)
    return points


class RegionWriter:
    """Writes boolean results as JSON region documents.

    Example:
        writer = RegionWriter(Path("shapes-union.json"))
        writer.write(result)
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the region writer.

        Args:
            output_path: Path where the document will be saved
        """
        self._output_path = output_path

    def build_document(self, result: BooleanResult, division: int = 16) -> dict[str, Any]:
        """Build the JSON-serializable document for a result.

        Args:
            result: Boolean result to serialize
            division: Sampling density for the polyline preview of each region

        Returns:
            Document dictionary
        """
        regions = []
        for region in result.regions:
            entry = region.to_dict()
            entry["polyline"] = sample_boundary(region.exterior, division)
            regions.append(entry)

        return {
            "generator": f"curvebool {__version__}",
            "created": datetime.now().strftime("%Y-%m-%dT%H:%M:%S"),
            "operation": result.operation.value,
            "regions": regions,
            "intersections": [record.to_dict() for record in result.intersections],
            "graph": result.graph.to_dict(),
            "diagnostics": [
                {
                    "kind": d.kind,
                    "first": d.first,
                    "second": d.second,
                    "message": d.message,
                }
                for d in result.diagnostics
            ],
        }

    def write(self, result: BooleanResult, division: int = 16) -> None:
        """Save the result to the output path.

        Args:
            result: Boolean result to serialize
            division: Sampling density for the polyline preview of each region

        Raises:
            RegionSaveError: If the file cannot be written
        """
        document = self.build_document(result, division)
        try:
            self._output_path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        except OSError as e:
            raise RegionSaveError(str(self._output_path), str(e)) from e

    @staticmethod
    def get_output_path(input_path: Path, operation: BooleanOperation) -> Path:
        """Generate the default output path for an operation.

        Converts: shapes.json -> shapes-union.json
                  lens.json -> lens-difference.json

        Args:
            input_path: Curve document path
            operation: Applied boolean operation

        Returns:
            Path with the operation name appended to the stem
        """
        return input_path.parent / f"{input_path.stem}-{operation.value}.json"
