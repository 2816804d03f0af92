from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Optional, Sequence

import numpy as np

from meshsampler.model.geometry_primitives import Triangle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Candidate:
    """A triangle that passed the range filter, with its area."""
    triangle: Triangle
    area: float
    index: int  # Position of the triangle in the mesh


@dataclass
class CandidateSet:
    """
    Ordered (triangle, area) pairs built once per query.

    Selection probability of a candidate is its area divided by `total_area`.
    """
    candidates: list[Candidate] = field(default_factory=list)
    total_area: float = 0.0

    @classmethod
    def from_triangles(cls, triangles: Sequence[Triangle], indices: Optional[Sequence[int]] = None) -> CandidateSet:
        """
        Compute every triangle's area and the running total.

        Args:
            triangles: The candidate triangles, in mesh order.
            indices: Mesh positions of the triangles. Defaults to 0..n-1.
        """
        if indices is None:
            indices = range(len(triangles))

        candidates = [
            Candidate(triangle=triangle, area=triangle.area, index=index)
            for triangle, index in zip(triangles, indices)
        ]
        total_area = sum(c.area for c in candidates)
        return cls(candidates=candidates, total_area=total_area)

    def __len__(self) -> int:
        return len(self.candidates)

    @property
    def is_empty(self) -> bool:
        """True when nothing can be selected (no candidates or zero total area)."""
        return not self.candidates or self.total_area <= 0.0

    def select(self, rng: np.random.Generator) -> Optional[Candidate]:
        """
        Weighted pick by linear prefix-sum scan.

        Draws a value in [0, total_area) and returns the first candidate whose
        cumulative area strictly exceeds it.

        Returns:
            The selected candidate, or None if the set is empty.
        """
        if self.is_empty:
            return None

        draw = rng.uniform(0.0, self.total_area)
        cumulative = 0.0
        for candidate in self.candidates:
            cumulative += candidate.area
            if cumulative > draw:
                return candidate

        # Rounding in the running sum can leave it just under a draw close to the total
        return next(c for c in reversed(self.candidates) if c.area > 0.0)
