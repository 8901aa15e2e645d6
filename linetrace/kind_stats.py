"""Line-kind tallies, e.g. for a summary badge next to the step list."""

from __future__ import annotations

from collections import Counter

from linetrace.step_types import LineClassification


def count_kinds(classifications: list[LineClassification]) -> dict[str, int]:
    """Tally how many lines fell into each kind.

    Kinds that never occur are absent rather than zero, so a source with no
    classified lines gives ``{}``. Keys are the ``LineKind`` string values.
    """
    return dict(Counter(c.kind.value for c in classifications))
