"""Step Synthesizer — turns classified lines into the cosmetic step list."""

from __future__ import annotations

import logging

from .classifier import classify_source
from .step_types import LineClassification, LineKind, Step
from . import constants

logger = logging.getLogger(__name__)


def _action_for(classification: LineClassification) -> str:
    kind = classification.kind
    if kind == LineKind.FUNCTION:
        return constants.ACTION_DECLARE_FUNCTION.format(name=classification.name)
    if kind == LineKind.OUTPUT:
        return constants.ACTION_CONSOLE_OUTPUT
    if kind == LineKind.ASSIGNMENT:
        return constants.ACTION_ASSIGN_VARIABLE.format(name=classification.name)
    if kind == LineKind.LOOP:
        return constants.ACTION_LOOP
    return constants.ACTION_CONDITION


def steps_from_classifications(
    classifications: list[LineClassification],
) -> list[Step]:
    """Build one Step per classification, in order.

    The variable map accumulates across steps; each step holds its own
    copy. An assignment is recorded before its own snapshot is taken.
    The call stack is never populated.
    """
    variables: dict[str, str] = {}
    steps: list[Step] = []
    for classification in classifications:
        if classification.kind == LineKind.ASSIGNMENT:
            variables[classification.name] = constants.ASSIGNED_MARKER
        steps.append(
            Step(
                line=classification.line,
                action=_action_for(classification),
                variables=dict(variables),
                call_stack=(),
            )
        )
    return steps


def synthesize_steps(
    source: str, comment_prefix: str = constants.COMMENT_PREFIX
) -> list[Step]:
    """Scan *source* and return its synthesized step list."""
    steps = steps_from_classifications(classify_source(source, comment_prefix))
    logger.debug("Synthesized %d steps", len(steps))
    return steps
