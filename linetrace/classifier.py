"""Line Classifier.

Each line is trimmed and tested against an ordered rule list; the first
rule that applies decides the line's kind:

    1. starts with ``function ``   -> function   (name required)
    2. contains ``console.log``    -> output
    3. contains ``=``, not comment -> assignment (name required)
    4. contains ``for ``/``while `` -> loop
    5. contains ``if ``            -> condition

A rule that applies but cannot extract a required name yields no
classification; later rules are not consulted.
"""

from __future__ import annotations

import logging
import re

from .step_types import LineClassification, LineKind
from . import constants

logger = logging.getLogger(__name__)

_FUNCTION_NAME_RE = re.compile(constants.FUNCTION_NAME_PATTERN)
_ASSIGNMENT_NAME_RE = re.compile(constants.ASSIGNMENT_NAME_PATTERN)


def _function_name(text: str) -> str | None:
    match = _FUNCTION_NAME_RE.search(text)
    return match.group(1) if match else None


def _assigned_name(text: str) -> str | None:
    match = _ASSIGNMENT_NAME_RE.search(text)
    return match.group(1) if match else None


def classify_line(
    raw_line: str,
    line_number: int,
    comment_prefix: str = constants.COMMENT_PREFIX,
    skip_output: bool = False,
) -> LineClassification | None:
    """Classify one source line, or return None if no rule produces a kind.

    With *skip_output* the console-output rule is not consulted, so an
    output line falls through to the assignment, loop and condition rules.
    """
    text = raw_line.strip()

    if text.startswith(constants.FUNCTION_PREFIX):
        name = _function_name(text)
        if name is None:
            return None
        return LineClassification(
            line=line_number, kind=LineKind.FUNCTION, name=name, text=text
        )

    if not skip_output and constants.OUTPUT_MARKER in text:
        return LineClassification(line=line_number, kind=LineKind.OUTPUT, text=text)

    if constants.ASSIGNMENT_MARKER in text and not text.startswith(comment_prefix):
        name = _assigned_name(text)
        if name is None:
            return None
        return LineClassification(
            line=line_number, kind=LineKind.ASSIGNMENT, name=name, text=text
        )

    if any(marker in text for marker in constants.LOOP_MARKERS):
        return LineClassification(line=line_number, kind=LineKind.LOOP, text=text)

    if constants.CONDITION_MARKER in text:
        return LineClassification(
            line=line_number, kind=LineKind.CONDITION, text=text
        )

    return None


def split_lines(source: str) -> list[str]:
    """Split on ``\\n`` only; an empty source has no lines."""
    if not source:
        return []
    return source.split("\n")


def classify_source(
    source: str, comment_prefix: str = constants.COMMENT_PREFIX
) -> list[LineClassification]:
    """Classify every line of *source*, keeping only the lines that matched."""
    lines = split_lines(source)
    classifications = [
        result
        for index, raw_line in enumerate(lines)
        if (result := classify_line(raw_line, index + 1, comment_prefix)) is not None
    ]
    logger.debug(
        "Classified %d of %d lines",
        len(classifications),
        len(lines),
    )
    return classifications
