"""Brace-driven re-indenter for C-family source text."""

from __future__ import annotations

from . import constants

_BLOCK_OPENERS: tuple[str, ...] = ("if ", "for ", "while ", "function ")


def format_source(code: str, indent_size: int = constants.DEFAULT_INDENT_SIZE) -> str:
    """Re-indent *code* by brace depth.

    A line starting with ``}`` is dedented before it is emitted (never below
    zero). A line ending with ``{`` or starting with a block keyword indents
    the lines after it. Blank lines are emptied.
    """
    level = 0
    formatted: list[str] = []
    for line in code.split("\n"):
        text = line.strip()
        if not text:
            formatted.append("")
            continue
        if text.startswith("}"):
            level = max(0, level - 1)
        formatted.append(" " * (level * indent_size) + text)
        if text.endswith("{") or text.startswith(_BLOCK_OPENERS):
            level += 1
    return "\n".join(formatted)
