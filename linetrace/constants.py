"""Named constants — eliminates magic strings across the codebase."""

from __future__ import annotations

FUNCTION_PREFIX = "function "
OUTPUT_MARKER = "console.log"
ASSIGNMENT_MARKER = "="
COMMENT_PREFIX = "//"
LOOP_MARKERS: tuple[str, ...] = ("for ", "while ")
CONDITION_MARKER = "if "

FUNCTION_NAME_PATTERN = r"function\s+(\w+)"
ASSIGNMENT_NAME_PATTERN = r"(?:(?:let|const|var)\s+)?(\w+)\s*="

ASSIGNED_MARKER = "assigned"

ACTION_DECLARE_FUNCTION = "Declare function {name}"
ACTION_CONSOLE_OUTPUT = "Console output"
ACTION_ASSIGN_VARIABLE = "Assign variable {name}"
ACTION_LOOP = "Loop iteration"
ACTION_CONDITION = "Condition check"

LOOP_NODE_LABEL = "Loop"
CONDITION_NODE_LABEL = "Condition"

MERMAID_ENTRY_STYLE = "fill:#28a745,color:#fff"

CODE_MAX_LENGTH = 100_000
CODE_MAX_LINES = 5_000

DEFAULT_LANGUAGE = "javascript"
DEFAULT_INDENT_SIZE = 4

PAYLOAD_TYPE_VISUALIZER = "visualizer"
PAYLOAD_TYPE_TRACER = "tracer"

FEATURE_EXECUTION = "execution"
FEATURE_VISUALIZATION = "visualization"
FEATURE_TRACING = "tracing"
