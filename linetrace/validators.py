"""Input validation for code submitted to the tracer."""

from __future__ import annotations

import logging

from pydantic import BaseModel

from .languages import get_language_config, require_language
from .parser import ParserFactory, SyntaxParser, TreeSitterParserFactory
from . import constants

logger = logging.getLogger(__name__)


class ValidationResult(BaseModel):
    valid: bool
    message: str


class SyntaxReport(BaseModel):
    """Outcome of a tree-sitter parse. Informational only."""

    language: str
    error_lines: list[int] = []

    @property
    def ok(self) -> bool:
        return not self.error_lines


def validate_code(
    code: str, language: str = constants.DEFAULT_LANGUAGE
) -> ValidationResult:
    """Check *code* for emptiness and size limits, then check *language*.

    Checks run in order and the first failure is reported.
    """
    if not code or code.strip() == "":
        return ValidationResult(valid=False, message="Code is empty")

    if len(code) > constants.CODE_MAX_LENGTH:
        return ValidationResult(
            valid=False,
            message=f"Code exceeds maximum length of {constants.CODE_MAX_LENGTH} characters",
        )

    if len(code.split("\n")) > constants.CODE_MAX_LINES:
        return ValidationResult(
            valid=False,
            message=f"Code exceeds maximum of {constants.CODE_MAX_LINES} lines",
        )

    if not language:
        return ValidationResult(valid=False, message="Language not specified")

    if get_language_config(language) is None:
        return ValidationResult(
            valid=False, message=f"Unsupported language: {language}"
        )

    return ValidationResult(valid=True, message="Valid code")


def check_syntax(
    code: str,
    language: str = constants.DEFAULT_LANGUAGE,
    parser_factory: ParserFactory | None = None,
) -> SyntaxReport:
    """Parse *code* with tree-sitter and report lines containing syntax errors.

    Raises:
        ValueError: If *language* is not a supported language.
    """
    require_language(language)
    parser = SyntaxParser(parser_factory or TreeSitterParserFactory())
    error_lines = parser.error_lines(code, language)
    logger.info("Syntax check (%s): %d error line(s)", language, len(error_lines))
    return SyntaxReport(language=language, error_lines=error_lines)
