"""Tests for code validation and the tree-sitter syntax check."""

import pytest

from linetrace.parser import ParserFactory, SyntaxParser
from linetrace.validators import SyntaxReport, check_syntax, validate_code


class FakeNode:
    """Mimics the subset of tree_sitter.Node used by SyntaxParser."""

    def __init__(self, row=0, is_error=False, is_missing=False, children=()):
        self.start_point = (row, 0)
        self.is_error = is_error
        self.is_missing = is_missing
        self.children = list(children)
        self.has_error = is_error or is_missing or any(c.has_error for c in children)


class FakeTree:
    def __init__(self, root: FakeNode):
        self.root_node = root


class FakeParserFactory(ParserFactory):
    """Hands out a parser that always returns a prebuilt tree."""

    def __init__(self, root: FakeNode):
        self.tree = FakeTree(root)
        self.requested: list[str] = []

    def get_parser(self, language: str):
        self.requested.append(language)
        tree = self.tree
        return type("FakeParser", (), {"parse": lambda _self, _src: tree})()


class TestValidateCode:
    def test_empty(self):
        result = validate_code("")
        assert not result.valid
        assert result.message == "Code is empty"

    def test_whitespace_only(self):
        assert validate_code("  \n\t").message == "Code is empty"

    def test_missing_language(self):
        assert validate_code("x = 1", language="").message == "Language not specified"

    def test_unsupported_language(self):
        result = validate_code("x = 1", language="cobol")
        assert not result.valid
        assert "Unsupported language" in result.message

    def test_too_long(self):
        result = validate_code("a" * 100_001)
        assert not result.valid
        assert "maximum length of 100000" in result.message

    def test_too_many_lines(self):
        result = validate_code("x\n" * 5001)
        assert not result.valid
        assert "maximum of 5000 lines" in result.message

    def test_size_limits_are_checked_before_language(self):
        assert "maximum length" in validate_code("a" * 100_001, language="cobol").message
        assert "maximum of 5000 lines" in validate_code("x\n" * 5001, language="").message

    def test_valid(self):
        result = validate_code("let x = 1;", language="javascript")
        assert result.valid
        assert result.message == "Valid code"


class TestSyntaxParser:
    def test_clean_tree_has_no_error_lines(self):
        factory = FakeParserFactory(FakeNode(children=[FakeNode(row=0)]))
        assert SyntaxParser(factory).error_lines("x", "python") == []
        assert factory.requested == ["python"]

    def test_collects_error_and_missing_nodes(self):
        root = FakeNode(
            children=[
                FakeNode(row=0),
                FakeNode(row=2, is_error=True),
                FakeNode(row=4, children=[FakeNode(row=5, is_missing=True)]),
            ]
        )
        assert SyntaxParser(FakeParserFactory(root)).error_lines("x", "c") == [3, 6]


class TestCheckSyntax:
    def test_report_from_injected_factory(self):
        root = FakeNode(children=[FakeNode(row=1, is_error=True)])
        report = check_syntax("a\nb", "java", parser_factory=FakeParserFactory(root))
        assert isinstance(report, SyntaxReport)
        assert report.language == "java"
        assert report.error_lines == [2]
        assert not report.ok

    def test_unsupported_language_raises(self):
        with pytest.raises(ValueError, match="Unsupported language"):
            check_syntax("x", "cobol")

    def test_valid_javascript_with_tree_sitter(self):
        assert check_syntax("let x = 1;\n", "javascript").ok

    def test_broken_javascript_with_tree_sitter(self):
        report = check_syntax("function f( {", "javascript")
        assert not report.ok
        assert all(line >= 1 for line in report.error_lines)
