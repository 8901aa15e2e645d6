"""Tests for the linetrace command-line entry point."""

import json

import pytest

from linetrace.cli import main

SAMPLE_SOURCE = "function f(){}\nlet x = 1;\nconsole.log(x);\n"


@pytest.fixture
def js_file(tmp_path):
    path = tmp_path / "demo.js"
    path.write_text(SAMPLE_SOURCE, encoding="utf-8")
    return str(path)


class TestCli:
    def test_steps_only(self, js_file, capsys):
        assert main(["--steps-only", js_file]) == 0
        out = capsys.readouterr().out
        assert "Declare function f" in out
        assert "Assign variable x" in out

    def test_graph_only(self, js_file, capsys):
        assert main(["--graph-only", js_file]) == 0
        assert "nodes=2  edges=1" in capsys.readouterr().out

    def test_mermaid(self, js_file, capsys):
        assert main(["--mermaid", js_file]) == 0
        assert capsys.readouterr().out.startswith("flowchart TD")

    def test_trace_json(self, js_file, capsys):
        assert main(["--trace", js_file]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["type"] == "tracer"
        assert payload["totalSteps"] == 3

    def test_visualizer_json(self, js_file, capsys):
        assert main(["--json", "--language", "python", js_file]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["language"] == "python"
        assert payload["finalState"] == {"variables": {"x": "assigned"}}

    def test_language_from_extension(self, tmp_path, capsys):
        path = tmp_path / "script.py"
        path.write_text("x = 1\n", encoding="utf-8")
        assert main(["--trace", str(path)]) == 0
        assert json.loads(capsys.readouterr().out)["language"] == "python"

    def test_format(self, tmp_path, capsys):
        path = tmp_path / "messy.js"
        path.write_text("function f() {\nreturn 1;\n}", encoding="utf-8")
        assert main(["--format", str(path)]) == 0
        assert "    return 1;" in capsys.readouterr().out

    def test_check_valid(self, js_file, capsys):
        assert main(["--check", js_file]) == 0
        out = capsys.readouterr().out
        assert "Valid code" in out
        assert "No syntax errors" in out

    def test_check_empty_file_fails(self, tmp_path, capsys):
        path = tmp_path / "empty.js"
        path.write_text("", encoding="utf-8")
        assert main(["--check", str(path)]) == 1
        assert "Code is empty" in capsys.readouterr().out

    def test_default_run_prints_steps_graph_and_stats(self, js_file, capsys):
        assert main([js_file]) == 0
        out = capsys.readouterr().out
        assert "═══ Steps ═══" in out
        assert "═══ Graph ═══" in out
        assert "Analysis Statistics" in out

    def test_demo_when_no_file(self, capsys):
        assert main(["--steps-only"]) == 0
        out = capsys.readouterr().out
        assert "built-in demo" in out
        assert "Declare function greet" in out

    def test_modes_are_exclusive(self):
        with pytest.raises(SystemExit):
            main(["--trace", "--mermaid"])
