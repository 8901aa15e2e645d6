"""Tests for step synthesis from classified lines."""

import pytest
from pydantic import ValidationError

from linetrace.classifier import classify_source
from linetrace.step_types import Step
from linetrace.synthesizer import steps_from_classifications, synthesize_steps

SAMPLE_SOURCE = "function f(){}\nlet x = 1;\nconsole.log(x);"


class TestSynthesizeSteps:
    def test_empty_source(self):
        assert synthesize_steps("") == []

    def test_three_steps_in_source_order(self):
        steps = synthesize_steps(SAMPLE_SOURCE)
        assert len(steps) == 3
        assert [s.action for s in steps] == [
            "Declare function f",
            "Assign variable x",
            "Console output",
        ]
        assert [s.line for s in steps] == [1, 2, 3]

    def test_loop_and_condition_actions(self):
        steps = synthesize_steps("while (go) {\nif (done) {")
        assert [s.action for s in steps] == ["Loop iteration", "Condition check"]

    def test_variables_accumulate(self):
        steps = synthesize_steps("let a = 1;\nconsole.log(a);\nlet b = 2;")
        assert steps[0].variables == {"a": "assigned"}
        assert steps[1].variables == {"a": "assigned"}
        assert steps[2].variables == {"a": "assigned", "b": "assigned"}

    def test_variables_before_first_assignment_are_empty(self):
        steps = synthesize_steps(SAMPLE_SOURCE)
        assert steps[0].variables == {}

    def test_call_stack_is_always_empty(self):
        steps = synthesize_steps(SAMPLE_SOURCE)
        assert all(s.call_stack == () for s in steps)

    def test_snapshots_are_independent(self):
        steps = synthesize_steps("let a = 1;\nlet b = 2;")
        assert steps[0].variables is not steps[1].variables
        assert "b" not in steps[0].variables

    def test_reassignment_keeps_single_entry(self):
        steps = synthesize_steps("x = 1\nx = 2")
        assert steps[1].variables == {"x": "assigned"}


class TestStepsFromClassifications:
    def test_matches_synthesize_steps(self):
        classifications = classify_source(SAMPLE_SOURCE)
        assert steps_from_classifications(classifications) == synthesize_steps(
            SAMPLE_SOURCE
        )


class TestStep:
    def test_step_is_frozen(self):
        step = Step(line=1, action="Console output")
        with pytest.raises(ValidationError):
            step.line = 2

    def test_variable_snapshot_is_read_only(self):
        step = synthesize_steps("let x = 1;")[0]
        with pytest.raises(TypeError):
            step.variables["y"] = "assigned"
        assert step.variables == {"x": "assigned"}

    def test_default_variables_are_read_only(self):
        step = Step(line=1, action="Console output")
        with pytest.raises(TypeError):
            step.variables["x"] = "assigned"

    def test_call_stack_is_a_tuple(self):
        step = Step(line=1, action="Console output", call_stack=["main"])
        assert step.call_stack == ("main",)

    def test_to_dict_uses_call_stack_key(self):
        step = Step(line=2, action="Assign variable x", variables={"x": "assigned"})
        assert step.to_dict() == {
            "line": 2,
            "action": "Assign variable x",
            "variables": {"x": "assigned"},
            "callStack": [],
        }

    def test_str_lists_variables(self):
        step = Step(line=2, action="Assign variable x", variables={"x": "assigned"})
        assert str(step) == "L2  Assign variable x  [x]"
