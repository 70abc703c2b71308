"""Tests for the path-state machine."""

from __future__ import annotations

import pytest

from pathsight.path.commands import Command, CubicArgs, PointArgs, ScalarArgs, SmoothArgs, Token
from pathsight.path.errors import GrammarMismatchError, UnsupportedPathFeatureError
from pathsight.path.interpreter import (
    CloseAnchor,
    InterpreterOptions,
    PathState,
    interpret,
    read_path,
    step,
)
from pathsight.path.primitives import ArcTo, CurveTo, LineTo, MoveTo, Point, QuadraticTo, reflect
from pathsight.path.registry import get_registry
from pathsight.path.tokenizer import tokenize
from tests.conftest import RELATIVE_D, SMOOTH_CUBIC_D, TRIANGLE_D, TRUNCATED_D


def _prims(d: str, **options) -> list:
    return read_path(d, InterpreterOptions(**options)).primitives


class TestReflect:
    @pytest.mark.parametrize(
        "p, r",
        [
            (Point(0, 0), Point(0, 0)),
            (Point(10, 10), Point(0, 10)),
            (Point(-3.5, 7.25), Point(100, -42)),
        ],
    )
    def test_reflect_twice_is_identity(self, p, r):
        assert reflect(reflect(p, r), r) == p

    def test_reflect_through_point(self):
        assert reflect(Point(10, 10), Point(0, 10)) == Point(-10, 10)


class TestScenarios:
    def test_triangle_with_close(self):
        assert _prims(TRIANGLE_D) == [
            MoveTo(10, 10),
            LineTo(20, 20),
            LineTo(30, 10),
            LineTo(10, 10),
            MoveTo(30, 10),
        ]

    def test_relative_chaining(self):
        assert _prims(RELATIVE_D) == [MoveTo(10, 10), LineTo(20, 10), LineTo(20, 20)]

    def test_smooth_cubic_reflects_previous_control(self):
        prims = _prims(SMOOTH_CUBIC_D)
        assert prims[1] == CurveTo(10, 0, 10, 10, 0, 10)
        assert prims[2] == CurveTo(-10, 10, -10, 20, 0, 20)

    def test_truncated_input_keeps_prefix(self):
        parsed = read_path(TRUNCATED_D)
        assert parsed.primitives == [MoveTo(10, 10)]
        assert parsed.remainder == "L20"
        assert not parsed.complete

    def test_empty_input(self):
        parsed = read_path("")
        assert parsed.primitives == []
        assert parsed.complete


class TestMove:
    def test_absolute_move_then_lines_unchanged(self):
        assert _prims("M1 2 L3 4 5 6 L-7 8.5") == [
            MoveTo(1, 2), LineTo(3, 4), LineTo(5, 6), LineTo(-7, 8.5),
        ]

    def test_repeated_move_groups_become_lines(self):
        assert _prims("M1 1 2 2 3 3") == [MoveTo(1, 1), LineTo(2, 2), LineTo(3, 3)]

    def test_relative_repeated_groups_chain(self):
        assert _prims("m1 1 2 2 3 3") == [MoveTo(1, 1), LineTo(3, 3), LineTo(6, 6)]

    def test_relative_move_after_line(self):
        assert _prims("M10 10 L20 20 m5 5") == [MoveTo(10, 10), LineTo(20, 20), MoveTo(25, 25)]


class TestLines:
    def test_relative_line_groups_chain(self):
        assert _prims("M0 0 l1 1 1 1") == [MoveTo(0, 0), LineTo(1, 1), LineTo(2, 2)]

    def test_horizontal_keeps_y(self):
        assert _prims("M5 7 H20 h-5") == [MoveTo(5, 7), LineTo(20, 7), LineTo(15, 7)]

    def test_vertical_keeps_x(self):
        assert _prims("M5 7 V20 v-5 5") == [MoveTo(5, 7), LineTo(5, 20), LineTo(5, 15), LineTo(5, 20)]

    def test_line_without_prior_move_uses_origin(self):
        assert _prims("l3 4") == [LineTo(3, 4)]


class TestCurves:
    def test_relative_cubic_offsets_all_pairs(self):
        assert _prims("M10 10 c1 2 3 4 5 6") == [MoveTo(10, 10), CurveTo(11, 12, 13, 14, 15, 16)]

    def test_smooth_cubic_without_prior_curve_uses_current_point(self):
        assert _prims("M5 5 S10 10 20 5") == [MoveTo(5, 5), CurveTo(5, 5, 10, 10, 20, 5)]

    def test_smooth_cubic_after_line_does_not_reflect(self):
        prims = _prims("M0 0 C1 1 2 2 3 3 L4 4 S5 5 6 6")
        assert prims[-1] == CurveTo(4, 4, 5, 5, 6, 6)

    def test_relative_smooth_cubic(self):
        prims = _prims("M0 0 C10 0 10 10 0 10 s-10 10 0 10")
        assert prims[-1] == CurveTo(-10, 10, -10, 20, 0, 20)

    def test_repeated_smooth_cubic_groups_reflect_each_other(self):
        prims = _prims("M0 0 S10 10 20 0 30 -10 40 0")
        assert prims[1] == CurveTo(0, 0, 10, 10, 20, 0)
        assert prims[2] == CurveTo(30, -10, 30, -10, 40, 0)

    def test_quadratic(self):
        assert _prims("M0 0 Q5 10 10 0 q5 -10 10 0") == [
            MoveTo(0, 0),
            QuadraticTo(5, 10, 10, 0),
            QuadraticTo(15, -10, 20, 0),
        ]

    def test_smooth_quadratic_reflects(self):
        prims = _prims("M10 80 Q52.5 10 95 80 T180 80")
        assert prims[-1] == QuadraticTo(137.5, 150, 180, 80)

    def test_smooth_quadratic_chain(self):
        prims = _prims("M0 0 Q5 5 10 0 t10 0 10 0")
        assert prims[2] == QuadraticTo(15, -5, 20, 0)
        assert prims[3] == QuadraticTo(25, 5, 30, 0)

    def test_smooth_quadratic_without_prior_quadratic(self):
        assert _prims("M3 4 T10 10") == [MoveTo(3, 4), QuadraticTo(3, 4, 10, 10)]

    def test_smooth_quadratic_after_cubic_does_not_reflect(self):
        prims = _prims("M0 0 C1 1 2 2 3 3 T6 6")
        assert prims[-1] == QuadraticTo(3, 3, 6, 6)


class TestArc:
    def test_absolute_arc_carries_fields(self):
        prims = _prims("M0 0 A25 26 -30 0 1 50 -25")
        assert prims[-1] == ArcTo(25, 26, -30, False, True, 50, -25)

    def test_relative_arc_only_offsets_endpoint(self):
        prims = _prims("M10 10 a5 6 7 1 0 10 10")
        assert prims[-1] == ArcTo(5, 6, 7, True, False, 20, 20)

    def test_arc_disabled_raises(self):
        with pytest.raises(UnsupportedPathFeatureError) as exc_info:
            _prims("M0 0 a1 1 0 0 1 5 5", arc_support=False)
        assert exc_info.value.command == "a"

    def test_arc_disabled_is_not_a_grammar_mismatch(self):
        with pytest.raises(UnsupportedPathFeatureError) as exc_info:
            _prims("M0 0 A1 1 0 0 1 5 5", arc_support=False)
        assert not isinstance(exc_info.value, GrammarMismatchError)
        assert "disabled" in str(exc_info.value)


class TestClose:
    def test_close_without_subpath_falls_back_to_origin(self):
        assert _prims("Z") == [LineTo(0, 0), MoveTo(0, 0)]

    def test_close_always_emits_two_primitives(self):
        before = _prims("M1 1 L5 5")
        after = _prims("M1 1 L5 5 z")
        assert len(after) == len(before) + 2

    def test_close_default_anchor_is_first_primitive(self):
        prims = _prims("M0 0 L10 0 M20 20 L30 20 Z")
        assert prims[-2:] == [LineTo(0, 0), MoveTo(30, 20)]

    def test_close_subpath_start_anchor(self):
        prims = _prims("M0 0 L10 0 M20 20 L30 20 Z", close_anchor=CloseAnchor.SUBPATH_START)
        assert prims[-2:] == [LineTo(20, 20), MoveTo(30, 20)]

    def test_relative_after_close_uses_reopened_point(self):
        prims = _prims("M0 0 L10 0 z l1 1")
        assert prims[-1] == LineTo(11, 1)


class TestFold:
    def test_step_is_pure(self):
        state = PathState()
        token = tokenize("M1 2").tokens[0]
        new = step(state, token)
        assert state.primitives == ()
        assert new.primitives == (MoveTo(1, 2),)
        assert new.subpath_start == Point(1, 2)

    def test_state_derived_points(self):
        state = PathState()
        assert state.current_point == Point(0, 0)
        assert state.last_cubic_control is None
        state = step(state, Token(Command.CUBIC, groups=(CubicArgs(1, 2, 3, 4, 5, 6),)))
        assert state.current_point == Point(5, 6)
        assert state.last_cubic_control == Point(3, 4)
        assert state.last_quadratic_control is None

    def test_interpret_matches_read_path(self):
        tokens = tokenize("M0 0 C10 0 10 10 0 10 S-10 20 0 20 Z").tokens
        assert interpret(tokens) == read_path("M0 0 C10 0 10 10 0 10 S-10 20 0 20 Z").primitives


class TestGrammarMismatch:
    def test_wrong_group_shape(self):
        token = Token(Command.LINE, groups=(ScalarArgs(3),))
        with pytest.raises(GrammarMismatchError):
            step(PathState(), token)

    def test_missing_groups(self):
        with pytest.raises(GrammarMismatchError):
            step(PathState(), Token(Command.QUADRATIC))

    def test_close_with_arguments(self):
        with pytest.raises(GrammarMismatchError):
            step(PathState(), Token(Command.CLOSE, groups=(PointArgs(1, 1),)))

    def test_smooth_group_for_cubic(self):
        with pytest.raises(GrammarMismatchError):
            interpret([Token(Command.CUBIC, groups=(SmoothArgs(1, 2, 3, 4),))])


def test_every_command_has_a_resolver():
    reg = get_registry()
    assert reg.missing() == set()
    assert reg.count == len(Command)


def test_options_from_settings():
    from pathsight.config import Settings

    options = InterpreterOptions.from_settings(Settings(close_anchor="subpath_start", arc_support=False))
    assert options.close_anchor is CloseAnchor.SUBPATH_START
    assert options.arc_support is False
