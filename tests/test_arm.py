"""Tests for binding handlers to patterns."""

import pytest

from easymatch import HandlerKind, PatternStatement, _, ds, match, when
from easymatch.arm import candidate_shapes, _signature


class TestShapeDetection:
    """Tests for automatic handler shape detection."""

    def test_constant(self):
        assert match(3)(_ >> "three") == "three"

    def test_nullary(self):
        assert match(3)(_ >> (lambda: "called")) == "called"

    def test_unary(self):
        assert match(3)(_ >> (lambda x: x + 1)) == 4

    def test_spread(self):
        assert match(1, 2, 3)(_ >> (lambda a, b, c: a + b + c)) == 6

    def test_unary_wins_over_spread(self):
        assert match(1, 2)(_ >> (lambda *args: args)) == ((1, 2),)

    def test_unary_wins_over_nullary(self):
        assert match(3)(_ >> (lambda x=0: x)) == 3

    def test_builtin(self):
        assert match("abc")(_ >> len) == 3

    def test_no_shape_fits(self):
        with pytest.raises(TypeError, match="cannot receive"):
            match(3)(_ >> (lambda a, b: a))

    def test_spread_arity_mismatch(self):
        with pytest.raises(TypeError, match="3 spread arguments"):
            match(1, 2, 3)(_ >> (lambda a, b: a))

    def test_candidate_shapes_order(self):
        def handler(*args):
            return args

        shapes = candidate_shapes(handler, _signature(handler), (1, 2))
        assert shapes == [HandlerKind.UNARY, HandlerKind.NULLARY, HandlerKind.SPREAD]

    def test_constant_has_no_signature(self):
        arm = _ >> 5
        assert arm.signature is None
        assert arm.kind is HandlerKind.AUTO


class TestExplicitBuilders:
    """Tests for returns(), call(), apply() and spread()."""

    def test_returns_callable_as_constant(self):
        arm = _.returns(len)
        assert arm.kind is HandlerKind.CONSTANT
        assert match("abc")(arm) is len

    def test_call(self):
        assert match(3)(_.call(lambda: "nullary")) == "nullary"

    def test_apply_passes_tuple_whole(self):
        assert match(1, 2)(_.apply(lambda *args: args)) == ((1, 2),)

    def test_spread(self):
        assert match(1, 2)(_.spread(lambda *args: args)) == (1, 2)

    def test_on_pattern(self):
        arm = ds(1, _).spread(lambda a, b: b)
        assert isinstance(arm, PatternStatement)
        assert match(1, "x")(arm) == "x"

    @pytest.mark.parametrize("builder", ["call", "apply", "spread"])
    def test_requires_callable(self, builder):
        with pytest.raises(TypeError, match="must be callable"):
            getattr(_, builder)(3)


class TestStrictHandlers:
    """Tests for refusing ambiguous handlers."""

    def test_ambiguous_unary_and_spread(self):
        with pytest.raises(TypeError, match="Ambiguous handler"):
            match(1, 2)(_.then(lambda *args: args, strict=True))

    def test_ambiguous_unary_and_nullary(self):
        with pytest.raises(TypeError, match="Ambiguous handler"):
            match(3)(_.then(lambda x=0: x, strict=True))

    def test_unambiguous_passes(self):
        assert match(3)(_.then(lambda x: x * 2, strict=True)) == 6
        assert match(1, 2)(_.then(lambda a, b: a - b, strict=True)) == -1

    def test_explicit_builder_is_never_strict(self):
        assert match(1, 2)(_.apply(lambda *args: args)) == ((1, 2),)

    def test_strict_from_environment(self, monkeypatch):
        monkeypatch.setenv("EASYMATCH_STRICT_HANDLERS", "true")
        arm = when(3) >> (lambda *args: args)
        assert arm.strict is True
        with pytest.raises(TypeError, match="Ambiguous handler"):
            match(3)(arm)

    def test_lenient_by_default(self):
        arm = _ >> (lambda *args: args)
        assert arm.strict is False
