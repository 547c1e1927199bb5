# tests/unit/test_matchers.py

"""Unit tests for single-value and argument-list matchers."""

import pytest

from stubverify.matchers import (
    AnyArgs,
    ArgumentList,
    ExactValue,
    any_args,
    anything,
    array_including,
    as_call_matcher,
    as_matcher,
    describe_call_matcher,
    hash_including,
    instance_of,
    satisfying,
)
from stubverify.protocols import ArgumentMatcher, CallMatcher


class TestSingleValueMatchers:
    """Tests for matchers over one argument."""

    def test_exact_value_uses_equality(self) -> None:
        """Test exact values compare by equality."""
        matcher = ExactValue({"amount": 2})
        assert matcher.matches({"amount": 2})
        assert not matcher.matches({"amount": 3})

    def test_anything_matches_none_too(self) -> None:
        """Test anything accepts None and arbitrary objects."""
        assert anything.matches(None)
        assert anything.matches(object())

    def test_hash_including_requires_keys(self) -> None:
        """Test hash_including requires its keys in a mapping."""
        matcher = hash_including("event")
        assert matcher.matches({"event": "storm", "severity": "high"})
        assert not matcher.matches({"severity": "high"})
        assert not matcher.matches(["event"])

    def test_hash_including_constrains_values(self) -> None:
        """Test keyword pairs constrain the stored values."""
        matcher = hash_including(level="high", speed=anything)
        assert matcher.matches({"level": "high", "speed": 20, "gust": 30})
        assert not matcher.matches({"level": "low", "speed": 20})
        assert not matcher.matches({"level": "high"})

    def test_array_including_ignores_order_and_extras(self) -> None:
        """Test array_including ignores order and extra elements."""
        matcher = array_including("temp", "humidity")
        assert matcher.matches(["humidity", "pressure", "temp"])
        assert matcher.matches(("temp", "humidity"))
        assert matcher.matches({"temp", "humidity"})
        assert not matcher.matches(["pressure"])

    def test_array_including_does_not_require_duplicates(self) -> None:
        """Test repeated expectations need only one occurrence."""
        assert array_including("temp", "temp").matches(["temp"])

    def test_array_including_rejects_strings(self) -> None:
        """Test strings are not treated as sequences."""
        assert not array_including("t").matches("temp")

    def test_array_including_accepts_nested_matchers(self) -> None:
        """Test elements may themselves be matchers."""
        matcher = array_including(instance_of(int))
        assert matcher.matches(["a", 3])
        assert not matcher.matches(["a", "b"])

    def test_instance_of_and_satisfying(self) -> None:
        """Test type and predicate matchers."""
        assert instance_of(int, float).matches(2.5)
        assert not instance_of(int).matches("2")
        positive = satisfying(lambda n: n > 0, "positive")
        assert positive.matches(1)
        assert not positive.matches(-1)
        assert positive.describe() == "satisfying(positive)"

    def test_literals_are_wrapped(self) -> None:
        """Test literals are wrapped in ExactValue."""
        assert as_matcher(5) == ExactValue(5)
        assert as_matcher(anything) is anything
        assert isinstance(hash_including("a"), ArgumentMatcher)


class TestArgumentList:
    """Tests for whole-argument-list matching."""

    def test_exact_positional_list(self) -> None:
        """Test positional arguments must line up exactly."""
        matcher = ArgumentList("rain", {"amount": 2})
        assert matcher.matches_call(("rain", {"amount": 2}), {})
        assert not matcher.matches_call(("rain",), {})
        assert not matcher.matches_call(("rain", {"amount": 2}, "extra"), {})

    def test_empty_list_matches_only_no_arguments(self) -> None:
        """Test an empty list only matches a call without arguments."""
        matcher = ArgumentList()
        assert matcher.matches_call((), {})
        assert not matcher.matches_call(("x",), {})

    def test_keyword_arguments_must_match_exactly(self) -> None:
        """Test keyword arguments must carry the expected key set."""
        matcher = ArgumentList("rain", amount=2)
        assert matcher.matches_call(("rain",), {"amount": 2})
        assert not matcher.matches_call(("rain",), {"amount": 2, "unit": "mm"})
        assert not matcher.matches_call(("rain",), {})

    def test_any_args_alone_matches_everything(self) -> None:
        """Test any_args alone matches any call."""
        matcher = ArgumentList(any_args)
        assert matcher.matches_call((), {})
        assert matcher.matches_call(("rain", {"amount": 2}), {"unit": "mm"})

    def test_any_args_inside_a_list(self) -> None:
        """Test any_args absorbs a run of positional arguments."""
        matcher = ArgumentList("rain", any_args, "end")
        assert matcher.matches_call(("rain", "end"), {})
        assert matcher.matches_call(("rain", 1, 2, 3, "end"), {})
        assert not matcher.matches_call(("wind", "end"), {})

    def test_any_args_with_keyword_expectations(self) -> None:
        """Test declared keywords still apply alongside any_args."""
        matcher = ArgumentList(any_args, unit="mm")
        assert matcher.matches_call((1, 2), {"unit": "mm"})
        assert not matcher.matches_call((1, 2), {})

    def test_specificity_ranks_narrower_lists_higher(self) -> None:
        """Test narrower expectations score higher."""
        assert ArgumentList("today").specificity > ArgumentList(anything).specificity
        assert ArgumentList(hash_including("a")).specificity > ArgumentList(anything).specificity
        assert ArgumentList(anything).specificity > AnyArgs().specificity

    def test_describe(self) -> None:
        """Test human readable descriptions."""
        matcher = ArgumentList(anything, hash_including("level"), unit="mm")
        assert matcher.describe() == "(anything, hash_including('level'), unit='mm')"
        assert describe_call_matcher(None) == "(any arguments)"


class TestCoercion:
    """Tests for normalising matcher arguments."""

    def test_tuple_becomes_argument_list(self) -> None:
        """Test a tuple of expected arguments becomes an ArgumentList."""
        matcher = as_call_matcher(("NYC",))
        assert isinstance(matcher, ArgumentList)
        assert matcher.matches_call(("NYC",), {})

    def test_call_matchers_pass_through(self) -> None:
        """Test call matchers and None pass through unchanged."""
        assert as_call_matcher(any_args) is any_args
        assert as_call_matcher(None) is None
        assert isinstance(any_args, CallMatcher)

    def test_bare_argument_matcher_stands_for_one_argument(self) -> None:
        """Test a bare argument matcher becomes a one-argument list."""
        matcher = as_call_matcher(hash_including("event"))
        assert isinstance(matcher, ArgumentList)
        assert matcher.matches_call(({"event": "storm"},), {})
        assert not matcher.matches_call(({"event": "storm"}, "extra"), {})

    def test_rejects_other_values(self) -> None:
        """Test plain literals are rejected."""
        with pytest.raises(TypeError):
            as_call_matcher("NYC")

    def test_fakes_are_treated_as_literals(self, registry) -> None:
        """Test fakes are compared as values, without touching their attributes."""
        sensor = registry.create_fake("Sensor")
        matcher = as_matcher(sensor)

        assert isinstance(matcher, ExactValue)
        assert matcher.matches(sensor)
        assert matcher.describe() == "#<Double 'Sensor'>"
        assert registry.calls(sensor) == []
