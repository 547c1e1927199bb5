#
# src/stubverify/matchers.py
#
"""
Argument matchers used both when stubbing and when verifying calls.

Single-value matchers implement ``matches(value)``; argument-list matchers
implement ``matches_call(args, kwargs)``. Every matcher carries a
``specificity`` score the registry uses to rank competing stub rules.
"""
from collections.abc import Callable, Mapping, Sequence, Set
from typing import Any, ClassVar

from attrs import define, field

from stubverify.fakes import FakeObject
from stubverify.protocols import ArgumentMatcher, CallMatcher


# --- Single-value matchers ---
@define(frozen=True, slots=True)
class ExactValue:
    """Matches only arguments equal to ``expected``."""
    specificity: ClassVar[int] = 3
    expected: Any

    def matches(self, value: Any) -> bool:
        return bool(value == self.expected)

    def describe(self) -> str:
        return repr(self.expected)


@define(frozen=True, slots=True)
class Anything:
    """Matches any single argument value."""
    specificity: ClassVar[int] = 1

    def matches(self, value: Any) -> bool:
        return True

    def describe(self) -> str:
        return "anything"


@define(frozen=True, slots=True, init=False)
class HashIncluding:
    """
    Matches a mapping that contains at least the given keys.

    Keyword pairs additionally constrain the value stored under that key;
    the expected value may itself be a matcher.
    """
    specificity: ClassVar[int] = 2
    keys: tuple[Any, ...]
    pairs: dict[str, Any]

    def __init__(self, *keys: Any, **pairs: Any):
        self.__attrs_init__(keys=keys, pairs=pairs)

    def matches(self, value: Any) -> bool:
        if not isinstance(value, Mapping):
            return False
        if any(key not in value for key in self.keys):
            return False
        for key, expected in self.pairs.items():
            if key not in value or not as_matcher(expected).matches(value[key]):
                return False
        return True

    def describe(self) -> str:
        parts = [repr(key) for key in self.keys]
        parts.extend(f"{key}={describe_value(val)}" for key, val in self.pairs.items())
        return f"hash_including({', '.join(parts)})"


@define(frozen=True, slots=True, init=False)
class ArrayIncluding:
    """
    Matches a sequence or set containing every expected element at least once.

    Order is irrelevant and duplicates in the expectation are not required
    to appear twice. Strings and bytes are not treated as sequences.
    """
    specificity: ClassVar[int] = 2
    elements: tuple[Any, ...]

    def __init__(self, *elements: Any):
        self.__attrs_init__(elements=elements)

    def matches(self, value: Any) -> bool:
        if isinstance(value, str | bytes | bytearray) or not isinstance(value, Sequence | Set):
            return False
        return all(
            any(as_matcher(element).matches(item) for item in value)
            for element in self.elements
        )

    def describe(self) -> str:
        return f"array_including({', '.join(describe_value(e) for e in self.elements)})"


@define(frozen=True, slots=True, init=False)
class InstanceOf:
    """Matches values that are instances of any of the given types."""
    specificity: ClassVar[int] = 2
    types: tuple[type, ...]

    def __init__(self, *types: type):
        self.__attrs_init__(types=types)

    def matches(self, value: Any) -> bool:
        return isinstance(value, self.types)

    def describe(self) -> str:
        return f"instance_of({', '.join(t.__name__ for t in self.types)})"


@define(frozen=True, slots=True)
class Satisfying:
    """Matches values for which ``predicate`` returns a truthy result."""
    specificity: ClassVar[int] = 2
    predicate: Callable[[Any], Any]
    description: str | None = field(default=None)

    def matches(self, value: Any) -> bool:
        return bool(self.predicate(value))

    def describe(self) -> str:
        name = self.description or getattr(self.predicate, "__name__", repr(self.predicate))
        return f"satisfying({name})"


# --- Argument-list matchers ---
@define(frozen=True, slots=True)
class AnyArgs:
    """
    Matches any argument list of any length.

    Inside an ``ArgumentList`` it matches zero or more positional arguments
    at its position.
    """
    specificity: ClassVar[int] = 0

    def matches_call(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> bool:
        return True

    def describe(self) -> str:
        return "any_args"


@define(frozen=True, slots=True, init=False)
class ArgumentList:
    """
    Matches a call whose arguments line up with the expected ones.

    Literal expectations are compared with ``ExactValue``. Keyword
    arguments must carry exactly the expected key set unless the list
    contains ``any_args`` and declares no keyword expectations.
    """
    expected: tuple[Any, ...]
    expected_kwargs: dict[str, Any]

    def __init__(self, *expected: Any, **expected_kwargs: Any):
        self.__attrs_init__(
            expected=tuple(e if isinstance(e, AnyArgs) else as_matcher(e) for e in expected),
            expected_kwargs={key: as_matcher(val) for key, val in expected_kwargs.items()},
        )

    @property
    def specificity(self) -> int:
        score = sum(matcher.specificity for matcher in self.expected)
        return score + sum(matcher.specificity for matcher in self.expected_kwargs.values())

    def matches_call(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> bool:
        if not _match_positional(self.expected, tuple(args)):
            return False
        if not self.expected_kwargs and any(isinstance(e, AnyArgs) for e in self.expected):
            return True
        if set(kwargs) != set(self.expected_kwargs):
            return False
        return all(matcher.matches(kwargs[key]) for key, matcher in self.expected_kwargs.items())

    def describe(self) -> str:
        parts = [describe_value(matcher) for matcher in self.expected]
        parts.extend(f"{key}={describe_value(matcher)}" for key, matcher in self.expected_kwargs.items())
        return f"({', '.join(parts)})"


def _match_positional(expected: tuple[Any, ...], actual: tuple[Any, ...]) -> bool:
    if not expected:
        return not actual
    head, rest = expected[0], expected[1:]
    if isinstance(head, AnyArgs):
        return any(_match_positional(rest, actual[i:]) for i in range(len(actual) + 1))
    if not actual:
        return False
    return head.matches(actual[0]) and _match_positional(rest, actual[1:])


# --- Coercion helpers ---
def as_matcher(value: Any) -> ArgumentMatcher:
    """Wraps literals in ``ExactValue``; matchers pass through unchanged."""
    if not isinstance(value, FakeObject) and isinstance(value, ArgumentMatcher):
        return value
    return ExactValue(value)


def as_call_matcher(value: Any) -> CallMatcher | None:
    """
    Normalises the matcher forms accepted by ``stub`` and ``has_received``.

    ``None`` stays ``None`` (catch-all), call matchers pass through, a bare
    argument matcher stands for a one-argument list, and a tuple of expected
    arguments becomes an ``ArgumentList``.
    """
    if value is None:
        return None
    if not isinstance(value, FakeObject):
        if isinstance(value, CallMatcher):
            return value
        if isinstance(value, ArgumentMatcher):
            return ArgumentList(value)
    if isinstance(value, tuple):
        return ArgumentList(*value)
    raise TypeError(
        f"Expected a call matcher or a tuple of expected arguments, got {type(value).__name__}"
    )


def describe_value(value: Any) -> str:
    # Looked up on the type so fakes never see a stray "describe" call.
    describe = getattr(type(value), "describe", None)
    return describe(value) if callable(describe) else repr(value)


def describe_call_matcher(matcher: CallMatcher | None) -> str:
    """Human readable form of an argument-list expectation."""
    if matcher is None:
        return "(any arguments)"
    return describe_value(matcher)


# --- Convenience instances and constructors ---
anything = Anything()
any_args = AnyArgs()


def hash_including(*keys: Any, **pairs: Any) -> HashIncluding:
    return HashIncluding(*keys, **pairs)


def array_including(*elements: Any) -> ArrayIncluding:
    return ArrayIncluding(*elements)


def instance_of(*types: type) -> InstanceOf:
    return InstanceOf(*types)


def satisfying(predicate: Callable[[Any], Any], description: str | None = None) -> Satisfying:
    return Satisfying(predicate, description)

# 🔼⚙️
