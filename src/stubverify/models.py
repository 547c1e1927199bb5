# src/stubverify/models.py
#
"""
Attrs-based records owned by the registry: stub rules, response policies,
call records and call-count constraints.
"""

from typing import Any, TypeAlias

import structlog
from attrs import define, field, mutable

from stubverify.exceptions import InvalidStubConfiguration, format_arguments
from stubverify.protocols import CallMatcher

log: structlog.stdlib.BoundLogger = structlog.get_logger("models")


# --- Response policies ---
@define(frozen=True, slots=True)
class FixedResponse:
    """Returns the same value on every matching call."""
    value: Any = field(default=None)

    def resolve(self, match_index: int) -> Any:
        return self.value


@define(frozen=True, slots=True)
class SequenceResponse:
    """
    Returns one value per matching call, repeating the last once exhausted.
    """
    values: tuple[Any, ...] = field(converter=tuple)

    @values.validator
    def _check_values(self, attribute: Any, value: tuple[Any, ...]) -> None:
        if not value:
            raise InvalidStubConfiguration("Response sequence must contain at least one value")

    def resolve(self, match_index: int) -> Any:
        return self.values[min(match_index, len(self.values) - 1)]


@define(frozen=True, slots=True)
class RaiseResponse:
    """Raises the configured exception on every matching call."""
    exception: BaseException | type[BaseException] = field()

    @exception.validator
    def _check_exception(self, attribute: Any, value: Any) -> None:
        is_class = isinstance(value, type) and issubclass(value, BaseException)
        if not (is_class or isinstance(value, BaseException)):
            raise InvalidStubConfiguration(f"and_raise expects an exception, got {value!r}")

    def resolve(self, match_index: int) -> Any:
        raise self.exception


ResponsePolicy: TypeAlias = FixedResponse | SequenceResponse | RaiseResponse


# --- Rules and records ---
@mutable(slots=True)
class StubRule:
    """
    One configured (matcher, response) pair bound to a method of a fake.

    Mutable so the fluent builder can refine the matcher and response after
    registration; the match counter drives sequence responses.
    """
    method_name: str = field()
    matcher: CallMatcher | None = field(default=None)
    response: ResponsePolicy = field(factory=FixedResponse)
    registration: int = field(default=0)
    _match_count: int = field(default=0, init=False)

    @property
    def match_count(self) -> int:
        return self._match_count

    def matches(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> bool:
        return self.matcher is None or self.matcher.matches_call(args, kwargs)

    def precedence(self) -> tuple[int, int, int]:
        """Sort key: explicit matcher first, then specificity, then most recent."""
        if self.matcher is None:
            return (0, 0, self.registration)
        return (1, self.matcher.specificity, self.registration)

    def respond(self) -> Any:
        index = self._match_count
        self._match_count += 1
        log.debug(
            "Resolving stub response",
            method=self.method_name,
            match_index=index,
            policy=type(self.response).__name__,
        )
        return self.response.resolve(index)


@define(frozen=True, slots=True)
class CallRecord:
    """
    Log entry for one observed invocation.

    The snapshot is shallow: ``args`` and ``kwargs`` hold the caller's own
    objects, so mutating an argument after the call changes what later
    verification sees.
    """
    sequence: int
    method_name: str
    args: tuple[Any, ...] = field(converter=tuple)
    kwargs: dict[str, Any] = field(factory=dict)

    def __str__(self) -> str:
        return f"#{self.sequence} {self.method_name}({format_arguments(self.args, self.kwargs)})"


# --- Call-count constraints ---
@define(frozen=True, slots=True)
class CallCount:
    """Constraint on how many recorded calls must match a verification query."""
    kind: str = field()
    count: int = field()

    @kind.validator
    def _check_kind(self, attribute: Any, value: str) -> None:
        if value not in ("exactly", "at_least", "at_most"):
            raise ValueError(f"Unknown call count kind '{value}'")

    @count.validator
    def _check_count(self, attribute: Any, value: int) -> None:
        if not isinstance(value, int) or value < 0:
            raise ValueError(f"Call count must be a non-negative integer, got {value!r}")

    def satisfied_by(self, actual: int) -> bool:
        if self.kind == "exactly":
            return actual == self.count
        if self.kind == "at_least":
            return actual >= self.count
        return actual <= self.count

    def describe(self) -> str:
        noun = "time" if self.count == 1 else "times"
        return f"{self.kind.replace('_', ' ')} {self.count} {noun}"


def exactly(count: int) -> CallCount:
    return CallCount("exactly", count)


def at_least(count: int) -> CallCount:
    return CallCount("at_least", count)


def at_most(count: int) -> CallCount:
    return CallCount("at_most", count)


def once() -> CallCount:
    return exactly(1)


def twice() -> CallCount:
    return exactly(2)


def never() -> CallCount:
    return exactly(0)


# 🔼⚙️
