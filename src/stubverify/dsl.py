#
# src/stubverify/dsl.py
#
"""
Fluent builders layered over the registry.

    registry.allow(station).to_receive("humidity").with_args("NYC").and_return(55)
    assert registry.received(logger, "log_event").with_args("rain", {"amount": 2}).once()
"""
from typing import TYPE_CHECKING, Any

from attrs import define, evolve, field

from stubverify import models
from stubverify.exceptions import InvalidStubConfiguration
from stubverify.matchers import ArgumentList
from stubverify.protocols import CallMatcher

if TYPE_CHECKING:
    from stubverify.fakes import FakeObject
    from stubverify.registry import Registry


class StubBuilder:
    """Refines a freshly registered stub rule."""

    def __init__(self, rule: models.StubRule):
        self.rule = rule

    def with_args(self, *args: Any, **kwargs: Any) -> "StubBuilder":
        self.rule.matcher = ArgumentList(*args, **kwargs)
        return self

    def and_return(self, *values: Any) -> "StubBuilder":
        """One value is returned every time; several are returned in order, the last repeating."""
        if not values:
            raise InvalidStubConfiguration("and_return requires at least one value", self.rule.method_name)
        if len(values) == 1:
            self.rule.response = models.FixedResponse(values[0])
        else:
            self.rule.response = models.SequenceResponse(values)
        return self

    def and_raise(self, exception: BaseException | type[BaseException]) -> "StubBuilder":
        self.rule.response = models.RaiseResponse(exception)
        return self


class Allowance:
    """Entry point returned by ``Registry.allow``."""

    def __init__(self, registry: "Registry", fake: "FakeObject"):
        self._registry = registry
        self._fake = fake

    def to_receive(self, method_name: str) -> StubBuilder:
        """Registers a catch-all rule returning None, refined by the returned builder."""
        return StubBuilder(self._registry.stub(self._fake, method_name))

    def to_receive_messages(self, **responses: Any) -> None:
        """Stubs several methods at once, each returning a fixed value."""
        for method_name, value in responses.items():
            self._registry.stub(self._fake, method_name, response=models.FixedResponse(value))


@define(frozen=True, slots=True)
class ReceivedQuery:
    """
    Lazy, immutable verification query.

    Each refinement returns a new query. Truthiness evaluates the query
    against the current call log; ``verify`` raises VerificationFailure
    instead of returning False.
    """
    registry: "Registry"
    fake: "FakeObject"
    method_name: str
    matcher: CallMatcher | None = field(default=None)
    count: models.CallCount = field(factory=lambda: models.at_least(1))

    def with_args(self, *args: Any, **kwargs: Any) -> "ReceivedQuery":
        return evolve(self, matcher=ArgumentList(*args, **kwargs))

    def times(self, count: int) -> "ReceivedQuery":
        return evolve(self, count=models.exactly(count))

    def once(self) -> "ReceivedQuery":
        return evolve(self, count=models.once())

    def twice(self) -> "ReceivedQuery":
        return evolve(self, count=models.twice())

    def never(self) -> "ReceivedQuery":
        return evolve(self, count=models.never())

    def at_least(self, count: int) -> "ReceivedQuery":
        return evolve(self, count=models.at_least(count))

    def at_most(self, count: int) -> "ReceivedQuery":
        return evolve(self, count=models.at_most(count))

    def __bool__(self) -> bool:
        return self.registry.has_received(self.fake, self.method_name, self.matcher, self.count)

    def verify(self) -> list[models.CallRecord]:
        return self.registry.verify_received(self.fake, self.method_name, self.matcher, self.count)

# 🔼⚙️
