# src/stubverify/registry.py
#
"""
The stub/verify registry.

A Registry owns every stub rule and call record for the fakes it creates.
One registry is meant to live for exactly one test; tearing it down drops
all state and closes it.
"""

import itertools
from typing import Any

import structlog
from attrs import field, mutable

from stubverify.config.models import StubVerifyConfig
from stubverify.dsl import Allowance, ReceivedQuery
from stubverify.exceptions import (
    InvalidStubConfiguration,
    RegistryClosedError,
    UnknownFakeError,
    UnmatchedCallOnStrictFake,
    VerificationFailure,
)
from stubverify.fakes import FakeObject, PartialFake
from stubverify.matchers import as_call_matcher, describe_call_matcher
from stubverify.models import (
    CallCount,
    CallRecord,
    FixedResponse,
    RaiseResponse,
    SequenceResponse,
    StubRule,
    at_least,
)

log: structlog.stdlib.BoundLogger = structlog.get_logger("registry")

_RESPONSE_TYPES = (FixedResponse, SequenceResponse, RaiseResponse)


def _coerce_matcher(matcher: Any, method_name: str) -> Any:
    try:
        return as_call_matcher(matcher)
    except TypeError as e:
        raise InvalidStubConfiguration(str(e), method_name) from e


@mutable(slots=True)
class _FakeEntry:
    """Per-fake state held by the registry."""
    label: str = field()
    null_object: bool = field(default=False)
    target: Any = field(default=None)
    rules: dict[str, list[StubRule]] = field(factory=dict)
    calls: list[CallRecord] = field(factory=list)


class Registry:
    """
    Owns stub rules and call logs for a set of fakes.

    Usable as a context manager; leaving the block tears the registry down.
    """

    def __init__(self, config: StubVerifyConfig | None = None):
        self.config = config or StubVerifyConfig()
        self._entries: dict[int, _FakeEntry] = {}
        self._fake_ids = itertools.count(1)
        self._call_sequence = itertools.count(1)
        self._registrations = itertools.count(1)
        self._closed = False
        self._log = log.bind(unmatched_calls=self.config.unmatched_calls)

    def __enter__(self) -> "Registry":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.teardown()

    @property
    def closed(self) -> bool:
        return self._closed

    # --- Fake construction ---
    def create_fake(self, label: str = "double") -> FakeObject:
        """Creates a fake with no stubbed methods and an empty call log."""
        fake_id = self._new_entry(_FakeEntry(label=label))
        self._log.debug("Created fake", label=label, fake_id=fake_id)
        return FakeObject(self, fake_id, label)

    def create_null_object_fake(self, label: str = "double") -> FakeObject:
        """Creates a fake that returns itself from any unstubbed call."""
        fake_id = self._new_entry(_FakeEntry(label=label, null_object=True))
        self._log.debug("Created null-object fake", label=label, fake_id=fake_id)
        return FakeObject(self, fake_id, label)

    def as_null_object(self, fake: FakeObject) -> FakeObject:
        """Flags an existing fake as a null object and returns it."""
        self._entry(fake).null_object = True
        return fake

    def partial(self, target: Any, label: str | None = None) -> PartialFake:
        """Wraps a real object so selected methods can be stubbed."""
        label = label or type(target).__name__
        fake_id = self._new_entry(_FakeEntry(label=label, target=target))
        self._log.debug("Created partial fake", label=label, fake_id=fake_id)
        return PartialFake(self, fake_id, label, target)

    def _new_entry(self, entry: _FakeEntry) -> int:
        self._ensure_open()
        fake_id = next(self._fake_ids)
        self._entries[fake_id] = entry
        return fake_id

    # --- Stubbing ---
    def stub(
        self,
        fake: FakeObject,
        method_name: str,
        matcher: Any = None,
        response: Any = None,
    ) -> StubRule:
        """
        Registers an additional stub rule for ``method_name`` on ``fake``.

        Args:
            fake: A fake created by this registry.
            method_name: Non-empty name of the method to intercept.
            matcher: None for a catch-all rule, a call matcher, a single
                argument matcher, or a tuple of expected arguments.
            response: A response policy, or a plain value returned as-is.
                Omitted means the stub returns None.

        Returns:
            The registered rule.

        Raises:
            InvalidStubConfiguration: On an empty method name or an unusable
                matcher or response.
        """
        entry = self._entry(fake)
        if not isinstance(method_name, str) or not method_name:
            raise InvalidStubConfiguration("Method name must be a non-empty string", method_name)
        if method_name.startswith("__") and method_name.endswith("__"):
            raise InvalidStubConfiguration("Dunder methods cannot be stubbed", method_name)

        call_matcher = _coerce_matcher(matcher, method_name)

        policy = response if isinstance(response, _RESPONSE_TYPES) else FixedResponse(response)
        rule = StubRule(
            method_name=method_name,
            matcher=call_matcher,
            response=policy,
            registration=next(self._registrations),
        )
        entry.rules.setdefault(method_name, []).append(rule)
        self._log.debug(
            "Registered stub rule",
            fake=entry.label,
            method=method_name,
            matcher=describe_call_matcher(call_matcher),
            policy=type(policy).__name__,
            rule_count=len(entry.rules[method_name]),
        )
        return rule

    def is_stubbed(self, fake: FakeObject, method_name: str) -> bool:
        return bool(self._entry(fake).rules.get(method_name))

    # --- Dispatch ---
    def invoke(self, fake: FakeObject, method_name: str, *args: Any, **kwargs: Any) -> Any:
        """
        Records a call on ``fake`` and resolves its response.

        The call is logged before any rule is consulted, so verification sees
        it whether or not a stub matched.
        """
        entry = self._entry(fake)
        record = CallRecord(next(self._call_sequence), method_name, args, dict(kwargs))
        entry.calls.append(record)

        rule = self._select_rule(entry, method_name, args, kwargs)
        if rule is not None:
            self._log.debug(
                "Dispatching to stub rule",
                fake=entry.label,
                method=method_name,
                registration=rule.registration,
            )
            return rule.respond()

        if entry.null_object:
            self._log.debug("Unmatched call on null object", fake=entry.label, method=method_name)
            return fake
        if entry.target is not None:
            self._log.debug("Delegating unmatched call to real object", fake=entry.label, method=method_name)
            return getattr(entry.target, method_name)(*args, **kwargs)
        if self.config.strict:
            self._log.warning("Unmatched call on strict fake", fake=entry.label, method=method_name)
            raise UnmatchedCallOnStrictFake(entry.label, method_name, args, kwargs)

        self._log.debug("Unmatched call returns None", fake=entry.label, method=method_name)
        return None

    def _select_rule(
        self,
        entry: _FakeEntry,
        method_name: str,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> StubRule | None:
        candidates = [rule for rule in entry.rules.get(method_name, ()) if rule.matches(args, kwargs)]
        return max(candidates, key=StubRule.precedence, default=None)

    # --- Verification ---
    def calls(self, fake: FakeObject, method_name: str | None = None) -> list[CallRecord]:
        """Returns recorded calls on ``fake``, optionally for one method."""
        calls = self._entry(fake).calls
        if method_name is None:
            return list(calls)
        return [call for call in calls if call.method_name == method_name]

    def _matching_calls(self, fake: FakeObject, method_name: str, matcher: Any) -> list[CallRecord]:
        call_matcher = _coerce_matcher(matcher, method_name)
        return [
            call
            for call in self.calls(fake, method_name)
            if call_matcher is None or call_matcher.matches_call(call.args, call.kwargs)
        ]

    def has_received(
        self,
        fake: FakeObject,
        method_name: str,
        matcher: Any = None,
        count: CallCount | None = None,
    ) -> bool:
        """
        Checks the call log for calls to ``method_name`` accepted by ``matcher``.

        ``count`` constrains how many calls must match; by default at least
        one. Stub rules are not consulted and nothing is mutated.
        """
        constraint = count or at_least(1)
        matched = len(self._matching_calls(fake, method_name, matcher))
        return constraint.satisfied_by(matched)

    def verify_received(
        self,
        fake: FakeObject,
        method_name: str,
        matcher: Any = None,
        count: CallCount | None = None,
    ) -> list[CallRecord]:
        """
        Like ``has_received`` but raises VerificationFailure on a mismatch.

        Returns:
            The matching call records.
        """
        constraint = count or at_least(1)
        matched = self._matching_calls(fake, method_name, matcher)
        if constraint.satisfied_by(len(matched)):
            self._log.debug("Verification passed", method=method_name, matched=len(matched))
            return matched

        entry = self._entry(fake)
        self._log.debug(
            "Verification failed",
            fake=entry.label,
            method=method_name,
            expected=constraint.describe(),
            matched=len(matched),
        )
        raise VerificationFailure(
            label=entry.label,
            method_name=method_name,
            expected_args=describe_call_matcher(_coerce_matcher(matcher, method_name)),
            expected_count=constraint.describe(),
            actual_calls=self.calls(fake, method_name),
        )

    # --- Fluent entry points ---
    def allow(self, fake: FakeObject) -> Allowance:
        """Starts a fluent stub definition: ``allow(fake).to_receive("name")``."""
        self._entry(fake)
        return Allowance(self, fake)

    def received(self, fake: FakeObject, method_name: str) -> ReceivedQuery:
        """Starts a fluent verification query over the call log."""
        self._entry(fake)
        return ReceivedQuery(self, fake, method_name)

    # --- Lifecycle ---
    def teardown(self) -> None:
        """Drops all rules and call records and closes the registry."""
        if self._closed:
            return
        self._log.debug(
            "Tearing down registry",
            fakes=len(self._entries),
            calls=sum(len(entry.calls) for entry in self._entries.values()),
        )
        self._entries.clear()
        self._closed = True

    def _ensure_open(self) -> None:
        if self._closed:
            raise RegistryClosedError("Registry has been torn down; create a new one per test")

    def _entry(self, fake: Any) -> _FakeEntry:
        self._ensure_open()
        if not isinstance(fake, FakeObject) or fake._registry is not self:
            raise UnknownFakeError(f"{fake!r} was not created by this registry")
        try:
            return self._entries[fake._fake_id]
        except KeyError as e:
            raise UnknownFakeError(f"{fake!r} is not registered") from e

# 🔼⚙️
