# src/stubverify/exceptions.py

"""
Custom exceptions raised by the stubverify registry and its helpers.
"""

from collections.abc import Sequence
from typing import Any


class StubVerifyError(Exception):
    """Base class for all stubverify errors."""

    pass


class ConfigurationError(StubVerifyError):
    """Raised when the configuration file or its values are invalid."""

    pass


class InvalidStubConfiguration(StubVerifyError):
    """Raised when a stub rule or query is given an unusable method name, matcher or response."""

    def __init__(self, message: str, method_name: Any = None):
        self.method_name = method_name
        full_message = f"[Stub] {message}"
        if method_name:
            full_message += f" (method: {method_name!r})"
        super().__init__(full_message)


class UnmatchedCallOnStrictFake(StubVerifyError):
    """Raised by strict registries when no stub rule matches a call."""

    def __init__(self, label: str, method_name: str, args: tuple, kwargs: dict):
        self.label = label
        self.method_name = method_name
        self.args_received = args
        self.kwargs_received = kwargs
        super().__init__(
            f"#<Double {label!r}> received unexpected call "
            f"{method_name}({format_arguments(args, kwargs)}) with no matching stub"
        )


class VerificationFailure(StubVerifyError, AssertionError):
    """
    Raised when an expected interaction is missing from the call log.

    Carries the expected pattern and count plus every call recorded for the
    method so the failure explains itself.
    """

    def __init__(
        self,
        label: str,
        method_name: str,
        expected_args: str,
        expected_count: str,
        actual_calls: Sequence[Any],
    ):
        self.label = label
        self.method_name = method_name
        self.expected_args = expected_args
        self.expected_count = expected_count
        self.actual_calls = list(actual_calls)

        lines = [
            f"#<Double {label!r}> expected to have received {method_name}",
            f"  expected arguments: {expected_args}",
            f"  expected count:     {expected_count}",
        ]
        if self.actual_calls:
            lines.append(f"  received {len(self.actual_calls)} call(s):")
            lines.extend(f"    {call}" for call in self.actual_calls)
        else:
            lines.append("  received no calls")
        super().__init__("\n".join(lines))


class RegistryClosedError(StubVerifyError):
    """Raised when a registry is used after teardown."""

    pass


class UnknownFakeError(StubVerifyError):
    """Raised when a fake is passed to a registry that did not create it."""

    pass


def format_arguments(args: tuple, kwargs: dict) -> str:
    """Renders an argument list the way it would appear at a call site."""
    parts = [repr(arg) for arg in args]
    parts.extend(f"{key}={value!r}" for key, value in kwargs.items())
    return ", ".join(parts)


# 🔼⚙️
