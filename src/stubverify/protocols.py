#
# src/stubverify/protocols.py
#
"""
Defines the runtime protocols shared by argument matchers and the registry.
"""
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ArgumentMatcher(Protocol):
    """
    Protocol for a predicate over a single argument value.
    """
    specificity: int

    def matches(self, value: Any) -> bool:
        """
        Decides whether one actual argument satisfies this matcher.

        Args:
            value: The argument passed at the call site.

        Returns:
            True when the value is accepted.
        """
        ...


@runtime_checkable
class CallMatcher(Protocol):
    """
    Protocol for a predicate over a whole argument list.
    """
    specificity: int

    def matches_call(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> bool:
        """
        Decides whether a call's positional and keyword arguments are accepted.

        Args:
            args: Positional arguments of the call.
            kwargs: Keyword arguments of the call.

        Returns:
            True when the argument list is accepted.
        """
        ...

# 🔼⚙️
