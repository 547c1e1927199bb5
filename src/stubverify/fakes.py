#
# src/stubverify/fakes.py
#
"""
Lightweight fake-object handles.

A fake holds no rules or calls of its own: every method call is routed
back to the registry that created it, keyed by the fake's id.
"""
from functools import partial
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from stubverify.registry import Registry


_HANDLE_SLOTS = frozenset({"_registry", "_fake_id", "_label", "_target"})


def _is_reserved(name: str) -> bool:
    return name in _HANDLE_SLOTS or (name.startswith("__") and name.endswith("__"))


class FakeObject:
    """
    Stand-in object whose method calls are resolved by a ``Registry``.

    Any attribute that is not a dunder resolves to a callable, so code under
    test can call arbitrary methods without a declared interface.
    """

    __slots__ = ("_registry", "_fake_id", "_label")

    def __init__(self, registry: "Registry", fake_id: int, label: str):
        self._registry = registry
        self._fake_id = fake_id
        self._label = label

    def __getattr__(self, name: str) -> Any:
        if _is_reserved(name):
            raise AttributeError(name)
        return partial(self._registry.invoke, self, name)

    def __repr__(self) -> str:
        return f"#<Double {self._label!r}>"


class PartialFake(FakeObject):
    """
    Wraps a real object, intercepting only the method names that have been
    stubbed and delegating every other attribute to the wrapped instance.
    Once its registry is torn down the wrapper delegates everything.
    """

    __slots__ = ("_target",)

    def __init__(self, registry: "Registry", fake_id: int, label: str, target: Any):
        super().__init__(registry, fake_id, label)
        self._target = target

    def __getattr__(self, name: str) -> Any:
        if _is_reserved(name):
            raise AttributeError(name)
        if self._registry.closed:
            return getattr(self._target, name)
        if self._registry.is_stubbed(self, name):
            return partial(self._registry.invoke, self, name)
        return getattr(self._target, name)

    def __repr__(self) -> str:
        return f"#<Partial {self._label!r} wrapping {self._target!r}>"

# 🔼⚙️
