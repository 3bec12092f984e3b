from collections.abc import MutableMapping
from typing import Any, NamedTuple, Optional

from .registry import NameRegistry


class FieldDescriptor(NamedTuple):
    """A field as stored in the wrapped mapping: its established spelling and its value."""

    key: Any
    value: Any


class CaselessDict(MutableMapping):
    """Case-insensitive view over an ordinary mapping.

    Every field operation is redirected to the spelling under which the key was first
    written, so ``d["content-type"]`` and ``d["CONTENT-TYPE"]`` both reach a
    ``"Content-Type"`` entry of the wrapped mapping. The wrapped mapping is mutated in
    place and never copied; iterating yields its stored spellings unchanged.

    All mutation has to go through this view, a key added to the wrapped mapping
    directly is not known to the name registry.
    """

    def __init__(self, target: Optional[MutableMapping] = None):
        if target is None:
            target = {}
        self._target = target
        self._names = NameRegistry(target.keys())

    @property
    def target(self) -> MutableMapping:
        return self._target

    def __getitem__(self, key):
        return self._target[self._names.resolve(key)]

    def __setitem__(self, key, value):
        actual_key = self._names.resolve(key)
        self._target[actual_key] = value
        self._names.track(key)

    def __delitem__(self, key):
        actual_key = self._names.resolve(key)
        del self._target[actual_key]
        self._names.untrack(key)

    def __contains__(self, key):
        return self._names.resolve(key) in self._target

    def __iter__(self):
        return iter(self._target)

    def __len__(self):
        return len(self._target)

    def __repr__(self):
        return f"{self.__class__.__name__}({self._target!r})"

    def get_field_descriptor(self, key) -> Optional[FieldDescriptor]:
        """Returns the stored spelling and value of ``key``, None if it is absent."""
        actual_key = self._names.resolve(key)
        if actual_key not in self._target:
            return None
        return FieldDescriptor(actual_key, self._target[actual_key])

    def define_field(self, key, value) -> FieldDescriptor:
        actual_key = self._names.resolve(key)
        self._target[actual_key] = value
        self._names.track(key)
        return FieldDescriptor(actual_key, value)

    def copy(self):
        return self.__class__(dict(self._target))


def wrap(initial: Optional[MutableMapping] = None) -> CaselessDict:
    """Wraps ``initial`` (or a new empty dict) into a case-insensitive view.

    Args:
        initial (MutableMapping): mapping to wrap, its existing keys become the established
            spellings in iteration order

    Raises:
        UnsupportedKeyKind: if ``initial`` holds a key which is neither a string nor a number

    """
    return CaselessDict(initial)
