"""
argline utilities (internal helpers, carefully exposed)

Overview
- UnsetType / Unset
  • Singleton sentinel to represent “value not provided” without conflating with None.
  • Falsey (bool(Unset) is False), printable as "Unset", and non-subclassable.

- mirror("attr")
  • Read-only property factory exposing a private backing field (self._attr) with fresh
    copies for containers so public API state cannot be mutated by callers.

- verify(name)
  • The shared naming rule for argument names and option names (after their dashes).

Usage guidance
- Prefer Unset for API defaults when None or "" is a meaningful user value.
- Use mirror() to expose internal state safely as read-only properties.
"""
import functools
import re
from collections.abc import Sequence, Mapping, Set
from typing import final


@final
class UnsetType:
    """
    Internal sentinel type representing a value that was not provided.

    Characteristics
    - Boolean-false: bool(Unset) is False, but it is distinct from None and "".
    - Printable: repr(Unset) -> "Unset" for friendly diagnostics.
    - Non-subclassable: this type is sealed; do not subclass.
    - Singleton per process: UnsetType() always yields the same instance.
    """

    def __or__(self, other, /):
        """
        Support PEP 604 unions in annotations (e.g., str | UnsetType).
        """
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        """
        Support reversed PEP 604 unions when UnsetType appears on the right.
        """
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    @functools.cache
    def __new__(cls):
        """
        Ensure a single instance for this sentinel type.
        """
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        """
        Disallow subclassing to preserve sentinel semantics.
        """
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def _immortalize(object):
    """
    Recursively copy container values.

    - Sequence (non-string): a new tuple with each element processed.
    - Mapping: a new dict with the same keys and processed values.
    - Set: a new frozenset.
    - Anything else: returned as-is.
    """
    if isinstance(object, Sequence) and not isinstance(object, str):
        return tuple(map(_immortalize, object))
    elif isinstance(object, Mapping):
        return dict(zip(object.keys(), map(_immortalize, object.values())))
    elif isinstance(object, Set):
        return frozenset(map(_immortalize, object))
    return object


def mirror(name, /):
    """
    Define a read-only property that mirrors a private backing attribute "_{name}".

    Containers are handed out as fresh copies (see _immortalize), so the
    caller can never mutate the instance through the public accessor.
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    def getter(self):
        return _immortalize(getattr(self, "_" + name))

    getter.__name__ = getter.__qualname__ = name
    return property(getter)


_NAME = re.compile(r"[A-Za-z][A-Za-z0-9_]*")


def verify(name, /, limit=32):
    """
    Check the naming rule shared by arguments and (undashed) options.

    A valid name is non-empty, at most `limit` characters long, starts with an
    ASCII letter and contains only ASCII letters, digits and underscores.
    """
    if not isinstance(name, str):
        return False
    return 0 < len(name) <= limit and _NAME.fullmatch(name) is not None


Unset = UnsetType()
"""
Internal sentinel for “not provided”.

Notes
- Singleton: there is only one Unset instance.
- Distinct from None: equality and identity checks must not treat it as None.
"""


__all__ = (
    # Functions
    "mirror",
    "verify",

    # Types
    "UnsetType",

    # Constants
    "Unset",
)
