"""
Sentinel objects for generator states and configuration lookups.

All sentinels are singletons compared by identity ('is'), never by equality.

Sentinels:
    STOP: Returned by a sequence generator as its new state to signal exhaustion
    MISSING: Marks a key absent from a partial configuration mapping

Example:
    >>> def gen(target, state):
    ...     if state >= len(target):
    ...         return STOP, None
    ...     return state + 1, target[state]
"""

from typing import Any

__all__ = [
    'STOP',
    'MISSING',
    'StopType',
    'MissingType',
]


# Base Sentinel --------------------------------------------------------------------------------------------------------

class _SentinelBase:
    """
    Base class for singleton sentinels.

    A subclass names its sentinel with a class keyword, `class StopType(_SentinelBase, name="STOP")`,
    and every call of the subclass returns its single instance.
    """
    __slots__ = ()

    _name: str = "SENTINEL"
    _instance: '_SentinelBase | None' = None

    def __init_subclass__(cls, name: str, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._name = name
        cls._instance = None

    def __new__(cls) -> '_SentinelBase':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        """Sentinel name in angle brackets."""
        return f'<{self._name}>'

    def __eq__(self, other: Any) -> bool:
        """Equal only to itself."""
        return self is other

    def __hash__(self) -> int:
        """Hash of the singleton identity."""
        return id(self)

    def __bool__(self) -> bool:
        """Sentinels are falsy."""
        return False

    def __reduce__(self) -> tuple:
        """Unpickle to the existing singleton."""
        return (self.__class__, ())


# Sentinel Types -------------------------------------------------------------------------------------------------------

class StopType(_SentinelBase, name="STOP"):
    """
    Sentinel type for STOP.

    A generator returns STOP in place of its new state once it has no more values.
    """
    __slots__ = ()


class MissingType(_SentinelBase, name="MISSING"):
    """
    Sentinel type for MISSING.

    Distinguishes a key absent from a mapping from a key explicitly mapped to None.
    """
    __slots__ = ()


# Singletons -----------------------------------------------------------------------------------------------------------

STOP: StopType = StopType()
MISSING: MissingType = MissingType()
