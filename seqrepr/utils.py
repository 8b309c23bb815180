"""
seqrepr utilities shared across the package.

Debug helpers that describe an object by its class and identity only, never
calling the object's own __repr__ or __str__.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------


def class_name(obj: Any, fully_qualified: bool = False) -> str:
    """
    Get the class name of an object or a class.

    Returns class name whether given an instance or the class itself.
    For example, both `class_name(10)` and `class_name(int)` return 'int'.

    Parameters:
        obj (Any): An object or a class.
        fully_qualified (bool): If true, returns 'module.Name' for non-builtin classes.

    Returns:
        str: The class name.

    Examples:
        >>> class_name(10)
        'int'
        >>> class C: ...
        >>> class_name(C(), fully_qualified=True)
        '__main__.C'
    """
    cls = obj if isinstance(obj, type) else type(obj)
    if fully_qualified and cls.__module__ != "builtins":
        return f"{cls.__module__}.{cls.__name__}"
    return cls.__name__


def raw_address(obj: Any) -> str:
    """
    Identity string of an object, in the format of the default object repr.

    Custom __repr__ and __str__ of the object are bypassed.

    Examples:
        >>> raw_address([])  # doctest: +ELLIPSIS
        '<list object at 0x...>'
    """
    return f"<{class_name(obj, fully_qualified=True)} object at {id(obj):#x}>"
