"""
Cycle-safe structural representation of arbitrary nested values.

`represent()` renders primitives, strings, classes and composite values (mappings,
sets, non-text sequences and plain objects) into a configurable display string.
Composites are walked depth-first; a value met again on its own recursion path is
replaced by a substitution token instead of being expanded, so self-referential
structures always render in finite time.

The output is meant for humans. It is not stable across versions of the defaults
and is not meant to be parsed back. Strings are interpolated raw, without escaping.
"""

# TODO Escape sequences in rendered strings (quotes, control characters)

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
from enum import Enum, StrEnum, unique
from typing import Any, Callable

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from .config import effective_config
from .formatters import format_items
from .functional import bind_trailing
from .pack import Pack
from .sequences import Sequence, iterate, map, take
from .utils import class_name, raw_address

_TEXT_TYPES = (str, bytes, bytearray, memoryview)


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class Kind(StrEnum):
    """Value kinds with a dedicated renderer; the value doubles as the config group name."""
    PRIMITIVE = "primitive"
    STRING = "string"
    TYPE = "type"
    COMPOSITE = "composite"


# Renderer signature: (value, group config, representer, visited set, depth) -> str
Renderer = Callable[[Any, Any, "Representer", dict[int, bool], int], str]


class Representer:
    """
    Configured representation function.

    The effective configuration and the kind-to-renderer registry are resolved once,
    at construction; calling the instance renders a value.

    Args:
        config: None, a partial configuration tree or a preset name, see `seqrepr.config`.
        renderers: Optional overrides of the default renderer per Kind.

    Examples:
        >>> r = Representer("compact")
        >>> r({"a": [1, 2]})
        '{["a"] = {[0] = 1, [1] = 2}}'
    """

    def __init__(self, config: abc.Mapping | str | None = None,
                 renderers: abc.Mapping[Kind, Renderer] | None = None) -> None:
        self.config = effective_config(config)
        self.renderers = frozendict({**RENDERERS, **(renderers or {})})

    def __call__(self, obj: Any, on_path: dict[int, bool] | None = None, depth: int = 0) -> str:
        """
        Render obj.

        Args:
            obj: Any value.
            on_path: Visited set of composite ids on the current recursion path.
                A fresh one is allocated when None.
            depth: Nesting depth of obj, drives indentation.
        """
        if on_path is None:
            on_path = {}
        kind = kind_of(obj)
        return self.renderers[kind](obj, self.config.get(kind.value), self, on_path, depth)


# Methods --------------------------------------------------------------------------------------------------------------

def represent(obj: Any, config: abc.Mapping | str | None = None, *, on_path: dict[int, bool] | None = None) -> str:
    """Render any value into a human-readable structural representation.

    Args:
        obj: Value to render.
        config: None for defaults, a partial configuration tree, or a preset name
            ("compact", "neat", "verbose"). Missing options fall back to defaults,
            unknown keys are ignored.
        on_path: Visited set to share with an enclosing traversal. Leave None for
            a standalone call.

    Returns:
        Display string.

    Notes:
        - Cycles are detected by object identity, not equality
        - Entries of unordered collections appear in their iteration order
        - Recursion depth equals the structural nesting depth of obj, so
          structures nested deeper than the interpreter recursion limit raise
          RecursionError

    Examples:
        >>> represent(42)
        '42'
        >>> represent("hi")
        '"hi"'
        >>> a = {}
        >>> a["self"] = a
        >>> represent(a)
        '{["self"] = {...}}'
        >>> represent({"a": 1, "b": [True]}, "neat")
        '{\\n\\t["a"] = 1,\\n\\t["b"] = {\\n\\t\\t[0] = True\\n\\t}\\n}'
    """
    return Representer(config)(obj, on_path)


def kind_of(obj: Any) -> Kind:
    """Classify a value into the Kind that selects its renderer."""
    if isinstance(obj, str):
        return Kind.STRING
    if isinstance(obj, type):
        return Kind.TYPE
    if is_composite(obj):
        return Kind.COMPOSITE
    return Kind.PRIMITIVE


def is_composite(obj: Any) -> bool:
    """True for values with enumerable key/value entries."""
    if isinstance(obj, _TEXT_TYPES):
        return False
    if isinstance(obj, (abc.Mapping, abc.Set, abc.Sequence)):
        return True
    return _is_plain_object(obj)


def entries(obj: Any) -> Sequence:
    """
    Lazy sequence of (key, value) entries of a composite value.

    - Mapping: its items
    - Set: (element, True), the membership view
    - Sequence: (index, element)
    - Plain object: its instance attributes

    Raises:
        TypeError: If obj is not composite.
    """
    if not is_composite(obj):
        raise TypeError(f"composite value required, got {class_name(obj)}")
    if isinstance(obj, abc.Mapping):
        return iterate(obj.items())
    if isinstance(obj, abc.Set):
        return iterate((element, True) for element in obj)
    if isinstance(obj, abc.Sequence):
        return iterate(enumerate(obj))
    return iterate(vars(obj).items())


# Renderers ------------------------------------------------------------------------------------------------------------

def render_primitive(obj: Any, config: Any, representer: Representer, on_path: dict[int, bool], depth: int) -> str:
    return str(obj)


def render_string(obj: str, config: abc.Mapping, representer: Representer, on_path: dict[int, bool],
                  depth: int) -> str:
    return config["style"] % obj


def render_type(obj: type, config: abc.Mapping, representer: Representer, on_path: dict[int, bool],
                depth: int) -> str:
    return config["style"] % class_name(obj, fully_qualified=config["fully_qualified"])


def render_composite(obj: Any, config: abc.Mapping, representer: Representer, on_path: dict[int, bool],
                     depth: int) -> str:
    """
    Depth-first rendering of a composite with cycle detection.

    A value already on the recursion path renders as the substitution token. The
    visited mark is removed on exit only by the frame that placed it.
    """
    obj_id = id(obj)
    was_visited = obj_id in on_path
    on_path[obj_id] = True
    try:
        render = bind_trailing(representer, on_path, depth + 1)

        meta = Pack()
        if config["show_address"]:
            meta.push(raw_address(obj))
        if config["show_metatable"] and not was_visited:
            meta.push(representer(type(obj), on_path, depth + 2))

        meta_info = Pack()
        if meta:
            meta_info.push(format_items(meta, config["meta_info"], depth + 2))

        if was_visited:
            group = config["circular_reference"]
            body = Pack(group["substitution"])
        else:
            def format_pair(pair: tuple, state: Any, target: Any) -> str:
                key, value = pair
                return config["pair"]["style"] % (render(key), render(value))

            group = config["content"]
            body = take(map(format_pair, entries(obj)))

        return format_items(meta_info + body, group, depth + 1)
    finally:
        if not was_visited:
            del on_path[obj_id]


RENDERERS: frozendict = frozendict({
    Kind.PRIMITIVE: render_primitive,
    Kind.STRING: render_string,
    Kind.TYPE: render_type,
    Kind.COMPOSITE: render_composite,
})


# Private Methods ------------------------------------------------------------------------------------------------------

def _is_plain_object(obj: Any) -> bool:
    """Instances of non-builtin classes with instance attributes, excluding enums and exceptions."""
    return (
        type(obj).__module__ != "builtins"
        and hasattr(obj, "__dict__")
        and not isinstance(obj, (Enum, BaseException))
    )
