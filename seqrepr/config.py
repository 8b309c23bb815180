"""
Representation configuration: default option tree, presets and default-overlay merging.

Configuration is a tree of immutable mappings. A user passes a partial tree (or a
preset name) and `effective_config()` overlays it onto `DEFAULTS`, so every leaf of
the default tree always has a value. There is no module-level mutable state.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
import warnings
from typing import Any

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from .sentinels import MISSING

# Defaults -------------------------------------------------------------------------------------------------------------

FORMAT_DEFAULTS = frozendict(
    style="[%s]",
    sep=", ",
    indentation="\t",
)

DEFAULTS = frozendict(
    string=frozendict(
        style='"%s"',
    ),
    type=frozendict(
        style="<class '%s'>",
        fully_qualified=False,
    ),
    composite=frozendict(
        show_address=False,
        show_metatable=False,
        content=frozendict(
            style="{%s}",
            sep=", ",
            indentation="\t",
        ),
        pair=frozendict(
            style="[%s] = %s",
        ),
        circular_reference=frozendict(
            style="{%s}",
            substitution="...",
            sep=" ",
            indentation="\t",
        ),
        meta_info=frozendict(
            style="((%s))",
            sep=", ",
            indentation="\t",
        ),
    ),
)

# Presets --------------------------------------------------------------------------------------------------------------

COMPACT = frozendict(
    composite=frozendict(
        content=frozendict(sep=", "),
        circular_reference=frozendict(sep=" "),
    ),
)

NEAT = frozendict(
    composite=frozendict(
        content=frozendict(sep=",\n"),
        circular_reference=frozendict(sep=" "),
    ),
)

VERBOSE = frozendict(
    composite=frozendict(
        show_address=True,
        show_metatable=True,
        content=frozendict(sep=",\n"),
        circular_reference=frozendict(sep="\n"),
        meta_info=frozendict(sep="\n"),
    ),
)

PRESETS = frozendict(
    compact=COMPACT,
    neat=NEAT,
    verbose=VERBOSE,
)

# Accepted spelling -> canonical group name
_GROUP_ALIASES = frozendict(table="composite")

# Style template path -> number of values interpolated into it
_TEMPLATE_ARITY = frozendict({
    ("string", "style"): 1,
    ("type", "style"): 1,
    ("composite", "content", "style"): 1,
    ("composite", "pair", "style"): 2,
    ("composite", "circular_reference", "style"): 1,
    ("composite", "meta_info", "style"): 1,
})


# Methods --------------------------------------------------------------------------------------------------------------

def merge(partial: abc.Mapping | None, defaults: abc.Mapping) -> frozendict:
    """
    Overlay a partial configuration onto a default configuration tree.

    For every key of `defaults`, the value from `partial` is taken when present and
    not None, otherwise the default. When both the default and the chosen value are
    mappings, they are merged recursively. Keys present only in `partial` are ignored:
    the shape of `defaults` is authoritative. Neither input is mutated.

    Args:
        partial: User supplied options, possibly sparse. None is treated as empty.
        defaults: Complete default tree.

    Returns:
        A new frozendict with exactly the keys of `defaults`.

    Notes:
        - A non-mapping `partial`, a leaf given where `defaults` holds a nested group,
          or a leaf of another type than its default falls back to the default and
          emits a UserWarning. Merging never raises.

    Examples:
        >>> merge({"sep": ",\\n"}, {"sep": ", ", "style": "[%s]"})
        frozendict({'sep': ',\\n', 'style': '[%s]'})
        >>> merge({}, FORMAT_DEFAULTS) == FORMAT_DEFAULTS
        True
    """
    if partial is None:
        partial = {}
    elif not isinstance(partial, abc.Mapping):
        warnings.warn(
            f"Configuration must be a mapping, got {type(partial).__name__}; defaults are used",
            UserWarning,
            stacklevel=2,
        )
        partial = {}

    result = {}
    for key, default in defaults.items():
        value = partial.get(key, MISSING)
        if value is MISSING or value is None:
            value = default
        if isinstance(default, abc.Mapping):
            if isinstance(value, abc.Mapping):
                value = merge(value, default)
            else:
                warnings.warn(
                    f"Configuration group '{key}' must be a mapping, got {type(value).__name__}; "
                    f"defaults are used",
                    UserWarning,
                    stacklevel=2,
                )
                value = default
        elif not isinstance(value, type(default)):
            warnings.warn(
                f"Configuration option '{key}' must be {type(default).__name__}, got {type(value).__name__}; "
                f"default {default!r} is used",
                UserWarning,
                stacklevel=2,
            )
            value = default
        result[key] = value
    return frozendict(result)


def effective_config(config: abc.Mapping | str | None = None) -> frozendict:
    """
    Build the complete representation configuration from user input.

    Args:
        config: None for defaults, a partial configuration tree, or a preset
            name from `PRESETS` ("compact", "neat", "verbose"). The group name
            "table" is accepted as a spelling of "composite".

    Returns:
        Complete configuration tree with the shape of `DEFAULTS`.

    Notes:
        - A style template that does not take exactly its number of `%s` values
          (two for `composite.pair.style`, one for other styles) falls back to
          the default and emits a UserWarning.
    """
    if isinstance(config, str):
        preset = PRESETS.get(config.lower())
        if preset is None:
            warnings.warn(
                f"Unknown preset '{config}', expected one of {sorted(PRESETS)}; defaults are used",
                UserWarning,
                stacklevel=2,
            )
        config = preset
    if isinstance(config, abc.Mapping):
        config = _canonical_groups(config)
    return _checked_templates(merge(config, DEFAULTS))


# Private Methods ------------------------------------------------------------------------------------------------------

def _canonical_groups(config: abc.Mapping) -> dict[str, Any]:
    result = dict(config)
    for alias, name in _GROUP_ALIASES.items():
        if alias in result:
            value = result.pop(alias)
            result.setdefault(name, value)
    return result


def _checked_templates(config: frozendict) -> frozendict:
    for path, arity in _TEMPLATE_ARITY.items():
        template = _lookup(config, path)
        if not _accepts(template, arity):
            default = _lookup(DEFAULTS, path)
            warnings.warn(
                f"Style '{'.'.join(path)}' must take {arity} value(s), got {template!r}; "
                f"default {default!r} is used",
                UserWarning,
                stacklevel=3,
            )
            config = _replace(config, path, default)
    return config


def _accepts(template: str, arity: int) -> bool:
    try:
        template % (("",) * arity)
    except (TypeError, ValueError):
        return False
    return True


def _lookup(tree: abc.Mapping, path: tuple) -> Any:
    for key in path:
        tree = tree[key]
    return tree


def _replace(tree: frozendict, path: tuple, value: Any) -> frozendict:
    head, *tail = path
    if tail:
        value = _replace(tree[head], tuple(tail), value)
    return tree.set(head, value)
