"""
Bracketed list formatting for representations.

Joins already-rendered item strings into a single string, either on one line
or as an indented multi-line block.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
from typing import Iterable

# Local ----------------------------------------------------------------------------------------------------------------
from .config import FORMAT_DEFAULTS, merge


# Methods --------------------------------------------------------------------------------------------------------------

def format_items(items: Iterable[str], config: abc.Mapping | None = None, depth: int = 0) -> str:
    """Join rendered items with a separator and wrap them into a bracketing style.

    The output is multi-line when the separator ends with a newline. Each item
    then starts on its own line
    indented `depth` times, and the closing bracket is indented `depth - 1` times.

    Args:
        items: Rendered item strings, in display order.
        config: Partial formatting group with keys:
            - style: Template with a single `%s` insertion point. Default "[%s]".
            - sep: Item separator. Default ", ".
            - indentation: Indentation unit for multi-line output. Default "\\t".
        depth: Indentation depth of the items.

    Returns:
        The formatted string.

    Raises:
        ValueError: If multi-line output is requested with depth < 1.

    Examples:
        >>> format_items(["a", "b", "c"], {"sep": ", ", "style": "[%s]"})
        '[a, b, c]'
        >>> format_items(["a", "b"], {"sep": ",\\n", "indentation": "  "}, depth=1)
        '[\\n  a,\\n  b\\n]'
    """
    config = merge(config, FORMAT_DEFAULTS)
    sep = config["sep"]
    indentation = config["indentation"]
    style = config["style"]
    items = [str(item) for item in items]

    if not sep.endswith("\n"):
        return style % sep.join(items)

    if depth < 1:
        raise ValueError(f"multi-line format requires depth >= 1, got depth={depth}")

    left_indent = "\n" + indentation * depth
    right_indent = "\n" + indentation * (depth - 1)
    item_indent = sep + indentation * depth
    return style % (left_indent + item_indent.join(items) + right_indent)
