"""Transform attribute parser — text → list of Transform primitives.

"translate(10,50) scale(2) rotate(-45)" is split into
['', 'translate', '10,50', '', 'scale', '2', '', 'rotate', '-45', ''];
each name opens a new primitive and each argument chunk is scanned for
numbers that extend the most recently opened one.
"""

from __future__ import annotations

import logging
import re
from functools import reduce

from svgtransform.primitives import Transform

logger = logging.getLogger(__name__)

_TRANSFORM_TYPES_RE = re.compile(r"matrix|translate|scale|rotate|skewX|skewY")
_TRANSFORM_SPLIT_RE = re.compile(
    r"\s*(matrix|translate|scale|rotate|skewX|skewY)\s*\(\s*(.+?)\s*\)[\s,]*"
)
_NUMERIC_VALUES_RE = re.compile(r"[-+]?(?:\d*\.\d+|\d+\.?)(?:[eE][-+]?\d+)?")


def parse_transform_list(text: str) -> list[Transform]:
    """Parse a transform attribute value.

    Returns an empty list when the text is broken badly enough that some
    primitive ends up with no numbers. An empty result means "nothing to
    apply", not an error.
    """
    tokens = [token for token in _TRANSFORM_SPLIT_RE.split(text) if token]
    transforms = reduce(_consume, tokens, [])

    if not transforms or any(not t.data for t in transforms):
        logger.debug("Malformed transform list: %r", text)
        return []
    return transforms


def _consume(transforms: list[Transform], token: str) -> list[Transform]:
    """Fold step: a name opens a primitive, anything else feeds the last one."""
    if _TRANSFORM_TYPES_RE.fullmatch(token):
        return [*transforms, Transform(name=token)]

    values = [float(v) for v in _NUMERIC_VALUES_RE.findall(token)]
    if not transforms or not values:
        return transforms

    *closed, current = transforms
    return [*closed, Transform(current.name, [*current.data, *values])]
