import math
import re

# Leading numeric prefix, ASCII digits only; anything after it is ignored
_NUMERIC_PREFIX = re.compile(r'[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)')


def parse_amount(text: str | None) -> float:
    """Parse the longest leading numeric prefix of ``text``.

    Leading whitespace is skipped and trailing garbage is ignored, so ``'12abc'``
    gives ``12.0``. Text with no numeric prefix gives ``nan``.
    """
    if text is None:
        return math.nan
    match = _NUMERIC_PREFIX.match(str(text).lstrip())
    if not match:
        return math.nan
    return float(match.group(0).replace('Infinity', 'inf'))
