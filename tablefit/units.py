"""Constants and helpers for units."""

from numbers import Real

import tinycss2

from .utils import InvalidArgument

POINTS_PER_INCH = 72

# One padding or margin unit of the style model is 4/3 of a point.
INSET_UNIT_TO_POINTS = 4 / 3

# How many inches is one <unit>?
# https://www.w3.org/TR/CSS21/syndata.html#length-units
LENGTHS_TO_INCHES = {
    'in': 1,
    'px': 1 / 96,
    'pt': 1 / POINTS_PER_INCH,
    'pc': 1 / 6,
    'cm': 1 / 2.54,
    'mm': 1 / 25.4,
    'q': 1 / 25.4 / 4,
}


def to_inches(value):
    """Get number of inches corresponding to a length.

    ``value`` is a number of inches, or a string with a CSS length such as
    ``'2cm'`` or ``'10pt'``. Unitless strings are inches.

    """
    if isinstance(value, Real) and not isinstance(value, bool):
        return float(value)
    elif isinstance(value, str):
        token = tinycss2.parse_one_component_value(value, skip_comments=True)
        if token.type == 'number':
            return float(token.value)
        elif token.type == 'dimension' and token.lower_unit in LENGTHS_TO_INCHES:
            return token.value * LENGTHS_TO_INCHES[token.lower_unit]
    raise InvalidArgument(f'invalid length: {value!r}')


def points_to_inches(points):
    """Get number of inches corresponding to a number of points."""
    return points / POINTS_PER_INCH


def insets_to_inches(first, second):
    """Get number of inches taken by two paddings or margins."""
    return (first + second) * INSET_UNIT_TO_POINTS / POINTS_PER_INCH
