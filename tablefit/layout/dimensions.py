"""Widths and heights of tables.

Widths are given per column key, heights per row, header rows first, then
body rows, then footer rows. All dimensions are in inches.

"""

import math
from numbers import Real

from ..units import to_inches
from ..utils import (
    InvalidArgument, get_columns_id, get_part_names, get_rows_id)
from .cells import optimal_sizes
from .context import LayoutContext
from .matrix import max_present


def part_dimensions(context, table, name):
    """Return the content-driven widths and heights of a part.

    Empty parts have a width of 0 for each column and no heights.

    """
    part = table[name]
    if not part.rows:
        return [0.0] * len(table.col_keys), []
    return optimal_sizes(context, table, part)


def combine_dimensions(dimensions):
    """Combine a list of ``(widths, heights)`` of parts, in layout order.

    The width of a column is its maximum width among parts, rows of parts
    are concatenated. Missing values are replaced by 0.

    """
    widths = [
        max_present(column_widths)
        for column_widths in zip(*(widths for widths, _ in dimensions))]
    heights = [height for _, heights in dimensions for height in heights]
    return (
        [0.0 if width is None else width for width in widths],
        [0.0 if height is None else height for height in heights])


def pretty_dimensions(table, part='all', context=None):
    """Return the minimum widths and heights needed by the table content.

    The table is not modified.

    :param part: ``'all'``, ``'header'``, ``'body'`` or ``'footer'``.
    :returns: a ``{'widths': widths, 'heights': heights}`` dict.

    """
    names = get_part_names(part)
    if context is None:
        context = LayoutContext()
    widths, heights = combine_dimensions([
        part_dimensions(context, table, name) for name in names])
    return {'widths': widths, 'heights': heights}


def current_dimensions(table):
    """Return the widths and heights currently stored in the table.

    The width of a column is its maximum stored width among parts having
    rows.

    :returns: a ``{'widths': widths, 'heights': heights}`` dict.

    """
    parts = [part for part in table.parts() if part.rows]
    widths = [max(widths) for widths in zip(
        *(part.column_widths for part in parts))]
    heights = [height for part in parts for height in part.row_heights]
    return {'widths': widths, 'heights': heights}


def total_dimensions(table):
    """Return the stored width, height and aspect ratio of the table.

    The aspect ratio is ``height / width``, ``nan`` when width is 0.

    :returns: a ``{'width': width, 'height': height, 'aspect_ratio':
        aspect_ratio}`` dict.

    """
    dimensions = current_dimensions(table)
    width = sum(dimensions['widths'])
    height = sum(dimensions['heights'])
    aspect_ratio = height / width if width else math.nan
    return {'width': width, 'height': height, 'aspect_ratio': aspect_ratio}


def _lengths(value, length, name):
    """Return a list of ``length`` lengths in inches for ``value``."""
    if isinstance(value, (str, Real)):
        values = [value]
    else:
        values = list(value)
    if len(values) not in (1, length):
        raise InvalidArgument(f'{name} should be of length 1 or {length}')
    values = [to_inches(value) for value in values]
    if any(not value >= 0 for value in values):
        raise InvalidArgument(f'{name} should not be negative')
    return values * length if len(values) == 1 else values


def set_width(table, width, columns=None):
    """Set the width of columns in all parts.

    :param width:
        A length, or a list of lengths with one value per selected column.
        Lengths are numbers of inches or CSS length strings.
    :param columns:
        Column keys or indexes, ``None`` for all columns.

    """
    indexes = get_columns_id(table.col_keys, columns)
    widths = _lengths(width, len(indexes), 'width')
    for part in table.parts():
        for index, column_width in zip(indexes, widths):
            part.column_widths[index] = column_width
    return table


def set_height(table, height, rows=None, part='body'):
    """Set the height of rows of a part.

    :param height:
        A length, or a list of lengths with one value per selected row.
    :param rows:
        Row indexes, booleans, or a predicate called with row records.
        Predicates can only select body rows. ``None`` for all rows.
    :param part: ``'header'``, ``'body'`` or ``'footer'``.

    """
    name, = get_part_names(part, allow_all=False)
    if callable(rows) and name != 'body':
        raise InvalidArgument(
            f'a predicate cannot select rows of part {name!r}')
    part = table[name]
    if not part.rows:
        return table
    indexes = get_rows_id(part, rows)
    heights = _lengths(height, len(indexes), 'height')
    for index, row_height in zip(indexes, heights):
        part.row_heights[index] = row_height
    return table


def set_height_all(table, height, part='all'):
    """Set the same height to all the rows of selected parts."""
    names = get_part_names(part)
    if isinstance(height, bool) or not isinstance(height, (str, Real)):
        raise InvalidArgument('height should be a single non-negative number')
    height = to_inches(height)
    if not height >= 0:
        raise InvalidArgument('height should be a single non-negative number')
    for name in names:
        table[name].row_heights = [height] * len(table[name].rows)
    return table
