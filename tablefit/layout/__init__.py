"""Compute and apply table dimensions.

:func:`autofit` measures the content of the table cells and stores the
widths and heights it needs in the table parts. :func:`fit_to_width`
shrinks text until the table isn't wider than a given width.

"""

from ..logger import LOGGER, PROGRESS_LOGGER
from ..units import to_inches
from ..utils import InvalidArgument
from .context import LayoutContext
from .dimensions import (
    combine_dimensions, current_dimensions, part_dimensions,
    pretty_dimensions, set_height, set_height_all, set_width,
    total_dimensions)

__all__ = [
    'LayoutContext', 'autofit', 'current_dimensions', 'fit_to_width',
    'pretty_dimensions', 'set_height', 'set_height_all', 'set_width',
    'shrink_font_sizes', 'total_dimensions']


def autofit(table, add_w=None, add_h=None, context=None):
    """Set widths and heights of the table to fit its content.

    Previously set widths and heights are overwritten.

    :param add_w: Extra width added to each column.
    :param add_h: Extra height added to each row.
    :type context: :class:`LayoutContext`
    :param context: Layout context, with the text measurer.

    """
    if context is None:
        context = LayoutContext()
    add_w = to_inches(context.options['add_w'] if add_w is None else add_w)
    add_h = to_inches(context.options['add_h'] if add_h is None else add_h)

    PROGRESS_LOGGER.info('Measuring cells of %r', table)
    dimensions = {
        part.name: part_dimensions(context, table, part.name)
        for part in table.parts()}
    widths, _ = combine_dimensions(list(dimensions.values()))
    for part in table.parts():
        _, heights = combine_dimensions([dimensions[part.name]])
        part.column_widths = [width + add_w for width in widths]
        part.row_heights = [height + add_h for height in heights]
    return table


def shrink_font_sizes(table, inc, min_font_size):
    """Decrease the font size of all runs by ``inc``.

    Font sizes don't go below ``min_font_size``. Return whether at least
    one font size has been changed.

    """
    changed = False
    for part, cell, run in table.iter_runs():
        font_size = table.text_style(part, cell, run).font_size
        new_font_size = max(font_size - inc, min_font_size)
        if new_font_size < font_size:
            run.style = run.style._replace(font_size=new_font_size)
            changed = True
    return changed


def fit_to_width(table, max_width, inc=None, max_iter=None, context=None):
    """Decrease font sizes until the table fits in ``max_width``.

    The table stored width is checked; while it's larger than
    ``max_width``, font sizes are decreased by ``inc`` points and the table
    is fitted to its content with :func:`autofit`, without extra widths and
    heights.

    The loop stops after ``max_iter`` steps, or when font sizes reach the
    ``min_font_size`` option. The table is then returned even if it's still
    too wide.

    """
    if context is None:
        context = LayoutContext()
    max_width = to_inches(max_width)
    inc = context.options['inc'] if inc is None else inc
    max_iter = context.options['max_iter'] if max_iter is None else max_iter
    if not inc > 0:
        raise InvalidArgument('inc should be a positive number')
    if max_iter < 0:
        raise InvalidArgument('max_iter should not be negative')

    iterations = 0
    while (width := total_dimensions(table)['width']) > max_width:
        if iterations >= max_iter:
            LOGGER.warning(
                'Table width %.4gin is larger than %.4gin after %d '
                'iterations', width, max_width, iterations)
            break
        if not shrink_font_sizes(table, inc, context.options['min_font_size']):
            LOGGER.warning(
                'Table width %.4gin is larger than %.4gin with minimal '
                'font sizes', width, max_width)
            break
        iterations += 1
        PROGRESS_LOGGER.info(
            'Fitting to width, step %d: %.4gin is larger than %.4gin',
            iterations, width, max_width)
        autofit(table, add_w=0, add_h=0, context=context)
    return table
