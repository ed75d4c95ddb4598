"""Content-driven sizes of the cells of a table part.

The size of a cell is the sum of three contributions, each stored in a
:class:`CellMatrix` aligned with the rows and column keys of the part:

- the measured text of its runs;
- its paragraph paddings;
- its margins.

Cells covered by a merged region don't contribute at all, so that the
space of a merged region is only counted once, on its anchor cell.

"""

from ..text.metrics import measure_runs
from ..units import insets_to_inches
from .matrix import CellMatrix


def text_sizes(context, table, part):
    """Return the width and height matrices of the text of ``part``.

    Runs of a cell are laid out on a single line: their widths are summed,
    the cell height is the height of its highest run. Cells without runs,
    or whose runs can't be measured, are missing.

    """
    records = [
        (row_index, column_index, run, table.text_style(part, cell, run))
        for row_index, column_index, cell in part.iter_cells()
        for run in cell.runs]
    sizes = measure_runs(context, [(run, style) for *_, run, style in records])

    widths = CellMatrix(len(part.rows), len(table.col_keys))
    heights = CellMatrix(len(part.rows), len(table.col_keys))
    for (row_index, column_index, *_), (width, height) in zip(records, sizes):
        widths.add(row_index, column_index, width)
        heights.maximize(row_index, column_index, height)
    return widths, heights


def inset_sizes(table, part, name):
    """Return the width and height matrices of ``name`` cell insets.

    ``name`` is ``'padding'`` or ``'margin'``.

    """
    widths = CellMatrix(len(part.rows), len(table.col_keys))
    heights = CellMatrix(len(part.rows), len(table.col_keys))
    for row_index, column_index, cell in part.iter_cells():
        sides = getattr(cell, name)
        widths[row_index][column_index] = insets_to_inches(
            sides.left, sides.right)
        heights[row_index][column_index] = insets_to_inches(
            sides.top, sides.bottom)
    return widths, heights


def mask_spans(part, *matrices):
    """Set the sizes of cells covered by merged regions to 0."""
    for row_index, column_index, cell in part.iter_cells():
        if cell.is_covered:
            for matrix in matrices:
                matrix[row_index][column_index] = 0


def cell_sizes(context, table, part):
    """Return the width and height matrices of the cells of ``part``."""
    text_widths, text_heights = text_sizes(context, table, part)
    padding_widths, padding_heights = inset_sizes(table, part, 'padding')
    margin_widths, margin_heights = inset_sizes(table, part, 'margin')
    widths = text_widths + padding_widths + margin_widths
    heights = text_heights + padding_heights + margin_heights
    mask_spans(part, widths, heights)
    return widths, heights


def optimal_sizes(context, table, part):
    """Return the minimum column widths and row heights of ``part``.

    Widths are the maxima of the columns, heights the maxima of the rows.
    Values are ``None`` when all the values they're computed from are
    missing.

    """
    widths, heights = cell_sizes(context, table, part)
    return widths.column_maxima(), heights.row_maxima()
