"""Classes for the structure of tables.

A :class:`Table` has three parts, header, body and footer, laid out in this
order. The parts share the same ordered column keys, and each of their rows
has one :class:`Cell` per column key.

Cells hold:

* text runs, laid out on a single line;
* paragraph paddings and cell margins, in style units;
* row and column spans.

The spans of a merged region are stored on its top-left cell, the
*anchor*. The other cells of the region are covered by the anchor and have
spans lower than 1.

Text formatting is resolved through an explicit chain: run, cell, part and
table styles, the first defined value winning. Table styles are completed
with the defaults of :data:`DEFAULT_OPTIONS`.

"""

import math
from collections import namedtuple
from collections.abc import Iterable
from numbers import Real

from .. import DEFAULT_OPTIONS
from ..utils import PARTS, InvalidArgument, get_part_names

VERTICAL_ALIGNS = ('baseline', 'superscript', 'subscript')

Sides = namedtuple(
    'Sides', ('top', 'right', 'bottom', 'left'), defaults=(0, 0, 0, 0))

TextStyle = namedtuple(
    'TextStyle',
    ('font_family', 'font_size', 'bold', 'italic', 'vertical_align'),
    defaults=(None,) * 5)


def resolve_style(*styles):
    """Return the effective style of a chain of styles.

    Styles are given from the most specific to the most generic, usually
    ``run_style, cell_style, part_style, table_style``. Each attribute is
    taken from the first style where it's not ``None``. ``None`` styles are
    ignored.

    """
    values = {}
    for name in TextStyle._fields:
        for style in styles:
            if style is not None and getattr(style, name) is not None:
                values[name] = getattr(style, name)
                break
    return TextStyle(**values)


def default_style(options=None):
    """Return the complete text style given by default options."""
    options = DEFAULT_OPTIONS if options is None else options
    return TextStyle(
        font_family=options['font_family'], font_size=options['font_size'],
        bold=False, italic=False, vertical_align='baseline')


def check_style(style):
    """Return ``style``, raise :class:`InvalidArgument` for invalid values."""
    if style is None:
        return TextStyle()
    elif not isinstance(style, TextStyle):
        raise InvalidArgument(f'invalid text style: {style!r}')
    if style.font_family is not None and not isinstance(
            style.font_family, str):
        raise InvalidArgument(f'invalid font family: {style.font_family!r}')
    if style.font_size is not None and not (
            is_number(style.font_size) and style.font_size > 0):
        raise InvalidArgument(f'invalid font size: {style.font_size!r}')
    for name in ('bold', 'italic'):
        value = getattr(style, name)
        if value is not None and not isinstance(value, bool):
            raise InvalidArgument(f'invalid {name} flag: {value!r}')
    if style.vertical_align not in (None, *VERTICAL_ALIGNS):
        raise InvalidArgument(
            f'invalid vertical alignment: {style.vertical_align!r}')
    return style


def is_number(value):
    """Whether ``value`` is a finite number, booleans excluded."""
    return (
        isinstance(value, Real) and not isinstance(value, bool) and
        math.isfinite(value))


class TextRun:
    """Run of text sharing one set of formatting attributes.

    ``width`` and ``height``, in inches, are used when the text can't be
    measured.

    """
    def __init__(self, text, style=None, width=None, height=None):
        for name, value in (('width', width), ('height', height)):
            if value is not None and not (is_number(value) and value >= 0):
                raise InvalidArgument(f'invalid fallback {name}: {value!r}')
        if not isinstance(text, str):
            raise InvalidArgument(f'invalid run text: {text!r}')
        self.text = text
        self.style = check_style(style)
        self.width = width
        self.height = height

    def __repr__(self):
        return f'<TextRun {self.text!r}>'


class Cell:
    """Table cell."""
    def __init__(self, runs=(), style=None, padding=None, margin=None,
                 rowspan=1, colspan=1):
        self.runs = list(runs)
        self.style = check_style(style)
        self.padding = Sides() if padding is None else padding
        self.margin = Sides() if margin is None else margin
        self.rowspan = rowspan
        self.colspan = colspan

    def __repr__(self):
        text = ''.join(run.text for run in self.runs)
        return f'<Cell {text!r}>'

    @property
    def is_covered(self):
        """Whether the cell is covered by a merged region anchored elsewhere."""
        return self.rowspan < 1 or self.colspan < 1


class Row:
    """Table row, tagged with the name of the part that owns it.

    ``data`` is the source record of the row, given to row predicates.

    """
    def __init__(self, part, cells, data=None):
        self.part = part
        self.cells = list(cells)
        self.data = {} if data is None else data

    def __repr__(self):
        return f'<Row {self.part} {len(self.cells)} cells>'


class TablePart:
    """Header, body or footer of a table.

    ``column_widths`` has one width per column key and ``row_heights`` one
    height per row, both in inches.

    """
    def __init__(self, name, col_keys, style=None):
        self.name = name
        self.col_keys = col_keys
        self.style = check_style(style)
        self.rows = []
        self.column_widths = [0.0] * len(col_keys)
        self.row_heights = []

    def __repr__(self):
        return f'<TablePart {self.name} {len(self.rows)} rows>'

    def __len__(self):
        return len(self.rows)

    def append_row(self, cells, data=None, height=0.0):
        """Add a row at the end of the part, return it."""
        cells = list(cells)
        if len(cells) != len(self.col_keys):
            raise InvalidArgument(
                f'rows of {self.name} should have {len(self.col_keys)} '
                f'cells, not {len(cells)}')
        row = Row(self.name, cells, data)
        self.rows.append(row)
        self.row_heights.append(height)
        return row

    def cell(self, row, column):
        """Return the cell at ``row`` index and ``column`` key or index."""
        if isinstance(column, str):
            column = self.col_keys.index(column)
        return self.rows[row].cells[column]

    def iter_cells(self):
        """Yield ``(row_index, column_index, cell)`` for all the cells."""
        for row_index, row in enumerate(self.rows):
            for column_index, cell in enumerate(row.cells):
                yield row_index, column_index, cell


class Table:
    """Table made of a header, a body and a footer.

    Column keys are strings. Values missing in ``style`` are taken from
    :data:`DEFAULT_OPTIONS`.

    """
    def __init__(self, col_keys, style=None):
        if not isinstance(col_keys, Iterable):
            raise InvalidArgument(f'invalid column keys: {col_keys!r}')
        col_keys = tuple(col_keys)
        if not all(isinstance(key, str) for key in col_keys):
            raise InvalidArgument('column keys should be strings')
        if len(set(col_keys)) != len(col_keys):
            raise InvalidArgument('column keys should be unique')
        self.col_keys = col_keys
        self.style = resolve_style(check_style(style), default_style())
        self.header = TablePart('header', col_keys)
        self.body = TablePart('body', col_keys)
        self.footer = TablePart('footer', col_keys)

    def __repr__(self):
        sizes = ', '.join(f'{name} {len(self[name])}' for name in PARTS)
        return f'<Table {len(self.col_keys)} columns, {sizes}>'

    def __getitem__(self, name):
        return getattr(self, get_part_names(name, allow_all=False)[0])

    def parts(self, part='all'):
        """Return the list of parts selected by ``part``."""
        return [self[name] for name in get_part_names(part)]

    def text_style(self, part, cell, run):
        """Return the effective style of ``run``."""
        return resolve_style(run.style, cell.style, part.style, self.style)

    def iter_runs(self, part='all'):
        """Yield ``(part, cell, run)`` for all the runs of selected parts."""
        for table_part in self.parts(part):
            for _, _, cell in table_part.iter_cells():
                for run in cell.runs:
                    yield table_part, cell, run
