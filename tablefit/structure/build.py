"""Turn records and JSON descriptions into tables.

This is a minimal content model: values are turned into text runs with
:func:`str`, without formatting.

"""

from collections.abc import Iterable, Mapping
from numbers import Real

from .. import DEFAULT_OPTIONS
from ..logger import LOGGER
from ..units import to_inches
from ..utils import InvalidArgument, get_columns_id, get_rows_id
from .table import (
    Cell, Sides, Table, TextRun, TextStyle, default_style, is_number,
    resolve_style)

RUN_KEYS = {'text', 'width', 'height', *TextStyle._fields}
CELL_KEYS = {'runs', 'padding', 'margin', *TextStyle._fields}
TABLE_KEYS = {'col_keys', 'header', 'body', 'footer', 'options', 'merges'}
BUILD_OPTIONS = (
    'font_family', 'font_size', 'padding', 'margin', 'column_width',
    'row_height')


def _is_list(value):
    return isinstance(value, Iterable) and not isinstance(
        value, (str, bytes, Mapping))


def expand_sides(value):
    """Return :class:`Sides` for a number or a sequence of 1 to 4 numbers.

    Sequences follow the CSS shorthand order: top, right, bottom, left.

    """
    if isinstance(value, Sides):
        values = list(value)
    elif isinstance(value, Mapping):
        unknown = set(value) - set(Sides._fields)
        if unknown:
            raise InvalidArgument(f'unknown sides: {", ".join(sorted(unknown))}')
        values = list(Sides(**value))
    elif isinstance(value, Real):
        values = [value] * 4
    elif _is_list(value):
        values = list(value)
        if len(values) == 1:
            values *= 4
        elif len(values) == 2:
            values *= 2  # (bottom, left) defaults to (top, right)
        elif len(values) == 3:
            values.append(values[1])  # left defaults to right
        elif len(values) != 4:
            raise InvalidArgument(f'expected 1 to 4 values, got {len(values)}')
    else:
        raise InvalidArgument(f'invalid sides: {value!r}')
    if not all(is_number(side) and side >= 0 for side in values):
        raise InvalidArgument(f'sides should be non-negative numbers: {value!r}')
    return Sides(*values)


def _style(value):
    return TextStyle(**{
        name: value[name] for name in TextStyle._fields if name in value})


def make_run(value):
    """Return a :class:`TextRun` for a string or a mapping."""
    if not isinstance(value, Mapping):
        return TextRun('' if value is None else str(value))
    unknown = set(value) - RUN_KEYS
    if unknown:
        raise InvalidArgument(
            f'unknown run attributes: {", ".join(sorted(unknown))}')
    return TextRun(
        str(value.get('text', '')), _style(value), value.get('width'),
        value.get('height'))


def make_cell(value, padding, margin):
    """Return a :class:`Cell` for a cell value.

    A value is ``None`` for an empty cell, a string or a number for a
    single run, a mapping with a ``text`` key for a single formatted run, a
    list of runs, or a mapping with a ``runs`` key and optional
    ``padding``, ``margin`` and text style attributes.

    """
    style = None
    if isinstance(value, Mapping) and 'text' not in value:
        unknown = set(value) - CELL_KEYS
        if unknown:
            raise InvalidArgument(
                f'unknown cell attributes: {", ".join(sorted(unknown))}')
        padding = value.get('padding', padding)
        margin = value.get('margin', margin)
        style = _style(value)
        value = value.get('runs', ())
        if not _is_list(value):
            raise InvalidArgument(f'cell runs should be a list: {value!r}')
    if value is None:
        runs = []
    elif isinstance(value, (str, Real, Mapping)):
        runs = [make_run(value)]
    elif _is_list(value):
        runs = [make_run(run) for run in value]
    else:
        raise InvalidArgument(f'invalid cell value: {value!r}')
    return Cell(
        runs, style, padding=expand_sides(padding),
        margin=expand_sides(margin))


def add_rows(table, part, rows, **options):
    """Add ``rows`` at the end of ``part``.

    Rows are mappings of column keys to cell values, or sequences of cell
    values in column keys order.

    """
    options = {**DEFAULT_OPTIONS, **options}
    part = table[part]
    if not _is_list(rows):
        raise InvalidArgument(f'{part.name} rows should be a list: {rows!r}')
    height = to_inches(options['row_height'])
    for row in rows:
        if isinstance(row, Mapping):
            data = row
            values = [row.get(key) for key in table.col_keys]
        elif _is_list(row):
            values = list(row)
            if len(values) > len(table.col_keys):
                ignored = values[len(table.col_keys):]
                LOGGER.warning(
                    'This %s row has more cells than the table has columns, '
                    'ignored %d cells: %r', part.name, len(ignored), ignored)
                del values[len(table.col_keys):]
            values += [None] * (len(table.col_keys) - len(values))
            data = dict(zip(table.col_keys, values))
        else:
            raise InvalidArgument(f'invalid {part.name} row: {row!r}')
        cells = [
            make_cell(value, options['padding'], options['margin'])
            for value in values]
        part.append_row(cells, data, height)


def build_table(records, col_keys=None, header=True, footer=None,
                style=None, **options):
    """Build a table.

    :param records:
        Body rows, mappings or sequences of cell values.
    :param col_keys:
        Ordered column keys, defaulting to the keys of mapping records.
    :param header:
        ``True`` for a header row with column keys as labels, a list of
        header rows, or ``None``/``False`` for no header.
    :param footer:
        A list of footer rows, or ``None``.
    :type style: :class:`TextStyle`
    :param style:
        Table text style, overriding ``font_family`` and ``font_size``.
    :param options:
        Build options of :data:`DEFAULT_OPTIONS`.

    """
    unknown = set(options) - set(BUILD_OPTIONS)
    if unknown:
        raise InvalidArgument(f'unknown options: {", ".join(sorted(unknown))}')
    options = {**DEFAULT_OPTIONS, **options}
    for name, rows in (('body', records), ('footer', footer)):
        if rows is not None and not _is_list(rows):
            raise InvalidArgument(f'{name} rows should be a list: {rows!r}')
    if header not in (None, True, False) and not _is_list(header):
        raise InvalidArgument(f'header rows should be a list: {header!r}')
    column_width = to_inches(options['column_width'])
    if column_width < 0:
        raise InvalidArgument('column_width should not be negative')
    if to_inches(options['row_height']) < 0:
        raise InvalidArgument('row_height should not be negative')

    records = list(records or ())
    if col_keys is None:
        col_keys = list(dict.fromkeys(
            key for record in records if isinstance(record, Mapping)
            for key in record))
    table = Table(col_keys, resolve_style(style, default_style(options)))

    if header is True:
        header = [list(table.col_keys)]
    build_options = {name: options[name] for name in BUILD_OPTIONS}
    add_rows(table, 'header', header or (), **build_options)
    add_rows(table, 'body', records, **build_options)
    add_rows(table, 'footer', footer or (), **build_options)
    for part in table.parts():
        part.column_widths = [column_width] * len(table.col_keys)
    return table


def merge_cells(part, rows, columns):
    """Merge the cells of ``part`` at the crossing of ``rows`` and ``columns``.

    ``rows`` are contiguous row indexes, ``columns`` are contiguous column
    indexes or keys. The first cell of the region becomes the anchor,
    others are covered.

    """
    row_indexes = sorted(set(get_rows_id(part, rows)))
    column_indexes = sorted(set(get_columns_id(part.col_keys, columns)))
    for name, indexes in (('rows', row_indexes), ('columns', column_indexes)):
        if not indexes:
            raise InvalidArgument(f'no {name} selected for merge')
        if indexes[-1] - indexes[0] + 1 != len(indexes):
            raise InvalidArgument(f'merged {name} should be contiguous')

    region = [
        part.rows[row].cells[column]
        for row in row_indexes for column in column_indexes]
    for cell in region:
        if cell.is_covered or cell.rowspan > 1 or cell.colspan > 1:
            raise InvalidArgument('cells are already merged')

    anchor, *covered = region
    anchor.rowspan = len(row_indexes)
    anchor.colspan = len(column_indexes)
    for cell in covered:
        cell.rowspan = cell.colspan = 0
    return part


def table_from_json(data):
    """Build a table from a decoded JSON description.

    ``data`` is a mapping with ``body``, and optional ``col_keys``,
    ``header``, ``footer``, ``options`` and ``merges`` keys. ``options``
    holds build options, ``merges`` is a list of mappings with ``part``,
    ``rows`` and ``columns`` keys, given to :func:`merge_cells`.

    """
    if not isinstance(data, Mapping):
        raise InvalidArgument('table description should be an object')
    unknown = set(data) - TABLE_KEYS
    if unknown:
        raise InvalidArgument(f'unknown table keys: {", ".join(sorted(unknown))}')
    options = data.get('options', {})
    if not isinstance(options, Mapping):
        raise InvalidArgument(f'table options should be an object: {options!r}')
    merges = data.get('merges', ())
    if not _is_list(merges):
        raise InvalidArgument(f'table merges should be a list: {merges!r}')
    table = build_table(
        data.get('body', ()), col_keys=data.get('col_keys'),
        header=data.get('header', True), footer=data.get('footer'),
        **options)
    for merge in merges:
        if not isinstance(merge, Mapping):
            raise InvalidArgument(f'invalid merge: {merge!r}')
        try:
            part = table[merge.get('part', 'body')]
            merge_cells(part, merge['rows'], merge['columns'])
        except (KeyError, TypeError) as exception:
            raise InvalidArgument(f'invalid merge: {merge!r}') from exception
    return table
