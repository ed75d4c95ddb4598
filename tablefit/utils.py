"""Various utility functions and classes."""

from numbers import Integral

#: Table parts, in layout order.
PARTS = ('header', 'body', 'footer')


class InvalidArgument(ValueError):  # noqa: N818
    """Invalid value given to a table operation."""


def get_part_names(part, allow_all=True):
    """Return the names of the parts selected by ``part``.

    ``part`` is ``'header'``, ``'body'``, ``'footer'`` or, when
    ``allow_all`` is set, ``'all'`` for the three parts.

    """
    if part == 'all' and allow_all:
        return PARTS
    elif part in PARTS:
        return (part,)
    choices = ', '.join((*PARTS, 'all') if allow_all else PARTS)
    raise InvalidArgument(f'part should be one of {choices}, not {part!r}')


def get_columns_id(col_keys, columns=None):
    """Return the indexes of the columns selected by ``columns``.

    ``columns`` is ``None`` for all columns, a column key, an integer
    index, or a sequence of keys and indexes.

    """
    if columns is None:
        return list(range(len(col_keys)))
    if isinstance(columns, (str, Integral)):
        columns = [columns]
    indexes = []
    for column in columns:
        if isinstance(column, bool):
            raise InvalidArgument(f'invalid column selector: {column!r}')
        elif isinstance(column, Integral):
            if not -len(col_keys) <= column < len(col_keys):
                raise InvalidArgument(f'column index out of range: {column}')
            indexes.append(column % len(col_keys))
        elif column in col_keys:
            indexes.append(col_keys.index(column))
        else:
            raise InvalidArgument(f'unknown column key: {column!r}')
    return indexes


def get_rows_id(part, rows=None):
    """Return the indexes of the rows of ``part`` selected by ``rows``.

    ``rows`` is ``None`` for all rows, an integer index, a sequence of
    indexes, a sequence of booleans with one value per row, or a predicate
    called with the record of each row.

    """
    length = len(part.rows)
    if rows is None:
        return list(range(length))
    elif callable(rows):
        return [index for index, row in enumerate(part.rows) if rows(row.data)]
    if isinstance(rows, Integral):
        rows = [rows]
    rows = list(rows)
    if rows and all(isinstance(row, bool) for row in rows):
        if len(rows) != length:
            raise InvalidArgument(
                f'boolean row selection should be of length {length}')
        return [index for index, selected in enumerate(rows) if selected]
    indexes = []
    for row in rows:
        if isinstance(row, bool) or not isinstance(row, Integral):
            raise InvalidArgument(f'invalid row selector: {row!r}')
        if not -length <= row < length:
            raise InvalidArgument(f'row index out of range: {row}')
        indexes.append(row % length)
    return indexes
