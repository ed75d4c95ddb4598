"""Matrices of cell sizes."""


def sum_present(values):
    """Return the sum of values that are not ``None``, or ``None``."""
    present = [value for value in values if value is not None]
    return sum(present) if present else None


def max_present(values):
    """Return the maximum of values that are not ``None``, or ``None``."""
    present = [value for value in values if value is not None]
    return max(present) if present else None


class CellMatrix(list):
    """Dense matrix of cell sizes, ``None`` for missing values.

    Rows follow the rows of a table part, columns follow its column keys.
    Sums and maxima skip missing values: a result is missing only when all
    the values it's computed from are missing.

    """
    def __init__(self, rows=0, columns=0, matrix=None):
        if matrix is None:
            matrix = [[None] * columns for _ in range(rows)]
        elif matrix:
            columns = len(matrix[0])
            assert all(len(row) == columns for row in matrix)
        super().__init__(matrix)
        self.columns = columns

    @property
    def shape(self):
        return len(self), self.columns

    def __add__(self, other):
        assert self.shape == other.shape, (self.shape, other.shape)
        return CellMatrix(columns=self.columns, matrix=[
            [sum_present(values) for values in zip(row, other_row)]
            for row, other_row in zip(self, other)])

    def add(self, row, column, value):
        """Add ``value`` to the cell at ``row`` and ``column``."""
        self[row][column] = sum_present((self[row][column], value))

    def maximize(self, row, column, value):
        """Set the cell at ``row`` and ``column`` to at least ``value``."""
        self[row][column] = max_present((self[row][column], value))

    def column_maxima(self):
        return [max_present(column) for column in zip(*self)] or (
            [None] * self.columns)

    def row_maxima(self):
        return [max_present(row) for row in self]
