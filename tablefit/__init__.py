"""Column widths and row heights of rich text tables.

The public API is what is accessible from this "root" packages without
importing sub-modules.

"""

VERSION = __version__ = '1.0'

#: Default values for command-line and Python API options. See
#: :func:`__main__.main` to learn more about specific options for
#: command-line.
#:
#: :param float add_w:
#:     Extra width added to every column by :func:`autofit`, in inches.
#: :param float add_h:
#:     Extra height added to every row by :func:`autofit`, in inches.
#: :param float inc:
#:     Font size decrease, in points, for each :func:`fit_to_width` step.
#: :param int max_iter:
#:     Maximum number of :func:`fit_to_width` steps.
#: :param float min_font_size:
#:     Font size, in points, below which :func:`fit_to_width` doesn't go.
#: :param str font_family:
#:     Font family of text that doesn't set one.
#: :param float font_size:
#:     Font size, in points, of text that doesn't set one.
#: :param float padding:
#:     Paragraph padding of new cells, in style units (4/3 of a point).
#: :param float margin:
#:     Margin of new cells, in style units (4/3 of a point).
#: :param float column_width:
#:     Stored width of the columns of new tables, in inches.
#: :param float row_height:
#:     Stored height of the rows of new tables, in inches.
DEFAULT_OPTIONS = {
    'add_w': 0.1,
    'add_h': 0.1,
    'inc': 1,
    'max_iter': 20,
    'min_font_size': 1,
    'font_family': 'DejaVu Sans',
    'font_size': 11,
    'padding': 5,
    'margin': 0,
    'column_width': 0.75,
    'row_height': 0.25,
}

__all__ = [
    'DEFAULT_OPTIONS', 'VERSION', 'FontConfiguration', 'InvalidArgument',
    'LayoutContext', 'PillowMeasurer', 'Table', '__version__', 'autofit',
    'build_table', 'current_dimensions', 'fit_to_width', 'merge_cells',
    'pretty_dimensions', 'set_height', 'set_height_all', 'set_width',
    'table_from_json', 'total_dimensions']


# Import after setting the options, as the options are used in other modules
from .logger import LOGGER, PROGRESS_LOGGER  # noqa: I001, E402
from .utils import InvalidArgument  # noqa: E402
from .structure.table import Table  # noqa: E402
from .structure.build import build_table, merge_cells, table_from_json  # noqa: E402
from .text.metrics import FontConfiguration, PillowMeasurer  # noqa: E402
from .layout import (  # noqa: E402
    LayoutContext, autofit, current_dimensions, fit_to_width,
    pretty_dimensions, set_height, set_height_all, set_width, total_dimensions)
