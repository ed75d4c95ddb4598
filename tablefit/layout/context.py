"""Layout context, shared by layout steps."""

from .. import DEFAULT_OPTIONS
from ..text.metrics import PillowMeasurer
from ..utils import InvalidArgument


class LayoutContext:
    """Measurer, options and caches used while laying out tables.

    :param measurer:
        Object measuring text, see :mod:`tablefit.text.metrics`. Defaults
        to a :class:`PillowMeasurer`.
    :param options:
        Layout options of :data:`DEFAULT_OPTIONS`.

    """
    def __init__(self, measurer=None, **options):
        unknown = set(options) - set(DEFAULT_OPTIONS)
        if unknown:
            raise InvalidArgument(
                f'unknown options: {", ".join(sorted(unknown))}')
        self.measurer = PillowMeasurer() if measurer is None else measurer
        self.options = {**DEFAULT_OPTIONS, **options}

        # Cache
        self.extents = {}

    def measure(self, keys):
        """Return the extents in points of ``keys``.

        Keys are ``(text, font_family, font_size, bold, italic)`` tuples.
        Measurer results are cached.

        """
        missing = [
            key for key in dict.fromkeys(keys) if key not in self.extents]
        if missing:
            extents = self.measurer.measure(
                *(list(values) for values in zip(*missing)))
            for key, (width, height) in zip(missing, extents, strict=True):
                self.extents[key] = (float(width), float(height))
        return [self.extents[key] for key in keys]
