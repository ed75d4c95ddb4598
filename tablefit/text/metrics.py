"""Measure text runs.

Text is measured by a *measurer*: an object with a vectorized ``measure``
method taking lists of strings, font families, font sizes in points, bold
flags and italic flags, and returning a list of ``(width, height)`` tuples
in points. Strings that can't be measured give ``nan`` values.

:class:`PillowMeasurer` is the default measurer, finding font files in a
:class:`FontConfiguration`.

"""

import math
from functools import cache
from pathlib import Path

from fontTools.ttLib import TTFont, TTLibError
from PIL import ImageFont

from ..logger import LOGGER
from ..units import points_to_inches

FONT_SUFFIXES = ('.otf', '.ttf')
BOLD_WORDS = ('bold', 'black', 'heavy')
ITALIC_WORDS = ('italic', 'oblique')


class FontConfiguration:
    """A font configuration.

    Keep a mapping from font families and styles to font files. The family
    and the style of fonts are read from their ``name`` table.

    """
    def __init__(self):
        self._fonts = {}

    def add_font_file(self, path):
        """Register the font stored at ``path``.

        Return the font family, or ``None`` if the font can't be read.

        """
        path = Path(path)
        try:
            with TTFont(path, lazy=True) as font:
                family = font['name'].getBestFamilyName()
                subfamily = font['name'].getBestSubFamilyName() or ''
        except (OSError, TTLibError, KeyError) as exception:
            LOGGER.warning('Failed to load font at %s: %s', path, exception)
            return None
        if not family:
            LOGGER.warning('Font at %s has no family name', path)
            return None
        subfamily = subfamily.lower()
        bold = any(word in subfamily for word in BOLD_WORDS)
        italic = any(word in subfamily for word in ITALIC_WORDS)
        self._fonts[family.lower(), bold, italic] = path
        return family

    def add_font_directory(self, path):
        """Register all the fonts of a directory, return their families."""
        families = set()
        for font_path in sorted(Path(path).iterdir()):
            if font_path.suffix.lower() in FONT_SUFFIXES:
                if family := self.add_font_file(font_path):
                    families.add(family)
        return families

    def find_font(self, family, bold=False, italic=False):
        """Return the path of the closest registered font, or ``None``.

        Missing bold or italic faces fall back to the regular face of the
        family.

        """
        family = family.lower()
        for key in (
                (family, bold, italic), (family, bold, False),
                (family, False, italic), (family, False, False)):
            if key in self._fonts:
                return self._fonts[key]


@cache
def _load_font(path, size):
    if path is None:
        return ImageFont.load_default(size)
    return ImageFont.truetype(str(path), size)


class PillowMeasurer:
    """Measure text with Pillow.

    Width is the advance width of the longest line, height is the line
    height (ascent and descent) times the number of lines. Pillow font sizes
    are given in points, so that extents are in points too.

    """
    def __init__(self, font_config=None):
        self.font_config = (
            FontConfiguration() if font_config is None else font_config)
        self._missing_families = set()

    def get_font(self, family, size, bold=False, italic=False):
        path = self.font_config.find_font(family, bold, italic)
        if path is None and family.lower() not in self._missing_families:
            self._missing_families.add(family.lower())
            LOGGER.warning(
                'Font family %r not found, default font used instead', family)
        return _load_font(path, size)

    def measure(self, strings, families, sizes, bold, italic):
        extents = []
        for text, family, size, is_bold, is_italic in zip(
                strings, families, sizes, bold, italic, strict=True):
            if not text.strip() or not size > 0:
                extents.append((math.nan, math.nan))
                continue
            font = self.get_font(family, size, is_bold, is_italic)
            ascent, descent = font.getmetrics()
            lines = text.split('\n')
            width = max(font.getlength(line) for line in lines)
            extents.append((width, (ascent + descent) * len(lines)))
        return extents


def run_font_size(style):
    """Return the font size used to measure a run with ``style``.

    Superscript and subscript runs are rendered with half the font size.

    """
    if style.vertical_align in (None, 'baseline'):
        return style.font_size
    return style.font_size / 2


def _to_inches(points, fallback):
    if points is None or math.isnan(points):
        return fallback
    return points_to_inches(points)


def measure_runs(context, runs):
    """Return the ``(width, height)`` of each run, in inches.

    ``runs`` is a list of ``(run, style)`` tuples, where ``style`` is the
    resolved style of ``run``. When a run can't be measured, its fallback
    ``width`` and ``height`` are used. Missing values are ``None``.

    """
    keys = [
        (run.text, style.font_family, run_font_size(style),
         bool(style.bold), bool(style.italic))
        for run, style in runs]
    return [
        (_to_inches(width, run.width), _to_inches(height, run.height))
        for (run, _), (width, height) in zip(runs, context.measure(keys))]
