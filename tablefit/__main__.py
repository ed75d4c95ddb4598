"""Command-line interface to TableFit."""

import argparse
import json
import logging
import math
import sys

from . import DEFAULT_OPTIONS, LOGGER, __version__
from .layout import (
    LayoutContext, autofit, current_dimensions, fit_to_width,
    pretty_dimensions, total_dimensions)
from .structure.build import table_from_json
from .text.metrics import FontConfiguration, PillowMeasurer


class Parser(argparse.ArgumentParser):
    def __init__(self, *args, **kwargs):
        self._arguments = {}
        super().__init__(*args, **kwargs)

    def add_argument(self, *args, **kwargs):
        super().add_argument(*args, **kwargs)
        key = args[-1].lstrip('-')
        kwargs['flags'] = args
        kwargs['positional'] = args[-1][0] != '-'
        self._arguments[key] = kwargs

    @property
    def docstring(self):
        self._arguments['help'] = self._arguments.pop('help')
        data = []
        for key, args in self._arguments.items():
            data.append('.. option:: ')
            action = args.get('action', 'store')
            for flag in args['flags']:
                data.append(flag)
                if not args['positional'] and action in ('store', 'append'):
                    data.append(f' <{key}>')
                data.append(', ')
            data[-1] = '\n\n'
            data.append(f'  {args["help"][0].upper()}{args["help"][1:]}.\n\n')
            if 'choices' in args:
                choices = ", ".join(args['choices'])
                data.append(f'  Possible choices: {choices}.\n\n')
            if action == 'append':
                data.append('  This option can be passed multiple times.\n\n')
        return ''.join(data)


PARSER = Parser(
    prog='tablefit', description='Compute column widths and row heights of tables.')
PARSER.add_argument(
    'input', help='filename of the JSON table description, or - for stdin')
PARSER.add_argument(
    '-o', '--output', default='-',
    help='filename where dimensions are written, defaults to stdout')
PARSER.add_argument(
    '-p', '--part', choices=('all', 'header', 'body', 'footer'), default='all',
    help='part whose content-driven dimensions are reported')
PARSER.add_argument(
    '-a', '--autofit', action='store_true',
    help='store content-driven dimensions in the table')
PARSER.add_argument(
    '--add-w', help='extra width added to each column by autofit')
PARSER.add_argument(
    '--add-h', help='extra height added to each row by autofit')
PARSER.add_argument(
    '-w', '--max-width',
    help='decrease font sizes until the table fits in this width')
PARSER.add_argument(
    '--inc', type=float, help='font size decrease for each fitting step')
PARSER.add_argument(
    '--max-iter', type=int, help='maximum number of fitting steps')
PARSER.add_argument(
    '--min-font-size', type=float, help='minimum font size when fitting')
PARSER.add_argument(
    '-f', '--font-file', action='append', dest='font_files', default=[],
    help='font file used to measure text')
PARSER.add_argument(
    '--font-dir', action='append', dest='font_dirs', default=[],
    help='folder whose font files are used to measure text')
PARSER.add_argument(
    '-v', '--verbose', action='store_true',
    help='show warnings and information messages')
PARSER.add_argument(
    '-d', '--debug', action='store_true', help='show debugging messages')
PARSER.add_argument(
    '-q', '--quiet', action='store_true', help='hide logging messages')
PARSER.add_argument(
    '--version', action='version',
    version=f'TableFit version {__version__}',
    help='print TableFit’s version number and exit')
LAYOUT_OPTIONS = ('add_w', 'add_h', 'inc', 'max_iter', 'min_font_size')
PARSER.set_defaults(**{key: DEFAULT_OPTIONS[key] for key in LAYOUT_OPTIONS})


def _json_value(value):
    """Replace non-finite numbers, not allowed in JSON, by ``None``."""
    if isinstance(value, dict):
        return {key: _json_value(item) for key, item in value.items()}
    elif isinstance(value, list):
        return [_json_value(item) for item in value]
    elif isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def main(argv=None, stdout=None, stdin=None, measurer=None):
    """The ``tablefit`` program takes at least one argument:

    .. code-block:: sh

        tablefit [options] <input>

    """
    args = PARSER.parse_args(argv)

    # Default to logging to stderr.
    if args.debug:
        LOGGER.setLevel(logging.DEBUG)
    elif args.verbose:
        LOGGER.setLevel(logging.INFO)
    if not args.quiet:
        handler = logging.StreamHandler()
        if args.debug:
            # Add extra information when debug logging
            handler.setFormatter(
                logging.Formatter(
                    '%(levelname)s: %(filename)s:%(lineno)d '
                    '(%(funcName)s): %(message)s'))
        else:
            handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        LOGGER.addHandler(handler)

    if measurer is None:
        font_config = FontConfiguration()
        for font_dir in args.font_dirs:
            font_config.add_font_directory(font_dir)
        for font_file in args.font_files:
            font_config.add_font_file(font_file)
        measurer = PillowMeasurer(font_config)

    try:
        if args.input == '-':
            data = json.load(stdin or sys.stdin)
        else:
            with open(args.input, encoding='utf-8') as fd:
                data = json.load(fd)
        options = {key: getattr(args, key) for key in LAYOUT_OPTIONS}
        context = LayoutContext(measurer, **options)
        table = table_from_json(data)
        if args.autofit:
            autofit(table, context=context)
        if args.max_width is not None:
            fit_to_width(table, args.max_width, context=context)
        result = {
            **current_dimensions(table),
            **total_dimensions(table),
            'pretty': pretty_dimensions(table, args.part, context),
        }
    except (OSError, ValueError) as exception:
        # InvalidArgument and JSONDecodeError are ValueError subclasses
        PARSER.error(str(exception))

    output = json.dumps(_json_value(result), indent=2, allow_nan=False)
    if args.output == '-':
        (stdout or sys.stdout).write(output + '\n')
    else:
        with open(args.output, 'w', encoding='utf-8') as fd:
            fd.write(output + '\n')


main.__doc__ += '\n\n' + PARSER.docstring


if __name__ == '__main__':  # pragma: no cover
    main()
