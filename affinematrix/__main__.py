"""Command-line interface to affinematrix."""

import argparse
import logging
import sys

from . import LOGGER, __version__
from .matrix import InvalidOperation
from .text import (
    IDENTITY, INVARIANT, NumberFormat, format_number, parse, parse_number,
    split_fields, to_string)

# Number of values, method without center, method with center.
TRANSFORMATIONS = {
    'translate': (2, 'translate', None),
    'translate-prepend': (2, 'translate_prepend', None),
    'scale': (2, 'scale', 'scale_at'),
    'scale-prepend': (2, 'scale_prepend', 'scale_at_prepend'),
    'rotate': (1, 'rotate', 'rotate_at'),
    'rotate-prepend': (1, 'rotate_prepend', 'rotate_at_prepend'),
    'skew': (2, 'skew', 'skew_at'),
    'skew-prepend': (2, 'skew_prepend', 'skew_at_prepend'),
}
METAVARS = {
    'translate': 'TX,TY', 'scale': 'SX,SY', 'rotate': 'ANGLE', 'skew': 'AX,AY'}


class Ordered(argparse.Action):
    """Keep options sharing the same destination in command-line order."""
    def __call__(self, parser, namespace, values, option_string=None):
        items = list(getattr(namespace, self.dest) or ())
        items.append((self.const, values))
        setattr(namespace, self.dest, items)


PARSER = argparse.ArgumentParser(
    prog='affinematrix', description='Transform 2D affine matrices.',
    epilog='Values starting with a minus sign must be given after an equal '
    'sign, such as --rotate=-90,1,1.')
PARSER.add_argument(
    'matrix', nargs='?', default=IDENTITY,
    help='initial matrix, six values or Identity, defaults to Identity')
PARSER.add_argument(
    '--append', action=Ordered, const='append', dest='operations',
    help='apply the given matrix after the current one')
PARSER.add_argument(
    '--prepend', action=Ordered, const='prepend', dest='operations',
    help='apply the given matrix before the current one')
for name, (_, _, method_at) in TRANSFORMATIONS.items():
    metavar = METAVARS[name.split('-')[0]]
    PARSER.add_argument(
        f'--{name}', action=Ordered, const=name, dest='operations',
        metavar=f'{metavar}[,CX,CY]' if method_at else metavar,
        help=f'{name.replace("-", " ")} the current matrix')
PARSER.add_argument(
    '--invert', action=Ordered, const='invert', dest='operations', nargs=0,
    help='invert the current matrix')
PARSER.add_argument(
    '--identity', action=Ordered, const='identity', dest='operations',
    nargs=0, help='reset the current matrix to identity')
PARSER.add_argument(
    '-p', '--point', action=Ordered, const='point', dest='outputs',
    metavar='X,Y', help='point transformed by the final matrix')
PARSER.add_argument(
    '-V', '--vector', action=Ordered, const='vector', dest='outputs',
    metavar='X,Y', help='vector transformed by the final matrix')
PARSER.add_argument(
    '-f', '--format', default='',
    help='Python format specification used for numbers, such as .3f')
PARSER.add_argument(
    '--decimal-separator', default=INVARIANT.decimal_separator,
    help='decimal separator, values are separated by ; when it is ,')
PARSER.add_argument(
    '--nan-symbol', default=INVARIANT.nan_symbol,
    help='symbol of not-a-number values')
PARSER.add_argument(
    '--positive-infinity-symbol',
    default=INVARIANT.positive_infinity_symbol,
    help='symbol of positive infinity')
PARSER.add_argument(
    '--negative-infinity-symbol',
    default=INVARIANT.negative_infinity_symbol,
    help='symbol of negative infinity')
PARSER.add_argument(
    '-v', '--verbose', action='store_true',
    help='show information messages')
PARSER.add_argument(
    '-d', '--debug', action='store_true', help='show debugging messages')
PARSER.add_argument(
    '-q', '--quiet', action='store_true', help='hide logging messages')
PARSER.add_argument(
    '--version', action='version',
    version=f'affinematrix version {__version__}',
    help='print affinematrix’s version number and exit')


def parse_values(string, number_format):
    """Parse a list of numbers given as option value."""
    return [
        parse_number(field, number_format)
        for field in split_fields(string, number_format)]


def apply_operation(matrix, name, value, number_format):
    """Apply the operation called ``name`` to ``matrix`` in place."""
    if name == 'append':
        matrix.append(parse(value, number_format))
    elif name == 'prepend':
        matrix.prepend(parse(value, number_format))
    elif name == 'invert':
        matrix.invert()
    elif name == 'identity':
        matrix.set_identity()
    else:
        count, method, method_at = TRANSFORMATIONS[name]
        values = parse_values(value, number_format)
        if len(values) == count:
            getattr(matrix, method)(*values)
        elif method_at and len(values) == count + 2:
            getattr(matrix, method_at)(*values)
        else:
            raise InvalidOperation(
                f'Wrong number of values for {name}: {value!r}')


def transform(matrix, name, value, number_format):
    """Return the point or vector given as option value, transformed."""
    values = parse_values(value, number_format)
    if len(values) != 2:
        raise InvalidOperation(f'A {name} needs 2 values, got {value!r}')
    if name == 'point':
        return matrix.transform_point(values)
    return matrix.transform_vector(values)


def main(argv=None, stdout=None):
    """The ``affinematrix`` program takes an optional matrix:

    .. code-block:: sh

        affinematrix [options] [<matrix>]

    Operations are applied in the order they are given, the resulting matrix
    is then written, followed by the transformed points and vectors.

    """
    args = PARSER.parse_args(argv)
    stdout = stdout or sys.stdout

    # Default to logging to stderr.
    if args.debug:
        LOGGER.setLevel(logging.DEBUG)
    elif args.verbose:
        LOGGER.setLevel(logging.INFO)
    if not args.quiet:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        LOGGER.addHandler(handler)

    number_format = NumberFormat(
        args.decimal_separator, args.nan_symbol,
        args.positive_infinity_symbol, args.negative_infinity_symbol)
    try:
        matrix = parse(args.matrix, number_format)
        for name, value in args.operations or ():
            if value:
                LOGGER.info('Applying %s %s', name, value)
            else:
                LOGGER.info('Applying %s', name)
            apply_operation(matrix, name, value, number_format)
            LOGGER.debug('Current matrix: %r', matrix)
        lines = [to_string(matrix, args.format, number_format)]
        for name, value in args.outputs or ():
            lines.append(number_format.list_separator.join(
                format_number(coordinate, number_format, args.format)
                for coordinate in transform(matrix, name, value, number_format)))
    except ValueError as exception:
        # Invalid matrices, numbers and format specifications.
        LOGGER.error('%s', exception)
        sys.exit(1)

    for line in lines:
        stdout.write(f'{line}\n')


if __name__ == '__main__':  # pragma: no cover
    main()
