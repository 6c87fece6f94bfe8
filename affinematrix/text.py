"""Text form of matrices.

The identity matrix is written ``Identity``, other matrices are written as
their six values separated by the list separator of the number format, for
example ``2,3,4,5,6,7`` or ``2,5;3;4;5;6;7`` when the decimal separator is a
comma.

Numbers are read with tinycss2's tokenizer, that follows the CSS syntax of
numbers: ``12``, ``-3.5``, ``+.5``, ``1e-3``.

"""

import re
from collections import namedtuple
from math import inf, isinf, isnan, nan

import tinycss2
from tinycss2.ast import NumberToken

from .matrix import InvalidOperation, Matrix

IDENTITY = 'Identity'


class FormatError(ValueError):
    """Field of a matrix string that is not a number."""


class NumberFormat(namedtuple('NumberFormat', (
        'decimal_separator', 'nan_symbol', 'positive_infinity_symbol',
        'negative_infinity_symbol'),
        defaults=('.', 'NaN', 'Infinity', '-Infinity'))):
    """Culture-dependent symbols used to write and read numbers."""
    __slots__ = ()

    @property
    def list_separator(self):
        """Separator written between the values of a matrix."""
        return ';' if self.decimal_separator in (',', ';') else ','

    @property
    def delimiters(self):
        """Separators accepted between the values of a matrix."""
        if self.list_separator == ';':
            return (';',)
        return (',', ';')

    @property
    def symbols(self):
        """Special values, indexed by their lowercase symbol."""
        return {
            self.nan_symbol.lower(): nan,
            self.positive_infinity_symbol.lower(): inf,
            self.negative_infinity_symbol.lower(): -inf,
        }


INVARIANT = NumberFormat()


def format_number(value, number_format=None, format_spec=''):
    """Return the text form of a number.

    Without ``format_spec``, give the shortest string that parses back to
    the same value.

    """
    number_format = number_format or INVARIANT
    if isnan(value):
        return number_format.nan_symbol
    elif isinf(value):
        return (
            number_format.positive_infinity_symbol if value > 0
            else number_format.negative_infinity_symbol)

    if format_spec:
        string = format(value, format_spec)
    else:
        string = repr(float(value))
        if string.endswith('.0'):
            string = string[:-2]
    return string.replace('.', number_format.decimal_separator)


def parse_number(string, number_format=None):
    """Parse the text form of a number.

    Raise :class:`FormatError` if ``string`` is not a number.

    """
    number_format = number_format or INVARIANT
    string = string.strip()
    symbols = number_format.symbols
    if string.lower() in symbols:
        return symbols[string.lower()]

    if number_format.decimal_separator != '.':
        if '.' in string:
            raise FormatError(f'Invalid number: {string!r}')
        string = string.replace(number_format.decimal_separator, '.')
    tokens = tinycss2.parse_component_value_list(string)
    if len(tokens) != 1 or not isinstance(tokens[0], NumberToken):
        raise FormatError(f'Invalid number: {string!r}')
    return float(tokens[0].value)


def split_fields(string, number_format=None):
    """Split a list of values on delimiters and whitespace.

    Raise :class:`InvalidOperation` if a value is empty.

    """
    number_format = number_format or INVARIANT
    delimiters = re.escape(''.join(number_format.delimiters))
    fields = re.split(rf'\s*[{delimiters}]\s*|\s+', string.strip())
    if '' in fields:
        raise InvalidOperation(f'Empty value in {string.strip()!r}')
    return fields


def to_string(matrix, format_spec='', number_format=None):
    """Return the text form of ``matrix``.

    ``format_spec`` is a Python format specification applied to each
    value, ``number_format`` gives the decimal separator and the symbols
    of special values.

    """
    number_format = number_format or INVARIANT
    if matrix.is_identity:
        return IDENTITY
    return number_format.list_separator.join(
        format_number(value, number_format, format_spec)
        for value in matrix.values)


def parse(string, number_format=None):
    """Parse the text form of a matrix.

    Raise :class:`InvalidOperation` if ``string`` is ``None`` or doesn't
    include six values, raise :class:`FormatError` if a value is not a
    number.

    """
    number_format = number_format or INVARIANT
    if string is None:
        raise InvalidOperation('No string given to parse as a matrix')

    string = string.strip()
    if string == IDENTITY:
        return Matrix()

    fields = split_fields(string, number_format)
    if len(fields) != 6:
        raise InvalidOperation(
            f'Matrix needs 6 values, {len(fields)} found in {string!r}')
    return Matrix(*(parse_number(field, number_format) for field in fields))
