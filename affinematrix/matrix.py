"""Transformation matrix.

Matrices follow the row-vector convention: the point ``(x, y)`` is the row
``(x, y, 1)`` multiplied on the left of::

    | m11       m12       0 |
    | m21       m22       0 |
    | offset_x  offset_y  1 |

The composition ``a @ b`` thus applies ``a`` first, then ``b``.

No operation guards against NaN or infinite values: they go through the
usual floating point arithmetic and end up in the coefficients.

"""

import functools
import operator
from collections import namedtuple
from math import cos, fmod, isinf, isnan, nan, radians, sin, tan

Point = namedtuple('Point', ('x', 'y'))
Vector = namedtuple('Vector', ('x', 'y'))


class InvalidOperation(ValueError):  # noqa: N818
    """Operation impossible with the given matrix or input."""


def _radians(angle, wrap=False):
    """Convert degrees to radians, infinite angles giving NaN."""
    if isinf(angle):
        # math.sin, math.cos and math.tan raise for infinite values.
        return nan
    if wrap:
        angle = fmod(angle, 360)
    return radians(angle)


def _value_equal(a, b):
    return a == b or (isnan(a) and isnan(b))


def _hash(value):
    # NaNs are equal values, they must share a hash.
    return 0 if isnan(value) else hash(value)


def multiply(a, b):
    """Return a new matrix applying ``a``, then ``b``."""
    return Matrix(
        a.m11 * b.m11 + a.m12 * b.m21,
        a.m11 * b.m12 + a.m12 * b.m22,
        a.m21 * b.m11 + a.m22 * b.m21,
        a.m21 * b.m12 + a.m22 * b.m22,
        a.offset_x * b.m11 + a.offset_y * b.m21 + b.offset_x,
        a.offset_x * b.m12 + a.offset_y * b.m22 + b.offset_y)


def equals(a, b):
    """Compare matrices component by component, NaN being equal to NaN."""
    return all(map(_value_equal, a.values, b.values))


def _scaling(scale_x, scale_y):
    return Matrix(scale_x, 0, 0, scale_y)


def _scaling_at(scale_x, scale_y, center_x, center_y):
    return Matrix(
        scale_x, 0, 0, scale_y,
        center_x - scale_x * center_x, center_y - scale_y * center_y)


def _rotation(angle):
    angle = _radians(angle, wrap=True)
    return Matrix(cos(angle), sin(angle), -sin(angle), cos(angle))


def _rotation_at(angle, center_x, center_y):
    angle = _radians(angle, wrap=True)
    sin_angle, cos_angle = sin(angle), cos(angle)
    return Matrix(
        cos_angle, sin_angle, -sin_angle, cos_angle,
        center_x * (1 - cos_angle) + center_y * sin_angle,
        center_y * (1 - cos_angle) - center_x * sin_angle)


def _skewing(angle_x, angle_y):
    return Matrix(
        1, tan(_radians(angle_y, wrap=True)),
        tan(_radians(angle_x, wrap=True)), 1)


def _skewing_at(angle_x, angle_y, center_x, center_y):
    tan_x = tan(_radians(angle_x, wrap=True))
    tan_y = tan(_radians(angle_y, wrap=True))
    return Matrix(1, tan_y, tan_x, 1, -center_y * tan_x, -center_x * tan_y)


def _translation(offset_x, offset_y):
    return Matrix(offset_x=offset_x, offset_y=offset_y)


class Matrix:
    """2D affine transformation matrix.

    Matrices are mutable values: transformations change the matrix in
    place, use :meth:`copy` to keep the original value.

    """
    __slots__ = ['m11', 'm12', 'm21', 'm22', 'offset_x', 'offset_y']

    def __init__(self, m11=1, m12=0, m21=0, m22=1, offset_x=0, offset_y=0):
        self.m11, self.m12 = float(m11), float(m12)
        self.m21, self.m22 = float(m21), float(m22)
        self.offset_x, self.offset_y = float(offset_x), float(offset_y)

    @classmethod
    def identity(cls):
        """Return a new identity matrix."""
        return cls()

    @classmethod
    def parse(cls, string, number_format=None):
        """Parse the text form of a matrix.

        See :func:`affinematrix.text.parse`.

        """
        from .text import parse

        return parse(string, number_format)

    @property
    def values(self):
        """The ``(m11, m12, m21, m22, offset_x, offset_y)`` tuple."""
        return (
            self.m11, self.m12, self.m21, self.m22,
            self.offset_x, self.offset_y)

    @property
    def determinant(self):
        return self.m11 * self.m22 - self.m12 * self.m21

    @property
    def has_inverse(self):
        # A NaN determinant is not zero, the matrix has an inverse.
        return not self.determinant == 0

    @property
    def is_identity(self):
        return (
            self.m11 == 1 and self.m12 == 0 and
            self.m21 == 0 and self.m22 == 1 and
            self.offset_x == 0 and self.offset_y == 0)

    def copy(self):
        """Return an independent matrix with the same values."""
        return Matrix(*self.values)

    __copy__ = copy

    def _set_values(self, values):
        (self.m11, self.m12, self.m21, self.m22,
         self.offset_x, self.offset_y) = values

    def set_identity(self):
        self._set_values((1., 0., 0., 1., 0., 0.))

    def append(self, matrix):
        """Apply ``matrix`` after this matrix."""
        self._set_values(multiply(self, matrix).values)

    def prepend(self, matrix):
        """Apply ``matrix`` before this matrix."""
        self._set_values(multiply(matrix, self).values)

    def invert(self):
        """Invert the matrix in place.

        Raise :class:`InvalidOperation` if the determinant is zero, the
        matrix is then left untouched.

        """
        if not self.has_inverse:
            raise InvalidOperation(
                f'{self!r} is not invertible, its determinant is 0')
        determinant = self.determinant
        m11 = self.m22 / determinant
        m12 = -self.m12 / determinant
        m21 = -self.m21 / determinant
        m22 = self.m11 / determinant
        self._set_values((
            m11, m12, m21, m22,
            -(self.offset_x * m11 + self.offset_y * m21),
            -(self.offset_x * m12 + self.offset_y * m22)))

    def inverted(self):
        """Return the inverse matrix, leaving this matrix untouched."""
        matrix = self.copy()
        matrix.invert()
        return matrix

    def scale(self, scale_x, scale_y):
        self.append(_scaling(scale_x, scale_y))

    def scale_prepend(self, scale_x, scale_y):
        self.prepend(_scaling(scale_x, scale_y))

    def scale_at(self, scale_x, scale_y, center_x, center_y):
        """Append a scale around the ``(center_x, center_y)`` point."""
        self.append(_scaling_at(scale_x, scale_y, center_x, center_y))

    def scale_at_prepend(self, scale_x, scale_y, center_x, center_y):
        """Prepend a scale around the ``(center_x, center_y)`` point."""
        self.prepend(_scaling_at(scale_x, scale_y, center_x, center_y))

    def rotate(self, angle):
        """Append a rotation of ``angle`` degrees."""
        self.append(_rotation(angle))

    def rotate_prepend(self, angle):
        """Prepend a rotation of ``angle`` degrees."""
        self.prepend(_rotation(angle))

    def rotate_at(self, angle, center_x, center_y):
        """Append a rotation of ``angle`` degrees around a point."""
        self.append(_rotation_at(angle, center_x, center_y))

    def rotate_at_prepend(self, angle, center_x, center_y):
        """Prepend a rotation of ``angle`` degrees around a point."""
        self.prepend(_rotation_at(angle, center_x, center_y))

    def skew(self, angle_x, angle_y):
        """Append a skew of ``angle_x`` and ``angle_y`` degrees."""
        self.append(_skewing(angle_x, angle_y))

    def skew_prepend(self, angle_x, angle_y):
        self.prepend(_skewing(angle_x, angle_y))

    def skew_at(self, angle_x, angle_y, center_x, center_y):
        self.append(_skewing_at(angle_x, angle_y, center_x, center_y))

    def skew_at_prepend(self, angle_x, angle_y, center_x, center_y):
        self.prepend(_skewing_at(angle_x, angle_y, center_x, center_y))

    def translate(self, offset_x, offset_y):
        self.append(_translation(offset_x, offset_y))

    def translate_prepend(self, offset_x, offset_y):
        self.prepend(_translation(offset_x, offset_y))

    def transform_point(self, point):
        """Return the transformed ``(x, y)`` point."""
        x, y = point
        return Point(
            x * self.m11 + y * self.m21 + self.offset_x,
            x * self.m12 + y * self.m22 + self.offset_y)

    def transform_vector(self, vector):
        """Return the transformed ``(x, y)`` vector, ignoring offsets."""
        x, y = vector
        return Vector(x * self.m11 + y * self.m21, x * self.m12 + y * self.m22)

    def transform_points(self, points):
        """Transform a mutable sequence of points in place."""
        if points is None:
            return
        for i, point in enumerate(points):
            points[i] = self.transform_point(point)

    def transform_vectors(self, vectors):
        """Transform a mutable sequence of vectors in place."""
        if vectors is None:
            return
        for i, vector in enumerate(vectors):
            vectors[i] = self.transform_vector(vector)

    def equals(self, other):
        return equals(self, other)

    def to_string(self, format_spec='', number_format=None):
        """Return the text form of the matrix.

        See :func:`affinematrix.text.to_string`.

        """
        from .text import to_string

        return to_string(self, format_spec, number_format)

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return multiply(self, other)

    def __imatmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self.append(other)
        return self

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return all(map(operator.eq, self.values, other.values))

    def __ne__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return any(map(operator.ne, self.values, other.values))

    def __hash__(self):
        # Identity and zero matrices both hash to 0.
        return functools.reduce(operator.xor, map(_hash, self.values))

    def __repr__(self):
        return f'Matrix({", ".join(map(repr, self.values))})'

    def __str__(self):
        return self.to_string()

    def __format__(self, format_spec):
        return self.to_string(format_spec)
