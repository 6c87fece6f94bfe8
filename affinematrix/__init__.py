"""2D Affine Transformation Matrices.

The public API is what is accessible from this "root" package without
importing sub-modules.

"""

VERSION = __version__ = '1.0.0'

__all__ = [
    'INVARIANT', 'LOGGER', 'VERSION', 'FormatError', 'InvalidOperation',
    'Matrix', 'NumberFormat', 'Point', 'Vector', '__version__', 'equals',
    'multiply', 'parse', 'to_string']


# Import after setting the version, as the version is used in other modules
from .logger import LOGGER  # noqa: I001, E402
from .matrix import (  # noqa: E402
    InvalidOperation, Matrix, Point, Vector, equals, multiply)
from .text import (  # noqa: E402
    INVARIANT, FormatError, NumberFormat, parse, to_string)
