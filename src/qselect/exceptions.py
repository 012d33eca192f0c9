"""Exception hierarchy for qselect.

All exceptions derive from QSelectError, enabling broad catch patterns
at the application boundary while allowing fine-grained handling internally.
"""


class QSelectError(Exception):
    """Base exception for all qselect errors."""


class InvalidRangeError(QSelectError):
    """Range bounds do not fit the buffer.

    Raised when ``start`` is negative or ``end`` points past the last
    element of the backing buffer.
    """


class EmptyRangeError(InvalidRangeError):
    """Range holds no elements.

    Raised when ``end < start`` or the buffer itself is empty. There is no
    order statistic of an empty collection.
    """


class InvalidRankError(QSelectError):
    """Requested rank is not a valid position in the range.

    Raised when the rank is not an integer or lies outside ``[start, end]``.
    Ranks are never clamped.
    """


class InvalidQuantileError(QSelectError):
    """Quantile fraction cannot be mapped to a rank.

    Raised when the fraction is NaN, infinite, or outside ``[0, 1]``.
    """


class UnorderedValueError(QSelectError):
    """Buffer contains values without a total order.

    Raised for NaN entries in numeric buffers, which compare false against
    everything and would silently corrupt the partition.
    """


class UnsupportedBufferError(QSelectError):
    """No range kind can wrap the given buffer.

    Raised for immutable or multi-dimensional containers (tuples, strings,
    2-D arrays) and for numpy dtypes without a usable ordering.
    """


class ConfigValidationError(QSelectError):
    """Configuration field validation failed.

    Raised when per-call overrides contain unknown keys or attempt to
    override fields that are fixed for the lifetime of an engine.
    """
