"""pymatview warning categories.

Filter these to silence pymatview without muting every ``UserWarning``.
They are raised from the element casts in ``dtypes`` and from NumPy exports
in ``interop``, both of which import this module, so it imports nothing.
"""


class PyMatViewWarning(UserWarning):
    """Base warning category for all pymatview user-facing warnings."""


class PyMatViewDTypeWarning(PyMatViewWarning):
    """A write was coerced lossily into the storage dtype (e.g. 2.75 stored as int 2)."""


class PyMatViewPerformanceWarning(PyMatViewWarning):
    """An export had to gather every element through a view chain instead of
    copying the contiguous storage buffer."""
