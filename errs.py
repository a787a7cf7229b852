#!/usr/bin/env python3
"""Exceptions raised by the seawater property routines.

Both errors are call-level: a single offending cell or argument aborts the
whole calculation. Per-cell data problems are not errors; they are set to
NaN (or clamped) by the `sanit` module and the calculation continues.
"""


class ShapeMismatch(ValueError):
    """An argument cannot be reconciled with the primary grid.

    Attributes:
        name (str): Name of the offending argument.
        shape (tuple of int): Its shape after conversion to 2-D.
        primary (str): Name of the argument that sets the grid.
        grid (tuple of int): Shape of the grid.
    """

    def __init__(self, name, shape, primary, grid, msg=None):
        self.name = name
        self.shape = tuple(shape)
        self.primary = primary
        self.grid = tuple(grid)
        if msg is None:
            msg = (f'{name} with shape {self.shape} does not agree with '
                   f'{primary} with shape {self.grid}')
        super().__init__(msg)


class RangeError(ValueError):
    """A validated field has a value outside its physical range.

    Attributes:
        field (str): Name of the field, e.g. 'pressure'.
        lo, hi (float): The valid range.
    """

    def __init__(self, field, lo, hi):
        self.field = field
        self.lo = lo
        self.hi = hi
        super().__init__(f'{field} is out of range [{lo}, {hi}]')
