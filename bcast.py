#!/usr/bin/env python3
"""Shape reconciliation of array arguments.

The property routines work on 2-D grids. A primary argument (Practical or
Absolute Salinity) fixes the grid shape (M, N), and every other argument is
expanded onto that grid. Rather than relying on numpy broadcasting, each
auxiliary argument is first classified into a `Layout`, which says exactly how
its values map onto the grid, and then replicated explicitly into a fresh
array. The accepted layouts, tried in order, are:

    1x1  scalar, copied into every cell;
    1xN  row vector, copied down the M rows;
    Mx1  column vector, copied across the N columns;
    Nx1  transposed row vector, transposed then copied down the rows;
    1xM  transposed column vector (longitude only), transposed then copied
         across the columns;
    MxN  already on the grid.

When M == N an Mx1 vector is always read as a column and a 1xN vector as a
row. Python scalars are 1x1 and 1-D arrays are 1xN rows.

Single-row grids are turned into columns before any calculation (`orient`)
and turned back afterwards (`restore`).
"""

# Import statements
import enum
import numpy as np
from errs import ShapeMismatch


class Layout(enum.Enum):
    """How an auxiliary argument maps onto the primary grid."""
    SCALAR = 'scalar'
    ROW = 'row'
    COLUMN = 'column'
    ROWT = 'transposed row'
    COLUMNT = 'transposed column'
    MATRIX = 'matrix'


def as2d(arg, name):
    """Copy an argument into a 2-D float array.

    Arguments:
        arg (float, list or array): The argument, with at most 2 dimensions.
        name (str): Name of the argument, used in error messages.

    Returns:
        arr (array): A new 2-D array of floats.

    Raises:
        ShapeMismatch: If the argument has more than 2 dimensions.

    Examples
    --------
    >>> as2d(3, 'p')
    array([[3.]])
    >>> as2d([1, 2], 'p')
    array([[1., 2.]])
    """
    arr = np.array(arg, dtype=float)
    if arr.ndim == 0:
        arr = arr.reshape(1, 1)
    elif arr.ndim == 1:
        arr = arr.reshape(1, -1)
    elif arr.ndim > 2:
        msg = f'{name} has {arr.ndim} dimensions; at most 2 are supported'
        raise ShapeMismatch(name, arr.shape, None, (), msg=msg)
    return arr


def classify(shape, grid, name, primary='SP', transcol=False):
    """Decide how an argument of the given shape maps onto the grid.

    Arguments:
        shape (tuple of int): Shape (m, n) of the 2-D argument.
        grid (tuple of int): Shape (M, N) of the primary argument.
        name (str): Name of the argument, used in error messages.
        primary (str, optional): Name of the primary argument (default 'SP').
        transcol (bool, optional): If True (default False), a 1xM vector is
            accepted as a transposed column vector.

    Returns:
        layout (Layout): The layout of the argument.

    Raises:
        ShapeMismatch: If the argument fits none of the layouts.

    Examples
    --------
    >>> classify((1, 3), (2, 3), 'p')
    <Layout.ROW: 'row'>
    >>> classify((3, 1), (2, 3), 'p')
    <Layout.ROWT: 'transposed row'>
    >>> classify((2, 1), (2, 2), 'p')
    <Layout.COLUMN: 'column'>
    """
    (ms, ns) = grid
    (ma, na) = shape
    if (ma == 1) and (na == 1):
        return Layout.SCALAR
    if (ma == 1) and (na == ns):
        return Layout.ROW
    if (na == 1) and (ma == ms):
        return Layout.COLUMN
    if (na == 1) and (ma == ns):
        return Layout.ROWT
    if transcol and (ma == 1) and (na == ms):
        return Layout.COLUMNT
    if (ma == ms) and (na == ns):
        return Layout.MATRIX
    raise ShapeMismatch(name, shape, primary, grid)


def expand(arr, layout, grid):
    """Replicate a 2-D argument onto the grid according to its layout.

    Arguments:
        arr (array): The 2-D argument.
        layout (Layout): Its layout, from `classify`.
        grid (tuple of int): Shape (M, N) of the primary argument.

    Returns:
        out (array): A new array of shape (M, N).

    Examples
    --------
    >>> expand(np.array([[1.], [2.]]), Layout.COLUMN, (2, 3))
    array([[1., 1., 1.],
           [2., 2., 2.]])
    """
    (ms, ns) = grid
    if layout is Layout.SCALAR:
        out = np.full(grid, arr[0, 0])
    elif layout is Layout.ROW:
        out = np.repeat(arr, ms, axis=0)
    elif layout is Layout.COLUMN:
        out = np.repeat(arr, ns, axis=1)
    elif layout is Layout.ROWT:
        out = np.repeat(arr.T, ms, axis=0)
    elif layout is Layout.COLUMNT:
        out = np.repeat(arr.T, ns, axis=1)
    else:
        out = arr.copy()
    return out


def conform(arg, grid, name, primary='SP', transcol=False):
    """Expand an argument onto the grid of the primary argument.

    Arguments:
        arg (float, list or array): The argument.
        grid (tuple of int): Shape (M, N) of the primary argument.
        name (str): Name of the argument, used in error messages.
        primary (str, optional): Name of the primary argument (default 'SP').
        transcol (bool, optional): If True (default False), a 1xM vector is
            accepted as a transposed column vector.

    Returns:
        out (array): A new array of shape (M, N).

    Raises:
        ShapeMismatch: If the argument cannot be expanded onto the grid.

    Examples
    --------
    >>> conform([10., 20.], (3, 2), 'p')
    array([[10., 20.],
           [10., 20.],
           [10., 20.]])
    """
    arr = as2d(arg, name)
    layout = classify(arr.shape, grid, name, primary=primary,
                      transcol=transcol)
    out = expand(arr, layout, grid)
    return out


# Orientation
def orient(*arrs):
    """Turn single-row arrays into columns.

    Arguments:
        arr0, arr1, ... (array): 2-D arrays sharing one grid shape.

    Returns:
        arrs (list of array): The arrays, transposed if the grid has a single
            row.
        transposed (bool): Whether the arrays were transposed.
    """
    transposed = (arrs[0].shape[0] == 1)
    if transposed:
        arrs = [arr.T for arr in arrs]
    return (list(arrs), transposed)


def restore(out, shape, transposed, scalar=False):
    """Return a result to the orientation and shape of the primary argument.

    Arguments:
        out (array): The 2-D result.
        shape (tuple of int): Original shape of the primary argument.
        transposed (bool): Whether `orient` transposed the inputs.
        scalar (bool, optional): If True (default False), return a float.

    Returns:
        out (float or array): The result.
    """
    if transposed:
        out = out.T
    out = np.reshape(out, shape)
    if scalar:
        out = float(out)
    return out


# Main script: Run doctest
if __name__ == '__main__':
    import doctest
    doctest.testmod()
