#!/usr/bin/env python3
"""Module for mathematical functions.

This module isolates the mathematical helpers used by the property routines:
detecting scalar inputs, and evaluating polynomials in 1 and 3 variables
together with their derivatives. The polynomials are stored as flat
coefficient sequences, ordered from lowest degree to highest, the same layout
used for the specific volume fits of Roquet et al. (2015).
"""

# Import statements
import numpy as np


# Scalar functions
def isscalar(*args):
    """Determine whether a collection of objects are all scalars.

    Arguments:
        arg0, arg1, ... (float, list or array): The elements to be tested.

    Returns:
        scalar (bool): True if no element has any array dimensions.

    Examples
    --------
    >>> isscalar(1., 2)
    True
    >>> isscalar(1., [2.])
    False
    """
    scalar = all(np.ndim(arg) == 0 for arg in args)
    return scalar


def fallfact(n, d):
    """Calculate the falling factorial n*(n-1)*...*(n-d+1)."""
    f = 1
    for m in range(d):
        f *= n-m
    return f


# Polynomials
def monomials(ijmaxs):
    """List the exponents of each term of a 3d polynomial.

    For each degree k in `z`, every term with degrees (i, j) in (`x`, `y`)
    such that i+j <= ijmaxs[k] is present. Terms are listed with the degree
    in `x` changing first, followed by `y` and then `z`:
        000 100 200 010 110 020 001 101 011 ...

    Arguments:
        ijmaxs (iterable of int): Maximum degree of (x,y) for each degree
            of z.

    Returns:
        exps (list of tuple of int): The exponents (i, j, k) of each term.

    Examples
    --------
    >>> monomials((1, 0))
    [(0, 0, 0), (1, 0, 0), (0, 1, 0), (0, 0, 1)]
    """
    exps = list()
    for (k, ijmax) in enumerate(ijmaxs):
        for j in range(ijmax+1):
            for i in range(ijmax-j+1):
                exps.append((i, j, k))
    return exps


def poly1d_ders(z, coefs, dmax, zscale=1.):
    """Evaluate a 1d polynomial with multiple derivatives.

    Arguments:
        z (float or array): Point(s) to evaluate the polynomial at.
        coefs (iterable of float): Coefficients of the polynomial, from lowest
            degree to highest.
        dmax (int >= 0): Highest derivative to take with respect to z.
        zscale (float, optional): Amount to scale derivatives by (default 1.).
            Useful when calculating physical derivatives.

    Returns:
        ps (length (dmax+1) list of float or array): Value of the polynomial
            and its derivatives at the given point(s).

    Examples
    --------
    >>> poly1d_ders(2., (1., 2., 3.), 2)
    [17.0, 14.0, 6.0]
    """
    scalar = isscalar(z)
    z = np.asarray(z, dtype=float)
    ps = list()
    for dz in range(dmax+1):
        p = np.zeros(z.shape)
        for (n, coef) in enumerate(coefs):
            if n < dz:
                continue
            p += coef * fallfact(n, dz) * z**(n-dz)
        p /= zscale**dz
        ps.append(float(p) if scalar else p)
    return ps


def poly3d_der(x, y, z, coefs, ijmaxs, dx, dy, dz,
               xscale=1., yscale=1., zscale=1.):
    """Evaluate one derivative of a 3d polynomial.

    The points can be given as numpy arrays as long as they can be broadcast
    against each other; the output has this shape.

    Arguments:
        x, y, z (float or array): Value(s) of each variable at which to
            evaluate the polynomial.
        coefs (iterable of float): Coefficients of the polynomial, in the
            order given by `monomials`.
        ijmaxs (iterable of int): Maximum degree in `x` and `y` for each degree
            of `z`.
        dx, dy, dz (int >= 0): Number of derivatives to take with respect to
            each variable.
        xscale, yscale, zscale (float, optional): Amount to scale each
            derivative by (default 1.).

    Returns:
        p (float or array): Value of the derivative at the given point(s).
    """
    scalar = isscalar(x, y, z)
    out = np.broadcast(x, y, z)
    p = np.zeros(out.shape)
    for (coef, (i, j, k)) in zip(coefs, monomials(ijmaxs)):
        if (i < dx) or (j < dy) or (k < dz):
            continue
        fact = fallfact(i, dx) * fallfact(j, dy) * fallfact(k, dz)
        p += coef * fact * x**(i-dx) * y**(j-dy) * z**(k-dz)
    p /= xscale**dx * yscale**dy * zscale**dz
    if scalar:
        p = float(p)
    return p


def poly3d_ders(x, y, z, coefs, ijmaxs, dmax, xscale=1., yscale=1., zscale=1.):
    """Evaluate a 3d polynomial with multiple derivatives.

    Evaluate a polynomial in three variables with the given coefficients at the
    given points, as well as the derivatives up to a specified maximum.

    Arguments:
        x, y, z (float or array): Value(s) of each variable at which to
            evaluate the polynomial.
        coefs (iterable of float): Coefficients of the polynomial, in the
            order given by `monomials`.
        ijmaxs (iterable of int): Maximum degree in `x` and `y` for each degree
            of `z`.
        dmax (int >= 0): Maximum number of derivatives to take.
        xscale, yscale, zscale (float, optional): Amount to scale each
            derivative by (default 1.).

    Returns:
        ps (list of list of list of float or array): Value of the polynomial
            and its derivatives, with the x-derivative varying first,
            followed by the y- and z-derivatives. For dmax=2, the structure
            returned is
                ps = [[[p, px, pxx], [py, pxy], [pyy]],
                      [[pz, pxz], [pyz]], [[pzz]]].

    Raises:
        ValueError: If the number of coefficients does not match `ijmaxs`.

    Examples
    --------
    >>> poly3d_ders(1., 2., .5, (1., 2., 3.), (1,), 1)
    [[[9.0, 2.0], [3.0]], [[0.0]]]
    """
    nterms = len(monomials(ijmaxs))
    if len(coefs) != nterms:
        raise ValueError(
            f'Expected {nterms} coefficients for degrees {tuple(ijmaxs)}, '
            f'got {len(coefs)}')
    ps = [[[poly3d_der(x, y, z, coefs, ijmaxs, dx, dy, dz,
                       xscale=xscale, yscale=yscale, zscale=zscale)
            for dx in range(dmax+1-dz-dy)]
           for dy in range(dmax+1-dz)]
          for dz in range(dmax+1)]
    return ps


# Main script: Run doctest
if __name__ == '__main__':
    import doctest
    doctest.testmod()
