#!/usr/bin/env python3
"""Domain validation and sanitization.

Problems with individual cells are corrected and the calculation continues:
blank-fill codes and implausible salinities become NaN, and negative
salinities are clamped to zero. Problems with a whole field stop the
calculation: any pressure, longitude or latitude outside its physical range
raises a `RangeError`. NaN cells are never out of range.

All functions return new arrays and leave their arguments untouched.
"""

# Import statements
import warnings
import numpy as np
from const import (PMIN, PMAX, LONGMIN, LONGMAX, LATMAX, LONGWRAP, PSHALLOW,
                   SPMAXSHALLOW, SPMAXDEEP, FILLSALT, FILLPOS)
from errs import RangeError


# Per-cell corrections
def fillnan(arr, codes):
    """Replace blank-fill codes with NaN.

    Arguments:
        arr (float or array): Values to check.
        codes (iterable of float): Fill codes, matched exactly on magnitude.

    Returns:
        out (array): Copy of `arr` with the fill codes replaced.

    Examples
    --------
    >>> fillnan([1., -99999., 999999.], (99999., 999999.))
    array([ 1., nan, nan])
    """
    out = np.array(arr, dtype=float)
    out[np.isin(np.abs(out), codes)] = np.nan
    return out


def wraplong(long):
    """Shift negative longitudes by 360 degrees.

    >>> wraplong([-10., 350., 0.])
    array([350., 350.,   0.])
    """
    out = np.array(long, dtype=float)
    out[out < 0] += LONGWRAP
    return out


def maskimplausible(SP, p):
    """Remove Practical Salinity values implausible at their pressure.

    A salinity above 120 at pressures below 100 dbar, or above 42 at deeper
    pressures, is taken to be a sensor or transcription fault and set to NaN.
    A RuntimeWarning reports how many cells were removed.

    Arguments:
        SP (array): Practical Salinity.
        p (array): Sea pressure in dbar, on the same grid as `SP`.

    Returns:
        out (array): Copy of `SP` with implausible values set to NaN.
    """
    out = np.array(SP, dtype=float)
    p = np.asarray(p, dtype=float)
    bad = (((p < PSHALLOW) & (out > SPMAXSHALLOW))
           | ((p >= PSHALLOW) & (out > SPMAXDEEP)))
    nbad = np.count_nonzero(bad)
    if nbad > 0:
        msg = (f'{nbad} Practical Salinity value(s) too large for their '
               'pressure were set to NaN')
        warnings.warn(msg, category=RuntimeWarning)
    out[bad] = np.nan
    return out


def clampsalt(salt):
    """Clamp negative salinities to zero, keeping NaN.

    >>> clampsalt([-5., 0., 35., np.nan])
    array([ 0.,  0., 35., nan])
    """
    out = np.array(salt, dtype=float)
    out[out < 0] = 0.
    return out


# Field checks
def checkrange(arr, lo, hi, field):
    """Check that every value of a field lies in [lo, hi].

    Arguments:
        arr (array): Values to check. NaN values are ignored.
        lo, hi (float): The valid range.
        field (str): Name of the field, used in the error.

    Returns None.

    Raises:
        RangeError: If any value lies outside the range.
    """
    if np.any((arr < lo) | (arr > hi)):
        raise RangeError(field, lo, hi)
    return None


def checkpres(p):
    """Check that sea pressure lies in [-1.5, 12000] dbar."""
    checkrange(p, PMIN, PMAX, 'pressure')


def checklong(long):
    """Check that longitude lies in [0, 360] degrees."""
    checkrange(long, LONGMIN, LONGMAX, 'longitude')


def checklat(lat):
    """Check that latitude lies in [-90, 90] degrees."""
    checkrange(lat, -LATMAX, LATMAX, 'latitude')


# Full pipelines
def sanitizepres(p):
    """Replace pressure fill codes with NaN and check the pressure range.

    Arguments:
        p (float or array): Sea pressure in dbar.

    Returns:
        p (array): Copy of the pressure with fill codes replaced.

    Raises:
        RangeError: If any pressure is out of range.
    """
    p = fillnan(p, FILLSALT)
    checkpres(p)
    return p


def sanitize(SP, p, long, lat):
    """Sanitize and validate the inputs of a Practical Salinity calculation.

    The steps are, in order: remove implausible salinities; replace the
    blank-fill codes in each field with NaN; shift negative longitudes by 360
    degrees; check the pressure, longitude and latitude ranges; and clamp
    negative salinities to zero. Applying this function to its own output
    changes nothing.

    Arguments:
        SP (array): Practical Salinity (PSS-78).
        p (array): Sea pressure in dbar.
        long (array): Longitude in degrees east.
        lat (array): Latitude in degrees north.
        All arguments must already share one grid.

    Returns:
        SP, p, long, lat (array): Sanitized copies of the inputs.

    Raises:
        RangeError: If any pressure, longitude or latitude is out of range.

    Examples
    --------
    >>> out = sanitize([[-5., 35.]], [[0., 99999.]], [[-10., 9999.]],
    ...                [[4., 4.]])
    >>> [arr.tolist() for arr in out]  #doctest: +NORMALIZE_WHITESPACE
    [[[0.0, 35.0]], [[0.0, nan]], [[350.0, nan]], [[4.0, 4.0]]]
    """
    SP = maskimplausible(SP, p)
    SP = fillnan(SP, FILLSALT)
    p = fillnan(p, FILLSALT)
    long = wraplong(fillnan(long, FILLPOS))
    lat = fillnan(lat, FILLPOS)
    checkpres(p)
    checklong(long)
    checklat(lat)
    SP = clampsalt(SP)
    return (SP, p, long, lat)


# Main script: Run doctest
if __name__ == '__main__':
    import doctest
    doctest.testmod()
