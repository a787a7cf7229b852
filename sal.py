#!/usr/bin/env python3
"""Absolute Salinity Anomaly.

This module calculates the Absolute Salinity Anomaly, the difference between
Absolute Salinity and Reference Salinity. Reference Salinity is a fixed
scaling of Practical Salinity that represents seawater of standard
composition; Absolute Salinity adds a correction for the composition of
seawater at a given position, taken from the global anomaly data used by the
kernel's `SA_from_SP`.

For details, see:
    McDougall, T.J., D.R. Jackett, F.J. Millero, R. Pawlowicz and
    P.M. Barker, 2012: A global algorithm for estimating Absolute Salinity.
    Ocean Science, 8, 1117-1128.
"""

# Import statements
import numpy as np
import aux
import bcast
import kern
import sanit


def deltaSA_from_SP(SP, p, long, lat, kernel=None):
    """Calculate the Absolute Salinity Anomaly from Practical Salinity.

    Calculate the Absolute Salinity Anomaly from the Practical Salinity,
    sea pressure and position. Negative Practical Salinity is treated as 0.

    The pressure, longitude and latitude may be scalars, row vectors (1xN),
    column vectors (Mx1) or arrays (MxN), where SP is MxN; see `bcast` for
    the full rules. Blank-fill values (99999, 999999 for SP and p; 9999,
    99999 for long and lat) and salinities implausible at their pressure are
    treated as missing and give NaN.

    Arguments:
        SP (float or array): Practical Salinity (PSS-78).
        p (float or array): Sea pressure in dbar (absolute pressure minus
            10.1325 dbar).
        long (float or array): Longitude in degrees east, either
            [0, 360] or [-180, 180].
        lat (float or array): Latitude in degrees north, [-90, 90].
        kernel (object, optional): Kernel providing `SA_from_SP` and
            `SR_from_SP`. If None (default), the default kernel of `kern` is
            used.

    Returns:
        deltaSA (float or array): Absolute Salinity Anomaly in g kg-1, with
            the shape of SP. A float if all inputs are scalars.

    Raises:
        ShapeMismatch: If p, long or lat cannot be expanded to the shape of
            SP.
        RangeError: If any pressure, longitude or latitude is out of range.
    """
    kernel = kern.getkernel(kernel, names=kern.SALTFUNCS)
    scalar = aux.isscalar(SP, p, long, lat)
    shape = np.shape(SP)

    # Expand everything onto the grid of SP
    SP = bcast.as2d(SP, 'SP')
    grid = SP.shape
    p = bcast.conform(p, grid, 'p')
    lat = bcast.conform(lat, grid, 'lat')
    long = bcast.conform(long, grid, 'long', transcol=True)
    ((SP, p, long, lat), transposed) = bcast.orient(SP, p, long, lat)

    # Remove bad values and check ranges
    (SP, p, long, lat) = sanit.sanitize(SP, p, long, lat)

    # Calculate the anomaly
    SA = kernel.SA_from_SP(SP, p, long, lat)
    SR = kernel.SR_from_SP(SP)
    deltaSA = np.asarray(SA - SR, dtype=float)
    deltaSA = bcast.restore(deltaSA, shape, transposed, scalar=scalar)
    return deltaSA


# Main script: Run doctest
if __name__ == '__main__':
    import doctest
    doctest.testmod()
