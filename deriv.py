#!/usr/bin/env python3
"""Properties derived from the derivatives of specific volume.

This module combines the first and second derivatives of specific volume with
respect to Absolute Salinity and Conservative Temperature into derivatives of
the thermal expansion and haline contraction coefficients, and from those
into the cabbeling coefficient. Using the specific volume derivatives of the
kernel keeps a single source for every derivative of the equation of state.

When the kernel is a polynomial fit such as the 75-term expression, the
results are most accurate inside the 'oceanographic funnel'. Points outside
it are not flagged.

For details on cabbeling, see:
    IOC, SCOR and IAPSO, 2010: The international thermodynamic equation of
    seawater - 2010: Calculation and use of thermodynamic properties.
    Intergovernmental Oceanographic Commission, Manuals and Guides No. 56,
    UNESCO (English), 196 pp. Eqns. (3.9.2) and (P.4).
"""

# Import statements
import numpy as np
import aux
import bcast
import kern
import sanit
from errs import ShapeMismatch


# Input handling
def prepare(SA, CT, p):
    """Expand and check the inputs of an (SA, CT, p) calculation.

    Arguments:
        SA (float or array): Absolute Salinity in g kg-1.
        CT (float or array): Conservative Temperature in degrees Celsius.
        p (float or array): Sea pressure in dbar.

    Returns:
        SA, CT, p (array): 2-D copies on a common grid, turned into columns if
            the grid is a single row. Negative salinities are clamped to 0
            and pressure fill values replaced with NaN.
        shape (tuple of int): Original shape of SA.
        transposed (bool): Whether the arrays were turned into columns.

    Raises:
        ShapeMismatch: If SA and CT differ in shape, or p cannot be expanded
            to the shape of SA.
        RangeError: If any pressure is out of range.
    """
    shape = np.shape(SA)
    SA = bcast.as2d(SA, 'SA')
    CT = bcast.as2d(CT, 'CT')
    if CT.shape != SA.shape:
        raise ShapeMismatch('CT', CT.shape, 'SA', SA.shape)
    p = bcast.conform(p, SA.shape, 'p', primary='SA')
    ((SA, CT, p), transposed) = bcast.orient(SA, CT, p)
    p = sanit.sanitizepres(p)
    SA = sanit.clampsalt(SA)
    return (SA, CT, p, shape, transposed)


# Derived quantities
def calexpders(SA, CT, p, kernel):
    """Calculate expansion derivatives from prepared arrays."""
    (v_SA, v_CT, __) = kernel.specvol_first_derivatives(SA, CT, p)
    (v_SA_SA, v_SA_CT, v_CT_CT, __, __) = (
        kernel.specvol_second_derivatives(SA, CT, p))
    rho = kernel.rho(SA, CT, p)

    alpha_CT = rho*(v_CT_CT - rho*v_CT**2)
    alpha_SA = rho*(v_SA_CT - rho*v_SA*v_CT)
    beta_SA = -rho*(v_SA_SA - rho*v_SA**2)
    return (alpha_CT, alpha_SA, beta_SA)


def expansion_derivs(SA, CT, p, kernel=None):
    """Calculate derivatives of the expansion and contraction coefficients.

    With alpha = v_CT/v the thermal expansion coefficient and
    beta = -v_SA/v the haline contraction coefficient, calculate their
    derivatives with respect to Conservative Temperature and Absolute
    Salinity.

    SA and CT must have the same shape; p may be a scalar, a row vector
    (1xN), a column vector (Mx1) or an array (MxN), where SA is MxN.

    Arguments:
        SA (float or array): Absolute Salinity in g kg-1.
        CT (float or array): Conservative Temperature in degrees Celsius.
        p (float or array): Sea pressure in dbar.
        kernel (object, optional): Kernel providing the equation of state.
            If None (default), the default kernel of `kern` is used.

    Returns:
        alpha_CT (float or array): d(alpha)/d(CT) in K-2.
        alpha_SA (float or array): d(alpha)/d(SA) in K-1 (g kg-1)-1.
        beta_SA (float or array): d(beta)/d(SA) in (g kg-1)-2.
    """
    kernel = kern.getkernel(kernel, names=kern.EOSFUNCS)
    scalar = aux.isscalar(SA, CT, p)
    (SA, CT, p, shape, transposed) = prepare(SA, CT, p)
    ders = calexpders(SA, CT, p, kernel)
    ders = tuple(bcast.restore(np.asarray(der, dtype=float), shape,
                               transposed, scalar=scalar)
                 for der in ders)
    return ders


def cabbeling(SA, CT, p, kernel=None):
    """Calculate the cabbeling coefficient.

    Calculate the cabbeling coefficient of seawater with respect to
    Conservative Temperature,
        C = alpha_CT + (alpha/beta)*(2*alpha_SA - (alpha/beta)*beta_SA),
    from the Absolute Salinity, Conservative Temperature and sea pressure.
    Negative Absolute Salinity is treated as 0.

    SA and CT must have the same shape; p may be a scalar, a row vector
    (1xN), a column vector (Mx1) or an array (MxN), where SA is MxN.

    Arguments:
        SA (float or array): Absolute Salinity in g kg-1.
        CT (float or array): Conservative Temperature in degrees Celsius.
        p (float or array): Sea pressure in dbar (absolute pressure minus
            10.1325 dbar).
        kernel (object, optional): Kernel providing the equation of state.
            If None (default), the default kernel of `kern` is used.

    Returns:
        cabbeling (float or array): Cabbeling coefficient in K-2, with the
            shape of SA. A float if all inputs are scalars.

    Raises:
        ShapeMismatch: If SA and CT differ in shape, or p cannot be expanded
            to the shape of SA.
        RangeError: If any pressure is out of range.
    """
    kernel = kern.getkernel(kernel, names=kern.EOSFUNCS)
    scalar = aux.isscalar(SA, CT, p)
    (SA, CT, p, shape, transposed) = prepare(SA, CT, p)

    (alpha_CT, alpha_SA, beta_SA) = calexpders(SA, CT, p, kernel)
    alpha_on_beta = kernel.alpha_on_beta(SA, CT, p)
    cab = alpha_CT + alpha_on_beta*(2*alpha_SA - alpha_on_beta*beta_SA)

    cab = bcast.restore(np.asarray(cab, dtype=float), shape, transposed,
                        scalar=scalar)
    return cab


# Main script: Run doctest
if __name__ == '__main__':
    import doctest
    doctest.testmod()
