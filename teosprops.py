#!/usr/bin/env python3
"""Derived thermodynamic properties of seawater (TEOS-10).

This module collects the user functions of the package:

    deltaSA_from_SP(SP, p, long, lat): Absolute Salinity Anomaly, g kg-1.
    cabbeling(SA, CT, p): cabbeling coefficient, K-2.
    expansion_derivs(SA, CT, p): derivatives of the thermal expansion and
        haline contraction coefficients.

Each accepts scalars, vectors or 2-D arrays, expands the auxiliary arguments
onto the shape of the salinity argument, screens the inputs, and evaluates
the thermodynamic primitives through a kernel; by default the Gibbs SeaWater
toolbox `gsw`. Use `setkernel` to change the default, or pass `kernel=` to a
single call.

For details on TEOS-10, see:
    IOC, SCOR and IAPSO, 2010: The international thermodynamic equation of
    seawater - 2010: Calculation and use of thermodynamic properties.
    Intergovernmental Oceanographic Commission, Manuals and Guides No. 56,
    UNESCO (English), 196 pp. Available from http://www.TEOS-10.org
"""

# Import statements
from sal import deltaSA_from_SP
from deriv import cabbeling, expansion_derivs
from kern import PolyKernel, getkernel, setkernel
from errs import ShapeMismatch, RangeError

__all__ = ['deltaSA_from_SP', 'cabbeling', 'expansion_derivs', 'PolyKernel',
           'getkernel', 'setkernel', 'ShapeMismatch', 'RangeError']
