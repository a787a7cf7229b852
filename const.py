#!/usr/bin/env python3
"""Constants in the seawater property routines.

Valid ranges, blank-fill codes and the thresholds used to screen Practical
Salinity are collected here so the validation and property modules share a
single definition.
"""

# Reference values
SAL0 = 35.16504  # Salinity of KCl-normalized seawater, g kg-1
UPS = SAL0 / 35.  # Reference Salinity per unit Practical Salinity, g kg-1
SRED = SAL0 * 40./35.  # Reducing salinity, g kg-1
TRED = 40.  # Reducing temperature, deg C
PRED = 1e4  # Reducing pressure, dbar
DBAR2PA = 1e4  # Conversion factor, Pa/dbar
DTASCMP = 24.  # Salinity offset for compressible formulation, g kg-1

# Valid ranges
PMIN, PMAX = -1.5, 12000.  # Sea pressure, dbar
LONGMIN, LONGMAX = 0., 360.  # Longitude, degrees east
LATMAX = 90.  # Absolute latitude, degrees
LONGWRAP = 360.  # Added once to negative longitudes

# Practical Salinity screening
PSHALLOW = 100.  # Pressure separating the two limits, dbar
SPMAXSHALLOW = 120.  # Largest plausible SP above PSHALLOW
SPMAXDEEP = 42.  # Largest plausible SP at or below PSHALLOW

# Blank-fill codes, matched on magnitude
FILLSALT = (99999., 999999.)  # Practical Salinity and pressure
FILLPOS = (9999., 99999.)  # Longitude and latitude
