#!/usr/bin/env python3
"""Thermodynamic kernels.

The property routines never evaluate the equation of state themselves. They
call the primitive functions of a "kernel": any object (a module or a class
instance) providing

    SA_from_SP(SP, p, long, lat) -> SA
    SR_from_SP(SP) -> SR
    rho(SA, CT, p) -> rho
    alpha_on_beta(SA, CT, p) -> alpha/beta
    specvol_first_derivatives(SA, CT, p) -> (v_SA, v_CT, v_p)
    specvol_second_derivatives(SA, CT, p)
        -> (v_SA_SA, v_SA_CT, v_CT_CT, v_SA_p, v_CT_p)

All of these act element-wise, preserve shape and propagate NaN. The Gibbs
SeaWater toolbox `gsw` provides them directly and is the default kernel.

`PolyKernel` builds a kernel from a polynomial fit of specific volume, in the
form used by Roquet et al. (2015):

    v = v0(phi) + P(sig, tau, phi),
    sig = ((SA + DTASCMP)/SRED)**.5, tau = CT/TRED, phi = p/PRED.

For details on the polynomial used, see:
    Roquet, F., Madec, G., McDougall, T. J., Barker, P. M., 2015: Accurate
    polynomial expressions for the density and specific volume of seawater
    using the TEOS-10 standard. Ocean Modelling, 90, 29-43.
"""

# Import statements
import numpy as np
import gsw
import aux
from const import UPS, SRED, TRED, PRED, DBAR2PA, DTASCMP

# Names of the kernel functions used by each calculation
SALTFUNCS = ('SA_from_SP', 'SR_from_SP')
EOSFUNCS = ('rho', 'alpha_on_beta', 'specvol_first_derivatives',
            'specvol_second_derivatives')
KERNELFUNCS = SALTFUNCS + EOSFUNCS

# Kernel used when none is given
KERNEL = gsw


# Kernel selection
def checkkernel(kernel, names=KERNELFUNCS):
    """Check that a kernel provides the functions needed.

    Arguments:
        kernel (object): The kernel to check.
        names (iterable of str, optional): Names of the required functions
            (default `KERNELFUNCS`).

    Returns:
        kernel (object): The same kernel.

    Raises:
        TypeError: If any of the functions is missing or not callable.
    """
    missing = [name for name in names
               if not callable(getattr(kernel, name, None))]
    if missing:
        raise TypeError(
            f'Kernel {kernel!r} lacks the function(s) {", ".join(missing)}')
    return kernel


def getkernel(kernel=None, names=KERNELFUNCS):
    """Return the given kernel, or the default one if None."""
    if kernel is None:
        kernel = KERNEL
    return checkkernel(kernel, names=names)


def setkernel(kernel):
    """Set the default kernel.

    Arguments:
        kernel (object): The new default kernel. It must provide all the
            functions in `KERNELFUNCS`.

    Returns:
        prev (object): The previous default kernel, so that it can be
            restored.
    """
    global KERNEL
    prev = KERNEL
    KERNEL = checkkernel(kernel)
    return prev


# Polynomial kernel
class PolyKernel:
    """Kernel built from a polynomial fit of specific volume.

    Arguments:
        coefs0 (iterable of float): Coefficients of the reference profile
            v0(phi) in m3 kg-1, from lowest degree to highest.
        coefs (iterable of float): Coefficients of the anomaly P(sig,tau,phi)
            in m3 kg-1, ordered as in `aux.monomials`.
        ijmaxs (iterable of int): Maximum degree in (sig, tau) for each
            degree of phi.
        saar (callable, optional): Function saar(p, long, lat) returning the
            Absolute Salinity Anomaly Ratio. If None (default), the ratio is
            zero and Absolute Salinity equals Reference Salinity.

    Raises:
        ValueError: If the number of coefficients does not match `ijmaxs`.
    """

    def __init__(self, coefs0, coefs, ijmaxs, saar=None):
        self.coefs0 = tuple(float(c) for c in coefs0)
        self.coefs = tuple(float(c) for c in coefs)
        self.ijmaxs = tuple(int(ij) for ij in ijmaxs)
        self.saar = saar
        nterms = len(aux.monomials(self.ijmaxs))
        if len(self.coefs) != nterms:
            raise ValueError(
                f'Expected {nterms} coefficients for degrees {self.ijmaxs}, '
                f'got {len(self.coefs)}')

    @classmethod
    def fromnpz(cls, path, name='C75', saar=None):
        """Load the coefficients from a numpy archive.

        The archive must hold the arrays 'CMP' (reference profile), `name`
        (anomaly coefficients) and 'ijmaxs_' + `name`.
        """
        with np.load(path) as cdata:
            coefs0, coefs, ijmaxs = [
                cdata[key] for key in ('CMP', name, f'ijmaxs_{name}')]
        return cls(coefs0, coefs, ijmaxs, saar=saar)

    def __repr__(self):
        return (f'PolyKernel(<{len(self.coefs)} terms>, '
                f'ijmaxs={self.ijmaxs})')

    def _ders(self, SA, CT, p, dmax):
        # Reduced variables; derivatives come back per deg C and per dbar
        sig = ((np.asarray(SA, dtype=float) + DTASCMP)/SRED)**.5
        tau = np.asarray(CT, dtype=float) / TRED
        phi = np.asarray(p, dtype=float) / PRED
        v0s = aux.poly1d_ders(phi, self.coefs0, dmax, zscale=PRED)
        ps = aux.poly3d_ders(sig, tau, phi, self.coefs, self.ijmaxs, dmax,
                             yscale=TRED, zscale=PRED)
        dsig = 1/(2*sig*SRED)
        return (sig, dsig, v0s, ps)

    # Salinity functions
    def SR_from_SP(self, SP):
        """Reference Salinity in g kg-1 from Practical Salinity."""
        return UPS * np.asarray(SP, dtype=float)

    def SA_from_SP(self, SP, p, long, lat):
        """Absolute Salinity in g kg-1 from Practical Salinity.

        Calculated as SR*(1 + SAAR). The result is NaN wherever the pressure
        or position is NaN, even when no anomaly function is set.
        """
        SR = self.SR_from_SP(SP)
        if self.saar is None:
            ratio = 0. * (np.asarray(p, dtype=float) + long + lat)
        else:
            ratio = self.saar(p, long, lat)
        SA = SR * (1 + ratio)
        return SA

    # Equation of state
    def specvol(self, SA, CT, p):
        """Specific volume in m3 kg-1."""
        (__, __, v0s, ps) = self._ders(SA, CT, p, 0)
        v = v0s[0] + ps[0][0][0]
        return v

    def rho(self, SA, CT, p):
        """In-situ density in kg m-3."""
        return 1/self.specvol(SA, CT, p)

    def specvol_first_derivatives(self, SA, CT, p):
        """First derivatives of specific volume.

        Returns:
            v_SA (float or array): In m3 kg-1 (g kg-1)-1.
            v_CT (float or array): In m3 kg-1 K-1.
            v_p (float or array): In m3 kg-1 Pa-1.
        """
        (__, dsig, v0s, ps) = self._ders(SA, CT, p, 1)
        v_SA = ps[0][0][1] * dsig
        v_CT = ps[0][1][0]
        v_p = (v0s[1] + ps[1][0][0]) / DBAR2PA
        return (v_SA, v_CT, v_p)

    def specvol_second_derivatives(self, SA, CT, p):
        """Second derivatives of specific volume.

        Returns:
            v_SA_SA, v_SA_CT, v_CT_CT, v_SA_p, v_CT_p (float or array): The
                derivatives, with pressure derivatives per Pa.
        """
        (sig, dsig, __, ps) = self._ders(SA, CT, p, 2)
        # d2(sig)/dSA2 = -dsig**2/sig
        v_SA_SA = (ps[0][0][2] - ps[0][0][1]/sig) * dsig**2
        v_SA_CT = ps[0][1][1] * dsig
        v_CT_CT = ps[0][2][0]
        v_SA_p = ps[1][0][1] * dsig / DBAR2PA
        v_CT_p = ps[1][1][0] / DBAR2PA
        return (v_SA_SA, v_SA_CT, v_CT_CT, v_SA_p, v_CT_p)

    def alpha_on_beta(self, SA, CT, p):
        """Ratio of thermal expansion to haline contraction, g kg-1 K-1."""
        (v_SA, v_CT, __) = self.specvol_first_derivatives(SA, CT, p)
        return -v_CT / v_SA


# Main script: Run doctest
if __name__ == '__main__':
    import doctest
    doctest.testmod()
