import types

import gsw
import numpy as np
import pytest

import deriv
import kern
from errs import RangeError, ShapeMismatch

# Quadratic specific volume in (SA, CT), independent of pressure
A, B, C, D, E, F = 9.7e-4, -7.4e-7, 1.6e-7, 5.0e-9, -1.5e-9, 2.0e-10


def specvol(SA, CT, p):
    return A + B * SA + C * CT + D * CT**2 + E * SA * CT + F * SA**2 + 0 * p


def first(SA, CT, p):
    v_SA = B + E * CT + 2 * F * SA + 0 * p
    v_CT = C + 2 * D * CT + E * SA + 0 * p
    return (v_SA, v_CT, 0 * p)


def second(SA, CT, p):
    ones = np.ones(np.broadcast(SA, CT, p).shape)
    return (2 * F * ones, E * ones, 2 * D * ones, 0 * ones, 0 * ones)


def alpha_on_beta(SA, CT, p):
    (v_SA, v_CT, __) = first(SA, CT, p)
    return -v_CT / v_SA


QUAD = types.SimpleNamespace(
    rho=lambda SA, CT, p: 1 / specvol(SA, CT, p),
    alpha_on_beta=alpha_on_beta,
    specvol_first_derivatives=first,
    specvol_second_derivatives=second,
)


def alpha(SA, CT):
    return first(SA, CT, 0.0)[1] / specvol(SA, CT, 0.0)


def beta(SA, CT):
    return -first(SA, CT, 0.0)[0] / specvol(SA, CT, 0.0)


SA = np.array([[34.0, 35.0, 36.0], [30.0, 33.0, 37.5]])
CT = np.array([[2.0, 10.0, 20.0], [5.0, 15.0, 28.0]])


def test_expansion_derivs_match_finite_differences():
    h = 1e-4
    (alpha_CT, alpha_SA, beta_SA) = deriv.expansion_derivs(SA, CT, 0.0, kernel=QUAD)
    fd_alpha_CT = (alpha(SA, CT + h) - alpha(SA, CT - h)) / (2 * h)
    fd_alpha_SA = (alpha(SA + h, CT) - alpha(SA - h, CT)) / (2 * h)
    fd_beta_SA = (beta(SA + h, CT) - beta(SA - h, CT)) / (2 * h)
    np.testing.assert_allclose(alpha_CT, fd_alpha_CT, rtol=1e-6)
    np.testing.assert_allclose(alpha_SA, fd_alpha_SA, rtol=1e-6)
    np.testing.assert_allclose(beta_SA, fd_beta_SA, rtol=1e-6)


def test_cabbeling_combination():
    (alpha_CT, alpha_SA, beta_SA) = deriv.expansion_derivs(SA, CT, 0.0, kernel=QUAD)
    ratio = alpha_on_beta(SA, CT, 0.0)
    expected = alpha_CT + ratio * (2 * alpha_SA - ratio * beta_SA)
    np.testing.assert_allclose(deriv.cabbeling(SA, CT, 0.0, kernel=QUAD), expected)


def test_cabbeling_matches_gsw():
    p = np.array([[0.0, 500.0, 1000.0], [10.0, 2000.0, 50.0]])
    np.testing.assert_allclose(
        deriv.cabbeling(SA, CT, p), gsw.cabbeling(SA, CT, p), rtol=1e-9
    )


def test_cabbeling_reference_point():
    cab = deriv.cabbeling(35.0, 10.0, 0.0)
    assert isinstance(cab, float)
    assert 1e-6 < cab < 1e-4
    assert deriv.cabbeling(35.0, 10.0, 0.0) == cab


def test_cabbeling_negative_salinity_clamped():
    np.testing.assert_allclose(
        deriv.cabbeling([-1.0], [10.0], 0.0), deriv.cabbeling([0.0], [10.0], 0.0)
    )


def test_cabbeling_nan_propagates():
    cab = deriv.cabbeling([35.0, np.nan], [10.0, 10.0], [0.0, 0.0])
    assert np.isfinite(cab[0])
    assert np.isnan(cab[1])


def test_cabbeling_pressure_fill_value():
    cab = deriv.cabbeling([35.0, 35.0], [10.0, 10.0], [0.0, 99999.0])
    assert np.isnan(cab[1])


def test_cabbeling_scalar_pressure_equivalent():
    scalar = deriv.cabbeling(SA, CT, 250.0)
    full = deriv.cabbeling(SA, CT, np.full(SA.shape, 250.0))
    np.testing.assert_array_equal(scalar, full)


def test_cabbeling_row_pressure():
    p = np.array([0.0, 1000.0, 2000.0])
    cab = deriv.cabbeling(SA, CT, p)
    assert cab.shape == SA.shape
    np.testing.assert_allclose(cab[1], gsw.cabbeling(SA[1], CT[1], p), rtol=1e-9)


def test_cabbeling_transpose_symmetry():
    row = deriv.cabbeling(SA[:1], CT[:1], [[0.0, 100.0, 200.0]])
    col = deriv.cabbeling(SA[:1].T, CT[:1].T, [[0.0], [100.0], [200.0]])
    assert row.shape == (1, 3)
    assert col.shape == (3, 1)
    np.testing.assert_allclose(row, col.T)


def test_cabbeling_shape_errors():
    with pytest.raises(ShapeMismatch) as excinfo:
        deriv.cabbeling(SA, CT[:, :2], 0.0)
    assert excinfo.value.name == "CT"
    with pytest.raises(ShapeMismatch) as excinfo:
        deriv.cabbeling(SA, CT, [0.0, 1.0])
    assert excinfo.value.name == "p"
    assert excinfo.value.primary == "SA"


def test_cabbeling_pressure_range():
    with pytest.raises(RangeError) as excinfo:
        deriv.cabbeling([35.0], [10.0], [-5.0])
    assert excinfo.value.field == "pressure"


def test_cabbeling_arity():
    with pytest.raises(TypeError):
        deriv.cabbeling(35.0, 10.0)


def test_cabbeling_with_polykernel():
    poly = kern.PolyKernel(
        (0.0, -4.5e-5),
        (9.6e-4, 1.2e-5, -3.1e-5, 2.4e-5, 1.1e-5, 7.0e-6, 1.5e-6, -2.0e-7, 6.0e-7),
        (2, 1),
    )
    cab = deriv.cabbeling(SA, CT, 100.0, kernel=poly)
    assert cab.shape == SA.shape
    assert np.all(np.isfinite(cab))


def test_cabbeling_does_not_mutate_inputs():
    SA0 = np.array([[-1.0, 35.0]])
    p0 = np.array([[99999.0, 0.0]])
    deriv.cabbeling(SA0, [[10.0, 10.0]], p0)
    assert SA0[0, 0] == -1.0
    assert p0[0, 0] == 99999.0
