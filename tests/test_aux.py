import numpy as np
import pytest

import aux


def test_monomials_count():
    exps = aux.monomials((2, 1))
    assert len(exps) == 9
    assert exps[-1] == (0, 1, 1)
    assert all(i + j <= (2, 1)[k] for (i, j, k) in exps)


def test_poly1d_ders_array():
    z = np.array([0.0, 1.0, 2.0])
    (p, pz) = aux.poly1d_ders(z, (1.0, -2.0, 0.5), 1, zscale=2.0)
    np.testing.assert_allclose(p, 1.0 - 2.0 * z + 0.5 * z**2)
    np.testing.assert_allclose(pz, (-2.0 + z) / 2.0)


def test_poly3d_ders_matches_direct():
    # p = 1 + 2x + 3y + 4xy + 5z + 6xz (ijmaxs (2, 1) with zeros)
    coefs = (1.0, 2.0, 0.0, 3.0, 4.0, 0.0, 5.0, 6.0, 0.0)
    (x, y, z) = (np.array([0.5, 1.5]), np.array([2.0, -1.0]), np.array([0.1, 0.3]))
    ps = aux.poly3d_ders(x, y, z, coefs, (2, 1), 2)
    np.testing.assert_allclose(ps[0][0][0], 1 + 2 * x + 3 * y + 4 * x * y + 5 * z + 6 * x * z)
    np.testing.assert_allclose(ps[0][0][1], 2 + 4 * y + 6 * z)
    np.testing.assert_allclose(ps[0][1][0], 3 + 4 * x)
    np.testing.assert_allclose(ps[1][0][0], 5 + 6 * x)
    np.testing.assert_allclose(ps[0][1][1], 4.0)
    np.testing.assert_allclose(ps[1][0][1], 6.0)
    np.testing.assert_allclose(ps[0][0][2], 0.0)
    np.testing.assert_allclose(ps[2][0][0], 0.0)


def test_poly3d_ders_scaling():
    ps = aux.poly3d_ders(1.0, 1.0, 1.0, (0.0, 0.0, 0.0, 2.0), (1, 0), 1,
                         yscale=4.0, zscale=10.0)
    assert ps[0][1][0] == 0.0
    assert ps[1][0][0] == pytest.approx(0.2)


def test_poly3d_ders_bad_length():
    with pytest.raises(ValueError):
        aux.poly3d_ders(1.0, 1.0, 1.0, (1.0, 2.0), (1,), 1)
