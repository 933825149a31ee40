import numpy as np
import pytest
from numpy.testing import assert_allclose

from TwoLeafLSM.SPAC import calculate_zenith_angle, get_diffuse_frac
from TwoLeafLSM.SPAC import absorbed_radiation_2_leaves
from TwoLeafLSM.SPAC import canopy_nitrogen, top_of_canopy_n


def test_zenith_angle_day_and_night(p):

    cos_midnight, elev_midnight = calculate_zenith_angle(p, 180., 0)
    cos_noon, elev_noon = calculate_zenith_angle(p, 180., 24)

    assert elev_midnight < 0.
    assert elev_noon > 0.
    assert -1. <= cos_midnight < 0. < cos_noon <= 1.


def test_zenith_angle_southern_summer_higher_sun(p):

    __, elev_winter = calculate_zenith_angle(p, 180., 24)
    __, elev_summer = calculate_zenith_angle(p, 355., 24)

    assert elev_summer > elev_winter


def test_diffuse_frac_sun_down():

    assert get_diffuse_frac(180., -0.2, 0.) == 1.
    assert get_diffuse_frac(180., 0., 100.) == 1.


@pytest.mark.parametrize('par', [10., 200., 800., 1500., 2000.])
def test_diffuse_frac_bounded(par):

    diffuse_frac = get_diffuse_frac(180., 0.6, par)

    assert 0. <= diffuse_frac <= 1.


def test_diffuse_frac_clearer_sky_more_direct():

    assert get_diffuse_frac(180., 0.6, 1500.) < get_diffuse_frac(180., 0.6,
                                                                 100.)


def test_absorbed_radiation_sun_down(p):

    assert absorbed_radiation_2_leaves(p, 500., 1., -0.1, -0.1) == \
        (0., 0., 0., 0.)


def test_absorbed_radiation_no_leaves(p):

    p.LAI = 0.

    assert absorbed_radiation_2_leaves(p, 500., 0.3, 0.8, 0.7) == \
        (0., 0., 0., 0.)


def test_absorbed_radiation_partition(p):

    apar_sun, apar_sha, sunlit_lai, shaded_lai = \
        absorbed_radiation_2_leaves(p, 1500., 0.3, 0.8, np.sin(0.8))

    assert_allclose(sunlit_lai + shaded_lai, p.LAI)
    assert 0. < sunlit_lai < p.LAI
    assert apar_sun > apar_sha > 0.

    # no more is absorbed than is incident
    assert apar_sun * sunlit_lai + apar_sha * shaded_lai < 1500.


def test_canopy_nitrogen(p):

    leafn = p.shootnc * p.cfracts / p.sla * 1000.
    n_sun, n_sha = canopy_nitrogen(p, 1.2, 0.8)

    assert_allclose(n_sun, leafn * 1.2)
    assert_allclose(n_sha, leafn * 0.8)


def test_canopy_nitrogen_no_leaves(p):

    p.LAI = 0.

    assert canopy_nitrogen(p, 0., 0.) == (0., 0.)
    assert top_of_canopy_n(p, 3.) == 0.


def test_top_of_canopy_n_larger_than_mean(p):

    assert top_of_canopy_n(p, 3.) > 3. / p.LAI
