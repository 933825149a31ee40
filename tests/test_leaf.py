import numpy as np
import pytest
from numpy.testing import assert_allclose

from TwoLeafLSM import conv, cst
from TwoLeafLSM.SPAC import vpsat, slope_vpsat, LH_water_vapour
from TwoLeafLSM.SPAC import radiation_conductance, bdn_layer_forced_conduct
from TwoLeafLSM.SPAC import bdn_layer_free_conduct, conductances
from TwoLeafLSM.SPAC import penman_leaf, leaf_energy_balance
from TwoLeafLSM.SPAC import photosynthesis_C3
from TwoLeafLSM.SPAC.leaf import arrhen, adjust_low_T, quad


# ======================================================================
# weather

def test_vpsat_at_freezing():

    assert_allclose(vpsat(0.), 0.61375)
    assert vpsat(30.) > vpsat(20.)


def test_slope_vpsat_positive_and_increasing():

    assert slope_vpsat(10.) > 0.
    assert slope_vpsat(30.) > slope_vpsat(10.)


def test_latent_heat_per_mole():

    assert_allclose(LH_water_vapour(0.), 2.501e6 * 18.e-3)
    assert LH_water_vapour(30.) < LH_water_vapour(0.)


# ======================================================================
# conductances

def test_radiation_conductance_increases_with_temperature():

    g = [radiation_conductance(T) for T in (0., 10., 20., 30., 40.)]

    assert np.all(np.diff(g) > 0.)


def test_forced_convection_null_in_still_air():

    assert bdn_layer_forced_conduct(25., 101325., 0., 0.02) == 0.
    assert bdn_layer_forced_conduct(25., 101325., -1., 0.02) == 0.
    assert bdn_layer_forced_conduct(25., 101325., 2., 0.02) > 0.


def test_free_convection_null_for_isothermal_leaf():

    assert bdn_layer_free_conduct(25., 25., 101325., 0.02) == 0.
    assert bdn_layer_free_conduct(25., 27., 101325., 0.02) > 0.

    # symmetrical in the sign of the leaf to air temperature difference
    assert_allclose(bdn_layer_free_conduct(25., 27., 101325., 0.02),
                    bdn_layer_free_conduct(25., 23., 101325., 0.02))


def test_conductances_in_series(p):

    gv, gh, gbh, gbc, gradn = conductances(p, p.Tair, 0.2)

    gbv = conv.GbvGbh * gbh
    gsv = conv.GsvGsc * 0.2

    assert_allclose(gv, gbv * gsv / (gbv + gsv))
    assert_allclose(gh, 2. * (gbh + gradn))
    assert_allclose(gbc, gbh / conv.GbhGbc)
    assert gv < min(gbv, gsv)


def test_conductances_closed_stomata_still_air(p):

    p.u = 0.
    gv, gh, gbh, gbc, gradn = conductances(p, p.Tair, 0.)

    assert gbh == p.gb_min
    assert_allclose(gbc, p.gb_min / conv.GbhGbc)
    assert gv == 0.
    assert_allclose(gh, 2. * (p.gb_min + gradn))


def test_conductances_without_still_air_limit(p):

    p.u = 0.
    p.gb_min = 0.
    gv, gh, gbh, __, gradn = conductances(p, p.Tair, 0.2)

    assert gbh == 0.
    assert gv == 0.
    assert_allclose(gh, 2. * gradn)  # radiative exchange remains


@pytest.mark.parametrize('u', [0., 0.05, 0.2])
def test_still_air_limit_bounds_leaf_surface(p, u):

    p.u = u

    for dT in (0., 1.e-4, 0.01, 0.5):
        Cs, dleaf, __, trans, __, __, __ = \
            leaf_energy_balance(p, p.Tair + dT, 0.2, 15., 800.)

        assert Cs >= p.CO2 - 15. * conv.GbhGbc / p.gb_min - 1.e-9
        assert Cs > 0.
        assert trans > 0.
        assert np.isfinite(dleaf)


# ======================================================================
# energy balance

def test_penman_leaf_no_conductance():

    assert penman_leaf(101325., 200., 1500., 25., 1., 0.) == (0., 0.)


def test_penman_leaf_drier_air_transpires_more():

    trans1, __ = penman_leaf(101325., 200., 1000., 25., 1., 0.1)
    trans2, __ = penman_leaf(101325., 200., 2000., 25., 1., 0.1)

    assert trans2 > trans1 > 0.


def test_energy_balance_still_air_isothermal_leaf(p):

    p.u = 0.
    p.gb_min = 0.
    Cs, dleaf, new_Tleaf, trans, rnet, LE, H = \
        leaf_energy_balance(p, p.Tair, 0.2, 10., 800.)

    assert (trans, LE, H) == (0., 0., 0.)
    assert Cs == p.CO2
    assert_allclose(dleaf, p.VPD * conv.kPa_2_Pa)
    assert np.isfinite(new_Tleaf)


def test_energy_balance_still_air_keeps_exchanging(p):

    p.u = 0.
    Cs, dleaf, new_Tleaf, trans, rnet, LE, H = \
        leaf_energy_balance(p, p.Tair, 0.2, 10., 800.)

    assert trans > 0.
    assert LE > 0.
    assert_allclose(Cs, p.CO2 - 10. * conv.GbhGbc / p.gb_min)


def test_energy_balance_surface_conditions(p):

    Cs, dleaf, new_Tleaf, trans, rnet, LE, H = \
        leaf_energy_balance(p, p.Tair, 0.2, 10., 800.)
    gv, gh, gbh, gbc, gradn = conductances(p, p.Tair, 0.2)

    assert_allclose(Cs, p.CO2 - 10. / gbc)
    assert_allclose(dleaf, trans * p.Patm * conv.kPa_2_Pa / gv)
    assert_allclose(trans, LE / LH_water_vapour(p.Tair))

    # damped move towards the balanced temperature
    Tdiff = (rnet - LE) / (cst.Cp * cst.Mair * gh)
    assert_allclose(new_Tleaf, p.Tair + Tdiff / 4.)


def test_energy_balance_more_light_warmer_leaf(p):

    __, __, T1, __, rnet1, __, __ = leaf_energy_balance(p, p.Tair, 0.05, 5.,
                                                         200.)
    __, __, T2, __, rnet2, __, __ = leaf_energy_balance(p, p.Tair, 0.05, 5.,
                                                         1500.)

    assert rnet2 > rnet1
    assert T2 > T1


# ======================================================================
# photosynthesis

def test_arrhenius_at_reference_temperature():

    assert_allclose(arrhen(60., 51560., 298.15, 25.), 60.)
    assert_allclose(arrhen(60., 51560., 298.15, 25., deltaS=650.,
                           Hd=200000.), 60.)
    assert arrhen(60., 51560., 298.15, 30.) > 60.


@pytest.mark.parametrize('Tleaf, expected', [(-5., 0.), (5., 50.),
                                             (20., 100.)])
def test_adjust_low_T(Tleaf, expected):

    assert_allclose(adjust_low_T(100., Tleaf), expected)


def test_quad_roots():

    # x**2 - 3x + 2
    assert_allclose(quad(1., -3., 2.), 2.)
    assert_allclose(quad(1., -3., 2., large_root=False), 1.)
    assert np.isnan(quad(1., 0., 1.))


def test_photosynthesis_in_the_dark_is_respiration(p):

    gsc, An = photosynthesis_C3(p, 2.9, 25., 0., 400., 1500.)

    assert An < 0.
    assert gsc >= p.g0


def test_photosynthesis_light_response(p):

    gsc1, An1 = photosynthesis_C3(p, 2.9, 25., 300., 400., 1500.)
    gsc2, An2 = photosynthesis_C3(p, 2.9, 25., 1500., 400., 1500.)

    assert An2 >= An1 > 0.
    assert gsc2 >= gsc1 > p.g0


def test_photosynthesis_stomata_close_in_dry_air(p):

    gsc1, __ = photosynthesis_C3(p, 2.9, 25., 1000., 400., 1000.)
    gsc2, __ = photosynthesis_C3(p, 2.9, 25., 1000., 400., 3000.)

    assert gsc2 < gsc1


def test_photosynthesis_without_capacity(p):

    p.modeljm = 0
    p.Vmax25 = 0.
    gsc, An = photosynthesis_C3(p, 2.9, 25., 1000., 400., 1500.)

    assert gsc == p.g0
    assert An == 0.
