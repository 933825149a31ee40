# -*- coding: utf-8 -*-

"""
Simple atmospheric functions needed by the leaf energy balance: the
saturation vapour pressure of water and its slope, the latent heat of
vaporisation, the psychrometric constant, and the apparent emissivity
of the atmosphere.

This file is part of the TwoLeafLSM model.

Please refer to the terms of the MIT License, which you should have
received along with the TwoLeafLSM.

References:
-----------
* Allen et al. (1998). Crop evapotranspiration - Guidelines for
  computing crop water requirements - FAO Irrigation and drainage paper
  56. FAO, Rome.
* Jones, H. G. (1992). Plants and microclimate: a quantitative approach
  to environmental plant physiology. Cambridge university press.
* Leuning et al. (1995). Leaf nitrogen, photosynthesis, conductance and
  transpiration: scaling from leaves to canopies. Plant, Cell &
  Environment, 18(10), 1183-1200.

"""

__title__ = "Atmospheric properties"
__author__ = "TwoLeafLSM developers"
__version__ = "1.0 (14.10.2026)"


# ======================================================================

# general modules
import numpy as np  # array manipulations, math operators

# own modules
from TwoLeafLSM import conv, cst  # unit converter & general constants


# ======================================================================

def vpsat(T):

    """
    Calculates the saturation vapour pressure at a specific temperature
    T as given in Jones, 1992 (p 110).

    Arguments:
    ----------
    T: array or float
        temperature [degC]

    Returns:
    --------
    The saturation vapour pressure [kPa] at T.

    """

    return 0.61375 * np.exp(17.502 * T / (240.97 + T))


def slope_vpsat(T):

    """
    Calculates the slope of the saturation vapour pressure curve at
    temperature T, following eq 13 of Allen et al. (1998).

    Arguments:
    ----------
    T: array or float
        temperature [degC]

    Returns:
    --------
    The slope of the saturation vapour pressure curve [Pa degK-1].

    """

    return 4098. * vpsat(T) * conv.kPa_2_Pa / ((T + 237.3) ** 2.)


def LH_water_vapour(T):

    """
    Calculates the latent heat of water vapor at temperature T.

    Arguments:
    ----------
    T: array or float
        temperature [degC]

    Returns:
    --------
    The latent heat of water vapor [J mol-1].

    """

    H2OLv0 = 2.501e6  # J kg-1
    H2OMw = 18.e-3  # kg mol-1

    return (H2OLv0 - 2.365e3 * T) * H2OMw


def psychometric(press, Lambda):

    """
    Calculates the psychrometric constant, i.e. the ratio of the
    specific heat of moist air at constant pressure to the latent heat
    of vaporisation.

    Arguments:
    ----------
    press: float
        atmospheric pressure [Pa]

    Lambda: float
        latent heat of water vapor [J mol-1]

    Returns:
    --------
    The psychrometric constant [Pa degK-1].

    """

    return cst.Cp * cst.Mair * press / Lambda


def emissivity_atm(Tair, ea):

    # apparent emissivity of a hemisphere radiating at air temperature,
    # eq D4 of Leuning et al. (1995); ea [Pa]
    TairK = Tair + conv.C_2_K

    return 0.642 * (np.maximum(0., ea) / TairK) ** (1. / 7.)


def net_isothermal_lw(Tair, VPD):

    """
    Net longwave radiation lost by a surface at air temperature with an
    emissivity of 1, to a sky of apparent emissivity emissivity_atm.

    Arguments:
    ----------
    Tair: float
        air temperature [degC]

    VPD: float
        vapour pressure deficit of the air [kPa]

    Returns:
    --------
    The net isothermal longwave loss [W m-2].

    """

    TairK = Tair + conv.C_2_K  # degK
    ea = (vpsat(Tair) - VPD) * conv.kPa_2_Pa  # actual vapour pressure, Pa

    return (1. - emissivity_atm(Tair, ea)) * cst.sigma * TairK ** 4.
