# -*- coding: utf-8 -*-

"""
Sub-daily water balance: accumulates the canopy transpiration and the
evaporation from the soil surface into the daily water fluxes.

This file is part of the TwoLeafLSM model.

Please refer to the terms of the MIT License, which you should have
received along with the TwoLeafLSM.

References:
-----------
* Priestley, C. H. B., & Taylor, R. J. (1972). On the assessment of
  surface heat flux and evaporation using large-scale parameters.
  Monthly Weather Review, 100(2), 81-92.

"""

__title__ = "Sub-daily water balance"
__author__ = "TwoLeafLSM developers"
__version__ = "1.0 (14.10.2026)"


# ======================================================================

# general modules
import logging
import numpy as np  # array manipulations, math operators

# own modules
from TwoLeafLSM import conv  # unit converter
from TwoLeafLSM.SPAC.weather import LH_water_vapour, slope_vpsat
from TwoLeafLSM.SPAC.weather import psychometric, net_isothermal_lw

logger = logging.getLogger(__name__)


# ======================================================================

def mol_2_mm_hlfhr(flux):

    # mol H2O m-2 s-1 -> mm 30 min-1
    return (flux * conv.MOL_H2O_2_G_H2O * conv.G_AS_KG * conv.KG_H2O_2_MM *
            conv.SEC_2_HLFHR)


def soil_net_radiation(p):

    """
    Isothermal net radiation reaching the soil surface, from the
    incident shortwave and the net longwave loss, both transmitted
    through the canopy as diffuse radiation would be.

    Arguments:
    ----------
    p: pandas series
        time step's met data & params

    Returns:
    --------
    The net radiation at the soil surface [W m-2].

    """

    sw_rad = p.PPFD * conv.PAR_2_SW  # W m-2
    net_lw_rad = net_isothermal_lw(p.Tair, p.VPD)  # W m-2

    return (((1. - p.albedo_s) * sw_rad - net_lw_rad) *
            np.exp(-p.kd * p.LAI))


def soil_evap(p, rnet_soil):

    """
    Equilibrium evaporation from the soil surface.

    Arguments:
    ----------
    p: pandas series
        time step's met data & params

    rnet_soil: float
        net radiation at the soil surface [W m-2]

    Returns:
    --------
    The soil evaporation rate [mol m-2 s-1].

    """

    press = p.Patm * conv.kPa_2_Pa  # Pa
    Lambda = LH_water_vapour(p.Tair)  # J mol-1
    gamm = psychometric(press, Lambda)  # Pa degK-1
    slp = slope_vpsat(p.Tair)  # Pa degK-1

    return slp / (slp + gamm) * np.maximum(0., rnet_soil) / Lambda


class SubDailyWaterBalance(object):

    """
    Default water balance collaborator of the canopy loop, called once
    per half-hourly time slot with the total leaf net radiation and the
    canopy transpiration. The soil evaporates whatever the state of the
    canopy, from the energy it receives in the time slot.

    """

    def __init__(self, f):

        self.f = f  # daily flux accumulators, updated in place

    def __call__(self, p, total_rnet, trans_canopy):

        trans = mol_2_mm_hlfhr(trans_canopy)  # mm 30 min-1
        evap = mol_2_mm_hlfhr(soil_evap(p, soil_net_radiation(p)))

        self.f.transpiration += trans
        self.f.soil_evap += evap
        self.f.et = self.f.transpiration + self.f.soil_evap

        logger.debug('water balance: leaf rnet %.4f W m-2, transpiration '
                     '%.4f mm, soil evaporation %.4f mm', total_rnet, trans,
                     evap)

        return
