# -*- coding: utf-8 -*-

"""
Daily flux accumulators, zeroed at the start of each day and updated
once per half-hourly time slot.

This file is part of the TwoLeafLSM model.

Please refer to the terms of the MIT License, which you should have
received along with the TwoLeafLSM.

"""

__title__ = "Daily carbon & water flux accumulators"
__author__ = "TwoLeafLSM developers"
__version__ = "1.0 (14.10.2026)"


# ======================================================================

# own modules
from TwoLeafLSM import conv  # unit converter


# ======================================================================

class default_fluxes(object):  # daily running sums, owned by the caller

    def __init__(self):

        # carbon fluxes
        self.gpp_gCm2 = 0.  # g C m-2 d-1
        self.npp_gCm2 = 0.  # g C m-2 d-1
        self.gpp = 0.  # t C ha-1 d-1
        self.npp = 0.  # t C ha-1 d-1
        self.auto_resp = 0.  # t C ha-1 d-1
        self.apar = 0.  # umol m-2 s-1, summed over the time slots

        # water fluxes
        self.transpiration = 0.  # mm d-1
        self.soil_evap = 0.  # mm d-1
        self.et = 0.  # mm d-1

        return


def zero_carbon_day_fluxes(f):

    f.gpp_gCm2 = 0.
    f.npp_gCm2 = 0.
    f.gpp = 0.
    f.npp = 0.
    f.auto_resp = 0.
    f.apar = 0.

    return


def zero_water_day_fluxes(f):

    f.transpiration = 0.
    f.soil_evap = 0.
    f.et = 0.

    return


def update_daily_carbon_fluxes(f, p, acanopy, total_apar):

    """
    Accumulates the canopy assimilation of a half-hourly time slot into
    the daily gross primary production, from which the net primary
    production and the autotrophic respiration follow.

    Arguments:
    ----------
    f: default_fluxes
        daily flux accumulators, updated in place

    p: pandas series
        time step's met data & params

    acanopy: float
        canopy net C assimilation rate [umol m-2 s-1]

    total_apar: float
        PAR absorbed by the sunlit and shaded leaves [umol m-2 s-1]

    """

    # umol m-2 s-1 -> g C m-2 30 min-1
    f.gpp_gCm2 += (acanopy * conv.FROM_U * conv.MOL_C_2_G_C *
                   conv.SEC_2_HLFHR)
    f.npp_gCm2 = f.gpp_gCm2 * p.cue
    f.gpp = f.gpp_gCm2 * conv.G_C_2_T_HA
    f.npp = f.npp_gCm2 * conv.G_C_2_T_HA
    f.auto_resp = f.gpp - f.npp
    f.apar += total_apar

    return
