# -*- coding: utf-8 -*-

"""
General physical constants and unit conversions used throughout the
two-leaf canopy model.

This file is part of the TwoLeafLSM model.

Please refer to the terms of the MIT License, which you should have
received along with the TwoLeafLSM.

References:
-----------
* Jones, H. G. (2013). Plants and microclimate: a quantitative approach
  to environmental plant physiology. Cambridge university press.
* Leuning et al. (1995). Leaf nitrogen, photosynthesis, conductance and
  transpiration: scaling from leaves to canopies. Plant, Cell &
  Environment, 18(10), 1183-1200.

"""

__title__ = "Physical constants and unit conversions"
__author__ = "TwoLeafLSM developers"
__version__ = "1.0 (14.10.2026)"


# ======================================================================

class ConvertUnits(object):  # unit conversions

    def __init__(self):

        # temperature
        self.C_2_K = 273.15  # degC to degK

        # pressure
        self.kPa_2_Pa = 1.e3
        self.Pa_2_kPa = 1.e-3

        # amounts
        self.FROM_U = 1.e-6  # from umol to mol
        self.KG_AS_G = 1.e3
        self.G_AS_KG = 1.e-3

        # carbon
        self.MOL_C_2_G_C = 12.  # g mol-1
        self.G_C_2_T_HA = 0.01  # g m-2 to t ha-1

        # water
        self.MOL_H2O_2_G_H2O = 18.02  # g mol-1
        self.KG_H2O_2_MM = 1.  # kg m-2 of water is 1 mm

        # time
        self.SEC_2_HLFHR = 1800.

        # radiation
        self.SW_2_PAR = 2.3  # umol J-1
        self.PAR_2_SW = 1. / self.SW_2_PAR

        # conductance ratios (Leuning et al., 1995)
        self.GbvGbh = 1.075  # water vapour vs heat, boundary layer
        self.GsvGsc = 1.57  # water vapour vs CO2, stomata
        self.GbhGbc = 1.32  # heat vs CO2, boundary layer

        return


class Constants(object):  # general constants

    def __init__(self):

        self.zero = 1.e-17  # precision below which values are zeros
        self.tol = 1.e-8  # equality tolerance on temperatures
        self.R = 8.314  # universal gas constant, J mol-1 K-1
        self.sigma = 5.67e-8  # Stefan-Boltzmann, W m-2 K-4
        self.Cp = 1010.  # heat capacity of dry air, J kg-1 K-1
        self.Mair = 29.e-3  # molar mass of dry air, kg mol-1
        self.DH = 21.5e-6  # molecular diffusivity to heat, m2 s-1
        self.S0 = 1370.  # solar constant, W m-2

        return
