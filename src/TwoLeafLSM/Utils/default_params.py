# -*- coding: utf-8 -*-

"""
Default parameter and control classes, necessary to run the model.

This file is part of the TwoLeafLSM model.

Please refer to the terms of the MIT License, which you should have
received along with the TwoLeafLSM.

References:
-----------
* Bernacchi et al. (2001). Improved temperature response functions for
  models of Rubisco-limited photosynthesis. Plant, Cell & Environment,
  24(2), 253-259.
* Leuning et al. (1995). Leaf nitrogen, photosynthesis, conductance and
  transpiration: scaling from leaves to canopies. Plant, Cell &
  Environment, 18(10), 1183-1200.
* Medlyn et al. (2002). Temperature response of parameters of a
  biochemically based model of photosynthesis. II. A review of
  experimental data. Plant, Cell & Environment, 25(9), 1167-1179.
* Medlyn et al. (2011). Reconciling the optimal and empirical approaches
  to modelling stomatal conductance. Global Change Biology, 17(6),
  2134-2144.

"""

__title__ = "default parameter & control classes necessary to run model"
__author__ = "TwoLeafLSM developers"
__version__ = "1.0 (14.10.2026)"


# ======================================================================

class default_params(object):  # default inputs needed to run model

    def __init__(self):

        # location matters for the zenithal angle
        self.lat = -33.617778  # degrees
        self.lon = 150.740278  # degrees

        # canopy structure
        self.LAI = 2.  # m2 m-2
        self.leaf_width = 0.02  # m
        self.gb_min = 0.5  # still air limit on gb to heat (mol m-2 s-1)
        self.leaf_abs = 0.5  # leaf absorptance of shortwave (-)
        self.eps_l = 0.95  # leaf emissivity LW (-)
        self.kd = 0.8  # diffuse extinction coef., black leaves (-)
        self.kext = 0.5  # extinction coef. for nitrogen (-)
        self.scatter = 0.15  # leaf scattering coef. of PAR (-)
        self.rho_cd = 0.036  # canopy reflection of diffuse PAR (-)

        # foliage nitrogen
        self.shootnc = 0.03  # shoot N:C ratio (-)
        self.cfracts = 0.5  # carbon fraction of dry biomass (-)
        self.sla = 5.1  # specific leaf area (m2 kg-1)

        # carbon use
        self.cue = 0.5  # ratio of NPP to GPP (-)

        # photosynthetic capacity, scaled on leaf N (umol g-1 N s-1)
        self.modeljm = 1  # 0: fixed Vcmax25 & Jmax25, 1: N-dependent
        self.vcmaxna = 28.
        self.vcmaxnb = 0.
        self.jmaxna = 56.
        self.jmaxnb = 0.
        self.Vmax25 = 60.  # used if modeljm is 0 (umol m-2 s-1)
        self.Jmax25 = 100.  # used if modeljm is 0 (umol m-2 s-1)

        # kinetic constants (Bernacchi et al., 2001), umol mol-1
        self.Tref = 25.  # ref T for all 25 degC values
        self.gamstar25 = 42.75  # CO2 compensation point
        self.Kc25 = 404.9  # Michaelis-Menten cst for carboxylation
        self.Ko25 = 278400.  # Michaelis-Menten cst for oxygenation
        self.Oi = 210000.  # intercellular O2 concentration

        # energies of activation
        self.Ev = 51560.  # Vcmax, J mol-1
        self.Ej = 43790.  # Jmax, J mol-1
        self.Egamstar = 37830.  # gamstar, J mol-1
        self.Ec = 79430.  # carboxylation, J mol-1
        self.Eo = 36380.  # oxygenation, J mol-1

        # inhibition at higher temperatures
        self.deltaSv = 650.  # Vmax entropy factor (J mol-1 K-1)
        self.deltaSj = 644.4338  # Jmax entropy factor (J mol-1 K-1)
        self.Hdv = 200000.  # Vmax decrease rate above opt T (J mol-1)
        self.Hdj = 200000.  # Jmax decrease rate above opt T (J mol-1)

        # light response
        self.alpha = 0.3  # quantum yield of e- transport (mol mol-1)
        self.theta = 0.7  # curvature of light response
        self.Rd_frac = 0.015  # day respiration as a fraction of Vcmax

        # stomatal conductance (Medlyn et al., 2011)
        self.g0 = 1.e-9  # residual conductance (mol m-2 s-1)
        self.g1 = 4.8  # sensitivity of gs to An (kPa0.5)

        # soil evaporation
        self.albedo_s = 0.1  # soil SW albedo (-)

        return


class default_control(object):  # run control & the half-hour cursor

    def __init__(self):

        self.hrly_idx = 0  # position in the half-hourly forcing
        self.num_hlf_hrs = 48  # time slots in a day
        self.ps_pathway = 'C3'  # photosynthetic pathway
        self.itermax = 100  # cap on the leaf temperature iterations
        self.threshold_conv = 0.02  # convergence on Tleaf (degC)
        self.scale_rnet = False  # pass leaf rnet to the water balance

        return
