# -*- coding: utf-8 -*-

"""
Functions related to leaf processes: used to calculate the leaf
boundary layer and radiative conductances, the leaf energy balance,
and C3 photosynthesis coupled to stomatal conductance.

This file is part of the TwoLeafLSM model.

Please refer to the terms of the MIT License, which you should have
received along with the TwoLeafLSM.

References:
-----------
* Farquhar, G. D., von Caemmerer, S. V., & Berry, J. A. (1980). A
  biochemical model of photosynthetic CO2 assimilation in leaves of C3
  species. Planta, 149(1), 78-90.
* Jones, H. G. (1992). Plants and microclimate: a quantitative approach
  to environmental plant physiology. Cambridge university press.
* Leuning, R. (1990). Modelling stomatal behaviour and photosynthesis of
  Eucalyptus grandis. Functional Plant Biology, 17(2), 159-175.
* Leuning et al. (1995). Leaf nitrogen, photosynthesis, conductance and
  transpiration: scaling from leaves to canopies. Plant, Cell &
  Environment, 18(10), 1183-1200.
* Medlyn et al. (2002). Temperature response of parameters of a
  biochemically based model of photosynthesis. II. A review of
  experimental data. Plant, Cell & Environment, 25(9), 1167-1179.
* Medlyn et al. (2007). Linking leaf and tree water use with an
  individual-tree model. Tree Physiology, 27(12), 1687-1699.
* Medlyn et al. (2011). Reconciling the optimal and empirical approaches
  to modelling stomatal conductance. Global Change Biology, 17(6),
  2134-2144.
* Wang, Y. P., & Leuning, R. (1998). A two-leaf model for canopy
  conductance, photosynthesis and partitioning of available energy I.
  Agricultural and Forest Meteorology, 91(1-2), 89-111.

"""

__title__ = "Leaf level energy balance and photosynthetic processes"
__author__ = "TwoLeafLSM developers"
__version__ = "1.0 (14.10.2026)"


# ======================================================================

# general modules
import numpy as np  # array manipulations, math operators

# own modules
from TwoLeafLSM import conv, cst  # unit converter & general constants
from TwoLeafLSM.SPAC.weather import slope_vpsat, LH_water_vapour, psychometric
from TwoLeafLSM.SPAC.weather import net_isothermal_lw


# ======================================================================

def radiation_conductance(Tair, eps_l=0.95):

    """
    Returns the 'radiation conductance' at a given temperature, cf. Wang
    & Leuning (1998), Table 1, and Jones (1992) p. 108. Medlyn et al.
    (2007) eq A3 has Tk ** 4 where it should read Tk ** 3.

    Arguments:
    ----------
    Tair: array or float
        air temperature [degC]

    eps_l: float
        leaf emissivity [-]

    Returns:
    --------
    The radiative conductance [mol m-2 s-1].

    """

    TairK = Tair + conv.C_2_K  # degK

    return (np.maximum(0., 4. * cst.sigma * TairK ** 3. * eps_l /
            (cst.Cp * cst.Mair)))


def bdn_layer_forced_conduct(Tair, press, u, leaf_width):

    """
    Boundary layer conductance for heat, single sided, under forced
    convection. See eq E1 of Leuning et al. (1995).

    Arguments:
    ----------
    Tair: float
        air temperature [degC]

    press: float
        atmospheric pressure [Pa]

    u: float
        wind speed [m s-1]

    leaf_width: float
        characteristic leaf width [m], must be strictly positive

    Returns:
    --------
    The forced convection conductance to heat [mol m-2 s-1].

    """

    cmolar = press / (cst.R * (Tair + conv.C_2_K))  # air molar density

    return 0.003 * np.sqrt(np.maximum(0., u) / leaf_width) * cmolar


def bdn_layer_free_conduct(Tair, Tleaf, press, leaf_width):

    """
    Boundary layer conductance for heat, single sided, under free
    convection. See eqs E3 & E4 of Leuning et al. (1995). The Grashof
    number vanishes when the leaf and the air are at the same
    temperature, in which case there is no free convection.

    Arguments:
    ----------
    Tair: float
        air temperature [degC]

    Tleaf: float
        leaf temperature [degC]

    press: float
        atmospheric pressure [Pa]

    leaf_width: float
        characteristic leaf width [m]

    Returns:
    --------
    The free convection conductance to heat [mol m-2 s-1].

    """

    if np.isclose(Tleaf - Tair, 0., rtol=0., atol=cst.tol):

        return 0.

    cmolar = press / (cst.R * (Tair + conv.C_2_K))  # air molar density
    grashof = 1.6e8 * abs(Tleaf - Tair) * leaf_width ** 3.

    return 0.5 * cst.DH * grashof ** 0.25 / leaf_width * cmolar


def conductances(p, Tleaf, gsc):

    """
    Both forced and free convection contribute to the exchange of heat
    and mass through leaf boundary layers. The total conductance to heat
    is two-sided and includes the radiative conductance, whilst the
    total conductance to water vapour combines the boundary layer and
    stomatal conductances in series. In near still air, the boundary
    layer conductance to heat is held at its lower limit p.gb_min.

    Arguments:
    ----------
    p: pandas series
        time step's met data & params

    Tleaf: float
        leaf temperature [degC]

    gsc: float
        stomatal conductance to CO2 [mol m-2 s-1]

    Returns:
    --------
    gv: float
        total leaf conductance to water vapour [mol m-2 s-1]

    gh: float
        total two-sided leaf conductance to heat [mol m-2 s-1]

    gbh: float
        single-sided boundary layer conductance to heat [mol m-2 s-1]

    gbc: float
        boundary layer conductance to CO2 [mol m-2 s-1]

    gradn: float
        radiative conductance [mol m-2 s-1]

    """

    press = p.Patm * conv.kPa_2_Pa  # Pa

    gradn = radiation_conductance(p.Tair, eps_l=p.eps_l)
    gbh = (bdn_layer_forced_conduct(p.Tair, press, p.u, p.leaf_width) +
           bdn_layer_free_conduct(p.Tair, Tleaf, press, p.leaf_width))

    # boundary layer conductance never drops below its still air limit
    gbh = np.maximum(p.gb_min, gbh)
    gh = 2. * (gbh + gradn)

    gbv = conv.GbvGbh * gbh
    gsv = conv.GsvGsc * gsc

    if (gbv + gsv) > cst.zero:
        gv = gbv * gsv / (gbv + gsv)

    else:
        gv = 0.

    gbc = gbh / conv.GbhGbc

    return gv, gh, gbh, gbc, gradn


def isothermal_net_radiation(p, apar):

    """
    Isothermal net radiation of a leaf (Leuning et al., 1995, Appendix),
    where the net longwave loss assumes a canopy emissivity of 1 and is
    attenuated through the canopy as diffuse radiation would be.

    Arguments:
    ----------
    p: pandas series
        time step's met data & params

    apar: float
        absorbed photosynthetically active radiation [umol m-2 s-1]

    Returns:
    --------
    The isothermal net radiation [W m-2].

    """

    sw_rad = apar * conv.PAR_2_SW  # W m-2
    net_lw_rad = net_isothermal_lw(p.Tair, p.VPD)  # W m-2

    return (p.leaf_abs * sw_rad - net_lw_rad * p.kd *
            np.exp(-p.kd * p.LAI))


def penman_leaf(press, rnet, vpd, Tair, gh, gv):

    """
    Calculates transpiration following Penman-Monteith at the leaf
    level.

    Arguments:
    ----------
    press: float
        atmospheric pressure [Pa]

    rnet: float
        isothermal net radiation [W m-2]

    vpd: float
        vapour pressure deficit of the air [Pa]

    Tair: float
        air temperature [degC]

    gh: float
        total two-sided leaf conductance to heat [mol m-2 s-1]

    gv: float
        total leaf conductance to water vapour [mol m-2 s-1]

    Returns:
    --------
    trans: float
        transpiration rate [mol m-2 s-1]

    LE: float
        latent heat flux [W m-2]

    """

    if gv <= cst.zero:

        return 0., 0.

    Lambda = LH_water_vapour(Tair)  # J mol-1
    gamm = psychometric(press, Lambda)  # Pa degK-1
    slp = slope_vpsat(Tair)  # Pa degK-1

    LE = ((slp * rnet + vpd * gh * cst.Cp * cst.Mair) /
          (slp + gamm * gh / gv))

    return LE / Lambda, LE


def leaf_energy_balance(p, Tleaf, gsc, An, apar):

    """
    Partitions the isothermal net radiation of a leaf into latent and
    sensible heat and returns the leaf surface conditions that follow
    from the fluxes. The new leaf temperature only moves a quarter of
    the way to the temperature that closes the energy balance, which
    damps the fixed-point iteration on leaf temperature.

    Arguments:
    ----------
    p: pandas series
        time step's met data & params

    Tleaf: float
        leaf temperature [degC]

    gsc: float
        stomatal conductance to CO2 [mol m-2 s-1]

    An: float
        net C assimilation rate [umol m-2 s-1]

    apar: float
        absorbed photosynthetically active radiation [umol m-2 s-1]

    Returns:
    --------
    Cs: float
        CO2 concentration at the leaf surface [umol mol-1]

    dleaf: float
        vapour pressure deficit at the leaf surface [Pa]

    new_Tleaf: float
        leaf temperature estimate [degC]

    trans: float
        transpiration rate [mol m-2 s-1]

    rnet: float
        isothermal net radiation [W m-2]

    LE: float
        latent heat flux [W m-2]

    H: float
        sensible heat flux [W m-2]

    """

    # unit conversions
    press = p.Patm * conv.kPa_2_Pa  # Pa
    vpd = p.VPD * conv.kPa_2_Pa  # Pa

    gv, gh, gbh, gbc, gradn = conductances(p, Tleaf, gsc)
    rnet = isothermal_net_radiation(p, apar)

    if gbh > cst.zero:
        trans, LE = penman_leaf(press, rnet, vpd, p.Tair, gh, gv)

        # sensible heat exchanged between leaf and surroundings
        H = (1. / (1. + gradn / gbh)) * (rnet - LE)

    else:  # still air around an isothermal leaf, no exchange
        trans, LE, H = (0., ) * 3

    # temperature difference between the leaf surface and the air
    Tdiff = (rnet - LE) / (cst.Cp * cst.Mair * gh)
    new_Tleaf = p.Tair + Tdiff / 4.

    if gbh > cst.zero:
        Cs = p.CO2 - An / gbc  # umol mol-1
        dleaf = trans * press / gv if gv > cst.zero else vpd  # Pa

    else:
        Cs = p.CO2
        dleaf = vpd

    return Cs, dleaf, new_Tleaf, trans, rnet, LE, H


def arrhen(v25, Ea, Tref, Tleaf, deltaS=None, Hd=None):

    """
    Calculates the temperature dependence of a kinetic variable using an
    Arrhenius function which transforms the variable at 25 degC given
    its energy of activation and the leaf temperature (Medlyn et al.,
    2002). Providing deltaS and Hd returns a peaked Arrhenius function
    which accounts for the rate of inhibition at higher temperatures.

    Arguments:
    ----------
    v25: float
        kinetic variable at Tref [varies]

    Ea: float
        energy of activation of the variable [J mol-1]

    Tref: float
        temperature at which the kinetic variable is defined [degK]

    Tleaf: array or float
        leaf temperature [degC]

    deltaS: float
        entropy factor [J mol-1 K-1]

    Hd: float
        rate of decrease about the optimum temperature [J mol-1]

    Returns:
    --------
    The temperature-dependent kinetic variable [varies].

    """

    Tl_K = Tleaf + conv.C_2_K  # degK

    arrhenius = v25 * np.exp(Ea * (Tl_K - Tref) / (Tref * cst.R * Tl_K))

    if (deltaS is None) or (Hd is None):

        return arrhenius

    arg2 = 1. + np.exp((deltaS * Tref - Hd) / (cst.R * Tref))
    arg3 = 1. + np.exp((deltaS * Tl_K - Hd) / (cst.R * Tl_K))

    return arrhenius * arg2 / arg3


def adjust_low_T(var, Tleaf, lower_bound=0., upper_bound=10.):

    """
    Function linearly forcing a variable to zero at low temperature.

    Arguments:
    ----------
    var: float
        kinetic variable [varies]

    Tleaf: float
        leaf temperature [degC]

    lower_bound: float
        lowest possible leaf temperature [degC]

    upper_bound: float
        upper "lower" leaf temperature [degC]

    Returns:
    --------
    The temperature-dependent kinetic variable [varies].

    """

    if Tleaf < lower_bound:
        var = 0.

    elif Tleaf < upper_bound:
        var *= (Tleaf - lower_bound) / (upper_bound - lower_bound)

    return var


def quad(a, b, c, large_root=True):

    """
    Calculates the square root given by the quadratic formula,
        with a, b, and c from ax2 + bx + c = 0.

    Arguments:
    ----------
    a, b, c: float
        coefficients of the equation to solve

    large_root: boolean
        if True, the largest root is returned

    Returns:
    --------
    Either one of the large or small roots given by the quadratic
    formula, nan when there is no real root.

    """

    d = b ** 2. - 4. * a * c

    if d < 0.:

        return np.nan

    if large_root:
        return 0.5 * (-b + d ** 0.5) / a

    else:
        return 0.5 * (-b - d ** 0.5) / a


def quad_solve_Ci(Cs, gs_over_A, g0, Rleaf, gamstar, v1, v2):

    """
    Solves for Ci starting from Cs, according to the standard quadratic
    way of solving for Ci as described in Leuning, 1990.

    Arguments:
    ----------
    Cs: float
        leaf surface CO2 concentration [umol mol-1]

    gs_over_A: float
        gs/A as predicted by the USO (Medlyn, 2011) model

    g0: float
        residual stomatal conductance [mol m-2 s-1]

    Rleaf: float
        leaf day respiration [umol m-2 s-1]

    gamstar: float
        CO2 compensation point [umol mol-1]

    v1: float
        Vmax or J

    v2: float
        Km or 2 * gamstar

    Returns:
    --------
    The intercellular CO2 concentration [umol mol-1], or nan if there
    is no physical solution.

    """

    a = g0 + gs_over_A * (v1 - Rleaf)
    b = ((1. - Cs * gs_over_A) * (v1 - Rleaf) + g0 * (v2 - Cs) - gs_over_A *
         (v1 * gamstar + v2 * Rleaf))
    c = - ((1. - Cs * gs_over_A) * (v1 * gamstar + v2 * Rleaf) + g0 * v2 *
           Cs)

    if a <= cst.zero:  # below the light / CO2 compensation point

        return np.nan

    ref_root = quad(a, b, c)

    if np.isnan(ref_root) or (ref_root > Cs) or (ref_root < cst.zero):
        return quad(a, b, c, large_root=False)

    else:
        return ref_root


def leaf_capacity(p, ncontent):

    """
    Photosynthetic capacity of the leaves at the reference temperature,
    either prescribed or linearly scaled on their nitrogen content.

    Arguments:
    ----------
    p: pandas series
        time step's met data & params

    ncontent: float
        nitrogen content of the leaves [g N m-2]

    Returns:
    --------
    Vmax25: float
        maximum carboxylation rate at Tref [umol m-2 s-1]

    Jmax25: float
        maximum electron transport rate at Tref [umol m-2 s-1]

    """

    if int(p.modeljm) == 0:

        return p.Vmax25, p.Jmax25

    Vmax25 = p.vcmaxna * ncontent + p.vcmaxnb
    Jmax25 = p.jmaxna * ncontent + p.jmaxnb

    return Vmax25, Jmax25


def photosynthesis_C3(p, ncontent, Tleaf, apar, Cs, dleaf):

    """
    Calculates the net C assimilation rate and the stomatal conductance
    to CO2 of a C3 leaf, following the Farquhar et al. (1980) model
    coupled to the USO stomatal model (Medlyn et al., 2011). Ci is
    solved separately for the rubisco- and for the electron
    transport-limited rates, and the non-smoothed minimum of the two is
    retained.

    Arguments:
    ----------
    p: pandas series
        time step's met data & params

    ncontent: float
        nitrogen content of the leaves [g N m-2]

    Tleaf: float
        leaf temperature [degC]

    apar: float
        absorbed photosynthetically active radiation [umol m-2 s-1]

    Cs: float
        CO2 concentration at the leaf surface [umol mol-1]

    dleaf: float
        vapour pressure deficit at the leaf surface [Pa]

    Returns:
    --------
    gsc: float
        stomatal conductance to CO2 [mol m-2 s-1]

    An: float
        net C assimilation rate [umol m-2 s-1]

    """

    # gamstar, Vmax, Kc and Ko are known at Tref, get their T dependency
    Tref = p.Tref + conv.C_2_K  # degK, Tref set to 25 degC

    gamstar = arrhen(p.gamstar25, p.Egamstar, Tref, Tleaf)  # umol mol-1
    Kc = arrhen(p.Kc25, p.Ec, Tref, Tleaf)
    Ko = arrhen(p.Ko25, p.Eo, Tref, Tleaf)
    Km = Kc * (1. + p.Oi / Ko)  # Michaelis-Menten constant for O2/CO2

    Vmax25, Jmax25 = leaf_capacity(p, ncontent)
    Vmax = arrhen(Vmax25, p.Ev, Tref, Tleaf, deltaS=p.deltaSv, Hd=p.Hdv)
    Jmax = arrhen(Jmax25, p.Ej, Tref, Tleaf, deltaS=p.deltaSj, Hd=p.Hdj)

    # adjust for low temperatures
    Vmax = adjust_low_T(Vmax, Tleaf)
    Jmax = adjust_low_T(Jmax, Tleaf)

    # leaf respiration in the light, Collatz et al. 1991
    Rleaf = p.Rd_frac * Vmax  # umol m-2 s-1

    if (Jmax <= 0.) or (Vmax <= 0.) or np.isnan(Jmax):

        return p.g0, -Rleaf

    # electron transport rate, non-rectangular hyperbola
    J = quad(p.theta, -(p.alpha * apar + Jmax), p.alpha * apar * Jmax,
             large_root=False)
    J *= 0.25  # RuBP regeneration rate, umol m-2 s-1

    # gs/A following the USO model, gs model not valid ~0.05 kPa
    Dleaf = np.maximum(0.05, dleaf * conv.Pa_2_kPa)  # kPa
    gs_over_A = (1. + p.g1 / (Dleaf ** 0.5)) / np.maximum(cst.zero, Cs)

    # rubisco-limited photosynthesis rate
    Ci = quad_solve_Ci(Cs, gs_over_A, p.g0, Rleaf, gamstar, Vmax, Km)

    if np.isnan(Ci) or (Ci <= gamstar):
        Ac = 0.

    else:
        Ac = Vmax * (Ci - gamstar) / (Ci + Km)  # umol m-2 s-1

    # electron transport-limited photosynthesis rate
    Ci = quad_solve_Ci(Cs, gs_over_A, p.g0, Rleaf, gamstar, J,
                       2. * gamstar)

    if np.isnan(Ci) or (Ci <= gamstar):  # below light compensation point
        Aj = 0.

    else:
        Aj = J * (Ci - gamstar) / (Ci + 2. * gamstar)  # umol m-2 s-1

    An = min(Ac, Aj) - Rleaf
    gsc = max(p.g0, p.g0 + gs_over_A * An)

    return gsc, An
