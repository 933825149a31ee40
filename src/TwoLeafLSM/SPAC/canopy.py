# -*- coding: utf-8 -*-

"""
Canopy radiation and nitrogen: the position of the sun, the diffuse
fraction of the incident radiation, the partitioning of the absorbed
radiation and of the leaf area between sunlit and shaded leaves, and
the split of the canopy nitrogen between both leaf classes.

This file is part of the TwoLeafLSM model.

Please refer to the terms of the MIT License, which you should have
received along with the TwoLeafLSM.

References:
-----------
* Chen et al. (1993). Leaf nitrogen content and photosynthesis in
  relation to canopy position. Oecologia, 93(1), 63-69.
* De Pury, D. G. G., & Farquhar, G. D. (1997). Simple scaling of
  photosynthesis from leaves to canopies without the errors of big‐leaf
  models. Plant, Cell & Environment, 20(5), 537-557.
* Spencer, J. W. (1971). Fourier series representation of the position
  of the sun. Search, 2(5), 172.
* Spitters et al. (1986). Separating the diffuse and direct component
  of global radiation and its implications for modeling canopy
  photosynthesis Part I. Agricultural and Forest Meteorology, 38(1-3),
  217-229.

"""

__title__ = "Canopy radiation and nitrogen"
__author__ = "TwoLeafLSM developers"
__version__ = "1.0 (14.10.2026)"


# ======================================================================

# general modules
import numpy as np  # array manipulations, math operators

# own modules
from TwoLeafLSM import conv, cst  # unit converter & general constants


# ======================================================================

def calculate_zenith_angle(p, doy, hod):

    """
    Position of the sun at the middle of a half-hourly time slot, from
    the solar declination and the equation of time (Spencer, 1971).

    Arguments:
    ----------
    p: pandas series
        time step's met data & params

    doy: int or float
        day of the year

    hod: int
        half-hour index within the day

    Returns:
    --------
    cos_zenith: float
        cosine of the zenithal angle [-]

    elevation: float
        solar elevation [radians], negative when the sun is down

    """

    day_angle = 2. * np.pi * (doy - 1.) / 365.

    declination = (0.006918 - 0.399912 * np.cos(day_angle) + 0.070257 *
                   np.sin(day_angle) - 0.006758 * np.cos(2. * day_angle) +
                   0.000907 * np.sin(2. * day_angle) - 0.002697 *
                   np.cos(3. * day_angle) + 0.00148 *
                   np.sin(3. * day_angle))  # radians

    eq_time = 229.18 * (0.000075 + 0.001868 * np.cos(day_angle) - 0.032077 *
                        np.sin(day_angle) - 0.014615 * np.cos(2. * day_angle)
                        - 0.04089 * np.sin(2. * day_angle))  # minutes

    # solar noon, corrected for the longitude within the time zone
    lon_std = 15. * np.round(p.lon / 15.)
    solar_noon = 12. - (p.lon - lon_std) / 15. - eq_time / 60.  # hours

    hour = 0.5 * hod + 0.25
    hour_angle = np.pi * (hour - solar_noon) / 12.  # radians

    rlat = np.radians(p.lat)
    cos_zenith = (np.sin(rlat) * np.sin(declination) + np.cos(rlat) *
                  np.cos(declination) * np.cos(hour_angle))
    cos_zenith = np.minimum(1., np.maximum(-1., cos_zenith))

    elevation = 0.5 * np.pi - np.arccos(cos_zenith)

    return cos_zenith, elevation


def extra_terrestrial_rad(doy, cos_zenith):

    # solar radiation incident outside the atmosphere, W m-2
    if cos_zenith <= 0.:

        return 0.

    return (cst.S0 * (1. + 0.033 * np.cos(2. * np.pi * doy / 365.)) *
            cos_zenith)


def get_diffuse_frac(doy, cos_zenith, par):

    """
    Estimates the diffuse fraction of the half-hourly incident radiation
    from the atmospheric transmissivity, following Spitters et al.
    (1986), eq 20.

    Arguments:
    ----------
    doy: int or float
        day of the year

    cos_zenith: float
        cosine of the zenithal angle [-]

    par: float
        incident photosynthetically active radiation [umol m-2 s-1]

    Returns:
    --------
    The diffuse fraction of the incident radiation [-].

    """

    S0 = extra_terrestrial_rad(doy, cos_zenith)

    if S0 <= 0.:  # the sun is down, all is diffuse

        return 1.

    tau = np.minimum(1., np.maximum(0., par * conv.PAR_2_SW / S0))

    R = 0.847 - 1.61 * cos_zenith + 1.04 * cos_zenith ** 2.
    K = (1.47 - R) / 1.66

    if tau <= 0.22:
        diffuse_frac = 1.

    elif tau <= 0.35:
        diffuse_frac = 1. - 6.4 * (tau - 0.22) ** 2.

    elif tau <= K:
        diffuse_frac = 1.47 - 1.66 * tau

    else:
        diffuse_frac = R

    return float(np.minimum(1., np.maximum(0., diffuse_frac)))


def absorbed_radiation_2_leaves(p, par, diffuse_frac, elevation, cos_zenith):

    """
    Calculates the PAR absorbed by the sunlit and shaded leaves and the
    leaf area of each class, following De Pury & Farquhar (1997) for a
    spherical leaf angle distribution.

    Arguments:
    ----------
    p: pandas series
        time step's met data & params

    par: float
        incident photosynthetically active radiation [umol m-2 s-1]

    diffuse_frac: float
        diffuse fraction of the incident radiation [-]

    elevation: float
        solar elevation [radians]

    cos_zenith: float
        cosine of the zenithal angle [-]

    Returns:
    --------
    apar_sun: float
        PAR absorbed per unit sunlit leaf area [umol m-2 s-1]

    apar_sha: float
        PAR absorbed per unit shaded leaf area [umol m-2 s-1]

    sunlit_lai: float
        sunlit leaf area index [m2 m-2]

    shaded_lai: float
        shaded leaf area index [m2 m-2]

    """

    LAI = p.LAI

    if (LAI <= 0.) or (elevation <= 0.) or (cos_zenith <= cst.zero):

        return 0., 0., 0., 0.

    # extinction coefficients, black leaves and with scattering
    kb = 0.5 / cos_zenith
    kbp = kb * (1. - p.scatter) ** 0.5
    kdp = p.kd * (1. - p.scatter) ** 0.5

    # canopy reflection coefficient for beam radiation
    rho_h = ((1. - (1. - p.scatter) ** 0.5) / (1. + (1. - p.scatter) **
             0.5))
    rho_cb = 1. - np.exp(-2. * rho_h * kb / (1. + kb))

    Ib = par * (1. - diffuse_frac)  # direct
    Id = par * diffuse_frac  # diffuse

    # absorbed by the whole canopy, eq 13
    Ic = ((1. - rho_cb) * Ib * (1. - np.exp(-kbp * LAI)) + (1. - p.rho_cd) *
          Id * (1. - np.exp(-kdp * LAI)))

    # absorbed by the sunlit leaves, eq 20b
    Isun = (Ib * (1. - p.scatter) * (1. - np.exp(-kb * LAI)) +
            (1. - p.rho_cd) * Id * (1. - np.exp(-(kdp + kb) * LAI)) * kdp /
            (kdp + kb) + Ib * ((1. - rho_cb) *
            (1. - np.exp(-(kbp + kb) * LAI)) * kbp / (kbp + kb) -
            (1. - p.scatter) * (1. - np.exp(-2. * kb * LAI)) / 2.))
    Isha = np.maximum(0., Ic - Isun)

    sunlit_lai = (1. - np.exp(-kb * LAI)) / kb
    shaded_lai = np.maximum(0., LAI - sunlit_lai)

    apar_sun = Isun / sunlit_lai if sunlit_lai > cst.zero else 0.
    apar_sha = Isha / shaded_lai if shaded_lai > cst.zero else 0.

    return apar_sun, apar_sha, sunlit_lai, shaded_lai


def canopy_nitrogen(p, sunlit_lai, shaded_lai):

    """
    Total nitrogen content of the sunlit and shaded leaves, from the
    average leaf nitrogen content.

    Arguments:
    ----------
    p: pandas series
        time step's met data & params

    sunlit_lai: float
        sunlit leaf area index [m2 m-2]

    shaded_lai: float
        shaded leaf area index [m2 m-2]

    Returns:
    --------
    The nitrogen content of the sunlit and of the shaded leaves
    [g N m-2].

    """

    if p.LAI <= 0.:

        return 0., 0.

    # average leaf nitrogen content, g N m-2 leaf
    leafn = p.shootnc * p.cfracts / p.sla * conv.KG_AS_G

    return leafn * sunlit_lai, leafn * shaded_lai


def top_of_canopy_n(p, ncontent):

    """
    Calculates the nitrogen content at the top of the canopy, N0, for
    an exponential decline of nitrogen through the canopy (Chen et al.,
    1993).

    Arguments:
    ----------
    p: pandas series
        time step's met data & params

    ncontent: float
        total canopy nitrogen content [g N m-2]

    Returns:
    --------
    The top of the canopy nitrogen content [g N m-2].

    """

    if p.LAI <= 0.:

        return 0.

    return ncontent * p.kext / (1. - np.exp(-p.kext * p.LAI))
