# -*- coding: utf-8 -*-

"""
Run the two-leaf canopy model over the half-hourly time slots of a day:
at each slot, the coupled photosynthesis, stomatal conductance and
energy balance of a sunlit and a shaded leaf are solved, scaled up to
the canopy, and accumulated into the daily carbon and water fluxes.

The sunlit leaf is assumed representative of all the sunlit leaves
within the canopy, the shaded leaf of all the shaded leaves. For dense
canopies this does not hold, but fluxes from the bottom of the canopy
are small, so the error is likely acceptable.

This file is part of the TwoLeafLSM model.

Please refer to the terms of the MIT License, which you should have
received along with the TwoLeafLSM.

References:
-----------
* Dai et al. (2004). A two-big-leaf model for canopy temperature,
  photosynthesis, and stomatal conductance. Journal of Climate, 17(12),
  2281-2299.
* De Pury, D. G. G., & Farquhar, G. D. (1997). Simple scaling of
  photosynthesis from leaves to canopies without the errors of big‐leaf
  models. Plant, Cell & Environment, 20(5), 537-557.
* Wang, Y. P., & Leuning, R. (1998). A two-leaf model for canopy
  conductance, photosynthesis and partitioning of available energy I.
  Agricultural and Forest Meteorology, 91(1-2), 89-111.

"""

__title__ = "Run the two-leaf canopy model"
__author__ = "TwoLeafLSM developers"
__version__ = "1.0 (14.10.2026)"


# ======================================================================

# general modules
import collections  # ordered dictionaries, named tuples
import logging
import numpy as np  # array manipulations, math operators
import pandas as pd  # output dataframes

# own modules
from TwoLeafLSM.Utils import default_control
from TwoLeafLSM.SPAC import calculate_zenith_angle, get_diffuse_frac
from TwoLeafLSM.SPAC import absorbed_radiation_2_leaves, canopy_nitrogen
from TwoLeafLSM.SPAC import photosynthesis_C3, SubDailyWaterBalance
from TwoLeafLSM.SPAC import default_fluxes, zero_carbon_day_fluxes
from TwoLeafLSM.SPAC import zero_water_day_fluxes, update_daily_carbon_fluxes
from TwoLeafLSM.CH2OCoupler import check_pathway, solve_leaf
from TwoLeafLSM.run_utils import time_step, summarise_day, write_csv
from TwoLeafLSM.run_utils import read_csv

logger = logging.getLogger(__name__)

# sunlit and shaded leaves
Leaves = collections.namedtuple('Leaves', ['sun', 'sha'])


# ======================================================================

def scale_to_canopy(sun, sha, sunlit_lai, shaded_lai):

    """
    Scales the leaf fluxes to the canopy by weighting each leaf class by
    its leaf area index.

    Arguments:
    ----------
    sun, sha: LeafSolution
        solved sunlit and shaded leaves

    sunlit_lai, shaded_lai: float
        sunlit and shaded leaf area indices [m2 m-2]

    Returns:
    --------
    acanopy: float
        canopy net C assimilation rate [umol m-2 s-1]

    gsc_canopy: float
        canopy stomatal conductance to CO2 [mol m-2 s-1]

    trans_canopy: float
        canopy transpiration rate [mol m-2 s-1]

    """

    acanopy = sunlit_lai * sun.An + shaded_lai * sha.An
    gsc_canopy = sunlit_lai * sun.gsc + shaded_lai * sha.gsc
    trans_canopy = sunlit_lai * sun.trans + shaded_lai * sha.trans

    return acanopy, gsc_canopy, trans_canopy


def canopy(df, c, f, water_balance=None, zenith=calculate_zenith_angle,
           diffuse=get_diffuse_frac, absorbed=absorbed_radiation_2_leaves,
           photosynthesis=photosynthesis_C3):

    """
    Two-leaf canopy loop over the half-hourly time slots of one day,
    starting at the control's half-hour cursor, which is advanced once
    per time slot. The daily flux accumulators are zeroed before the
    first slot and updated at every slot.

    Arguments:
    ----------
    df: pandas dataframe
        dataframe containing all input data & params

    c: default_control
        run control, the half-hour cursor c.hrly_idx is updated

    f: default_fluxes
        daily flux accumulators, updated in place

    water_balance: callable
        sub-daily water balance, called as water_balance(p, total_rnet,
        trans_canopy) at every slot. By default, a SubDailyWaterBalance
        accumulating into f

    zenith: callable
        solar geometry, called as zenith(p, doy, hod) and returning
        (cos_zenith, elevation)

    diffuse: callable
        diffuse fraction, called as diffuse(doy, cos_zenith, par)

    absorbed: callable
        radiation absorption, called as absorbed(p, par, diffuse_frac,
        elevation, cos_zenith) and returning (apar_sun, apar_sha,
        sunlit_lai, shaded_lai)

    photosynthesis: callable
        photosynthesis model, called as photosynthesis(p, ncontent,
        Tleaf, apar, Cs, dleaf) and returning (gsc, An)

    Returns:
    --------
    out: pandas dataframe
        half-hourly canopy outputs: acanopy [umol m-2 s-1], gsc_canopy
        [mol m-2 s-1], trans_canopy [mol m-2 s-1], total_apar
        [umol m-2 s-1], total_rnet [W m-2], the LAI partition, and the
        leaf temperatures, exit reasons and iterations of each leaf

    """

    # abort before anything is touched
    check_pathway(c.ps_pathway)

    if water_balance is None:
        water_balance = SubDailyWaterBalance(f)

    zero_carbon_day_fluxes(f)
    zero_water_day_fluxes(f)

    # absorbed PAR is carried over from the last sunlit slot
    apar = Leaves(0., 0.)

    # the leaf net radiation only reaches the water balance if scale_rnet
    total_rnet = 0.

    records = []

    for hod in range(c.num_hlf_hrs):

        p = time_step(df, c.hrly_idx)
        cos_zenith, elevation = zenith(p, p.doy, hod)

        # diffuse fraction from the half-hourly incident radiation
        diffuse_frac = diffuse(p.doy, cos_zenith, p.PPFD)

        rec = collections.OrderedDict([('doy', p.doy), ('hod', hod),
                                       ('sun_up', False)])

        if (elevation > 0.) and (p.PPFD > 50.):  # is the sun up?
            apar_sun, apar_sha, sunlit_lai, shaded_lai = \
                absorbed(p, p.PPFD, diffuse_frac, elevation, cos_zenith)
            apar = Leaves(apar_sun, apar_sha)
            ncontent = Leaves(*canopy_nitrogen(p, sunlit_lai, shaded_lai))

            sun = solve_leaf(p, ncontent.sun, apar.sun,
                             photosynthesis=photosynthesis,
                             ps_pathway=c.ps_pathway,
                             threshold_conv=c.threshold_conv,
                             iter_max=c.itermax, name='sunlit')
            sha = solve_leaf(p, ncontent.sha, apar.sha,
                             photosynthesis=photosynthesis,
                             ps_pathway=c.ps_pathway,
                             threshold_conv=c.threshold_conv,
                             iter_max=c.itermax, name='shaded')

            acanopy, gsc_canopy, trans_canopy = \
                scale_to_canopy(sun, sha, sunlit_lai, shaded_lai)
            total_apar = apar.sun + apar.sha

            if c.scale_rnet:
                total_rnet = sunlit_lai * sun.rnet + shaded_lai * sha.rnet

            rec['sun_up'] = True
            rec['sunlit_lai'] = sunlit_lai
            rec['shaded_lai'] = shaded_lai
            rec['Tleaf_sun'] = sun.Tleaf
            rec['Tleaf_sha'] = sha.Tleaf
            rec['exit_sun'] = sun.exit.name
            rec['exit_sha'] = sha.exit.name
            rec['iter_sun'] = sun.iterations
            rec['iter_sha'] = sha.iterations

        else:  # no photosynthesis, but soil evaporation continues
            acanopy, gsc_canopy, trans_canopy = (0., ) * 3
            total_apar = apar.sun + apar.sha

            if c.scale_rnet:
                total_rnet = 0.

            rec['sunlit_lai'] = 0.
            rec['shaded_lai'] = 0.
            rec['Tleaf_sun'] = np.nan  # nans for averaging
            rec['Tleaf_sha'] = np.nan
            rec['exit_sun'] = ''
            rec['exit_sha'] = ''
            rec['iter_sun'] = 0
            rec['iter_sha'] = 0

        update_daily_carbon_fluxes(f, p, acanopy, total_apar)
        water_balance(p, total_rnet, trans_canopy)

        rec['acanopy'] = acanopy
        rec['gsc_canopy'] = gsc_canopy
        rec['trans_canopy'] = trans_canopy
        rec['total_apar'] = total_apar
        rec['total_rnet'] = total_rnet
        records.append(rec)

        logger.debug('slot %d (doy %s): sun up %s, acanopy = %.4f, '
                     'trans_canopy = %.6f', hod, p.doy, rec['sun_up'],
                     acanopy, trans_canopy)

        c.hrly_idx += 1

    logger.info('day done: gpp = %.4f g C m-2, npp = %.4f g C m-2, '
                'transpiration = %.4f mm', f.gpp_gCm2, f.npp_gCm2,
                f.transpiration)

    return pd.DataFrame(records)


def run(fname, df, c=None, f=None, **kwargs):

    """
    Runs the two-leaf canopy model over all the days of the forcing,
    one day (c.num_hlf_hrs time slots) at a time.

    Arguments:
    ----------
    fname: string
        output filename, the daily outputs are not written if None

    df: pandas dataframe or string
        dataframe containing all input data & params, or the name of a
        csv file containing them

    c: default_control
        run control, default_control if None

    f: default_fluxes
        daily flux accumulators, default_fluxes if None

    kwargs: callables
        collaborators passed on to canopy

    Returns:
    --------
    df2: pandas dataframe
        daily outputs: gpp_gCm2, npp_gCm2, gpp, npp, auto_resp, apar,
        transpiration, soil_evap, et, and a summary of the half-hourly
        outputs

    df3: pandas dataframe
        half-hourly outputs of all the days

    """

    if isinstance(df, str):
        df = read_csv(df)

    if c is None:
        c = default_control()

    if f is None:
        f = default_fluxes()

    Ndays = (len(df) - c.hrly_idx) // c.num_hlf_hrs
    daily = []
    half_hourly = []

    for day in range(Ndays):

        doy = df['doy'].iloc[c.hrly_idx]
        out = canopy(df, c, f, **kwargs)

        summary = collections.OrderedDict([('doy', doy)])

        for key in ['gpp_gCm2', 'npp_gCm2', 'gpp', 'npp', 'auto_resp',
                    'apar', 'transpiration', 'soil_evap', 'et']:

            summary[key] = getattr(f, key)

        summary.update(summarise_day(out))
        daily.append(summary)
        half_hourly.append(out)

    df2 = pd.DataFrame(daily)

    if fname is not None:
        write_csv(fname, df2)

    if half_hourly:
        df3 = pd.concat(half_hourly, ignore_index=True)

    else:
        df3 = pd.DataFrame()

    return df2, df3
