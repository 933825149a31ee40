# -*- coding: utf-8 -*-

"""
Support functions needed to run the model: assembling the forcing
dataframe, retrieving a time step's met data & params, summarising and
writing the outputs.

This file is part of the TwoLeafLSM model.

Please refer to the terms of the MIT License, which you should have
received along with the TwoLeafLSM.

"""

__title__ = "Run utilities"
__author__ = "TwoLeafLSM developers"
__version__ = "1.0 (14.10.2026)"


# ======================================================================

# general modules
import collections  # ordered dictionaries
import logging
import numpy as np  # array manipulations, math operators
import bottleneck as bn  # faster C-compiled np for all nan operations
import pandas as pd  # read/write dataframes, csv files

# own modules
from TwoLeafLSM.Utils import default_params

logger = logging.getLogger(__name__)

# half-hourly met variables the forcing must contain
MET_VARS = ['doy', 'PPFD', 'Tair', 'VPD', 'Patm', 'u', 'CO2']


# ======================================================================

def build_forcings(met, params=None):

    """
    Adds the model parameters to the half-hourly met data, as constant
    columns, unless they are already present in the met data (in which
    case the met data values win).

    Arguments:
    ----------
    met: pandas dataframe
        half-hourly met data: doy, PPFD [umol m-2 s-1], Tair [degC],
        VPD [kPa], Patm [kPa], u [m s-1], CO2 [umol mol-1]

    params: object
        parameter class, default_params if None

    Returns:
    --------
    df: pandas dataframe
        dataframe containing all input data & params

    """

    missing = [e for e in MET_VARS if e not in met.columns]

    if missing:
        raise KeyError('missing met variable(s): %s' % (', '.join(missing), ))

    if params is None:
        params = default_params()

    df = met.copy()

    for key, val in vars(params).items():

        if key not in df.columns:
            df[key] = val

    df.reset_index(drop=True, inplace=True)

    return df


def time_step(df, step):

    """
    Retrieves the met data & params of a time step.

    Arguments:
    ----------
    df: pandas dataframe
        dataframe containing all input data & params

    step: int
        current time step

    Returns:
    --------
    p: pandas series
        time step's met data & params

    """

    p = df.iloc[step].copy()

    return p


def summarise_day(out):

    """
    Daily summary of the half-hourly canopy outputs of one day.

    Arguments:
    ----------
    out: pandas dataframe
        half-hourly canopy outputs

    Returns:
    --------
    An ordered dictionary of the daily summary variables.

    """

    sun_up = out['sun_up'].values.astype(bool)

    summary = collections.OrderedDict()
    summary['daylight_slots'] = int(np.sum(sun_up))
    summary['Tleaf_sun_max'] = bn.nanmax(out['Tleaf_sun'].values
                                         .astype(float))
    summary['Tleaf_sha_max'] = bn.nanmax(out['Tleaf_sha'].values
                                         .astype(float))

    if np.any(sun_up):
        summary['gsc_canopy_mean'] = bn.nanmean(out['gsc_canopy'].values
                                                [sun_up].astype(float))

    else:
        summary['gsc_canopy_mean'] = 0.

    summary['iterations'] = int(bn.nansum(out['iter_sun'].values
                                          .astype(float)) +
                                bn.nansum(out['iter_sha'].values
                                          .astype(float)))

    return summary


def write_csv(fname, df):

    """
    Writes the model outputs to a csv file.

    Arguments:
    ----------
    fname: string
        output filename (with path)

    df: pandas dataframe
        dataframe of the outputs

    Returns:
    --------
    The dataframe that was written.

    """

    df.to_csv(fname, index=False, na_rep='nan')
    logger.info('outputs written to %s', fname)

    return df


def read_csv(fname):

    # forcing or output file, with the first row as the header
    return pd.read_csv(fname, header=0)
