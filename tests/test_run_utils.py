import numpy as np
import pandas as pd
import pytest

from TwoLeafLSM.Utils import default_params
from TwoLeafLSM.run_utils import build_forcings, time_step, summarise_day
from TwoLeafLSM.run_utils import write_csv, read_csv


def test_build_forcings_adds_params(make_met):

    df = build_forcings(make_met())

    for key, val in vars(default_params()).items():
        assert (df[key] == val).all()

    assert len(df) == 48


def test_build_forcings_met_wins(make_met):

    lai = np.linspace(1., 3., 48)
    df = build_forcings(make_met(LAI=lai))

    assert np.array_equal(df['LAI'].values, lai)


def test_build_forcings_missing_met(make_met):

    with pytest.raises(KeyError, match='VPD'):
        build_forcings(make_met().drop(columns=['VPD']))


def test_time_step_is_a_copy(forcing):

    p = time_step(forcing, 3)
    p.Tair = -40.

    assert forcing['Tair'].iloc[3] == 25.


def test_summarise_day():

    out = pd.DataFrame({'sun_up': [False, True, True, False],
                        'Tleaf_sun': [np.nan, 27., 29., np.nan],
                        'Tleaf_sha': [np.nan, 25.5, 26., np.nan],
                        'gsc_canopy': [0., 0.2, 0.4, 0.],
                        'iter_sun': [0, 3, 4, 0],
                        'iter_sha': [0, 2, 2, 0]})
    summary = summarise_day(out)

    assert summary['daylight_slots'] == 2
    assert summary['Tleaf_sun_max'] == 29.
    assert summary['Tleaf_sha_max'] == 26.
    assert np.isclose(summary['gsc_canopy_mean'], 0.3)
    assert summary['iterations'] == 11


def test_write_then_read_csv(tmp_path):

    fname = str(tmp_path / 'out.csv')
    df = pd.DataFrame({'doy': [1., 2.], 'gpp': [0.1, np.nan]})
    write_csv(fname, df)
    df2 = read_csv(fname)

    assert list(df2.columns) == ['doy', 'gpp']
    assert np.isnan(df2['gpp'].iloc[1])
