import numpy as np
import pandas as pd
import pytest

from TwoLeafLSM.Utils import default_params, default_control
from TwoLeafLSM.SPAC import default_fluxes
from TwoLeafLSM.run_utils import build_forcings


# mild, well watered half-hour
MET = {'doy': 180., 'PPFD': 500., 'Tair': 25., 'VPD': 1.5, 'Patm': 101.325,
       'u': 2., 'CO2': 400.}


@pytest.fixture
def p():

    p = pd.Series(vars(default_params()), dtype=float)

    for key, val in MET.items():
        p[key] = val

    return p


@pytest.fixture
def make_met():

    def _make_met(ndays=1, **kwargs):

        nslots = 48 * ndays
        met = {key: np.full(nslots, val) for key, val in MET.items()}
        met['doy'] = np.repeat(np.arange(ndays) + MET['doy'], 48)
        met.update(kwargs)

        return pd.DataFrame(met)

    return _make_met


@pytest.fixture
def forcing(make_met):

    return build_forcings(make_met())


@pytest.fixture
def control():

    return default_control()


@pytest.fixture
def fluxes():

    return default_fluxes()
