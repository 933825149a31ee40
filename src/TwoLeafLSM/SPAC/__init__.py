from .weather import vpsat, slope_vpsat, LH_water_vapour, psychometric
from .weather import emissivity_atm, net_isothermal_lw
from .leaf import radiation_conductance, bdn_layer_forced_conduct
from .leaf import bdn_layer_free_conduct, conductances
from .leaf import isothermal_net_radiation, penman_leaf, leaf_energy_balance
from .leaf import photosynthesis_C3
from .canopy import calculate_zenith_angle, get_diffuse_frac
from .canopy import absorbed_radiation_2_leaves
from .canopy import canopy_nitrogen, top_of_canopy_n
from .fluxes import default_fluxes, zero_carbon_day_fluxes
from .fluxes import zero_water_day_fluxes, update_daily_carbon_fluxes
from .soil import SubDailyWaterBalance, soil_evap, soil_net_radiation
