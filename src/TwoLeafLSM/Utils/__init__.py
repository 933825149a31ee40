from .constants_and_conversions import ConvertUnits, Constants
from .default_params import default_params, default_control
