"""
IAPWS-IF97 region models and boundary equations.

Provides the region singletons REGION1, REGION2, REGION2_META, REGION3,
REGION4 and REGION5, the boundary curves and the saturation functions.
"""

from .base import Region, GibbsRegion
from .boundaries import (saturation_pressure, saturation_temperature, pressure_b23, temperature_b23,
                         enthalpy_b2bc, pressure_b2bc, enthalpy_3ab, saturation_pressure_3h,
                         saturation_pressure_3s, enthalpy_1_sat_liquid, enthalpy_3a_sat_liquid,
                         enthalpy_2ab_sat_vapour, enthalpy_2c3b_sat_vapour, enthalpy_b13, temperature_b23_hs)
from .region1 import REGION1
from .region2 import REGION2
from .region2meta import REGION2_META
from .region3 import REGION3, subregion_pt
from .region4 import (REGION4, SaturationState, saturation_pressure_t, saturation_temperature_p,
                      saturation_temperature_hs, solve_saturation_temperature_hs, saturation_pressure_hs,
                      liquid_p, vapour_p, liquid_t, vapour_t, mixture_px, mixture_tx, vapour_fraction_ph,
                      vapour_fraction_ps, vapour_fraction_ts, vapour_fraction_hs)
from .region5 import REGION5
