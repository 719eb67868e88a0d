#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
    pySteamToolbox - IAPWS-IF97 Water and Steam Property Utilities
              Copyright (C) 2022, Mark Burgoyne

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    The GNU General Public License can be found in the LICENSE directory,
    and at  <https://www.gnu.org/licenses/>.

          Contact author at mark.w.burgoyne@gmail.com
"""

import logging

from pysteamtoolbox.classes import quantity
from pysteamtoolbox.constants import T0, P0, TC, RHOC, T13, T25, T5, P132, P5, P_META, SC, S2BC
from pysteamtoolbox.errors import OutOfRangeError
from pysteamtoolbox.regions import (REGION1, REGION2, REGION2_META, REGION3, REGION4, REGION5,
                                    saturation_pressure, saturation_temperature, pressure_b23,
                                    temperature_b23, saturation_pressure_3h, saturation_pressure_3s,
                                    enthalpy_1_sat_liquid, enthalpy_3a_sat_liquid, enthalpy_2ab_sat_vapour,
                                    enthalpy_2c3b_sat_vapour, enthalpy_b13, temperature_b23_hs,
                                    liquid_t, vapour_t)
from pysteamtoolbox.shared_fns import bounded_root

logger = logging.getLogger(__name__)

# Entropy and enthalpy limits of the ambiguous B23 rectangle in the h-s plane
H_B23_MIN, H_B23_MAX = 2.563592004e3, 2.812942061e3
S_B23_MIN, S_B23_MAX = 5.048096828, 5.260578707
S_B13_MIN = 3.397782955  # s1(100 MPa, 623.15 K), lower end of the B13 line
S_B13_MAX = 3.778281340  # Upper entropy of the region 1 / 4 / 3 band
S_2AB_MAX = 9.155759395  # s''(273.15 K)
S_HS_LOW = 4.7516100567e-4  # Below this the region 1 equations can undershoot 273.15 K
PSAT3_TOL = 1 - 4.3e-6  # Relative margin of psat3(h) against region 3


def _log(pair, a, b, region):
    logger.debug("Region for %s = (%.10g, %.10g): %s", pair, a, b, region.name)
    return region


def _ps13():
    return saturation_pressure(T13)


def select_region_pt(p: float, T: float, metastable: bool = False):
    """ Returns the region model valid at pressure p (MPa) and temperature T (K).
        Region 4 is never returned; points on the saturation line go to region 1.
        p: Pressure (MPa)
        T: Temperature (K)
        metastable: If True, vapour states at p <= 10 MPa below the B23/region 5 band
                    use the metastable-vapour (supercooled steam) formulation
    """
    if p <= 0:
        raise OutOfRangeError(quantity.P, p, 0)
    if p > P132:
        raise OutOfRangeError(quantity.P, p, P132)
    if T < T0:
        raise OutOfRangeError(quantity.T, T, T0)
    if T > T5:
        raise OutOfRangeError(quantity.T, T, T5)
    if T > T25 and p > P5:
        raise OutOfRangeError((quantity.P, quantity.T), (p, T), (P5, T25))

    if T > T25:
        return _log('(p, T)', p, T, REGION5)

    if T > T13:
        region = REGION3 if p > pressure_b23(T) else REGION2
        return _log('(p, T)', p, T, region)

    if p > saturation_pressure(T):
        return _log('(p, T)', p, T, REGION1)

    if metastable and p <= P_META:
        return _log('(p, T)', p, T, REGION2_META)
    return _log('(p, T)', p, T, REGION2)


def select_region_rhot(rho: float, T: float):
    """ Returns region 3, the only formulation in density and temperature, for a
        single-phase (rho, T) state inside it: T >= 623.15 K, pressure from the
        B23 line up to 100 MPa, and below the critical temperature a density
        outside the two-phase range between saturated vapour and liquid.
        rho: Density (kg/m³)
        T: Temperature (K)
    """
    if rho <= 0:
        raise OutOfRangeError(quantity.RHO, rho, 0)
    if T < T13:
        raise OutOfRangeError(quantity.T, T, T13)

    p = REGION3.pressure_rhot(rho, T)
    if p > P132:
        raise OutOfRangeError(quantity.P, p, P132)
    p_b23 = pressure_b23(T)
    if p < p_b23:
        raise OutOfRangeError(quantity.P, p, p_b23)

    if T < TC:
        rho_liq, rho_vap = 1 / liquid_t(T).v, 1 / vapour_t(T).v
        if rho_vap < rho < rho_liq:
            raise OutOfRangeError(quantity.RHO, rho, rho_liq if rho > RHOC else rho_vap)
    return _log('(rho, T)', rho, T, REGION3)


def select_region_ph(p: float, h: float):
    """ Returns the region model valid at pressure p (MPa) and specific enthalpy h (kJ/kg).
        Region 4 is returned for two-phase states; the metastable region never is.
    """
    if p < P0:
        raise OutOfRangeError(quantity.P, p, P0)
    if p > P132:
        raise OutOfRangeError(quantity.P, p, P132)

    h_min = REGION1.specific_enthalpy_pt(p, T0)
    if h < h_min:
        raise OutOfRangeError(quantity.H, h, h_min)

    h25 = REGION2.specific_enthalpy_pt(p, T25)
    if h > h25:
        if p > P5:
            raise OutOfRangeError((quantity.P, quantity.H), (p, h), (P5, h25))
        h_max = REGION5.specific_enthalpy_pt(p, T5)
        if h > h_max:
            raise OutOfRangeError(quantity.H, h, h_max)
        return _log('(p, h)', p, h, REGION5)

    ps13 = _ps13()
    if p <= ps13:
        Ts = saturation_temperature(p)
        if h < REGION1.specific_enthalpy_pt(p, Ts):
            region = REGION1
        elif h > REGION2.specific_enthalpy_pt(p, Ts):
            region = REGION2
        else:
            region = REGION4
        return _log('(p, h)', p, h, region)

    hs13 = REGION1.specific_enthalpy_pt(ps13, T13)
    hs23 = REGION2.specific_enthalpy_pt(ps13, T13)
    if hs13 <= h <= hs23:
        region = REGION3 if p > saturation_pressure_3h(h) * PSAT3_TOL else REGION4
    elif h <= REGION1.specific_enthalpy_pt(p, T13):
        region = REGION1
    elif h >= REGION2.specific_enthalpy_pt(p, temperature_b23(p)):
        region = REGION2
    else:
        region = REGION3
    return _log('(p, h)', p, h, region)


def select_region_ps(p: float, s: float):
    """ Returns the region model valid at pressure p (MPa) and specific entropy s (kJ/kg·K).
        Region 4 is returned for two-phase states; the metastable region never is.
    """
    if p < P0:
        raise OutOfRangeError(quantity.P, p, P0)
    if p > P132:
        raise OutOfRangeError(quantity.P, p, P132)

    s_min = REGION1.specific_entropy_pt(p, T0)
    if s < s_min:
        raise OutOfRangeError(quantity.S, s, s_min)

    s25 = REGION2.specific_entropy_pt(p, T25)
    if s > s25:
        if p > P5:
            raise OutOfRangeError((quantity.P, quantity.S), (p, s), (P5, s25))
        s_max = REGION5.specific_entropy_pt(p, T5)
        if s > s_max:
            raise OutOfRangeError(quantity.S, s, s_max)
        return _log('(p, s)', p, s, REGION5)

    ps13 = _ps13()
    if p < ps13:
        Ts = saturation_temperature(p)
        if s < REGION1.specific_entropy_pt(p, Ts):
            region = REGION1
        elif s > REGION2.specific_entropy_pt(p, Ts):
            region = REGION2
        else:
            region = REGION4
        return _log('(p, s)', p, s, region)

    ss13 = REGION1.specific_entropy_pt(ps13, T13)
    ss23 = REGION2.specific_entropy_pt(ps13, T13)
    if ss13 <= s <= ss23 and p < saturation_pressure_3s(s):
        region = REGION4
    elif s <= REGION1.specific_entropy_pt(p, T13):
        region = REGION1
    elif s < REGION2.specific_entropy_pt(p, temperature_b23(p)):
        region = REGION3
    else:
        region = REGION2
    return _log('(p, s)', p, s, region)


def _hs_upper_enthalpy(s):
    # Upper enthalpy limit on the 100 MPa isobar, then along the 1073.15 K isotherm
    if s <= REGION1.specific_entropy_pt(P132, T13):
        return REGION1.specific_enthalpy_pt(P132, REGION1.temperature_ps(P132, s))
    if s <= REGION2.specific_entropy_pt(P132, 863.15):
        return REGION3.specific_enthalpy_ps(P132, s)
    if s <= REGION2.specific_entropy_pt(P132, T25):
        return REGION2.specific_enthalpy_pt(P132, REGION2.temperature_ps(P132, s))

    s_max = REGION2.specific_entropy_pt(P0, T25)
    if s > s_max:
        raise OutOfRangeError(quantity.S, s, s_max)
    p = bounded_root(lambda x: REGION2.specific_entropy_pt(x, T25) - s, P0, P132)
    return REGION2.specific_enthalpy_pt(p, T25)


def select_region_hs(h: float, s: float):
    """ Returns the region model valid at specific enthalpy h (kJ/kg) and specific entropy s (kJ/kg·K).
        Region 5 is outside the h-s backward equations and never returned.
    """
    h_min = REGION1.specific_enthalpy_pt(P0, T0)
    if h < h_min:
        raise OutOfRangeError(quantity.H, h, h_min)

    s_min = REGION1.specific_entropy_pt(P132, T0)
    if s < s_min:
        raise OutOfRangeError(quantity.S, s, s_min)

    if s < S_HS_LOW:
        p1 = REGION1.pressure_hs(h, s)
        if REGION1.temperature_ph(p1, h) + 0.024 < T0:
            raise OutOfRangeError(quantity.S, s, REGION1.specific_entropy_pt(p1, T0))

    h_max = _hs_upper_enthalpy(s)
    if h > h_max:
        raise OutOfRangeError(quantity.H, h, h_max)

    if s <= S_B13_MAX:
        if h <= enthalpy_1_sat_liquid(s):
            region = REGION4
        elif s > S_B13_MIN and h > enthalpy_b13(s):
            region = REGION3
        else:
            region = REGION1
    elif s <= SC:
        region = REGION3 if h > enthalpy_3a_sat_liquid(s) else REGION4
    elif s < S2BC:
        if h <= enthalpy_2c3b_sat_vapour(s):
            region = REGION4
        elif h <= H_B23_MIN or s <= S_B23_MIN:
            region = REGION3
        elif h >= H_B23_MAX or s >= S_B23_MAX:
            region = REGION2
        elif REGION2.pressure_hs(h, s) > pressure_b23(temperature_b23_hs(h, s)):
            region = REGION3
        else:
            region = REGION2
    elif s <= S_2AB_MAX and h <= enthalpy_2ab_sat_vapour(s):
        region = REGION4
    else:
        region = REGION2
    return _log('(h, s)', h, s, region)
