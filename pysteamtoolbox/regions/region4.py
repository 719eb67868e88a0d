"""
IAPWS-IF97 Region 4: the saturation line and the two-phase mixture.

Provides:
    - saturation_pressure_t(T), saturation_temperature_p(p): range checked basic equation
    - saturation_temperature_hs(h, s): SR4 backward equation for s >= 5.21 kJ/kg·K
    - solve_saturation_temperature_hs(h, s), saturation_pressure_hs(h, s): Tsat and psat
      from (h, s) over the whole two-phase region, consistent with the saturated endpoints
    - liquid_p(p), vapour_p(p), liquid_t(T), vapour_t(T): saturated endpoints
    - mixture_px(p, x), mixture_tx(T, x): two-phase states by vapour fraction
    - vapour_fraction_ph/ps/ts/hs: vapour fraction recovered from a state pair
    - REGION4: the two-phase region behind the Region capability interface

Saturated endpoints below 623.15 K come from regions 1 and 2. Above it both
phases lie in region 3; their densities start from the region 3 v(p,T)
backward equation and are refined by Newton iteration on p3(rho, Tsat) = psat.

Reference:
    IAPWS R7-97(2012), equations 30 and 31.
    IAPWS SR4-04(2014), section 5.3, Tsat(h,s) for the two-phase region.

Units: T in K, P in MPa, v in m³/kg, h in kJ/kg, s in kJ/kg·K
"""

import logging
from collections import namedtuple

from scipy.optimize import newton

from pysteamtoolbox.classes import quantity
from pysteamtoolbox.constants import TC, PC, RHOC, T0, P0, T13, SC, S2BC
from pysteamtoolbox.errors import OutOfRangeError
from pysteamtoolbox.regions.base import Region, series
from pysteamtoolbox.regions.boundaries import (saturation_pressure, saturation_temperature,
                                               enthalpy_2ab_sat_vapour, enthalpy_2c3b_sat_vapour)
from pysteamtoolbox.regions.region1 import REGION1
from pysteamtoolbox.regions.region2 import REGION2
from pysteamtoolbox.regions.region3 import REGION3, LIQUID, VAPOUR
from pysteamtoolbox.shared_fns import MAX_ITER, bounded_root

logger = logging.getLogger(__name__)

SaturationState = namedtuple('SaturationState', ['p', 'T', 'v', 'h', 's', 'u'])

# Entropy limits of the Tsat(h,s) equation: s''(623.15 K) and s''(273.15 K)
S_HS_MIN = 5.210887825
S_HS_MAX = 9.155759395

X_ROUNDING = 1e-9  # Vapour fraction overshoot accepted as rounding at the saturated endpoints
HS_ROUNDING = 1e-6  # kJ/kg, enthalpy overshoot of the saturation or triple line accepted as rounding

# Tsat(h,s), SR4 table 29, (I_i, J_i, n_i)
_TSAT_HS_IJN = (
    (0, 0, 0.179882673606601),
    (0, 3, -0.267507455199603),
    (0, 12, 0.116276722612600e1),
    (1, 0, 0.147545428713616),
    (1, 1, -0.512871635973248),
    (1, 2, 0.421333567697984),
    (1, 5, 0.563749522189870),
    (2, 0, 0.429274443819153),
    (2, 5, -0.335704552142140e1),
    (2, 8, 0.108890916499278e2),
    (3, 0, -0.248483390456012),
    (3, 2, 0.304153221906390),
    (3, 3, -0.494819763939905),
    (3, 4, 0.107551674933261e1),
    (4, 0, 0.733888415457688e-1),
    (4, 1, 0.140170545411085e-1),
    (5, 1, -0.106110975998808),
    (5, 2, 0.168324361811875e-1),
    (5, 4, 0.125028363714877e1),
    (5, 16, 0.101316840309509e4),
    (6, 6, -0.151791558000712e1),
    (6, 8, 0.524277865990866e2),
    (6, 22, 0.230495545563912e5),
    (8, 1, 0.249459806365456e-1),
    (10, 20, 0.210796467412137e7),
    (10, 36, 0.366836848613065e9),
    (12, 24, -0.144814105365163e9),
    (14, 1, -0.179276373003590e-2),
    (14, 28, 0.489955602100459e10),
    (16, 12, 0.471262212070518e3),
    (16, 32, -0.829294390198652e11),
    (18, 14, -0.171545662263191e4),
    (18, 22, 0.355777682973575e7),
    (18, 36, 0.586062760258436e12),
    (20, 24, -0.129887635078195e8),
    (28, 36, 0.317247449371057e11),
)


def check_temperature(T):
    if T < T0:
        raise OutOfRangeError(quantity.T, T, T0)
    if T > TC:
        raise OutOfRangeError(quantity.T, T, TC)


def check_pressure(p):
    if p < P0:
        raise OutOfRangeError(quantity.P, p, P0)
    if p > PC:
        raise OutOfRangeError(quantity.P, p, PC)


def check_vapour_fraction(x):
    if x < 0:
        raise OutOfRangeError(quantity.X, x, 0)
    if x > 1:
        raise OutOfRangeError(quantity.X, x, 1)


def saturation_pressure_t(T):
    """
    Saturation pressure for 273.15 K <= T <= Tc.

    Parameters:
        T: temperature in K

    Returns:
        saturation pressure in MPa
    """
    check_temperature(T)
    return saturation_pressure(T)


def saturation_temperature_p(p):
    """
    Saturation temperature for p(273.15 K) <= p <= pc.

    Parameters:
        p: pressure in MPa

    Returns:
        saturation temperature in K
    """
    check_pressure(p)
    return saturation_temperature(p)


def _critical_state():
    return SaturationState(PC, TC, 1 / RHOC,
                           REGION3.specific_enthalpy_rhot(RHOC, TC),
                           REGION3.specific_entropy_rhot(RHOC, TC),
                           REGION3.specific_internal_energy_rhot(RHOC, TC))


def _state_pt(region, p, T):
    return SaturationState(p, T,
                           region.specific_volume_pt(p, T),
                           region.specific_enthalpy_pt(p, T),
                           region.specific_entropy_pt(p, T),
                           region.specific_internal_energy_pt(p, T))


def saturated_density(p, T, phase):
    """
    Saturated liquid or vapour density in region 3 (T > 623.15 K).

    The v(p,T) backward equation for the requested phase gives the starting
    point, then Newton iteration solves p3(rho, T) = p with (dp/drho)_T = 1 / (rho kappaT).
    Failure to converge within MAX_ITER propagates as scipy's RuntimeError.
    """
    rho0 = REGION3.density_pt(p, T, phase)

    def dp(rho):
        return REGION3.pressure_rhot(rho, T) - p

    def dp_drho(rho):
        return 1 / (rho * REGION3.isothermal_compressibility_rhot(rho, T))

    rho = newton(dp, rho0, fprime=dp_drho, tol=1e-9, rtol=1e-12, maxiter=MAX_ITER)
    logger.debug("Saturated %s density at %.6g K: %.10g kg/m3 (start %.10g)", phase, T, rho, rho0)
    return rho


def _endpoint(p, T, phase):
    if p >= PC or T >= TC:
        return _critical_state()
    if T <= T13:
        return _state_pt(REGION1 if phase == LIQUID else REGION2, p, T)
    rho = saturated_density(p, T, phase)
    return SaturationState(p, T, 1 / rho,
                           REGION3.specific_enthalpy_rhot(rho, T),
                           REGION3.specific_entropy_rhot(rho, T),
                           REGION3.specific_internal_energy_rhot(rho, T))


def liquid_p(p):
    """ Saturated liquid state at pressure p (MPa) """
    return _endpoint(p, saturation_temperature_p(p), LIQUID)


def vapour_p(p):
    """ Saturated vapour state at pressure p (MPa) """
    return _endpoint(p, saturation_temperature_p(p), VAPOUR)


def liquid_t(T):
    """ Saturated liquid state at temperature T (K) """
    return _endpoint(saturation_pressure_t(T), T, LIQUID)


def vapour_t(T):
    """ Saturated vapour state at temperature T (K) """
    return _endpoint(saturation_pressure_t(T), T, VAPOUR)


def _mix(liq, vap, x):
    return SaturationState(liq.p, liq.T,
                           liq.v + x * (vap.v - liq.v),
                           liq.h + x * (vap.h - liq.h),
                           liq.s + x * (vap.s - liq.s),
                           liq.u + x * (vap.u - liq.u))


def mixture_px(p, x):
    """
    Two-phase state from pressure and vapour fraction.

    Parameters:
        p: pressure in MPa
        x: vapour fraction, 0 <= x <= 1

    Returns:
        SaturationState with linearly interpolated v, h, s and u
    """
    check_vapour_fraction(x)
    return _mix(liquid_p(p), vapour_p(p), x)


def mixture_tx(T, x):
    """ Two-phase state from temperature (K) and vapour fraction """
    check_vapour_fraction(x)
    return _mix(liquid_t(T), vapour_t(T), x)


def _fraction(q, value, liquid_value, vapour_value, clamp=False):
    """
    Lever rule x = (value - liquid) / (vapour - liquid).

    Values within X_ROUNDING of the saturated endpoints are clamped to [0, 1],
    anything further out raises OutOfRangeError naming q and the endpoint it
    lies beyond. clamp=True clamps unconditionally, for states already placed
    in region 4 by the region 3 boundary backward equations.
    """
    if vapour_value == liquid_value:  # Critical point
        return 0.0 if value <= liquid_value else 1.0
    x = (value - liquid_value) / (vapour_value - liquid_value)
    if x < -X_ROUNDING and not clamp:
        raise OutOfRangeError(q, value, liquid_value)
    if x > 1 + X_ROUNDING and not clamp:
        raise OutOfRangeError(q, value, vapour_value)
    return min(1.0, max(0.0, x))


def vapour_fraction_ph(p, h, clamp=False):
    liq, vap = liquid_p(p), vapour_p(p)
    return _fraction(quantity.H, h, liq.h, vap.h, clamp)


def vapour_fraction_ps(p, s, clamp=False):
    liq, vap = liquid_p(p), vapour_p(p)
    return _fraction(quantity.S, s, liq.s, vap.s, clamp)


def vapour_fraction_ts(T, s, clamp=False):
    liq, vap = liquid_t(T), vapour_t(T)
    return _fraction(quantity.S, s, liq.s, vap.s, clamp)


def check_hs(h, s):
    """
    Validity of the Tsat(h,s) backward equation: the two-phase region for
    T <= 623.15 K, bounded by the saturated vapour line and the triple line.
    """
    if s < S_HS_MIN:
        raise OutOfRangeError(quantity.S, s, S_HS_MIN)
    if s > S_HS_MAX:
        raise OutOfRangeError(quantity.S, s, S_HS_MAX)

    h_vap = enthalpy_2ab_sat_vapour(s) if s >= S2BC else enthalpy_2c3b_sat_vapour(s)
    if h > h_vap:
        raise OutOfRangeError(quantity.H, h, h_vap)

    liq = liquid_t(T0)
    h_triple = liq.h + T0 * (s - liq.s)
    if h < h_triple:
        raise OutOfRangeError(quantity.H, h, h_triple)


def saturation_temperature_hs(h, s):
    """
    Saturation temperature from specific enthalpy and entropy (SR4 backward equation).

    Parameters:
        h: specific enthalpy in kJ/kg
        s: specific entropy in kJ/kg·K

    Returns:
        saturation temperature in K
    """
    check_hs(h, s)
    return series(_TSAT_HS_IJN, h / 2800 - 0.119, s / 9.2 - 1.07) * 550


def _tie_line_enthalpy(T, s):
    # Enthalpy at entropy s on the straight two-phase isotherm through h'(T), s'(T) and h''(T), s''(T)
    liq, vap = liquid_t(T), vapour_t(T)
    if vap.s == liq.s:
        return liq.h
    return liq.h + (s - liq.s) * (vap.h - liq.h) / (vap.s - liq.s)


def solve_saturation_temperature_hs(h, s, clamp=False):
    """
    Saturation temperature of a two-phase state from (h, s), consistent with
    the saturated endpoints of regions 1, 2 and 3.

    Tsat solves (h - h') / (h'' - h') = (s - s') / (s'' - s'), i.e. the point
    lies on the isotherm's tie line. Tie lines rise with T at fixed s until the
    saturation line reaches s, at s'(T) = s left of the critical entropy and
    s''(T) = s right of it, which bounds the bracket.

    States within HS_ROUNDING kJ/kg of the saturation or triple line resolve to
    that line; clamp=True does so for any state, for points the region
    selector has already placed in region 4.
    """
    liq, vap = liquid_t(T0), vapour_t(T0)
    if s < liq.s:
        raise OutOfRangeError(quantity.S, s, liq.s)
    if s > vap.s:
        raise OutOfRangeError(quantity.S, s, vap.s)

    if s < SC:
        T_max = bounded_root(lambda T: liquid_t(T).s - s, T0, TC)
    elif s > SC:
        T_max = bounded_root(lambda T: vapour_t(T).s - s, T0, TC)
    else:
        T_max = TC

    def residual(T):
        return h - _tie_line_enthalpy(T, s)

    low = residual(T0)
    if low <= 0:
        if low > -HS_ROUNDING or clamp:
            return T0
        raise OutOfRangeError(quantity.H, h, h - low)
    high = residual(T_max)
    if high >= 0:
        if high < HS_ROUNDING or clamp:
            return T_max
        raise OutOfRangeError(quantity.H, h, h - high)

    return bounded_root(residual, T0, T_max)


def saturation_pressure_hs(h, s, clamp=False):
    return saturation_pressure(solve_saturation_temperature_hs(h, s, clamp))


def vapour_fraction_hs(h, s, clamp=False):
    T = solve_saturation_temperature_hs(h, s, clamp)
    liq, vap = liquid_t(T), vapour_t(T)
    return _fraction(quantity.H, h, liq.h, vap.h, clamp)


class Region4(Region):
    """
    Two-phase region. Only properties defined by the vapour fraction exist
    here; single phase properties such as cp or w raise UnsupportedOperationError.

    States reach this class through the region selector, whose region 3 and
    SR4 boundaries are backward equations, so vapour fractions are clamped to
    [0, 1] here rather than range checked.
    """

    name = 'Region 4'
    variables = 'sat'

    def temperature_ph(self, p, h):
        return saturation_temperature_p(p)

    def temperature_ps(self, p, s):
        return saturation_temperature_p(p)

    def temperature_hs(self, h, s):
        return solve_saturation_temperature_hs(h, s, clamp=True)

    def pressure_hs(self, h, s):
        return saturation_pressure_hs(h, s, clamp=True)

    def vapour_fraction_ph(self, p, h):
        return vapour_fraction_ph(p, h, clamp=True)

    def vapour_fraction_ps(self, p, s):
        return vapour_fraction_ps(p, s, clamp=True)

    def vapour_fraction_hs(self, h, s):
        return vapour_fraction_hs(h, s, clamp=True)

    def state_ph(self, p, h):
        return mixture_px(p, self.vapour_fraction_ph(p, h))

    def state_ps(self, p, s):
        return mixture_px(p, self.vapour_fraction_ps(p, s))

    def state_hs(self, h, s):
        T = self.temperature_hs(h, s)
        liq, vap = liquid_t(T), vapour_t(T)
        return _mix(liq, vap, _fraction(quantity.H, h, liq.h, vap.h, clamp=True))

    def specific_volume_ph(self, p, h):
        return self.state_ph(p, h).v

    def specific_volume_ps(self, p, s):
        return self.state_ps(p, s).v

    def specific_volume_hs(self, h, s):
        return self.state_hs(h, s).v

    def specific_enthalpy_ps(self, p, s):
        return self.state_ps(p, s).h

    def specific_entropy_ph(self, p, h):
        return self.state_ph(p, h).s


REGION4 = Region4()
