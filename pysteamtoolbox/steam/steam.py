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

# Public property functions of IAPWS-IF97 water and steam.
#
# Functions are named <property>_<pair>, the pair naming the two independent
# state variables: pt, ph, ps, hs, rhot (density & temperature), px and tx
# (pressure or temperature & vapour fraction on the saturation line).
# Every argument takes a single float, list or numpy array; scalars return a
# float, anything list-like a numpy array of the broadcast shape.
#
# Units: p MPa, T K, rho kg/m³, v m³/kg, h u g kJ/kg, s cp cv kJ/kg·K, x -

from collections import namedtuple

import numpy as np
import numpy.typing as npt

from pysteamtoolbox.constants import R, SC
from pysteamtoolbox.errors import UnsupportedOperationError
from pysteamtoolbox import regions as reg
from pysteamtoolbox.regions import REGION3, REGION4
from pysteamtoolbox.selector import (select_region_pt, select_region_rhot, select_region_ph, select_region_ps,
                                     select_region_hs)
from pysteamtoolbox import derivatives
from pysteamtoolbox import transport
from pysteamtoolbox.transport import WAVELENGTH_DEFAULT
from pysteamtoolbox.shared_fns import apply_elementwise

# A resolved state. mix holds the SaturationState of a two-phase state, else None
_State = namedtuple('_State', ['region', 'p', 'T', 'rho', 'x', 'mix'])


# ====================================================================
# State resolution, one per input pair
# ====================================================================

def _two_phase(mix, x):
    return _State(REGION4, mix.p, mix.T, 1 / mix.v, x, mix)


def _dense_fluid_fraction(rho, T):
    # Region 3 is single phase; report liquid-like or vapour-like by entropy
    return 0.0 if REGION3.specific_entropy_rhot(rho, T) <= SC else 1.0


def _state_pt(p, T, metastable=False):
    region = select_region_pt(p, T, metastable)
    if region.variables == 'rhoT':
        rho = region.density_pt(p, T)
        return _State(region, p, T, rho, _dense_fluid_fraction(rho, T), None)
    return _State(region, p, T, 1 / region.specific_volume_pt(p, T), region.vapour_fraction, None)


def _state_ph(p, h):
    region = select_region_ph(p, h)
    if region.variables == 'sat':
        x = region.vapour_fraction_ph(p, h)
        return _two_phase(reg.mixture_px(p, x), x)
    T = region.temperature_ph(p, h)
    if region.variables == 'rhoT':
        rho = 1 / region.specific_volume_ph(p, h)
    else:
        rho = 1 / region.specific_volume_pt(p, T)
    return _State(region, p, T, rho, region.vapour_fraction_ph(p, h), None)


def _state_ps(p, s):
    region = select_region_ps(p, s)
    if region.variables == 'sat':
        x = region.vapour_fraction_ps(p, s)
        return _two_phase(reg.mixture_px(p, x), x)
    T = region.temperature_ps(p, s)
    if region.variables == 'rhoT':
        rho = 1 / region.specific_volume_ps(p, s)
    else:
        rho = 1 / region.specific_volume_pt(p, T)
    return _State(region, p, T, rho, region.vapour_fraction_ps(p, s), None)


def _state_hs(h, s):
    region = select_region_hs(h, s)
    if region.variables == 'sat':
        x = region.vapour_fraction_hs(h, s)
        return _two_phase(reg.mixture_tx(region.temperature_hs(h, s), x), x)
    p = region.pressure_hs(h, s)
    T = region.temperature_ph(p, h)
    if region.variables == 'rhoT':
        rho = 1 / region.specific_volume_ph(p, h)
    else:
        rho = 1 / region.specific_volume_pt(p, T)
    return _State(region, p, T, rho, region.vapour_fraction_hs(h, s), None)


def _state_rhot(rho, T):
    region = select_region_rhot(rho, T)
    return _State(region, region.pressure_rhot(rho, T), T, rho, _dense_fluid_fraction(rho, T), None)


def _state_px(p, x):
    return _two_phase(reg.mixture_px(p, x), x)


def _state_tx(T, x):
    return _two_phase(reg.mixture_tx(T, x), x)


# ====================================================================
# Property evaluation on a resolved state
# ====================================================================

_MIXTURE_FIELDS = {
    'specific_enthalpy': 'h',
    'specific_entropy': 's',
    'specific_internal_energy': 'u',
}


def _thermo(state, name):
    """ Evaluates a region property method by name, in the region's natural variables """
    if state.mix is not None:
        if name in _MIXTURE_FIELDS:
            return getattr(state.mix, _MIXTURE_FIELDS[name])
        if name == 'specific_gibbs_free_energy':
            return state.mix.h - state.T * state.mix.s
        raise UnsupportedOperationError(REGION4.name, name)
    region = state.region
    if region.variables == 'rhoT':
        return getattr(region, name + '_rhot')(state.rho, state.T)
    return getattr(region, name + '_pt')(state.p, state.T)


def _single_phase(state, name):
    if state.mix is not None:
        raise UnsupportedOperationError(REGION4.name, name)
    return state


def _density(state):
    return state.rho


def _specific_volume(state):
    return 1 / state.rho


def _specific_enthalpy(state):
    return _thermo(state, 'specific_enthalpy')


def _specific_entropy(state):
    return _thermo(state, 'specific_entropy')


def _specific_internal_energy(state):
    return _thermo(state, 'specific_internal_energy')


def _specific_gibbs_free_energy(state):
    return _thermo(state, 'specific_gibbs_free_energy')


def _isobaric_heat_capacity(state):
    return _thermo(state, 'specific_isobaric_heat_capacity')


def _isochoric_heat_capacity(state):
    return _thermo(state, 'specific_isochoric_heat_capacity')


def _speed_of_sound(state):
    return _thermo(state, 'speed_of_sound')


def _isentropic_exponent(state):
    return _thermo(state, 'isentropic_exponent')


def _isobaric_cubic_expansion_coefficient(state):
    return _thermo(state, 'isobaric_cubic_expansion_coefficient')


def _compressibility(state):
    return _thermo(state, 'isothermal_compressibility')


def _compression_factor(state):
    # z = p v / (R T), p converted to kPa to match R in kJ/kg·K
    return state.p * 1e3 / (state.rho * R * state.T)


def _dynamic_viscosity(state):
    state = _single_phase(state, 'dynamic_viscosity')
    return transport.dynamic_viscosity_rhot(state.rho, state.T)


def _kinematic_viscosity(state):
    return transport.kinematic_viscosity(_dynamic_viscosity(state), state.rho)


def _thermal_conductivity(state):
    state = _single_phase(state, 'thermal_conductivity')
    return transport.thermal_conductivity_rhot(state.rho, state.T)


def _thermal_diffusivity(state):
    return transport.thermal_diffusivity(_thermal_conductivity(state), state.rho, _isobaric_heat_capacity(state))


def _prandtl(state):
    return transport.prandtl_number(_dynamic_viscosity(state), _isobaric_heat_capacity(state),
                                    _thermal_conductivity(state))


def _dielectric_constant(state):
    state = _single_phase(state, 'dielectric_constant')
    return transport.dielectric_constant_rhot(state.rho, state.T)


def _refractive_index(state, wavelength):
    state = _single_phase(state, 'refractive_index')
    return transport.refractive_index_rhot(state.rho, state.T, wavelength)


def _temperature(state):
    return state.T


def _pressure(state):
    return state.p


def _vapour_fraction(state):
    return state.x


def _evaluate(resolve, prop, a, b, **kwargs):
    return apply_elementwise(lambda x, y: prop(resolve(x, y, **kwargs)), a, b)


def _evaluate_refractive(resolve, a, b, wavelength, **kwargs):
    return apply_elementwise(lambda x, y, wl: _refractive_index(resolve(x, y, **kwargs), wl), a, b, wavelength)


# ====================================================================
# Region lookup
# ====================================================================

def region_pt(p: float, T: float, metastable: bool = False):
    """ Returns the region model for a single (p, T) state """
    return select_region_pt(p, T, metastable)


def region_ph(p: float, h: float):
    """ Returns the region model for a single (p, h) state """
    return select_region_ph(p, h)


def region_ps(p: float, s: float):
    """ Returns the region model for a single (p, s) state """
    return select_region_ps(p, s)


def region_hs(h: float, s: float):
    """ Returns the region model for a single (h, s) state """
    return select_region_hs(h, s)


# ====================================================================
# Saturation line
# ====================================================================

def saturation_pressure_t(T: npt.ArrayLike) -> np.ndarray:
    """ Returns saturation pressure (MPa)
        T: Temperature (K), 273.15 to 647.096
    """
    return apply_elementwise(reg.saturation_pressure_t, T)


def saturation_temperature_p(p: npt.ArrayLike) -> np.ndarray:
    """ Returns saturation temperature (K)
        p: Pressure (MPa), 611.213 Pa to 22.064 MPa
    """
    return apply_elementwise(reg.saturation_temperature_p, p)


def saturation_temperature_hs(h: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns saturation temperature (K) of a two-phase state from specific enthalpy (kJ/kg)
        and specific entropy (kJ/kg·K).
        States outside the two-phase region raise OutOfRangeError
    """
    return apply_elementwise(reg.solve_saturation_temperature_hs, h, s)


def saturation_pressure_hs(h: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns saturation pressure (MPa) of a two-phase state from specific enthalpy (kJ/kg)
        and specific entropy (kJ/kg·K).
        States outside the two-phase region raise OutOfRangeError
    """
    return apply_elementwise(reg.saturation_pressure_hs, h, s)


def surface_tension_t(T: npt.ArrayLike) -> np.ndarray:
    """ Returns surface tension (N/m) at temperature T (K), 273.15 to 647.096 """
    return apply_elementwise(transport.surface_tension_t, T)


def surface_tension_p(p: npt.ArrayLike) -> np.ndarray:
    """ Returns surface tension (N/m) at the saturation temperature of pressure p (MPa) """
    return apply_elementwise(lambda x: transport.surface_tension_t(reg.saturation_temperature_p(x)), p)


def vapour_fraction_ts(T: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns vapour fraction (-) of a two-phase state from temperature (K) and specific entropy (kJ/kg·K) """
    return apply_elementwise(reg.vapour_fraction_ts, T, s)


# Saturated liquid and vapour endpoints

def _saturated(endpoint, field):
    return lambda x: getattr(endpoint(x), field)


def density_saturated_liquid_p(p: npt.ArrayLike) -> np.ndarray:
    """ Returns density (kg/m³) of saturated liquid at pressure p (MPa) """
    return apply_elementwise(lambda x: 1 / reg.liquid_p(x).v, p)


def specific_volume_saturated_liquid_p(p: npt.ArrayLike) -> np.ndarray:
    """ Returns specific volume (m³/kg) of saturated liquid at pressure p (MPa) """
    return apply_elementwise(_saturated(reg.liquid_p, 'v'), p)


def specific_enthalpy_saturated_liquid_p(p: npt.ArrayLike) -> np.ndarray:
    """ Returns specific enthalpy (kJ/kg) of saturated liquid at pressure p (MPa) """
    return apply_elementwise(_saturated(reg.liquid_p, 'h'), p)


def specific_entropy_saturated_liquid_p(p: npt.ArrayLike) -> np.ndarray:
    """ Returns specific entropy (kJ/kg·K) of saturated liquid at pressure p (MPa) """
    return apply_elementwise(_saturated(reg.liquid_p, 's'), p)


def specific_internal_energy_saturated_liquid_p(p: npt.ArrayLike) -> np.ndarray:
    """ Returns specific internal energy (kJ/kg) of saturated liquid at pressure p (MPa) """
    return apply_elementwise(_saturated(reg.liquid_p, 'u'), p)


def density_saturated_liquid_t(T: npt.ArrayLike) -> np.ndarray:
    """ Returns density (kg/m³) of saturated liquid at temperature T (K) """
    return apply_elementwise(lambda x: 1 / reg.liquid_t(x).v, T)


def specific_volume_saturated_liquid_t(T: npt.ArrayLike) -> np.ndarray:
    """ Returns specific volume (m³/kg) of saturated liquid at temperature T (K) """
    return apply_elementwise(_saturated(reg.liquid_t, 'v'), T)


def specific_enthalpy_saturated_liquid_t(T: npt.ArrayLike) -> np.ndarray:
    """ Returns specific enthalpy (kJ/kg) of saturated liquid at temperature T (K) """
    return apply_elementwise(_saturated(reg.liquid_t, 'h'), T)


def specific_entropy_saturated_liquid_t(T: npt.ArrayLike) -> np.ndarray:
    """ Returns specific entropy (kJ/kg·K) of saturated liquid at temperature T (K) """
    return apply_elementwise(_saturated(reg.liquid_t, 's'), T)


def specific_internal_energy_saturated_liquid_t(T: npt.ArrayLike) -> np.ndarray:
    """ Returns specific internal energy (kJ/kg) of saturated liquid at temperature T (K) """
    return apply_elementwise(_saturated(reg.liquid_t, 'u'), T)


def density_saturated_vapour_p(p: npt.ArrayLike) -> np.ndarray:
    """ Returns density (kg/m³) of saturated vapour at pressure p (MPa) """
    return apply_elementwise(lambda x: 1 / reg.vapour_p(x).v, p)


def specific_volume_saturated_vapour_p(p: npt.ArrayLike) -> np.ndarray:
    """ Returns specific volume (m³/kg) of saturated vapour at pressure p (MPa) """
    return apply_elementwise(_saturated(reg.vapour_p, 'v'), p)


def specific_enthalpy_saturated_vapour_p(p: npt.ArrayLike) -> np.ndarray:
    """ Returns specific enthalpy (kJ/kg) of saturated vapour at pressure p (MPa) """
    return apply_elementwise(_saturated(reg.vapour_p, 'h'), p)


def specific_entropy_saturated_vapour_p(p: npt.ArrayLike) -> np.ndarray:
    """ Returns specific entropy (kJ/kg·K) of saturated vapour at pressure p (MPa) """
    return apply_elementwise(_saturated(reg.vapour_p, 's'), p)


def specific_internal_energy_saturated_vapour_p(p: npt.ArrayLike) -> np.ndarray:
    """ Returns specific internal energy (kJ/kg) of saturated vapour at pressure p (MPa) """
    return apply_elementwise(_saturated(reg.vapour_p, 'u'), p)


def density_saturated_vapour_t(T: npt.ArrayLike) -> np.ndarray:
    """ Returns density (kg/m³) of saturated vapour at temperature T (K) """
    return apply_elementwise(lambda x: 1 / reg.vapour_t(x).v, T)


def specific_volume_saturated_vapour_t(T: npt.ArrayLike) -> np.ndarray:
    """ Returns specific volume (m³/kg) of saturated vapour at temperature T (K) """
    return apply_elementwise(_saturated(reg.vapour_t, 'v'), T)


def specific_enthalpy_saturated_vapour_t(T: npt.ArrayLike) -> np.ndarray:
    """ Returns specific enthalpy (kJ/kg) of saturated vapour at temperature T (K) """
    return apply_elementwise(_saturated(reg.vapour_t, 'h'), T)


def specific_entropy_saturated_vapour_t(T: npt.ArrayLike) -> np.ndarray:
    """ Returns specific entropy (kJ/kg·K) of saturated vapour at temperature T (K) """
    return apply_elementwise(_saturated(reg.vapour_t, 's'), T)


def specific_internal_energy_saturated_vapour_t(T: npt.ArrayLike) -> np.ndarray:
    """ Returns specific internal energy (kJ/kg) of saturated vapour at temperature T (K) """
    return apply_elementwise(_saturated(reg.vapour_t, 'u'), T)


# ====================================================================
# Partial derivatives
# ====================================================================

def partial_derivative_pt(p: npt.ArrayLike, T: npt.ArrayLike, x, y, z) -> np.ndarray:
    """ Returns the partial derivative (dz/dx) at constant y, in consistent kJ, kg, K and MPa units.
        p: Pressure (MPa). Takes a single float, list or numpy array
        T: Temperature (K). Takes a single float, list or numpy array
        x, y, z: Quantities, either quantity members or their symbols
                 'p', 'T', 'v', 'u', 'h', 's', 'g', 'f' or 'rho'
    """
    return apply_elementwise(lambda a, b: derivatives.partial_derivative_pt(a, b, x, y, z), p, T)


def partial_derivative_rhot(rho: npt.ArrayLike, T: npt.ArrayLike, x, y, z) -> np.ndarray:
    """ Returns the partial derivative (dz/dx) at constant y from density (kg/m³) and temperature (K),
        using the region 3 Helmholtz formulation
    """
    return apply_elementwise(lambda a, b: derivatives.partial_derivative_rhot(a, b, x, y, z), rho, T)


# ====================================================================
# Density
# ====================================================================

def density_pt(p: npt.ArrayLike, T: npt.ArrayLike, metastable: bool = False) -> np.ndarray:
    """ Returns density (kg/m³) from pressure (MPa) and temperature (K) """
    return _evaluate(_state_pt, _density, p, T, metastable=metastable)


def density_ph(p: npt.ArrayLike, h: npt.ArrayLike) -> np.ndarray:
    """ Returns density (kg/m³) from pressure (MPa) and specific enthalpy (kJ/kg) """
    return _evaluate(_state_ph, _density, p, h)


def density_ps(p: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns density (kg/m³) from pressure (MPa) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_ps, _density, p, s)


def density_hs(h: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns density (kg/m³) from specific enthalpy (kJ/kg) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_hs, _density, h, s)


def density_px(p: npt.ArrayLike, x: npt.ArrayLike) -> np.ndarray:
    """ Returns density (kg/m³) from pressure (MPa) and vapour fraction (-) """
    return _evaluate(_state_px, _density, p, x)


def density_tx(T: npt.ArrayLike, x: npt.ArrayLike) -> np.ndarray:
    """ Returns density (kg/m³) from temperature (K) and vapour fraction (-) """
    return _evaluate(_state_tx, _density, T, x)


# ====================================================================
# Specific volume
# ====================================================================

def specific_volume_pt(p: npt.ArrayLike, T: npt.ArrayLike, metastable: bool = False) -> np.ndarray:
    """ Returns specific volume (m³/kg) from pressure (MPa) and temperature (K) """
    return _evaluate(_state_pt, _specific_volume, p, T, metastable=metastable)


def specific_volume_ph(p: npt.ArrayLike, h: npt.ArrayLike) -> np.ndarray:
    """ Returns specific volume (m³/kg) from pressure (MPa) and specific enthalpy (kJ/kg) """
    return _evaluate(_state_ph, _specific_volume, p, h)


def specific_volume_ps(p: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns specific volume (m³/kg) from pressure (MPa) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_ps, _specific_volume, p, s)


def specific_volume_hs(h: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns specific volume (m³/kg) from specific enthalpy (kJ/kg) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_hs, _specific_volume, h, s)


def specific_volume_px(p: npt.ArrayLike, x: npt.ArrayLike) -> np.ndarray:
    """ Returns specific volume (m³/kg) from pressure (MPa) and vapour fraction (-) """
    return _evaluate(_state_px, _specific_volume, p, x)


def specific_volume_tx(T: npt.ArrayLike, x: npt.ArrayLike) -> np.ndarray:
    """ Returns specific volume (m³/kg) from temperature (K) and vapour fraction (-) """
    return _evaluate(_state_tx, _specific_volume, T, x)


# ====================================================================
# Specific enthalpy
# ====================================================================

def specific_enthalpy_pt(p: npt.ArrayLike, T: npt.ArrayLike, metastable: bool = False) -> np.ndarray:
    """ Returns specific enthalpy (kJ/kg) from pressure (MPa) and temperature (K) """
    return _evaluate(_state_pt, _specific_enthalpy, p, T, metastable=metastable)


def specific_enthalpy_ps(p: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns specific enthalpy (kJ/kg) from pressure (MPa) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_ps, _specific_enthalpy, p, s)


def specific_enthalpy_hs(h: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns specific enthalpy (kJ/kg) from specific enthalpy (kJ/kg) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_hs, _specific_enthalpy, h, s)


def specific_enthalpy_rhot(rho: npt.ArrayLike, T: npt.ArrayLike) -> np.ndarray:
    """ Returns specific enthalpy (kJ/kg) from density (kg/m³) and temperature (K) """
    return _evaluate(_state_rhot, _specific_enthalpy, rho, T)


def specific_enthalpy_px(p: npt.ArrayLike, x: npt.ArrayLike) -> np.ndarray:
    """ Returns specific enthalpy (kJ/kg) from pressure (MPa) and vapour fraction (-) """
    return _evaluate(_state_px, _specific_enthalpy, p, x)


def specific_enthalpy_tx(T: npt.ArrayLike, x: npt.ArrayLike) -> np.ndarray:
    """ Returns specific enthalpy (kJ/kg) from temperature (K) and vapour fraction (-) """
    return _evaluate(_state_tx, _specific_enthalpy, T, x)


# ====================================================================
# Specific entropy
# ====================================================================

def specific_entropy_pt(p: npt.ArrayLike, T: npt.ArrayLike, metastable: bool = False) -> np.ndarray:
    """ Returns specific entropy (kJ/kg·K) from pressure (MPa) and temperature (K) """
    return _evaluate(_state_pt, _specific_entropy, p, T, metastable=metastable)


def specific_entropy_ph(p: npt.ArrayLike, h: npt.ArrayLike) -> np.ndarray:
    """ Returns specific entropy (kJ/kg·K) from pressure (MPa) and specific enthalpy (kJ/kg) """
    return _evaluate(_state_ph, _specific_entropy, p, h)


def specific_entropy_hs(h: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns specific entropy (kJ/kg·K) from specific enthalpy (kJ/kg) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_hs, _specific_entropy, h, s)


def specific_entropy_rhot(rho: npt.ArrayLike, T: npt.ArrayLike) -> np.ndarray:
    """ Returns specific entropy (kJ/kg·K) from density (kg/m³) and temperature (K) """
    return _evaluate(_state_rhot, _specific_entropy, rho, T)


def specific_entropy_px(p: npt.ArrayLike, x: npt.ArrayLike) -> np.ndarray:
    """ Returns specific entropy (kJ/kg·K) from pressure (MPa) and vapour fraction (-) """
    return _evaluate(_state_px, _specific_entropy, p, x)


def specific_entropy_tx(T: npt.ArrayLike, x: npt.ArrayLike) -> np.ndarray:
    """ Returns specific entropy (kJ/kg·K) from temperature (K) and vapour fraction (-) """
    return _evaluate(_state_tx, _specific_entropy, T, x)


# ====================================================================
# Specific internal energy
# ====================================================================

def specific_internal_energy_pt(p: npt.ArrayLike, T: npt.ArrayLike, metastable: bool = False) -> np.ndarray:
    """ Returns specific internal energy (kJ/kg) from pressure (MPa) and temperature (K) """
    return _evaluate(_state_pt, _specific_internal_energy, p, T, metastable=metastable)


def specific_internal_energy_ph(p: npt.ArrayLike, h: npt.ArrayLike) -> np.ndarray:
    """ Returns specific internal energy (kJ/kg) from pressure (MPa) and specific enthalpy (kJ/kg) """
    return _evaluate(_state_ph, _specific_internal_energy, p, h)


def specific_internal_energy_ps(p: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns specific internal energy (kJ/kg) from pressure (MPa) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_ps, _specific_internal_energy, p, s)


def specific_internal_energy_hs(h: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns specific internal energy (kJ/kg) from specific enthalpy (kJ/kg) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_hs, _specific_internal_energy, h, s)


def specific_internal_energy_rhot(rho: npt.ArrayLike, T: npt.ArrayLike) -> np.ndarray:
    """ Returns specific internal energy (kJ/kg) from density (kg/m³) and temperature (K) """
    return _evaluate(_state_rhot, _specific_internal_energy, rho, T)


def specific_internal_energy_px(p: npt.ArrayLike, x: npt.ArrayLike) -> np.ndarray:
    """ Returns specific internal energy (kJ/kg) from pressure (MPa) and vapour fraction (-) """
    return _evaluate(_state_px, _specific_internal_energy, p, x)


def specific_internal_energy_tx(T: npt.ArrayLike, x: npt.ArrayLike) -> np.ndarray:
    """ Returns specific internal energy (kJ/kg) from temperature (K) and vapour fraction (-) """
    return _evaluate(_state_tx, _specific_internal_energy, T, x)


# ====================================================================
# Specific Gibbs free energy
# ====================================================================

def specific_gibbs_free_energy_pt(p: npt.ArrayLike, T: npt.ArrayLike, metastable: bool = False) -> np.ndarray:
    """ Returns specific Gibbs free energy (kJ/kg) from pressure (MPa) and temperature (K) """
    return _evaluate(_state_pt, _specific_gibbs_free_energy, p, T, metastable=metastable)


def specific_gibbs_free_energy_ph(p: npt.ArrayLike, h: npt.ArrayLike) -> np.ndarray:
    """ Returns specific Gibbs free energy (kJ/kg) from pressure (MPa) and specific enthalpy (kJ/kg) """
    return _evaluate(_state_ph, _specific_gibbs_free_energy, p, h)


def specific_gibbs_free_energy_ps(p: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns specific Gibbs free energy (kJ/kg) from pressure (MPa) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_ps, _specific_gibbs_free_energy, p, s)


def specific_gibbs_free_energy_hs(h: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns specific Gibbs free energy (kJ/kg) from specific enthalpy (kJ/kg) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_hs, _specific_gibbs_free_energy, h, s)


def specific_gibbs_free_energy_rhot(rho: npt.ArrayLike, T: npt.ArrayLike) -> np.ndarray:
    """ Returns specific Gibbs free energy (kJ/kg) from density (kg/m³) and temperature (K) """
    return _evaluate(_state_rhot, _specific_gibbs_free_energy, rho, T)


# ====================================================================
# Specific isobaric heat capacity
# ====================================================================

def isobaric_heat_capacity_pt(p: npt.ArrayLike, T: npt.ArrayLike, metastable: bool = False) -> np.ndarray:
    """ Returns specific isobaric heat capacity (kJ/kg·K) from pressure (MPa) and temperature (K) """
    return _evaluate(_state_pt, _isobaric_heat_capacity, p, T, metastable=metastable)


def isobaric_heat_capacity_ph(p: npt.ArrayLike, h: npt.ArrayLike) -> np.ndarray:
    """ Returns specific isobaric heat capacity (kJ/kg·K) from pressure (MPa) and specific enthalpy (kJ/kg) """
    return _evaluate(_state_ph, _isobaric_heat_capacity, p, h)


def isobaric_heat_capacity_ps(p: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns specific isobaric heat capacity (kJ/kg·K) from pressure (MPa) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_ps, _isobaric_heat_capacity, p, s)


def isobaric_heat_capacity_hs(h: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns specific isobaric heat capacity (kJ/kg·K) from specific enthalpy (kJ/kg) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_hs, _isobaric_heat_capacity, h, s)


def isobaric_heat_capacity_rhot(rho: npt.ArrayLike, T: npt.ArrayLike) -> np.ndarray:
    """ Returns specific isobaric heat capacity (kJ/kg·K) from density (kg/m³) and temperature (K) """
    return _evaluate(_state_rhot, _isobaric_heat_capacity, rho, T)


# ====================================================================
# Specific isochoric heat capacity
# ====================================================================

def isochoric_heat_capacity_pt(p: npt.ArrayLike, T: npt.ArrayLike, metastable: bool = False) -> np.ndarray:
    """ Returns specific isochoric heat capacity (kJ/kg·K) from pressure (MPa) and temperature (K) """
    return _evaluate(_state_pt, _isochoric_heat_capacity, p, T, metastable=metastable)


def isochoric_heat_capacity_ph(p: npt.ArrayLike, h: npt.ArrayLike) -> np.ndarray:
    """ Returns specific isochoric heat capacity (kJ/kg·K) from pressure (MPa) and specific enthalpy (kJ/kg) """
    return _evaluate(_state_ph, _isochoric_heat_capacity, p, h)


def isochoric_heat_capacity_ps(p: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns specific isochoric heat capacity (kJ/kg·K) from pressure (MPa) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_ps, _isochoric_heat_capacity, p, s)


def isochoric_heat_capacity_hs(h: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns specific isochoric heat capacity (kJ/kg·K) from specific enthalpy (kJ/kg) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_hs, _isochoric_heat_capacity, h, s)


def isochoric_heat_capacity_rhot(rho: npt.ArrayLike, T: npt.ArrayLike) -> np.ndarray:
    """ Returns specific isochoric heat capacity (kJ/kg·K) from density (kg/m³) and temperature (K) """
    return _evaluate(_state_rhot, _isochoric_heat_capacity, rho, T)


# ====================================================================
# Speed of sound
# ====================================================================

def speed_of_sound_pt(p: npt.ArrayLike, T: npt.ArrayLike, metastable: bool = False) -> np.ndarray:
    """ Returns speed of sound (m/s) from pressure (MPa) and temperature (K) """
    return _evaluate(_state_pt, _speed_of_sound, p, T, metastable=metastable)


def speed_of_sound_ph(p: npt.ArrayLike, h: npt.ArrayLike) -> np.ndarray:
    """ Returns speed of sound (m/s) from pressure (MPa) and specific enthalpy (kJ/kg) """
    return _evaluate(_state_ph, _speed_of_sound, p, h)


def speed_of_sound_ps(p: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns speed of sound (m/s) from pressure (MPa) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_ps, _speed_of_sound, p, s)


def speed_of_sound_hs(h: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns speed of sound (m/s) from specific enthalpy (kJ/kg) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_hs, _speed_of_sound, h, s)


def speed_of_sound_rhot(rho: npt.ArrayLike, T: npt.ArrayLike) -> np.ndarray:
    """ Returns speed of sound (m/s) from density (kg/m³) and temperature (K) """
    return _evaluate(_state_rhot, _speed_of_sound, rho, T)


# ====================================================================
# Isentropic exponent
# ====================================================================

def isentropic_exponent_pt(p: npt.ArrayLike, T: npt.ArrayLike, metastable: bool = False) -> np.ndarray:
    """ Returns isentropic exponent (-) from pressure (MPa) and temperature (K) """
    return _evaluate(_state_pt, _isentropic_exponent, p, T, metastable=metastable)


def isentropic_exponent_ph(p: npt.ArrayLike, h: npt.ArrayLike) -> np.ndarray:
    """ Returns isentropic exponent (-) from pressure (MPa) and specific enthalpy (kJ/kg) """
    return _evaluate(_state_ph, _isentropic_exponent, p, h)


def isentropic_exponent_ps(p: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns isentropic exponent (-) from pressure (MPa) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_ps, _isentropic_exponent, p, s)


def isentropic_exponent_hs(h: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns isentropic exponent (-) from specific enthalpy (kJ/kg) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_hs, _isentropic_exponent, h, s)


def isentropic_exponent_rhot(rho: npt.ArrayLike, T: npt.ArrayLike) -> np.ndarray:
    """ Returns isentropic exponent (-) from density (kg/m³) and temperature (K) """
    return _evaluate(_state_rhot, _isentropic_exponent, rho, T)


# ====================================================================
# Isobaric cubic expansion coefficient
# ====================================================================

def isobaric_cubic_expansion_coefficient_pt(p: npt.ArrayLike, T: npt.ArrayLike, metastable: bool = False) -> np.ndarray:
    """ Returns isobaric cubic expansion coefficient (1/K) from pressure (MPa) and temperature (K) """
    return _evaluate(_state_pt, _isobaric_cubic_expansion_coefficient, p, T, metastable=metastable)


def isobaric_cubic_expansion_coefficient_ph(p: npt.ArrayLike, h: npt.ArrayLike) -> np.ndarray:
    """ Returns isobaric cubic expansion coefficient (1/K) from pressure (MPa) and specific enthalpy (kJ/kg) """
    return _evaluate(_state_ph, _isobaric_cubic_expansion_coefficient, p, h)


def isobaric_cubic_expansion_coefficient_ps(p: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns isobaric cubic expansion coefficient (1/K) from pressure (MPa) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_ps, _isobaric_cubic_expansion_coefficient, p, s)


def isobaric_cubic_expansion_coefficient_hs(h: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns isobaric cubic expansion coefficient (1/K) from specific enthalpy (kJ/kg) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_hs, _isobaric_cubic_expansion_coefficient, h, s)


def isobaric_cubic_expansion_coefficient_rhot(rho: npt.ArrayLike, T: npt.ArrayLike) -> np.ndarray:
    """ Returns isobaric cubic expansion coefficient (1/K) from density (kg/m³) and temperature (K) """
    return _evaluate(_state_rhot, _isobaric_cubic_expansion_coefficient, rho, T)


# ====================================================================
# Isothermal compressibility
# ====================================================================

def compressibility_pt(p: npt.ArrayLike, T: npt.ArrayLike, metastable: bool = False) -> np.ndarray:
    """ Returns isothermal compressibility (1/MPa) from pressure (MPa) and temperature (K) """
    return _evaluate(_state_pt, _compressibility, p, T, metastable=metastable)


def compressibility_ph(p: npt.ArrayLike, h: npt.ArrayLike) -> np.ndarray:
    """ Returns isothermal compressibility (1/MPa) from pressure (MPa) and specific enthalpy (kJ/kg) """
    return _evaluate(_state_ph, _compressibility, p, h)


def compressibility_ps(p: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns isothermal compressibility (1/MPa) from pressure (MPa) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_ps, _compressibility, p, s)


def compressibility_hs(h: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns isothermal compressibility (1/MPa) from specific enthalpy (kJ/kg) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_hs, _compressibility, h, s)


def compressibility_rhot(rho: npt.ArrayLike, T: npt.ArrayLike) -> np.ndarray:
    """ Returns isothermal compressibility (1/MPa) from density (kg/m³) and temperature (K) """
    return _evaluate(_state_rhot, _compressibility, rho, T)


# ====================================================================
# Compression factor
# ====================================================================

def compression_factor_pt(p: npt.ArrayLike, T: npt.ArrayLike, metastable: bool = False) -> np.ndarray:
    """ Returns compression factor z = pv/RT (-) from pressure (MPa) and temperature (K) """
    return _evaluate(_state_pt, _compression_factor, p, T, metastable=metastable)


def compression_factor_ph(p: npt.ArrayLike, h: npt.ArrayLike) -> np.ndarray:
    """ Returns compression factor z = pv/RT (-) from pressure (MPa) and specific enthalpy (kJ/kg) """
    return _evaluate(_state_ph, _compression_factor, p, h)


def compression_factor_ps(p: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns compression factor z = pv/RT (-) from pressure (MPa) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_ps, _compression_factor, p, s)


def compression_factor_hs(h: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns compression factor z = pv/RT (-) from specific enthalpy (kJ/kg) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_hs, _compression_factor, h, s)


def compression_factor_rhot(rho: npt.ArrayLike, T: npt.ArrayLike) -> np.ndarray:
    """ Returns compression factor z = pv/RT (-) from density (kg/m³) and temperature (K) """
    return _evaluate(_state_rhot, _compression_factor, rho, T)


# ====================================================================
# Dynamic viscosity
# ====================================================================

def dynamic_viscosity_pt(p: npt.ArrayLike, T: npt.ArrayLike, metastable: bool = False) -> np.ndarray:
    """ Returns dynamic viscosity (Pa·s) from pressure (MPa) and temperature (K) """
    return _evaluate(_state_pt, _dynamic_viscosity, p, T, metastable=metastable)


def dynamic_viscosity_ph(p: npt.ArrayLike, h: npt.ArrayLike) -> np.ndarray:
    """ Returns dynamic viscosity (Pa·s) from pressure (MPa) and specific enthalpy (kJ/kg) """
    return _evaluate(_state_ph, _dynamic_viscosity, p, h)


def dynamic_viscosity_ps(p: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns dynamic viscosity (Pa·s) from pressure (MPa) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_ps, _dynamic_viscosity, p, s)


def dynamic_viscosity_hs(h: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns dynamic viscosity (Pa·s) from specific enthalpy (kJ/kg) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_hs, _dynamic_viscosity, h, s)


def dynamic_viscosity_rhot(rho: npt.ArrayLike, T: npt.ArrayLike) -> np.ndarray:
    """ Returns dynamic viscosity (Pa·s) from density (kg/m³) and temperature (K) """
    return _evaluate(_state_rhot, _dynamic_viscosity, rho, T)


# ====================================================================
# Kinematic viscosity
# ====================================================================

def kinematic_viscosity_pt(p: npt.ArrayLike, T: npt.ArrayLike, metastable: bool = False) -> np.ndarray:
    """ Returns kinematic viscosity (m²/s) from pressure (MPa) and temperature (K) """
    return _evaluate(_state_pt, _kinematic_viscosity, p, T, metastable=metastable)


def kinematic_viscosity_ph(p: npt.ArrayLike, h: npt.ArrayLike) -> np.ndarray:
    """ Returns kinematic viscosity (m²/s) from pressure (MPa) and specific enthalpy (kJ/kg) """
    return _evaluate(_state_ph, _kinematic_viscosity, p, h)


def kinematic_viscosity_ps(p: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns kinematic viscosity (m²/s) from pressure (MPa) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_ps, _kinematic_viscosity, p, s)


def kinematic_viscosity_hs(h: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns kinematic viscosity (m²/s) from specific enthalpy (kJ/kg) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_hs, _kinematic_viscosity, h, s)


def kinematic_viscosity_rhot(rho: npt.ArrayLike, T: npt.ArrayLike) -> np.ndarray:
    """ Returns kinematic viscosity (m²/s) from density (kg/m³) and temperature (K) """
    return _evaluate(_state_rhot, _kinematic_viscosity, rho, T)


# ====================================================================
# Thermal conductivity
# ====================================================================

def thermal_conductivity_pt(p: npt.ArrayLike, T: npt.ArrayLike, metastable: bool = False) -> np.ndarray:
    """ Returns thermal conductivity (W/m·K) from pressure (MPa) and temperature (K) """
    return _evaluate(_state_pt, _thermal_conductivity, p, T, metastable=metastable)


def thermal_conductivity_ph(p: npt.ArrayLike, h: npt.ArrayLike) -> np.ndarray:
    """ Returns thermal conductivity (W/m·K) from pressure (MPa) and specific enthalpy (kJ/kg) """
    return _evaluate(_state_ph, _thermal_conductivity, p, h)


def thermal_conductivity_ps(p: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns thermal conductivity (W/m·K) from pressure (MPa) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_ps, _thermal_conductivity, p, s)


def thermal_conductivity_hs(h: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns thermal conductivity (W/m·K) from specific enthalpy (kJ/kg) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_hs, _thermal_conductivity, h, s)


def thermal_conductivity_rhot(rho: npt.ArrayLike, T: npt.ArrayLike) -> np.ndarray:
    """ Returns thermal conductivity (W/m·K) from density (kg/m³) and temperature (K) """
    return _evaluate(_state_rhot, _thermal_conductivity, rho, T)


# ====================================================================
# Thermal diffusivity
# ====================================================================

def thermal_diffusivity_pt(p: npt.ArrayLike, T: npt.ArrayLike, metastable: bool = False) -> np.ndarray:
    """ Returns thermal diffusivity (m²/s) from pressure (MPa) and temperature (K) """
    return _evaluate(_state_pt, _thermal_diffusivity, p, T, metastable=metastable)


def thermal_diffusivity_ph(p: npt.ArrayLike, h: npt.ArrayLike) -> np.ndarray:
    """ Returns thermal diffusivity (m²/s) from pressure (MPa) and specific enthalpy (kJ/kg) """
    return _evaluate(_state_ph, _thermal_diffusivity, p, h)


def thermal_diffusivity_ps(p: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns thermal diffusivity (m²/s) from pressure (MPa) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_ps, _thermal_diffusivity, p, s)


def thermal_diffusivity_hs(h: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns thermal diffusivity (m²/s) from specific enthalpy (kJ/kg) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_hs, _thermal_diffusivity, h, s)


def thermal_diffusivity_rhot(rho: npt.ArrayLike, T: npt.ArrayLike) -> np.ndarray:
    """ Returns thermal diffusivity (m²/s) from density (kg/m³) and temperature (K) """
    return _evaluate(_state_rhot, _thermal_diffusivity, rho, T)


# ====================================================================
# Prandtl number
# ====================================================================

def prandtl_pt(p: npt.ArrayLike, T: npt.ArrayLike, metastable: bool = False) -> np.ndarray:
    """ Returns Prandtl number (-) from pressure (MPa) and temperature (K) """
    return _evaluate(_state_pt, _prandtl, p, T, metastable=metastable)


def prandtl_ph(p: npt.ArrayLike, h: npt.ArrayLike) -> np.ndarray:
    """ Returns Prandtl number (-) from pressure (MPa) and specific enthalpy (kJ/kg) """
    return _evaluate(_state_ph, _prandtl, p, h)


def prandtl_ps(p: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns Prandtl number (-) from pressure (MPa) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_ps, _prandtl, p, s)


def prandtl_hs(h: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns Prandtl number (-) from specific enthalpy (kJ/kg) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_hs, _prandtl, h, s)


def prandtl_rhot(rho: npt.ArrayLike, T: npt.ArrayLike) -> np.ndarray:
    """ Returns Prandtl number (-) from density (kg/m³) and temperature (K) """
    return _evaluate(_state_rhot, _prandtl, rho, T)


# ====================================================================
# Static dielectric constant
# ====================================================================

def dielectric_constant_pt(p: npt.ArrayLike, T: npt.ArrayLike, metastable: bool = False) -> np.ndarray:
    """ Returns static dielectric constant (-) from pressure (MPa) and temperature (K) """
    return _evaluate(_state_pt, _dielectric_constant, p, T, metastable=metastable)


def dielectric_constant_ph(p: npt.ArrayLike, h: npt.ArrayLike) -> np.ndarray:
    """ Returns static dielectric constant (-) from pressure (MPa) and specific enthalpy (kJ/kg) """
    return _evaluate(_state_ph, _dielectric_constant, p, h)


def dielectric_constant_ps(p: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns static dielectric constant (-) from pressure (MPa) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_ps, _dielectric_constant, p, s)


def dielectric_constant_hs(h: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns static dielectric constant (-) from specific enthalpy (kJ/kg) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_hs, _dielectric_constant, h, s)


def dielectric_constant_rhot(rho: npt.ArrayLike, T: npt.ArrayLike) -> np.ndarray:
    """ Returns static dielectric constant (-) from density (kg/m³) and temperature (K) """
    return _evaluate(_state_rhot, _dielectric_constant, rho, T)


# ====================================================================
# Refractive index
# ====================================================================

def refractive_index_pt(p: npt.ArrayLike, T: npt.ArrayLike, wavelength: npt.ArrayLike = WAVELENGTH_DEFAULT, metastable: bool = False) -> np.ndarray:
    """ Returns refractive index (-) from pressure (MPa) and temperature (K), at wavelength (μm) """
    return _evaluate_refractive(_state_pt, p, T, wavelength, metastable=metastable)


def refractive_index_ph(p: npt.ArrayLike, h: npt.ArrayLike, wavelength: npt.ArrayLike = WAVELENGTH_DEFAULT) -> np.ndarray:
    """ Returns refractive index (-) from pressure (MPa) and specific enthalpy (kJ/kg), at wavelength (μm) """
    return _evaluate_refractive(_state_ph, p, h, wavelength)


def refractive_index_ps(p: npt.ArrayLike, s: npt.ArrayLike, wavelength: npt.ArrayLike = WAVELENGTH_DEFAULT) -> np.ndarray:
    """ Returns refractive index (-) from pressure (MPa) and specific entropy (kJ/kg·K), at wavelength (μm) """
    return _evaluate_refractive(_state_ps, p, s, wavelength)


def refractive_index_hs(h: npt.ArrayLike, s: npt.ArrayLike, wavelength: npt.ArrayLike = WAVELENGTH_DEFAULT) -> np.ndarray:
    """ Returns refractive index (-) from specific enthalpy (kJ/kg) and specific entropy (kJ/kg·K), at wavelength (μm) """
    return _evaluate_refractive(_state_hs, h, s, wavelength)


def refractive_index_rhot(rho: npt.ArrayLike, T: npt.ArrayLike, wavelength: npt.ArrayLike = WAVELENGTH_DEFAULT) -> np.ndarray:
    """ Returns refractive index (-) from density (kg/m³) and temperature (K), at wavelength (μm) """
    return _evaluate_refractive(_state_rhot, rho, T, wavelength)


# ====================================================================
# Temperature
# ====================================================================

def temperature_ph(p: npt.ArrayLike, h: npt.ArrayLike) -> np.ndarray:
    """ Returns temperature (K) from pressure (MPa) and specific enthalpy (kJ/kg) """
    return _evaluate(_state_ph, _temperature, p, h)


def temperature_ps(p: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns temperature (K) from pressure (MPa) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_ps, _temperature, p, s)


def temperature_hs(h: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns temperature (K) from specific enthalpy (kJ/kg) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_hs, _temperature, h, s)


# ====================================================================
# Pressure
# ====================================================================

def pressure_hs(h: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns pressure (MPa) from specific enthalpy (kJ/kg) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_hs, _pressure, h, s)


def pressure_rhot(rho: npt.ArrayLike, T: npt.ArrayLike) -> np.ndarray:
    """ Returns pressure (MPa) from density (kg/m³) and temperature (K) """
    return _evaluate(_state_rhot, _pressure, rho, T)


# ====================================================================
# Vapour fraction
# ====================================================================

def vapour_fraction_ph(p: npt.ArrayLike, h: npt.ArrayLike) -> np.ndarray:
    """ Returns vapour fraction (-) from pressure (MPa) and specific enthalpy (kJ/kg) """
    return _evaluate(_state_ph, _vapour_fraction, p, h)


def vapour_fraction_ps(p: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns vapour fraction (-) from pressure (MPa) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_ps, _vapour_fraction, p, s)


def vapour_fraction_hs(h: npt.ArrayLike, s: npt.ArrayLike) -> np.ndarray:
    """ Returns vapour fraction (-) from specific enthalpy (kJ/kg) and specific entropy (kJ/kg·K) """
    return _evaluate(_state_hs, _vapour_fraction, h, s)
