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

import numpy as np

from pysteamtoolbox.classes import quantity, derivative_quantities, validate_quantity
from pysteamtoolbox.regions import REGION3
from pysteamtoolbox.selector import select_region_pt, select_region_rhot

logger = logging.getLogger(__name__)

# Partial derivatives are assembled from pairs of first derivatives of each
# quantity with respect to the natural variables of the formulation:
#   Gibbs regions:     (d/dT at constant p, d/dp at constant T)
#   Helmholtz region:  (d/dv at constant T, d/dT at constant v)
# p*v products are in MPa·m³/kg and are scaled by 1e3 into kJ/kg.


def _check_quantities(x, y, z):
    out = []
    for q in (x, y, z):
        q = validate_quantity(q)
        if q not in derivative_quantities:
            raise ValueError(f"Quantity {q.value!r} is not supported in partial derivatives")
        out.append(q)
    return out


def _pt_pairs(region, p, T):
    v = region.specific_volume_pt(p, T)
    s = region.specific_entropy_pt(p, T)
    cp = region.specific_isobaric_heat_capacity_pt(p, T)
    alphav = region.isobaric_cubic_expansion_coefficient_pt(p, T)
    kappat = region.isothermal_compressibility_pt(p, T)

    return {
        quantity.P: (0.0, 1.0),
        quantity.T: (1.0, 0.0),
        quantity.V: (v * alphav, -v * kappat),
        quantity.U: (cp - 1e3 * p * v * alphav, 1e3 * v * (p * kappat - T * alphav)),
        quantity.H: (cp, 1e3 * v * (1 - T * alphav)),
        quantity.S: (cp / T, -1e3 * v * alphav),
        quantity.G: (-s, 1e3 * v),
        quantity.F: (-1e3 * p * v * alphav - s, 1e3 * p * v * kappat),
        quantity.RHO: (-alphav / v, kappat / v),
    }


def _vt_pairs(rho, T):
    v = 1 / rho
    p = REGION3.pressure_rhot(rho, T)
    s = REGION3.specific_entropy_rhot(rho, T)
    cv = REGION3.specific_isochoric_heat_capacity_rhot(rho, T)
    alphap = REGION3.relative_pressure_coefficient_rhot(rho, T)
    betap = REGION3.isothermal_stress_coefficient_rhot(rho, T)

    return {
        quantity.P: (-p * betap, p * alphap),
        quantity.T: (0.0, 1.0),
        quantity.V: (1.0, 0.0),
        quantity.U: (1e3 * p * (T * alphap - 1), cv),
        quantity.H: (1e3 * p * (T * alphap - v * betap), cv + 1e3 * p * v * alphap),
        quantity.S: (1e3 * p * alphap, cv / T),
        quantity.G: (-1e3 * p * v * betap, 1e3 * p * v * alphap - s),
        quantity.F: (-1e3 * p, -s),
        quantity.RHO: (-1 / (v * v), 0.0),
    }


def _compose(pairs, x, y, z):
    # (dz/dx)_y = (z_a y_b - z_b y_a) / (x_a y_b - x_b y_a), with (a, b) the natural variables
    xa, xb = pairs[x]
    ya, yb = pairs[y]
    za, zb = pairs[z]

    denominator = xa * yb - xb * ya
    if denominator == 0:
        raise ValueError(f"Partial derivative (d{z.value}/d{x.value}) at constant {y.value} is undefined")
    result = (za * yb - zb * ya) / denominator
    if not np.isfinite(result):
        raise ValueError(f"Partial derivative (d{z.value}/d{x.value}) at constant {y.value} is not finite")
    return result


def partial_derivative_rhot(rho: float, T: float, x, y, z) -> float:
    """ Returns the partial derivative (dz/dx) at constant y, from the region 3 Helmholtz formulation.
        The (rho, T) state must be a single-phase region 3 state, see select_region_rhot.
        rho: Density (kg/m³)
        T: Temperature (K)
        x, y, z: quantity members or their symbols, one of p, T, v, u, h, s, g, f, rho
    """
    x, y, z = _check_quantities(x, y, z)
    select_region_rhot(rho, T)
    return _partial_derivative_rhot(rho, T, x, y, z)


def _partial_derivative_rhot(rho, T, x, y, z):
    logger.debug("d%s/d%s at constant %s, (rho, T) = (%g, %g)", z.value, x.value, y.value, rho, T)
    return _compose(_vt_pairs(rho, T), x, y, z)


def partial_derivative_pt(p: float, T: float, x, y, z) -> float:
    """ Returns the partial derivative (dz/dx) at constant y at pressure p and temperature T.
        Region 3 states are evaluated in (rho, T) through the region 3 v(p,T) backward equation.
        p: Pressure (MPa)
        T: Temperature (K)
        x, y, z: quantity members or their symbols, one of p, T, v, u, h, s, g, f, rho
    """
    x, y, z = _check_quantities(x, y, z)
    region = select_region_pt(p, T)
    if region.variables == 'rhoT':
        return _partial_derivative_rhot(region.density_pt(p, T), T, x, y, z)
    logger.debug("d%s/d%s at constant %s, (p, T) = (%g, %g), %s", z.value, x.value, y.value, p, T, region.name)
    return _compose(_pt_pairs(region, p, T), x, y, z)
