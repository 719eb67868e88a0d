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

# Auxiliary correlations evaluated at a density and temperature from IF97:
#   dynamic viscosity, IAPWS 1997 industrial formulation
#   thermal conductivity, IAPS 1985 industrial formulation
#   static dielectric constant, IAPWS 1997
#   refractive index, IAPWS 1997
#   surface tension, IAPWS 1994

import numpy as np

from pysteamtoolbox.classes import quantity
from pysteamtoolbox.constants import TC, RHOC, T0, T25
from pysteamtoolbox.errors import OutOfRangeError

# Viscosity
VISC_T_MAX = 1173.15
_VISC_N0 = (0.167752e-1, 0.220462e-1, 0.6366564e-2, -0.241605e-2)
_VISC_IJN = (
    (0, 0, 0.520094), (0, 1, 0.850895e-1), (0, 2, -0.108374e1), (0, 3, -0.289555),
    (1, 0, 0.222531), (1, 1, 0.999115), (1, 2, 0.188797e1), (1, 3, 0.126613e1), (1, 5, 0.120573),
    (2, 0, -0.281378), (2, 1, -0.906851), (2, 2, -0.772479), (2, 3, -0.489837), (2, 4, -0.257040),
    (3, 0, 0.161913), (3, 1, 0.257399),
    (4, 0, -0.325372e-1), (4, 3, 0.698452e-1),
    (5, 4, 0.872102e-2),
    (6, 3, -0.435673e-2), (6, 5, -0.593264e-3),
)

# Thermal conductivity, reduced by the IAPS 1985 critical values
COND_T_REF = 647.26
COND_RHO_REF = 317.7
_COND_N0 = (0.102811e-1, 0.299621e-1, 0.156146e-1, -0.422464e-2)
_COND_N1 = (-0.397070, 0.400302, 0.106000e1, -0.171587, 0.239219e1)
_COND_N2 = (0.701309e-1, 0.118520e-1, 0.642857, 0.169937e-2, -0.102000e1, -0.411717e1,
            -0.617937e1, 0.822994e-1, 0.100932e2, 0.308976e-2)

# Dielectric constant
DIEL_T_MIN, DIEL_T_MAX = 238.15, 873.15
K_BOLTZMANN = 1.380658e-23  # J/K
N_AVOGADRO = 6.0221367e23  # 1/mol
ALPHA_MEAN = 1.636e-40  # Mean molecular polarizability, C²/J·m²
EPSILON_0 = 8.854187817e-12  # Permittivity of vacuum, C²/J·m
MU_DIPOLE = 6.138e-30  # Molecular dipole moment, C·m
M_WATER = 0.018015268  # Molar mass, kg/mol
_DIEL_N12 = 0.196096504426e-2
_DIEL_IJN = (
    (1, 0.25, 0.978224486826), (1, 1, -0.957771379375), (1, 2.5, 0.237511794148),
    (2, 1.5, 0.714692244396), (3, 1.5, -0.298217036956), (3, 2.5, -0.108863472196),
    (4, 2, 0.949327488264e-1), (5, 2, -0.980469816509e-2), (6, 5, 0.165167634970e-4),
    (7, 0.5, 0.937359795772e-4), (10, 10, -0.123179218720e-9),
)

# Refractive index
REFR_T_MIN, REFR_T_MAX = 261.15, 773.15
REFR_RHO_MAX = 1060.0
WAVELENGTH_MIN, WAVELENGTH_MAX = 0.2, 1.1  # μm
WAVELENGTH_DEFAULT = 0.5893  # Sodium D line, μm
_REFR_A = (0.244257733, 0.974634476e-2, -0.373234996e-2, 0.268678472e-3, 0.158920570e-2,
           0.245934259e-2, 0.900704920, -0.166626219e-1)
_LAMBDA_IR = 5.432937
_LAMBDA_UV = 0.229202


def _check_range(q, value, low, high):
    if value < low:
        raise OutOfRangeError(q, value, low)
    if value > high:
        raise OutOfRangeError(q, value, high)


def _check_density(rho, high=np.inf):
    if rho <= 0:
        raise OutOfRangeError(quantity.RHO, rho, 0)
    if rho > high:
        raise OutOfRangeError(quantity.RHO, rho, high)


def dynamic_viscosity_rhot(rho: float, T: float) -> float:
    """ Returns dynamic viscosity (Pa·s), IAPWS 1997 industrial formulation
        rho: Density (kg/m³)
        T: Temperature (K), 273.15 to 1173.15
    """
    _check_range(quantity.T, T, T0, VISC_T_MAX)
    _check_density(rho)

    delta = rho / RHOC
    theta = T / TC

    psi0 = np.sqrt(theta) / sum(n / theta ** i for i, n in enumerate(_VISC_N0))
    psi1 = np.exp(delta * sum(n * (delta - 1) ** I * (1 / theta - 1) ** J for I, J, n in _VISC_IJN))
    return psi0 * psi1 * 1e-6


def thermal_conductivity_rhot(rho: float, T: float) -> float:
    """ Returns thermal conductivity (W/m·K), IAPS 1985 industrial formulation
        rho: Density (kg/m³)
        T: Temperature (K), 273.15 to 1073.15
    """
    _check_range(quantity.T, T, T0, T25)
    _check_density(rho)

    n0, n1, n2 = _COND_N0, _COND_N1, _COND_N2
    theta = T / COND_T_REF
    delta = rho / COND_RHO_REF

    dtheta = abs(theta - 1) + n2[9]
    B = 2 + n2[7] * dtheta ** -0.6
    A = n2[8] / dtheta ** 0.6 if theta < 1 else 1 / dtheta

    lambda0 = np.sqrt(theta) * sum(n * theta ** i for i, n in enumerate(n0))
    lambda1 = n1[0] + n1[1] * delta + n1[2] * np.exp(n1[3] * (delta + n1[4]) ** 2)
    lambda2 = ((n2[0] / theta ** 10 + n2[1]) * delta ** 1.8 * np.exp(n2[2] * (1 - delta ** 2.8))
               + n2[3] * A * delta ** B * np.exp(B / (1 + B) * (1 - delta ** (1 + B)))
               + n2[4] * np.exp(n2[5] * theta ** 1.5 + n2[6] / delta ** 5))
    return lambda0 + lambda1 + lambda2


def dielectric_constant_rhot(rho: float, T: float) -> float:
    """ Returns the static dielectric constant (-), IAPWS 1997
        rho: Density (kg/m³)
        T: Temperature (K), 238.15 to 873.15
    """
    _check_range(quantity.T, T, DIEL_T_MIN, DIEL_T_MAX)
    _check_density(rho)

    delta = rho / RHOC
    tau = TC / T

    g = 1 + _DIEL_N12 * delta * (T / 228 - 1) ** -1.2
    g += sum(n * delta ** I * tau ** J for I, J, n in _DIEL_IJN)

    A = N_AVOGADRO * MU_DIPOLE ** 2 * rho * g / (M_WATER * EPSILON_0 * K_BOLTZMANN * T)
    B = N_AVOGADRO * ALPHA_MEAN * rho / (3 * M_WATER * EPSILON_0)
    return (1 + A + 5 * B + np.sqrt(9 + 2 * A + 18 * B + A * A + 10 * A * B + 9 * B * B)) / (4 * (1 - B))


def refractive_index_rhot(rho: float, T: float, wavelength: float = WAVELENGTH_DEFAULT) -> float:
    """ Returns the refractive index (-), IAPWS 1997
        rho: Density (kg/m³), up to 1060
        T: Temperature (K), 261.15 to 773.15
        wavelength: Light wavelength (μm), 0.2 to 1.1. Defaults to the sodium D line
    """
    _check_range(quantity.T, T, REFR_T_MIN, REFR_T_MAX)
    _check_density(rho, REFR_RHO_MAX)
    _check_range(quantity.LAMBDAL, wavelength, WAVELENGTH_MIN, WAVELENGTH_MAX)

    a = _REFR_A
    delta = rho / 1000
    theta = T / 273.15
    L2 = (wavelength / 0.589) ** 2

    A = delta * (a[0] + a[1] * delta + a[2] * theta + a[3] * L2 * theta + a[4] / L2
                 + a[5] / (L2 - _LAMBDA_UV ** 2) + a[6] / (L2 - _LAMBDA_IR ** 2) + a[7] * delta * delta)
    return np.sqrt((2 * A + 1) / (1 - A))


def surface_tension_t(T: float) -> float:
    """ Returns the surface tension (N/m) of water against its vapour, IAPWS 1994
        T: Temperature (K), 273.15 to Tc
    """
    _check_range(quantity.T, T, T0, TC)
    tau = 1 - T / TC
    return 235.8e-3 * tau ** 1.256 * (1 - 0.625 * tau)


def kinematic_viscosity(eta: float, rho: float) -> float:
    """ Kinematic viscosity (m²/s) from dynamic viscosity (Pa·s) and density (kg/m³) """
    return eta / rho


def thermal_diffusivity(lam: float, rho: float, cp: float) -> float:
    """ Thermal diffusivity (m²/s) from conductivity (W/m·K), density (kg/m³) and cp (kJ/kg·K) """
    return lam / (rho * cp * 1e3)


def prandtl_number(eta: float, cp: float, lam: float) -> float:
    """ Prandtl number from dynamic viscosity (Pa·s), cp (kJ/kg·K) and conductivity (W/m·K) """
    return eta * cp * 1e3 / lam
