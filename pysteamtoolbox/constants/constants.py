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


# Physical constants (IAPWS-IF97, SI-derived internal units)
R = 0.461526  # Specific gas constant of water, kJ/kg·K

# Critical and triple point values
TC = 647.096  # Critical temperature, K
PC = 22.064  # Critical pressure, MPa
RHOC = 322.0  # Critical density, kg/m³
SC = 4.41202148223476  # Critical specific entropy, kJ/kg·K
T0 = 273.15  # Lower temperature limit, K
P0 = 611.212677e-6  # Saturation pressure at T0, MPa

# Region boundary constants
T13 = 623.15  # Boundary between regions 1 and 3, K
T25 = 1073.15  # Boundary between regions 2 and 5, K
T5 = 2273.15  # Upper temperature limit of region 5, K
P132 = 100.0  # Upper pressure limit of regions 1, 2 and 3, MPa
P5 = 50.0  # Upper pressure limit of region 5, MPa
P_META = 10.0  # Upper pressure limit of the metastable vapour formulation, MPa
S2BC = 5.85  # Entropy boundary between subregions 2b and 2c, kJ/kg·K
