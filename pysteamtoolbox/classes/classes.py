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

from enum import Enum

class quantity(Enum):  # Physical quantity tag, valued by its symbol
    P = 'p'
    T = 'T'
    V = 'v'
    U = 'u'
    H = 'h'
    S = 's'
    G = 'g'
    F = 'f'
    RHO = 'rho'
    A = 'a'
    CP = 'cp'
    CV = 'cv'
    N = 'n'
    W = 'w'
    X = 'x'
    Z = 'z'
    ALPHAV = 'alphav'
    EPSILON = 'epsilon'
    ETA = 'eta'
    KAPPA = 'kappa'
    KAPPAT = 'kappaT'
    LAMBDA = 'lambda'
    LAMBDAL = 'lambdaL'
    NU = 'nu'
    SIGMA = 'sigma'
    PR = 'Pr'

# (description, default unit)
quantity_info = {
    quantity.P: ('pressure', 'MPa'),
    quantity.T: ('temperature', 'K'),
    quantity.V: ('specific volume', 'm³/kg'),
    quantity.U: ('specific internal energy', 'kJ/kg'),
    quantity.H: ('specific enthalpy', 'kJ/kg'),
    quantity.S: ('specific entropy', 'kJ/kg·K'),
    quantity.G: ('specific Gibbs free energy', 'kJ/kg'),
    quantity.F: ('specific Helmholtz free energy', 'kJ/kg'),
    quantity.RHO: ('density', 'kg/m³'),
    quantity.A: ('thermal diffusivity', 'm²/s'),
    quantity.CP: ('specific isobaric heat capacity', 'kJ/kg·K'),
    quantity.CV: ('specific isochoric heat capacity', 'kJ/kg·K'),
    quantity.N: ('refractive index', '-'),
    quantity.W: ('speed of sound', 'm/s'),
    quantity.X: ('vapour fraction', '-'),
    quantity.Z: ('compression factor', '-'),
    quantity.ALPHAV: ('isobaric cubic expansion coefficient', '1/K'),
    quantity.EPSILON: ('dielectric constant', '-'),
    quantity.ETA: ('dynamic viscosity', 'Pa·s'),
    quantity.KAPPA: ('isentropic exponent', '-'),
    quantity.KAPPAT: ('isothermal compressibility', '1/MPa'),
    quantity.LAMBDA: ('thermal conductivity', 'W/m·K'),
    quantity.LAMBDAL: ('wavelength', 'μm'),
    quantity.NU: ('kinematic viscosity', 'm²/s'),
    quantity.SIGMA: ('surface tension', 'N/m'),
    quantity.PR: ('Prandtl number', '-'),
}

# Quantities with closed-form (d/dT, d/dp) and (d/dv, d/dT) pairs
derivative_quantities = (
    quantity.P, quantity.T, quantity.V, quantity.U, quantity.H,
    quantity.S, quantity.G, quantity.F, quantity.RHO,
)

class_dic = {
    "quantity": quantity,
}

def validate_quantity(q):
    """ Returns a quantity member, accepting either a member or its symbol string ('h', 'rho', 'kappaT'...) """
    if isinstance(q, quantity):
        return q
    if isinstance(q, str):
        for member in class_dic["quantity"]:
            if member.value == q or member.name == q.upper():
                return member
    raise ValueError(f"Unknown quantity: {q!r}")
