"""
pysteamtoolbox
===================================

-----------------------------------------------------
IAPWS-IF97 Water and Steam Property Utilities
-----------------------------------------------------

Thermodynamic and transport properties of water and steam from the IAPWS
Industrial Formulation 1997, with its supplementary backward equations.

Functions are grouped into modules, requiring seperate imports;

- steam: Vectorised property functions by input pair (pt, ph, ps, hs, rhot, px, tx)
- selector: Region selection for (p,T), (rho,T), (p,h), (p,s) and (h,s)
- regions: Region 1, 2, 2-metastable, 3, 4 and 5 models and the boundary equations
- derivatives: Partial derivatives of any two of p, T, v, u, h, s, g, f, rho
- transport: Viscosity, thermal conductivity, dielectric constant, refractive index and surface tension
- errors: OutOfRangeError and UnsupportedOperationError

Units: p MPa, T K, rho kg/m³, h kJ/kg, s kJ/kg·K

"""

submodules = [
    'classes',
    'constants',
    'derivatives',
    'errors',
    'regions',
    'selector',
    'shared_fns',
    'steam',
    'transport',
]

__all__ = submodules

import importlib

def __dir__():
    return __all__


def __getattr__(name):
    if name in submodules:
        return importlib.import_module(f'pysteamtoolbox.{name}')
    else:
        try:
            return globals()[name]
        except KeyError:
            raise AttributeError(
                f"Module 'pysteamtoolbox' has no attribute '{name}'"
            )
