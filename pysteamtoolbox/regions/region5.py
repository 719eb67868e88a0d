"""
IAPWS-IF97 Region 5: high-temperature steam.

Provides:
    - REGION5: forward properties from (p, T) via the Gibbs free energy
    - T(p,h) and T(p,s) by bracketed root finding on the forward equations

Valid range (Region 5):
    1073.15 K <= T <= 2273.15 K
    P <= 50 MPa

The formulation has no backward polynomials for this region, so the
inverse relations solve h(p,T) = h or s(p,T) = s with Brent's method.

Reference:
    IAPWS R7-97(2012), equations 32 to 34 and tables 37 to 39.

Units: T in K, P in MPa, h in kJ/kg, s in kJ/kg·K
"""

from pysteamtoolbox.constants import T25, T5
from pysteamtoolbox.errors import OutOfRangeError
from pysteamtoolbox.classes import quantity
from pysteamtoolbox.regions.base import GibbsRegion, ideal_residual_gamma
from pysteamtoolbox.shared_fns import bounded_root

# Ideal-gas part (J_i, n_i)
_IDEAL_JN = (
    (0, -0.131799836742010e2),
    (1, 0.685408416344340e1),
    (-3, -0.248051489334660e-1),
    (-2, 0.369015349803330),
    (-1, -0.311613182139250e1),
    (2, -0.329616265389170),
)

# Residual part (I_i, J_i, n_i)
_RESIDUAL_IJN = (
    (1, 1, 0.15736404855259e-2),
    (1, 2, 0.90153761673944e-3),
    (1, 3, -0.50270077677648e-2),
    (2, 3, 0.22440037409485e-5),
    (2, 9, -0.41163275453471e-5),
    (3, 7, 0.37919454822955e-7),
)

# Search bracket for the inverse relations; the lower end sits a little
# below the 2-5 boundary so that values on the boundary are found.
T_SEARCH_MIN = T25 - 5
T_SEARCH_MAX = T5


class Region5(GibbsRegion):
    name = 'Region 5'
    P_REF = 1.0
    T_REF = 1000.0
    vapour_fraction = 1.0

    def _gamma(self, pi, tau):
        return ideal_residual_gamma(pi, tau, _IDEAL_JN, _RESIDUAL_IJN, 0.0)

    def _solve_temperature(self, func, target, what, p):
        lo = func(p, T_SEARCH_MIN) - target
        hi = func(p, T_SEARCH_MAX) - target
        if lo * hi > 0:
            if hi < 0:
                raise OutOfRangeError(what, target, func(p, T_SEARCH_MAX))
            raise OutOfRangeError(what, target, func(p, T_SEARCH_MIN))
        return bounded_root(lambda T: func(p, T) - target, T_SEARCH_MIN, T_SEARCH_MAX)

    def temperature_ph(self, p, h):
        """
        Temperature from pressure and enthalpy, solving h(p,T) = h.

        Raises:
            OutOfRangeError: h cannot be reached within the region 5 temperature band
        """
        return self._solve_temperature(self.specific_enthalpy_pt, h, quantity.H, p)

    def temperature_ps(self, p, s):
        return self._solve_temperature(self.specific_entropy_pt, s, quantity.S, p)


REGION5 = Region5()
