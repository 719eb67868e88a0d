"""
Region capability interface shared by the IF97 region models.

Every region answers property queries in its natural state variables
((p, T) for the Gibbs regions, (rho, T) for region 3) and, where the
formulation provides them, inverse queries from (p, h), (p, s) and (h, s).
Capabilities a region does not have raise UnsupportedOperationError.

The `variables` tag tells callers which evaluation path a region uses:
    'pT'   - Gibbs free energy regions 1, 2, 2-metastable and 5
    'rhoT' - Helmholtz free energy region 3
    'sat'  - saturation line, region 4
"""

from collections import namedtuple

import numpy as np

from pysteamtoolbox.constants import R
from pysteamtoolbox.errors import UnsupportedOperationError

# Dimensionless Gibbs free energy and its first and second derivatives
Gamma = namedtuple('Gamma', ['g', 'g_pi', 'g_pipi', 'g_tau', 'g_tautau', 'g_pitau'])


def series(table, x, y):
    """
    Power series sum of n * x^I * y^J over an (I, J, n) coefficient table.

    Used by the boundary and backward equations, which all share this form
    once their arguments are shifted and scaled.
    """
    out = 0.0
    for I, J, n in table:
        out += n * x ** I * y ** J
    return out


def ideal_residual_gamma(pi, tau, ideal, residual, tau_shift):
    """
    Gibbs derivatives for the ideal-gas plus residual form used by regions 2 and 5.

    gamma   = ln(pi) + sum(n0 * tau^J0) + sum(n * pi^I * (tau - tau_shift)^J)

    Parameters:
        ideal: table of (J, n) ideal-gas coefficients
        residual: table of (I, J, n) residual coefficients
        tau_shift: 0.5 for region 2, 0 for region 5

    Returns:
        Gamma namedtuple of the total (ideal + residual) derivatives
    """
    g = np.log(pi)
    g_tau = 0.0
    g_tautau = 0.0
    for J, n in ideal:
        g += n * tau ** J
        g_tau += n * J * tau ** (J - 1)
        g_tautau += n * J * (J - 1) * tau ** (J - 2)

    g_pi = 1 / pi
    g_pipi = -1 / (pi * pi)
    g_pitau = 0.0

    t = tau - tau_shift
    for I, J, n in residual:
        piI = pi ** I
        tJ = t ** J
        g += n * piI * tJ
        g_pi += n * I * pi ** (I - 1) * tJ
        g_pipi += n * I * (I - 1) * pi ** (I - 2) * tJ
        g_tau += n * piI * J * t ** (J - 1)
        g_tautau += n * piI * J * (J - 1) * t ** (J - 2)
        g_pitau += n * I * pi ** (I - 1) * J * t ** (J - 1)

    return Gamma(g, g_pi, g_pipi, g_tau, g_tautau, g_pitau)


class Region:
    """ Base capability set. Subclasses override what their formulation supports. """

    name = 'Region'
    variables = 'pT'
    vapour_fraction = None  # Fixed vapour fraction of a single phase region, if meaningful

    def _unsupported(self, operation):
        raise UnsupportedOperationError(self.name, operation)

    def __repr__(self):
        return f"<{self.name}>"

    # Forward properties in (p, T)
    def specific_volume_pt(self, p, T):
        self._unsupported('specific_volume_pt')

    def specific_enthalpy_pt(self, p, T):
        self._unsupported('specific_enthalpy_pt')

    def specific_entropy_pt(self, p, T):
        self._unsupported('specific_entropy_pt')

    def specific_internal_energy_pt(self, p, T):
        self._unsupported('specific_internal_energy_pt')

    def specific_gibbs_free_energy_pt(self, p, T):
        self._unsupported('specific_gibbs_free_energy_pt')

    def specific_isobaric_heat_capacity_pt(self, p, T):
        self._unsupported('specific_isobaric_heat_capacity_pt')

    def specific_isochoric_heat_capacity_pt(self, p, T):
        self._unsupported('specific_isochoric_heat_capacity_pt')

    def speed_of_sound_pt(self, p, T):
        self._unsupported('speed_of_sound_pt')

    def isobaric_cubic_expansion_coefficient_pt(self, p, T):
        self._unsupported('isobaric_cubic_expansion_coefficient_pt')

    def isothermal_compressibility_pt(self, p, T):
        self._unsupported('isothermal_compressibility_pt')

    def isentropic_exponent_pt(self, p, T):
        """ kappa = w^2 / (p v), with p converted to Pa """
        w = self.speed_of_sound_pt(p, T)
        return w * w / (p * 1e6 * self.specific_volume_pt(p, T))

    # Inverse (backward) relations
    def temperature_ph(self, p, h):
        self._unsupported('temperature_ph')

    def temperature_ps(self, p, s):
        self._unsupported('temperature_ps')

    def pressure_hs(self, h, s):
        self._unsupported('pressure_hs')

    def temperature_hs(self, h, s):
        return self.temperature_ph(self.pressure_hs(h, s), h)

    # Composite relations through the backward temperature
    def specific_volume_ph(self, p, h):
        return self.specific_volume_pt(p, self.temperature_ph(p, h))

    def specific_volume_ps(self, p, s):
        return self.specific_volume_pt(p, self.temperature_ps(p, s))

    def specific_volume_hs(self, h, s):
        return self.specific_volume_ph(self.pressure_hs(h, s), h)

    def specific_enthalpy_ps(self, p, s):
        return self.specific_enthalpy_pt(p, self.temperature_ps(p, s))

    def specific_entropy_ph(self, p, h):
        return self.specific_entropy_pt(p, self.temperature_ph(p, h))

    def vapour_fraction_ph(self, p, h):
        if self.vapour_fraction is None:
            self._unsupported('vapour_fraction_ph')
        return self.vapour_fraction

    def vapour_fraction_ps(self, p, s):
        if self.vapour_fraction is None:
            self._unsupported('vapour_fraction_ps')
        return self.vapour_fraction

    def vapour_fraction_hs(self, h, s):
        if self.vapour_fraction is None:
            self._unsupported('vapour_fraction_hs')
        return self.vapour_fraction


class GibbsRegion(Region):
    """
    Region described by a dimensionless Gibbs free energy gamma(pi, tau),
    pi = p / P_REF and tau = T_REF / T. Subclasses supply _gamma().

    Units: p in MPa, T in K, energies in kJ/kg, v in m3/kg
    """

    variables = 'pT'
    P_REF = 1.0
    T_REF = 1.0

    def _gamma(self, pi, tau):
        raise NotImplementedError

    def _reduced(self, p, T):
        return self._gamma(p / self.P_REF, self.T_REF / T)

    def specific_volume_pt(self, p, T):
        gm = self._reduced(p, T)
        return R * T * gm.g_pi / self.P_REF / 1e3

    def specific_enthalpy_pt(self, p, T):
        tau = self.T_REF / T
        return R * T * tau * self._reduced(p, T).g_tau

    def specific_entropy_pt(self, p, T):
        tau = self.T_REF / T
        gm = self._reduced(p, T)
        return R * (tau * gm.g_tau - gm.g)

    def specific_internal_energy_pt(self, p, T):
        pi, tau = p / self.P_REF, self.T_REF / T
        gm = self._reduced(p, T)
        return R * T * (tau * gm.g_tau - pi * gm.g_pi)

    def specific_gibbs_free_energy_pt(self, p, T):
        return R * T * self._reduced(p, T).g

    def specific_isobaric_heat_capacity_pt(self, p, T):
        tau = self.T_REF / T
        return -R * tau * tau * self._reduced(p, T).g_tautau

    def specific_isochoric_heat_capacity_pt(self, p, T):
        tau = self.T_REF / T
        gm = self._reduced(p, T)
        x = gm.g_pi - tau * gm.g_pitau
        return R * (-tau * tau * gm.g_tautau + x * x / gm.g_pipi)

    def speed_of_sound_pt(self, p, T):
        tau = self.T_REF / T
        gm = self._reduced(p, T)
        x = gm.g_pi - tau * gm.g_pitau
        w2 = 1e3 * R * T * gm.g_pi ** 2 / (x * x / (tau * tau * gm.g_tautau) - gm.g_pipi)
        return np.sqrt(w2)

    def isobaric_cubic_expansion_coefficient_pt(self, p, T):
        tau = self.T_REF / T
        gm = self._reduced(p, T)
        return (1 - tau * gm.g_pitau / gm.g_pi) / T

    def isothermal_compressibility_pt(self, p, T):
        gm = self._reduced(p, T)
        return -gm.g_pipi / gm.g_pi / self.P_REF
