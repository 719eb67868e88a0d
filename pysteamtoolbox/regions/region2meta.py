"""
IAPWS-IF97 metastable-vapour region (supercooled steam).

Provides:
    - REGION2_META: forward properties from (p, T) via the Gibbs free energy

Valid range:
    from the saturated vapour line to the 5 % equilibrium moisture line,
    p <= 10 MPa

The formulation gives no backward equations for this region, so every
inverse query raises UnsupportedOperationError.

Reference:
    IAPWS R7-97(2012), equations 18 and 19, tables 16 and 17.

Units: T in K, P in MPa
"""

from pysteamtoolbox.regions.base import GibbsRegion, ideal_residual_gamma

# Ideal-gas part (J_i, n_i), identical to region 2 except n1 and n2
_IDEAL_JN = (
    (0, -0.96937268393049e1),
    (1, 0.10087275970006e2),
    (-5, -0.56087911283020e-2),
    (-4, 0.71452738081455e-1),
    (-3, -0.40710498223928),
    (-2, 0.14240819171444e1),
    (-1, -0.43839511319450e1),
    (2, -0.28408632460772),
    (3, 0.21268463753307e-1),
)

# Residual part (I_i, J_i, n_i)
_RESIDUAL_IJN = (
    (1, 0, -0.73362260186506e-2),
    (1, 2, -0.88223831943146e-1),
    (1, 5, -0.72334555213245e-1),
    (1, 11, -0.40813178534455e-2),
    (2, 1, 0.20097803380207e-2),
    (2, 7, -0.53045921898642e-1),
    (2, 16, -0.76190409086970e-2),
    (3, 4, -0.63498037657313e-2),
    (3, 16, -0.86043093028588e-1),
    (4, 7, 0.75321581522770e-2),
    (4, 10, -0.79238375446139e-2),
    (5, 9, -0.22888160778447e-3),
    (5, 10, -0.26456501482810e-2),
)


class Region2Metastable(GibbsRegion):
    name = 'Region 2 (metastable)'
    P_REF = 1.0
    T_REF = 540.0
    vapour_fraction = 1.0

    def _gamma(self, pi, tau):
        return ideal_residual_gamma(pi, tau, _IDEAL_JN, _RESIDUAL_IJN, 0.5)

    def temperature_hs(self, h, s):
        self._unsupported('temperature_hs')

    def vapour_fraction_ph(self, p, h):
        self._unsupported('vapour_fraction_ph')

    def vapour_fraction_ps(self, p, s):
        self._unsupported('vapour_fraction_ps')

    def vapour_fraction_hs(self, h, s):
        self._unsupported('vapour_fraction_hs')


REGION2_META = Region2Metastable()
