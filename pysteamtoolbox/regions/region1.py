"""
IAPWS-IF97 Region 1: compressed liquid water.

Provides:
    - REGION1: forward properties from (p, T) via the Gibbs free energy
    - backward equations T(p,h), T(p,s) and p(h,s)

Valid range (Region 1):
    273.15 K <= T <= 623.15 K
    Psat(T) <= P <= 100 MPa

Reference:
    Wagner, W. et al. (2000). "The IAPWS Industrial Formulation 1997
    for the Thermodynamic Properties of Water and Steam."
    ASME J. Eng. Gas Turbines Power, 122(1), 150-182.

Units: T in K, P in MPa, h in kJ/kg, s in kJ/kg·K
"""

from pysteamtoolbox.regions.base import GibbsRegion, Gamma, series

# Region 1 coefficients (Table 2 of IAPWS-IF97)
# Each row: (I_i, J_i, n_i)
_REGION1_IJN = (
    (0, -2, 0.14632971213167),
    (0, -1, -0.84548187169114),
    (0, 0, -0.37563603672040e1),
    (0, 1, 0.33855169168385e1),
    (0, 2, -0.95791963387872),
    (0, 3, 0.15772038513228),
    (0, 4, -0.16616417199501e-1),
    (0, 5, 0.81214629983568e-3),
    (1, -9, 0.28319080123804e-3),
    (1, -7, -0.60706301565874e-3),
    (1, -1, -0.18990068218419e-1),
    (1, 0, -0.32529748770505e-1),
    (1, 1, -0.21841717175414e-1),
    (1, 3, -0.52838357969930e-4),
    (2, -3, -0.47184321073267e-3),
    (2, 0, -0.30001780793026e-3),
    (2, 1, 0.47661393906987e-4),
    (2, 3, -0.44141845330846e-5),
    (2, 17, -0.72694996297594e-15),
    (3, -4, -0.31679644845054e-4),
    (3, 0, -0.28270797985312e-5),
    (3, 6, -0.85205128120103e-9),
    (4, -5, -0.22425281908000e-5),
    (4, -2, -0.65171222895601e-6),
    (4, 10, -0.14341729937924e-12),
    (5, -8, -0.40516996860117e-6),
    (8, -11, -0.12734301741641e-8),
    (8, -6, -0.17424871230634e-9),
    (21, -29, -0.68762131295531e-18),
    (23, -31, 0.14478307828521e-19),
    (29, -38, 0.26335781662795e-22),
    (30, -39, -0.11947622640071e-22),
    (31, -40, 0.18228094581404e-23),
    (32, -41, -0.93537087292458e-25),
)

# Backward equation T(p,h) (Table 6)
_T_PH_IJN = (
    (0, 0, -0.23872489924521e3),
    (0, 1, 0.40421188637945e3),
    (0, 2, 0.11349746881718e3),
    (0, 6, -0.58457616048039e1),
    (0, 22, -0.15285482413140e-3),
    (0, 32, -0.10866707695377e-5),
    (1, 0, -0.13391744872602e2),
    (1, 1, 0.43211039183559e2),
    (1, 2, -0.54010067170506e2),
    (1, 3, 0.30535892203916e2),
    (1, 4, -0.65964749423638e1),
    (1, 10, 0.93965400878363e-2),
    (1, 32, 0.11573647505340e-6),
    (2, 10, -0.25858641282073e-4),
    (2, 32, -0.40644363084799e-8),
    (3, 10, 0.66456186191635e-7),
    (3, 32, 0.80670734103027e-10),
    (4, 32, -0.93477771213947e-12),
    (5, 32, 0.58265442020601e-14),
    (6, 32, -0.15020185953503e-16),
)

# Backward equation T(p,s) (Table 8)
_T_PS_IJN = (
    (0, 0, 0.17478268058307e3),
    (0, 1, 0.34806930892873e2),
    (0, 2, 0.65292584978455e1),
    (0, 3, 0.33039981775489),
    (0, 11, -0.19281382923196e-6),
    (0, 31, -0.24909197244573e-22),
    (1, 0, -0.26107636489332),
    (1, 1, 0.22592965981586),
    (1, 2, -0.64256463395226e-1),
    (1, 3, 0.78876289270526e-2),
    (1, 12, 0.35672110607366e-9),
    (1, 31, 0.17332496994895e-23),
    (2, 0, 0.56608900654837e-3),
    (2, 1, -0.32635483139717e-3),
    (2, 2, 0.44778286690632e-4),
    (2, 9, -0.51322156908507e-9),
    (2, 31, -0.42522657042207e-25),
    (3, 10, 0.26400441360689e-12),
    (3, 32, 0.78124600459723e-28),
    (4, 32, -0.30732199903668e-30),
)

# Backward equation p(h,s) (SR2 Table 2)
_P_HS_IJN = (
    (0, 0, -0.691997014660582),
    (0, 1, -0.183612548787560e2),
    (0, 2, -0.928332409297335e1),
    (0, 4, 0.659639569909906e2),
    (0, 5, -0.162060388912024e2),
    (0, 6, 0.450620017338667e3),
    (0, 8, 0.854680678224170e3),
    (0, 14, 0.607523214001162e4),
    (1, 0, 0.326487682621856e2),
    (1, 1, -0.269408844582931e2),
    (1, 4, -0.319947848334300e3),
    (1, 6, -0.928354307043320e3),
    (2, 0, 0.303634537455249e2),
    (2, 1, -0.650540422444146e2),
    (2, 10, -0.430991316516130e4),
    (3, 4, -0.747512324096068e3),
    (4, 1, 0.730000345529245e3),
    (4, 4, 0.114284032569021e4),
    (5, 0, -0.436407041874559e3),
)


class Region1(GibbsRegion):
    name = 'Region 1'
    P_REF = 16.53
    T_REF = 1386.0
    vapour_fraction = 0.0

    def _gamma(self, pi, tau):
        """
        gamma = sum( n_i * (7.1 - pi)^I_i * (tau - 1.222)^J_i )
        """
        a = 7.1 - pi
        b = tau - 1.222

        g = gp = gpp = gt = gtt = gpt = 0.0
        for I, J, n in _REGION1_IJN:
            aI = a ** I
            bJ = b ** J
            aI1 = a ** (I - 1)
            bJ1 = b ** (J - 1)
            g += n * aI * bJ
            gp -= n * I * aI1 * bJ
            gpp += n * I * (I - 1) * a ** (I - 2) * bJ
            gt += n * aI * J * bJ1
            gtt += n * aI * J * (J - 1) * b ** (J - 2)
            gpt -= n * I * aI1 * J * bJ1

        return Gamma(g, gp, gpp, gt, gtt, gpt)

    def temperature_ph(self, p, h):
        """
        Backward equation T(p,h) for Region 1.

        Parameters:
            p: pressure in MPa
            h: specific enthalpy in kJ/kg

        Returns:
            temperature in K
        """
        return series(_T_PH_IJN, p, h / 2500 + 1)

    def temperature_ps(self, p, s):
        """
        Backward equation T(p,s) for Region 1.

        Parameters:
            p: pressure in MPa
            s: specific entropy in kJ/kg·K

        Returns:
            temperature in K
        """
        return series(_T_PS_IJN, p, s + 2)

    def pressure_hs(self, h, s):
        """
        Backward equation p(h,s) for Region 1.

        Returns:
            pressure in MPa
        """
        return series(_P_HS_IJN, h / 3400 + 0.05, s / 7.6 + 0.05) * 100


REGION1 = Region1()
