"""
IAPWS-IF97 boundary equations.

Stateless curves separating the regions of the formulation, used by the
region selector and as ingredients of the backward equations.

Provides:
    - saturation_pressure(T), saturation_temperature(p): region 4 basic equation
    - pressure_b23(T), temperature_b23(p): boundary between regions 2 and 3
    - enthalpy_b2bc(p), pressure_b2bc(h): boundary between subregions 2b and 2c
    - enthalpy_3ab(p): boundary between subregions 3a and 3b
    - saturation_pressure_3h(h), saturation_pressure_3s(s): region 3/4 boundary
    - enthalpy_1_sat_liquid(s), enthalpy_3a_sat_liquid(s): saturated liquid line in h-s
    - enthalpy_2ab_sat_vapour(s), enthalpy_2c3b_sat_vapour(s): saturated vapour line in h-s
    - enthalpy_b13(s), temperature_b23_hs(h, s): region boundaries in h-s

No range checks are made here; callers check validity first.

Reference:
    IAPWS R7-97(2012), Revised Release on the IAPWS Industrial Formulation
    1997 for the Thermodynamic Properties of Water and Steam.
    IAPWS SR4-04(2014), Backward Equations p(h,s) for Regions 1, 2 and 3.
    IAPWS SR3-03(2014), Backward Equations T(p,h), v(p,h), T(p,s), v(p,s) for Region 3.

Units: p in MPa, T in K, h in kJ/kg, s in kJ/kg·K
"""

import numpy as np

from pysteamtoolbox.regions.base import series

# Saturation line (Table 34)
_N_SAT = (
    0.11670521452767e4,
    -0.72421316703206e6,
    -0.17073846940092e2,
    0.12020824702470e5,
    -0.32325550322333e7,
    0.14915108613530e2,
    -0.48232657361591e4,
    0.40511340542057e6,
    -0.23855557567849,
    0.65017534844798e3,
)

# B23 (Table 1)
_N_B23 = (
    0.34805185628969e3,
    -0.11671859879975e1,
    0.10192970039326e-2,
    0.57254459862746e3,
    0.13918839778870e2,
)

# B2bc (Table 19)
_N_B2BC = (
    0.90584278514712e3,
    -0.67955786399241,
    0.12809002730136e-3,
    0.26526571908428e4,
    0.45257578905948e1,
)

# h3ab(p) (SR3 Table 2)
_N_3AB = (
    0.201464004206875e4,
    0.374696550136983e1,
    -0.219921901054187e-1,
    0.875131686009950e-4,
)

# psat3(h) (SR4): (I, J, n)
_PSAT3H_IJN = (
    (0, 0, 0.600073641753024),
    (1, 1, -0.936203654849857e1),
    (1, 3, 0.246590798594147e2),
    (1, 4, -0.107014222858224e3),
    (1, 36, -0.915821315805768e14),
    (5, 3, -0.862332011700662e4),
    (7, 0, -0.235837344740032e2),
    (8, 24, 0.252304969384128e18),
    (14, 16, -0.389718771997719e19),
    (20, 16, -0.333775713645296e23),
    (22, 3, 0.356499469636328e11),
    (24, 18, -0.148547544720641e27),
    (28, 8, 0.330611514838798e19),
    (36, 24, 0.813641294467829e38),
)

# psat3(s) (SR4)
_PSAT3S_IJN = (
    (0, 0, 0.639767553612785),
    (1, 1, -0.129727445396014e2),
    (1, 32, -0.224595125848403e16),
    (4, 7, 0.177466741801846e7),
    (12, 4, 0.717079349571538e10),
    (12, 14, -0.378829107169011e18),
    (16, 36, -0.955586736431328e35),
    (24, 10, 0.187269814676188e24),
    (28, 0, 0.119254746466473e12),
    (32, 18, 0.110649277244882e37),
)

# h'1(s) (SR4)
_H1_SAT_IJN = (
    (0, 14, 0.332171191705237),
    (0, 36, 0.611217706323496e-3),
    (1, 3, -0.882092478906822e1),
    (1, 16, -0.455628192543250),
    (2, 0, -0.263483840850452e-4),
    (2, 5, -0.223949661148062e2),
    (3, 4, -0.428398660164013e1),
    (3, 36, -0.616679338856916),
    (4, 4, -0.146823031104040e2),
    (4, 16, 0.284523138727299e3),
    (4, 24, -0.113398503195444e3),
    (5, 18, 0.115671380760859e4),
    (5, 24, 0.395551267359325e3),
    (7, 1, -0.154891257229285e1),
    (8, 4, 0.194486637751291e2),
    (12, 2, -0.357915139457043e1),
    (12, 4, -0.335369414148819e1),
    (14, 1, -0.664426796332460),
    (14, 22, 0.323321885383934e5),
    (16, 10, 0.331766744667084e4),
    (20, 12, -0.223501257931087e5),
    (20, 28, 0.573953875852936e7),
    (22, 8, 0.173226193407919e3),
    (24, 3, -0.363968822121321e-1),
    (28, 0, 0.834596332878346e-6),
    (32, 6, 0.503611916682674e1),
    (32, 8, 0.655444787064505e2),
)

# h'3a(s) (SR4)
_H3A_SAT_IJN = (
    (0, 1, 0.822673364673336),
    (0, 4, 0.181977213534479),
    (0, 10, -0.112000260313624e-1),
    (0, 16, -0.746778287048033e-3),
    (2, 1, -0.179046263257381),
    (3, 36, 0.424220110836657e-1),
    (4, 3, -0.341355823438768),
    (4, 16, -0.209881740853565e1),
    (5, 20, -0.822477343323596e1),
    (5, 36, -0.499684082076008e1),
    (6, 4, 0.191413958471069),
    (7, 2, 0.581062241093136e-1),
    (7, 28, -0.165505498701029e4),
    (7, 32, 0.158870443421201e4),
    (10, 14, -0.850623535172818e2),
    (10, 32, -0.317714386511207e5),
    (10, 36, -0.945890406632871e5),
    (32, 0, -0.139273847088690e-5),
    (32, 6, 0.631052532240980),
)

# h''2ab(s) (SR4)
_H2AB_SAT_IJN = (
    (1, 8, -0.524581170928788e3),
    (1, 24, -0.926947218142218e7),
    (2, 4, -0.237385107491666e3),
    (2, 32, 0.210770155812776e11),
    (4, 1, -0.239494562010986e2),
    (4, 2, 0.221802480294197e3),
    (7, 7, -0.510472533393438e7),
    (8, 5, 0.124981396109147e7),
    (8, 12, 0.200008436996201e10),
    (10, 1, -0.815158509791035e3),
    (12, 0, -0.157612685637523e3),
    (12, 7, -0.114200422332791e11),
    (18, 10, 0.662364680776872e16),
    (20, 12, -0.227622818296144e19),
    (24, 32, -0.171048081348406e32),
    (28, 8, 0.660788766938091e16),
    (28, 12, 0.166320055886021e23),
    (28, 20, -0.218003784381501e30),
    (28, 22, -0.787276140295618e30),
    (28, 24, 0.151062329700346e32),
    (32, 2, 0.795732170300541e7),
    (32, 7, 0.131957647355347e16),
    (32, 12, -0.325097068299140e24),
    (32, 14, -0.418600611419248e26),
    (32, 24, 0.297478906557467e35),
    (36, 10, -0.953588761745473e20),
    (36, 12, 0.166957699620939e25),
    (36, 20, -0.175407764869978e33),
    (36, 22, 0.347581490626396e35),
    (36, 28, -0.710971318427851e39),
)

# h''2c3b(s) (SR4)
_H2C3B_SAT_IJN = (
    (0, 0, 0.104351280732769e1),
    (0, 3, -0.227807912708513e1),
    (0, 4, 0.180535256723202e1),
    (1, 0, 0.420440834792042),
    (1, 12, -0.105721244834660e6),
    (5, 36, 0.436911607493884e25),
    (6, 12, -0.328032702839753e12),
    (7, 16, -0.678686760804270e16),
    (8, 2, 0.743957464645363e4),
    (8, 20, -0.356896445355761e20),
    (12, 32, 0.167590585186801e32),
    (16, 36, -0.355028625419105e38),
    (22, 2, 0.396611982166538e12),
    (22, 32, -0.414716268484468e41),
    (24, 7, 0.359080103867382e19),
    (36, 20, -0.116994334851995e41),
)

# hB13(s) (SR4)
_HB13_IJN = (
    (0, 0, 0.913965547600543),
    (1, -2, -0.430944856041991e-4),
    (1, 2, 0.603235694765419e2),
    (3, -12, 0.117518273082168e-17),
    (5, -4, 0.220000904781292),
    (6, -3, -0.690815545851641e2),
)

# TB23(h, s) (SR4)
_TB23HS_IJN = (
    (-12, 10, 0.629096260829810e-3),
    (-10, 8, -0.823453502583165e-3),
    (-8, 3, 0.515446951519474e-7),
    (-4, 4, -0.117565945784945e1),
    (-3, 3, 0.348519684726192e1),
    (-2, -6, -0.507837382408313e-11),
    (-2, 2, -0.284637670005479e1),
    (-2, 3, -0.236092263939673e1),
    (-2, 4, 0.601492324973779e1),
    (0, 0, 0.148039650824546e1),
    (1, -3, 0.360075182221907e-3),
    (1, -2, -0.126700045009952e-1),
    (1, 10, -0.122184332521413e7),
    (3, -2, 0.149276502463272),
    (3, -1, 0.698733471798484),
    (5, -5, -0.252207040114321e-1),
    (6, -6, 0.147151930985213e-1),
    (6, -3, -0.108618917681849e1),
    (8, -8, -0.936875039816322e-3),
    (8, -2, 0.819877897570217e2),
    (8, -1, -0.182041861521835e3),
    (12, -12, 0.261907376402688e-5),
    (12, -1, -0.291626417025961e5),
    (14, -12, 0.140660774926165e-4),
    (14, 1, 0.783237062349385e7),
)


def saturation_pressure(T):
    """
    Saturation pressure from the region 4 basic equation.

    Parameters:
        T: temperature in K (273.15 - 647.096)

    Returns:
        saturation pressure in MPa
    """
    n = _N_SAT
    theta = T + n[8] / (T - n[9])
    theta2 = theta * theta
    A = theta2 + n[0] * theta + n[1]
    B = n[2] * theta2 + n[3] * theta + n[4]
    C = n[5] * theta2 + n[6] * theta + n[7]
    return (2 * C / (-B + np.sqrt(B * B - 4 * A * C))) ** 4


def saturation_temperature(p):
    """
    Saturation temperature from the region 4 basic equation (inverse form).

    Parameters:
        p: pressure in MPa (611.213e-6 - 22.064)

    Returns:
        saturation temperature in K
    """
    n = _N_SAT
    beta = p ** 0.25
    beta2 = beta * beta
    E = beta2 + n[2] * beta + n[5]
    F = n[0] * beta2 + n[3] * beta + n[6]
    G = n[1] * beta2 + n[4] * beta + n[7]
    D = 2 * G / (-F - np.sqrt(F * F - 4 * E * G))
    n9D = n[9] + D
    return (n9D - np.sqrt(n9D * n9D - 4 * (n[8] + n[9] * D))) / 2


def pressure_b23(T):
    """ Pressure on the region 2-3 boundary, MPa (T from 623.15 K to 863.15 K) """
    n = _N_B23
    return n[0] + n[1] * T + n[2] * T * T


def temperature_b23(p):
    """ Temperature on the region 2-3 boundary, K (p from 16.529 MPa to 100 MPa) """
    n = _N_B23
    return n[3] + np.sqrt((p - n[4]) / n[2])


def enthalpy_b2bc(p):
    """ Enthalpy on the subregion 2b-2c boundary, kJ/kg """
    n = _N_B2BC
    return n[3] + np.sqrt((p - n[4]) / n[2])


def pressure_b2bc(h):
    """ Pressure on the subregion 2b-2c boundary, MPa """
    n = _N_B2BC
    return n[0] + n[1] * h + n[2] * h * h


def enthalpy_3ab(p):
    """ Enthalpy on the subregion 3a-3b boundary (close to the critical isentrope), kJ/kg """
    out = 0.0
    for i, n in enumerate(_N_3AB):
        out += n * p ** i
    return out


def saturation_pressure_3h(h):
    """
    Saturation pressure on the region 3-4 boundary from enthalpy.

    Valid for h between h'(623.15 K) and h''(623.15 K).
    """
    eta = h / 2600
    return series(_PSAT3H_IJN, eta - 1.02, eta - 0.608) * 22


def saturation_pressure_3s(s):
    """
    Saturation pressure on the region 3-4 boundary from entropy.

    Valid for s between s'(623.15 K) and s''(623.15 K).
    """
    sigma = s / 5.2
    return series(_PSAT3S_IJN, sigma - 1.03, sigma - 0.699) * 22


def enthalpy_1_sat_liquid(s):
    """ Saturated liquid enthalpy h'(s) for region 1 entropies (s'(273.15 K) to s'(623.15 K)) """
    sigma = s / 3.8
    return series(_H1_SAT_IJN, sigma - 1.09, sigma + 0.366e-4) * 1700


def enthalpy_3a_sat_liquid(s):
    """ Saturated liquid enthalpy h'(s) for region 3a entropies (s'(623.15 K) to sc) """
    sigma = s / 3.8
    return series(_H3A_SAT_IJN, sigma - 1.09, sigma + 0.366e-4) * 1700


def enthalpy_2ab_sat_vapour(s):
    """ Saturated vapour enthalpy h''(s) for subregions 2a and 2b (5.85 to 9.155759395 kJ/kg·K) """
    eta = series(_H2AB_SAT_IJN, 5.21 / s - 0.513, s / 9.2 - 0.524)
    return np.exp(eta) * 2800


def enthalpy_2c3b_sat_vapour(s):
    """ Saturated vapour enthalpy h''(s) for subregions 2c and 3b (sc to 5.85 kJ/kg·K) """
    sigma = s / 5.9
    eta = series(_H2C3B_SAT_IJN, sigma - 1.02, sigma - 0.726)
    return eta ** 4 * 2800


def enthalpy_b13(s):
    """ Enthalpy on the region 1-3 boundary (623.15 K isotherm) from entropy, kJ/kg """
    sigma = s / 3.8
    return series(_HB13_IJN, sigma - 0.884, sigma - 0.864) * 1700


def temperature_b23_hs(h, s):
    """ Temperature on the region 2-3 boundary from enthalpy and entropy, K """
    return series(_TB23HS_IJN, h / 3000 - 0.727, s / 5.3 - 0.864) * 900
