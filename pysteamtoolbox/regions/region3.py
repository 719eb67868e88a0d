"""
IAPWS-IF97 Region 3: the near-critical and supercritical dense fluid.

Provides:
    - REGION3: properties from (rho, T) via the Helmholtz free energy
    - backward equations T(p,h), v(p,h), T(p,s), v(p,s) for subregions 3a and 3b
    - backward equation p(h,s) for subregions 3a and 3b
    - backward equation v(p,T) over the 26 subregions 3a to 3z
    - (p, T) properties evaluated at rho = 1 / v(p,T)

Valid range (Region 3):
    623.15 K <= T <= T_B23(p)
    P_B23(T) <= P <= 100 MPa

Subregions 3a and 3b are split by h3ab(p) for the (p,h) equations and by
the critical entropy for the (p,s) and (h,s) equations.

Reference:
    IAPWS R7-97(2012), equations 28 to 31 and tables 30 to 32.
    IAPWS SR3-03(2014), T(p,h), v(p,h), T(p,s), v(p,s) for region 3.
    IAPWS SR4-04(2014), p(h,s) for region 3.
    IAPWS SR5-05(2016), v(p,T) for region 3.

Units: T in K, P in MPa, rho in kg/m³, h in kJ/kg, s in kJ/kg·K
"""

from collections import namedtuple

import numpy as np

from pysteamtoolbox.classes import quantity
from pysteamtoolbox.constants import R, TC, PC, RHOC, SC, T13
from pysteamtoolbox.errors import OutOfRangeError
from pysteamtoolbox.regions.base import Region, series
from pysteamtoolbox.regions.boundaries import enthalpy_3ab, saturation_pressure, saturation_temperature
from pysteamtoolbox.regions.region3_subregions import SUBREGIONS

# Dimensionless Helmholtz free energy and its derivatives
Phi = namedtuple('Phi', ['f', 'f_d', 'f_dd', 'f_t', 'f_tt', 'f_dt'])

N1 = 0.10658070028513e1

# Helmholtz residual (I_i, J_i, n_i), table 30
_PHI_IJN = (
    (0, 0, -0.15732845290239e2),
    (0, 1, 0.20944396974307e2),
    (0, 2, -0.76867707878716e1),
    (0, 7, 0.26185947787954e1),
    (0, 10, -0.28080781148620e1),
    (0, 12, 0.12053369696517e1),
    (0, 23, -0.84566812812502e-2),
    (1, 2, -0.12654315477714e1),
    (1, 6, -0.11524407806681e1),
    (1, 15, 0.88521043984318),
    (1, 17, -0.64207765181607),
    (2, 0, 0.38493460186671),
    (2, 2, -0.85214708824206),
    (2, 6, 0.48972281541877e1),
    (2, 7, -0.30502617256965e1),
    (2, 22, 0.39420536879154e-1),
    (2, 26, 0.12558408424308),
    (3, 0, -0.27999329698710),
    (3, 2, 0.13899799569460e1),
    (3, 4, -0.20189915023570e1),
    (3, 16, -0.82147637173963e-2),
    (3, 26, -0.47596035734923),
    (4, 0, 0.43984074473500e-1),
    (4, 2, -0.44476435428739),
    (4, 4, 0.90572070719733),
    (4, 26, 0.70522450087967),
    (5, 1, 0.10770512626332),
    (5, 3, -0.32913623258954),
    (5, 26, -0.50871062041158),
    (6, 0, -0.22175400873096e-1),
    (6, 2, 0.94260751665092e-1),
    (6, 26, 0.16436278447961),
    (7, 2, -0.13503372241348e-1),
    (8, 26, -0.14834345352472e-1),
    (9, 2, 0.57922953628084e-3),
    (9, 26, 0.32308904703711e-2),
    (10, 0, 0.80964802996215e-4),
    (10, 1, -0.16557679795037e-3),
    (11, 26, -0.44923899061815e-4),
)

# Backward v(p,h), SR3 tables 6 and 7
_V3A_PH_IJN = (
    (-12, 6, 5.29944062966028e-3),
    (-12, 8, -1.70099690234461e-1),
    (-12, 12, 1.11323814312927e1),
    (-12, 18, -2.17898123145125e3),
    (-10, 4, -5.06061827980875e-4),
    (-10, 7, 5.56495239685324e-1),
    (-10, 10, -9.43672726094016),
    (-8, 5, -2.97856807561527e-1),
    (-8, 12, 9.39353943717186e1),
    (-6, 3, 1.92944939465981e-2),
    (-6, 4, 4.21740664704763e-1),
    (-6, 22, -3.68914126282330e6),
    (-4, 2, -7.37566847600639e-3),
    (-4, 3, -3.54753242424366e-1),
    (-3, 7, -1.99768169338727),
    (-2, 3, 1.15456297059049),
    (-2, 16, 5.68366875815960e3),
    (-1, 0, 8.08169540124668e-3),
    (-1, 1, 1.72416341519307e-1),
    (-1, 2, 1.04270175292927),
    (-1, 3, -2.97691372792847e-1),
    (0, 0, 5.60394465163593e-1),
    (0, 1, 2.75234661176914e-1),
    (1, 0, -1.48347894866012e-1),
    (1, 1, -6.51142513478515e-2),
    (1, 2, -2.92468715386302),
    (2, 0, 6.64876096952665e-2),
    (2, 2, 3.52335014263844),
    (3, 0, -1.46340792313332e-2),
    (4, 2, -2.24503486668184),
    (5, 2, 1.10533464706142),
    (8, 2, -4.08757344495612e-2),
)

_V3B_PH_IJN = (
    (-12, 0, -2.25196934336318e-9),
    (-12, 1, 1.40674363313486e-8),
    (-8, 0, 2.33784085280560e-6),
    (-8, 1, -3.31833715229001e-5),
    (-8, 3, 1.07956778514318e-3),
    (-8, 6, -2.71382067378863e-1),
    (-8, 7, 1.07202262490333),
    (-8, 8, -8.53821329075382e-1),
    (-6, 0, -2.15214194340526e-5),
    (-6, 1, 7.69656088222730e-4),
    (-6, 2, -4.31136580433864e-3),
    (-6, 5, 4.53342167309331e-1),
    (-6, 6, -5.07749535873652e-1),
    (-6, 10, -1.00475154528389e2),
    (-4, 3, -2.19201924648793e-1),
    (-4, 6, -3.21087965668917),
    (-4, 10, 6.07567815637771e2),
    (-3, 0, 5.57686450685932e-4),
    (-3, 2, 1.87499040029550e-1),
    (-2, 1, 9.05368030448107e-3),
    (-2, 2, 2.85417173048685e-1),
    (-1, 0, 3.29924030996098e-2),
    (-1, 1, 2.39897419685483e-1),
    (-1, 4, 4.82754995951394),
    (-1, 5, -1.18035753702231e1),
    (0, 0, 1.69490044091791e-1),
    (1, 0, -1.79967222507787e-2),
    (1, 1, 3.71810116332674e-2),
    (2, 2, -5.36288335065096e-2),
    (2, 6, 1.60697101092520),
)

# Backward v(p,s), SR3 tables 13 and 14
_V3A_PS_IJN = (
    (-12, 10, 0.795544074093975e2),
    (-12, 12, -0.238261242984590e4),
    (-12, 14, 0.176813100617787e5),
    (-10, 4, -0.110524727080379e-2),
    (-10, 8, -0.153213833655326e2),
    (-10, 10, 0.297544599376982e3),
    (-10, 20, -0.350315206871242e8),
    (-8, 5, 0.277513761062119),
    (-8, 6, -0.523964271036888),
    (-8, 14, -0.148011182995403e6),
    (-8, 16, 0.160014899374266e7),
    (-6, 28, 0.170802322663427e13),
    (-5, 1, 0.246866996006494e-3),
    (-4, 5, 0.165326084797980e1),
    (-3, 2, -0.118008384666987),
    (-3, 4, 0.253798642355900e1),
    (-2, 3, 0.965127704669424),
    (-2, 8, -0.282172420532826e2),
    (-1, 1, 0.203224612353823),
    (-1, 2, 0.110648186063513e1),
    (0, 0, 0.526127948451280),
    (0, 1, 0.277000018736321),
    (0, 3, 0.108153340501132e1),
    (1, 0, -0.744127885357893e-1),
    (2, 0, 0.164094443541384e-1),
    (4, 2, -0.680468275301065e-1),
    (5, 2, 0.257988576101640e-1),
    (6, 0, -0.145749861944416e-3),
)

_V3B_PS_IJN = (
    (-12, 0, 0.591599780322238e-4),
    (-12, 1, -0.185465997137856e-2),
    (-12, 2, 0.104190510480013e-1),
    (-12, 3, 0.598647302038590e-2),
    (-12, 5, -0.771391189901699),
    (-12, 6, 0.172549765557036e1),
    (-10, 0, -0.467076079846526e-3),
    (-10, 1, 0.134533823384439e-1),
    (-10, 2, -0.808094336805495e-1),
    (-10, 4, 0.508139374365767),
    (-8, 0, 0.128584643361683e-2),
    (-5, 1, -0.163899353915435e1),
    (-5, 2, 0.586938199318063e1),
    (-5, 3, -0.292466667918613e1),
    (-4, 0, -0.614076301499537e-2),
    (-4, 1, 0.576199014049172e1),
    (-4, 2, -0.121613320606788e2),
    (-4, 3, 0.167637540957944e1),
    (-3, 1, -0.744135838773463e1),
    (-2, 0, 0.378168091437659e-1),
    (-2, 1, 0.401432203027688e1),
    (-2, 2, 0.160279837479185e2),
    (-2, 3, 0.317848779347728e1),
    (-2, 4, -0.358362310304853e1),
    (-2, 12, -0.115995260446827e7),
    (0, 0, 0.199256573577909),
    (0, 1, -0.122270624794624),
    (0, 2, -0.191449143716586e2),
    (1, 0, -0.150448002905284e-1),
    (1, 2, 0.146407900162154e2),
    (2, 2, -0.327477787188230e1),
)

# Backward p(h,s), SR4 tables 4 and 5
_P3A_HS_IJN = (
    (0, 0, 0.770889828326934e1),
    (0, 1, -0.260835009128688e2),
    (0, 5, 0.267416218930389e3),
    (1, 0, 0.172221089496844e2),
    (1, 3, -0.293542332145970e3),
    (1, 4, 0.614135601882478e3),
    (1, 8, -0.610562757725674e5),
    (1, 14, -0.651272251118219e8),
    (2, 6, 0.735919313521937e5),
    (2, 16, -0.116646505914191e11),
    (3, 0, 0.355267086434461e2),
    (3, 2, -0.596144543825955e3),
    (3, 3, -0.475842430145708e3),
    (4, 0, 0.696781965359503e2),
    (4, 1, 0.335674250377312e3),
    (4, 4, 0.250526809130882e5),
    (4, 5, 0.146997380630766e6),
    (5, 28, 0.538069315091534e20),
    (6, 28, 0.143619827291346e22),
    (7, 24, 0.364985866165994e20),
    (8, 1, -0.254741561156775e4),
    (10, 32, 0.240120197096563e28),
    (10, 36, -0.393847464679496e30),
    (14, 22, 0.147073407024852e25),
    (18, 28, -0.426391250432059e32),
    (20, 36, 0.194509340621077e39),
    (22, 16, 0.666212132114896e24),
    (22, 28, 0.706777016552858e34),
    (24, 36, 0.175563621975576e42),
    (28, 16, 0.108408607429124e29),
    (28, 36, 0.730872705175151e44),
    (32, 10, 0.159145847398870e25),
    (32, 28, 0.377121605943324e41),
)

_P3B_HS_IJN = (
    (-12, 2, 0.125244360717979e-12),
    (-12, 10, -0.126599322553713e-1),
    (-12, 12, 0.506878030140626e1),
    (-12, 14, 0.317847171154202e2),
    (-12, 20, -0.391041161399932e6),
    (-10, 2, -0.975733406392044e-10),
    (-10, 10, -0.186312419488279e2),
    (-10, 14, 0.510973543414101e3),
    (-10, 18, 0.373847005822362e6),
    (-8, 2, 0.299804024666572e-7),
    (-8, 8, 0.200544393820342e2),
    (-6, 2, -0.498030487662829e-5),
    (-6, 6, -0.102301806360030e2),
    (-6, 7, 0.552819126990325e2),
    (-6, 8, -0.206211367510878e3),
    (-5, 10, -0.794012232324823e4),
    (-4, 4, 0.782248472028153e1),
    (-4, 5, -0.586544326902468e2),
    (-4, 8, 0.355073647696481e4),
    (-3, 1, -0.115303107290162e-3),
    (-3, 3, -0.175092403171802e1),
    (-3, 5, 0.257981687748160e3),
    (-3, 6, -0.727048374179467e3),
    (-2, 0, 0.121644822609198e-3),
    (-2, 1, 0.393137871762692e-1),
    (-1, 0, 0.704181005909296e-2),
    (0, 3, -0.829108200698110e2),
    (2, 0, -0.265178818131250),
    (2, 1, 0.137531682453991e2),
    (5, 0, -0.522394090753046e2),
    (6, 1, 0.240556298941048e4),
    (8, 1, -0.227361631268929e5),
    (10, 1, 0.890746343932567e5),
    (14, 3, -0.239234565822486e8),
    (14, 7, 0.568795808129714e10),
)

# Backward T(p,h), SR3 tables 3 and 4
_T3A_PH_IJN = (
    (-12, 0, -1.33645667811215e-7),
    (-12, 1, 4.55912656802978e-6),
    (-12, 2, -1.46294640700979e-5),
    (-12, 6, 6.39341312970080e-3),
    (-12, 14, 3.72783927268847e2),
    (-12, 16, -7.18654377460447e3),
    (-12, 20, 5.73494752103400e5),
    (-12, 22, -2.67569329111439e6),
    (-10, 1, -3.34066283302614e-5),
    (-10, 5, -2.45479214069597e-2),
    (-10, 12, 4.78087847764996e1),
    (-8, 0, 7.64664131818904e-6),
    (-8, 2, 1.28350627676972e-3),
    (-8, 4, 1.71219081377331e-2),
    (-8, 10, -8.51007304583213),
    (-5, 2, -1.36513461629781e-2),
    (-3, 0, -3.84460997596657e-6),
    (-2, 1, 3.37423807911655e-3),
    (-2, 3, -5.51624873066791e-1),
    (-2, 4, 7.29202277107470e-1),
    (-1, 0, -9.92522757376041e-3),
    (-1, 2, -1.19308831407288e-1),
    (0, 0, 7.93929190615421e-1),
    (0, 1, 4.54270731799386e-1),
    (1, 1, 2.09998591259910e-1),
    (3, 0, -6.42109823904738e-3),
    (3, 1, -2.35155868604540e-2),
    (4, 0, 2.52233108341612e-3),
    (4, 3, -7.64885133368119e-3),
    (10, 4, 1.36176427574291e-2),
    (12, 5, -1.33027883575669e-2),
)

_T3B_PH_IJN = (
    (-12, 0, 3.23254573644920e-5),
    (-12, 1, -1.27575556587181e-4),
    (-10, 0, -4.75851877356068e-4),
    (-10, 1, 1.56183014181602e-3),
    (-10, 5, 1.05724860113781e-1),
    (-10, 10, -8.58514221132534e1),
    (-10, 12, 7.24140095480911e2),
    (-8, 0, 2.96475810273257e-3),
    (-8, 1, -5.92721983365988e-3),
    (-8, 2, -1.26305422818666e-2),
    (-8, 4, -1.15716196364853e-1),
    (-8, 10, 8.49000969739595e1),
    (-6, 0, -1.08602260086615e-2),
    (-6, 1, 1.54304475328851e-2),
    (-6, 2, 7.50455441524466e-2),
    (-4, 0, 2.52520973612982e-2),
    (-4, 1, -6.02507901232996e-2),
    (-3, 5, -3.07622221350501),
    (-2, 0, -5.74011959864879e-2),
    (-2, 4, 5.03471360939849),
    (-1, 2, -9.25081888584834e-1),
    (-1, 4, 3.91733882917546),
    (-1, 6, -7.73146007130190e1),
    (-1, 10, 9.49308762098587e3),
    (-1, 14, -1.41043719679409e6),
    (-1, 16, 8.49166230819026e6),
    (0, 0, 8.61095729446704e-1),
    (0, 2, 3.23346442811720e-1),
    (1, 1, 8.73281936020439e-1),
    (3, 1, -4.36653048526683e-1),
    (5, 1, 2.86596714529479e-1),
    (6, 1, -1.31778331276228e-1),
    (8, 1, 6.76682064330275e-3),
)

# Backward T(p,s), SR3 tables 10 and 11
_T3A_PS_IJN = (
    (-12, 28, 0.150042008263875e10),
    (-12, 32, -0.159397258480424e12),
    (-10, 4, 0.502181140217975e-3),
    (-10, 10, -0.672057767855466e2),
    (-10, 12, 0.145058545404456e4),
    (-10, 14, -0.823889534888890e4),
    (-8, 5, -0.154852214233853),
    (-8, 7, 0.112305046746695e2),
    (-8, 8, -0.297000213482822e2),
    (-8, 28, 0.438565132635495e11),
    (-6, 2, 0.137837838635464e-2),
    (-6, 6, -0.297478527157462e1),
    (-6, 32, 0.971777947349413e13),
    (-5, 0, -0.571527767052398e-4),
    (-5, 14, 0.288307949778420e5),
    (-5, 32, -0.744428289262703e14),
    (-4, 6, 0.128017324848921e2),
    (-4, 10, -0.368275545889071e3),
    (-4, 36, 0.664768904779177e16),
    (-2, 1, 0.449359251958880e-1),
    (-2, 4, -0.422897836099655e1),
    (-1, 1, -0.240614376434179),
    (-1, 6, -0.474341365254924e1),
    (0, 0, 0.724093999126110),
    (0, 1, 0.923874349695897),
    (0, 4, 0.399043655281015e1),
    (1, 0, 0.384066651868009e-1),
    (2, 0, -0.359344365571848e-2),
    (2, 3, -0.735196448821653),
    (3, 2, 0.188367048396131),
    (8, 0, 0.141064266818704e-3),
    (8, 1, -0.257418501496337e-2),
    (10, 2, 0.123220024851555e-2),
)

_T3B_PS_IJN = (
    (-12, 1, 0.527111701601660),
    (-12, 3, -0.401317830052742e2),
    (-12, 4, 0.153020073134484e3),
    (-12, 7, -0.224799398218827e4),
    (-8, 0, -0.193993484669048),
    (-8, 1, -0.140467557893768e1),
    (-8, 3, 0.426799878114024e2),
    (-6, 0, 0.752810643416743),
    (-6, 2, 0.226657238616417e2),
    (-6, 4, -0.622873556909932e3),
    (-5, 0, -0.660823667935396),
    (-5, 1, 0.841267087271658),
    (-5, 2, -0.253717501764397e2),
    (-5, 4, 0.485708963532948e3),
    (-5, 6, 0.880531517490555e3),
    (-4, 12, 0.265015592794626e7),
    (-3, 1, -0.359287150025783),
    (-3, 6, -0.656991567673753e3),
    (-2, 2, 0.241768149185367e1),
    (0, 0, 0.856873461222588),
    (2, 1, 0.655143675313458),
    (3, 1, -0.213535213206406),
    (4, 0, 0.562974957606348e-2),
    (5, 24, -0.316955725450471e15),
    (6, 0, -0.699997000152457e-3),
    (8, 3, 0.119845803210767e-1),
    (12, 1, 0.193848122022095e-4),
    (14, 2, -0.215095749182309e-4),
)

# Subregion boundary equations of the v(p,T) release, SR5 tables 2 and 3.
# Entries are (I_i, n_i); the ab, op and wx boundaries are series in ln(p).
_T3AB_IN = ((0, 0.154793642129415e4), (1, -0.187661219490113e3), (2, 0.213144632222112e2),
            (-1, -0.191887498864292e4), (-2, 0.918419702359447e3))
_T3OP_IN = ((0, 0.969461372400213e3), (1, -0.332500170441278e3), (2, 0.642859598466067e2),
            (-1, 0.773845935768222e3), (-2, -0.152313732937084e4))
_T3WX_IN = ((0, 0.728052609145380e1), (1, 0.973505869861952e2), (2, 0.147370491183191e2),
            (-1, 0.329196213998375e3), (-2, 0.873371668682417e3))

# Polynomials in p, coefficients in ascending powers
_T3CD_N = (0.585276966696349e3, 0.278233532206915e1, -0.127283549295878e-1, 0.159090746562729e-3)
_T3GH_N = (-0.249284240900418e5, 0.428143584791546e4, -0.269029173140130e3, 0.751608051114157e1,
           -0.787105249910383e-1)
_T3IJ_N = (0.584814781649163e3, -0.616179320924617, 0.260763050899562, -0.587071076864459e-2,
           0.515308185433082e-4)
_T3JK_N = (0.617229772068439e3, -0.770600270141675e1, 0.697072596851896, -0.157391839848015e-1,
           0.137897492684194e-3)
_T3MN_N = (0.535339483742384e3, 0.761978122720128e1, -0.158365725441648, 0.192871054508108e-2)
_T3QU_N = (0.565603648239126e3, 0.529062258221222e1, -0.102020639611016, 0.122240301070145e-2)
_T3RX_N = (0.584561202520006e3, -0.102961025163669e1, 0.243293362700452, -0.294905044740799e-2)
_T3UV_N = (0.528199646263062e3, 0.890579602135307e1, -0.222814134903755, 0.286791682263697e-2)

P3CD = 19.00881189  # Lower pressure of the 3c/3d boundary
DT_DP_3EF = 3.727888004  # Slope of the straight 3e/3f boundary

# Saturated liquid or vapour side of the v(p,T) selection at T == Tsat(p)
LIQUID = 'liquid'
VAPOUR = 'vapour'


def _poly(n, p):
    return sum(c * p ** i for i, c in enumerate(n))


def _log_series(table, p):
    lp = np.log(p)
    return sum(n * lp ** I for I, n in table)


def subregion_pt(p, T, phase=None):
    """
    Selects the v(p,T) subregion (a to z) for a region 3 state.

    Parameters:
        p: pressure in MPa
        T: temperature in K
        phase: None, 'liquid' or 'vapour'. On the saturation line the
            liquid/vapour decision cannot be made from T alone, so callers
            computing saturated densities name the side they want.

    Returns:
        single letter subregion name
    """
    ps13 = saturation_pressure(T13)
    if p <= ps13:
        raise OutOfRangeError(quantity.P, p, ps13)

    if phase == LIQUID:
        liquid_side = True
    elif phase == VAPOUR:
        liquid_side = False
    elif p <= PC:
        liquid_side = T <= saturation_temperature(p)
    else:
        liquid_side = False

    ps643 = saturation_pressure(643.15)
    t_ef = DT_DP_3EF * (p - PC) + TC
    t_qu = _poly(_T3QU_N, p)
    t_rx = _poly(_T3RX_N, p)

    if t_qu <= T <= t_rx and ps643 <= p <= 22.5:
        # Auxiliary equations near the critical point
        t_uv = _poly(_T3UV_N, p)
        t_wx = _log_series(_T3WX_IN, p)
        if p <= PC:
            if liquid_side:
                if p > 21.93161551:
                    return 'u' if T <= t_uv else 'y'
                return 'u'
            if p > 21.90096265:
                return 'z' if T <= t_wx else 'x'
            return 'x'
        if T > t_wx:
            return 'x'
        if p <= 22.11:
            if T > t_ef:
                return 'z'
            return 'y' if T > t_uv else 'u'
        if T > t_ef:
            return 'w'
        return 'v' if T > t_uv else 'u'

    t_cd = _poly(_T3CD_N, p)
    if p > 40:
        return 'a' if T <= _log_series(_T3AB_IN, p) else 'b'

    if p > 25:
        if T <= t_cd:
            return 'c'
        if T <= _log_series(_T3AB_IN, p):
            return 'd'
        return 'e' if T <= t_ef else 'f'

    if p > 22.5:
        if T <= t_cd:
            return 'c'
        t_gh = _poly(_T3GH_N, p)
        t_ij = _poly(_T3IJ_N, p)
        t_jk = _poly(_T3JK_N, p)
        if p > 23:
            if T <= t_gh:
                return 'g' if p > 23.5 else 'l'
            if T <= t_ef:
                return 'h'
        else:
            if T <= t_gh:
                return 'l'
            if T <= _poly(_T3MN_N, p):
                return 'm'
            if T <= t_ef:
                return 'n'
            if T <= _log_series(_T3OP_IN, p):
                return 'o'
            if T <= t_ij:
                return 'p'
        if p > 23 and T <= t_ij:
            return 'i'
        return 'j' if T <= t_jk else 'k'

    if T <= t_cd and p > P3CD:
        return 'c'

    if p > ps643:
        if T <= t_qu:
            return 'q'
        if t_rx < T <= _poly(_T3JK_N, p):
            return 'r'
        return 'k'

    if p > 20.5:
        if liquid_side:
            return 's'
        return 'r' if T <= _poly(_T3JK_N, p) else 'k'

    if p > P3CD:
        return 's' if liquid_side else 't'

    return 'c' if liquid_side else 't'


class Region3(Region):
    name = 'Region 3'
    variables = 'rhoT'

    def _phi(self, rho, T):
        """
        phi = n1 * ln(delta) + sum( n_i * delta^I_i * tau^J_i )
        """
        delta = rho / RHOC
        tau = TC / T

        f = N1 * np.log(delta)
        f_d = N1 / delta
        f_dd = -N1 / (delta * delta)
        f_t = f_tt = f_dt = 0.0
        for I, J, n in _PHI_IJN:
            dI = delta ** I
            tJ = tau ** J
            f += n * dI * tJ
            f_d += n * I * delta ** (I - 1) * tJ
            f_dd += n * I * (I - 1) * delta ** (I - 2) * tJ
            f_t += n * dI * J * tau ** (J - 1)
            f_tt += n * dI * J * (J - 1) * tau ** (J - 2)
            f_dt += n * I * delta ** (I - 1) * J * tau ** (J - 1)

        return Phi(f, f_d, f_dd, f_t, f_tt, f_dt)

    # Properties of (rho, T)
    def pressure_rhot(self, rho, T):
        delta = rho / RHOC
        return delta * self._phi(rho, T).f_d * rho * R * T / 1e3

    def specific_enthalpy_rhot(self, rho, T):
        delta, tau = rho / RHOC, TC / T
        ph = self._phi(rho, T)
        return (tau * ph.f_t + delta * ph.f_d) * R * T

    def specific_internal_energy_rhot(self, rho, T):
        tau = TC / T
        return tau * self._phi(rho, T).f_t * R * T

    def specific_entropy_rhot(self, rho, T):
        tau = TC / T
        ph = self._phi(rho, T)
        return (tau * ph.f_t - ph.f) * R

    def specific_gibbs_free_energy_rhot(self, rho, T):
        delta = rho / RHOC
        ph = self._phi(rho, T)
        return (ph.f + delta * ph.f_d) * R * T

    def specific_helmholtz_free_energy_rhot(self, rho, T):
        return self._phi(rho, T).f * R * T

    def specific_isochoric_heat_capacity_rhot(self, rho, T):
        tau = TC / T
        return -tau * tau * self._phi(rho, T).f_tt * R

    def specific_isobaric_heat_capacity_rhot(self, rho, T):
        delta, tau = rho / RHOC, TC / T
        ph = self._phi(rho, T)
        x = delta * ph.f_d - delta * tau * ph.f_dt
        return (-tau * tau * ph.f_tt + x * x / (2 * delta * ph.f_d + delta * delta * ph.f_dd)) * R

    def speed_of_sound_rhot(self, rho, T):
        delta, tau = rho / RHOC, TC / T
        ph = self._phi(rho, T)
        x = delta * ph.f_d - delta * tau * ph.f_dt
        w2 = (2 * delta * ph.f_d + delta * delta * ph.f_dd - x * x / (tau * tau * ph.f_tt)) * 1e3 * R * T
        return np.sqrt(w2)

    def isobaric_cubic_expansion_coefficient_rhot(self, rho, T):
        delta, tau = rho / RHOC, TC / T
        ph = self._phi(rho, T)
        return (ph.f_d - tau * ph.f_dt) / (2 * ph.f_d + delta * ph.f_dd) / T

    def isothermal_compressibility_rhot(self, rho, T):
        delta = rho / RHOC
        ph = self._phi(rho, T)
        return 1e3 / (2 * delta * ph.f_d + delta * delta * ph.f_dd) / (rho * R * T)

    def relative_pressure_coefficient_rhot(self, rho, T):
        """ alpha_p = (dp/dT)_v / p, in 1/K """
        tau = TC / T
        ph = self._phi(rho, T)
        return (1 - tau * ph.f_dt / ph.f_d) / T

    def isothermal_stress_coefficient_rhot(self, rho, T):
        """ beta_p = -(dp/dv)_T / p, in kg/m³ """
        delta = rho / RHOC
        ph = self._phi(rho, T)
        return rho * (2 + delta * ph.f_dd / ph.f_d)

    def isentropic_exponent_rhot(self, rho, T):
        w = self.speed_of_sound_rhot(rho, T)
        return w * w * rho / (self.pressure_rhot(rho, T) * 1e6)

    # Backward v(p,T) and the (p, T) properties built on it
    def specific_volume_pt(self, p, T, phase=None):
        """
        Backward equation v(p,T) for region 3.

        Parameters:
            p: pressure in MPa
            T: temperature in K
            phase: None, 'liquid' or 'vapour' (see subregion_pt)

        Returns:
            specific volume in m³/kg
        """
        sub = SUBREGIONS[subregion_pt(p, T, phase)]
        pi = p / sub.p_ref
        theta = T / sub.T_ref

        if sub.e is None:
            omega = np.exp(series(sub.table, pi - sub.a, theta - sub.b))
        else:
            x = (pi - sub.a) ** sub.c
            y = (theta - sub.b) ** sub.d
            omega = series(sub.table, x, y) ** sub.e
        return omega * sub.v_ref

    def density_pt(self, p, T, phase=None):
        return 1 / self.specific_volume_pt(p, T, phase)

    def specific_enthalpy_pt(self, p, T):
        return self.specific_enthalpy_rhot(self.density_pt(p, T), T)

    def specific_entropy_pt(self, p, T):
        return self.specific_entropy_rhot(self.density_pt(p, T), T)

    def specific_internal_energy_pt(self, p, T):
        return self.specific_internal_energy_rhot(self.density_pt(p, T), T)

    def specific_gibbs_free_energy_pt(self, p, T):
        return self.specific_gibbs_free_energy_rhot(self.density_pt(p, T), T)

    def specific_isobaric_heat_capacity_pt(self, p, T):
        return self.specific_isobaric_heat_capacity_rhot(self.density_pt(p, T), T)

    def specific_isochoric_heat_capacity_pt(self, p, T):
        return self.specific_isochoric_heat_capacity_rhot(self.density_pt(p, T), T)

    def speed_of_sound_pt(self, p, T):
        return self.speed_of_sound_rhot(self.density_pt(p, T), T)

    def isobaric_cubic_expansion_coefficient_pt(self, p, T):
        return self.isobaric_cubic_expansion_coefficient_rhot(self.density_pt(p, T), T)

    def isothermal_compressibility_pt(self, p, T):
        return self.isothermal_compressibility_rhot(self.density_pt(p, T), T)

    # Backward equations in (p,h), (p,s) and (h,s)
    def temperature_ph(self, p, h):
        pi = p / 100
        if h < enthalpy_3ab(p):
            return series(_T3A_PH_IJN, pi + 0.240, h / 2300 - 0.615) * 760
        return series(_T3B_PH_IJN, pi + 0.298, h / 2800 - 0.720) * 860

    def specific_volume_ph(self, p, h):
        pi = p / 100
        if h < enthalpy_3ab(p):
            return series(_V3A_PH_IJN, pi + 0.128, h / 2100 - 0.727) * 0.0028
        return series(_V3B_PH_IJN, pi + 0.0661, h / 2800 - 0.720) * 0.0088

    def temperature_ps(self, p, s):
        pi = p / 100
        if s <= SC:
            return series(_T3A_PS_IJN, pi + 0.240, s / 4.4 - 0.703) * 760
        return series(_T3B_PS_IJN, pi + 0.760, s / 5.3 - 0.818) * 860

    def specific_volume_ps(self, p, s):
        pi = p / 100
        if s <= SC:
            return series(_V3A_PS_IJN, pi + 0.187, s / 4.4 - 0.755) * 0.0028
        return series(_V3B_PS_IJN, pi + 0.298, s / 5.3 - 0.816) * 0.0088

    def pressure_hs(self, h, s):
        if s <= SC:
            return series(_P3A_HS_IJN, h / 2300 - 1.01, s / 4.4 - 0.75) * 99
        return 16.6 / series(_P3B_HS_IJN, h / 2800 - 0.681, s / 5.3 - 0.792)

    def specific_enthalpy_ps(self, p, s):
        return self.specific_enthalpy_rhot(1 / self.specific_volume_ps(p, s), self.temperature_ps(p, s))

    def specific_entropy_ph(self, p, h):
        return self.specific_entropy_rhot(1 / self.specific_volume_ph(p, h), self.temperature_ph(p, h))

    # Single phase; liquid-like below the critical entropy, vapour-like above
    def vapour_fraction_ph(self, p, h):
        return 0.0 if self.specific_entropy_ph(p, h) <= SC else 1.0

    def vapour_fraction_ps(self, p, s):
        return 0.0 if s <= SC else 1.0

    def vapour_fraction_hs(self, h, s):
        return 0.0 if s <= SC else 1.0


REGION3 = Region3()
