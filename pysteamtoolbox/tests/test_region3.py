#!/usr/bin/env python3
"""
Validation tests for region 3: the Helmholtz free energy equation, the
(p,h), (p,s) and (h,s) backward equations and the 26 v(p,T) subregions.
Run with: python3 -m pytest pysteamtoolbox/tests/ -v
Or standalone: python3 pysteamtoolbox/tests/test_region3.py
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
from pysteamtoolbox.regions import REGION3, subregion_pt, enthalpy_3ab
from pysteamtoolbox.errors import OutOfRangeError

RTOL = 1e-8

# Published v(p,T) check values, two per subregion: (subregion, p MPa, T K, v m3/kg)
V_PT_CASES = [
    ('a', 50, 630, 1.470853100e-3), ('a', 80, 670, 1.503831359e-3),
    ('b', 50, 710, 2.204728587e-3), ('b', 80, 750, 1.973692940e-3),
    ('c', 20, 630, 1.761696406e-3), ('c', 30, 650, 1.819560617e-3),
    ('d', 26, 656, 2.245587720e-3), ('d', 30, 670, 2.506897702e-3),
    ('e', 26, 661, 2.970225962e-3), ('e', 30, 675, 3.004627086e-3),
    ('f', 26, 671, 5.019029401e-3), ('f', 30, 690, 4.656470142e-3),
    ('g', 23.6, 649, 2.163198378e-3), ('g', 24, 650, 2.166044161e-3),
    ('h', 23.6, 652, 2.651081407e-3), ('h', 24, 654, 2.967802335e-3),
    ('i', 23.6, 653, 3.273916816e-3), ('i', 24, 655, 3.550329864e-3),
    ('j', 23.5, 655, 4.545001142e-3), ('j', 24, 660, 5.100267704e-3),
    ('k', 23, 660, 6.109525997e-3), ('k', 24, 670, 6.427325645e-3),
    ('l', 22.6, 646, 2.117860851e-3), ('l', 23, 646, 2.062374674e-3),
    ('m', 22.6, 648.6, 2.533063780e-3), ('m', 22.8, 649.3, 2.572971781e-3),
    ('n', 22.6, 649.0, 2.923432711e-3), ('n', 22.8, 649.7, 2.913311494e-3),
    ('o', 22.6, 649.1, 3.131208996e-3), ('o', 22.8, 649.9, 3.221160278e-3),
    ('p', 22.6, 649.4, 3.715596186e-3), ('p', 22.8, 650.2, 3.664754790e-3),
    ('q', 21.1, 640, 1.970999272e-3), ('q', 21.8, 643, 2.043919161e-3),
    ('r', 21.1, 644, 5.251009921e-3), ('r', 21.8, 648, 5.256844741e-3),
    ('s', 19.1, 635, 1.932829079e-3), ('s', 20, 638, 1.985387227e-3),
    ('t', 17, 626, 8.483262001e-3), ('t', 20, 640, 6.227528101e-3),
    ('u', 21.5, 644.6, 2.268366647e-3), ('u', 22, 646.1, 2.296350553e-3),
    ('v', 22.5, 648.6, 2.832373260e-3), ('v', 22.3, 647.9, 2.811424405e-3),
    ('w', 22.15, 647.5, 3.694032281e-3), ('w', 22.3, 648.1, 3.622226305e-3),
    ('x', 22.11, 648, 4.528072649e-3), ('x', 22.3, 649, 4.556905799e-3),
    ('y', 22, 646.84, 2.698354719e-3), ('y', 22.064, 647.05, 2.717655648e-3),
    ('z', 22, 646.89, 3.798732962e-3), ('z', 22.064, 647.15, 3.701940010e-3),
]


def _check(method, cases, rtol=RTOL):
    func = getattr(REGION3, method)
    for a, b, expected in cases:
        result = func(a, b)
        assert abs(result - expected) / abs(expected) < rtol, \
            f"{method}({a}, {b}) = {result}, expected {expected}"

# =============================================================================
# Helmholtz free energy equation (IF97 table 33)
# =============================================================================

def test_pressure_rhot():
    _check('pressure_rhot', [(500, 650, 0.255837018e2), (200, 650, 0.222930643e2), (500, 750, 0.783095639e2)])

def test_specific_enthalpy_rhot():
    _check('specific_enthalpy_rhot', [(500, 650, 0.186343019e4), (200, 650, 0.237512401e4), (500, 750, 0.225868845e4)])

def test_specific_internal_energy_rhot():
    _check('specific_internal_energy_rhot', [(500, 650, 0.181226279e4), (200, 650, 0.226365868e4), (500, 750, 0.210206932e4)])

def test_specific_entropy_rhot():
    _check('specific_entropy_rhot', [(500, 650, 0.405427273e1), (200, 650, 0.485438792e1), (500, 750, 0.446971906e1)])

def test_heat_capacities_rhot():
    _check('specific_isobaric_heat_capacity_rhot',
           [(500, 650, 0.138935717e2), (200, 650, 0.446579342e2), (500, 750, 0.634165359e1)])
    _check('specific_isochoric_heat_capacity_rhot',
           [(500, 650, 0.319131787e1), (200, 650, 0.404118076e1), (500, 750, 0.271701677e1)])

def test_speed_of_sound_rhot():
    _check('speed_of_sound_rhot', [(500, 650, 0.502005554e3), (200, 650, 0.383444594e3), (500, 750, 0.760696041e3)])

def test_expansion_and_compressibility_rhot():
    _check('isobaric_cubic_expansion_coefficient_rhot',
           [(500, 650, 0.168653107e-1), (200, 650, 0.685312229e-1), (500, 750, 0.441515098e-2)], rtol=1e-7)
    _check('isothermal_compressibility_rhot',
           [(500, 650, 0.345506956e-1), (200, 650, 0.375798565), (500, 750, 0.806710817e-2)], rtol=1e-7)

def test_free_energy_identities():
    """g = f + pv and f = u - Ts"""
    rho, T = 500, 650
    p = REGION3.pressure_rhot(rho, T)
    f = REGION3.specific_helmholtz_free_energy_rhot(rho, T)
    g = REGION3.specific_gibbs_free_energy_rhot(rho, T)
    u = REGION3.specific_internal_energy_rhot(rho, T)
    s = REGION3.specific_entropy_rhot(rho, T)
    assert abs(g - (f + p / rho * 1e3)) < 1e-8, f"g = {g}, f + pv = {f + p / rho * 1e3}"
    assert abs(f - (u - T * s)) < 1e-8, f"f = {f}, u - Ts = {u - T * s}"

def test_pressure_coefficients():
    """p * beta_p * kappa_T = rho and alpha_v = alpha_p * p * kappa_T"""
    rho, T = 200, 650
    p = REGION3.pressure_rhot(rho, T)
    alpha_p = REGION3.relative_pressure_coefficient_rhot(rho, T)
    beta_p = REGION3.isothermal_stress_coefficient_rhot(rho, T)
    kappa_t = REGION3.isothermal_compressibility_rhot(rho, T)
    alpha_v = REGION3.isobaric_cubic_expansion_coefficient_rhot(rho, T)
    assert abs(beta_p * kappa_t * p - rho) / rho < 1e-9, f"p * beta_p * kappa_T = {beta_p * kappa_t * p}"
    assert abs(alpha_v - alpha_p * p * kappa_t) / alpha_v < 1e-9, f"alpha_v = {alpha_v}"

# =============================================================================
# Backward v(p,T) (SR5 tables 5 and 13)
# =============================================================================

def test_subregion_selection():
    for name, p, T, _ in V_PT_CASES:
        result = subregion_pt(p, T)
        assert result == name, f"subregion_pt({p}, {T}) = {result}, expected {name}"

def test_specific_volume_pt():
    for name, p, T, expected in V_PT_CASES:
        result = REGION3.specific_volume_pt(p, T)
        assert abs(result - expected) / expected < RTOL, \
            f"v({p}, {T}) in subregion {name} = {result}, expected {expected}"

def test_density_pt_is_reciprocal():
    v = REGION3.specific_volume_pt(50, 630)
    assert abs(REGION3.density_pt(50, 630) * v - 1) < 1e-14

def test_named_phase_overrides_temperature_side():
    """On the saturation line the caller picks the side; at 20 MPa that is 3s liquid or 3t vapour"""
    assert subregion_pt(20, 638, phase='liquid') == 's'
    assert subregion_pt(20, 638, phase='vapour') == 't'

def test_subregion_below_region3_pressure():
    try:
        subregion_pt(10, 650)
    except OutOfRangeError as e:
        assert e.value == 10, f"Offending value should be the pressure, got {e.value}"
    else:
        raise AssertionError("subregion_pt should reject pressures below psat(623.15 K)")

def test_forward_pt_properties_use_backward_density():
    rho = REGION3.density_pt(30, 690)
    h = REGION3.specific_enthalpy_pt(30, 690)
    assert abs(h - REGION3.specific_enthalpy_rhot(rho, 690)) < 1e-12
    assert abs(REGION3.pressure_rhot(rho, 690) - 30) / 30 < 1e-4, "v(p,T) should reproduce p within the backward accuracy"

# =============================================================================
# Backward (p,h), (p,s) and (h,s) equations (SR3 and SR4)
# =============================================================================

def test_enthalpy_3ab():
    assert abs(enthalpy_3ab(25) - 2.095936454e3) < 1e-6

def test_temperature_ph():
    _check('temperature_ph', [
        (20, 1700, 6.293083892e2), (50, 2000, 6.905718338e2), (100, 2100, 7.336163014e2),
        (20, 2500, 6.418418053e2), (50, 2400, 7.351848618e2), (100, 2700, 8.420460876e2)])

def test_specific_volume_ph():
    _check('specific_volume_ph', [
        (20, 1700, 1.749903962e-3), (50, 2000, 1.908139035e-3), (100, 2100, 1.676229776e-3),
        (20, 2500, 6.670547043e-3), (50, 2400, 2.801244590e-3), (100, 2700, 2.404234998e-3)])

def test_temperature_ps():
    _check('temperature_ps', [
        (20, 3.8, 6.282959869e2), (50, 3.6, 6.297158726e2), (100, 4.0, 7.056880237e2),
        (20, 5.0, 6.401176443e2), (50, 4.5, 7.163687517e2), (100, 5.0, 8.474332825e2)])

def test_specific_volume_ps():
    _check('specific_volume_ps', [
        (20, 3.8, 1.733791463e-3), (50, 3.6, 1.469680170e-3), (100, 4.0, 1.555893131e-3),
        (20, 5.0, 6.262101987e-3), (50, 4.5, 2.332634294e-3), (100, 5.0, 2.449610757e-3)])

def test_pressure_hs():
    _check('pressure_hs', [
        (1700, 3.8, 2.555703246e1), (2000, 4.2, 4.540873468e1), (2100, 4.3, 6.078123340e1),
        (2400, 4.7, 6.363924887e1), (2600, 5.1, 3.434999263e1), (2700, 5.0, 8.839043281e1)])

def test_temperature_hs_through_pressure():
    T = REGION3.temperature_hs(2000, 4.2)
    assert abs(T - REGION3.temperature_ph(4.540873468e1, 2000)) < 1e-5, f"T(h,s) = {T}"

def test_vapour_fraction_by_entropy():
    assert REGION3.vapour_fraction_ps(50, 3.6) == 0.0
    assert REGION3.vapour_fraction_ps(50, 4.5) == 1.0
    assert REGION3.vapour_fraction_hs(2600, 5.1) == 1.0

if __name__ == '__main__':
    print("=" * 70)
    print("Region 3 Validation Tests")
    print("=" * 70)

    tests = [v for k, v in globals().items() if k.startswith('test_')]
    passed = 0
    failed = 0
    errors = []

    for test in tests:
        try:
            test()
            passed += 1
            print(f"  PASS: {test.__name__}")
        except Exception as e:
            failed += 1
            errors.append((test.__name__, str(e)))
            print(f"  FAIL: {test.__name__}: {e}")

    print(f"\n{'=' * 70}")
    print(f"Results: {passed} passed, {failed} failed out of {passed + failed}")

    print("=" * 70)
    sys.exit(1 if failed > 0 else 0)
