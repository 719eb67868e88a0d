#!/usr/bin/env python3
"""
Validation tests for the Gibbs free energy regions 1, 2, 2-metastable and 5,
against the IAPWS-IF97 verification tables.
Run with: python3 -m pytest pysteamtoolbox/tests/ -v
Or standalone: python3 pysteamtoolbox/tests/test_regions.py
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
from pysteamtoolbox.regions import REGION1, REGION2, REGION2_META, REGION5
from pysteamtoolbox.errors import UnsupportedOperationError

RTOL = 1e-8  # Relative tolerance against 9 significant digit table values


def _check(region, method, cases, rtol=RTOL):
    func = getattr(region, method)
    for args, expected in cases:
        result = func(*args)
        assert abs(result - expected) / abs(expected) < rtol, \
            f"{region.name} {method}{args} = {result}, expected {expected}"

# =============================================================================
# Region 1 (IF97 table 5)
# =============================================================================

def test_region1_specific_volume():
    _check(REGION1, 'specific_volume_pt', [
        ((3, 300), 0.100215168e-2),
        ((80, 300), 0.971180894e-3),
        ((3, 500), 0.120241800e-2)])

def test_region1_specific_enthalpy():
    _check(REGION1, 'specific_enthalpy_pt', [
        ((3, 300), 0.115331273e3),
        ((80, 300), 0.184142828e3),
        ((3, 500), 0.975542239e3)])

def test_region1_internal_energy_entropy():
    _check(REGION1, 'specific_internal_energy_pt', [
        ((3, 300), 0.112324818e3),
        ((80, 300), 0.106448356e3),
        ((3, 500), 0.971934985e3)])
    _check(REGION1, 'specific_entropy_pt', [
        ((3, 300), 0.392294792),
        ((80, 300), 0.368563852),
        ((3, 500), 0.258041912e1)])

def test_region1_heat_capacity_speed_of_sound():
    _check(REGION1, 'specific_isobaric_heat_capacity_pt', [
        ((3, 300), 0.417301218e1),
        ((80, 300), 0.401008987e1),
        ((3, 500), 0.465580682e1)])
    _check(REGION1, 'speed_of_sound_pt', [
        ((3, 300), 0.150773921e4),
        ((80, 300), 0.163469054e4),
        ((3, 500), 0.124071337e4)])

def test_region1_backward_tph():
    """IF97 table 7"""
    _check(REGION1, 'temperature_ph', [
        ((3, 500), 0.391798509e3),
        ((80, 500), 0.378108626e3),
        ((80, 1500), 0.611041229e3)])

def test_region1_backward_tps():
    """IF97 table 9"""
    _check(REGION1, 'temperature_ps', [
        ((3, 0.5), 0.307842258e3),
        ((80, 0.5), 0.309979785e3),
        ((80, 3), 0.565899909e3)])

def test_region1_backward_phs():
    """SR2 table 3"""
    _check(REGION1, 'pressure_hs', [
        ((0.001, 0), 9.800980612e-4),
        ((90, 0), 9.192954727e1),
        ((1500, 3.4), 5.868294423e1)])

def test_region1_round_trip_tph():
    """Backward T(p,h) should reproduce the forward temperature within the IF97 accuracy of 25 mK"""
    for p, T in [(1, 300), (10, 400), (50, 500), (100, 600)]:
        h = REGION1.specific_enthalpy_pt(p, T)
        assert abs(REGION1.temperature_ph(p, h) - T) < 0.025, f"T(p,h) round trip failed at ({p}, {T})"

# =============================================================================
# Region 2 (IF97 table 15)
# =============================================================================

def test_region2_specific_volume():
    _check(REGION2, 'specific_volume_pt', [
        ((0.0035, 300), 0.394913866e2),
        ((0.0035, 700), 0.923015898e2),
        ((30, 700), 0.542946619e-2)])

def test_region2_enthalpy_entropy():
    _check(REGION2, 'specific_enthalpy_pt', [
        ((0.0035, 300), 0.254991145e4),
        ((0.0035, 700), 0.333568375e4),
        ((30, 700), 0.263149474e4)])
    _check(REGION2, 'specific_entropy_pt', [
        ((0.0035, 300), 0.852238967e1),
        ((0.0035, 700), 0.101749996e2),
        ((30, 700), 0.517540298e1)])

def test_region2_internal_energy():
    _check(REGION2, 'specific_internal_energy_pt', [
        ((0.0035, 300), 0.241169160e4),
        ((30, 700), 0.246861076e4)], rtol=1e-7)

def test_region2_heat_capacity_speed_of_sound():
    _check(REGION2, 'specific_isobaric_heat_capacity_pt', [
        ((0.0035, 300), 0.191300162e1),
        ((0.0035, 700), 0.208141274e1),
        ((30, 700), 0.103505092e2)])
    _check(REGION2, 'speed_of_sound_pt', [
        ((0.0035, 300), 0.427920172e3),
        ((0.0035, 700), 0.644289068e3),
        ((30, 700), 0.480386523e3)])

def test_region2_backward_tph():
    """IF97 table 24"""
    _check(REGION2, 'temperature_ph', [
        ((0.001, 3000), 0.534433241e3),
        ((3, 3000), 0.575373370e3),
        ((3, 4000), 0.101077577e4),
        ((5, 3500), 0.801299102e3),
        ((5, 4000), 0.101531583e4),
        ((25, 3500), 0.875279054e3),
        ((40, 2700), 0.743056411e3),
        ((60, 2700), 0.791137067e3),
        ((60, 3200), 0.882756860e3)])

def test_region2_backward_tps():
    """IF97 table 29"""
    _check(REGION2, 'temperature_ps', [
        ((0.1, 7.5), 0.399517097e3),
        ((0.1, 8), 0.514127081e3),
        ((2.5, 8), 0.103984917e4),
        ((8, 6), 0.600484040e3),
        ((8, 7.5), 0.106495556e4),
        ((90, 6), 0.103801126e4),
        ((20, 5.75), 0.697992849e3),
        ((80, 5.25), 0.854011484e3),
        ((80, 5.75), 0.949017998e3)])

def test_region2_backward_phs():
    """SR2 table 9"""
    _check(REGION2, 'pressure_hs', [
        ((2800, 6.5), 1.371012767),
        ((2800, 9.5), 1.879743844e-3),
        ((4100, 9.5), 1.024788997e-1),
        ((2800, 6), 4.793911442),
        ((3600, 6), 8.395519209e1),
        ((3600, 7), 7.527161441),
        ((2800, 5.1), 9.439202060e1),
        ((2800, 5.8), 8.414574124),
        ((3400, 5.8), 8.376903879e1)])

def test_region2_round_trip_tps():
    for p, T in [(0.01, 400), (1, 600), (10, 700), (50, 900)]:
        s = REGION2.specific_entropy_pt(p, T)
        assert abs(REGION2.temperature_ps(p, s) - T) < 0.025, f"T(p,s) round trip failed at ({p}, {T})"

# =============================================================================
# Region 2 metastable vapour (IF97 table 18)
# =============================================================================

def test_region2_meta_properties():
    _check(REGION2_META, 'specific_volume_pt', [
        ((1, 450), 0.192516540),
        ((1, 440), 0.186212297),
        ((1.5, 450), 0.121685206)])
    _check(REGION2_META, 'specific_enthalpy_pt', [
        ((1, 450), 0.276881115e4),
        ((1, 440), 0.274015123e4),
        ((1.5, 450), 0.272134539e4)])
    _check(REGION2_META, 'specific_entropy_pt', [
        ((1, 450), 0.656660377e1),
        ((1, 440), 0.650218759e1),
        ((1.5, 450), 0.629170440e1)])
    _check(REGION2_META, 'speed_of_sound_pt', [
        ((1, 450), 0.498408101e3),
        ((1, 440), 0.489363295e3),
        ((1.5, 450), 0.481941819e3)])

def test_region2_meta_internal_energy():
    _check(REGION2_META, 'specific_internal_energy_pt', [
        ((1, 450), 0.257629461e4),
        ((1, 440), 0.255393894e4),
        ((1.5, 450), 0.253881758e4)])

def test_region2_meta_heat_capacity():
    _check(REGION2_META, 'specific_isobaric_heat_capacity_pt', [
        ((1, 450), 0.276349265e1),
        ((1, 440), 0.298166443e1),
        ((1.5, 450), 0.362795578e1)])

def test_region2_meta_has_no_inverse():
    for method, args in [('temperature_ph', (1, 2700)), ('temperature_ps', (1, 6.5)),
                         ('pressure_hs', (2700, 6.5)), ('temperature_hs', (2700, 6.5))]:
        try:
            getattr(REGION2_META, method)(*args)
        except UnsupportedOperationError as e:
            assert method in str(e), f"Error message should name {method}: {e}"
        else:
            raise AssertionError(f"{method} should not be available in the metastable region")

# =============================================================================
# Region 5 (IF97 table 42)
# =============================================================================

def test_region5_properties():
    _check(REGION5, 'specific_volume_pt', [
        ((0.5, 1500), 0.138455090e1),
        ((30, 1500), 0.230761299e-1),
        ((30, 2000), 0.311385219e-1)])
    _check(REGION5, 'specific_enthalpy_pt', [
        ((0.5, 1500), 0.521976855e4),
        ((30, 1500), 0.516723514e4),
        ((30, 2000), 0.657122604e4)])
    _check(REGION5, 'specific_entropy_pt', [
        ((0.5, 1500), 0.965408875e1),
        ((30, 1500), 0.772970133e1),
        ((30, 2000), 0.853640523e1)])
    _check(REGION5, 'specific_isobaric_heat_capacity_pt', [
        ((0.5, 1500), 0.261609445e1),
        ((30, 1500), 0.272724317e1),
        ((30, 2000), 0.288569882e1)])
    _check(REGION5, 'speed_of_sound_pt', [
        ((0.5, 1500), 0.917068690e3),
        ((30, 1500), 0.928548002e3),
        ((30, 2000), 0.106736948e4)])

def test_region5_internal_energy():
    _check(REGION5, 'specific_internal_energy_pt', [
        ((0.5, 1500), 0.452749310e4),
        ((30, 1500), 0.447495124e4),
        ((30, 2000), 0.563707038e4)])

def test_region5_identities():
    """u = h - pv and g = h - Ts, with pv scaled from MPa m3/kg to kJ/kg"""
    p, T = 30, 2000
    h = REGION5.specific_enthalpy_pt(p, T)
    u = REGION5.specific_internal_energy_pt(p, T)
    v = REGION5.specific_volume_pt(p, T)
    g = REGION5.specific_gibbs_free_energy_pt(p, T)
    s = REGION5.specific_entropy_pt(p, T)
    assert abs(u - (h - p * v * 1e3)) < 1e-9, f"u = {u}, h - pv = {h - p * v * 1e3}"
    assert abs(g - (h - T * s)) < 1e-9, f"g = {g}, h - Ts = {h - T * s}"
    assert REGION5.specific_isochoric_heat_capacity_pt(p, T) < REGION5.specific_isobaric_heat_capacity_pt(p, T)

def test_region5_inverse_by_root_finding():
    for p, T in [(0.5, 1500), (30, 1500), (30, 2000), (10, 1100)]:
        h = REGION5.specific_enthalpy_pt(p, T)
        s = REGION5.specific_entropy_pt(p, T)
        assert abs(REGION5.temperature_ph(p, h) - T) < 1e-6, f"T(p,h) in region 5 failed at ({p}, {T})"
        assert abs(REGION5.temperature_ps(p, s) - T) < 1e-6, f"T(p,s) in region 5 failed at ({p}, {T})"

def test_region5_has_no_hs_equations():
    try:
        REGION5.pressure_hs(5000, 8)
    except UnsupportedOperationError:
        pass
    else:
        raise AssertionError("Region 5 should not provide p(h,s)")

def test_isentropic_exponent_ideal_gas_limit():
    """At low pressure steam approaches an ideal gas with kappa = cp/cv"""
    kappa = REGION2.isentropic_exponent_pt(0.001, 800)
    cp = REGION2.specific_isobaric_heat_capacity_pt(0.001, 800)
    cv = REGION2.specific_isochoric_heat_capacity_pt(0.001, 800)
    assert abs(kappa - cp / cv) < 1e-3, f"kappa = {kappa}, cp/cv = {cp / cv}"

if __name__ == '__main__':
    print("=" * 70)
    print("Region 1, 2, 2-metastable and 5 Validation Tests")
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
