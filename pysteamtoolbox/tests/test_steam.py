#!/usr/bin/env python3
"""
Tests for the public property functions: vectorised evaluation, input pair
resolution, round trips between pairs and two-phase handling.
Run with: python3 -m pytest pysteamtoolbox/tests/ -v
Or standalone: python3 pysteamtoolbox/tests/test_steam.py
"""

import sys
import os
import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
import pysteamtoolbox
import pysteamtoolbox.steam as steam
from pysteamtoolbox.regions import REGION1, REGION2, REGION2_META, REGION3, REGION4, REGION5
from pysteamtoolbox.errors import OutOfRangeError, UnsupportedOperationError
from pysteamtoolbox.classes import quantity

RTOL = 1e-8
T_TOL = 0.03  # Backward temperature equations agree with the forward ones to 25 mK

# (p, T) states spread over regions 1, 2, 3 and 5
STATES = [(3, 300), (80, 500), (0.01, 400), (5, 700), (30, 900), (25, 650), (50, 700), (10, 1500)]

# =============================================================================
# Vectorised evaluation
# =============================================================================

def test_scalar_in_float_out():
    v = steam.specific_volume_pt(3, 300)
    assert isinstance(v, float), f"Expected float, got {type(v)}"
    assert abs(v - 0.100215168e-2) / 0.100215168e-2 < RTOL, f"v(3 MPa, 300 K) = {v}"

def test_list_in_array_out():
    h = steam.specific_enthalpy_pt([3, 80, 3], [300, 300, 500])
    assert isinstance(h, np.ndarray) and h.shape == (3,)
    for result, expected in zip(h, [0.115331273e3, 0.184142828e3, 0.975542239e3]):
        assert abs(result - expected) / expected < RTOL, f"h = {result}, expected {expected}"

def test_scalar_broadcasts_against_array():
    s = steam.specific_entropy_pt(30, np.array([700, 1500, 2000]))
    assert s.shape == (3,)
    assert abs(s[0] - 0.517540298e1) / 0.517540298e1 < RTOL
    assert abs(s[2] - 0.853640523e1) / 0.853640523e1 < RTOL

def test_array_error_propagates():
    try:
        steam.density_pt([1, 1], [300, 2300])
    except OutOfRangeError as e:
        assert e.value == 2300
    else:
        raise AssertionError("An out of range element should raise")

def test_out_of_range_temperature_message():
    try:
        steam.specific_enthalpy_pt(1, 2300)
    except OutOfRangeError as e:
        assert 'Temperature' in str(e) and '2273.15' in str(e), str(e)
    else:
        raise AssertionError("T = 2300 K should raise")

def test_dimensionless_quantity_message():
    e = OutOfRangeError(quantity.X, 1.2, 1)
    assert str(e) == "Vapour fraction value 1.2 should be lower than 1", str(e)
    e = OutOfRangeError((quantity.P, quantity.X), (30, 0.5), (22.064, 0))
    assert str(e) == "Pressure value 30 MPa should be lower than 22.064 MPa, when vapour fraction is higher than 0", str(e)

def test_package_exports():
    from pysteamtoolbox.shared_fns import MAX_ITER, bounded_root, apply_elementwise
    assert MAX_ITER > 0
    assert abs(bounded_root(lambda x: x * x - 2, 0, 2) - 2 ** 0.5) < 1e-9
    for name in pysteamtoolbox.submodules:
        module = getattr(pysteamtoolbox, name)
        assert module.__name__ == f'pysteamtoolbox.{name}', module.__name__

def test_region_lookup():
    assert steam.region_pt(3, 300) is REGION1
    assert steam.region_pt(0.1, 450, metastable=True) is REGION2_META
    assert steam.region_ph(1, 2000) is REGION4
    assert steam.region_ps(50, 4.5) is REGION3
    assert steam.region_hs(2800, 6.5) is REGION2
    assert steam.region_pt(0.5, 1500) is REGION5

# =============================================================================
# Forward properties by (p, T)
# =============================================================================

def test_density_is_reciprocal_volume():
    for p, T in STATES:
        rho = steam.density_pt(p, T)
        v = steam.specific_volume_pt(p, T)
        assert abs(rho * v - 1) < 1e-14, f"rho * v = {rho * v} at ({p}, {T})"

def test_region3_pt_uses_backward_density():
    rho = steam.density_pt(25, 650)
    assert abs(rho - REGION3.density_pt(25, 650)) < 1e-12
    assert abs(steam.isobaric_heat_capacity_pt(25, 650) - REGION3.specific_isobaric_heat_capacity_rhot(rho, 650)) < 1e-12

def test_metastable_flag():
    rho = steam.density_pt(0.1, 450, metastable=True)
    assert abs(rho * REGION2_META.specific_volume_pt(0.1, 450) - 1) < 1e-14
    assert steam.density_pt(0.1, 450) == 1 / REGION2.specific_volume_pt(0.1, 450)

def test_compression_factor_ideal_gas_limit():
    z = steam.compression_factor_pt(0.001, 800)
    assert abs(z - 1) < 1e-3, f"Z at 1 kPa and 800 K = {z}"

def test_gibbs_free_energy():
    p, T = 3, 500
    g = steam.specific_gibbs_free_energy_pt(p, T)
    expected = 0.975542239e3 - T * 0.258041912e1
    assert abs(g - expected) < 1e-5, f"g = {g}, expected {expected}"

def test_rhot_functions():
    assert abs(steam.pressure_rhot(500, 650) - 0.255837018e2) / 0.255837018e2 < RTOL
    assert abs(steam.specific_internal_energy_rhot(500, 650) - 0.181226279e4) / 0.181226279e4 < RTOL
    assert abs(steam.speed_of_sound_rhot(200, 650) - 0.383444594e3) / 0.383444594e3 < RTOL
    assert abs(steam.isochoric_heat_capacity_rhot(500, 750) - 0.271701677e1) / 0.271701677e1 < RTOL

def test_rhot_outside_region3_raises():
    # Compressed liquid at 300 K is region 1, below the region 3 temperature floor
    try:
        steam.specific_enthalpy_rhot(1000, 300)
    except OutOfRangeError as e:
        assert e.quantity.name == 'T' and e.limit == 623.15, e
    else:
        raise AssertionError("(1000 kg/m³, 300 K) is not a region 3 state")
    # Inside the two-phase dome at 640 K
    try:
        steam.pressure_rhot(300, 640)
    except OutOfRangeError as e:
        assert e.quantity.name == 'RHO', e
    else:
        raise AssertionError("(300 kg/m³, 640 K) is a two-phase density")
    # Low density steam at 700 K lies below the B23 line, in region 2
    try:
        steam.specific_entropy_rhot(50, 700)
    except OutOfRangeError as e:
        assert e.quantity.name == 'P', e
    else:
        raise AssertionError("(50 kg/m³, 700 K) is a region 2 state")
    try:
        steam.partial_derivative_rhot(1000, 300, 'T', 'p', 'h')
    except OutOfRangeError as e:
        assert e.quantity.name == 'T', e
    else:
        raise AssertionError("Derivatives by (rho, T) are limited to region 3")

def test_partial_derivative_vectorised():
    cp = steam.partial_derivative_pt([3, 80], 300, 'T', 'p', 'h')
    assert abs(cp[0] - 0.417301218e1) / 0.417301218e1 < RTOL
    assert abs(cp[1] - 0.401008987e1) / 0.401008987e1 < RTOL
    cv = steam.partial_derivative_rhot(500, 650, 'T', 'v', 'u')
    assert abs(cv - 0.319131787e1) / 0.319131787e1 < RTOL

# =============================================================================
# Round trips between input pairs
# =============================================================================

def test_temperature_ph_round_trip():
    for p, T in STATES:
        h = steam.specific_enthalpy_pt(p, T)
        result = steam.temperature_ph(p, h)
        assert abs(result - T) < T_TOL, f"T(p, h(p, T)) = {result} at ({p}, {T})"

def test_temperature_ps_round_trip():
    for p, T in STATES:
        s = steam.specific_entropy_pt(p, T)
        result = steam.temperature_ps(p, s)
        assert abs(result - T) < T_TOL, f"T(p, s(p, T)) = {result} at ({p}, {T})"

def test_density_ph_and_ps_round_trip():
    for p, T in STATES:
        rho = steam.density_pt(p, T)
        h = steam.specific_enthalpy_pt(p, T)
        s = steam.specific_entropy_pt(p, T)
        assert abs(steam.density_ph(p, h) / rho - 1) < 5e-4, f"rho(p, h) at ({p}, {T})"
        assert abs(steam.density_ps(p, s) / rho - 1) < 5e-4, f"rho(p, s) at ({p}, {T})"

def test_enthalpy_ps_and_entropy_ph():
    p, T = 5, 700
    h = steam.specific_enthalpy_pt(p, T)
    s = steam.specific_entropy_pt(p, T)
    assert abs(steam.specific_enthalpy_ps(p, s) - h) < 0.1
    assert abs(steam.specific_entropy_ph(p, h) - s) < 5e-4

def test_hs_round_trip():
    for p, T in [(20, 400), (50, 500), (1, 500), (10, 700), (30, 900), (50, 700)]:
        h = steam.specific_enthalpy_pt(p, T)
        s = steam.specific_entropy_pt(p, T)
        assert abs(steam.pressure_hs(h, s) / p - 1) < 1e-3, f"p(h, s) = {steam.pressure_hs(h, s)} at ({p}, {T})"
        assert abs(steam.temperature_hs(h, s) - T) < 0.1, f"T(h, s) = {steam.temperature_hs(h, s)} at ({p}, {T})"

# =============================================================================
# Two-phase states
# =============================================================================

def test_px_interpolates_between_endpoints():
    p = 1
    h_liq = steam.specific_enthalpy_saturated_liquid_p(p)
    h_vap = steam.specific_enthalpy_saturated_vapour_p(p)
    assert abs(steam.specific_enthalpy_px(p, 0.5) - (h_liq + h_vap) / 2) < 1e-9
    rho = steam.density_px(p, [0, 1])
    assert abs(rho[0] - steam.density_saturated_liquid_p(p)) < 1e-9
    assert abs(rho[1] - steam.density_saturated_vapour_p(p)) < 1e-9

def test_saturated_endpoints_by_temperature():
    T = 373.15
    assert abs(steam.saturation_pressure_t(T) - 0.101417978) < 1e-5
    v = steam.specific_volume_saturated_vapour_t(T)
    assert abs(steam.density_saturated_vapour_t(T) * v - 1) < 1e-14
    assert abs(steam.specific_enthalpy_tx(T, 1) - steam.specific_enthalpy_saturated_vapour_t(T)) < 1e-9
    assert steam.specific_entropy_saturated_liquid_t(T) < steam.specific_entropy_saturated_vapour_t(T)

def test_vapour_fraction_ph_round_trip():
    for x in [0, 0.25, 0.5, 0.75, 1]:
        h = steam.specific_enthalpy_px(1, x)
        assert abs(steam.vapour_fraction_ph(1, h) - x) < 1e-9, f"x(p, h) at x = {x}"
        s = steam.specific_entropy_px(1, x)
        assert abs(steam.vapour_fraction_ps(1, s) - x) < 1e-9, f"x(p, s) at x = {x}"

def test_single_phase_vapour_fraction():
    assert steam.vapour_fraction_ph(3, 500) == 0.0
    assert steam.vapour_fraction_ph(0.001, 3000) == 1.0
    assert steam.vapour_fraction_ps(50, 3.6) == 0.0
    assert steam.vapour_fraction_ps(50, 4.5) == 1.0

def test_two_phase_state_by_ph():
    p, h = 1, 2000
    x = steam.vapour_fraction_ph(p, h)
    T = steam.temperature_ph(p, h)
    assert abs(T - 0.453035632e3) < 1e-6
    v = steam.specific_volume_ph(p, h)
    expected = steam.specific_volume_px(p, x)
    assert abs(v - expected) / expected < 1e-12
    assert abs(steam.specific_enthalpy_px(p, x) - h) < 1e-9

def test_two_phase_gibbs_free_energy_is_constant():
    """Saturated liquid and vapour are in equilibrium: g' = g''"""
    p = 1
    g_liq = steam.specific_gibbs_free_energy_ph(p, steam.specific_enthalpy_px(p, 0.01))
    g_vap = steam.specific_gibbs_free_energy_ph(p, steam.specific_enthalpy_px(p, 0.99))
    assert abs(g_liq - g_vap) < 0.01, f"g' = {g_liq}, g'' = {g_vap}"

def test_two_phase_heat_capacity_unsupported():
    try:
        steam.isobaric_heat_capacity_ph(1, 2000)
    except UnsupportedOperationError as e:
        assert e.region == REGION4.name
    else:
        raise AssertionError("cp of a two-phase state should raise")

def test_two_phase_hs():
    # Solved temperatures sit within the backward equation's 25 mK of the tabulated values
    assert abs(steam.temperature_hs(1800, 5.3) - 3.468475498e2) < 0.025
    T = steam.saturation_temperature_hs(2400, 6)
    assert abs(T - 4.251373305e2) < 0.025, f"Tsat(2400, 6) = {T}"
    assert abs(steam.saturation_pressure_hs(2400, 6) - steam.saturation_pressure_t(T)) < 1e-12
    x = steam.vapour_fraction_hs(2400, 6)
    assert 0 < x < 1
    assert abs(steam.specific_enthalpy_tx(T, x) - 2400) < 1e-6
    assert abs(steam.specific_entropy_tx(T, x) - 6) < 1e-7

def test_saturation_hs_outside_two_phase_raises():
    try:
        steam.saturation_temperature_hs(3500, 6)
    except OutOfRangeError as e:
        assert e.quantity.name == 'H', e
    else:
        raise AssertionError("A superheated (h, s) state has no saturation temperature")

def test_two_phase_hs_at_low_entropy():
    """Wet states left of the backward equation's entropy range"""
    h = steam.specific_enthalpy_tx(400, 0.1)
    s = steam.specific_entropy_tx(400, 0.1)
    assert abs(steam.temperature_hs(h, s) - 400) < 1e-6
    assert abs(steam.vapour_fraction_hs(h, s) - 0.1) < 1e-6
    assert abs(steam.specific_enthalpy_hs(h, s) - h) < 1e-6

def test_vapour_fraction_ts():
    s = steam.specific_entropy_tx(450, 0.4)
    assert abs(steam.vapour_fraction_ts(450, s) - 0.4) < 1e-9

if __name__ == '__main__':
    print("=" * 70)
    print("Public Property Function Tests")
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
