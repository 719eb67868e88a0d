#!/usr/bin/env python3
"""
Tests for region selection from (p,T), (p,h), (p,s) and (h,s), including the
validity envelope errors.
Run with: python3 -m pytest pysteamtoolbox/tests/ -v
Or standalone: python3 pysteamtoolbox/tests/test_selector.py
"""

import sys
import os
import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
import pysteamtoolbox.selector as selector
from pysteamtoolbox.regions import (REGION1, REGION2, REGION2_META, REGION3, REGION4, REGION5,
                                    saturation_pressure, pressure_b23)
from pysteamtoolbox.classes import quantity
from pysteamtoolbox.errors import OutOfRangeError


def _expect_error(func, *args, **kwargs):
    try:
        func(*args, **kwargs)
    except OutOfRangeError as e:
        return e
    raise AssertionError(f"{func.__name__}{args} should raise OutOfRangeError")

# =============================================================================
# Selection from pressure and temperature
# =============================================================================

def test_select_pt():
    cases = [
        (3, 300, REGION1), (80, 300, REGION1), (3, 500, REGION1),
        (0.0035, 300, REGION2), (0.0035, 700, REGION2), (30, 700, REGION2),
        (25, 650, REGION3), (50, 630, REGION3), (80, 750, REGION3),
        (0.5, 1500, REGION5), (30, 2000, REGION5)]
    for p, T, expected in cases:
        result = selector.select_region_pt(p, T)
        assert result is expected, f"select_region_pt({p}, {T}) = {result.name}, expected {expected.name}"

def test_select_pt_metastable_vapour_branch():
    assert selector.select_region_pt(0.1, 450) is REGION2
    assert selector.select_region_pt(0.1, 450, metastable=True) is REGION2_META
    # The metastable formulation holds up to and including 10 MPa
    assert selector.select_region_pt(10, 600, metastable=True) is REGION2_META
    assert abs(REGION2_META.specific_volume_pt(10, 600) / REGION2.specific_volume_pt(10, 600) - 1) < 0.05
    # Above 10 MPa the stable vapour formulation is kept
    assert selector.select_region_pt(11, 600, metastable=True) is REGION2
    # Liquid states are unaffected
    assert selector.select_region_pt(3, 300, metastable=True) is REGION1

def test_select_pt_is_total_and_exclusive():
    """Every admissible (p,T) maps to exactly the region its defining inequalities give"""
    for p in np.logspace(-3, 2, 31):
        for T in np.linspace(273.15, 2273.15, 41):
            if T > 1073.15 and p > 50:
                e = _expect_error(selector.select_region_pt, p, T)
                assert e.quantities == (quantity.P, quantity.T)
                continue
            region = selector.select_region_pt(p, T)
            if T > 1073.15:
                expected = REGION5
            elif T > 623.15:
                expected = REGION3 if p > pressure_b23(T) else REGION2
            else:
                expected = REGION1 if p > saturation_pressure(T) else REGION2
            assert region is expected, f"({p}, {T}) gave {region.name}, expected {expected.name}"

def test_select_pt_temperature_above_region5():
    e = _expect_error(selector.select_region_pt, 1, 2300)
    assert e.quantity == quantity.T
    assert e.value == 2300 and e.limit == 2273.15
    assert str(e) == "Temperature value 2300 K should be lower than 2273.15 K", str(e)

def test_select_pt_joint_violation():
    e = _expect_error(selector.select_region_pt, 60, 1100)
    assert e.quantities == (quantity.P, quantity.T)
    assert e.values == (60, 1100) and e.limits == (50, 1073.15)
    assert "when temperature is higher than 1073.15 K" in str(e), str(e)

def test_select_pt_envelope():
    for p, T, q, limit in [(0, 300, quantity.P, 0), (101, 300, quantity.P, 100), (1, 270, quantity.T, 273.15)]:
        e = _expect_error(selector.select_region_pt, p, T)
        assert e.quantity == q and e.limit == limit, f"({p}, {T}) gave {e}"
    assert "higher than 273.15" in str(_expect_error(selector.select_region_pt, 1, 270))

# =============================================================================
# Selection from density and temperature
# =============================================================================

def test_select_rhot():
    for rho, T in [(500, 650), (200, 650), (500, 750), (600, 630)]:
        assert selector.select_region_rhot(rho, T) is REGION3, f"({rho}, {T}) should be region 3"

def test_select_rhot_errors():
    e = _expect_error(selector.select_region_rhot, 1000, 300)
    assert e.quantity == quantity.T and e.limit == 623.15
    e = _expect_error(selector.select_region_rhot, 0, 700)
    assert e.quantity == quantity.RHO
    e = _expect_error(selector.select_region_rhot, 50, 700)
    assert e.quantity == quantity.P, f"Below the B23 line should raise on pressure, got {e}"
    e = _expect_error(selector.select_region_rhot, 1100, 700)
    assert e.quantity == quantity.P and e.limit == 100
    # Two-phase densities below the critical temperature, limited by the nearer saturated density
    e = _expect_error(selector.select_region_rhot, 400, 640)
    assert e.quantity == quantity.RHO and e.limit > 400
    e = _expect_error(selector.select_region_rhot, 250, 640)
    assert e.quantity == quantity.RHO and e.limit < 250

# =============================================================================
# Selection from pressure and enthalpy / entropy
# =============================================================================

def test_select_ph():
    cases = [
        (3, 500, REGION1), (80, 1500, REGION1),
        (0.001, 3000, REGION2), (5, 3500, REGION2), (60, 2700, REGION2),
        (1, 2000, REGION4), (20, 2000, REGION4),
        (20, 1700, REGION3), (50, 2000, REGION3), (100, 2700, REGION3),
        (30, 5167.23514, REGION5)]
    for p, h, expected in cases:
        result = selector.select_region_ph(p, h)
        assert result is expected, f"select_region_ph({p}, {h}) = {result.name}, expected {expected.name}"

def test_select_ph_matches_pt_selection():
    for p, T in [(3, 300), (30, 700), (25, 650), (0.5, 1500), (10, 1000), (90, 700)]:
        region = selector.select_region_pt(p, T)
        h = region.specific_enthalpy_pt(p, T)
        assert selector.select_region_ph(p, h) is region, f"({p}, {T}) is {region.name}"

def test_select_ph_errors():
    e = _expect_error(selector.select_region_ph, 1, -10)
    assert e.quantity == quantity.H
    e = _expect_error(selector.select_region_ph, 60, 4500)
    assert e.quantities == (quantity.P, quantity.H)
    e = _expect_error(selector.select_region_ph, 1e-4, 2500)
    assert e.quantity == quantity.P

def test_select_ps():
    cases = [
        (3, 0.5, REGION1), (80, 3, REGION1),
        (0.1, 7.5, REGION2), (8, 6, REGION2), (80, 5.75, REGION2),
        (5, 5, REGION4), (20, 4.4, REGION4),
        (20, 3.8, REGION3), (50, 4.5, REGION3), (100, 5.0, REGION3),
        (0.5, 9.65408875, REGION5)]
    for p, s, expected in cases:
        result = selector.select_region_ps(p, s)
        assert result is expected, f"select_region_ps({p}, {s}) = {result.name}, expected {expected.name}"

def test_select_ps_errors():
    e = _expect_error(selector.select_region_ps, 60, 9)
    assert e.quantities == (quantity.P, quantity.S)
    e = _expect_error(selector.select_region_ps, 0.5, 12)
    assert e.quantity == quantity.S

# =============================================================================
# Selection from enthalpy and entropy
# =============================================================================

def test_select_hs():
    cases = [
        (1500, 3.4, REGION1), (350, 1, REGION1), (300, 1, REGION4),
        (2800, 6.5, REGION2), (4100, 9.5, REGION2), (2800, 5.8, REGION2),
        (1700, 3.8, REGION3), (2000, 4.2, REGION3), (2600, 5.1, REGION3),
        (1800, 5.3, REGION4), (2400, 6, REGION4), (1000, 3, REGION4)]
    for h, s, expected in cases:
        result = selector.select_region_hs(h, s)
        assert result is expected, f"select_region_hs({h}, {s}) = {result.name}, expected {expected.name}"

def test_select_hs_either_side_of_b23():
    """p_B23(700 K) = 30.48 MPa"""
    for p, T in [(30, 700), (35, 700), (20, 700)]:
        region = selector.select_region_pt(p, T)
        h = region.specific_enthalpy_pt(p, T)
        s = region.specific_entropy_pt(p, T)
        assert selector.select_region_hs(h, s) is region, f"({p}, {T}) is {region.name}"

def test_select_hs_errors():
    e = _expect_error(selector.select_region_hs, -10, 1)
    assert e.quantity == quantity.H
    e = _expect_error(selector.select_region_hs, 5000, 6)
    assert e.quantity == quantity.H, f"Enthalpy above the 100 MPa isobar should raise, got {e}"
    e = _expect_error(selector.select_region_hs, 4000, 13)
    assert e.quantity == quantity.S

if __name__ == '__main__':
    print("=" * 70)
    print("Region Selection Tests")
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
