#!/usr/bin/env python3
"""
Tests for partial derivatives composed from the Gibbs and Helmholtz formulations.
Run with: python3 -m pytest pysteamtoolbox/tests/ -v
Or standalone: python3 pysteamtoolbox/tests/test_derivatives.py
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
import pysteamtoolbox.derivatives as derivatives
from pysteamtoolbox.regions import REGION1, REGION2, REGION3, REGION5
from pysteamtoolbox.classes import quantity
from pysteamtoolbox.errors import OutOfRangeError

RTOL = 1e-9

# =============================================================================
# (p, T) formulations
# =============================================================================

def test_dh_dt_at_constant_p_is_cp():
    for region, p, T in [(REGION1, 3, 300), (REGION2, 30, 700), (REGION5, 30, 2000)]:
        result = derivatives.partial_derivative_pt(p, T, 'T', 'p', 'h')
        expected = region.specific_isobaric_heat_capacity_pt(p, T)
        assert abs(result - expected) / expected < RTOL, f"(dh/dT)_p at ({p}, {T}) = {result}, cp = {expected}"

def test_ds_dt_at_constant_p():
    result = derivatives.partial_derivative_pt(3, 500, quantity.T, quantity.P, quantity.S)
    expected = 0.465580682e1 / 500
    assert abs(result - expected) / expected < 1e-8, f"(ds/dT)_p = {result}, expected {expected}"

def test_dv_dp_at_constant_t():
    p, T = 0.0035, 700
    result = derivatives.partial_derivative_pt(p, T, 'p', 'T', 'v')
    expected = -REGION2.specific_volume_pt(p, T) * REGION2.isothermal_compressibility_pt(p, T)
    assert abs(result - expected) / abs(expected) < RTOL, f"(dv/dp)_T = {result}, expected {expected}"

def test_dh_dp_at_constant_s_is_v():
    """dh = T ds + v dp, with v in m3/kg scaled to kJ/kg per MPa"""
    for region, p, T in [(REGION1, 80, 300), (REGION2, 0.0035, 300)]:
        result = derivatives.partial_derivative_pt(p, T, 'p', 's', 'h')
        expected = 1e3 * region.specific_volume_pt(p, T)
        assert abs(result - expected) / expected < RTOL, f"(dh/dp)_s at ({p}, {T}) = {result}, expected {expected}"

def test_dg_dp_at_constant_t_is_v():
    result = derivatives.partial_derivative_pt(3, 300, 'p', 'T', 'g')
    assert abs(result - 1e3 * 0.100215168e-2) / 1.00215168 < 1e-8, f"(dg/dp)_T = {result}"

def test_reciprocal_derivatives():
    """(dz/dx)_y * (dx/dz)_y = 1"""
    p, T = 30, 700
    a = derivatives.partial_derivative_pt(p, T, 'u', 'v', 's')
    b = derivatives.partial_derivative_pt(p, T, 's', 'v', 'u')
    assert abs(a * b - 1) < 1e-9, f"Reciprocal product = {a * b}"

def test_triple_product_rule():
    """(dp/dT)_v (dT/dv)_p (dv/dp)_T = -1"""
    p, T = 3, 500
    product = (derivatives.partial_derivative_pt(p, T, 'T', 'v', 'p')
               * derivatives.partial_derivative_pt(p, T, 'v', 'p', 'T')
               * derivatives.partial_derivative_pt(p, T, 'p', 'T', 'v'))
    assert abs(product + 1) < 1e-9, f"Triple product = {product}"

# =============================================================================
# (rho, T) formulation
# =============================================================================

def test_rhot_dh_dt_at_constant_p_is_cp():
    for rho, T, expected in [(500, 650, 0.138935717e2), (200, 650, 0.446579342e2), (500, 750, 0.634165359e1)]:
        result = derivatives.partial_derivative_rhot(rho, T, 'T', 'p', 'h')
        assert abs(result - expected) / expected < 1e-8, f"(dh/dT)_p at ({rho}, {T}) = {result}, expected {expected}"

def test_rhot_du_dt_at_constant_v_is_cv():
    result = derivatives.partial_derivative_rhot(500, 650, 'T', 'v', 'u')
    assert abs(result - 0.319131787e1) / 0.319131787e1 < 1e-8, f"(du/dT)_v = {result}"

def test_rhot_dp_dt_at_constant_rho():
    rho, T = 200, 650
    result = derivatives.partial_derivative_rhot(rho, T, 'T', 'rho', 'p')
    expected = REGION3.pressure_rhot(rho, T) * REGION3.relative_pressure_coefficient_rhot(rho, T)
    assert abs(result - expected) / expected < RTOL, f"(dp/dT)_rho = {result}, expected {expected}"

def test_region3_pt_routes_through_density():
    p, T = 25, 650
    result = derivatives.partial_derivative_pt(p, T, 'T', 'p', 'h')
    expected = REGION3.specific_isobaric_heat_capacity_pt(p, T)
    assert abs(result - expected) / expected < RTOL, f"(dh/dT)_p at ({p}, {T}) = {result}, expected {expected}"

def test_region3_dv_dp_matches_compressibility():
    rho, T = 500, 750
    result = derivatives.partial_derivative_rhot(rho, T, 'p', 'T', 'v')
    expected = -REGION3.isothermal_compressibility_rhot(rho, T) / rho
    assert abs(result - expected) / abs(expected) < RTOL, f"(dv/dp)_T = {result}, expected {expected}"

def test_rhot_outside_region3_raises():
    for rho, T, q in [(1000, 300, quantity.T), (300, 640, quantity.RHO), (50, 700, quantity.P)]:
        try:
            derivatives.partial_derivative_rhot(rho, T, 'T', 'p', 'h')
        except OutOfRangeError as e:
            assert e.quantity == q, f"({rho}, {T}) raised on {e.quantity}, expected {q}"
        else:
            raise AssertionError(f"({rho}, {T}) is not a single-phase region 3 state")

def test_region3_pt_near_saturation():
    # Backward densities close to the saturation line still evaluate
    p, T = 20, 638
    result = derivatives.partial_derivative_pt(p, T, 'T', 'p', 'h')
    expected = REGION3.specific_isobaric_heat_capacity_pt(p, T)
    assert abs(result - expected) / expected < RTOL, f"(dh/dT)_p at ({p}, {T}) = {result}, expected {expected}"

# =============================================================================
# Degenerate and unsupported requests
# =============================================================================

def test_degenerate_derivative_raises():
    for x, y in [('p', 'p'), ('T', 'T')]:
        try:
            derivatives.partial_derivative_pt(3, 300, x, y, 'h')
        except ValueError as e:
            assert 'undefined' in str(e), str(e)
        else:
            raise AssertionError(f"(dh/d{x}) at constant {y} should raise")
    try:
        derivatives.partial_derivative_rhot(500, 650, 'v', 'rho', 'h')
    except ValueError:
        pass
    else:
        raise AssertionError("(dh/dv) at constant rho should raise")

def test_unsupported_quantity_raises():
    for symbol in ['cp', 'foo']:
        try:
            derivatives.partial_derivative_pt(3, 300, 'T', 'p', symbol)
        except ValueError as e:
            assert symbol in str(e), str(e)
        else:
            raise AssertionError(f"Quantity {symbol!r} should be rejected")

if __name__ == '__main__':
    print("=" * 70)
    print("Partial Derivative Tests")
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
