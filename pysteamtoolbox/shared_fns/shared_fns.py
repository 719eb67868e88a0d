#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
    pySteamToolbox - IAPWS-IF97 Water and Steam Property Utilities
              Copyright (C) 2022, Mark Burgoyne

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    The GNU General Public License can be found in the LICENSE directory,
    and at  <https://www.gnu.org/licenses/>.

          Contact author at mark.w.burgoyne@gmail.com
"""

import logging
import numpy as np
import numpy.typing as npt
from scipy.optimize import brentq
from typing import Tuple, Callable

logger = logging.getLogger(__name__)

MAX_ITER = 100  # Iteration cap for bracketed root solves

def convert_to_numpy(input_data) -> Tuple[np.ndarray, bool]:
    # Convert input data to a float numpy array ensuring it is always sizeable
    # Returns the array and whether the caller passed something list-like
    is_list = isinstance(input_data, (list, tuple, np.ndarray)) and np.ndim(input_data) > 0
    return np.atleast_1d(np.asarray(input_data, dtype=float)), is_list

def process_output(output_data: npt.ArrayLike, is_list: bool):
    # Return a single float for scalar inputs, otherwise the numpy array
    if is_list:
        return np.asarray(output_data)
    return float(np.asarray(output_data).ravel()[0])

def apply_elementwise(func: Callable, *inputs, **kwargs):
    """ Evaluates a scalar state function over broadcast inputs.

        Each input may be a float, list or numpy array. Scalars return a float,
        anything list-like returns a numpy array of the broadcast shape.
    """
    arrays, is_list = [], False
    for x in inputs:
        arr, flag = convert_to_numpy(x)
        arrays.append(arr)
        is_list = is_list or flag
    broadcast = np.broadcast_arrays(*arrays)
    out = np.empty(broadcast[0].shape)
    for idx in np.ndindex(out.shape):
        out[idx] = func(*(float(b[idx]) for b in broadcast), **kwargs)
    return process_output(out, is_list)

def bounded_root(f: Callable[[float], float], xmin: float, xmax: float, xtol: float = 1e-10) -> float:
    """ Brent root solve of f on [xmin, xmax] with a fixed iteration cap.
        Non-convergence propagates as scipy's RuntimeError.
    """
    root, info = brentq(f, xmin, xmax, xtol=xtol, maxiter=MAX_ITER, full_output=True)
    logger.debug("brentq converged to %.10g in %d iterations", root, info.iterations)
    return root
