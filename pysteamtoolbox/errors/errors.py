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

from pysteamtoolbox.classes import quantity, quantity_info


class OutOfRangeError(ValueError):
    """
    Raised when a state variable lies outside the IF97 validity envelope.

    Holds parallel tuples of the offending quantities, their values and the
    limits they violate. Joint violations (e.g. high temperature combined with
    high pressure) carry two entries, the first naming the primary quantity.
    """

    def __init__(self, quantities, values, limits):
        if isinstance(quantities, quantity):
            quantities, values, limits = (quantities,), (values,), (limits,)
        self.quantities = tuple(quantities)
        self.values = tuple(float(v) for v in values)
        self.limits = tuple(float(l) for l in limits)
        super().__init__(self._message())

    @property
    def quantity(self):
        return self.quantities[0]

    @property
    def value(self):
        return self.values[0]

    @property
    def limit(self):
        return self.limits[0]

    def _message(self):
        parts = []
        for i, (q, v, l) in enumerate(zip(self.quantities, self.values, self.limits)):
            name, unit = quantity_info[q]
            unit = '' if unit == '-' else f' {unit}'
            if i == 0:
                side = 'lower' if v > l else 'higher'
                parts.append(f"{name.capitalize()} value {v:g}{unit} should be {side} than {l:g}{unit}")
            else:
                side = 'higher' if v > l else 'lower'
                parts.append(f"when {name} is {side} than {l:g}{unit}")
        return ', '.join(parts)


class UnsupportedOperationError(NotImplementedError):
    """ Raised when a region has no formulation for the requested operation """

    def __init__(self, region, operation):
        self.region = region
        self.operation = operation
        super().__init__(f"{region}: {operation} is not supported")
