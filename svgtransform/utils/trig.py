"""Degree-based trigonometry. No engine imports.

The inverse functions return degrees rounded to ``precision`` decimal digits,
which keeps decomposed angles stable in the emitted text. Arguments outside
[-1, 1] for acos/asin yield NaN.
"""

from __future__ import annotations

import numpy as np


def rad(deg: float) -> float:
    return deg * np.pi / 180


def deg(rad: float) -> float:
    return rad * 180 / np.pi


def cos(deg: float) -> float:
    return float(np.cos(rad(deg)))


def sin(deg: float) -> float:
    return float(np.sin(rad(deg)))


def tan(deg: float) -> float:
    return float(np.tan(rad(deg)))


def acos(value: float, precision: int) -> float:
    return round(deg(float(np.arccos(value))), precision)


def asin(value: float, precision: int) -> float:
    return round(deg(float(np.arcsin(value))), precision)


def atan(value: float, precision: int) -> float:
    return round(deg(float(np.arctan(value))), precision)
