"""Text rendering of octonions.

Reals are written with the shortest decimal that round-trips, switching to
scientific notation (``1e+06``) when the decimal exponent is below -4 or at
least 6. Infinities print as ``+Inf``/``-Inf`` and NaN as ``NaN``.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np


def format_real(value: float) -> str:
    """Format a real the way the leading coordinate is printed."""
    if np.isnan(value):
        return "NaN"
    if np.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    scientific = np.format_float_scientific(value, unique=True, trim="-", exp_digits=2)
    exponent = int(scientific.split("e")[1])
    if exponent < -4 or exponent >= 6:
        return scientific
    return np.format_float_positional(value, unique=True, trim="-")


def format_coefficient(value: float) -> str:
    """Format a non-leading coordinate with an explicit sign."""
    if np.signbit(value):
        return format_real(value)
    if np.isposinf(value):
        return "+Inf"
    return "+" + format_real(value)


def format_octonion(coordinates: Sequence[float], symbols: Sequence[str]) -> str:
    """Render eight coordinates as "(c0+c1<s1>...+c7<s7>)"."""
    terms = [format_real(coordinates[0])]
    terms.extend(
        format_coefficient(value) + symbol
        for value, symbol in zip(coordinates[1:], symbols[1:], strict=True)
    )
    return "(" + "".join(terms) + ")"
