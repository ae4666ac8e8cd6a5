"""Number rendering helpers for the compact profile text."""

from __future__ import annotations

import numpy as np

# Magnitudes below this switch to exponent notation ("1e-7").
EXPONENT_THRESHOLD: float = 1e-6


def format_decimal(value: float) -> str:
    """Render ``value`` in its shortest round-trip decimal form.

    Trailing zeros and a dangling decimal point are dropped, so ``1.0``
    renders as ``"1"`` and ``0.30`` as ``"0.3"``.  Non-zero magnitudes below
    ``EXPONENT_THRESHOLD`` use exponent form, e.g. ``5e-324``.
    """
    # + 0.0 folds -0.0 into 0.0
    value = float(value) + 0.0
    if value != 0.0 and abs(value) < EXPONENT_THRESHOLD:
        return np.format_float_scientific(value, unique=True, trim="-", exp_digits=1)
    return np.format_float_positional(value, unique=True, trim="-")
