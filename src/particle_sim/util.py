# MIT License (see LICENSE)
"""
Small numeric helpers shared across the package.

Array conversion glue and the color helper used by scenarios.
"""
from __future__ import annotations

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Used to accept tuple/list inputs for positions and velocities.
    """
    return np.array(x, dtype=np.float64)


def hsl_to_hex(hue: float, saturation: float, lightness: float) -> str:
    """
    Convert an HSL color (hue in degrees, s/l in [0, 1]) to '#rrggbb'.

    Colors are cosmetic only; this exists so scenario particles carry a
    color string any renderer can consume directly.
    """
    h = (hue % 360.0) / 360.0
    c = (1.0 - abs(2.0 * lightness - 1.0)) * saturation
    hp = h * 6.0
    x = c * (1.0 - abs(hp % 2.0 - 1.0))
    m = lightness - 0.5 * c

    sector = int(hp) % 6
    r, g, b = [
        (c, x, 0.0),
        (x, c, 0.0),
        (0.0, c, x),
        (0.0, x, c),
        (x, 0.0, c),
        (c, 0.0, x),
    ][sector]

    channels = np.clip(np.round((np.array([r, g, b]) + m) * 255.0), 0, 255)
    return "#{:02x}{:02x}{:02x}".format(*(int(v) for v in channels))
