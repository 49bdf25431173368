# cg2d/predicates.py
from __future__ import annotations
import logging
from fractions import Fraction
from math import inf, isfinite, isnan, ldexp
from typing import Callable, Dict, Union

import numpy as np

from .errors import InvalidGeometryError
from .geom import Pt

log = logging.getLogger(__name__)

Orient2D = Callable[[Pt, Pt, Pt], float]

EPSILON = ldexp(1.0, -53)                         # половина ulp(1.0)
CCW_ERRBOUND_A = (3.0 + 16.0 * EPSILON) * EPSILON  # оцінка похибки Шевчука, стадія A
_MIN_SAFE = ldexp(1.0, -960)                       # нижче — ризик underflow у добутках
_TINY = ldexp(1.0, -1074)                          # найменше субнормальне число


def orient2d_naive(r: Pt, q: Pt, p: Pt) -> float:
    """Прямий float-детермінант. Поблизу колінеарності знак може бути хибним."""
    prx = p.x - r.x
    pry = p.y - r.y
    qrx = q.x - r.x
    qry = q.y - r.y
    return prx * qry - pry * qrx


def _orient2d_exact(r: Pt, q: Pt, p: Pt) -> Fraction:
    rx, ry = Fraction(r.x), Fraction(r.y)
    return (Fraction(p.x) - rx) * (Fraction(q.y) - ry) - (Fraction(p.y) - ry) * (Fraction(q.x) - rx)


def _signed_float(v: Fraction) -> float:
    """Fraction -> float, що гарантовано зберігає знак."""
    if v == 0:
        return 0.0
    try:
        f = float(v)
    except OverflowError:
        return inf if v > 0 else -inf
    if f == 0.0:
        return _TINY if v > 0 else -_TINY
    return f


def orient2d_robust(r: Pt, q: Pt, p: Pt) -> float:
    """
    Той самий детермінант, що й orient2d_naive, але знак завжди точний.

    Спершу float-обчислення з апріорною межею похибки (фільтр Шевчука);
    якщо межа не дозволяє ручатися за знак — точний перерахунок у Fraction.
    """
    prx = p.x - r.x
    pry = p.y - r.y
    qrx = q.x - r.x
    qry = q.y - r.y
    detleft = prx * qry
    detright = pry * qrx
    det = detleft - detright

    detsum = abs(detleft) + abs(detright)
    if isfinite(det) and detsum >= _MIN_SAFE:
        # + абсолютна похибка можливого субнормального добутку
        errbound = CCW_ERRBOUND_A * detsum + 2.0 * _TINY
        if det > errbound or -det > errbound:
            return det

    # фільтр не впорався (майже колінеарність, overflow або underflow)
    exact = _orient2d_exact(r, q, p)
    log.debug("orient2d_robust: exact fallback for %s %s %s (float det=%r)", r, q, p, det)
    return _signed_float(exact)


def sign(value: float) -> int:
    if isnan(value):
        raise InvalidGeometryError("Orientation predicate returned NaN")
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


PREDICATES: Dict[str, Orient2D] = {
    "naive": orient2d_naive,
    "robust": orient2d_robust,
}


def get_predicate(pred: Union[str, Orient2D]) -> Orient2D:
    if callable(pred):
        return pred
    try:
        return PREDICATES[pred]
    except KeyError:
        raise ValueError(f"Unknown predicate: {pred!r} (expected one of {sorted(PREDICATES)})")


# ---------- карта знаків (демо «жах») ----------
def sign_grid(
    pred: Union[str, Orient2D],
    q: Pt = Pt(12.0, 12.0),
    p: Pt = Pt(24.0, 24.0),
    origin: Pt = Pt(0.5, 0.5),
    nx: int = 256,
    ny: int = 256,
    step: float = EPSILON,
) -> np.ndarray:
    """
    Знаки pred(r, q, p) для r на решітці origin + (i*step, j*step).

    Повертає int8-масив форми (nx, ny), індекс [i, j].
    Для точного предиката межа між -1 і +1 — пряма; для наївного —
    «шум» зі смуг і хибних нулів.
    """
    pred = get_predicate(pred)
    out = np.zeros((nx, ny), dtype=np.int8)
    for i in range(nx):
        rx = origin.x + i * step
        for j in range(ny):
            r = Pt(rx, origin.y + j * step)
            out[i, j] = sign(pred(r, q, p))
    return out
