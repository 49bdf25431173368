from __future__ import annotations
import logging
from typing import Iterable, List, Union

from .errors import DegenerateInputError, HullError, InsufficientInputError
from .geom import Pt, PointLike, as_pt, signed_area2, to_pts
from .predicates import Orient2D, get_predicate, orient2d_robust, sign

log = logging.getLogger(__name__)

COLLINEAR_POLICIES = ("drop", "keep")


class IncrementalHull2D:
    """
    Інкрементальна 2D опукла оболонка над змінним предикатом орієнтації.

    Вхід: точки по одній (insert) або пачкою (extend), порядок важливий.
    Вихід: hull() — вершини у додатній орієнтації предиката
    (проти годинникової стрілки на екрані, де вісь y дивиться вниз).

    predicate — функція orient(r, q, p) -> float; фіксується при створенні,
    бо оболонка тримається лише на узгодженості знаків одного предиката.
    collinear — що робити з вершиною, яка після вставки стала колінеарною
    з сусідами: "drop" (прибрати) або "keep" (залишити, як у простому скані).
    """

    def __init__(self, predicate: Union[str, Orient2D] = orient2d_robust, collinear: str = "drop"):
        if collinear not in COLLINEAR_POLICIES:
            raise ValueError(f"collinear must be one of {COLLINEAR_POLICIES}, got {collinear!r}")
        self._pred: Orient2D = get_predicate(predicate)
        self.collinear = collinear
        self.points: List[Pt] = []   # усі оброблені точки у порядку вставки
        self._hull: List[Pt] = []    # циклічна послідовність вершин, змінюється на місці

    # ---------------- Публічний API ----------------
    @property
    def predicate(self) -> Orient2D:
        return self._pred

    @property
    def initialized(self) -> bool:
        return bool(self._hull)

    @property
    def processed(self) -> int:
        """Скільки вхідних точок уже спожито."""
        return len(self.points)

    def __len__(self) -> int:
        return len(self._hull)

    def __repr__(self) -> str:
        return f"IncrementalHull2D(vertices={len(self._hull)}, processed={self.processed})"

    def hull(self) -> List[Pt]:
        """Знімок поточних вершин (копія)."""
        return list(self._hull)

    current_hull = hull

    def initialize(self, *seed: PointLike) -> None:
        """
        Стартовий трикутник із рівно трьох точок p0, p1, p2.
        Менше трьох — InsufficientInputError, більше — TypeError.
        Один запит orient(p0, p1, p2):
          <0 — міняємо p0 і p1 місцями, щоб орієнтація була додатною;
           0 — колінеарна трійка, оболонку не задати.
        """
        if len(seed) < 3:
            raise InsufficientInputError(f"Need 3 seed points, got {len(seed)}")
        if len(seed) > 3:
            raise TypeError(f"initialize() takes 3 seed points, got {len(seed)}")
        if self._hull:
            raise HullError("Hull is already initialized")
        a, b, c = (as_pt(p) for p in seed)
        s = self._sign(a, b, c)
        if s == 0:
            raise DegenerateInputError(f"Seed points are collinear: {a}, {b}, {c}")
        self.points.extend((a, b, c))
        self._hull[:] = [a, b, c] if s > 0 else [b, a, c]
        log.debug("seed hull %s (swapped=%s)", self._hull, s < 0)

    def insert(self, r: PointLike) -> bool:
        """
        Додати точку. Повертає True, якщо оболонка змінилась,
        False — якщо r всередині або на межі (no-op).
        """
        r = as_pt(r)
        if not self._hull:
            raise InsufficientInputError("Hull is not initialized: need 3 seed points first")

        start, stop = self._find_visible_run(r)
        if start < 0:
            self.points.append(r)
            log.debug("insert %s: inside, hull unchanged", r)
            return False

        new = self._hull[:]
        if start <= stop:
            # без обгортання: вершини start..stop-1 -> r
            removed = new[start:stop]
            new[start:stop] = [r]
            at = start
        else:
            # з обгортанням через 0: хвіст start.. і голова ..stop-1
            removed = new[start:] + new[:stop]
            del new[start:]
            new.append(r)
            del new[:stop]
            at = len(new) - 1

        dropped: List[Pt] = []
        if self.collinear == "drop":
            dropped = self._drop_collinear(new, at)

        self._hull[:] = new
        self.points.append(r)
        log.debug("insert %s: start=%d stop=%d removed=%s dropped=%s", r, start, stop, removed, dropped)
        return True

    def extend(self, points: Iterable[PointLike]) -> int:
        """
        Обробити точки по порядку. Якщо оболонки ще немає — перші три
        стають стартовим трикутником. Повертає кількість вставок, що змінили оболонку.
        """
        pts = to_pts(points)
        if not self._hull:
            if len(pts) < 3:
                raise InsufficientInputError(f"Need at least 3 points, got {len(pts)}")
            self.initialize(*pts[:3])
            pts = pts[3:]
        changed = 0
        for p in pts:
            if self.insert(p):
                changed += 1
        return changed

    # ---------------- Внутрішні методи ----------------
    def _sign(self, r: Pt, q: Pt, p: Pt) -> int:
        return sign(self._pred(r, q, p))

    def _inner(self, r: Pt, tail: Pt, head: Pt) -> bool:
        """r на ребрі tail->head або з внутрішнього боку від нього."""
        return self._sign(r, tail, head) >= 0

    def _find_visible_run(self, r: Pt):
        """
        Один циклічний прохід по ребрах (ребро j: вершина j-1 -> j).
        start — перша вершина, де ребра «повертаються» до r (inner -> видиме),
        stop  — вершина, де видимий ланцюг закінчується (видиме -> inner).
        (-1, -1), якщо видимих ребер немає.
        """
        hull = self._hull
        n = len(hull)
        start = stop = -1
        prev = self._inner(r, hull[n - 2], hull[n - 1])
        k = n - 1
        for j in range(n):
            cur = self._inner(r, hull[k], hull[j])
            if prev and not cur:
                start = j
                if stop >= 0:
                    break
            if cur and not prev:
                stop = k
                if start >= 0:
                    break
            prev = cur
            k = j
        return start, stop

    def _drop_collinear(self, hull: List[Pt], i: int) -> List[Pt]:
        """Прибрати сусідів вершини hull[i], що стали колінеарними (не менше 3 вершин)."""
        dropped: List[Pt] = []
        # після r
        while len(hull) > 3:
            n = len(hull)
            a, b = (i + 1) % n, (i + 2) % n
            if self._sign(hull[i], hull[a], hull[b]) != 0:
                break
            dropped.append(hull.pop(a))
            if a < i:
                i -= 1
        # перед r
        while len(hull) > 3:
            n = len(hull)
            a, b = (i - 1) % n, (i - 2) % n
            if self._sign(hull[b], hull[a], hull[i]) != 0:
                break
            dropped.append(hull.pop(a))
            if a < i:
                i -= 1
        return dropped

    # ---------------- Діагностика ----------------
    def validate(self, pred: Union[str, Orient2D] = orient2d_robust) -> dict:
        """
        Перевірка коректності (за замовчуванням точним предикатом):
          - bad_turns: вершини з від'ємним поворотом (оболонка не опукла / не та орієнтація);
          - collinear_turns: вершини з нульовим поворотом (зайві колінеарні вершини);
          - outside_points: індекси оброблених точок, що лежать зовні хоча б одного ребра.
        Порожні списки = все ок.
        """
        pred = get_predicate(pred)
        hull = self._hull
        n = len(hull)

        bad_turns: List[int] = []
        collinear_turns: List[int] = []
        for i in range(n):
            s = sign(pred(hull[i - 1], hull[i], hull[(i + 1) % n]))
            if s < 0:
                bad_turns.append(i)
            elif s == 0:
                collinear_turns.append(i)

        outside: List[int] = []
        for pi, p in enumerate(self.points):
            for i in range(n):
                if sign(pred(hull[i - 1], hull[i], p)) < 0:
                    outside.append(pi)
                    break

        return {
            "vertices": n,
            "points": len(self.points),
            "signed_area2": signed_area2(hull) if n else 0.0,
            "bad_turns": bad_turns,
            "collinear_turns": collinear_turns,
            "outside_points": outside,
        }


def convex_hull(
    points: Iterable[PointLike],
    predicate: Union[str, Orient2D] = orient2d_robust,
    collinear: str = "drop",
) -> List[Pt]:
    """Оболонка всієї послідовності, точки обробляються в заданому порядку."""
    builder = IncrementalHull2D(predicate, collinear=collinear)
    builder.extend(points)
    return builder.hull()
