from __future__ import annotations
from dataclasses import dataclass
from math import isfinite
from typing import Iterable, List, Sequence, Union

from .errors import InvalidGeometryError


@dataclass(frozen=True)
class Pt:
    x: float
    y: float

    def __post_init__(self):
        if not (isfinite(self.x) and isfinite(self.y)):
            raise InvalidGeometryError(f"Non-finite coordinates: ({self.x}, {self.y})")

    def __iter__(self):
        yield self.x; yield self.y


PointLike = Union[Pt, Sequence[float]]


def as_pt(obj: PointLike) -> Pt:
    """Pt або будь-яка пара чисел -> Pt."""
    if isinstance(obj, Pt):
        return obj
    try:
        x, y = obj
    except (TypeError, ValueError) as e:
        raise InvalidGeometryError(f"Expected a 2D point, got {obj!r}") from e
    return Pt(float(x), float(y))


def cross(a: Pt, b: Pt) -> float:
    return a.x*b.y - a.y*b.x


def signed_area2(polygon: Sequence[Pt]) -> float:
    """
    Подвоєна орієнтована площа замкненого циклу вершин.
    Знак — у конвенції orient2d (вісь y донизу), тобто > 0 для оболонки,
    яку будує IncrementalHull2D.
    """
    n = len(polygon)
    s = 0.0
    for i in range(n):
        s -= cross(polygon[i], polygon[(i + 1) % n])
    return s


def parse_points(text: str) -> List[Pt]:
    """
    Парсить точки з багаторядкового тексту.
    Кожен рядок: x y або x, y. Порожні рядки та '#'-коментарі пропускаються.
    Дублікати зберігаються — порядок вводу важливий.
    """
    points: List[Pt] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.replace(",", " ").split()
        if len(parts) != 2:
            raise ValueError(f"Line {lineno}: expected 2 numbers, got {len(parts)}")
        try:
            x, y = map(float, parts)
        except ValueError:
            raise ValueError(f"Line {lineno}: cannot parse numbers '{line}'")
        points.append(Pt(x, y))
    return points


def to_pts(points: Iterable[PointLike]) -> List[Pt]:
    return [as_pt(p) for p in points]
