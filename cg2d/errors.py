# cg2d/errors.py
"""Винятки ядра оболонки. Усі наслідують ValueError."""


class HullError(ValueError):
    """Базова помилка побудови оболонки."""


class InsufficientInputError(HullError):
    """Менше трьох точок: оболонка ще не визначена."""


class DegenerateInputError(HullError):
    """Перші три точки колінеарні — орієнтацію оболонки не задати."""


class InvalidGeometryError(HullError):
    """Нескінченні/NaN координати або NaN від предиката."""
