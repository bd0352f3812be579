"""Помилки ядра. Вироджена грань - не помилка (make_face повертає None)."""


class HullfixError(Exception):
    """Базовий клас помилок hullfix."""


class PreconditionError(HullfixError, ValueError):
    """Порушено контракт виклику (напр. напрям поза {-1,0,1}^3)."""


class DegenerateInputError(HullfixError, ValueError):
    """Точки не дають об'ємного симплекса (усі колінеарні/копланарні)."""


class TopologyError(HullfixError):
    """Зіпсована топологія граней: продовжувати означає зібрати хибну оболонку."""


class DuplicateFaceError(TopologyError):
    """Дві грані мають усі три вершини спільні."""
