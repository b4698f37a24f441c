# linmath/math/_format.py
"""
Форматирование компонент для __repr__: repr(float), без потери точности.
"""

from typing import Iterable


def fmt_components(name: str, values: Iterable[float]) -> str:
    return f"{name}({', '.join(repr(float(v)) for v in values)})"
