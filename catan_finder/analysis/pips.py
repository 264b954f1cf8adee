"""Table des pips (poids de probabilité d'un numéro de dés)."""

from __future__ import annotations

from typing import Dict, Optional

from catan_finder.engine.rules import RED_NUMBERS

PIP_VALUES: Dict[int, int] = {
    2: 1,
    3: 2,
    4: 3,
    5: 4,
    6: 5,
    8: 5,
    9: 4,
    10: 3,
    11: 2,
    12: 1,
}


def pip_value(number: Optional[int]) -> int:
    """Nombre de pips d'un numéro; 0 pour None, 7 ou toute valeur inconnue."""

    if number is None:
        return 0
    return PIP_VALUES.get(number, 0)


def is_red(number: Optional[int]) -> bool:
    return number in RED_NUMBERS


__all__ = ["PIP_VALUES", "pip_value", "is_red"]
