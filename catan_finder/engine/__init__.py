"""Moteur du plateau: règles, cases et édition avec pools."""

from . import board, rules

__all__ = ["board", "rules"]
