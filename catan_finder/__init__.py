"""Catan Board Finder: éditeur/randomiseur de plateau et moteur de scoring."""

__version__ = "0.1.0"
