"""Estimators built on external solvers."""

from __future__ import annotations

from .svr import SVR, resolve_gamma

__all__ = [
    "SVR",
    "resolve_gamma",
]
