"""Ports: protocols consumed by the combinators."""

from __future__ import annotations

from .validator import IValidator

__all__ = ["IValidator"]
