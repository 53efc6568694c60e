"""Rendering components."""

from .state_view import StateView

__all__ = ["StateView"]
