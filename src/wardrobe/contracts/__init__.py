"""Contracts module - protocols for cross-layer communication."""

from .protocols import RenderSurfaceProtocol as RenderSurfaceProtocol

__all__ = [
    "RenderSurfaceProtocol",
]
