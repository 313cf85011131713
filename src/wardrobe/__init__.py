"""Parametric wardrobe configurator.

Keeps a row of fixed-width wardrobe modules consistent with global
dimensions, per-module overrides and the chosen material, and tells a render
surface which modules to create and dispose after every change.
"""

__version__ = "0.1.0"
