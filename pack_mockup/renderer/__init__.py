"""Rendering subpackage.

Turns an immutable template + session snapshot into pixels. The renderer
focuses on:

* Per-sub-category background strategies (:mod:`.shapes`).
* Per-type element drawers and the selection highlight (:mod:`.elements`).
* A backend-neutral drawing contract with a Pillow raster implementation
  (:mod:`.surface`).

See :mod:`pack_mockup.renderer.mockup` for the orchestration entry point.
"""
