"""Polyaffine - 2D affine transforms for polygons and surface normals.

Polyaffine applies translate, scale, rotate, shear, reflect and general affine
transforms to small polygons, and shows why surface normals must be
transformed with the inverse-transpose of the matrix used for tangents.

Example:
    $ polyaffine --normal-demo

This prints the tangent/normal comparison followed by every sample polygon.
Use --gui for a window or --html to export an animated SVG page.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
