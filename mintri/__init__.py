"""Public package API for mintri, the minimum-area enclosing triangle toolkit.

This facade provides a flat import surface on top of the internal
implementation package ``mintri.core``.

Example
-------
    from mintri import min_enclosing_triangle
    triangle, area = min_enclosing_triangle([(0, 0), (2, 0), (1, 1.7320508)])

The deeper modules (``mintri.core.*``) are considered internal and may
change; rely on this layer for public symbols.
"""
from importlib import import_module as _imp
import logging as _logging

try:  # Python 3.8+ runtime version export
    from importlib.metadata import version as _pkg_version
    __version__ = _pkg_version("mintri")  # populated when installed
except Exception:  # pragma: no cover - editable / unknown state
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

_const = _imp('mintri.core.constants')
_errors = _imp('mintri.core.errors')
_config = _imp('mintri.core.config')
_geom = _imp('mintri.core.geometry')
_hull = _imp('mintri.core.hull')
_sweep = _imp('mintri.core.sweep')
_stats = _imp('mintri.core.stats')
_checks = _imp('mintri.core.checks')
_log = _imp('mintri.core.logging_utils')

# Main entry points
min_enclosing_triangle = _sweep.min_enclosing_triangle
find_min_enclosing_triangle = _sweep.find_min_enclosing_triangle
EnclosingTriangleResult = _sweep.EnclosingTriangleResult
EnclosingTriangleConfig = _config.EnclosingTriangleConfig

# Hull collaborator
convex_hull = _hull.convex_hull
as_points_array = _hull.as_points_array

# Errors
InvalidInputError = _errors.InvalidInputError
InternalInvariantError = _errors.InternalInvariantError

# Tolerances
EPSILON = _const.EPSILON

# Statistics and logging
SweepStats = _stats.SweepStats
format_stats_table = _stats.format_stats_table
configure_logging = _log.configure_logging

# Geometry and checks
triangle_area = _geom.triangle_area
contains_points = _checks.contains_points
count_midpoints_touching = _checks.count_midpoints_touching

# Namespace submodules for exploratory users
geometry = _geom
checks = _checks
constants = _const

__all__ = [
    '__version__',
    # entry points
    'min_enclosing_triangle','find_min_enclosing_triangle','EnclosingTriangleResult',
    'EnclosingTriangleConfig',
    # hull
    'convex_hull','as_points_array',
    # errors
    'InvalidInputError','InternalInvariantError',
    # tolerances
    'EPSILON',
    # stats / logging
    'SweepStats','format_stats_table','configure_logging',
    # geometry / checks
    'triangle_area','contains_points','count_midpoints_touching',
    # submodules / namespaces
    'geometry','checks','constants',
]
