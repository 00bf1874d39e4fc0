"""Smoke test to ensure top-level package import works and exposes the
flat API layer (`mintri/__init__.py`).
"""

def test_import_mintri_smoke():
    import mintri  # noqa: F401
    assert hasattr(mintri, 'min_enclosing_triangle')
    assert hasattr(mintri, 'convex_hull')
    assert isinstance(mintri.__version__, str)
    triangle, area = mintri.min_enclosing_triangle([(0, 0), (1, 0), (1, 1), (0, 1)])
    assert triangle.shape == (3, 2)
    assert abs(area - 2.0) < 1e-9
