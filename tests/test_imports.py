"""Smoke tests to verify package imports work."""

def test_package_imports():
    """Test that all main classes can be imported."""
    from interstellar import OrbitalElements, CelestialBody, InterstellarObject, Trajectory
    assert OrbitalElements is not None
    assert CelestialBody is not None
    assert InterstellarObject is not None
    assert Trajectory is not None

def test_version_exists():
    """Test that version is defined."""
    import interstellar
    assert hasattr(interstellar, '__version__')
    assert interstellar.__version__ == "0.1.0"

def test_all_exports_resolve():
    """Test that every name in __all__ exists."""
    import interstellar
    for name in interstellar.__all__:
        assert hasattr(interstellar, name), name

def test_can_create_orbital_elements():
    """Test basic OrbitalElements creation."""
    from interstellar import OE, SUN_GM
    oe = OE(1.496e11, 0.0167, 0.0, 0.0, 0.0, 0.0, 2451545.0, SUN_GM)
    assert oe.a == 1.496e11

def test_can_create_catalog():
    """Test basic Catalog creation."""
    from interstellar import Catalog
    catalog = Catalog()
    assert 'earth' in catalog

def test_no_handlers_installed_on_import():
    """The package leaves logging configuration to applications."""
    import logging
    import interstellar  # noqa: F401
    assert logging.getLogger('interstellar').handlers == []
