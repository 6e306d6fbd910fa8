"""
Test suite for the body catalog and shipped defaults.

Tests cover:
- Default Solar System and interstellar object tables
- Catalog lookup, resolution order and misses
- PositionQuery validation and Catalog.query results
"""

import logging
import pytest
import numpy as np
from interstellar import (
    Catalog, BodyNotFoundError, PositionQuery, PositionResult,
    CelestialBodyType, InterstellarObject, Vector3, AU_TO_METERS,
)
from interstellar import defaults

J2000 = 2451545.0


@pytest.fixture(scope="module")
def catalog():
    return Catalog()


class TestDefaults:
    """Test the shipped body tables."""

    def test_solar_system_order_and_size(self):
        bodies = defaults.solar_system_bodies()
        assert len(bodies) == 19
        assert [b.id for b in bodies][:3] == ['sun', 'mercury', 'venus']

    def test_sun_is_central(self):
        sun = defaults.sun()
        assert sun.is_central
        assert sun.body_type == CelestialBodyType.STAR
        assert sun.visual.is_luminous

    def test_planets_are_elliptic(self):
        for planet in defaults.planets() + defaults.dwarf_planets():
            assert planet.orbital_elements.is_elliptic
            assert planet.orbital_elements.semi_major_axis > 0

    def test_comet_types(self):
        comets = defaults.comets()
        assert len(comets) == 5
        assert all(c.body_type == CelestialBodyType.COMET for c in comets)

    def test_interstellar_objects_are_hyperbolic(self):
        objects = defaults.interstellar_objects()
        assert [o.id for o in objects] == ['oumuamua', 'borisov', 'atlas']
        for obj in objects:
            assert obj.orbital_elements.is_hyperbolic
            assert obj.orbital_elements.semi_major_axis < 0

    def test_fresh_instances(self):
        assert defaults.planets()[0] is not defaults.planets()[0]

    def test_heliocentric_orbit_units(self):
        orbit = defaults.heliocentric_orbit(1.0, 0.0, 0.0, 0.0, 0.0, 0.0, J2000)
        assert orbit.semi_major_axis == AU_TO_METERS
        assert np.isclose(orbit.position(J2000).magnitude(), AU_TO_METERS)


class TestCatalogLookup:
    """Test catalog storage and lookup."""

    def test_size(self, catalog):
        assert len(catalog) == 22
        assert len(catalog.bodies()) == 19
        assert len(catalog.interstellar_objects()) == 3

    def test_get(self, catalog):
        assert catalog.get('earth').name == 'Earth'
        assert catalog.get('borisov') is None
        assert catalog.get_interstellar('borisov').designation == '2I/2019 Q4'
        assert catalog.get_interstellar('earth') is None

    def test_contains(self, catalog):
        assert 'mars' in catalog
        assert 'oumuamua' in catalog
        assert 'vulcan' not in catalog

    def test_ids_and_iteration(self, catalog):
        ids = catalog.ids()
        assert ids[0] == 'sun'
        assert ids[-1] == 'atlas'
        assert [entity.id for entity in catalog] == ids

    def test_resolve_every_shipped_id(self, catalog):
        for identifier in catalog.ids():
            assert catalog.resolve(identifier).id == identifier

    def test_resolve_prefers_regular_bodies(self):
        borisov = InterstellarObject.create_borisov()
        shadow = defaults.comets()[0]
        catalog = Catalog.from_bodies([shadow], [borisov])
        assert catalog.resolve('halley') is shadow
        assert catalog.resolve('2i-borisov') is borisov

    def test_resolve_miss(self, catalog, caplog):
        caplog.set_level(logging.WARNING, logger="interstellar.catalog")
        with pytest.raises(BodyNotFoundError) as excinfo:
            catalog.resolve('vulcan')
        assert excinfo.value.body_id == 'vulcan'
        assert "not found" in str(excinfo.value)
        assert "vulcan" in caplog.text

    def test_miss_is_key_error(self, catalog):
        with pytest.raises(KeyError):
            catalog.position_at('vulcan', J2000)

    def test_duplicate_ids_raise(self):
        with pytest.raises(ValueError, match="Duplicate"):
            Catalog.from_bodies([defaults.sun(), defaults.sun()])

    def test_from_bodies_is_independent(self):
        catalog = Catalog.from_bodies(defaults.planets())
        assert len(catalog) == 8
        assert 'sun' not in catalog

    def test_repr(self, catalog):
        assert repr(catalog) == "Catalog(bodies=19, interstellar_objects=3)"


class TestCatalogEvaluation:
    """Test position queries."""

    def test_sun_at_origin(self, catalog):
        assert catalog.position_at('sun', J2000) == Vector3.ZERO

    def test_earth_distance(self, catalog):
        r = catalog.position_at('earth', J2000).magnitude() / AU_TO_METERS
        assert 0.98 < r < 1.02

    def test_state_at(self, catalog):
        r, v = catalog.state_at('jupiter', J2000 + 100.0)
        assert 4.9 < r.magnitude() / AU_TO_METERS < 5.5
        assert 12000 < v.magnitude() < 14000

    def test_every_body_finite(self, catalog):
        for identifier in catalog.ids():
            r, v = catalog.state_at(identifier, J2000 + 7000.0)
            assert np.all(np.isfinite(r.to_numpy()))
            assert np.all(np.isfinite(v.to_numpy()))

    def test_query(self, catalog, caplog):
        caplog.set_level(logging.INFO, logger="interstellar.catalog")
        result = catalog.query(PositionQuery('mars', J2000))
        assert isinstance(result, PositionResult)
        assert result.body_id == 'mars'
        assert result.julian_date == J2000
        assert result.distance == result.position.magnitude()
        assert result.speed > 0
        assert "mars" in caplog.text

    def test_query_unknown(self, catalog):
        with pytest.raises(BodyNotFoundError):
            catalog.query(PositionQuery('vulcan', J2000))


class TestPositionQuery:
    """Test query validation."""

    @pytest.mark.parametrize("body_id", ['', '   ', None])
    def test_blank_id(self, body_id):
        with pytest.raises(ValueError, match="required"):
            PositionQuery(body_id, J2000)

    def test_id_too_long(self):
        with pytest.raises(ValueError, match="100 characters"):
            PositionQuery('x' * 101, J2000)
        assert PositionQuery('x' * 100, J2000).body_id == 'x' * 100

    @pytest.mark.parametrize("jd", [2415020.5, 2400000.0, 2488069.5, 2500000.0])
    def test_date_window(self, jd):
        with pytest.raises(ValueError, match="Julian Date"):
            PositionQuery('earth', jd)

    def test_nan_date_rejected(self):
        with pytest.raises(ValueError):
            PositionQuery('earth', float('nan'))

    def test_frozen(self):
        query = PositionQuery('earth', J2000)
        with pytest.raises(AttributeError):
            query.julian_date = J2000 + 1
