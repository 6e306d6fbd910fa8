"""
Test suite for celestial body entities.

Tests cover:
- RgbColor and VisualProperties validation and presets
- CelestialBody construction and delegation (including the central body)
- InterstellarObject construction, defaults and the Borisov factory
"""

import pytest
import numpy as np
from datetime import datetime, timezone
from interstellar import (
    CelestialBody, CelestialBodyType, InterstellarObject,
    OrbitalElements, RgbColor, VisualProperties, Vector3, temp_config,
)

AU = 1.496e11
GM_SUN = 1.32712440018e20
J2000 = 2451545.0


@pytest.fixture
def earth_orbit():
    return OrbitalElements(AU, 0.0167, 0.0, 0.0, 0.0, 0.0, J2000, GM_SUN)


@pytest.fixture
def earth(earth_orbit):
    return CelestialBody('earth', 'Earth', CelestialBodyType.PLANET,
                         5.97e24, 6.371e6, earth_orbit,
                         VisualProperties.planet(RgbColor.BLUE, 0.3))


@pytest.fixture
def sun():
    return CelestialBody('sun', 'Sun', CelestialBodyType.STAR, 1.989e30, 6.96e8,
                         None, VisualProperties.star(RgbColor.YELLOW))


class TestRgbColor:
    """Test color validation and conversion."""

    def test_valid(self):
        c = RgbColor(0.2, 0.4, 0.6)
        assert c.to_tuple() == (0.2, 0.4, 0.6)

    @pytest.mark.parametrize("components", [(1.2, 0, 0), (0, -0.1, 0), (0, 0, 2)])
    def test_out_of_range_raises(self, components):
        with pytest.raises(ValueError, match="between 0 and 1"):
            RgbColor(*components)

    def test_out_of_range_warns_when_lenient(self):
        with temp_config(STRICT_VALIDATION=False):
            with pytest.warns(UserWarning):
                RgbColor(1.5, 0.5, 0.5)

    def test_to_hex(self):
        assert RgbColor(1.0, 0.0, 0.0).to_hex() == "#ff0000"
        assert RgbColor.WHITE.to_hex() == "#ffffff"

    def test_equality_and_hash(self):
        assert RgbColor(0.5, 0.5, 0.5) == RgbColor.GRAY
        assert hash(RgbColor(0.5, 0.5, 0.5)) == hash(RgbColor.GRAY)
        assert RgbColor(0.5, 0.5, 0.5) != RgbColor(0.5, 0.5, 0.6)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            RgbColor.RED.r = 0.0


class TestVisualProperties:
    """Test rendering metadata."""

    def test_orbit_color_defaults_to_color(self):
        v = VisualProperties(RgbColor.RED, 0.3, False)
        assert v.orbit_color == RgbColor.RED
        assert v.render_scale_factor == 1.0
        assert v.show_orbit

    def test_star_preset(self):
        v = VisualProperties.star(RgbColor.YELLOW)
        assert v.is_luminous
        assert v.albedo == 0.0
        assert not v.show_orbit

    def test_comet_preset(self):
        v = VisualProperties.comet(RgbColor.ICE_BLUE)
        assert v.albedo == 0.04
        assert v.render_scale_factor == 10.0
        assert v.orbit_color == RgbColor(0.8, 0.8, 1.0)

    def test_invalid_albedo(self):
        with pytest.raises(ValueError, match="Albedo"):
            VisualProperties.planet(RgbColor.RED, 1.5)

    def test_invalid_scale(self):
        with pytest.raises(ValueError, match="Scale factor"):
            VisualProperties(RgbColor.RED, 0.3, False, 0.0)

    def test_missing_color(self):
        with pytest.raises(TypeError):
            VisualProperties(None, 0.3, False)


class TestCelestialBody:
    """Test CelestialBody."""

    def test_properties(self, earth, earth_orbit):
        assert earth.id == 'earth'
        assert earth.name == 'Earth'
        assert earth.body_type == CelestialBodyType.PLANET
        assert earth.orbital_elements is earth_orbit
        assert not earth.is_central

    def test_delegates_to_elements(self, earth, earth_orbit):
        t = J2000 + 91.0
        assert earth.position(t) == earth_orbit.position(t)
        assert earth.velocity(t) == earth_orbit.velocity(t)
        r, v = earth.state(t)
        assert r == earth_orbit.position(t)

    def test_central_body_at_origin(self, sun):
        assert sun.is_central
        assert sun.position(J2000) == Vector3.ZERO
        assert sun.velocity(J2000 + 1e4) == Vector3.ZERO
        assert sun.state(J2000) == (Vector3.ZERO, Vector3.ZERO)

    def test_body_type_from_string(self, earth_orbit):
        body = CelestialBody('x', 'X', 'asteroid', 1e15, 1e3, earth_orbit,
                             VisualProperties.planet(RgbColor.GRAY, 0.1))
        assert body.body_type == CelestialBodyType.ASTEROID

    @pytest.mark.parametrize("body_id, name", [('', 'Earth'), ('earth', '  '), (None, 'Earth')])
    def test_blank_identity_raises(self, earth_orbit, body_id, name):
        with pytest.raises(ValueError, match="cannot be null or empty"):
            CelestialBody(body_id, name, CelestialBodyType.PLANET, 1e24, 1e6,
                          earth_orbit, VisualProperties.planet(RgbColor.BLUE, 0.3))

    def test_invalid_mass(self, earth_orbit):
        with pytest.raises(ValueError, match="Mass"):
            CelestialBody('e', 'E', CelestialBodyType.PLANET, 0.0, 1e6,
                          earth_orbit, VisualProperties.planet(RgbColor.BLUE, 0.3))

    def test_invalid_radius_warns_when_lenient(self, earth_orbit):
        with temp_config(STRICT_VALIDATION=False):
            with pytest.warns(UserWarning, match="Radius"):
                CelestialBody('e', 'E', CelestialBodyType.PLANET, 1e24, -1.0,
                              earth_orbit, VisualProperties.planet(RgbColor.BLUE, 0.3))

    def test_equality_by_id(self, earth, sun):
        twin = CelestialBody('earth', 'Terra', CelestialBodyType.PLANET, 1.0, 1.0,
                             None, VisualProperties.planet(RgbColor.BLUE, 0.3))
        assert earth == twin
        assert hash(earth) == hash(twin)
        assert earth != sun

    def test_repr(self, earth):
        assert "CelestialBody('earth'" in repr(earth)


class TestInterstellarObject:
    """Test InterstellarObject."""

    def test_name_defaults_to_designation(self, earth_orbit):
        obj = InterstellarObject('x', 'X/2030 A1', '  ', earth_orbit,
                                 datetime(2030, 1, 1, tzinfo=timezone.utc), None,
                                 VisualProperties.comet(RgbColor.ICE_BLUE), 100.0)
        assert obj.name == 'X/2030 A1'
        assert obj.discoverer == ""

    def test_requires_elements(self):
        with pytest.raises(TypeError):
            InterstellarObject('x', 'X', 'X', None, None, '',
                               VisualProperties.comet(RgbColor.ICE_BLUE), 100.0)

    def test_invalid_diameter(self, earth_orbit):
        with pytest.raises(ValueError, match="Diameter"):
            InterstellarObject('x', 'X', 'X', earth_orbit, None, '',
                               VisualProperties.comet(RgbColor.ICE_BLUE), 0.0)

    def test_create_borisov(self):
        borisov = InterstellarObject.create_borisov()
        assert borisov.id == "2i-borisov"
        assert borisov.designation == "2I/Borisov"
        assert borisov.name == "Borisov"
        assert borisov.discoverer == "Gennady Borisov"
        assert borisov.discovery_date.year == 2019
        assert borisov.estimated_diameter_meters == 800.0
        assert borisov.eccentricity == 3.3569
        assert borisov.orbital_elements.is_hyperbolic
        assert borisov.orbital_elements.semi_major_axis < 0
        assert borisov.visual.render_scale_factor == 20.0
        assert borisov.visual.color == RgbColor.ICE_BLUE

    def test_borisov_position_finite(self):
        borisov = InterstellarObject.create_borisov()
        p = borisov.position(2458826.5)
        assert np.all(np.isfinite(p.to_numpy()))
        assert p.magnitude() > 0
        r, v = borisov.state(2458826.5 + 100.0)
        assert v == borisov.velocity(2458826.5 + 100.0)
        assert r.magnitude() > p.magnitude()

    def test_repr(self):
        assert "e=3.3569" in repr(InterstellarObject.create_borisov())
