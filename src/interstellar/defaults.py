"""
Default Solar System and Interstellar Object Data
=================================================

Heliocentric orbital elements and physical data for the bodies shipped
with the package: the Sun, the eight planets, five dwarf planets, five
comets and the three confirmed interstellar objects.

Orbital elements are J2000-era osculating values rounded for display
purposes (sources: NASA JPL Horizons, Minor Planet Center). Angles are
in degrees and semi-major axes in AU; both are converted to SI by
OrbitalElements.from_degrees with the AU and GM passed explicitly.

Factory functions build fresh entity lists on demand, so each Catalog
owns its own instances.

Examples
--------
>>> from interstellar.defaults import solar_system_bodies
>>> bodies = solar_system_bodies()
>>> [b.id for b in bodies][:3]
['sun', 'mercury', 'venus']
"""
from datetime import datetime, timezone
from .bodies import (
    CelestialBody, CelestialBodyType, InterstellarObject,
    RgbColor, VisualProperties,
)
from .constants import AU_TO_METERS, SUN_GM, J2000_JD
from .orbital_elements import OrbitalElements

"""
Physical data for the central body
"""
SUN_MASS_KG = 1.98892e30
SUN_RADIUS_M = 696_000_000.0

"""
Solar System table
(id, name, mass [kg], radius [m],
 (a [AU], e, i, node, peri, M0 [deg], epoch [JD]),
 color, albedo)
"""
_PLANETS = (
    ('mercury', 'Mercury', 3.3011e23, 2_439_700.0,
     (0.387, 0.2056, 7.005, 48.331, 29.124, 174.795, J2000_JD), (0.5, 0.5, 0.5), 0.142),
    ('venus', 'Venus', 4.8675e24, 6_051_800.0,
     (0.723, 0.00677, 3.395, 76.681, 54.852, 50.115, J2000_JD), (0.9, 0.8, 0.6), 0.76),
    ('earth', 'Earth', 5.97237e24, 6_371_000.0,
     (1.0, 0.0167, 0.00005, -11.261, 102.947, 100.464, J2000_JD), (0.2, 0.5, 0.9), 0.306),
    ('mars', 'Mars', 6.4171e23, 3_389_500.0,
     (1.524, 0.0934, 1.851, 49.579, 286.462, 19.412, J2000_JD), (0.9, 0.4, 0.2), 0.170),
    ('jupiter', 'Jupiter', 1.8982e27, 69_911_000.0,
     (5.203, 0.0484, 1.305, 100.556, 275.067, 34.404, J2000_JD), (0.8, 0.7, 0.6), 0.52),
    ('saturn', 'Saturn', 5.6834e26, 58_232_000.0,
     (9.537, 0.0542, 2.484, 113.715, 336.041, 49.954, J2000_JD), (0.9, 0.8, 0.6), 0.47),
    ('uranus', 'Uranus', 8.6810e25, 25_362_000.0,
     (19.191, 0.0472, 0.770, 74.230, 96.734, 142.955, J2000_JD), (0.6, 0.8, 0.9), 0.51),
    ('neptune', 'Neptune', 1.02413e26, 24_622_000.0,
     (30.069, 0.00859, 1.769, 131.722, 273.250, 267.767, J2000_JD), (0.3, 0.4, 0.9), 0.41),
)

_DWARF_PLANETS = (
    ('pluto', 'Pluto', 1.303e22, 1_188_300.0,
     (39.482, 0.2488, 17.142, 110.303, 224.067, 238.928, J2000_JD), (0.8, 0.7, 0.6), 0.575),
    ('ceres', 'Ceres', 9.3835e20, 469_730.0,
     (2.767, 0.0758, 10.593, 80.329, 73.115, 95.989, J2000_JD), (0.6, 0.6, 0.6), 0.09),
    ('eris', 'Eris', 1.66e22, 1_163_000.0,
     (67.668, 0.44177, 44.040, 35.951, 151.639, 205.989, J2000_JD), (0.9, 0.9, 0.9), 0.96),
    ('makemake', 'Makemake', 3.1e21, 715_000.0,
     (45.791, 0.159, 28.96, 79.382, 294.834, 165.514, J2000_JD), (0.8, 0.7, 0.6), 0.81),
    ('haumea', 'Haumea', 4.006e21, 816_000.0,
     (43.335, 0.195, 28.19, 122.167, 239.041, 218.205, J2000_JD), (0.9, 0.9, 0.9), 0.804),
)

"""
Comets (id, name, mass [kg], radius [m], elements)
"""
_COMETS = (
    ('halley', '1P/Halley', 2.2e14, 5_500.0,
     (17.834, 0.96714, 162.263, 58.420, 111.333, 38.076, 2446470.5)),
    ('hale-bopp', 'C/1995 O1 (Hale-Bopp)', 1.3e16, 30_000.0,
     (250.46, 0.995068, 89.430, 282.471, 130.590, 0.0, 2450540.0)),
    ('encke', '2P/Encke', 7.2e13, 2_400.0,
     (2.218, 0.8502, 11.782, 334.568, 186.543, 152.655, J2000_JD)),
    ('churyumov-gerasimenko', '67P/Churyumov-Gerasimenko', 9.982e12, 2_000.0,
     (3.463, 0.641, 7.041, 50.147, 12.780, 94.416, J2000_JD)),
    ('hyakutake', 'C/1996 B2 (Hyakutake)', 8.2e13, 2_500.0,
     (1700.0, 0.999897, 124.920, 188.046, 130.173, 0.0, 2450182.5)),
)
COMET_COLOR = (0.7, 0.8, 0.9)

"""
Interstellar objects (id, designation, name, elements, discovery date,
discoverer, diameter [m])
"""
_INTERSTELLAR = (
    ('oumuamua', '1I/2017 U1', "1I/'Oumuamua",
     (-1.279, 1.201, 122.741, 24.597, 241.811, 0.0, 2458080.5),
     datetime(2017, 10, 19, tzinfo=timezone.utc), 'Pan-STARRS (Robert Weryk)', 230.0),
    ('borisov', '2I/2019 Q4', '2I/Borisov',
     (-0.851, 3.357, 44.053, 308.151, 209.124, 0.0, 2458826.5),
     datetime(2019, 8, 30, tzinfo=timezone.utc), 'Gennadiy Borisov', 1000.0),
    ('atlas', '3I/2024 S1', '3I/ATLAS',
     (-0.193, 6.14, 88.5, 125.4, 342.1, 0.0, 2460613.98194),
     datetime(2025, 7, 1, tzinfo=timezone.utc), 'ATLAS Survey', 1600.0),
)


def heliocentric_orbit(a_au, e, i_deg, node_deg, peri_deg, m_deg, epoch):
    """
    Build heliocentric elements from catalog units.

    Parameters
    ----------
    a_au : float
        Semi-major axis [AU] (negative for hyperbolic orbits)
    e : float
        Eccentricity
    i_deg, node_deg, peri_deg, m_deg : float
        Angles [deg]
    epoch : float
        Reference time [Julian Date]

    Returns
    -------
    OrbitalElements
        Elements about the Sun in SI units
    """
    return OrbitalElements.from_degrees(
        a_au, e, i_deg, node_deg, peri_deg, m_deg, epoch,
        gravitational_parameter=SUN_GM, au=AU_TO_METERS
    )


def sun():
    """The central body, pinned at the origin."""
    return CelestialBody(
        id='sun',
        name='Sun',
        body_type=CelestialBodyType.STAR,
        mass_kg=SUN_MASS_KG,
        radius_meters=SUN_RADIUS_M,
        orbital_elements=None,
        visual=VisualProperties.star(RgbColor(1.0, 0.9, 0.7)),
    )


def _orbiting_bodies(table, body_type):
    return [
        CelestialBody(
            id=body_id,
            name=name,
            body_type=body_type,
            mass_kg=mass,
            radius_meters=radius,
            orbital_elements=heliocentric_orbit(*elements),
            visual=VisualProperties.planet(RgbColor(*color), albedo),
        )
        for body_id, name, mass, radius, elements, color, albedo in table
    ]


def planets():
    """The eight planets."""
    return _orbiting_bodies(_PLANETS, CelestialBodyType.PLANET)


def dwarf_planets():
    """Pluto, Ceres, Eris, Makemake and Haumea."""
    return _orbiting_bodies(_DWARF_PLANETS, CelestialBodyType.DWARF_PLANET)


def comets():
    """Periodic and long-period comets."""
    return [
        CelestialBody(
            id=body_id,
            name=name,
            body_type=CelestialBodyType.COMET,
            mass_kg=mass,
            radius_meters=radius,
            orbital_elements=heliocentric_orbit(*elements),
            visual=VisualProperties.comet(RgbColor(*COMET_COLOR)),
        )
        for body_id, name, mass, radius, elements in _COMETS
    ]


def solar_system_bodies():
    """
    All regular catalog bodies, Sun first.

    Returns
    -------
    list of CelestialBody
    """
    return [sun()] + planets() + dwarf_planets() + comets()


def interstellar_objects():
    """
    The confirmed interstellar objects.

    Returns
    -------
    list of InterstellarObject
    """
    objects = []
    for object_id, designation, name, elements, discovered, discoverer, diameter in _INTERSTELLAR:
        if object_id == 'oumuamua':
            visual = VisualProperties.planet(RgbColor(0.6, 0.5, 0.5), 0.10)
        else:
            visual = VisualProperties.comet(RgbColor(*COMET_COLOR))
        objects.append(InterstellarObject(
            id=object_id,
            designation=designation,
            name=name,
            orbital_elements=heliocentric_orbit(*elements),
            discovery_date=discovered,
            discoverer=discoverer,
            visual=visual,
            estimated_diameter_meters=diameter,
        ))
    return objects
