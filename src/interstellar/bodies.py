'''Celestial body entities and their rendering metadata

CelestialBody and InterstellarObject attach identity and physical data to
OrbitalElements and delegate position/velocity queries to them.'''

import numpy as np
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Tuple
from .orbital_elements import OrbitalElements
from .utils import validation_error
from .vector import Vector3


class CelestialBodyType(Enum):
    STAR = 'star'
    PLANET = 'planet'
    DWARF_PLANET = 'dwarf_planet'
    MOON = 'moon'
    ASTEROID = 'asteroid'
    COMET = 'comet'
    INTERSTELLAR_OBJECT = 'interstellar_object'


"""
Immutable dataclasses for visual metadata.
Values are consumed by renderers and plots; the evaluation engine ignores them.
"""
@dataclass(frozen=True, eq=False)
class RgbColor:
    """
    Immutable RGB color with components in [0, 1].

    Attributes
    ----------
    r, g, b : float
        Red, green and blue intensity
    """
    r: float
    g: float
    b: float

    _EQUALITY_ATOL = 1e-6

    def __post_init__(self):
        #Validate parameters
        for name in ('r', 'g', 'b'):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                validation_error(f"RGB component {name} must be between 0 and 1, got {value}")

    def to_hex(self) -> str:
        """CSS hex string, e.g. '#ffcc00', for plotting."""
        r, g, b = (int(round(np.clip(c, 0.0, 1.0) * 255)) for c in (self.r, self.g, self.b))
        return f"#{r:02x}{g:02x}{b:02x}"

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.r, self.g, self.b)

    def __eq__(self, other):
        if not isinstance(other, RgbColor):
            return NotImplemented
        return np.allclose(self.to_tuple(), other.to_tuple(),
                           rtol=0.0, atol=self._EQUALITY_ATOL)

    def __hash__(self):
        return hash(tuple(round(c, 4) for c in self.to_tuple()))


RgbColor.WHITE = RgbColor(1.0, 1.0, 1.0)
RgbColor.YELLOW = RgbColor(1.0, 1.0, 0.0)
RgbColor.BLUE = RgbColor(0.0, 0.5, 1.0)
RgbColor.RED = RgbColor(1.0, 0.3, 0.2)
RgbColor.ORANGE = RgbColor(1.0, 0.6, 0.2)
RgbColor.GRAY = RgbColor(0.5, 0.5, 0.5)
RgbColor.ICE_BLUE = RgbColor(0.8, 0.9, 1.0)


@dataclass(frozen=True, eq=False)
class VisualProperties:
    """
    Immutable rendering hints for a body.

    Attributes
    ----------
    color : RgbColor
        Body color
    albedo : float
        Reflectivity in [0, 1]
    is_luminous : bool
        True for bodies that emit light (stars)
    render_scale_factor : float, optional
        Display enlargement so small bodies stay visible (default 1.0)
    show_orbit : bool, optional
        Whether to draw the orbit path (default True)
    orbit_color : RgbColor, optional
        Orbit path color (defaults to color)
    """
    color: RgbColor
    albedo: float
    is_luminous: bool
    render_scale_factor: float = 1.0
    show_orbit: bool = True
    orbit_color: Optional[RgbColor] = field(default=None)

    _EQUALITY_ATOL = 1e-6

    def __post_init__(self):
        #Validate parameters
        if self.color is None:
            raise TypeError("VisualProperties requires a color")
        if not 0.0 <= self.albedo <= 1.0:
            validation_error(f"Albedo must be between 0 and 1, got {self.albedo}")
        if self.render_scale_factor <= 0:
            validation_error(f"Scale factor must be positive, got {self.render_scale_factor}")
        if self.orbit_color is None:
            object.__setattr__(self, 'orbit_color', self.color)

    @classmethod
    def star(cls, color: RgbColor, scale_factor: float = 1.0) -> "VisualProperties":
        """Luminous, no albedo, no orbit drawn."""
        return cls(color, 0.0, True, scale_factor, False)

    @classmethod
    def planet(cls, color: RgbColor, albedo: float,
               scale_factor: float = 1.0) -> "VisualProperties":
        return cls(color, albedo, False, scale_factor, True)

    @classmethod
    def comet(cls, color: RgbColor, scale_factor: float = 10.0) -> "VisualProperties":
        """Dark nucleus with a blue-ish orbit path."""
        return cls(color, 0.04, False, scale_factor, True, RgbColor(0.8, 0.8, 1.0))

    def __eq__(self, other):
        if not isinstance(other, VisualProperties):
            return NotImplemented
        return (self.color == other.color and
                abs(self.albedo - other.albedo) < self._EQUALITY_ATOL and
                self.is_luminous == other.is_luminous and
                abs(self.render_scale_factor - other.render_scale_factor) < self._EQUALITY_ATOL)

    def __hash__(self):
        return hash((self.color, round(self.albedo, 4), self.is_luminous,
                     round(self.render_scale_factor, 4)))


def _require_text(value, name):
    if value is None or not str(value).strip():
        raise ValueError(f"{name} cannot be null or empty")


class CelestialBody:
    """
    A body of the Solar System: star, planet, moon, asteroid or comet.

    The central body (the Sun) has no orbital elements and stays pinned
    at the origin. Equality and hashing use the identifier only.

    Parameters
    ----------
    id : str
        Unique identifier, e.g. 'earth'
    name : str
        Display name
    body_type : CelestialBodyType
        Classification
    mass_kg : float
        Mass [kg]
    radius_meters : float
        Mean radius [m]
    orbital_elements : OrbitalElements or None
        Heliocentric elements, None for the central body
    visual : VisualProperties
        Rendering hints
    """
    def __init__(self, id: str, name: str, body_type: CelestialBodyType,
                 mass_kg: float, radius_meters: float,
                 orbital_elements: Optional[OrbitalElements],
                 visual: VisualProperties):
        _require_text(id, "Id")
        _require_text(name, "Name")
        if visual is None:
            raise TypeError("CelestialBody requires visual properties")
        if mass_kg <= 0:
            validation_error(f"Mass must be positive, got {mass_kg}")
        if radius_meters <= 0:
            validation_error(f"Radius must be positive, got {radius_meters}")

        self._id = id
        self._name = name
        self._body_type = CelestialBodyType(body_type)
        self._mass_kg = float(mass_kg)
        self._radius_meters = float(radius_meters)
        self._orbital_elements = orbital_elements
        self._visual = visual

    # ========== PROPERTY ACCESS ==========
    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def body_type(self) -> CelestialBodyType:
        return self._body_type

    @property
    def mass_kg(self) -> float:
        return self._mass_kg

    @property
    def radius_meters(self) -> float:
        return self._radius_meters

    @property
    def orbital_elements(self) -> Optional[OrbitalElements]:
        return self._orbital_elements

    @property
    def visual(self) -> VisualProperties:
        return self._visual

    @property
    def is_central(self) -> bool:
        """True for the body fixed at the origin"""
        return self._orbital_elements is None

    # ========== EVALUATION ==========
    def position(self, julian_date: float) -> Vector3:
        """Position [m] from the primary; the origin for the central body."""
        if self._orbital_elements is None:
            return Vector3.ZERO
        return self._orbital_elements.position(julian_date)

    def velocity(self, julian_date: float) -> Vector3:
        """Velocity [m/s]; zero for the central body."""
        if self._orbital_elements is None:
            return Vector3.ZERO
        return self._orbital_elements.velocity(julian_date)

    def state(self, julian_date: float) -> Tuple[Vector3, Vector3]:
        if self._orbital_elements is None:
            return Vector3.ZERO, Vector3.ZERO
        return self._orbital_elements.state(julian_date)

    # ========== SPECIAL METHODS ==========
    def __repr__(self):
        return (f"CelestialBody('{self._id}', name='{self._name}', "
                f"type={self._body_type.value}, mass={self._mass_kg:.4e} kg)")

    def __eq__(self, other):
        if not isinstance(other, CelestialBody):
            return NotImplemented
        return self._id == other._id

    def __hash__(self):
        return hash(self._id)


class InterstellarObject:
    """
    An object passing through the Solar System on a hyperbolic trajectory.

    Parameters
    ----------
    id : str
        Unique identifier, e.g. 'borisov'
    designation : str
        Official designation, e.g. '2I/2019 Q4'
    name : str
        Common name; the designation is used when blank
    orbital_elements : OrbitalElements
        Heliocentric elements (hyperbolic in practice)
    discovery_date : datetime
        Date of discovery
    discoverer : str
        Person or survey credited with the discovery
    visual : VisualProperties
        Rendering hints
    estimated_diameter_meters : float
        Estimated diameter [m]
    """
    def __init__(self, id: str, designation: str, name: Optional[str],
                 orbital_elements: OrbitalElements, discovery_date: datetime,
                 discoverer: Optional[str], visual: VisualProperties,
                 estimated_diameter_meters: float):
        _require_text(id, "Id")
        _require_text(designation, "Designation")
        if orbital_elements is None:
            raise TypeError("InterstellarObject requires orbital elements")
        if visual is None:
            raise TypeError("InterstellarObject requires visual properties")
        if estimated_diameter_meters <= 0:
            validation_error(f"Diameter must be positive, got {estimated_diameter_meters}")

        self._id = id
        self._designation = designation
        self._name = name if name and name.strip() else designation
        self._orbital_elements = orbital_elements
        self._discovery_date = discovery_date
        self._discoverer = discoverer or ""
        self._visual = visual
        self._estimated_diameter_meters = float(estimated_diameter_meters)

    @classmethod
    def create_borisov(cls) -> "InterstellarObject":
        """
        2I/Borisov with approximate JPL Small-Body Database elements.

        Epoch JD 2458826.5 (2019-Dec-09 00:00 UTC).
        """
        orbital_elements = OrbitalElements(
            semi_major_axis=-0.8516 * 1.496e11,  # negative for hyperbolic orbit
            eccentricity=3.3569,
            inclination=np.radians(44.053),
            longitude_of_ascending_node=np.radians(308.15),
            argument_of_periapsis=np.radians(209.13),
            mean_anomaly_at_epoch=0.0,
            epoch=2458826.5,
            gravitational_parameter=1.32712440018e20,
        )
        return cls(
            id="2i-borisov",
            designation="2I/Borisov",
            name="Borisov",
            orbital_elements=orbital_elements,
            discovery_date=datetime(2019, 8, 30, tzinfo=timezone.utc),
            discoverer="Gennady Borisov",
            visual=VisualProperties.comet(RgbColor.ICE_BLUE, scale_factor=20.0),
            estimated_diameter_meters=800.0,
        )

    # ========== PROPERTY ACCESS ==========
    @property
    def id(self) -> str:
        return self._id

    @property
    def designation(self) -> str:
        return self._designation

    @property
    def name(self) -> str:
        return self._name

    @property
    def orbital_elements(self) -> OrbitalElements:
        return self._orbital_elements

    @property
    def discovery_date(self) -> datetime:
        return self._discovery_date

    @property
    def discoverer(self) -> str:
        return self._discoverer

    @property
    def visual(self) -> VisualProperties:
        return self._visual

    @property
    def estimated_diameter_meters(self) -> float:
        return self._estimated_diameter_meters

    @property
    def eccentricity(self) -> float:
        return self._orbital_elements.eccentricity

    # ========== EVALUATION ==========
    def position(self, julian_date: float) -> Vector3:
        """Heliocentric position [m]"""
        return self._orbital_elements.position(julian_date)

    def velocity(self, julian_date: float) -> Vector3:
        """Heliocentric velocity [m/s]"""
        return self._orbital_elements.velocity(julian_date)

    def state(self, julian_date: float) -> Tuple[Vector3, Vector3]:
        return self._orbital_elements.state(julian_date)

    def __repr__(self):
        return (f"InterstellarObject('{self._id}', designation='{self._designation}', "
                f"e={self.eccentricity:.4f})")
