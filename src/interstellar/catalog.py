'''In-memory catalog of celestial bodies and interstellar objects

Keyed lookup of the shipped (or caller-supplied) entities, and position
queries that resolve an identifier and evaluate its orbit.'''

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple, Union
from .bodies import CelestialBody, InterstellarObject
from .constants import MIN_QUERY_JD, MAX_QUERY_JD
from . import defaults
from .utils import get_logger
from .vector import Vector3

logger = get_logger(__name__)

Body = Union[CelestialBody, InterstellarObject]


class BodyNotFoundError(KeyError):
    """Raised when an identifier matches neither a body nor an interstellar object."""

    def __init__(self, body_id: str):
        super().__init__(body_id)
        self.body_id = body_id

    def __str__(self):
        return f"Celestial body with ID '{self.body_id}' not found."


@dataclass(frozen=True)
class PositionQuery:
    """
    Request for the state of one body at one instant.

    Attributes
    ----------
    body_id : str
        Catalog identifier (1 to 100 characters)
    julian_date : float
        Query time, strictly between 1900-01-01 and 2100-01-01
    """
    body_id: str
    julian_date: float

    MAX_ID_LENGTH = 100

    def __post_init__(self):
        #Validate parameters
        if not self.body_id or not self.body_id.strip():
            raise ValueError("Body ID is required.")
        if len(self.body_id) > self.MAX_ID_LENGTH:
            raise ValueError(f"Body ID must not exceed {self.MAX_ID_LENGTH} characters.")
        if not self.julian_date > MIN_QUERY_JD:
            raise ValueError(f"Julian Date must be after {MIN_QUERY_JD} (year 1900).")
        if not self.julian_date < MAX_QUERY_JD:
            raise ValueError(f"Julian Date must be before {MAX_QUERY_JD} (year 2100).")


@dataclass(frozen=True)
class PositionResult:
    """
    Evaluated state of a body.

    Attributes
    ----------
    body_id : str
    julian_date : float
    position : Vector3
        Heliocentric position [m]
    velocity : Vector3
        Heliocentric velocity [m/s]
    """
    body_id: str
    julian_date: float
    position: Vector3
    velocity: Vector3

    @property
    def distance(self) -> float:
        """Distance from the primary [m]"""
        return self.position.magnitude()

    @property
    def speed(self) -> float:
        """Speed relative to the primary [m/s]"""
        return self.velocity.magnitude()


class Catalog:
    """
    Keyed store of regular bodies and interstellar objects.

    Regular bodies and interstellar objects live in separate namespaces;
    resolve() searches regular bodies first.

    Parameters
    ----------
    bodies : iterable of CelestialBody, optional
        Regular bodies (default: the shipped Solar System)
    interstellar_objects : iterable of InterstellarObject, optional
        Interstellar objects (default: the shipped objects)

    Examples
    --------
    >>> catalog = Catalog()
    >>> earth_pos = catalog.position_at('earth', 2451545.0)
    >>> catalog.resolve('borisov').eccentricity
    3.357
    """
    # ========== CONSTRUCTION ==========
    def __init__(self, bodies: Optional[Iterable[CelestialBody]] = None,
                 interstellar_objects: Optional[Iterable[InterstellarObject]] = None):
        if bodies is None:
            bodies = defaults.solar_system_bodies()
        if interstellar_objects is None:
            interstellar_objects = defaults.interstellar_objects()

        self._bodies: Dict[str, CelestialBody] = {}
        self._interstellar: Dict[str, InterstellarObject] = {}
        for body in bodies:
            self._add(self._bodies, body)
        for obj in interstellar_objects:
            self._add(self._interstellar, obj)

        logger.debug("Catalog loaded with %d bodies and %d interstellar objects",
                     len(self._bodies), len(self._interstellar))

    @classmethod
    def from_bodies(cls, bodies: Iterable[CelestialBody],
                    interstellar_objects: Iterable[InterstellarObject] = ()) -> "Catalog":
        """Catalog holding only the given entities."""
        return cls(list(bodies), list(interstellar_objects))

    @staticmethod
    def _add(store, entity):
        if entity.id in store:
            raise ValueError(f"Duplicate catalog identifier '{entity.id}'")
        store[entity.id] = entity

    # ========== LOOKUP ==========
    def get(self, body_id: str) -> Optional[CelestialBody]:
        """Regular body by identifier, or None."""
        return self._bodies.get(body_id)

    def get_interstellar(self, object_id: str) -> Optional[InterstellarObject]:
        """Interstellar object by identifier, or None."""
        return self._interstellar.get(object_id)

    def bodies(self) -> List[CelestialBody]:
        return list(self._bodies.values())

    def interstellar_objects(self) -> List[InterstellarObject]:
        return list(self._interstellar.values())

    def ids(self) -> List[str]:
        """All identifiers, regular bodies first."""
        return list(self._bodies) + list(self._interstellar)

    def resolve(self, identifier: str) -> Body:
        """
        Find a body by identifier, trying regular bodies first.

        Raises
        ------
        BodyNotFoundError
            If neither namespace holds the identifier
        """
        body = self._bodies.get(identifier)
        if body is not None:
            return body
        obj = self._interstellar.get(identifier)
        if obj is not None:
            return obj
        logger.warning("Celestial body %s not found", identifier)
        raise BodyNotFoundError(identifier)

    # ========== EVALUATION ==========
    def position_at(self, identifier: str, julian_date: float) -> Vector3:
        """Heliocentric position [m] of a catalog entry."""
        return self.resolve(identifier).position(julian_date)

    def state_at(self, identifier: str, julian_date: float) -> Tuple[Vector3, Vector3]:
        """Heliocentric position [m] and velocity [m/s] of a catalog entry."""
        return self.resolve(identifier).state(julian_date)

    def query(self, query: PositionQuery) -> PositionResult:
        """
        Evaluate a validated position query.

        Parameters
        ----------
        query : PositionQuery

        Returns
        -------
        PositionResult

        Raises
        ------
        BodyNotFoundError
            If the identifier is unknown
        """
        logger.info("Calculating position for %s at JD %.6f",
                    query.body_id, query.julian_date)
        position, velocity = self.state_at(query.body_id, query.julian_date)
        return PositionResult(query.body_id, query.julian_date, position, velocity)

    # ========== SPECIAL METHODS ==========
    def __contains__(self, identifier):
        return identifier in self._bodies or identifier in self._interstellar

    def __len__(self):
        return len(self._bodies) + len(self._interstellar)

    def __iter__(self):
        yield from self._bodies.values()
        yield from self._interstellar.values()

    def __repr__(self):
        return (f"Catalog(bodies={len(self._bodies)}, "
                f"interstellar_objects={len(self._interstellar)})")
