"""
Interstellar: Keplerian Orbits of Solar System and Interstellar Objects

A Python package for evaluating heliocentric positions and velocities of
planets, comets and interstellar objects from classical orbital elements,
on elliptic and hyperbolic trajectories alike.
"""

# Global configuration
from .config import config, temp_config

# Core classes
from .vector import Vector3
from .orbital_elements import OrbitalElements, OrbitalElements as OE, OrbitClass
from .bodies import (
    CelestialBody, CelestialBodyType, InterstellarObject,
    RgbColor, VisualProperties,
)
from .catalog import Catalog, BodyNotFoundError, PositionQuery, PositionResult
from .trajectory import Trajectory, Trajectory as Traj

# Kepler solvers
from .kepler import solve_kepler_elliptic, solve_kepler_hyperbolic

# Time and logging helpers
from .utils import (
    datetime_to_julian_date, julian_date_to_datetime,
    configure_logging, get_logger, Timer,
)

# Physical constants
from .constants import AU_TO_METERS, SUN_GM, J2000_JD

# Package metadata
__version__ = "0.1.0"

# Define what gets imported with "from interstellar import *"
__all__ = [
    # Classes
    "Vector3",
    "OrbitalElements",
    "OrbitClass",
    "CelestialBody",
    "CelestialBodyType",
    "InterstellarObject",
    "RgbColor",
    "VisualProperties",
    "Catalog",
    "BodyNotFoundError",
    "PositionQuery",
    "PositionResult",
    "Trajectory",
    # Abbreviations
    "OE",
    "Traj",
    # Solvers
    "solve_kepler_elliptic",
    "solve_kepler_hyperbolic",
    # Utilities
    "config",
    "temp_config",
    "datetime_to_julian_date",
    "julian_date_to_datetime",
    "configure_logging",
    "get_logger",
    "Timer",
    # Constants
    "AU_TO_METERS",
    "SUN_GM",
    "J2000_JD",
]
