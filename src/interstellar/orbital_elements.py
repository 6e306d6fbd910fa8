'''Keplerian orbital elements and the two-body position/velocity evaluator

OrbitalElements holds the six classical elements plus epoch and the
gravitational parameter of the primary, and evaluates position and velocity
at any Julian Date by solving Kepler's equation (unperturbed two-body motion).'''

import numpy as np
from enum import Enum
from typing import Tuple
from .config import config
from .constants import AU_TO_METERS, SUN_GM, SECONDS_PER_DAY
from .kepler import (
    solve_kepler_elliptic, solve_kepler_hyperbolic,
    true_anomaly_elliptic, true_anomaly_hyperbolic,
    rotate_to_ecliptic,
)
from .utils import get_logger, validation_error
from .vector import Vector3

logger = get_logger(__name__)


# define an enumerated list of orbit classes
class OrbitClass(Enum):
    ELLIPTIC = 'elliptic'       # 0 <= e < 1, a > 0
    HYPERBOLIC = 'hyperbolic'   # e >= 1, a < 0 (e == 1 included)

    @classmethod
    def from_eccentricity(cls, eccentricity: float) -> "OrbitClass":
        """Classify by eccentricity; only e < 1 is elliptic."""
        return cls.ELLIPTIC if eccentricity < 1.0 else cls.HYPERBOLIC


class OrbitalElements:
    """
    Classical Keplerian elements of a body orbiting a primary.

    Units are SI: meters, radians, seconds, with the epoch given as a
    Julian Date. The semi-major axis is signed: positive for elliptic
    orbits and negative for hyperbolic ones (e > 1), so that a(1 - e^2)
    keeps a consistent sign. OrbitalElements is immutable.

    Position and velocity are pure functions of the elements and the
    query time. The current mean anomaly is not wrapped to [0, 2pi), so
    elliptic results lose precision many periods away from the epoch.
    Orbits with eccentricity very close to 1 are numerically degraded in
    both branches; exact e == 1 is evaluated with the hyperbolic solver.

    Parameters
    ----------
    semi_major_axis : float
        Semi-major axis a [m], non-zero
    eccentricity : float
        Eccentricity e, >= 0
    inclination : float
        Inclination i [rad]
    longitude_of_ascending_node : float
        Longitude of ascending node Omega [rad]
    argument_of_periapsis : float
        Argument of periapsis w [rad]
    mean_anomaly_at_epoch : float
        Mean anomaly at epoch M0 [rad]
    epoch : float
        Reference time [Julian Date]
    gravitational_parameter : float
        GM of the primary [m^3/s^2], > 0

    Raises
    ------
    ValueError
        If any input is not finite, a == 0, e < 0 or GM <= 0
    """
    # ========== CLASS CONSTANTS ==========
    ELEMENT_NAMES = (
        'semi_major_axis', 'eccentricity', 'inclination',
        'longitude_of_ascending_node', 'argument_of_periapsis',
        'mean_anomaly_at_epoch', 'epoch', 'gravitational_parameter',
    )
    # Tolerances for equality comparisons
    _A_ATOL = 1e-6        # m
    _ANGLE_ATOL = 1e-10   # eccentricity and inclination
    _EPOCH_ATOL = 1e-6    # days
    # Rounding for consistent hashing
    _A_HASH_DECIMALS = 4
    _ANGLE_HASH_DECIMALS = 8
    _EPOCH_HASH_DECIMALS = 4

    # ========== CONSTRUCTION ==========
    def __init__(self, semi_major_axis: float, eccentricity: float,
                 inclination: float, longitude_of_ascending_node: float,
                 argument_of_periapsis: float, mean_anomaly_at_epoch: float,
                 epoch: float, gravitational_parameter: float):
        elements = np.array([
            semi_major_axis, eccentricity, inclination,
            longitude_of_ascending_node, argument_of_periapsis,
            mean_anomaly_at_epoch, epoch, gravitational_parameter,
        ], dtype=float)
        self._validate(elements)

        self._semi_major_axis = float(semi_major_axis)
        self._eccentricity = float(eccentricity)
        self._inclination = float(inclination)
        self._longitude_of_ascending_node = float(longitude_of_ascending_node)
        self._argument_of_periapsis = float(argument_of_periapsis)
        self._mean_anomaly_at_epoch = float(mean_anomaly_at_epoch)
        self._epoch = float(epoch)
        self._gravitational_parameter = float(gravitational_parameter)
        self._orbit_class = OrbitClass.from_eccentricity(self._eccentricity)

        # read-only view backs indexing and iteration
        self._elements = elements
        self._elements.flags.writeable = False

        self._check_sign_convention()
        if (config.WARN_NEAR_PARABOLIC and
                abs(self._eccentricity - 1.0) < config.NEAR_PARABOLIC_BAND):
            logger.debug("Near-parabolic orbit (e=%.10f): Kepler solutions "
                         "are numerically degraded", self._eccentricity)

    # ========== VALIDATION ==========
    @staticmethod
    def _validate(elements):
        """Check the construction invariants; these always raise."""
        if not np.all(np.isfinite(elements)):
            raise ValueError(f"Orbital elements contain NaN or Inf: {elements.tolist()}")
        a, e = elements[0], elements[1]
        mu = elements[7]
        # Semi-major axis can be negative for hyperbolic orbits (e > 1)
        if a == 0:
            raise ValueError("Semi-major axis cannot be zero")
        if e < 0:
            raise ValueError(f"Eccentricity must be non-negative, got {e}")
        if mu <= 0:
            raise ValueError(f"Gravitational parameter must be positive, got {mu}")

    def _check_sign_convention(self):
        """Optionally flag a semi-major axis whose sign contradicts the orbit class."""
        if not config.STRICT_SIGN_CONVENTION:
            return
        a, e = self._semi_major_axis, self._eccentricity
        if self.is_elliptic and a < 0:
            validation_error(f"Elliptic orbit (e={e}) "
                             f"requires positive semi-major axis, got a={a}")
        elif self.is_hyperbolic and a > 0:
            validation_error(f"Hyperbolic orbit (e={e}) "
                             f"requires negative semi-major axis, got a={a}")

    # ========== FACTORY METHODS ==========
    @classmethod
    def from_degrees(cls, a_au: float, e: float, i_deg: float,
                     node_deg: float, peri_deg: float, m_deg: float,
                     epoch: float, gravitational_parameter: float = SUN_GM,
                     au: float = AU_TO_METERS) -> "OrbitalElements":
        """
        Create elements from catalog units (AU and degrees).

        Parameters
        ----------
        a_au : float
            Semi-major axis [AU], negative for hyperbolic orbits
        e : float
            Eccentricity
        i_deg, node_deg, peri_deg, m_deg : float
            Inclination, longitude of ascending node, argument of periapsis
            and mean anomaly at epoch [deg]
        epoch : float
            Reference time [Julian Date]
        gravitational_parameter : float, optional
            GM of the primary [m^3/s^2] (default: Sun)
        au : float, optional
            Meters per astronomical unit (default: IAU 2012 value)

        Returns
        -------
        OrbitalElements
        """
        return cls(
            semi_major_axis=a_au * au,
            eccentricity=e,
            inclination=np.radians(i_deg),
            longitude_of_ascending_node=np.radians(node_deg),
            argument_of_periapsis=np.radians(peri_deg),
            mean_anomaly_at_epoch=np.radians(m_deg),
            epoch=epoch,
            gravitational_parameter=gravitational_parameter,
        )

    @classmethod
    def from_numpy(cls, array):
        """
        Build one OrbitalElements per row of an (n, 8) array.

        Parameters
        ----------
        array : np.ndarray
            Array of shape (n_orbits, 8), columns ordered as ELEMENT_NAMES

        Returns
        -------
        list of OrbitalElements
        """
        array = np.asarray(array, dtype=float)
        if array.ndim != 2 or array.shape[1] != 8:
            raise ValueError(f"Array must have shape (n, 8), got {array.shape}")

        return [cls(*row) for row in array]

    @classmethod
    def from_dataframe(cls, df):
        """
        Build one OrbitalElements per DataFrame row, matching columns by name.

        Parameters
        ----------
        df : pd.DataFrame
            DataFrame with one column per name in ELEMENT_NAMES

        Returns
        -------
        list of OrbitalElements
        """
        missing = [name for name in cls.ELEMENT_NAMES if name not in df.columns]
        if missing:
            raise ValueError(f"DataFrame is missing element columns: {missing}")

        return [cls(**{name: row[name] for name in cls.ELEMENT_NAMES})
                for _, row in df.iterrows()]

    # ========== PROPERTY ACCESS ==========
    @property
    def semi_major_axis(self) -> float:
        """Signed semi-major axis [m]"""
        return self._semi_major_axis

    @property
    def eccentricity(self) -> float:
        return self._eccentricity

    @property
    def inclination(self) -> float:
        """Inclination [rad]"""
        return self._inclination

    @property
    def longitude_of_ascending_node(self) -> float:
        """Longitude of ascending node [rad]"""
        return self._longitude_of_ascending_node

    @property
    def argument_of_periapsis(self) -> float:
        """Argument of periapsis [rad]"""
        return self._argument_of_periapsis

    @property
    def mean_anomaly_at_epoch(self) -> float:
        """Mean anomaly at epoch [rad]"""
        return self._mean_anomaly_at_epoch

    @property
    def epoch(self) -> float:
        """Reference time [Julian Date]"""
        return self._epoch

    @property
    def gravitational_parameter(self) -> float:
        """GM of the primary [m^3/s^2]"""
        return self._gravitational_parameter

    # short aliases
    a = semi_major_axis
    e = eccentricity
    mu = gravitational_parameter

    @property
    def elements(self) -> np.ndarray:
        """All eight values in ELEMENT_NAMES order (read-only)"""
        return self._elements

    @property
    def orbit_class(self) -> OrbitClass:
        return self._orbit_class

    @property
    def is_elliptic(self) -> bool:
        return self._orbit_class == OrbitClass.ELLIPTIC

    @property
    def is_hyperbolic(self) -> bool:
        return self._orbit_class == OrbitClass.HYPERBOLIC

    # ========== ORBITAL PROPERTIES ==========
    def mean_motion(self) -> float:
        """
        Calculate mean motion (n = sqrt(GM/|a|^3))

        Uses |a| so the value is defined for hyperbolic orbits as well.

        Returns
        -------
        float
            Mean motion [rad/s]
        """
        return np.sqrt(self._gravitational_parameter / abs(self._semi_major_axis)**3)

    def orbital_period(self) -> float:
        """
        Time for one revolution [s]

        Defined for elliptic orbits only; raises ValueError otherwise.
        """
        if self.is_hyperbolic:
            raise ValueError("Orbital period undefined for parabolic/hyperbolic orbits")
        return 2 * np.pi / self.mean_motion()

    def periapsis_distance(self) -> float:
        """Closest approach to the primary, |a|*|1 - e| [m]"""
        return abs(self._semi_major_axis) * abs(1.0 - self._eccentricity)

    def apoapsis_distance(self) -> float:
        """Farthest distance from the primary, a*(1 + e) [m] (elliptic only)"""
        if self.is_hyperbolic:
            raise ValueError("Apoapsis undefined for parabolic/hyperbolic orbits")
        return self._semi_major_axis * (1.0 + self._eccentricity)

    def specific_energy(self) -> float:
        """Calculate specific orbital energy -GM/(2a) [J/kg]"""
        return -self._gravitational_parameter / (2 * self._semi_major_axis)

    def specific_angular_momentum(self) -> float:
        """Specific angular momentum magnitude sqrt(GM*|p|) [m^2/s]"""
        p = self._semi_major_axis * (1 - self._eccentricity**2)
        return np.sqrt(self._gravitational_parameter * abs(p))

    def mean_anomaly(self, julian_date: float) -> float:
        """
        Mean anomaly at a given time (not wrapped to [0, 2pi)).

        Parameters
        ----------
        julian_date : float
            Query time [Julian Date]

        Returns
        -------
        float
            M = M0 + n*(t - epoch) [rad]
        """
        time_since_epoch = (julian_date - self._epoch) * SECONDS_PER_DAY
        return self._mean_anomaly_at_epoch + self.mean_motion() * time_since_epoch

    # ========== EVALUATION ==========
    def _perifocal_state(self, julian_date: float) -> Tuple[float, float, float, float]:
        """
        Position and velocity in the orbital plane (x toward periapsis).

        The single branch on eccentricity selects the elliptic or the
        hyperbolic form of Kepler's equation.
        """
        M = self.mean_anomaly(julian_date)
        a = self._semi_major_axis
        e = self._eccentricity
        mu = self._gravitational_parameter

        if e < 1.0:
            E = solve_kepler_elliptic(M, e)
            nu = true_anomaly_elliptic(E, e)
            r = a * (1.0 - e * np.cos(E))
            v_mag = np.sqrt(mu * abs(a)) / r
            vx = -v_mag * np.sin(E)
            vy = v_mag * np.sqrt(1.0 - e * e) * np.cos(E)
        else:
            H = solve_kepler_hyperbolic(M, e)
            nu = true_anomaly_hyperbolic(H, e)
            # a < 0 here, so r comes out positive
            r = a * (1.0 - e * np.cosh(H))
            v_mag = np.sqrt(mu * abs(a)) / abs(r)
            vx = -v_mag * np.sinh(H)
            vy = v_mag * np.sqrt(e * e - 1.0) * np.cosh(H)

        return r * np.cos(nu), r * np.sin(nu), vx, vy

    def _to_ecliptic(self, x: float, y: float) -> Vector3:
        return rotate_to_ecliptic(x, y, self._inclination,
                                  self._longitude_of_ascending_node,
                                  self._argument_of_periapsis)

    def position(self, julian_date: float) -> Vector3:
        """
        Calculate the position at a given time.

        Parameters
        ----------
        julian_date : float
            Query time [Julian Date]

        Returns
        -------
        Vector3
            Position relative to the primary [m], in the reference frame
            of the elements
        """
        x, y, _, _ = self._perifocal_state(julian_date)
        return self._to_ecliptic(x, y)

    def velocity(self, julian_date: float) -> Vector3:
        """
        Calculate the velocity at a given time.

        Parameters
        ----------
        julian_date : float
            Query time [Julian Date]

        Returns
        -------
        Vector3
            Velocity relative to the primary [m/s]
        """
        _, _, vx, vy = self._perifocal_state(julian_date)
        return self._to_ecliptic(vx, vy)

    def state(self, julian_date: float) -> Tuple[Vector3, Vector3]:
        """Position [m] and velocity [m/s] from a single Kepler solve."""
        x, y, vx, vy = self._perifocal_state(julian_date)
        return self._to_ecliptic(x, y), self._to_ecliptic(vx, vy)

    # ========== BATCH OPERATIONS ==========
    class Batch:
        """
        Vectorized helpers over a list of OrbitalElements.

        Each helper takes the list first and returns
        NumPy arrays or a DataFrame.
        """
        @staticmethod
        def positions(orbits, julian_date):
            """Positions of multiple orbits at one time, shape (n, 3)"""
            return np.array([o.position(julian_date).to_tuple() for o in orbits]).reshape(-1, 3)

        @staticmethod
        def velocities(orbits, julian_date):
            """Velocities of multiple orbits at one time, shape (n, 3)"""
            return np.array([o.velocity(julian_date).to_tuple() for o in orbits]).reshape(-1, 3)

        @staticmethod
        def mean_motion(orbits):
            """Mean motion of each orbit [rad/s]"""
            return np.array([o.mean_motion() for o in orbits])

        @staticmethod
        def eccentricity(orbits):
            """Eccentricity of each orbit"""
            return np.array([o.eccentricity for o in orbits])

        @staticmethod
        def to_numpy(orbits):
            """
            Stack the raw element vectors.

            Returns
            -------
            np.ndarray
                Array of shape (n_orbits, 8), columns ordered as ELEMENT_NAMES
            """
            return np.array([o.elements for o in orbits]).reshape(-1, 8)

        @staticmethod
        def to_dataframe(orbits, index=None):
            """
            Tabulate elements, one row per orbit.

            Parameters
            ----------
            orbits : list of OrbitalElements
                List of orbital elements
            index : array-like, optional
                Index for the DataFrame (e.g., body identifiers).
                If None, uses integer index.

            Returns
            -------
            pd.DataFrame
                DataFrame with one column per name in ELEMENT_NAMES

            Raises
            ------
            ValueError
                If index length doesn't match number of orbits
            """
            import pandas as pd

            # empty input still carries the element columns
            if not orbits:
                return pd.DataFrame(columns=list(OrbitalElements.ELEMENT_NAMES))

            if index is not None and len(index) != len(orbits):
                raise ValueError(
                    f"Index length ({len(index)}) must match "
                    f"number of orbits ({len(orbits)})"
                )

            data = OrbitalElements.Batch.to_numpy(orbits)
            return pd.DataFrame(data, columns=list(OrbitalElements.ELEMENT_NAMES),
                                index=index)

    # ========== SPECIAL METHODS ==========
    def __len__(self):
        #Length of element vector (always 8)
        return 8

    def __getitem__(self, key):
        #orbit[0] is the semi-major axis
        return self._elements[key]

    def __iter__(self):
        #Iterate in ELEMENT_NAMES order
        return iter(self._elements)

    def __repr__(self):
        #Keyword form, evaluable back into OrbitalElements
        fields = ", ".join(f"{name}={value!r}" for name, value
                           in zip(self.ELEMENT_NAMES, self._elements.tolist()))
        return f"OrbitalElements({fields})"

    def __str__(self):
        #AU and degrees for display
        a_au = self._semi_major_axis / AU_TO_METERS
        return (f"Keplerian Elements ({self._orbit_class.value}):\n"
                f"  a     = {a_au:12.6f} AU\n"
                f"  e     = {self._eccentricity:12.6f}\n"
                f"  i     = {np.degrees(self._inclination):12.4f}°\n"
                f"  Ω     = {np.degrees(self._longitude_of_ascending_node):12.4f}°\n"
                f"  ω     = {np.degrees(self._argument_of_periapsis):12.4f}°\n"
                f"  M0    = {np.degrees(self._mean_anomaly_at_epoch):12.4f}°\n"
                f"  epoch = {self._epoch:12.4f} JD\n"
                f"  GM    = {self._gravitational_parameter:12.6e} m³/s²")

    def __eq__(self, other):
        #Shape of the orbit and epoch only, within tolerance
        if not isinstance(other, OrbitalElements):
            return NotImplemented
        if other is self:
            return True
        return (abs(self._semi_major_axis - other._semi_major_axis) < self._A_ATOL and
                abs(self._eccentricity - other._eccentricity) < self._ANGLE_ATOL and
                abs(self._inclination - other._inclination) < self._ANGLE_ATOL and
                abs(self._epoch - other._epoch) < self._EPOCH_ATOL)

    def __hash__(self):
        """
        Hash of the rounded a, e, i and epoch.

        Orbits that differ by much less than the rounding step share a
        hash. Two orbits that compare equal but sit on either side of a
        rounding boundary (e.g. a = x.xxxx49 and x.xxxx51 m) can still
        hash differently, so sets and dicts may keep both.
        """
        return hash((round(self._semi_major_axis, self._A_HASH_DECIMALS),
                     round(self._eccentricity, self._ANGLE_HASH_DECIMALS),
                     round(self._inclination, self._ANGLE_HASH_DECIMALS),
                     round(self._epoch, self._EPOCH_HASH_DECIMALS)))
