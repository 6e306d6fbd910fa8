"""
Global Configuration for Interstellar Package
=============================================

Mutable, process-wide settings: Kepler solver limits, equality tolerances,
the strictness of metadata validation and the defaults used when sampling
and plotting trajectories.

Examples
--------
View current configuration:

>>> import interstellar
>>> print(interstellar.config)

Modify settings:

>>> interstellar.config.VECTOR_ATOL = 1e-6  # Looser vector equality
>>> interstellar.config.DEFAULT_PLOT_POINTS = 2000  # More detailed plots

Reset to defaults:

>>> interstellar.config.reset()

Temporarily modify settings:

>>> with interstellar.temp_config(HYPERBOLIC_MAX_ITER=50):
...     # More Newton iterations for this block only
...     borisov.position(2458826.5)

Notes
-----
Changes apply to every later evaluation in the process until they are
reverted or reset.
"""

from dataclasses import dataclass, fields
from contextlib import contextmanager
import math


@dataclass
class InterstellarConfig:
    """
    Settings read at call time by the solvers, entities and plots.

    Attributes
    ----------
    VECTOR_ATOL : float
        Component-wise absolute tolerance for Vector3 equality.
        Default: 1e-10
    KEPLER_TOL : float
        Newton-Raphson step size below which Kepler's equation is
        considered solved (eccentric or hyperbolic anomaly, radians).
        Default: 1e-10
    ELLIPTIC_MAX_ITER : int
        Iteration cap for the elliptic Kepler solver.
        Default: 10
    HYPERBOLIC_MAX_ITER : int
        Iteration cap for the hyperbolic Kepler solver.
        Default: 20
    NEAR_PARABOLIC_BAND : float
        Orbits with |e - 1| below this value are flagged as near-parabolic,
        where the solvers lose precision.
        Default: 1e-6
    WARN_NEAR_PARABOLIC : bool
        If True, log a message when near-parabolic elements are constructed.
        Default: True
    STRICT_VALIDATION : bool
        If True, metadata validation failures raise exceptions.
        If False, validation failures issue warnings.
        Orbital element invariants always raise.
        Default: True
    STRICT_SIGN_CONVENTION : bool
        If True, check that the sign of the semi-major axis matches the
        orbit class (positive for e < 1, negative for e >= 1).
        Default: False
    DEFAULT_INTERVAL_HOURS : float
        Default sampling interval for trajectories.
        Default: 6.0
    DEFAULT_PLOT_POINTS : int
        Default number of points for trajectory plotting.
        Default: 1000
    DEFAULT_BODY_COLOR : str
        Default color for the central body in plots.
        Default: 'gold'
    DEFAULT_TRAJ_COLOR : str
        Default color for trajectory lines in plots.
        Default: 'red'
    DEFAULT_BODY_OPACITY : float
        Default opacity for the central body marker (0.0 to 1.0).
        Default: 0.8
    """

    # Numerical tolerance for equality comparisons
    VECTOR_ATOL: float = 1e-10

    # Kepler solver controls
    KEPLER_TOL: float = 1e-10
    ELLIPTIC_MAX_ITER: int = 10
    HYPERBOLIC_MAX_ITER: int = 20
    NEAR_PARABOLIC_BAND: float = 1e-6
    WARN_NEAR_PARABOLIC: bool = True

    # Validation behavior
    STRICT_VALIDATION: bool = True
    STRICT_SIGN_CONVENTION: bool = False

    # Trajectory defaults
    DEFAULT_INTERVAL_HOURS: float = 6.0

    # Plotting defaults
    DEFAULT_PLOT_POINTS: int = 1000
    DEFAULT_BODY_COLOR: str = 'gold'
    DEFAULT_TRAJ_COLOR: str = 'red'
    DEFAULT_TRAJ_COLOR_ADD: str = 'blue'
    DEFAULT_BODY_OPACITY: float = 0.8

    @property
    def HASH_DECIMALS(self) -> int:
        """
        Compute hash rounding decimals from vector equality tolerance.

        The hash rounding must be coarse enough that if two vectors
        are equal (within VECTOR_ATOL), they usually hash to the same value.

        Formula: HASH_DECIMALS = -floor(log10(ATOL)) - 2

        Returns
        -------
        int
            Number of decimal places for hash rounding
        """
        magnitude = -math.floor(math.log10(self.VECTOR_ATOL))
        return max(magnitude - 2, 0)

    def reset(self):
        """
        Restore every setting to its shipped value.

        Examples
        --------
        >>> import interstellar
        >>> interstellar.config.KEPLER_TOL = 1e-6
        >>> interstellar.config.reset()
        >>> interstellar.config.KEPLER_TOL
        1e-10
        """
        shipped = InterstellarConfig()
        for setting in fields(self):
            setattr(self, setting.name, getattr(shipped, setting.name))

    def __repr__(self):
        """Settings grouped by concern, one per line."""
        groups = (
            ("Numerical Tolerances", ("VECTOR_ATOL", "HASH_DECIMALS")),
            ("Kepler Solver", ("KEPLER_TOL", "ELLIPTIC_MAX_ITER", "HYPERBOLIC_MAX_ITER",
                               "NEAR_PARABOLIC_BAND", "WARN_NEAR_PARABOLIC")),
            ("Validation", ("STRICT_VALIDATION", "STRICT_SIGN_CONVENTION")),
            ("Trajectory", ("DEFAULT_INTERVAL_HOURS",)),
            ("Plotting", ("DEFAULT_PLOT_POINTS", "DEFAULT_BODY_COLOR", "DEFAULT_TRAJ_COLOR",
                          "DEFAULT_TRAJ_COLOR_ADD", "DEFAULT_BODY_OPACITY")),
        )
        lines = ["InterstellarConfig:"]
        for title, names in groups:
            lines.append(f"  {title}:")
            lines.extend(f"    {name} = {getattr(self, name)!r}" for name in names)
        return "\n".join(lines)


# Process-wide settings shared by every module
config = InterstellarConfig()


@contextmanager
def temp_config(**overrides):
    """
    Apply settings for the duration of a with-block.

    Previous values come back when the block exits, whether it finishes
    normally or raises.

    Parameters
    ----------
    **overrides
        Setting names and their temporary values

    Yields
    ------
    InterstellarConfig
        The global config object, with overrides applied

    Raises
    ------
    AttributeError
        If a name is not an InterstellarConfig setting; nothing is changed.

    Examples
    --------
    >>> import interstellar
    >>> with interstellar.temp_config(STRICT_VALIDATION=False):
    ...     # Metadata problems become warnings
    ...     color = interstellar.RgbColor(1.2, 0.5, 0.5)
    >>> interstellar.config.STRICT_VALIDATION
    True
    """
    known = {setting.name for setting in fields(config)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise AttributeError(f"InterstellarConfig has no attribute(s) {unknown}. "
                             f"Known settings: {sorted(known)}")

    saved = {name: getattr(config, name) for name in overrides}
    for name, value in overrides.items():
        setattr(config, name, value)
    try:
        yield config
    finally:
        for name, value in saved.items():
            setattr(config, name, value)
