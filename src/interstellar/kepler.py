'''Kepler equation solvers and perifocal-to-ecliptic rotation

Scalar routines shared by OrbitalElements. All angles in radians.'''

import numpy as np
from typing import Optional
from .config import config
from .utils import get_logger
from .vector import Vector3

logger = get_logger(__name__)


# ========== KEPLER'S EQUATION ==========
def solve_kepler_elliptic(mean_anomaly: float, eccentricity: float,
                          tol: Optional[float] = None,
                          max_iter: Optional[int] = None) -> float:
    """
    Solve M = E - e*sin(E) for the eccentric anomaly E.

    Newton-Raphson iteration seeded with E0 = M. The loop always stops
    at the iteration cap; failing to reach the tolerance is not an error.

    Parameters
    ----------
    mean_anomaly : float
        Mean anomaly M [rad], not wrapped to [0, 2pi)
    eccentricity : float
        Eccentricity, 0 <= e < 1
    tol : float, optional
        Convergence threshold on |dE| (default: config.KEPLER_TOL)
    max_iter : int, optional
        Iteration cap (default: config.ELLIPTIC_MAX_ITER)

    Returns
    -------
    float
        Eccentric anomaly E [rad]
    """
    tol = config.KEPLER_TOL if tol is None else tol
    max_iter = config.ELLIPTIC_MAX_ITER if max_iter is None else max_iter

    E = mean_anomaly
    for _ in range(max_iter):
        delta = ((E - eccentricity * np.sin(E) - mean_anomaly)
                 / (1.0 - eccentricity * np.cos(E)))
        E -= delta
        if abs(delta) < tol:
            break
    else:
        logger.debug("Elliptic Kepler solver hit %d iterations (M=%g, e=%g)",
                     max_iter, mean_anomaly, eccentricity)
    return E


def hyperbolic_initial_guess(mean_anomaly: float, eccentricity: float) -> float:
    """Starting point H0 = sign(M) * ln(2|M|/e + 1.8)."""
    return np.sign(mean_anomaly) * np.log(2.0 * abs(mean_anomaly) / eccentricity + 1.8)


def solve_kepler_hyperbolic(mean_anomaly: float, eccentricity: float,
                            tol: Optional[float] = None,
                            max_iter: Optional[int] = None) -> float:
    """
    Solve M = e*sinh(H) - H for the hyperbolic anomaly H.

    Newton-Raphson iteration from hyperbolic_initial_guess(). An exact
    root (zero residual) ends the loop before the Newton step, which keeps
    H = 0 at M = 0 even for e == 1 where the derivative vanishes.

    Parameters
    ----------
    mean_anomaly : float
        Hyperbolic mean anomaly M [rad]
    eccentricity : float
        Eccentricity, e >= 1
    tol : float, optional
        Convergence threshold on |dH| (default: config.KEPLER_TOL)
    max_iter : int, optional
        Iteration cap (default: config.HYPERBOLIC_MAX_ITER)

    Returns
    -------
    float
        Hyperbolic anomaly H [rad]
    """
    tol = config.KEPLER_TOL if tol is None else tol
    max_iter = config.HYPERBOLIC_MAX_ITER if max_iter is None else max_iter

    H = hyperbolic_initial_guess(mean_anomaly, eccentricity)
    for _ in range(max_iter):
        residual = eccentricity * np.sinh(H) - H - mean_anomaly
        if residual == 0.0:
            break
        delta = residual / (eccentricity * np.cosh(H) - 1.0)
        H -= delta
        if abs(delta) < tol:
            break
    else:
        logger.debug("Hyperbolic Kepler solver hit %d iterations (M=%g, e=%g)",
                     max_iter, mean_anomaly, eccentricity)
    return H


# ========== ANOMALY CONVERSIONS ==========
def true_anomaly_elliptic(eccentric_anomaly: float, eccentricity: float) -> float:
    """True anomaly from tan(nu/2) = sqrt((1+e)/(1-e)) tan(E/2), quadrant-safe."""
    return 2.0 * np.arctan2(
        np.sqrt(1.0 + eccentricity) * np.sin(eccentric_anomaly / 2.0),
        np.sqrt(1.0 - eccentricity) * np.cos(eccentric_anomaly / 2.0)
    )


def true_anomaly_hyperbolic(hyperbolic_anomaly: float, eccentricity: float) -> float:
    """True anomaly from tan(nu/2) = sqrt((e+1)/(e-1)) tanh(H/2)."""
    return 2.0 * np.arctan2(
        np.sqrt(eccentricity + 1.0) * np.sinh(hyperbolic_anomaly / 2.0),
        np.sqrt(eccentricity - 1.0) * np.cosh(hyperbolic_anomaly / 2.0)
    )


# ========== FRAME ROTATION ==========
def rotate_to_ecliptic(x: float, y: float, inclination: float,
                       longitude_of_ascending_node: float,
                       argument_of_periapsis: float) -> Vector3:
    """
    Rotate an orbital-plane vector (x, y, 0) into the reference frame.

    Closed form of R_z(Omega) @ R_x(i) @ R_z(w) applied to (x, y, 0).

    Parameters
    ----------
    x, y : float
        In-plane components (x toward periapsis)
    inclination, longitude_of_ascending_node, argument_of_periapsis : float
        Orientation angles [rad]

    Returns
    -------
    Vector3
        Components in the reference (ecliptic) frame
    """
    cos_w = np.cos(argument_of_periapsis)
    sin_w = np.sin(argument_of_periapsis)
    cos_o = np.cos(longitude_of_ascending_node)
    sin_o = np.sin(longitude_of_ascending_node)
    cos_i = np.cos(inclination)
    sin_i = np.sin(inclination)

    x_ecl = x * (cos_w * cos_o - sin_w * sin_o * cos_i) - y * (sin_w * cos_o + cos_w * sin_o * cos_i)
    y_ecl = x * (cos_w * sin_o + sin_w * cos_o * cos_i) + y * (cos_w * cos_o * cos_i - sin_w * sin_o)
    z_ecl = x * (sin_w * sin_i) + y * (cos_w * sin_i)

    return Vector3(x_ecl, y_ecl, z_ecl)


def perifocal_to_ecliptic_matrix(inclination: float,
                                 longitude_of_ascending_node: float,
                                 argument_of_periapsis: float) -> np.ndarray:
    """
    Direction cosine matrix R_z(Omega) @ R_x(i) @ R_z(w).

    Full 3x3 form of rotate_to_ecliptic(), for array work.
    """
    omega = longitude_of_ascending_node
    w = argument_of_periapsis
    i = inclination
    # rotation about z-axis by longitude of ascending node
    R3_omega = np.array([
        [np.cos(omega), -np.sin(omega), 0],
        [np.sin(omega),  np.cos(omega), 0],
        [0,              0,             1]
    ])
    # rotation about x-axis by inclination
    R1_i = np.array([
        [1,  0,          0         ],
        [0,  np.cos(i), -np.sin(i) ],
        [0,  np.sin(i),  np.cos(i) ]
    ])
    # rotation about z-axis by argument of periapsis
    R3_w = np.array([
        [np.cos(w), -np.sin(w), 0],
        [np.sin(w),  np.cos(w), 0],
        [0,          0,         1]
    ])
    return R3_omega @ R1_i @ R3_w
