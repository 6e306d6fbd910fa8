'''Sampled trajectories of catalog bodies over a Julian Date window

Trajectory evaluates any object exposing position(jd)/velocity(jd)
(OrbitalElements, CelestialBody, InterstellarObject) on time grids and
exports the samples to NumPy, pandas and Plotly.'''

import numpy as np
import pandas as pd
import plotly.graph_objects as go
from typing import Optional, Union
from .config import config
from .constants import AU_TO_METERS
from .utils import get_logger
from .vector import Vector3

logger = get_logger(__name__)

STATE_COLUMNS = ('jd', 'x', 'y', 'z', 'vx', 'vy', 'vz')
_LENGTH_UNITS = {'m': 1.0, 'km': 1000.0, 'au': AU_TO_METERS}


class Trajectory:
    """
    A body followed across a window of Julian Dates.

    Nothing is integrated or cached: every sample is a fresh two-body
    evaluation of the source, so any time grid inside the window is exact.

    Attributes:
        source: Object with position(jd) and velocity(jd) methods
        t0: Window start [JD]
        tf: Window end [JD], may precede t0
    """
    # ========== CONSTRUCTION ==========
    def __init__(self, source, t0: float, tf: float):
        if not (hasattr(source, 'position') and hasattr(source, 'velocity')):
            raise TypeError("Trajectory source must provide position() and velocity()")
        if t0 == tf:
            raise ValueError(f"Trajectory needs a non-zero duration, got t0 = tf = {t0}")
        self._source = source
        self._t0 = float(t0)
        self._tf = float(tf)

    # ========== PROPERTY ACCESS ==========
    @property
    def source(self):
        return self._source

    @property
    def t0(self) -> float:
        return self._t0

    @property
    def tf(self) -> float:
        return self._tf

    @property
    def duration(self) -> float:
        """Signed window length [days]."""
        return self._tf - self._t0

    @property
    def name(self) -> str:
        """Display name of the source, falling back to its type."""
        return getattr(self._source, 'name', type(self._source).__name__)

    # ========== TIME GRIDS ==========
    def contains_time(self, t: float) -> bool:
        """True if t lies inside the window (either direction)."""
        lo, hi = sorted((self._t0, self._tf))
        return lo <= t <= hi

    def _check_window(self, t: float):
        if not self.contains_time(t):
            raise ValueError(f"JD {t} is outside the trajectory window "
                             f"[{self._t0}, {self._tf}]")

    def get_times(self, n_points: int = 100) -> np.ndarray:
        """n_points evenly spaced Julian Dates from t0 to tf inclusive."""
        return np.linspace(self._t0, self._tf, n_points)

    def get_times_interval(self, hours: Optional[float] = None) -> np.ndarray:
        """
        Julian Dates spaced by a fixed step, always ending on tf.

        Parameters:
            hours: Step length (default: config.DEFAULT_INTERVAL_HOURS)

        Returns:
            Array running from t0 toward tf; the last step may be shorter
        """
        hours = config.DEFAULT_INTERVAL_HOURS if hours is None else hours
        if hours <= 0:
            raise ValueError(f"Sampling interval must be positive, got {hours} h")
        step = np.copysign(hours / 24.0, self.duration)
        n_steps = int(np.floor(abs(self.duration) / abs(step)))
        times = self._t0 + step * np.arange(n_steps + 1)
        if not np.isclose(times[-1], self._tf, rtol=0.0, atol=1e-9):
            times = np.append(times, self._tf)
        return times

    # ========== EVALUATION ==========
    def state_at(self, t: float):
        """
        Position [m] and velocity [m/s] at one instant inside the window.

        Raises:
            ValueError: if t is outside [t0, tf]
        """
        self._check_window(t)
        if hasattr(self._source, 'state'):
            return self._source.state(t)
        return self._source.position(t), self._source.velocity(t)

    def positions(self, times: Union[np.ndarray, list]) -> np.ndarray:
        """Positions [m] at the given Julian Dates, shape (n, 3)."""
        rows = [self._source.position(t).to_tuple() for t in np.asarray(times, dtype=float)]
        return np.array(rows).reshape(-1, 3)

    def velocities(self, times: Union[np.ndarray, list]) -> np.ndarray:
        """Velocities [m/s] at the given Julian Dates, shape (n, 3)."""
        rows = [self._source.velocity(t).to_tuple() for t in np.asarray(times, dtype=float)]
        return np.array(rows).reshape(-1, 3)

    def evaluate_raw(self, times: Union[float, np.ndarray, list]) -> np.ndarray:
        """
        Stacked [x, y, z, vx, vy, vz] states.

        A scalar time is bounds-checked and gives shape (6,); a sequence
        of times gives shape (n, 6).
        """
        if np.ndim(times) == 0:
            position, velocity = self.state_at(float(times))
            return np.concatenate([position.to_numpy(), velocity.to_numpy()])
        return np.hstack([self.positions(times), self.velocities(times)])

    def sample_raw(self, n_points: int = 100) -> np.ndarray:
        """
        States on an even grid across the window.

        Parameters:
            n_points: Grid size, at least 2 (default: 100)

        Returns:
            Array of shape (n_points, 6)
        """
        if n_points < 2:
            raise ValueError("Sampling needs at least 2 points; use state_at() for one instant")
        return self.evaluate_raw(self.get_times(n_points))

    def to_dataframe(self, times: Optional[np.ndarray] = None,
                     n_points: int = 1000) -> pd.DataFrame:
        """
        Tabulate sampled states.

        Parameters:
            times: Julian Dates to evaluate; an even grid when None
            n_points: Grid size used when times is None (default: 1000)

        Returns:
            DataFrame with columns jd, x, y, z [m], vx, vy, vz [m/s]
        """
        times = self.get_times(n_points) if times is None else np.atleast_1d(np.asarray(times, dtype=float))
        table = np.column_stack([times, self.evaluate_raw(times)])
        logger.debug("Tabulated %d states of %s", len(times), self.name)
        return pd.DataFrame(table, columns=list(STATE_COLUMNS))

    # ========== SPECIAL METHODS ==========
    def __repr__(self):
        return (f"Trajectory(source={self.name}, "
                f"t0={self._t0}, tf={self._tf}, duration={self.duration})")

    def __str__(self):
        return f"Trajectory of {self.name}: JD ∈ [{self._t0}, {self._tf}]"

    def __call__(self, t: float) -> Vector3:
        """Bounds-checked shorthand for source.position(t)."""
        self._check_window(t)
        return self._source.position(t)

    # ========== PLOTTING ==========
    def plot_3d(self, n_points: Optional[int] = None, show_body: bool = True,
                units: str = 'au', body_color: Optional[str] = None,
                traj_color: Optional[str] = None,
                body_opacity: Optional[float] = None) -> go.Figure:
        """
        Draw the path in 3D with the Sun marked at the origin.

        Parameters:
            n_points: Samples along the path (default: config.DEFAULT_PLOT_POINTS)
            show_body: Mark the central body (default: True)
            units: Axis length unit, 'm', 'km' or 'au' (default: 'au')
            body_color: Sun marker color (default: config.DEFAULT_BODY_COLOR)
            traj_color: Path color (default: config.DEFAULT_TRAJ_COLOR)
            body_opacity: Sun marker opacity (default: config.DEFAULT_BODY_OPACITY)

        Returns:
            New plotly Figure
        """
        n_points = config.DEFAULT_PLOT_POINTS if n_points is None else n_points
        body_color = config.DEFAULT_BODY_COLOR if body_color is None else body_color
        traj_color = config.DEFAULT_TRAJ_COLOR if traj_color is None else traj_color
        body_opacity = config.DEFAULT_BODY_OPACITY if body_opacity is None else body_opacity
        self._length_scale(units)

        fig = go.Figure()
        if show_body:
            fig.add_trace(go.Scatter3d(
                x=[0.0], y=[0.0], z=[0.0],
                mode='markers',
                marker=dict(size=8, color=body_color, opacity=body_opacity),
                name='Central Body',
                hoverinfo='name'
            ))

        self.add_to_plot(fig, n_points=n_points, color=traj_color,
                         name=self.name, units=units)

        axis_label = units.lower()
        fig.update_layout(
            title=f'Heliocentric Trajectory: {self.name}',
            scene=dict(
                xaxis_title=f'X [{axis_label}]',
                yaxis_title=f'Y [{axis_label}]',
                zaxis_title=f'Z [{axis_label}]',
                aspectmode='data'
            ),
            showlegend=True
        )
        return fig

    def add_to_plot(self, fig: go.Figure, n_points: Optional[int] = None,
                    color: Optional[str] = None, name: Optional[str] = None,
                    units: str = 'au', **kwargs) -> go.Figure:
        """
        Overlay this path on an existing figure.

        Parameters:
            fig: Figure to draw on (modified in place)
            n_points: Samples along the path (default: config.DEFAULT_PLOT_POINTS)
            color: Path color (default: config.DEFAULT_TRAJ_COLOR_ADD)
            name: Legend entry; numbered after the paths already drawn when None
            units: Axis length unit, must match the figure (default: 'au')
            **kwargs: Passed through to go.Scatter3d

        Returns:
            The same figure
        """
        n_points = config.DEFAULT_PLOT_POINTS if n_points is None else n_points
        color = config.DEFAULT_TRAJ_COLOR_ADD if color is None else color
        xyz = self.positions(self.get_times(n_points)) / self._length_scale(units)

        if name is None:
            drawn = [trace for trace in fig.data
                     if isinstance(trace, go.Scatter3d) and trace.mode == 'lines']
            name = f'Trajectory {len(drawn) + 1}'

        fig.add_trace(go.Scatter3d(
            x=xyz[:, 0], y=xyz[:, 1], z=xyz[:, 2],
            mode='lines',
            line=dict(color=color, width=3),
            name=name,
            hovertemplate='x: %{x:.4f}<br>y: %{y:.4f}<br>z: %{z:.4f}<extra></extra>',
            **kwargs
        ))
        return fig

    @staticmethod
    def _length_scale(units: str) -> float:
        """Meters per plotting unit."""
        scale = _LENGTH_UNITS.get(units.lower())
        if scale is None:
            raise ValueError(f"Unknown length unit '{units}', expected one of {list(_LENGTH_UNITS)}")
        return scale
