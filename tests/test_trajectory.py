"""
Test suite for Trajectory class.

Tests cover:
- Construction and bounds
- Time grids (uniform and fixed interval)
- Raw array output methods
- DataFrame export
- String representations
- Plotting functions (smoke tests)
"""

import pytest
import numpy as np
import pandas as pd
import plotly.graph_objects as go
from interstellar import (
    Catalog, InterstellarObject, OrbitalElements, Trajectory, Traj,
    Vector3, AU_TO_METERS, temp_config,
)

J2000 = 2451545.0
GM_SUN = 1.32712440018e20


@pytest.fixture(scope="module")
def catalog():
    return Catalog()


@pytest.fixture
def earth_traj(catalog):
    return Trajectory(catalog.get('earth'), J2000, J2000 + 365.25)


@pytest.fixture
def borisov_traj():
    borisov = InterstellarObject.create_borisov()
    return Trajectory(borisov, 2458826.5 - 200.0, 2458826.5 + 200.0)


class TestConstruction:
    """Test trajectory creation."""

    def test_attributes(self, earth_traj, catalog):
        assert earth_traj.source is catalog.get('earth')
        assert earth_traj.t0 == J2000
        assert earth_traj.tf == J2000 + 365.25
        assert earth_traj.duration == 365.25
        assert earth_traj.name == 'Earth'

    def test_zero_duration_raises(self, catalog):
        with pytest.raises(ValueError, match="non-zero duration"):
            Trajectory(catalog.get('mars'), J2000, J2000)

    def test_source_without_position_raises(self):
        with pytest.raises(TypeError):
            Trajectory(object(), J2000, J2000 + 1)

    def test_orbital_elements_source(self):
        orbit = OrbitalElements(1.0e11, 0.1, 0.0, 0.0, 0.0, 0.0, J2000, GM_SUN)
        traj = Traj(orbit, J2000, J2000 + 10)
        assert traj.name == 'OrbitalElements'
        assert traj.sample_raw(5).shape == (5, 6)

    def test_backward_window(self, catalog):
        traj = Trajectory(catalog.get('earth'), J2000, J2000 - 30.0)
        assert traj.duration == -30.0
        assert traj.contains_time(J2000 - 10.0)
        times = traj.get_times_interval(hours=24)
        assert times[0] == J2000
        assert times[-1] == J2000 - 30.0
        assert np.all(np.diff(times) < 0)


class TestTimeGrids:
    """Test sampling times."""

    def test_get_times(self, earth_traj):
        times = earth_traj.get_times(11)
        assert len(times) == 11
        assert times[0] == earth_traj.t0
        assert times[-1] == earth_traj.tf

    def test_interval_default_six_hours(self, catalog):
        traj = Trajectory(catalog.get('earth'), J2000, J2000 + 1.0)
        times = traj.get_times_interval()
        assert len(times) == 5
        np.testing.assert_allclose(np.diff(times), 0.25)

    def test_interval_appends_end(self, catalog):
        traj = Trajectory(catalog.get('earth'), J2000, J2000 + 1.1)
        times = traj.get_times_interval(hours=12)
        np.testing.assert_allclose(times, [J2000, J2000 + 0.5, J2000 + 1.0, J2000 + 1.1])

    def test_interval_follows_config(self, catalog):
        traj = Trajectory(catalog.get('earth'), J2000, J2000 + 1.0)
        with temp_config(DEFAULT_INTERVAL_HOURS=12.0):
            assert len(traj.get_times_interval()) == 3

    def test_non_positive_interval_raises(self, earth_traj):
        with pytest.raises(ValueError, match="positive"):
            earth_traj.get_times_interval(hours=0)


class TestRawArrays:
    """Test array output methods."""

    def test_positions_velocities_shape(self, earth_traj):
        times = earth_traj.get_times(7)
        assert earth_traj.positions(times).shape == (7, 3)
        assert earth_traj.velocities(times).shape == (7, 3)

    def test_positions_match_source(self, earth_traj):
        t = J2000 + 100.0
        row = earth_traj.positions([t])[0]
        np.testing.assert_array_equal(row, earth_traj.source.position(t).to_numpy())

    def test_sample_raw(self, borisov_traj):
        states = borisov_traj.sample_raw(50)
        assert states.shape == (50, 6)
        assert np.all(np.isfinite(states))

    def test_sample_raw_too_few_points(self, earth_traj):
        with pytest.raises(ValueError, match="at least 2 points"):
            earth_traj.sample_raw(1)

    def test_evaluate_raw_scalar(self, earth_traj):
        state = earth_traj.evaluate_raw(J2000 + 1.0)
        assert state.shape == (6,)

    def test_evaluate_raw_numpy_scalars(self, borisov_traj):
        expected = borisov_traj.evaluate_raw(2458827.0)
        for t in (np.int64(2458827), np.float64(2458827.0), np.array(2458827.0)):
            state = borisov_traj.evaluate_raw(t)
            assert state.shape == (6,)
            np.testing.assert_array_equal(state, expected)

    def test_state_at(self, borisov_traj):
        r, v = borisov_traj.state_at(2458826.5)
        assert isinstance(r, Vector3)
        assert v.magnitude() > 0

    def test_state_at_out_of_bounds(self, earth_traj):
        with pytest.raises(ValueError, match="outside the trajectory window"):
            earth_traj.state_at(J2000 - 1.0)

    def test_call(self, earth_traj):
        t = J2000 + 12.0
        assert earth_traj(t) == earth_traj.source.position(t)
        with pytest.raises(ValueError):
            earth_traj(J2000 + 400.0)

    def test_contains_time(self, earth_traj):
        assert earth_traj.contains_time(J2000)
        assert earth_traj.contains_time(J2000 + 365.25)
        assert not earth_traj.contains_time(J2000 + 366.0)

    def test_closed_orbit_returns(self, earth_traj):
        """Earth is back near its start after one sidereal year."""
        states = earth_traj.sample_raw(3)
        gap = np.linalg.norm(states[0, :3] - states[-1, :3])
        assert gap < 0.01 * AU_TO_METERS


class TestDataFrame:
    """Test DataFrame export."""

    def test_columns(self, earth_traj):
        df = earth_traj.to_dataframe(n_points=20)
        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == ['jd', 'x', 'y', 'z', 'vx', 'vy', 'vz']
        assert len(df) == 20

    def test_explicit_times(self, borisov_traj):
        times = np.array([2458826.5, 2458830.0])
        df = borisov_traj.to_dataframe(times=times)
        np.testing.assert_array_equal(df['jd'].to_numpy(), times)
        assert df['x'].iloc[0] == borisov_traj.source.position(2458826.5).x

    def test_single_time(self, borisov_traj):
        df = borisov_traj.to_dataframe(times=np.int64(2458827))
        assert len(df) == 1
        assert df['jd'].iloc[0] == 2458827.0
        assert df['vx'].iloc[0] == borisov_traj.source.velocity(2458827.0).x


class TestStringRepresentations:
    """Test __repr__ and __str__."""

    def test_repr(self, earth_traj):
        text = repr(earth_traj)
        assert text.startswith("Trajectory(source=Earth")
        assert "duration=365.25" in text

    def test_str(self, borisov_traj):
        assert str(borisov_traj).startswith("Trajectory of Borisov")


class TestPlotting:
    """Smoke tests for plotly output."""

    def test_plot_3d(self, earth_traj):
        fig = earth_traj.plot_3d(n_points=50)
        assert isinstance(fig, go.Figure)
        assert len(fig.data) == 2
        assert fig.data[0].name == 'Central Body'
        assert fig.data[1].name == 'Earth'

    def test_plot_units(self, earth_traj):
        fig_au = earth_traj.plot_3d(n_points=10, units='au', show_body=False)
        fig_m = earth_traj.plot_3d(n_points=10, units='m', show_body=False)
        assert len(fig_au.data) == 1
        x_au = np.asarray(fig_au.data[0].x)
        x_m = np.asarray(fig_m.data[0].x)
        np.testing.assert_allclose(x_au * AU_TO_METERS, x_m)
        assert fig_m.layout.scene.xaxis.title.text == 'X [m]'

    def test_unknown_units(self, earth_traj):
        with pytest.raises(ValueError, match="Unknown length unit"):
            earth_traj.plot_3d(n_points=10, units='parsec')

    def test_add_to_plot(self, earth_traj, borisov_traj):
        fig = earth_traj.plot_3d(n_points=20)
        returned = borisov_traj.add_to_plot(fig, n_points=20, color='cyan')
        assert returned is fig
        assert len(fig.data) == 3
        assert fig.data[2].name == 'Trajectory 2'
        assert fig.data[2].line.color == 'cyan'

    def test_add_to_plot_named(self, borisov_traj):
        fig = borisov_traj.add_to_plot(go.Figure(), n_points=10, name='2I')
        assert fig.data[0].name == '2I'
