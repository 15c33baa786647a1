"""
Test Odometer Replay - Track reading, simulated tracks and the replay loop
"""

import sys
import math
import pytest
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from missions.odometer_replay import OdometerReplay, main, read_track
from gps_odometer.flight import GeoCoordinate
from gps_odometer.flight.odometer import MPS_TO_KNOTS
from gps_odometer.utils.config import load_config
from simulation.mock_gps import MockGpsTrack


REPO_CONFIG = Path(__file__).parent.parent / 'config' / 'odometer_params.yaml'
SAMPLE_TRACK = Path(__file__).parent.parent / 'config' / 'tracks' / 'sample_track.csv'


@pytest.fixture
def track_file(tmp_path):
    path = tmp_path / 'track.csv'
    path.write_text(
        "lat,lon,alt,speed_knots\n"
        "12.9716000,77.5946000,20.0,9.7\n"
        "12.9716449,77.5946000,20.5,9.7\n"
    )
    return path


class TestReadTrack:

    def test_read_rows(self, track_file):
        samples = read_track(str(track_file))

        assert len(samples) == 2
        assert samples[0].coordinate == GeoCoordinate(129716000, 775946000)
        assert samples[1].coordinate == GeoCoordinate(129716449, 775946000)
        assert samples[1].altitude == 20.5
        assert samples[1].ground_speed == 9.7

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_track(str(tmp_path / 'missing.csv'))

    def test_missing_column(self, tmp_path):
        path = tmp_path / 'bad.csv'
        path.write_text("lat,lon,alt\n1,2,3\n")
        with pytest.raises(ValueError, match="speed_knots"):
            read_track(str(path))

    def test_bad_value(self, tmp_path):
        path = tmp_path / 'bad.csv'
        path.write_text("lat,lon,alt,speed_knots\n1,2,3,fast\n")
        with pytest.raises(ValueError, match=":2:"):
            read_track(str(path))

    def test_infinite_coordinate(self, tmp_path):
        path = tmp_path / 'bad.csv'
        path.write_text("lat,lon,alt,speed_knots\ninf,2,3,4\n")
        with pytest.raises(ValueError, match=":2:"):
            read_track(str(path))


class TestMockGpsTrack:

    def test_starts_at_start(self):
        track = MockGpsTrack(start_lat=10.0, start_lon=20.0)
        assert track.position_at(0) == GeoCoordinate.from_degrees(10.0, 20.0)

    def test_heading_east_keeps_latitude(self):
        track = MockGpsTrack(heading_deg=90.0)
        first = track.position_at(0)
        later = track.position_at(10)

        assert later.lat == first.lat
        assert later.lon > first.lon

    def test_reported_speed(self):
        assert math.isclose(MockGpsTrack(speed_mps=2.0).sample_at(0).ground_speed,
                            2.0 * MPS_TO_KNOTS)
        assert MockGpsTrack(reported_speed_knots=1.5).sample_at(3).ground_speed == 1.5

    def test_jitter_is_reproducible(self):
        a = list(MockGpsTrack(jitter_m=3.0, seed=9).samples(5))
        b = list(MockGpsTrack(jitter_m=3.0, seed=9).samples(5))
        assert [s.coordinate for s in a] == [s.coordinate for s in b]


class TestOdometerReplay:

    def test_sample_track(self):
        config = load_config(str(SAMPLE_TRACK.parent.parent / 'odometer_params.yaml'))
        replay = OdometerReplay(config)
        state = replay.run(read_track(str(SAMPLE_TRACK)))

        stats = replay.odometer.get_stats()
        assert stats['samples_consumed'] == 7
        # five moving legs counted, the final stationary one dropped
        assert stats['samples_accepted'] == 5
        assert stats['samples_rejected'] == 1
        assert abs(state.odometer - 5 * 500) <= 10
        # last fix is ~25 m north of home
        assert state.home_bearing == 180
        assert state.home_distance == pytest.approx(0.025, abs=0.001)

    def test_simulated_track_without_home(self):
        config = load_config()
        replay = OdometerReplay(config)
        track = MockGpsTrack(speed_mps=4.0)
        state = replay.run(list(track.samples(11)))

        assert abs(state.odometer - 10 * 400) <= 20
        assert state.home_distance == 0.0
        replay.report()


class TestReplayCommandLine:
    """Tests for the command line entry point."""

    def run_main(self, monkeypatch, *args):
        monkeypatch.setattr(sys, 'argv', ['odometer_replay.py'] + list(args))
        main()

    @pytest.mark.parametrize('content', [
        "odometer:\n  max_speed_diff_kmh: fast\n",
        "odometer: 5\n",
        "home:\n  lat: north\n",
        "- not a mapping\n",
    ])
    def test_bad_config_exits(self, monkeypatch, tmp_path, content):
        path = tmp_path / 'odo.yaml'
        path.write_text(content)

        with pytest.raises(SystemExit) as exc_info:
            self.run_main(monkeypatch, '--config', str(path), '--simulate', '3')
        assert exc_info.value.code == 1

    def test_missing_track_exits(self, monkeypatch, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            self.run_main(monkeypatch, '--track', str(tmp_path / 'missing.csv'))
        assert exc_info.value.code == 1

    def test_track_resolved_from_working_directory(self, monkeypatch, tmp_path, track_file):
        monkeypatch.chdir(tmp_path)
        self.run_main(monkeypatch, '--config', str(REPO_CONFIG), '--track', track_file.name)

    def test_simulate(self, monkeypatch):
        self.run_main(monkeypatch, '--simulate', '5')
