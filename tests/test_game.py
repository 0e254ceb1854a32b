import sys
import pathlib

sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

import pytest

from config import AppConfig
from game import GameSession
from state import GameState, Room


@pytest.fixture
def session(host, rng):
    return GameSession(host, rng=rng)


@pytest.fixture
def renders(session):
    seen = []
    session.subscribe(seen.append)
    return seen


def test_new_session_starts_from_defaults(session, host):
    assert session.state == GameState()
    assert [o.id for o in session.objects_here()] == ["bed", "computer", "wardrobe"]
    assert host.pending == {}


def test_interact_installs_new_state_and_notifies(session, renders):
    session.interact("wardrobe")
    assert session.state.last_actions == ["Guarda-roupa (relax)"]
    assert session.state.time == 9
    assert renders == [session.state]


def test_unusable_interaction_leaves_state_identical(session, renders):
    before = session.state.copy()
    session.interact("bed")
    assert session.state == before
    assert renders == []


def test_unknown_object_is_ignored(session, renders):
    before = session.state.copy()
    session.interact("hot-tub")
    assert session.state == before
    assert renders == []


def test_set_room(session):
    session.set_room("kitchen")
    assert session.state.current_room is Room.KITCHEN
    session.set_room(Room.GYM)
    assert session.state.current_room is Room.GYM
    assert [o.id for o in session.objects_here()][0] == "exercise"


def test_set_room_rejects_unknown_room(session, renders):
    session.set_room("attic")
    assert session.state.current_room is Room.BEDROOM
    assert renders == []


def test_toggle_playing_starts_and_stops_ticks(session, host):
    session.toggle_playing()
    assert session.state.is_playing
    assert host.delays == [1000]

    host.fire()
    assert session.state.time == 8.5
    assert host.delays == [1000]

    session.toggle_playing()
    assert not session.state.is_playing
    assert host.pending == {}


def test_set_speed_while_running_restarts_timer(session, host):
    session.toggle_playing()
    session.set_speed(2)
    assert session.state.game_speed == 2
    assert host.delays == [500]
    assert len(host.cancelled) == 1

    host.fire()
    assert session.state.time == 9.0


def test_set_speed_while_idle_does_not_start_timer(session, host):
    session.set_speed(3)
    assert session.state.game_speed == 3
    assert host.pending == {}

    session.toggle_playing()
    assert host.delays == [333]


def test_tick_is_ignored_when_not_playing(session, renders):
    session.on_tick()
    assert session.state == GameState()
    assert renders == []


def test_reset_after_play(session, host):
    session.set_room("gym")
    session.interact("yoga-mat")
    session.set_speed(2.5)
    session.toggle_playing()
    for _ in range(10):
        host.fire()

    session.reset()

    assert session.state == GameState()
    assert session.state.last_used == {}
    assert not session.scheduler.running
    assert host.pending == {}


def test_volume_and_mute_do_not_touch_game_state(session, renders):
    session.set_volume(0.8)
    session.toggle_mute()
    assert session.soundtrack.volume == 0.8
    assert session.soundtrack.muted
    assert session.state == GameState()
    assert renders == []


def test_config_seeds_rng_and_soundtrack(host):
    cfg = AppConfig(volume=0.1, muted=True, seed=99)
    first = GameSession(host, config=cfg)
    second = GameSession(host, config=cfg)
    assert first.soundtrack.volume == 0.1
    assert first.soundtrack.muted
    assert first.rng.random() == second.rng.random()
