"""Shared fixtures: canned FPL API payloads and a mocked HTTP session."""

import copy
from unittest.mock import Mock

import pytest
import requests

from fplcache.client import FPLClient
from fplcache.config import PipelineConfig

BASE_URL = 'https://fpl.test/api'

TEAMS = [
    {'id': 1, 'name': 'Arsenal', 'short_name': 'ARS', 'strength': 5},
    {'id': 2, 'name': 'Chelsea', 'short_name': 'CHE', 'strength': 4},
    {'id': 3, 'name': 'Liverpool', 'short_name': 'LIV', 'strength': 5},
]


def _player(id, web_name, first, second, element_type, team, form, minutes, **extra):
    player = {
        'id': id,
        'web_name': web_name,
        'first_name': first,
        'second_name': second,
        'element_type': element_type,
        'team': team,
        'form': form,
        'minutes': minutes,
        'now_cost': 55,
        'cost_change_event': 0,
        'selected_by_percent': '5.0',
        'event_points': 2,
        'total_points': 40,
        'bonus': 1,
        'goals_scored': 0,
        'assists': 0,
        'clean_sheets': 0,
        'status': 'a',
    }
    player.update(extra)
    return player


PLAYERS = [
    _player(1, 'Saka', 'Bukayo', 'Saka', 3, 1, '7.5', 900,
            now_cost=101, cost_change_event=1, selected_by_percent='45.25',
            event_points=8, total_points=98, bonus=9, goals_scored=6, assists=7),
    _player(2, 'Palmer', 'Cole', 'Palmer', 3, 2, '8.0', 810,
            now_cost=112, cost_change_event=-1, selected_by_percent='61.0',
            event_points=13, total_points=110, goals_scored=9, assists=5),
    _player(3, 'Raya', 'David', 'Raya Martin', 1, 1, '0.0', 900,
            now_cost=56, event_points=6, clean_sheets=4),
    _player(4, 'Nwaneri', 'Ethan', 'Nwaneri', 3, 1, '9.0', 45, now_cost=45),
    _player(5, 'M.Salah', 'Mohamed', 'Salah', 3, 3, '7.5', 990,
            now_cost=130, selected_by_percent='70.1', event_points=5, total_points=120),
    _player(6, 'Gabriel', 'Gabriel', 'dos Santos Magalhães', 2, 1, '4.0', 900,
            now_cost=62, event_points=1),
    _player(7, 'Jackson', 'Nicolas', 'Jackson', 4, 2, '6.0', 700,
            now_cost=78, event_points=9),
]

EVENTS = [
    {'id': 9, 'deadline_time': '2024-10-26T13:30:00Z', 'is_current': False, 'is_next': False},
    {'id': 10, 'deadline_time': '2024-11-02T11:00:00Z', 'is_current': True, 'is_next': False},
    {'id': 11, 'deadline_time': '2024-11-09T11:00:00Z', 'is_current': False, 'is_next': True},
]

FIXTURES = [
    {
        'id': 100, 'event': 10, 'kickoff_time': '2024-11-02T15:00:00Z', 'finished': True,
        'team_h': 1, 'team_a': 2, 'team_h_score': 2, 'team_a_score': 1,
        'team_h_difficulty': 3, 'team_a_difficulty': 4,
    },
    {
        'id': 101, 'event': 11, 'kickoff_time': '2024-11-10T16:30:00Z', 'finished': False,
        'team_h': 2, 'team_a': 1, 'team_h_score': None, 'team_a_score': None,
        'team_h_difficulty': 4, 'team_a_difficulty': 5,
    },
    {
        'id': 102, 'event': None, 'kickoff_time': None, 'finished': False,
        'team_h': 3, 'team_a': 1, 'team_h_score': None, 'team_a_score': None,
        'team_h_difficulty': 4, 'team_a_difficulty': 4,
    },
]

ENTRY = {
    'id': 123456,
    'name': 'Gooners XI',
    'player_first_name': 'Alex',
    'player_last_name': 'Hunter',
    'summary_overall_points': 512,
    'summary_overall_rank': 12345,
    'summary_event_rank': 0,
}

PICKS = {
    'picks': [
        {'element': 7, 'position': 1, 'multiplier': 1, 'is_captain': False, 'is_vice_captain': False},
        {'element': 3, 'position': 2, 'multiplier': 1, 'is_captain': False, 'is_vice_captain': False},
        {'element': 1, 'position': 3, 'multiplier': 2, 'is_captain': True, 'is_vice_captain': False},
        {'element': 6, 'position': 4, 'multiplier': 1, 'is_captain': False, 'is_vice_captain': False},
        {'element': 5, 'position': 5, 'multiplier': 1, 'is_captain': False, 'is_vice_captain': True},
        {'element': 2, 'position': 14, 'multiplier': 0, 'is_captain': False, 'is_vice_captain': False},
        {'element': 999, 'position': 13, 'multiplier': 0, 'is_captain': False, 'is_vice_captain': False},
        {'element': 4, 'position': 12, 'multiplier': 0, 'is_captain': False, 'is_vice_captain': False},
    ],
    'entry_history': {
        'event': 10,
        'points': 65,
        'value': 1003,
        'bank': 5,
        'event_transfers': 1,
        'event_transfers_cost': 4,
    },
}


def make_response(payload, status=200):
    """Mock of a requests.Response returning ``payload`` as JSON."""
    response = Mock(spec=requests.Response)
    response.status_code = status
    response.ok = status < 400
    response.json.return_value = payload
    return response


def make_session(routes):
    """
    Mock session dispatching on path relative to BASE_URL.

    A route value may be a payload, a prepared Mock response, or an
    exception instance to raise. Unknown paths answer 404.
    """
    session = Mock(spec=requests.Session)

    def get(url, headers=None, timeout=None):
        path = url[len(BASE_URL):]
        route = routes.get(path)
        if isinstance(route, Exception):
            raise route
        if route is None:
            return make_response({'detail': 'Not found.'}, status=404)
        if isinstance(route, Mock):
            return route
        return make_response(copy.deepcopy(route))

    session.get.side_effect = get
    return session


@pytest.fixture
def bootstrap_payload():
    return {'elements': copy.deepcopy(PLAYERS), 'teams': copy.deepcopy(TEAMS), 'events': copy.deepcopy(EVENTS)}


@pytest.fixture
def fixtures_payload():
    return copy.deepcopy(FIXTURES)


@pytest.fixture
def entry_payload():
    return copy.deepcopy(ENTRY)


@pytest.fixture
def picks_payload():
    return copy.deepcopy(PICKS)


@pytest.fixture
def routes(bootstrap_payload, fixtures_payload, entry_payload, picks_payload):
    return {
        '/bootstrap-static/': bootstrap_payload,
        '/fixtures/': fixtures_payload,
        '/entry/123456/': entry_payload,
        '/entry/123456/event/10/picks/': picks_payload,
    }


@pytest.fixture
def client(routes):
    return FPLClient(base_url=BASE_URL, timeout=15, session=make_session(routes))


@pytest.fixture
def config(tmp_path):
    return PipelineConfig(base_url=BASE_URL, user_id='123456', output_path=tmp_path / 'data' / 'cache.json')
