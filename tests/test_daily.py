import pytest
import requests

from wordle_entropy.daily import DailyPuzzle, fetch_daily_puzzle
from wordle_entropy.errors import DailyPuzzleError


class FakeResponse:
    def __init__(self, payload, status=200):
        self._payload = payload
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Client Error")

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.urls = []

    def get(self, url, timeout=None):
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.response


PAYLOAD = {
    "id": 1093,
    "solution": "House",
    "print_date": "2024-06-01",
    "days_since_launch": 1078,
    "editor": "Tracy Bennett",
}


def test_fetch_for_date():
    session = FakeSession(FakeResponse(PAYLOAD))
    puzzle = fetch_daily_puzzle("2024-06-01", session=session)
    assert puzzle == DailyPuzzle(1093, "house", "2024-06-01", 1078, "Tracy Bennett")
    assert session.urls == ["https://www.nytimes.com/svc/wordle/v2/2024-06-01.json"]


def test_defaults_to_today():
    session = FakeSession(FakeResponse(PAYLOAD))
    fetch_daily_puzzle(session=session)
    assert session.urls[0].endswith(".json")


@pytest.mark.parametrize("date", ["2024/06/01", "yesterday", "24-6-1"])
def test_bad_date(date):
    with pytest.raises(ValueError):
        fetch_daily_puzzle(date, session=FakeSession())


def test_http_error():
    with pytest.raises(DailyPuzzleError):
        fetch_daily_puzzle("2024-06-01", session=FakeSession(FakeResponse({}, status=404)))


def test_network_error():
    session = FakeSession(error=requests.exceptions.ConnectionError("offline"))
    with pytest.raises(DailyPuzzleError):
        fetch_daily_puzzle("2024-06-01", session=session)


def test_bad_json():
    session = FakeSession(FakeResponse(ValueError("Expecting value")))
    with pytest.raises(DailyPuzzleError):
        fetch_daily_puzzle("2024-06-01", session=session)


@pytest.mark.parametrize("solution", [None, "toolong", 12345])
def test_invalid_solution(solution):
    session = FakeSession(FakeResponse(dict(PAYLOAD, solution=solution)))
    with pytest.raises(DailyPuzzleError):
        fetch_daily_puzzle("2024-06-01", session=session)
