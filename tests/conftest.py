import json
import threading
from pathlib import Path

import pytest
import requests

from house_hunt.config import Settings

FIXTURES = Path(__file__).parent / 'fixtures'


def load_fixture_text(name: str) -> str:
    return (FIXTURES / name).read_text(encoding='utf-8')


def load_fixture(name: str):
    return json.loads(load_fixture_text(name))


class FakeResponse:
    def __init__(self, text: str, status_code: int = 200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f'{self.status_code} Client Error', response=self)


class FakeHttp:
    '''
    Stands in for the `requests` module. `routes` maps a postal_code from the
    request body to either a FakeResponse or an exception to raise.
    '''

    def __init__(self, routes: dict):
        self.routes = routes
        self.calls: list[dict] = []
        self.__lock = threading.Lock()

    def post(self, url, json=None, headers=None, timeout=None):
        with self.__lock:
            self.calls.append({'url': url, 'json': json, 'headers': headers, 'timeout': timeout})
        outcome = self.routes[json['postal_code']]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        REALTOR_API_KEY='test-key',
        REALTOR_LISTINGS_URL='https://listings.test/properties/v3/list',
        REALTOR_API_HOST='listings.test',
        HTTP_TIMEOUT_S=5,
    )


@pytest.fixture
def dallas_response() -> FakeResponse:
    return FakeResponse(load_fixture_text('home_search_75204.json'))


@pytest.fixture
def austin_response() -> FakeResponse:
    return FakeResponse(load_fixture_text('home_search_austin.json'))
