from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parents[1]

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from formhtml import log
from formhtml.config import config
from formhtml.htmltemplate import FormBuilder
from formhtml.services import Services


@pytest.fixture(autouse=True)
def default_config():
    config.init(filename=[])
    yield config
    config.init(filename=[])


@pytest.fixture
def log_buffer():
    buf = io.StringIO()
    log.init(log.Log.DEBUG, buf)
    yield buf
    log.init(log.Log.INFO)


class FakeServices(Services):
    def decrypt_value(self, value):
        return "plain:" + value

    def display_url(self, file_id):
        return "/files/%d" % file_id

    def state_options(self):
        return {"-1": "-- State --", "MA": "Massachusetts", "NY": "New York"}

    def phone_options(self):
        return {"Mobile": "Mobile", "Work": "Work"}

    def user_state(self):
        return "MA"


@pytest.fixture
def services():
    return FakeServices()


@pytest.fixture
def builder(services):
    return FormBuilder(include_attributes={}, post_array_name="FieldValues", add_unique_id=True, services=services)
