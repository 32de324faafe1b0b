from __future__ import annotations

import pathlib

import pytest

from umbrella.providers.weatherstack import WeatherstackProvider


DATA_DIR = pathlib.Path(__file__).resolve().parent / "data"
BASE_URL = "https://weatherstack.test/current"


@pytest.fixture
def weatherstack_json() -> str:
    return (DATA_DIR / "weatherstack.json").read_text(encoding="utf-8")


@pytest.fixture
def weatherstack_error_json() -> str:
    return (DATA_DIR / "weatherstack_error.json").read_text(encoding="utf-8")


@pytest.fixture
def provider():
    with WeatherstackProvider(api_key="dummy api key", base_url=BASE_URL) as ws:
        yield ws
