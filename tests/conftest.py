from __future__ import annotations

from pathlib import Path

import pytest

from clitc import ParamSchema

EXAMPLE_SCHEMA = {
    "options": [
        {
            "short": "-e",
            "name": "--example",
            "descr": "Lorem ipsum",
            "params": [{"ord": 0, "type": "string"}],
        },
        {
            "short": "-v",
            "name": "--verbose",
            "descr": "Lorem ipsum",
            "params": [],
        },
        {
            "short": "-l",
            "name": "--lifetime",
            "descr": "Lorem ipsum",
            "params": [
                {"ord": 1, "name": "expected_val", "type": "num"},
                {"ord": 0, "name": "secs", "type": "int"},
            ],
        },
    ]
}

COMMANDS_PATH = Path(__file__).parent / "commands.json"


@pytest.fixture
def example_schema() -> ParamSchema:
    return ParamSchema.from_dict(EXAMPLE_SCHEMA)


@pytest.fixture
def commands_schema() -> ParamSchema:
    return ParamSchema.from_path(COMMANDS_PATH)


@pytest.fixture
def commands_path() -> Path:
    return COMMANDS_PATH
