import json
import logging

import pytest

from slidedeck.logging_config import JSONFormatter, setup_logging
from slidedeck.models import Direction, TransitionStarted


def _record(**extra):
    record = logging.LogRecord("slidedeck.navigation", logging.INFO, __file__, 1, "Transition started", (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_extra_fields_become_keys():
    line = JSONFormatter().format(_record(from_index=0, to_index=2, direction="forward"))
    data = json.loads(line)
    assert data["message"] == "Transition started"
    assert data["level"] == "INFO"
    assert data["from_index"] == 0
    assert data["to_index"] == 2
    assert "lineno" not in data


def test_none_extras_dropped():
    data = json.loads(JSONFormatter().format(_record(lang=None)))
    assert "lang" not in data


def test_pydantic_records_are_written_as_json():
    event = TransitionStarted(from_index=0, to_index=1, direction=Direction.FORWARD)
    data = json.loads(JSONFormatter().format(_record(event=event)))
    assert data["event"] == {
        "kind": "transition_started",
        "from_index": 0,
        "to_index": 1,
        "direction": "forward",
    }


def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        setup_logging("VERBOSE")
