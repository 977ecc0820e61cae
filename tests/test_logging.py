import io
import json
import sys

import pytest
from loguru import logger

from pandas_ta_grid import GridManager, configure_logging, disable_logging


@pytest.fixture
def sink():
    stream = io.StringIO()
    yield stream
    disable_logging()


def test_package_is_silent_by_default(reference_config, sink):
    handler_id = logger.add(sink, level="DEBUG")
    try:
        GridManager(reference_config).process(100.0)
    finally:
        logger.remove(handler_id)
    assert sink.getvalue() == ""


def test_console_transport(reference_config, sink):
    handler_id = configure_logging(level="DEBUG", sink=sink)
    try:
        gm = GridManager(reference_config)
        for price in [100, 101, 99]:
            gm.process(price)
    finally:
        logger.remove(handler_id)

    text = sink.getvalue()
    assert "grid_manager" in text
    assert "Initialized with length=7" in text
    assert "First bar - warming up" in text
    assert "After aggression" in text


def test_info_level_hides_per_bar_diagnostics(reference_config, sink):
    handler_id = configure_logging(level="INFO", sink=sink)
    try:
        GridManager(reference_config).process(100.0)
    finally:
        logger.remove(handler_id)

    text = sink.getvalue()
    assert "Initialized with" in text
    assert "warming up" not in text


def test_json_transport(reference_config, sink):
    handler_id = configure_logging(level="DEBUG", serialize=True, sink=sink)
    try:
        GridManager(reference_config).process(100.0)
    finally:
        logger.remove(handler_id)

    records = [json.loads(line)["record"] for line in sink.getvalue().splitlines()]
    assert records
    assert {r["extra"]["component"] for r in records} == {"grid_manager"}
    assert records[0]["level"]["name"] == "INFO"
    assert records[-1]["message"].startswith("First bar - warming up")


def test_replace_default_drops_loguru_stderr_handler(sink):
    handler_id = configure_logging(sink=sink, replace_default=True)
    try:
        with pytest.raises(ValueError):
            logger.remove(0)
        # a second call with the default already gone is fine
        logger.remove(configure_logging(sink=sink, replace_default=True))
    finally:
        logger.remove(handler_id)
        logger.add(sys.stderr)


def test_console_keeps_global_extra(sink):
    logger.configure(extra={"session": "abc"})
    handler_id = configure_logging(level="INFO", sink=sink)
    session = io.StringIO()
    session_id = logger.add(session, level="INFO", format="{extra[session]} {message}")
    try:
        logger.info("plain record")
    finally:
        logger.remove(session_id)
        logger.remove(handler_id)
        logger.configure(extra={})

    assert "pandas_ta_grid | plain record" in sink.getvalue()
    assert session.getvalue().strip() == "abc plain record"
