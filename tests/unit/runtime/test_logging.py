"""Tests for loguru configuration."""

from loguru import logger

from userctl.runtime import configure_logging


def test_messages_below_level_are_dropped(capsys):
    configure_logging("INFO")

    logger.debug("hidden detail")
    logger.info("visible event")

    err = capsys.readouterr().err
    assert "visible event" in err
    assert "hidden detail" not in err


def test_logging_goes_to_stderr_only(capsys):
    configure_logging("DEBUG")

    logger.warning("careful")

    captured = capsys.readouterr()
    assert "careful" in captured.err
    assert "WARNING" in captured.err
    assert captured.out == ""


def test_reconfiguring_replaces_sink(capsys):
    """A second call must not duplicate output."""
    configure_logging("INFO")
    configure_logging("INFO")

    logger.info("once")

    assert capsys.readouterr().err.count("once") == 1
