"""Tests for the in-memory status log."""

from slnrun.ui.logging_config import LogCapture, log_capture, logger


def test_oldest_entries_are_dropped():
    capture = LogCapture(max_logs=3)
    for i in range(5):
        capture.write(f"message {i}\n")
    assert capture.get_logs() == ["message 2", "message 3", "message 4"]


def test_resize_keeps_newest():
    capture = LogCapture(max_logs=10)
    for i in range(6):
        capture.write(f"m{i}")
    capture.resize(2)
    assert capture.get_logs() == ["m4", "m5"]


def test_logger_feeds_global_capture():
    logger.info("Build successful! Running ...")
    logs = log_capture.get_logs()
    assert logs[-1].endswith("Build successful! Running ...")
    assert "INFO" in logs[-1]


def test_debug_messages_are_not_captured():
    logger.debug("noise")
    assert not any("noise" in line for line in log_capture.get_logs())
