import logging

from pyMuller.utils import clearLoggers, getQuickLogger, muller


def test_quick_logger_writes_solve_to_file(tmp_path):
    logger = getQuickLogger("muller_file_test", str(tmp_path))
    try:
        muller(lambda x, p: x**2 - 2, None, 1.0, 1.2, 1.5, logger=logger)
        for handler in logger.handlers:
            handler.flush()
        text = (tmp_path / "muller_file_test.log").read_text()
    finally:
        clearLoggers("muller_file_test")

    assert "Root found" in text
    assert "DEBUG" in text


def test_quick_logger_without_folder_uses_stream():
    logger = getQuickLogger("muller_stream_test", level=logging.INFO)
    try:
        assert logger.level == logging.INFO
        assert isinstance(logger.handlers[-1], logging.StreamHandler)
    finally:
        clearLoggers("muller_stream_test")

    assert logger.handlers == []
