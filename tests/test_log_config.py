import logging

from dhl_tracking.log_config import LOGGER_NAME, LogConfig, get_logger, setup_logging


def test_stream_handler_only_by_default():
    config = LogConfig(LOG_PATH=None, LOG_LEVEL="DEBUG")

    assert list(config.handlers) == ["default"]
    assert config.loggers == {LOGGER_NAME: {"handlers": ["default"], "level": "DEBUG"}}


def test_file_handler_when_path_set(tmp_path):
    config = LogConfig(LOG_PATH=str(tmp_path), LOGGER_NAME="dhl-test")

    assert config.handlers["file"]["filename"] == f"{tmp_path}/dhl-test.log"
    assert config.handlers["file"]["backupCount"] == 14
    assert config.loggers["dhl-test"]["handlers"] == ["default", "file"]


def test_defaults_are_not_shared(tmp_path):
    LogConfig(LOG_PATH=str(tmp_path))

    assert "file" not in LogConfig(LOG_PATH=None).handlers


def test_setup_logging(tmp_path):
    logger = setup_logging(LogConfig(LOG_PATH=str(tmp_path), LOGGER_NAME="dhl-setup-test", LOG_LEVEL="WARNING"))
    logger.warning("written")
    for handler in logger.handlers:
        handler.flush()

    assert logger.level == logging.WARNING
    assert "written" in (tmp_path / "dhl-setup-test.log").read_text()

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_module_loggers_are_children():
    assert get_logger("extractor").name == f"{LOGGER_NAME}.extractor"
    assert get_logger().name == LOGGER_NAME
