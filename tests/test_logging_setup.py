import logging

from src.student_affairs.student_affairs.common.log import ROOT_LOGGER_NAME, configure_logging, get_logger


def test_module_names_nest_under_package_logger():
    assert get_logger("src.student_affairs.student_affairs.identity.service").name == "student_affairs.identity.service"
    assert get_logger("student_affairs.identity.linker").name == "student_affairs.identity.linker"
    assert get_logger("scripts").name == "student_affairs.scripts"


def test_configure_logging_writes_daily_file(tmp_path):
    logger = configure_logging("WARNING", tmp_path / "logs")
    try:
        get_logger("student_affairs.test").debug("debug line")
        for handler in logger.handlers:
            handler.flush()

        files = list((tmp_path / "logs").glob("student_affairs_*.log"))
        assert len(files) == 1
        assert "debug line" in files[0].read_text(encoding="utf-8")
        assert logger.handlers[0].level == logging.WARNING
    finally:
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()


def test_configure_logging_is_repeatable():
    configure_logging("INFO")
    logger = configure_logging("INFO")
    assert len(logging.getLogger(ROOT_LOGGER_NAME).handlers) == 1
    logger.handlers.clear()
