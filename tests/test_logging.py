import logging

from multitok.utils.logging import ROOT_LOGGER, configure_logging, get_logger


def test_logger_namespace() -> None:
    assert get_logger("engines").name == "multitok.engines"
    assert get_logger("multitok.segment").name == "multitok.segment"


def test_configure_logging_is_idempotent() -> None:
    logger = configure_logging("debug")
    configure_logging("INFO")
    flagged = [h for h in logger.handlers if getattr(h, "_multitok_handler", False)]
    assert len(flagged) == 1
    assert logger.level == logging.INFO
    assert logger.name == ROOT_LOGGER
    configure_logging("WARNING")
