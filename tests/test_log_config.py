import logging

from staticdoc.utils.log_config import setup_logging


def test_setup_logging_sets_level_and_single_handler():
    logger = setup_logging("debug")
    assert logger.name == "staticdoc"
    assert logger.level == logging.DEBUG

    setup_logging("WARNING")
    named = [h for h in logger.handlers if h.get_name() == "staticdoc-console"]
    assert len(named) == 1
    assert logger.level == logging.WARNING


def test_unknown_level_falls_back_to_info():
    assert setup_logging("chatty").level == logging.INFO
    assert setup_logging(None).level == logging.INFO
    assert setup_logging(logging.ERROR).level == logging.ERROR
    setup_logging("INFO")
