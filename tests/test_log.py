import logging

from chatbot.log import HANDLER_NAME, setup_logging


def test_setup_logging_installs_one_named_handler():
    logger = setup_logging("debug")
    setup_logging("info")
    named = [h for h in logger.handlers if h.get_name() == HANDLER_NAME]
    assert len(named) == 1
    assert logger.level == logging.INFO
