import logging

from hexapod.logger import Logger


def test_logger_is_a_singleton():
    assert Logger() is Logger()


def test_setup_logger_names_and_level():
    log = Logger().setup_logger('Test component')

    assert log.name == 'Hexapod Test component'
    assert log.level == logging.INFO
    assert Logger().logging_file_handler in log.handlers


def test_setup_logger_adds_handlers_once():
    first = Logger().setup_logger('Once', enable_stream_handler=True)
    second = Logger().setup_logger('Once', enable_stream_handler=True)

    assert first is second
    assert len(second.handlers) == 2
