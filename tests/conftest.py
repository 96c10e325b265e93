"""
Configuration and fixtures for pytest.
"""
import logging

import pytest


@pytest.fixture
def write_xml(tmp_path):
    """
    Provides a helper that writes content to an .xml file under tmp_path.

    Strings are written as UTF-8, bytes are written unchanged.
    """
    def _write(name, content):
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def scenario_files(write_xml):
    """The two documents of the reference scenario: ids {1, 2} versus {1, 3}."""
    file1 = write_xml("file1.xml", '<a id="1"/><b id="2"/>')
    file2 = write_xml("file2.xml", '<a id="1"/><b id="3"/>')
    return file1, file2


@pytest.fixture(autouse=True)
def reset_logging():
    """Removes handlers installed by setup_logging so tests do not leak into each other."""
    root_logger = logging.getLogger()
    original_level = root_logger.level
    original_handlers = root_logger.handlers[:]

    yield

    for handler in root_logger.handlers[:]:
        if handler not in original_handlers:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(original_level)
