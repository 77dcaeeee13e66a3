import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_root_logging():
    # cli.main() zet zijn eigen handler op de root logger
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
