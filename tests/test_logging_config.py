import logging
import os

import pytest

from meshsampler.config import ASSETS_PATH, DEFAULT_MESH_PATH
from meshsampler.logging_config import setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("meshsampler")
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_setup_logging_with_file(tmp_path, package_logger):
    log_file = tmp_path / "meshsampler.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file))
    logger = setup_logging(level=logging.DEBUG, log_file=str(log_file))

    assert logger is package_logger
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2

    logging.getLogger("meshsampler.sampling").debug("hello from a submodule")
    for handler in logger.handlers:
        handler.flush()
    assert "hello from a submodule" in log_file.read_text(encoding="utf-8")


def test_setup_logging_accepts_level_names(package_logger):
    logger = setup_logging(level="info")
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1


def test_setup_logging_rejects_unknown_level(package_logger):
    with pytest.raises(ValueError):
        setup_logging(level="LOUD")


def test_bundled_mesh_is_shipped():
    assert os.path.isdir(ASSETS_PATH)
    assert os.path.isfile(DEFAULT_MESH_PATH)
