"""Tests for logging setup."""

import logging

import pytest

from coffeeshop.infrastructure.logs import HANDLER_NAME, setup_logging


@pytest.fixture
def clean_root():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = [h for h in root.handlers if h.name != HANDLER_NAME]
    yield root
    root.handlers = saved_handlers
    root.setLevel(saved_level)


def _own_handlers(root: logging.Logger) -> list[logging.Handler]:
    return [h for h in root.handlers if h.name == HANDLER_NAME]


def test_adds_single_console_handler(clean_root):
    setup_logging(logging.DEBUG)
    setup_logging(logging.INFO)
    assert len(_own_handlers(clean_root)) == 1
    assert clean_root.level == logging.INFO


def test_other_stream_handlers_do_not_block_console(clean_root, tmp_path):
    file_handler = logging.FileHandler(tmp_path / "app.log")
    clean_root.addHandler(file_handler)
    try:
        setup_logging()
        handlers = _own_handlers(clean_root)
        assert len(handlers) == 1
        assert type(handlers[0]) is logging.StreamHandler
    finally:
        clean_root.removeHandler(file_handler)
        file_handler.close()


def test_formatter_debug_logging(caplog):
    from coffeeshop.domain.service.order_formatter import OrderFormatter
    from tests.factories import cookie, make_order

    with caplog.at_level(logging.DEBUG, logger="coffeeshop"):
        OrderFormatter().generate_food_receipt(make_order(cookie(), customer="Alice"))
    assert "Receipt for Alice: 1 bakery item(s), total $2.50" in caplog.text
