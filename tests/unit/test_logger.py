from __future__ import annotations

import logging

from utils import logger as logger_mod


def _record(msg, args=()) -> logging.LogRecord:
    return logging.LogRecord("ibanCheck", logging.INFO, __file__, 1, msg, args, None)


def test_mask_replaces_iban_in_text() -> None:
    text = "Konto DE89370400440532013000 geprüft"
    assert logger_mod._mask(text) == "Konto DE89**************3000 geprüft"


def test_mask_leaves_other_text() -> None:
    assert logger_mod._mask("nothing to see, row 12") == "nothing to see, row 12"


def test_filter_masks_args() -> None:
    rec = _record("checked %s", ("AT611904300234573201",))
    assert logger_mod._MaskingFilter().filter(rec) is True
    assert rec.getMessage() == "checked AT61************3201"


def test_filter_masks_dict_args() -> None:
    rec = _record("checked %(iban)s", ({"iban": "BE68539007547034"},))
    logger_mod._MaskingFilter().filter(rec)
    assert rec.getMessage() == "checked BE68********7034"


def test_setup_logger_is_idempotent() -> None:
    a = logger_mod.setup_logger()
    b = logger_mod.setup_logger()
    assert a is b
    assert len(a.handlers) == len(b.handlers) >= 1


def test_log_dir_from_env(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("IBANCHECK_LOG_DIR", str(tmp_path))
    assert logger_mod._log_dir() == tmp_path
    monkeypatch.delenv("IBANCHECK_LOG_DIR")
    assert logger_mod._log_dir() == logger_mod.DEFAULT_LOG_DIR


def test_console_level_from_env(monkeypatch) -> None:
    monkeypatch.setenv("IBANCHECK_LOG_LEVEL", "warning")
    assert logger_mod._console_level() == logging.WARNING
    monkeypatch.setenv("IBANCHECK_LOG_LEVEL", "bogus")
    assert logger_mod._console_level() == logging.INFO
