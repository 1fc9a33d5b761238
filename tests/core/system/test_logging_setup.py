import logging
import os
import time

from src.core.system.logging import REDACTED, SecretFilter, cleanup_old_logs, setup_logging


def _record(msg, *args):
    return logging.LogRecord("test", logging.INFO, __file__, 1, msg, args, None)


class TestSecretFilter:
    def test_redacts_browserbase_key(self):
        record = _record("using key bb_live_abc123XYZ")
        SecretFilter().filter(record)
        assert record.msg == f"using key {REDACTED}"

    def test_redacts_header_value(self):
        record = _record("headers: {'X-BB-API-Key': 'secret-value'}")
        SecretFilter().filter(record)
        assert "secret-value" not in record.msg
        assert REDACTED in record.msg

    def test_redacts_args(self):
        record = _record("token %s for %d", "Bearer abc.def.ghi", 3)
        SecretFilter().filter(record)
        assert record.args == (f"Bearer {REDACTED}", 3)

    def test_redacts_extra_secrets(self):
        record = _record("project key is plainsecret")
        SecretFilter(extra_secrets=["plainsecret", ""]).filter(record)
        assert record.msg == f"project key is {REDACTED}"

    def test_disabled_filter_keeps_message(self):
        record = _record("bb_live_abc123")
        assert SecretFilter(enabled=False).filter(record) is True
        assert record.msg == "bb_live_abc123"

    def test_plain_message_unchanged(self):
        record = _record("Created browser session sess-1 (1440x900)")
        SecretFilter().filter(record)
        assert record.msg == "Created browser session sess-1 (1440x900)"


def test_setup_logging_writes_file(tmp_path):
    root = setup_logging(log_dir=tmp_path, log_to_console=False, app_name="unit")
    try:
        logging.getLogger("unit.test").info("hello bb_live_zzz")
        for handler in root.handlers:
            handler.flush()

        content = (tmp_path / "unit.log").read_text(encoding="utf-8")
        assert "hello" in content
        assert "bb_live_zzz" not in content
    finally:
        for handler in list(root.handlers):
            handler.close()
            root.removeHandler(handler)


def test_cleanup_old_logs(tmp_path):
    old_file = tmp_path / "old.log"
    new_file = tmp_path / "new.log"
    old_file.write_text("old")
    new_file.write_text("new")

    ten_days_ago = time.time() - 10 * 24 * 3600
    os.utime(old_file, (ten_days_ago, ten_days_ago))

    assert cleanup_old_logs(tmp_path, max_age_days=7) == 1
    assert not old_file.exists()
    assert new_file.exists()


def test_cleanup_missing_dir(tmp_path):
    assert cleanup_old_logs(tmp_path / "missing") == 0
