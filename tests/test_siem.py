"""Tests for the structlog-backed audit sink."""

from __future__ import annotations

import json

import pytest
import structlog
from structlog.testing import capture_logs

from admin_audit.config import Settings
from admin_audit.dispatcher import UserManagementAudit
from admin_audit.events import UserChanged, UserCreated
from admin_audit.logging import configure_logging
from admin_audit.siem import SiemSink, emit_audit_event


@pytest.fixture
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestEmitAuditEvent:
    def test_redacts_listed_keys(self):
        with capture_logs() as logs:
            emit_audit_event("audit_event", {"uid": "alice", "feature": "quota"}, ["uid"])

        assert logs == [
            {
                "event": "audit_event",
                "log_level": "info",
                "fields": {"uid": "[REDACTED]", "feature": "quota"},
            }
        ]

    def test_context_is_included(self):
        with capture_logs() as logs:
            emit_audit_event("audit_event", {"uid": "alice"}, app="admin_audit")

        assert logs[0]["app"] == "admin_audit"
        assert logs[0]["fields"] == {"uid": "alice"}

    def test_payload_keys_may_shadow_context(self):
        with capture_logs() as logs:
            emit_audit_event("audit_event", {"app": "files", "event": "x"}, app="admin_audit")

        assert logs[0]["event"] == "audit_event"
        assert logs[0]["app"] == "admin_audit"
        assert logs[0]["fields"] == {"app": "files", "event": "x"}


class TestSiemSink:
    def test_sensitive_fields_are_redacted(self):
        sink = SiemSink(Settings())

        with capture_logs() as logs:
            UserManagementAudit(sink, Settings()).handle(UserCreated(uid="alice"))

        assert logs == [
            {
                "event": 'User created: "[REDACTED]"',
                "log_level": "info",
                "app": "admin_audit",
                "fields": {"uid": "[REDACTED]"},
            }
        ]

    def test_redaction_can_be_disabled(self):
        settings = Settings(redact_sensitive=False, app_name="audit")

        with capture_logs() as logs:
            UserManagementAudit(SiemSink(settings), settings).handle(
                UserChanged(uid="alice", feature="enabled", value=True)
            )

        assert logs == [
            {
                "event": 'User enabled: "alice"',
                "log_level": "info",
                "app": "audit",
                "fields": {"user": "alice"},
            }
        ]

    def test_custom_placeholder(self):
        settings = Settings(redaction_placeholder="***")

        with capture_logs() as logs:
            SiemSink(settings).log('UserID assigned: "%s"', {"uid": "carol"}, {"uid"})

        assert logs[0]["event"] == 'UserID assigned: "***"'
        assert logs[0]["fields"] == {"uid": "***"}

    def test_field_named_like_context(self):
        with capture_logs() as logs:
            SiemSink(Settings()).log("%s by %s", {"uid": "a", "app": "files"}, {"uid"})

        assert logs[0]["event"] == "[REDACTED] by files"
        assert logs[0]["app"] == "admin_audit"
        assert logs[0]["fields"] == {"uid": "[REDACTED]", "app": "files"}


class TestConfiguredLevel:
    def test_ignored_events_write_nothing_at_info(self, capsys, reset_structlog):
        configure_logging("INFO")
        settings = Settings()

        UserManagementAudit(SiemSink(settings), settings).handle(
            UserChanged(uid="alice", feature="quota", value="10GB")
        )

        assert capsys.readouterr().out == ""

    def test_audit_records_are_written_at_info(self, capsys, reset_structlog):
        configure_logging("INFO")
        settings = Settings()

        UserManagementAudit(SiemSink(settings), settings).handle(UserCreated(uid="alice"))

        line = json.loads(capsys.readouterr().out.strip())
        assert line["event"] == 'User created: "[REDACTED]"'
        assert line["level"] == "info"
        assert line["fields"] == {"uid": "[REDACTED]"}
