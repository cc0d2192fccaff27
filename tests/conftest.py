"""Shared fixtures for the audit dispatcher tests."""

from __future__ import annotations

import pytest

from admin_audit.config import Settings
from admin_audit.dispatcher import UserManagementAudit
from admin_audit.records import AuditRecord


class RecordingSink:
    """Sink that keeps every record it is given."""

    def __init__(self):
        self.records: list[AuditRecord] = []

    def log(self, template, fields, sensitive):
        self.records.append(AuditRecord.of(template, fields, sensitive))


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def audit(sink, settings):
    return UserManagementAudit(sink, settings)
