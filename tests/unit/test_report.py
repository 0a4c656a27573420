"""Unit tests for seed reports and the name to ID map."""

import pytest

from menu_seeder.models.id_map import IdMap
from menu_seeder.models.report import (
    EntityKind,
    EntityOutcome,
    OutcomeStatus,
    SeedReport,
    SeedStatus,
)


class TestIdMap:
    """Tests for IdMap lookups."""

    def test_register_and_resolve(self):
        ids = IdMap("category")
        ids.register("Pizza", "abc")

        assert ids.resolve("Pizza") == "abc"
        assert "Pizza" in ids
        assert len(ids) == 1
        assert list(ids) == ["Pizza"]

    def test_missing_name_resolves_to_none(self):
        ids = IdMap("category")

        assert ids.resolve("Burgers") is None
        assert "Burgers" not in ids

    def test_later_registration_wins(self):
        ids = IdMap("customization")
        ids.register("Fries", "first")
        ids.register("Fries", "second")

        assert ids.resolve("Fries") == "second"
        assert len(ids) == 1

    def test_repr(self):
        assert repr(IdMap("category")) == "IdMap(kind='category', size=0)"


class TestEntityOutcome:
    """Validation of per-entity outcomes."""

    def test_created_requires_document_id(self):
        with pytest.raises(ValueError, match="document_id required"):
            EntityOutcome(kind=EntityKind.CATEGORY, name="Pizza", status=OutcomeStatus.CREATED)

    def test_failed_requires_reason(self):
        with pytest.raises(ValueError, match="reason required"):
            EntityOutcome(kind=EntityKind.MENU_ITEM, name="Margherita", status=OutcomeStatus.FAILED)


class TestSeedReport:
    """Aggregation of outcomes."""

    def test_defaults(self):
        report = SeedReport(run_id="run-1")

        assert report.status == SeedStatus.COMPLETED
        assert report.finished_at is None
        assert report.duration_seconds is None
        assert report.outcomes == []
        assert report.failures() == []

    def test_counts_per_kind(self):
        report = SeedReport(run_id="run-1")
        report.record_created(EntityKind.CATEGORY, "Pizza", "c1")
        report.record_created(EntityKind.CATEGORY, "Drinks", "c2")
        report.record_failed(EntityKind.CATEGORY, "Wraps", "Invalid document structure")
        report.record_created(EntityKind.MENU_ITEM, "Margherita", "m1")

        counts = report.counts()

        assert counts["category"] == {"created": 2, "failed": 1}
        assert counts["menu_item"] == {"created": 1, "failed": 0}
        assert counts["customization"] == {"created": 0, "failed": 0}
        assert counts["menu_customization"] == {"created": 0, "failed": 0}

    def test_created_and_failures(self):
        report = SeedReport(run_id="run-1")
        report.record_created(EntityKind.CATEGORY, "Pizza", "c1")
        report.record_failed(EntityKind.CUSTOMIZATION, "Olives", "boom")

        assert [o.document_id for o in report.created(EntityKind.CATEGORY)] == ["c1"]
        assert report.created(EntityKind.CUSTOMIZATION) == []
        assert [o.reason for o in report.failures()] == ["boom"]

    def test_finish(self):
        report = SeedReport(run_id="run-1")

        report.finish(SeedStatus.FAILED, error="Server Error")

        assert report.status == SeedStatus.FAILED
        assert report.error == "Server Error"
        assert report.finished_at is not None
        assert report.duration_seconds >= 0

    def test_status_values(self):
        assert SeedStatus.SKIPPED_ALREADY_RUNNING.value == "skipped_already_running"
        assert SeedStatus("completed") is SeedStatus.COMPLETED
