"""Seed run results."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class SeedStatus(str, Enum):
    """Overall result of a seed run."""

    COMPLETED = "completed"
    FAILED = "failed"
    SKIPPED_ALREADY_RUNNING = "skipped_already_running"


class OutcomeStatus(str, Enum):
    """Result of writing a single entity."""

    CREATED = "created"
    FAILED = "failed"


class EntityKind(str, Enum):
    """Kinds of records a seed run writes."""

    CATEGORY = "category"
    CUSTOMIZATION = "customization"
    MENU_ITEM = "menu_item"
    MENU_CUSTOMIZATION = "menu_customization"


@dataclass
class EntityOutcome:
    """
    Outcome of one create attempt.

    ``document_id`` is set for CREATED outcomes, ``reason`` for FAILED ones.
    """

    kind: EntityKind
    name: str
    status: OutcomeStatus
    document_id: str | None = None
    reason: str | None = None

    def __post_init__(self) -> None:
        if self.status == OutcomeStatus.CREATED and not self.document_id:
            raise ValueError("document_id required for CREATED outcome")
        if self.status == OutcomeStatus.FAILED and not self.reason:
            raise ValueError("reason required for FAILED outcome")


@dataclass
class SeedReport:
    """Aggregate report returned by every seed run."""

    run_id: str
    status: SeedStatus = SeedStatus.COMPLETED
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    finished_at: datetime | None = None
    cleared: dict[str, int] = field(default_factory=dict)
    outcomes: list[EntityOutcome] = field(default_factory=list)
    error: str | None = None

    def record_created(self, kind: EntityKind, name: str, document_id: str) -> None:
        self.outcomes.append(
            EntityOutcome(kind=kind, name=name, status=OutcomeStatus.CREATED, document_id=document_id)
        )

    def record_failed(self, kind: EntityKind, name: str, reason: str) -> None:
        self.outcomes.append(
            EntityOutcome(kind=kind, name=name, status=OutcomeStatus.FAILED, reason=reason)
        )

    def created(self, kind: EntityKind) -> list[EntityOutcome]:
        return [o for o in self.outcomes if o.kind == kind and o.status == OutcomeStatus.CREATED]

    def failures(self) -> list[EntityOutcome]:
        return [o for o in self.outcomes if o.status == OutcomeStatus.FAILED]

    def counts(self) -> dict[str, dict[str, int]]:
        """Created/failed totals per entity kind."""
        totals = {
            kind.value: {OutcomeStatus.CREATED.value: 0, OutcomeStatus.FAILED.value: 0}
            for kind in EntityKind
        }
        for outcome in self.outcomes:
            totals[outcome.kind.value][outcome.status.value] += 1
        return totals

    @property
    def duration_seconds(self) -> float | None:
        if self.finished_at is None:
            return None
        return (self.finished_at - self.started_at).total_seconds()

    def finish(self, status: SeedStatus | None = None, error: str | None = None) -> None:
        if status is not None:
            self.status = status
        if error is not None:
            self.error = error
        self.finished_at = datetime.now(timezone.utc)
