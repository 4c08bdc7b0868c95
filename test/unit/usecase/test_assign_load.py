"""LoadAssignmentManager 유스케이스 단위 테스트."""

from contextlib import contextmanager
from decimal import InvalidOperation
import threading

import pytest

from load_disposition.domain.entities.load import Load, LoadItem
from load_disposition.domain.enums import Direction
from load_disposition.domain.events.disposition_events import (
    LoadAssignedEvent,
    LoadUnassignedEvent,
)
from load_disposition.domain.exceptions import (
    AlreadyAssignedError,
    DirectionMismatchError,
    InvalidStateError,
    NotFoundError,
)
from load_disposition.usecase.assign_load import LoadAssignmentManager
from load_disposition.usecase.ports.lock_provider import LockProvider


@pytest.fixture
def export_draft(manage):
    return manage.create_draft("export").position_id


@pytest.fixture
def other_export_draft(manage):
    return manage.create_draft("export").position_id


class TestAssign:
    def test_assign_returns_recomputed_capacity(self, assignment, export_draft):
        assignment.assign(export_draft, 101)
        summary = assignment.assign(export_draft, 102)

        assert summary.position.load_ids == [101, 102]
        assert [ld.load_id for ld in summary.loads] == [101, 102]
        assert summary.capacity.total_weight == 999.25
        assert summary.capacity.load_count == 2

    def test_persists_membership(self, assignment, export_draft, position_repo):
        assignment.assign(export_draft, 101)
        assert position_repo.get(export_draft).load_ids == [101]

    def test_reassign_same_position_is_idempotent(
        self, assignment, export_draft, position_repo, publisher
    ):
        received = []
        publisher.subscribe(LoadAssignedEvent, received.append)
        assignment.assign(export_draft, 101)

        summary = assignment.assign(export_draft, 101)

        assert summary.position.load_ids == [101]
        assert position_repo.get(export_draft).load_ids == [101]
        assert len(received) == 1

    def test_direction_mismatch_leaves_records_unchanged(
        self, assignment, export_draft, position_repo, load_repo
    ):
        before = load_repo.get(201)

        with pytest.raises(DirectionMismatchError):
            assignment.assign(export_draft, 201)

        assert position_repo.get(export_draft).load_ids == []
        assert load_repo.get(201) == before

    def test_already_assigned_to_other_draft(
        self, assignment, export_draft, other_export_draft, position_repo
    ):
        assignment.assign(export_draft, 101)

        with pytest.raises(AlreadyAssignedError):
            assignment.assign(other_export_draft, 101)

        assert position_repo.get(export_draft).load_ids == [101]
        assert position_repo.get(other_export_draft).load_ids == []

    def test_confirmed_position_raises_invalid_state(
        self, assignment, confirmer, export_draft
    ):
        assignment.assign(export_draft, 101)
        confirmer.confirm(export_draft)

        with pytest.raises(InvalidStateError):
            assignment.assign(export_draft, 102)

    def test_load_in_confirmed_position_can_join_new_draft(
        self, assignment, confirmer, export_draft, other_export_draft
    ):
        assignment.assign(export_draft, 101)
        confirmer.confirm(export_draft)

        summary = assignment.assign(other_export_draft, 101)

        assert summary.position.load_ids == [101]

    def test_unknown_position_raises(self, assignment):
        with pytest.raises(NotFoundError, match="Position"):
            assignment.assign(999, 101)

    def test_unknown_load_raises(self, assignment, export_draft):
        with pytest.raises(NotFoundError, match="Load"):
            assignment.assign(export_draft, 999)

    def test_capacity_failure_leaves_position_unchanged(
        self, assignment, export_draft, position_repo, load_repo, publisher
    ):
        load_repo.save(Load(
            load_id=104, direction=Direction.EXPORT,
            items=(LoadItem(volume=float("inf")),),
        ))
        received = []
        publisher.subscribe(LoadAssignedEvent, received.append)

        with pytest.raises(InvalidOperation):
            assignment.assign(export_draft, 104)

        assert position_repo.get(export_draft).load_ids == []
        assert received == []

    def test_publishes_assigned_event(self, assignment, export_draft, publisher):
        received = []
        publisher.subscribe(LoadAssignedEvent, received.append)

        assignment.assign(export_draft, 102)

        assert received[0].position_id == export_draft
        assert received[0].load_id == 102


class TestUnassign:
    def test_removes_membership(self, assignment, export_draft, position_repo):
        assignment.assign(export_draft, 101)
        assignment.assign(export_draft, 102)

        assert assignment.unassign(export_draft, 101) is None

        assert position_repo.get(export_draft).load_ids == [102]

    def test_load_not_member_raises(self, assignment, export_draft):
        with pytest.raises(NotFoundError):
            assignment.unassign(export_draft, 101)

    def test_unknown_position_raises(self, assignment):
        with pytest.raises(NotFoundError):
            assignment.unassign(999, 101)

    def test_confirmed_position_raises(
        self, assignment, confirmer, export_draft
    ):
        assignment.assign(export_draft, 101)
        confirmer.confirm(export_draft)

        with pytest.raises(InvalidStateError):
            assignment.unassign(export_draft, 101)

    def test_unassigned_load_can_move(
        self, assignment, export_draft, other_export_draft, load_repo
    ):
        assignment.assign(export_draft, 101)
        assignment.unassign(export_draft, 101)

        summary = assignment.assign(other_export_draft, 101)

        assert summary.position.load_ids == [101]
        assert load_repo.get(101) is not None

    def test_publishes_unassigned_event(
        self, assignment, export_draft, publisher
    ):
        received = []
        publisher.subscribe(LoadUnassignedEvent, received.append)
        assignment.assign(export_draft, 101)

        assignment.unassign(export_draft, 101)

        assert received[0].load_id == 101


class _RecordingLockProvider(LockProvider):
    def __init__(self):
        self.calls = []

    @contextmanager
    def position_lock(self, position_id):
        self.calls.append(("position", position_id))
        yield

    @contextmanager
    def load_lock(self, load_id):
        self.calls.append(("load", load_id))
        yield


class TestLocking:
    def test_load_lock_taken_before_position_lock(
        self, position_repo, load_repo, publisher, manage
    ):
        locks = _RecordingLockProvider()
        usecase = LoadAssignmentManager(
            position_repo, load_repo, publisher, locks
        )
        pid = manage.create_draft("export").position_id

        usecase.assign(pid, 101)
        usecase.unassign(pid, 101)

        assert locks.calls == [
            ("load", 101), ("position", pid),
            ("load", 101), ("position", pid),
        ]

    def test_concurrent_assign_is_exclusive(self, manage, assignment):
        position_ids = [
            manage.create_draft("export").position_id for _ in range(8)
        ]
        successes = []
        failures = []
        barrier = threading.Barrier(len(position_ids))

        def worker(pid):
            barrier.wait()
            try:
                assignment.assign(pid, 101)
                successes.append(pid)
            except AlreadyAssignedError:
                failures.append(pid)

        threads = [
            threading.Thread(target=worker, args=(pid,))
            for pid in position_ids
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(successes) == 1
        assert len(failures) == len(position_ids) - 1
        owners = [
            s.position_id
            for s in manage.get_disposition_view("export").draft_positions
            if 101 in s.position.load_ids
        ]
        assert owners == successes
