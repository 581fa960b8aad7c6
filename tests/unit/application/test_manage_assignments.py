"""Tests for assignment creation and flag use cases."""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from tracker.application.use_cases.manage_assignments import (
    CreateAssignmentsUseCase,
    SetAssignmentFlagUseCase,
)
from tracker.domain.entities.assignment import Assignment
from tracker.domain.errors import NotFoundError

from test_reconcile_event import FakeAssignmentRepo


def _assignment(address: str = "260 highland ave") -> Assignment:
    return Assignment(
        id=None, agent="Desiree Staples", address=address,
        submitted_on=datetime(2022, 8, 28, 15, 51, 56, tzinfo=timezone.utc),
    )


@pytest.mark.asyncio
async def test_create_one_assigns_id():
    repo = FakeAssignmentRepo()
    saved = await CreateAssignmentsUseCase(repo).create_one(_assignment())
    assert saved.id is not None
    assert saved.id in repo.assignments


@pytest.mark.asyncio
async def test_create_keeps_client_supplied_id():
    repo = FakeAssignmentRepo()
    a = _assignment()
    a.id = uuid4()
    saved = await CreateAssignmentsUseCase(repo).create_one(a)
    assert saved.id == a.id


@pytest.mark.asyncio
async def test_create_many():
    repo = FakeAssignmentRepo()
    saved = await CreateAssignmentsUseCase(repo).create_many(
        [_assignment(f"{i} Main St") for i in range(5)]
    )
    assert len(saved) == 5
    assert len({a.id for a in saved}) == 5


@pytest.mark.asyncio
async def test_set_hidden_and_scheduled():
    a = _assignment()
    repo = FakeAssignmentRepo([a])
    uc = SetAssignmentFlagUseCase(repo)

    await uc.set_hidden(a.id, True)
    await uc.set_scheduled(a.id, True)

    assert repo.assignments[a.id].hidden is True
    assert repo.assignments[a.id].scheduled is True


@pytest.mark.asyncio
async def test_unknown_id_raises_not_found():
    uc = SetAssignmentFlagUseCase(FakeAssignmentRepo())
    with pytest.raises(NotFoundError):
        await uc.set_hidden(uuid4(), True)
    with pytest.raises(NotFoundError):
        await uc.set_scheduled(uuid4(), False)
