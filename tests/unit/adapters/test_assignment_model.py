"""Tests for the assignments table mapping."""

import uuid

import pytest
from sqlalchemy import text


@pytest.mark.asyncio
async def test_flags_default_to_false_in_the_database(session_factory):
    row_id = uuid.uuid4()
    async with session_factory() as session:
        await session.execute(
            text(
                "INSERT INTO assignments (id, agent, address, submitted_on) "
                "VALUES (:id, 'Alex Loren', '260 Highland Ave', '2022-01-31 02:22:40')"
            ),
            {"id": row_id.hex},
        )
        row = (
            await session.execute(
                text("SELECT scheduled, hidden FROM assignments WHERE id = :id"),
                {"id": row_id.hex},
            )
        ).one()

    assert not row.scheduled
    assert not row.hidden
