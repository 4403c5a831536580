"""Tests for board provisioning, ownership resolution and the column registry."""

from __future__ import annotations

import pytest

from mykanban.web.boards.models import ColumnSlug
from mykanban.web.boards.service import (
    columns_for_board,
    create_board_for_user,
    find_column,
    find_column_by_slug,
    get_board,
    resolve_board_for_user,
)
from mykanban.web.errors import Conflict, NotFound
from mykanban.web.tasks.service import create_task, delete_task, move_task


class TestResolveBoard:
    async def test_resolves_own_board(self, db):
        board = await resolve_board_for_user(db, "alice")
        assert board["owner_id"] == "alice"
        assert board["name"] == "Personal board"

    async def test_each_user_has_distinct_board(self, db):
        a = await resolve_board_for_user(db, "alice")
        b = await resolve_board_for_user(db, "bob")
        assert a["id"] != b["id"]

    async def test_missing_board_is_not_found(self, db):
        with pytest.raises(NotFound):
            await resolve_board_for_user(db, "nobody")


class TestProvisioning:
    async def test_three_columns_in_order(self, db):
        board = await resolve_board_for_user(db, "alice")
        cols = await columns_for_board(db, board["id"])
        assert [c["slug"] for c in cols] == ["TODO", "IN_PROGRESS", "DONE"]
        assert [c["position"] for c in cols] == [1, 2, 3]
        assert [c["name"] for c in cols] == ["To do", "In progress", "Done"]
        assert {c["board_id"] for c in cols} == {board["id"]}

    async def test_second_board_for_owner_is_conflict(self, db):
        with pytest.raises(Conflict):
            await create_board_for_user(db, "alice")

        cursor = await db.execute("SELECT COUNT(*) FROM boards WHERE owner_id = 'alice'")
        assert (await cursor.fetchone())[0] == 1
        cursor = await db.execute("SELECT COUNT(*) FROM columns")
        assert (await cursor.fetchone())[0] == 6


class TestColumnRegistry:
    async def test_find_column(self, db, alice_cols):
        col = await find_column(db, alice_cols["DONE"]["id"])
        assert col["slug"] == "DONE"

    async def test_find_missing_column(self, db):
        with pytest.raises(NotFound):
            await find_column(db, "does-not-exist")

    async def test_find_by_slug(self, db, alice_cols):
        board = await resolve_board_for_user(db, "alice")
        col = await find_column_by_slug(db, board["id"], ColumnSlug.IN_PROGRESS)
        assert col["id"] == alice_cols["IN_PROGRESS"]["id"]

    async def test_find_by_slug_missing(self, db):
        board = await resolve_board_for_user(db, "alice")
        await db.execute("DELETE FROM columns WHERE board_id = ? AND slug = 'DONE'", (board["id"],))
        await db.commit()
        with pytest.raises(NotFound):
            await find_column_by_slug(db, board["id"], ColumnSlug.DONE)


class TestGetBoard:
    async def test_empty_board(self, db):
        result = await get_board(db, "alice")
        assert result["board"]["owner_id"] == "alice"
        assert [c["slug"] for c in result["columns"]] == ["TODO", "IN_PROGRESS", "DONE"]
        assert all(c["tasks"] == [] for c in result["columns"])

    async def test_tasks_grouped_by_column_in_position_order(self, db, alice_cols):
        a = await create_task(db, "alice", "A")
        b = await create_task(db, "alice", "B")
        c = await create_task(db, "alice", "C")
        await move_task(db, "alice", b["id"], alice_cols["DONE"]["id"])

        result = await get_board(db, "alice")
        by_slug = {col["slug"]: col["tasks"] for col in result["columns"]}
        assert [t["id"] for t in by_slug["TODO"]] == [a["id"], c["id"]]
        assert [t["id"] for t in by_slug["DONE"]] == [b["id"]]
        assert by_slug["IN_PROGRESS"] == []

    async def test_other_users_tasks_not_visible(self, db):
        await create_task(db, "bob", "Bob's task")
        result = await get_board(db, "alice")
        assert all(c["tasks"] == [] for c in result["columns"])

    async def test_deleted_tasks_never_reappear(self, db):
        task = await create_task(db, "alice", "Gone soon")
        await delete_task(db, "alice", task["id"])
        for _ in range(3):
            result = await get_board(db, "alice")
            ids = [t["id"] for c in result["columns"] for t in c["tasks"]]
            assert task["id"] not in ids

    async def test_missing_board(self, db):
        with pytest.raises(NotFound):
            await get_board(db, "nobody")
