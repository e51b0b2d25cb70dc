"""
Unit tests for project resolvers
"""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
import strawberry
from bson import ObjectId

from taskboard.database.models import ProjectRecord, ToDoRecord, UserRecord
from taskboard.database.store import DocumentStore
from taskboard.errors import Unauthenticated
from taskboard.graphql.resolvers.project import (
    add_user_to_project,
    calculate_progress,
    create_project,
    delete_project,
    resolve_my_projects,
    resolve_project_by_id,
    resolve_project_progress,
    resolve_project_users,
    update_project,
)
from taskboard.graphql.types.project import Project


@pytest.fixture
def mock_store():
    return AsyncMock(spec=DocumentStore)


@pytest.fixture
def caller():
    return UserRecord(id=str(ObjectId()), name="Ada", email="ada@example.com", password_hash="h")


@pytest.fixture
def mock_info(mock_store, caller):
    """Create a mock GraphQL info object with a signed-in caller."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {
        "request": MagicMock(),
        "store": mock_store,
        "tokens": MagicMock(),
        "user": caller,
    }
    return info


@pytest.fixture
def anonymous_info(mock_store):
    info = MagicMock(spec=strawberry.Info)
    info.context = {
        "request": MagicMock(),
        "store": mock_store,
        "tokens": MagicMock(),
        "user": None,
    }
    return info


def _project(members, title="Launch"):
    return ProjectRecord(
        id=str(ObjectId()),
        title=title,
        created_at=datetime(2024, 1, 1, tzinfo=UTC),
        member_user_ids=members,
    )


def _todo(project_id, done):
    return ToDoRecord(id=str(ObjectId()), content="c", is_completed=done, project_id=project_id)


class TestCalculateProgress:
    def test_empty_project_is_zero(self):
        assert calculate_progress([]) == 0

    def test_one_of_four(self):
        todos = [_todo("p", True)] + [_todo("p", False) for _ in range(3)]
        assert calculate_progress(todos) == 25

    def test_all_done(self):
        assert calculate_progress([_todo("p", True), _todo("p", True)]) == 100

    def test_one_of_three(self):
        todos = [_todo("p", True), _todo("p", False), _todo("p", False)]
        assert calculate_progress(todos) == pytest.approx(33.333, rel=1e-3)


class TestProjectQueries:
    @pytest.mark.asyncio
    async def test_my_projects(self, mock_info, mock_store, caller):
        mock_store.list_projects_for_member.return_value = [_project([caller.id])]

        result = await resolve_my_projects(mock_info)

        mock_store.list_projects_for_member.assert_awaited_once_with(caller.id)
        assert [p.title for p in result] == ["Launch"]

    @pytest.mark.asyncio
    async def test_my_projects_unauthenticated(self, anonymous_info, mock_store):
        with pytest.raises(Unauthenticated, match="Please sign in"):
            await resolve_my_projects(anonymous_info)
        mock_store.list_projects_for_member.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_project_not_member(self, mock_info, mock_store):
        record = _project([str(ObjectId())])
        mock_store.get_project.return_value = record

        result = await resolve_project_by_id(mock_info, record.id)

        assert result.id == record.id
        assert result.created_at == "2024-01-01T00:00:00+00:00"

    @pytest.mark.asyncio
    async def test_get_project_missing(self, mock_info, mock_store):
        mock_store.get_project.return_value = None

        assert await resolve_project_by_id(mock_info, str(ObjectId())) is None


class TestProjectFields:
    @pytest.mark.asyncio
    async def test_progress(self, mock_info, mock_store):
        project = Project.from_record(_project([]))
        mock_store.list_todos_for_project.return_value = [
            _todo(project.id, True),
            _todo(project.id, False),
        ]

        assert await resolve_project_progress(project, mock_info) == 50
        mock_store.list_todos_for_project.assert_awaited_once_with(project.id)

    @pytest.mark.asyncio
    async def test_users_skips_missing(self, mock_info, mock_store, caller):
        gone = str(ObjectId())
        project = Project.from_record(_project([caller.id, gone]))
        mock_store.get_user.side_effect = lambda user_id: caller if user_id == caller.id else None

        result = await resolve_project_users(project, mock_info)

        assert [u.id for u in result] == [caller.id]
        assert mock_store.get_user.await_count == 2


class TestProjectMutations:
    @pytest.mark.asyncio
    async def test_create_project_caller_is_only_member(self, mock_info, mock_store, caller):
        mock_store.insert_project.side_effect = lambda **kwargs: _project(
            kwargs["member_user_ids"], title=kwargs["title"]
        )

        result = await create_project(mock_info, "Launch")

        kwargs = mock_store.insert_project.await_args.kwargs
        assert kwargs["member_user_ids"] == [caller.id]
        assert kwargs["created_at"].tzinfo is not None
        assert result.title == "Launch"
        assert result.member_user_ids == [caller.id]

    @pytest.mark.asyncio
    async def test_create_project_unauthenticated(self, anonymous_info, mock_store):
        with pytest.raises(Unauthenticated):
            await create_project(anonymous_info, "Launch")
        mock_store.insert_project.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_project(self, mock_info, mock_store):
        record = _project([], title="Renamed")
        mock_store.update_project_title.return_value = record

        result = await update_project(mock_info, record.id, "Renamed")

        mock_store.update_project_title.assert_awaited_once_with(record.id, "Renamed")
        assert result.title == "Renamed"

    @pytest.mark.asyncio
    async def test_update_missing_project(self, mock_info, mock_store):
        mock_store.update_project_title.return_value = None

        assert await update_project(mock_info, str(ObjectId()), "x") is None

    @pytest.mark.asyncio
    async def test_delete_project_always_true(self, mock_info, mock_store):
        project_id = str(ObjectId())

        assert await delete_project(mock_info, project_id) is True
        mock_store.delete_project.assert_awaited_once_with(project_id)
        mock_store.list_todos_for_project.assert_not_called()


class TestAddUserToProject:
    @pytest.mark.asyncio
    async def test_missing_project(self, mock_info, mock_store):
        mock_store.get_project.return_value = None

        assert await add_user_to_project(mock_info, str(ObjectId()), str(ObjectId())) is None
        mock_store.add_project_member.assert_not_called()

    @pytest.mark.asyncio
    async def test_already_member_is_unchanged(self, mock_info, mock_store, caller):
        record = _project([caller.id])
        mock_store.get_project.return_value = record

        result = await add_user_to_project(mock_info, record.id, caller.id)

        assert result.member_user_ids == [caller.id]
        mock_store.add_project_member.assert_not_called()

    @pytest.mark.asyncio
    async def test_adds_new_member(self, mock_info, mock_store, caller):
        newcomer = str(ObjectId())
        record = _project([caller.id])
        mock_store.get_project.return_value = record
        mock_store.add_project_member.return_value = _project([caller.id, newcomer])

        result = await add_user_to_project(mock_info, record.id, newcomer)

        mock_store.add_project_member.assert_awaited_once_with(record.id, newcomer)
        assert result.member_user_ids == [caller.id, newcomer]

    @pytest.mark.asyncio
    async def test_unauthenticated(self, anonymous_info, mock_store):
        with pytest.raises(Unauthenticated):
            await add_user_to_project(anonymous_info, str(ObjectId()), str(ObjectId()))
        mock_store.get_project.assert_not_called()
