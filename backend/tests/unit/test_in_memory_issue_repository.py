"""Unit tests for the in-memory issue store."""

import asyncio

import pytest

from app.domain.entities import Issue
from app.infrastructure.storage.in_memory_issue_repository import InMemoryIssueRepository


def _issue(title: str = "Title") -> Issue:
    return Issue(issue_title=title, issue_text="text", created_by="Tester")


@pytest.fixture
def repository() -> InMemoryIssueRepository:
    return InMemoryIssueRepository()


@pytest.mark.asyncio
async def test_returned_issues_are_copies(repository: InMemoryIssueRepository):
    await repository.create("p", _issue())
    [fetched] = await repository.get_all("p")
    fetched.issue_title = "changed without update"

    [stored] = await repository.get_all("p")
    assert stored.issue_title == "Title"


@pytest.mark.asyncio
async def test_update_merges_changes_into_stored_issue(repository: InMemoryIssueRepository):
    issue = await repository.create("p", _issue())

    updated = await repository.update("p", issue.id, {"status_text": "In QA"})

    assert updated.status_text == "In QA"
    assert updated.issue_title == "Title"
    assert updated.updated_on >= issue.updated_on
    [stored] = await repository.get_all("p")
    assert stored.status_text == "In QA"


@pytest.mark.asyncio
async def test_update_returns_copy(repository: InMemoryIssueRepository):
    issue = await repository.create("p", _issue())
    updated = await repository.update("p", issue.id, {"open": False})
    updated.issue_title = "changed without update"

    [stored] = await repository.get_all("p")
    assert stored.issue_title == "Title"
    assert stored.open is False


@pytest.mark.asyncio
async def test_update_unknown_issue_returns_none(repository: InMemoryIssueRepository):
    issue = await repository.create("p", _issue())
    assert await repository.update("p", "missing", {"status_text": "x"}) is None
    assert await repository.update("other", issue.id, {"status_text": "x"}) is None


@pytest.mark.asyncio
async def test_update_after_delete_returns_none(repository: InMemoryIssueRepository):
    issue = await repository.create("p", _issue())
    assert await repository.delete("p", issue.id) is True
    assert await repository.update("p", issue.id, {"status_text": "x"}) is None


@pytest.mark.asyncio
async def test_update_holds_lock_for_lookup_and_merge(repository: InMemoryIssueRepository):
    issue = await repository.create("p", _issue())

    async with repository._lock:
        pending = asyncio.ensure_future(repository.update("p", issue.id, {"status_text": "x"}))
        await asyncio.sleep(0)
        assert not pending.done()
        [stored] = repository._projects["p"]
        assert stored.status_text == ""

    assert (await pending).status_text == "x"


@pytest.mark.asyncio
async def test_delete_unknown_returns_false(repository: InMemoryIssueRepository):
    await repository.create("p", _issue())
    assert await repository.delete("p", "missing") is False
    assert await repository.delete("other", "missing") is False
    assert len(await repository.get_all("p")) == 1


@pytest.mark.asyncio
async def test_delete_keeps_order_of_remaining(repository: InMemoryIssueRepository):
    issues = [await repository.create("p", _issue(str(n))) for n in range(3)]
    await repository.delete("p", issues[1].id)
    assert [i.issue_title for i in await repository.get_all("p")] == ["0", "2"]
