"""Unit tests for NoteService with a real repository on SQLite."""

import uuid
from datetime import timedelta

import pytest

from quirknotes.core.exceptions import (
    InvalidIdError,
    InvalidInputError,
    NotFoundError,
    UnauthorizedError,
)
from quirknotes.core.repositories.note_repository import NoteRepository
from quirknotes.core.services.note_service import NoteService, parse_note_id
from quirknotes.security import TokenIssuer


class ExplodingRepo:
    """Fails the test if the service reaches the store."""

    def __getattr__(self, name):
        raise AssertionError(f"store touched: {name}")


@pytest.fixture
def service(test_session, tokens):
    return NoteService(NoteRepository(test_session), tokens)


@pytest.fixture
def alice(tokens):
    return tokens.issue("alice")


@pytest.fixture
def bob(tokens):
    return tokens.issue("bob")


def test_parse_note_id():
    nid = uuid.uuid4()
    assert parse_note_id(str(nid)) == nid
    assert parse_note_id(nid) == nid
    with pytest.raises(InvalidIdError):
        parse_note_id("65a1f0c2e4b0")


@pytest.mark.asyncio
async def test_create_then_get_round_trip(service, alice):
    note_id = await service.create_note(alice, "t", "c")
    note = await service.get_note(alice, str(note_id))

    assert note.id == note_id
    assert (note.title, note.content, note.owner) == ("t", "c", "alice")


@pytest.mark.asyncio
@pytest.mark.parametrize("title,content", [("", "c"), ("t", ""), (None, "c"), ("t", None)])
async def test_create_requires_title_and_content(service, alice, title, content):
    with pytest.raises(InvalidInputError):
        await service.create_note(alice, title, content)


@pytest.mark.asyncio
async def test_invalid_token_rejected_before_store(tokens):
    service = NoteService(ExplodingRepo(), tokens)
    forged = TokenIssuer(key_source=lambda: "other").issue("alice")

    for token in (None, "", "garbage", forged):
        with pytest.raises(UnauthorizedError):
            await service.create_note(token, "t", "c")
        with pytest.raises(UnauthorizedError):
            await service.get_note(token, str(uuid.uuid4()))
        with pytest.raises(UnauthorizedError):
            await service.list_notes(token)
        with pytest.raises(UnauthorizedError):
            await service.update_note(token, str(uuid.uuid4()), title="x")
        with pytest.raises(UnauthorizedError):
            await service.delete_note(token, str(uuid.uuid4()))


@pytest.mark.asyncio
async def test_expired_token_rejected(clock):
    issuer = TokenIssuer(key_source=lambda: "k", clock=clock)
    token = issuer.issue("alice")
    clock.advance(hours=2)

    service = NoteService(ExplodingRepo(), issuer)
    with pytest.raises(UnauthorizedError):
        await service.list_notes(token)


@pytest.mark.asyncio
async def test_malformed_id(service, alice):
    for call in (service.get_note, service.delete_note):
        with pytest.raises(InvalidIdError):
            await call(alice, "not-an-id")
    with pytest.raises(InvalidIdError):
        await service.update_note(alice, "not-an-id", title="x")


@pytest.mark.asyncio
async def test_unknown_id_not_found(service, alice):
    missing = str(uuid.uuid4())
    with pytest.raises(NotFoundError):
        await service.get_note(alice, missing)
    with pytest.raises(NotFoundError):
        await service.update_note(alice, missing, title="x")
    with pytest.raises(NotFoundError):
        await service.delete_note(alice, missing)


@pytest.mark.asyncio
async def test_other_users_note_is_invisible(service, alice, bob):
    note_id = str(await service.create_note(alice, "secret", "stuff"))

    with pytest.raises(NotFoundError):
        await service.get_note(bob, note_id)
    with pytest.raises(NotFoundError):
        await service.update_note(bob, note_id, title="pwned")
    with pytest.raises(NotFoundError):
        await service.delete_note(bob, note_id)
    assert await service.list_notes(bob) == []

    note = await service.get_note(alice, note_id)
    assert (note.title, note.content) == ("secret", "stuff")


@pytest.mark.asyncio
async def test_list_notes(service, alice, bob):
    assert await service.list_notes(alice) == []

    first = await service.create_note(alice, "one", "1")
    second = await service.create_note(alice, "two", "2")
    await service.create_note(bob, "bob's", "b")

    notes = await service.list_notes(alice)
    assert {n.id for n in notes} == {first, second}
    assert all(n.owner == "alice" for n in notes)


@pytest.mark.asyncio
async def test_update_title_only_keeps_content(service, alice):
    note_id = str(await service.create_note(alice, "t", "c"))

    updated = await service.update_note(alice, note_id, title="T")
    assert (updated.title, updated.content) == ("T", "c")

    updated = await service.update_note(alice, note_id, title="", content="C")
    assert (updated.title, updated.content) == ("T", "C")


@pytest.mark.asyncio
@pytest.mark.parametrize("title,content", [(None, None), ("", ""), ("", None)])
async def test_update_requires_a_field(service, alice, title, content):
    note_id = str(await service.create_note(alice, "t", "c"))
    with pytest.raises(InvalidInputError):
        await service.update_note(alice, note_id, title=title, content=content)


@pytest.mark.asyncio
async def test_delete_then_get(service, alice):
    note_id = str(await service.create_note(alice, "t", "c"))

    deleted = await service.delete_note(alice, note_id)
    assert str(deleted.id) == note_id

    with pytest.raises(NotFoundError):
        await service.get_note(alice, note_id)
    with pytest.raises(NotFoundError):
        await service.update_note(alice, note_id, title="late")


@pytest.mark.asyncio
async def test_token_lifetime_respected(test_session, clock):
    issuer = TokenIssuer(key_source=lambda: "k", lifetime=timedelta(minutes=1), clock=clock)
    service = NoteService(NoteRepository(test_session), issuer)
    token = issuer.issue("alice")

    assert await service.list_notes(token) == []
    clock.advance(minutes=2)
    with pytest.raises(UnauthorizedError):
        await service.list_notes(token)


@pytest.fixture
def racing_service(database, test_session, tokens, monkeypatch):
    """Service whose store loses each note to another session right after the lookup."""
    repo = NoteRepository(test_session)
    lookup = repo.get_by_id_and_owner

    async def lookup_then_delete(note_id, owner):
        note = await lookup(note_id, owner)
        async with database.session() as other:
            await NoteRepository(other).delete_note(note_id, owner)
        return note

    monkeypatch.setattr(repo, "get_by_id_and_owner", lookup_then_delete)
    return NoteService(repo, tokens)


@pytest.mark.asyncio
async def test_update_racing_delete_is_not_found(racing_service, alice):
    note_id = await racing_service.create_note(alice, "t", "c")

    with pytest.raises(NotFoundError):
        await racing_service.update_note(alice, str(note_id), title="new")


@pytest.mark.asyncio
async def test_delete_racing_delete_is_not_found(racing_service, alice):
    note_id = await racing_service.create_note(alice, "t", "c")

    with pytest.raises(NotFoundError):
        await racing_service.delete_note(alice, str(note_id))
