"""Service-level tests: validation, ordering, and atomic upvotes."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from ideaboard.service.idea_service import NotFoundError, ValidationError


def _stored_upvotes(database, idea_id):
    with database.connect() as conn:
        return conn.execute("SELECT upvotes FROM ideas WHERE id = ?", (idea_id,)).fetchone()["upvotes"]


# --- create_idea ---

def test_create_idea_returns_stored_record(service):
    idea = service.create_idea("Build a better mousetrap")
    assert idea.id >= 1
    assert idea.text == "Build a better mousetrap"
    assert idea.upvotes == 0
    assert idea.created_at


def test_create_idea_trims_text(service):
    idea = service.create_idea("   padded idea \n")
    assert idea.text == "padded idea"


def test_create_idea_accepts_exactly_280_chars(service):
    idea = service.create_idea("x" * 280)
    assert len(idea.text) == 280


@pytest.mark.parametrize("text", [None, "", "   ", "\n\t", 42])
def test_create_idea_rejects_missing_or_blank_text(service, text):
    with pytest.raises(ValidationError, match="required"):
        service.create_idea(text)
    assert service.list_ideas() == []


def test_create_idea_rejects_281_chars(service):
    with pytest.raises(ValidationError, match="280 characters or less"):
        service.create_idea("x" * 281)
    assert service.list_ideas() == []


def test_length_limit_applies_before_trimming(service):
    # 270 visible characters, 290 as sent
    with pytest.raises(ValidationError):
        service.create_idea(" " * 10 + "y" * 270 + " " * 10)
    assert service.list_ideas() == []


def test_ids_are_distinct(service):
    first = service.create_idea("one")
    second = service.create_idea("two")
    assert first.id != second.id


# --- list_ideas ---

def test_list_ideas_empty(service):
    assert service.list_ideas() == []


def test_list_ideas_newest_first(service):
    a = service.create_idea("A")
    b = service.create_idea("B")
    c = service.create_idea("C")
    ids = [i.id for i in service.list_ideas()]
    assert ids[:3] == [c.id, b.id, a.id]


# --- upvote_idea ---

def test_upvote_increments_by_one(service):
    idea = service.create_idea("vote for me")
    updated = service.upvote_idea(idea.id)
    assert updated.upvotes == 1
    assert updated.id == idea.id
    assert updated.text == idea.text
    assert updated.created_at == idea.created_at


def test_upvote_accepts_string_id(service):
    idea = service.create_idea("path ids arrive as strings")
    assert service.upvote_idea(str(idea.id)).upvotes == 1


def test_upvote_missing_id_raises_and_mutates_nothing(service, database):
    idea = service.create_idea("untouched")
    with pytest.raises(NotFoundError):
        service.upvote_idea(999999)
    assert _stored_upvotes(database, idea.id) == 0


@pytest.mark.parametrize("bad_id", ["abc", "", None, "1.5", "1_0", " 5 ", "+5", "-1", "0", "\u0661", True])
def test_upvote_non_integer_id_is_not_found(service, bad_id):
    with pytest.raises(NotFoundError):
        service.upvote_idea(bad_id)


def test_concurrent_upvotes_are_not_lost(service, database):
    idea = service.create_idea("popular")
    n = 40
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: service.upvote_idea(idea.id), range(n)))
    assert len(results) == n
    assert _stored_upvotes(database, idea.id) == n
    # Each call saw a distinct post-increment value.
    assert sorted(r.upvotes for r in results) == list(range(1, n + 1))


def test_underscored_id_does_not_touch_another_idea(service, database):
    ideas = [service.create_idea(f"i{n}") for n in range(12)]
    with pytest.raises(NotFoundError):
        service.upvote_idea("1_0")
    assert all(_stored_upvotes(database, i.id) == 0 for i in ideas)


def test_id_beyond_sqlite_range_is_not_found(service):
    with pytest.raises(NotFoundError):
        service.upvote_idea("99999999999999999999999")
    with pytest.raises(NotFoundError):
        service.upvote_idea(2**63)


def test_create_rejects_unencodable_text(service):
    with pytest.raises(ValidationError):
        service.create_idea("bad \ud800 idea")
    assert service.list_ideas() == []


def test_created_at_has_one_format(service, database):
    created = service.create_idea("stamped")
    with database.connect() as conn:
        conn.execute("INSERT INTO ideas (text) VALUES ('defaulted')")
    stamps = [i.created_at for i in service.list_ideas()]
    assert created.created_at in stamps
    assert all(s.endswith("+00:00") and "T" in s for s in stamps)


def test_module_has_docstring():
    import ideaboard.service.idea_service as module
    assert module.__doc__.startswith("Business rules")
