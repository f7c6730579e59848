import pytest

from fluentsql import Database
from fluentsql.errors import QueryError


@pytest.fixture
def db():
    database = Database("sqlite", {"database": ":memory:"})
    database.schema().create_table("events", lambda t: t.id().string("name").unique())
    yield database
    database.close()


def names(db):
    return [row["name"] for row in db.select("events").order_by("id").execute()]


def test_queue_defers_compilation(db):
    query = db.insert("events").set({"name": "signup"}).queue()
    assert query.is_queued
    assert not query.compiled
    assert db.queued == (query,)
    assert names(db) == []


def test_queued_builder_can_still_be_configured(db):
    query = db.insert("events").queue()
    query.set({"name": "late"})
    db.execute_queue()
    assert names(db) == ["late"]


def test_execute_queue_runs_in_insertion_order(db):
    db.insert("events").set({"name": "a"}).queue()
    db.insert("events").set({"name": "b"}).queue()
    db.update("events").set({"name": "c"}).where("name = ?", ["a"]).queue()
    db.select("events").order_by("id").queue()

    results = db.execute_queue()

    assert results[:3] == [True, True, True]
    assert [row["name"] for row in results[3]] == ["c", "b"]
    assert db.queued == ()


def test_failed_batch_rolls_back_and_clears_queue(db):
    db.insert("events").set({"name": "dup"}).queue()
    db.insert("events").set({"name": "dup"}).queue()
    db.insert("events").set({"name": "never"}).queue()

    with pytest.raises(QueryError):
        db.execute_queue()

    assert names(db) == []
    assert db.queued == ()


def test_empty_queue_is_a_no_op(db):
    assert db.execute_queue() == []


def test_builder_cannot_be_queued_twice(db):
    query = db.insert("events").set({"name": "x"}).queue()
    with pytest.raises(ValueError):
        query.queue()


def test_clear_queue(db):
    db.insert("events").set({"name": "x"}).queue()
    db.clear_queue()
    assert db.execute_queue() == []
    assert names(db) == []
