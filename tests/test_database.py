from sqlalchemy import event

from app.core.database import begin_write
from app.db.models import Plan


def _begin_statements(engine):
    statements = []

    @event.listens_for(engine, "before_cursor_execute")
    def _record(conn, cursor, statement, parameters, context, executemany):
        if statement.startswith("BEGIN"):
            statements.append(statement)

    return statements


def test_reads_open_a_deferred_transaction(engine, session_factory, owner):
    statements = _begin_statements(engine)
    with session_factory() as session:
        session.query(Plan).count()
    assert statements == ["BEGIN"]


def test_begin_write_opens_an_immediate_transaction(engine, session_factory):
    statements = _begin_statements(engine)
    with session_factory() as session:
        begin_write(session)
        session.query(Plan).count()
    assert statements == ["BEGIN IMMEDIATE"]


def test_begin_write_ends_an_open_read(db, owner):
    user_id = owner.id
    db.query(Plan).count()
    assert db.in_transaction()
    begin_write(db)
    # the read was committed; the write runs in a fresh IMMEDIATE transaction
    db.add(Plan(title="After read", user_id=user_id))
    db.commit()
    assert db.query(Plan).count() == 1


def test_readers_are_not_blocked_by_a_writer(db, session_factory, owner):
    user_id = owner.id
    db.close()

    with session_factory() as writer, session_factory() as reader:
        begin_write(writer)
        writer.add(Plan(title="Pending", user_id=user_id))
        writer.flush()

        # the writer holds the write lock; a plain read still goes through
        assert reader.query(Plan).count() == 0
        reader.rollback()

        writer.commit()

    with session_factory() as session:
        assert session.query(Plan).count() == 1
