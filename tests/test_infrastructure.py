"""
Tests for identifiers, locking and access tokens.
"""
import string
import threading

import pytest

from forum_service.domain.exceptions import EntropySourceError
from forum_service.domain.models import User
from forum_service.infrastructure import ids
from forum_service.infrastructure.auth import create_access_token, decode_access_token
from forum_service.infrastructure.locks import ReadWriteLock


def test_entity_ids_are_24_hex_chars():
    value = ids.generate_hex_id()
    assert len(value) == 24
    assert set(value) <= set(string.hexdigits.lower())


def test_session_ids_are_16_hex_chars():
    assert len(ids.generate_session_id()) == 16


def test_ids_are_unique():
    assert len({ids.generate_hex_id() for _ in range(1000)}) == 1000


def test_entropy_failure(monkeypatch):
    def broken(num_bytes):
        raise OSError("no randomness")

    monkeypatch.setattr(ids.secrets, "token_hex", broken)

    with pytest.raises(EntropySourceError):
        ids.generate_hex_id()


def test_access_token_round_trip():
    token = create_access_token(User(username="alice", password="secret", id="u1"))
    claims = decode_access_token(token)

    assert claims["user"] == {"username": "alice", "id": "u1"}
    assert claims["exp"] - claims["iat"] == 12 * 3600


def test_tampered_token_is_rejected():
    token = create_access_token(User(username="alice", password="secret", id="u1"))
    assert decode_access_token(token + "x") is None


def test_readers_share_the_lock():
    lock = ReadWriteLock()
    inside = threading.Barrier(2, timeout=5)

    def reader():
        with lock.read_locked():
            inside.wait()

    threads = [threading.Thread(target=reader) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5)

    assert not inside.broken


def test_writer_excludes_readers():
    lock = ReadWriteLock()
    events = []

    lock.acquire_write()
    reader = threading.Thread(target=lambda: (lock.acquire_read(), events.append("read"), lock.release_read()))
    reader.start()
    reader.join(timeout=0.2)
    events.append("write done")
    lock.release_write()
    reader.join(timeout=5)

    assert events == ["write done", "read"]
