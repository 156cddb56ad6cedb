#!/usr/bin/env python3
"""
Tests for authentication and the session store.
Covers login/logout state changes, registration conflicts, token shape,
and concurrent access to the shared session store.
"""

import threading

import pytest

from models import Chef, ConflictError, UnauthenticatedError
from services import AuthService, SessionStore


def test_login_returns_opaque_token(auth_service, chef):
    """Login with chef1/secret yields a token that does not embed the credentials"""
    token = auth_service.login("chef1", "secret")
    assert token
    assert "secret" not in token
    assert "chef1" not in token
    assert auth_service.get_chef_from_session_token(token).id == chef.id


def test_each_login_gets_a_new_token(auth_service, chef):
    first = auth_service.login("chef1", "secret")
    second = auth_service.login("chef1", "secret")
    assert first != second
    assert len(auth_service.sessions) == 2


@pytest.mark.parametrize("username, password", [
    ("chef1", "wrong"),
    ("chef", "secret"),
    ("CHEF1", "secret"),
    ("nobody", "secret"),
    ("", "secret"),
])
def test_failed_login_returns_none(auth_service, chef, username, password):
    assert auth_service.login(username, password) is None
    assert len(auth_service.sessions) == 0


def test_login_requires_exact_username(auth_service, chef_repository):
    """Overlapping usernames do not match each other"""
    chef_repository.create(Chef(username="chef10", password="other"))
    chef_repository.create(Chef(username="chef1", password="secret"))
    assert auth_service.login("chef1", "other") is None
    token = auth_service.login("chef1", "secret")
    assert auth_service.require_chef(token).username == "chef1"


def test_logout_then_lookup_is_unauthenticated(auth_service, chef):
    token = auth_service.login("chef1", "secret")
    assert auth_service.require_chef(token).username == "chef1"

    assert auth_service.logout(token)

    assert auth_service.get_chef_from_session_token(token) is None
    with pytest.raises(UnauthenticatedError):
        auth_service.require_chef(token)


def test_logout_is_idempotent(auth_service, chef):
    token = auth_service.login("chef1", "secret")
    assert auth_service.logout(token)
    assert not auth_service.logout(token)
    assert not auth_service.logout("never-issued")
    assert not auth_service.logout(None)


def test_logout_accepts_bearer_form(auth_service, chef):
    token = auth_service.login("chef1", "secret")
    assert auth_service.logout(f"Bearer {token}")
    assert token not in auth_service.sessions


def test_extract_token():
    assert AuthService.extract_token("abc") == "abc"
    assert AuthService.extract_token("Bearer abc") == "abc"
    assert AuthService.extract_token("bearer  abc ") == "abc"
    assert AuthService.extract_token("") is None
    assert AuthService.extract_token(None) is None
    assert AuthService.extract_token("Bearer ") is None


def test_register_chef_then_login(auth_service):
    registered = auth_service.register_chef(Chef(username="newbie", email="n@example.com", password="pw"))
    assert registered.id > 0
    assert auth_service.login("newbie", "pw")


def test_register_same_username_twice_conflicts(auth_service):
    auth_service.register_chef(Chef(username="twin", password="a"))
    with pytest.raises(ConflictError):
        auth_service.register_chef(Chef(username="twin", password="b"))


def test_register_similar_username_is_allowed(auth_service):
    """Conflicts are exact matches only"""
    auth_service.register_chef(Chef(username="chef", password="a"))
    assert auth_service.register_chef(Chef(username="chef2", password="b")).id > 0


def test_services_do_not_share_sessions(chef_service, chef):
    first = AuthService(chef_service)
    second = AuthService(chef_service)
    token = first.login("chef1", "secret")
    assert first.require_chef(token)
    assert second.get_chef_from_session_token(token) is None


def test_close_drops_all_sessions(auth_service, chef):
    auth_service.login("chef1", "secret")
    auth_service.login("chef1", "secret")
    auth_service.close()
    assert len(auth_service.sessions) == 0


def test_session_store_basic_operations():
    store = SessionStore()
    chef = Chef(id=1, username="chef1")
    store.put("token", chef)
    assert store.get("token") == chef
    assert "token" in store
    assert store.remove("token")
    assert store.get("token") is None
    assert not store.remove("token")


def test_session_store_concurrent_access():
    """Many threads putting, reading and removing their own tokens"""
    store = SessionStore()
    thread_count = 16
    per_thread = 200
    errors = []
    start = threading.Barrier(thread_count)

    def worker(worker_id):
        start.wait()
        chef = Chef(id=worker_id, username=f"chef{worker_id}")
        for i in range(per_thread):
            token = f"{worker_id}-{i}"
            store.put(token, chef)
            if store.get(token) is not chef:
                errors.append(f"missing {token}")
            if i % 2 == 0:
                store.remove(token)
                if store.get(token) is not None:
                    errors.append(f"resurrected {token}")

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(thread_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert len(store) == thread_count * per_thread // 2


def test_concurrent_logins_and_logouts(auth_service, chef):
    tokens = []
    lock = threading.Lock()

    def login_then_logout():
        token = auth_service.login("chef1", "secret")
        with lock:
            tokens.append(token)
        auth_service.logout(token)

    threads = [threading.Thread(target=login_then_logout) for _ in range(20)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(set(tokens)) == 20
    assert len(auth_service.sessions) == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
