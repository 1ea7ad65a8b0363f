# tests/test_session_store.py
"""Unit tests for the server-side session store and role gate."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from app.config import settings
from app.models.enums import UserRole
from app.services.exceptions import AccessDenied
from app.services.session_store import (
    Session, SessionState, SessionStore, check_access, check_ownership,
)


@pytest.fixture
def store():
    return SessionStore()


class TestSessionLifecycle:
    def test_new_session_is_loading(self):
        assert Session().state == SessionState.LOADING

    def test_login_and_restore(self, db, store, citizen_user):
        session = store.login(db, "citizen@example.com", "p@ssw0rd")
        assert session.state == SessionState.CITIZEN
        assert session.landing_page == "/dashboard"

        restored = store.restore(db, session.token)
        assert restored.is_authenticated
        assert restored.user.id == citizen_user.id

    def test_admin_state(self, db, store, admin_user):
        session = store.login(db, admin_user.email, "p@ssw0rd")
        assert session.state == SessionState.ADMIN
        assert session.landing_page == "/admin/dashboard"

    def test_wrong_password(self, db, store, citizen_user):
        with pytest.raises(AccessDenied) as exc:
            store.login(db, citizen_user.email, "wrong-password")
        assert exc.value.status_code == 401
        assert len(store) == 0

    def test_logout_invalidates_token(self, db, store, citizen_user):
        session = store.login(db, citizen_user.email, "p@ssw0rd")
        assert store.logout(session.token).state == SessionState.UNAUTHENTICATED
        assert store.restore(db, session.token).state == SessionState.UNAUTHENTICATED

    def test_clear_on_shutdown(self, db, store, citizen_user):
        session = store.login(db, citizen_user.email, "p@ssw0rd")
        store.clear()
        assert not store.restore(db, session.token).is_authenticated

    @pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
    def test_garbage_token_is_unauthenticated(self, db, store, token):
        assert store.restore(db, token).state == SessionState.UNAUTHENTICATED

    def test_token_from_another_store_rejected(self, db, store, citizen_user):
        token = SessionStore().login(db, citizen_user.email, "p@ssw0rd").token
        assert not store.restore(db, token).is_authenticated


class TestAccessDecisions:
    def test_unauthenticated_denied_with_login_redirect(self):
        decision = check_access(Session.unauthenticated(), UserRole.ADMIN)
        assert not decision.allowed
        assert decision.status_code == 401
        assert decision.redirect_to == "/login"

    def test_role_mismatch_redirects_to_own_dashboard(self, citizen_user):
        decision = check_access(Session.for_user(citizen_user, "t"), UserRole.ADMIN)
        assert decision.status_code == 403
        assert decision.redirect_to == "/dashboard"
        with pytest.raises(AccessDenied):
            decision.raise_if_denied()

    def test_matching_role_allowed(self, admin_user):
        assert check_access(Session.for_user(admin_user, "t"), UserRole.ADMIN).allowed

    def test_citizen_owns_only_own_records(self, citizen_user):
        session = Session.for_user(citizen_user, "t")
        assert check_ownership(session, citizen_user.id).allowed
        assert check_ownership(session, "someone-else").status_code == 403

    def test_admin_owns_everything(self, admin_user):
        assert check_ownership(Session.for_user(admin_user, "t"), "someone-else").allowed


class TestExpiredEntries:
    def test_expired_logins_do_not_accumulate(self, db, store, citizen_user, monkeypatch):
        monkeypatch.setattr(settings, "ACCESS_TOKEN_EXPIRE_MINUTES", -1)
        tokens = [store.login(db, citizen_user.email, "p@ssw0rd").token for _ in range(5)]

        # Each login prunes the ones before it
        assert len(store) == 1

        for token in tokens:
            assert store.restore(db, token).state == SessionState.UNAUTHENTICATED
            store.logout(token)
        assert len(store) == 0

    def test_restore_drops_expired_entry(self, db, store, citizen_user, monkeypatch):
        monkeypatch.setattr(settings, "ACCESS_TOKEN_EXPIRE_MINUTES", -1)
        token = store.login(db, citizen_user.email, "p@ssw0rd").token
        store.restore(db, token)
        assert len(store) == 0

    def test_logout_of_expired_token_drops_entry(self, db, store, citizen_user, monkeypatch):
        monkeypatch.setattr(settings, "ACCESS_TOKEN_EXPIRE_MINUTES", -1)
        token = store.login(db, citizen_user.email, "p@ssw0rd").token
        store.logout(token)
        assert len(store) == 0

    def test_prune_keeps_live_tokens(self, db, store, citizen_user):
        token = store.login(db, citizen_user.email, "p@ssw0rd").token
        assert store.prune() == 0
        assert store.restore(db, token).is_authenticated
