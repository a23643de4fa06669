"""Tests for username resolution, persistence and logout."""

from __future__ import annotations

from github_picker.domain.value_objects import Credential
from github_picker.services.credential_resolver import (
    LOGIN_FIELD,
    USERNAME_PREFERENCE,
    LoginRequired,
    ResolvedCredential,
)


class TestResolve:
    def test_nothing_requires_login(self, github, resolver):
        outcome = resolver.resolve(None, None)
        assert isinstance(outcome, LoginRequired)
        assert [(f.name, f.type) for f in outcome.form.fields] == [(LOGIN_FIELD, "text")]
        assert outcome.form.fields[0].label == "GitHub username:"
        assert github.requests == []

    def test_stored_without_validation(self, github, resolver):
        assert resolver.resolve("alice", None, validate=False) == ResolvedCredential(
            Credential("alice")
        )
        assert github.requests == []

    def test_stored_validated(self, github, resolver):
        github.add("/users/alice", json={"login": "alice"})
        assert resolver.resolve("alice", None) == ResolvedCredential(Credential("alice"))

    def test_invalid_stored_falls_through_to_submitted(self, github, resolver):
        github.add("/users/bob", json={"login": "bob"})
        outcome = resolver.resolve("ghost", "bob")
        assert outcome == ResolvedCredential(Credential("bob"), persist=True)
        assert github.paths == ["/users/ghost", "/users/bob"]

    def test_invalid_submitted(self, github, resolver):
        assert isinstance(resolver.resolve(None, "ghost"), LoginRequired)

    def test_submitted_with_bad_characters_is_ignored(self, github, resolver):
        assert isinstance(resolver.resolve(None, "../etc", validate=False), LoginRequired)
        assert github.requests == []


class TestCheckLogin:
    def test_submitted_is_persisted(self, github, resolver, preferences):
        github.add("/users/alice", json={"login": "alice"})
        assert resolver.check_login("alice")
        assert preferences.get(USERNAME_PREFERENCE) == "alice"
        assert resolver.credential == Credential("alice")

    def test_stored_preference_is_used(self, github, resolver, preferences):
        preferences.set(USERNAME_PREFERENCE, "alice")
        github.add("/users/alice", json={"login": "alice"})
        assert resolver.check_login()
        assert resolver.credential == Credential("alice")

    def test_not_logged_in(self, resolver):
        assert not resolver.check_login()
        assert resolver.credential is None

    def test_rejected_stored_preference_is_kept(self, resolver, preferences):
        preferences.set(USERNAME_PREFERENCE, "ghost")
        assert not resolver.check_login()
        assert preferences.get(USERNAME_PREFERENCE) == "ghost"


def test_logout_clears_everything(github, resolver, preferences):
    github.add("/users/alice", json={"login": "alice"})
    resolver.check_login("alice")

    form = resolver.logout()

    assert resolver.credential is None
    assert preferences.get(USERNAME_PREFERENCE) is None
    assert [f.name for f in form.fields] == [LOGIN_FIELD]
