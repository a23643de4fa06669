"""Credential resolution — which GitHub account the current user browses."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from github_picker.domain.entities import FormField, LoginForm
from github_picker.domain.ports.github_gateway import GitHubGateway
from github_picker.domain.ports.preference_store import PreferenceStore
from github_picker.domain.ports.presentation import StringTable
from github_picker.domain.value_objects import Credential, clean_username

logger = logging.getLogger(__name__)

USERNAME_PREFERENCE = "repository_github_username"
LOGIN_FIELD = "github_username"


@dataclass(frozen=True, slots=True)
class ResolvedCredential:
    """A usable credential; ``persist`` asks the caller to store the username."""

    credential: Credential
    persist: bool = False


@dataclass(frozen=True, slots=True)
class LoginRequired:
    """No usable username: the host must show ``form``."""

    form: LoginForm


class CredentialResolver:
    """Resolves, remembers and forgets the GitHub username of one host user.

    The username itself lives in the host's :class:`PreferenceStore`; this
    object only holds the credential accepted for the current request.
    """

    def __init__(
        self,
        gateway: GitHubGateway,
        preferences: PreferenceStore,
        strings: StringTable,
    ) -> None:
        self._gateway = gateway
        self._preferences = preferences
        self._strings = strings
        self._credential: Credential | None = None

    @property
    def credential(self) -> Credential | None:
        return self._credential

    def login_form(self) -> LoginForm:
        """Single text field asking for the GitHub username."""
        return LoginForm(
            fields=[
                FormField(
                    name=LOGIN_FIELD,
                    label=self._strings.get("username"),
                    type="text",
                    value="",
                )
            ]
        )

    def resolve(
        self,
        stored: str | None,
        submitted: str | None,
        validate: bool = True,
    ) -> ResolvedCredential | LoginRequired:
        """Pick the stored username, else the submitted one, else ask to log in."""
        if stored:
            if self._accept(stored, validate):
                return ResolvedCredential(Credential(stored))
            logger.info("Stored GitHub username %s rejected", stored)

        submitted = clean_username(submitted)
        if submitted:
            if self._accept(submitted, validate):
                return ResolvedCredential(Credential(submitted), persist=True)
            logger.info("Submitted GitHub username %s rejected", submitted)

        return LoginRequired(self.login_form())

    def check_login(self, submitted: str | None = None, validate: bool = True) -> bool:
        """Resolve against the stored preference and remember the outcome."""
        outcome = self.resolve(self._preferences.get(USERNAME_PREFERENCE), submitted, validate)
        if isinstance(outcome, LoginRequired):
            self._credential = None
            return False

        if outcome.persist:
            self._preferences.set(USERNAME_PREFERENCE, outcome.credential.username)
            logger.info("Logged in as GitHub user %s", outcome.credential.username)
        self._credential = outcome.credential
        return True

    def forget(self) -> None:
        """Drop the stored username so the next browse asks for it again."""
        self._preferences.unset(USERNAME_PREFERENCE)

    def logout(self) -> LoginForm:
        """Clear the credential and the stored username."""
        if self._credential is not None:
            logger.info("Logging out GitHub user %s", self._credential.username)
        self._credential = None
        self.forget()
        return self.login_form()

    def _accept(self, username: str, validate: bool) -> bool:
        if not validate:
            return True
        return self._gateway.user_exists(username)
