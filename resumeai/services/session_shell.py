from __future__ import annotations

import json
import logging
import re

from pydantic import ValidationError

from resumeai.core.config import settings
from resumeai.core.session_store import LocalStore
from resumeai.schemas.session import LoginMode, Session, SessionView

logger = logging.getLogger(__name__)

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 6


class LoginValidationError(ValueError):
    def __init__(self, errors: dict[str, str]):
        super().__init__("; ".join(f"{field}: {message}" for field, message in errors.items()))
        self.errors = errors


def validate_login(email: str, password: str, name: str | None, mode: LoginMode) -> dict[str, str]:
    errors: dict[str, str] = {}

    if mode == "sign_up" and not (name or "").strip():
        errors["name"] = "Name is required"

    if not email.strip():
        errors["email"] = "Email is required"
    elif not _EMAIL_RE.match(email):
        errors["email"] = "Invalid email format"

    if not password:
        errors["password"] = "Password is required"
    elif len(password) < MIN_PASSWORD_LENGTH:
        errors["password"] = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"

    return errors


class SessionShell:
    """Owns the current user and the login/dashboard routing decision.

    The session is rehydrated from local storage on construction. Only
    ``login`` and ``logout`` change it. A stored value that does not decode to
    a session is removed and the shell starts anonymous.
    """

    def __init__(self, store: LocalStore, storage_key: str | None = None):
        self._store = store
        self._key = storage_key or settings.session_storage_key
        self._session: Session | None = self._restore()

    def _restore(self) -> Session | None:
        raw = self._store.get_item(self._key)
        if raw is None:
            return None
        try:
            payload = json.loads(raw)
            session = Session.model_validate(payload)
        except (ValueError, ValidationError) as exc:
            logger.debug("stored_session_discarded key=%s: %s", self._key, exc)
            self._store.remove_item(self._key)
            return None
        if not session.email:
            logger.debug("stored_session_discarded key=%s: empty email", self._key)
            self._store.remove_item(self._key)
            return None
        return session

    @property
    def session(self) -> Session | None:
        return self._session

    @property
    def is_authenticated(self) -> bool:
        return self._session is not None

    def login(self, email: str, password: str, name: str | None = None, mode: LoginMode = "sign_in") -> Session:
        errors = validate_login(email, password, name, mode)
        if errors:
            raise LoginValidationError(errors)

        email = email.strip()
        session = Session(name=(name or "").strip() or email.split("@")[0], email=email)
        self._store.set_item(self._key, session.model_dump_json())
        self._session = session
        logger.info("session_login mode=%s", mode)
        return session

    def logout(self) -> None:
        self._session = None
        self._store.remove_item(self._key)
        logger.info("session_logout")

    def view(self) -> SessionView:
        if self._session is None:
            return SessionView(view="login")
        return SessionView(view="dashboard", user=self._session, display_name=self._session.display_name)
