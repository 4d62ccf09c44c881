"""
Pantry Chef - Auth context.

AuthContext is built once at application start and handed to every view
that needs the current user. It owns the Supabase auth session and a
loading flag, exposes sign_in / sign_up / sign_out, and notifies
subscribers whenever the session changes.

The session is persisted to a JSON file so separate CLI invocations share
one login.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

import httpx
from pydantic import BaseModel

from pantry_chef.views.notifications import Notifier, error_notification

logger = logging.getLogger(__name__)


class AuthSession(BaseModel):
    """The parts of a Supabase session the app keeps."""

    access_token: str
    refresh_token: str
    user_id: str
    email: str | None = None

    @classmethod
    def from_supabase(cls, session: Any) -> "AuthSession":
        return cls(
            access_token=session.access_token,
            refresh_token=session.refresh_token,
            user_id=session.user.id,
            email=session.user.email,
        )


@dataclass
class AuthResult:
    """Outcome of a sign-in or sign-up attempt."""

    error: str | None = None
    needs_confirmation: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


SessionListener = Callable[[AuthSession | None], None]


class AuthContext:
    """
    Explicit auth state.

    Attributes:
        session: current session, or None when signed out
        loading: True until restore() has run
    """

    def __init__(
        self,
        auth_client: Any,
        session_file: Path | None = None,
        notifier: Notifier | None = None,
    ):
        """
        Args:
            auth_client: a Supabase client (only .auth is used)
            session_file: where to persist the session; None keeps it in memory
            notifier: receives errors that leave the saved session in place
        """
        self._client = auth_client
        self._session_file = session_file
        self._notifier = notifier
        self._listeners: list[SessionListener] = []
        self.session: AuthSession | None = None
        self.loading = True

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def user_id(self) -> str | None:
        return self.session.user_id if self.session else None

    @property
    def email(self) -> str | None:
        return self.session.email if self.session else None

    @property
    def is_authenticated(self) -> bool:
        return self.session is not None

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a session-change listener. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_session(self, session: AuthSession | None) -> None:
        self.session = session
        self._persist()
        for listener in list(self._listeners):
            listener(session)

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def _persist(self) -> None:
        if self._session_file is None:
            return
        if self.session is None:
            self._session_file.unlink(missing_ok=True)
            return
        self._session_file.parent.mkdir(parents=True, exist_ok=True)
        self._session_file.write_text(self.session.model_dump_json(), encoding="utf-8")

    def _read_stored(self) -> AuthSession | None:
        if self._session_file is None or not self._session_file.exists():
            return None
        try:
            return AuthSession.model_validate(
                json.loads(self._session_file.read_text(encoding="utf-8"))
            )
        except (ValueError, OSError) as e:
            logger.warning(f"Ignoring unreadable session file: {e}")
            return None

    def restore(self) -> AuthSession | None:
        """
        Load a persisted session and refresh it with Supabase.

        A session Supabase rejects (or an unreadable file) is dropped. If
        Supabase cannot be reached the file is kept for the next run, this
        run stays signed out and the error goes to the notifier. Clears the
        loading flag.
        """
        stored = self._read_stored()
        session = None
        if stored is not None:
            try:
                response = self._client.auth.set_session(stored.access_token, stored.refresh_token)
            except httpx.HTTPError as e:
                logger.warning(f"Could not reach Supabase to restore session: {e}")
                self.loading = False
                self.session = None
                if self._notifier is not None:
                    self._notifier.notify(error_notification(e))
                return None
            except Exception as e:
                logger.warning(f"Could not restore session: {e}")
            else:
                if response.session:
                    session = AuthSession.from_supabase(response.session)

        self.loading = False
        self._set_session(session)
        return session

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def sign_in(self, email: str, password: str) -> AuthResult:
        try:
            response = self._client.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except Exception as e:
            logger.warning(f"Sign in failed for {email}: {e}")
            return AuthResult(error=str(e))

        if not response.session:
            return AuthResult(error="Invalid login credentials")

        self._set_session(AuthSession.from_supabase(response.session))
        return AuthResult()

    def sign_up(self, email: str, password: str) -> AuthResult:
        """
        Create an account.

        When the project requires email confirmation Supabase returns no
        session; the result then has needs_confirmation set.
        """
        try:
            response = self._client.auth.sign_up({"email": email, "password": password})
        except Exception as e:
            logger.warning(f"Sign up failed for {email}: {e}")
            return AuthResult(error=str(e))

        if response.session:
            self._set_session(AuthSession.from_supabase(response.session))
            return AuthResult()
        return AuthResult(needs_confirmation=True)

    def sign_out(self) -> None:
        """Sign out remotely if possible; local state is always cleared."""
        try:
            self._client.auth.sign_out()
        except Exception as e:
            logger.warning(f"Remote sign out failed: {e}")
        self._set_session(None)
