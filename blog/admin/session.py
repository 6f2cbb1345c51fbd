"""
Session State

The session cookie carries one typed record, ``{name, authenticated}``,
under the ``user`` key. Anything else found there reads as anonymous.
"""

from dataclasses import dataclass

from flask import session

SESSION_KEY = 'user'


@dataclass(frozen=True)
class SessionState:
    name: str = ''
    authenticated: bool = False

    def to_dict(self):
        return {'name': self.name, 'authenticated': self.authenticated}

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            return cls()
        name = data.get('name')
        return cls(
            name=name if isinstance(name, str) else '',
            authenticated=data.get('authenticated') is True,
        )


def read_state():
    return SessionState.from_dict(session.get(SESSION_KEY))


def set_state(state):
    """Replace the session with ``state`` and give the cookie its max-age."""
    session.clear()
    session[SESSION_KEY] = state.to_dict()
    session.permanent = True


def expire():
    """Drop the session; Flask answers with an already-expired cookie.

    The session must stay empty after clearing, or Flask writes a fresh
    cookie instead of deleting it.
    """
    session.clear()


def is_authenticated():
    return read_state().authenticated
