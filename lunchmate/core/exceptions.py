"""Domain exceptions raised by services and mapped to HTTP errors in routers."""


class LunchmateError(Exception):
    """Base class for every domain error."""


class SessionNotFoundError(LunchmateError):
    """No matching session with the given id."""


class CandidateNotFoundError(LunchmateError):
    """The candidate is unknown or not in the session's visible pool."""


class InvalidModeError(LunchmateError):
    """The operation is not allowed in the session's current mode."""


class MatchInProgressError(LunchmateError):
    """A random draw is already pending for the session."""


class EmptyGroupError(LunchmateError):
    """A group chat needs at least one selected member."""


class ChatNotStartedError(LunchmateError):
    """The session has no open group chat."""
