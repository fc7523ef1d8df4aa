"""Service layer — business logic orchestration.

Every failure a service reports is a :class:`ServiceError` subclass.  The
class decides the HTTP status and the wire ``code``; the API layer never
inspects messages.
"""


class ServiceError(Exception):
    """Base service exception."""

    status_code: int = 500
    code: str = "INTERNAL_ERROR"


class UnexpectedError(ServiceError):
    """Store or transport failure (-> HTTP 500)."""


class NotFoundError(ServiceError):
    """Resource not found (-> HTTP 404)."""

    status_code = 404
    code = "NOT_FOUND"


class UserNotFoundError(NotFoundError):
    """User id unknown."""


class TeamNotFoundError(NotFoundError):
    """Team name unknown, or the user belongs to no team."""


class PullRequestNotFoundError(NotFoundError):
    """PR id unknown."""


class AlreadyExistsError(ServiceError):
    """Duplicate create (-> HTTP 409)."""

    status_code = 409
    code = "ALREADY_EXISTS"


class TeamExistsError(AlreadyExistsError):
    status_code = 400
    code = "TEAM_EXISTS"


class PullRequestExistsError(AlreadyExistsError):
    code = "PR_EXISTS"


class ConflictError(ServiceError):
    """Operation invalid for the current state (-> HTTP 409)."""

    status_code = 409
    code = "CONFLICT"


class PullRequestMergedError(ConflictError):
    """Reviewer changes are frozen once a PR is merged."""

    code = "PR_MERGED"


class InvalidStateError(ServiceError):
    """Request refers to state that does not hold (-> HTTP 409)."""

    status_code = 409
    code = "INVALID_STATE"


class ReviewerNotAssignedError(InvalidStateError):
    code = "NOT_ASSIGNED"


class NoCandidateError(ServiceError):
    """Replacement search found nobody eligible (-> HTTP 409)."""

    status_code = 409
    code = "NO_CANDIDATE"
