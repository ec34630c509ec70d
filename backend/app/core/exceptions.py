class CommunityError(Exception):
    """Base exception for the community backend."""

    status_code = 500


class PermissionDenied(CommunityError):
    """Raised when a role or category tier does not allow the action."""

    status_code = 403


class NotFound(CommunityError):
    """Raised when a looked-up row (user, post, question, news) does not exist."""

    status_code = 404


class CatalogUnavailable(CommunityError):
    """Raised when the question catalog cannot be read.

    The catalog recovers from this itself by serving the default question set.
    """

    status_code = 503


class SynthesisFailure(CommunityError):
    """Raised when the generative-text call fails or returns nothing usable."""

    status_code = 502


class SubmissionFailure(CommunityError):
    """Raised when a write to the data store fails."""

    status_code = 503


class InvalidInterview(CommunityError):
    """Raised when a replayed interview does not reach the submission step."""

    status_code = 422

    def __init__(self, status: str, answered: int, expected: int):
        self.status = status
        self.answered = answered
        self.expected = expected
        super().__init__(
            f"Interview is not complete (status={status}, answered {answered} of {expected} questions)"
        )
