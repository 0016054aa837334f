"""
Application-layer exceptions.

These exceptions are raised by use cases and infrastructure adapters and are
translated into ``{"error": <message>}`` responses by the handlers registered
in backend/errors.py:

- InvalidArgument -> 400
- NotFound -> 404
- Forbidden -> 403
- UpstreamFailure -> 500
"""


class FitTrackError(Exception):
    """Base class for all application errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgument(FitTrackError):
    """A required field is missing or malformed. Never retried."""

    status_code = 400


class NotFound(FitTrackError):
    """A referenced workout, user or exercise does not exist."""

    status_code = 404


class Forbidden(FitTrackError):
    """The caller does not own the resource it is trying to modify."""

    status_code = 403


class UpstreamFailure(FitTrackError):
    """The persistence store or an external API returned an error."""

    status_code = 500


class WorkoutCreationError(UpstreamFailure):
    """Error during atomic workout creation.

    Raised when the transactional insert of a workout together with its
    ExerciseLog rows fails. Nothing is persisted when this is raised.
    """

    pass


class LikeConflict(UpstreamFailure):
    """The like membership insert hit the (workout_id, user_id) unique constraint.

    The like already exists; callers re-run the toggle instead of surfacing
    this as a server error.
    """

    pass
