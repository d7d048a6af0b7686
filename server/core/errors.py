# server/core/errors.py


class KanbanError(Exception):
    """Base error for the board core. Carries the HTTP status it maps to."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(KanbanError):
    status_code = 400


class ParentMismatchError(ValidationError):
    """Entity and target parent belong to different projects or columns."""


class ConflictError(KanbanError):
    status_code = 400


class UnauthorizedError(KanbanError):
    status_code = 401


class ForbiddenError(KanbanError):
    status_code = 403


class NotFoundError(KanbanError):
    status_code = 404


class InternalError(KanbanError):
    status_code = 500
