# skillquest/core/errors.py
"""Error kinds raised by services and mapped to HTTP responses in main."""


class SkillQuestError(Exception):
    status_code = 500

    def __init__(self, message: str = "Internal Server Error"):
        super().__init__(message)
        self.message = message


class ValidationError(SkillQuestError):
    status_code = 400


class ConflictError(SkillQuestError):
    # duplicates are reported as 400 for client compatibility
    status_code = 400


class UnauthorizedError(SkillQuestError):
    status_code = 401


class ForbiddenError(SkillQuestError):
    status_code = 403


class NotFoundError(SkillQuestError):
    status_code = 404


class RateLimitError(SkillQuestError):
    status_code = 429


class UpstreamError(SkillQuestError):
    status_code = 500
