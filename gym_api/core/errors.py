"""Request errors answered with the ``{"ok": false, "error": ...}`` envelope."""


class GymApiError(ValueError):
    status_code = 400
    default_message = "bad request"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MalformedRequest(GymApiError):
    status_code = 400
    default_message = "Expected JSON body"


class SessionNotFound(GymApiError):
    status_code = 404
    default_message = "Session not found"


class SessionAlreadyEnded(GymApiError):
    status_code = 409
    default_message = "Session already ended"
