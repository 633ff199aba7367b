class AppError(Exception):
    """Base app error."""


class ValidationError(AppError):
    pass


class ConfigError(AppError):
    pass


class TransportError(AppError):
    pass


class ResponseParseError(AppError):
    pass


class ApiError(AppError):
    def __init__(self, status: int, body: str = ""):
        self.status = int(status)
        self.body = body or ""
        super().__init__(f"{self.status}: {self.body}")
