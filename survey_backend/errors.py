# survey_backend/errors.py

from dataclasses import dataclass
from typing import Any, Union

# Error taxonomy and result variants returned by the services.
# Routes translate an Err into a JSON {"error": message} body with its status code.


class ConfigError(Exception):
    """Raised at startup when the configuration is unusable."""


class ServiceError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict:
        return {'error': self.message}


class ValidationError(ServiceError):
    status_code = 400


class ConflictError(ServiceError):
    status_code = 400


class AuthError(ServiceError):
    # 401 for a missing token, 403 for a rejected one, 400 for bad login credentials
    status_code = 403


class StorageError(ServiceError):
    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)


@dataclass(frozen=True)
class Ok:
    value: Any = None

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    error: ServiceError

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok, Err]
