class ServiceException(Exception):
    status_code = 400

    def __init__(self, message: str = None):
        super().__init__(message or self.__class__.__name__)
        self.message = message or self.__class__.__name__


class InvalidInput(ServiceException):
    status_code = 400


class NotFound(ServiceException):
    status_code = 404


class Conflict(ServiceException):
    status_code = 409


class AuthError(ServiceException):
    status_code = 401


class PermissionDenied(ServiceException):
    status_code = 403
