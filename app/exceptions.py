# app/exceptions.py
"""
Domain exceptions raised by the car service.
Handlers in main.py turn them into HTTP responses: {"detail": "..."}.
"""


class CarServiceError(Exception):
    """Base class for all car service errors."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class EntityNotFound(CarServiceError):
    """No record exists for the requested id."""

    status_code = 404


class ConstraintsViolation(CarServiceError):
    """The store rejected a record because of an integrity constraint."""

    status_code = 400


class CarAlreadyInUse(CarServiceError):
    """The car is already assigned to a driver."""

    status_code = 409
