"""
Errors
------

Every failure of the registry is a :class:`RegistryError`. Each one
carries an :class:`ErrorKind` so that callers may branch on the kind
of failure without inspecting messages or the class hierarchy.
"""

from enum import Enum
from typing import List


class ErrorKind(str, Enum):
    """We subclass string to make json serialization work."""
    USER_NOT_FOUND = "user_not_found"
    DUPLICATE_USER = "duplicate_user"
    USER_HAS_OPEN_RENTS = "user_has_open_rents"
    BIKE_NOT_FOUND = "bike_not_found"
    UNAVAILABLE_BIKE = "unavailable_bike"
    RENT_NOT_FOUND = "rent_not_found"
    USER_DOES_NOT_EXIST = "user_does_not_exist"


class RegistryError(Exception):
    kind: ErrorKind = None
    message = "Registry error."

    def __init__(self, message: str = None):
        super().__init__(message or self.message)


class UserNotFoundError(RegistryError):
    kind = ErrorKind.USER_NOT_FOUND
    message = "User not found."

    def __init__(self, email: str):
        super().__init__()
        self.email = email


class DuplicateUserError(RegistryError):
    kind = ErrorKind.DUPLICATE_USER
    message = "Duplicate user."

    def __init__(self, email: str):
        super().__init__()
        self.email = email


class UserHasOpenRentsError(RegistryError):
    """Raised when removing a user that still has bikes out."""
    kind = ErrorKind.USER_HAS_OPEN_RENTS
    message = "User has open rents, cannot be removed."

    def __init__(self, email: str, open_rents: List):
        super().__init__()
        self.email = email
        self.open_rents = open_rents


class UserDoesNotExistError(RegistryError):
    """Raised when a user disappears between the checks of a removal."""
    kind = ErrorKind.USER_DOES_NOT_EXIST
    message = "User does not exist."

    def __init__(self, email: str):
        super().__init__()
        self.email = email


class BikeNotFoundError(RegistryError):
    kind = ErrorKind.BIKE_NOT_FOUND
    message = "Bike not found."

    def __init__(self, bike_id: str):
        super().__init__()
        self.bike_id = bike_id


class UnavailableBikeError(RegistryError):
    kind = ErrorKind.UNAVAILABLE_BIKE
    message = "Unavailable bike."

    def __init__(self, bike_id: str):
        super().__init__()
        self.bike_id = bike_id


class RentNotFoundError(RegistryError):
    kind = ErrorKind.RENT_NOT_FOUND
    message = "Rent not found."

    def __init__(self, bike_id: str, email: str):
        super().__init__()
        self.bike_id = bike_id
        self.email = email
