"""
.. autoclasstree:: bikeledger.service

The service layer for the ledger. Acts as the internal API.
Any interface (a CLI, a web API) should use the service
layer to implement its logic.

The service layer implements the use cases for the system, such
that they may be reused by any program that needs to access it.
It is designed to represent the business logic.
"""

from .crypt import CredentialHasher, BcryptHasher
from .errors import ErrorKind, RegistryError, UserNotFoundError, DuplicateUserError, UserHasOpenRentsError, \
    BikeNotFoundError, UnavailableBikeError, RentNotFoundError, UserDoesNotExistError
from .registry import Registry, UserEvent, BikeEvent, RentalEvent
from .stats_reporter import StatisticsReporter
