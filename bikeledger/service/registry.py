"""
Registry
--------

This module is what handles all the users, bikes and rents in the ledger.

Responsibilities
================

The registry is the sole owner of the in-memory collections and
enforces the business rules on them.

- registering and authenticating users
- removing users without open rents
- registering and moving bikes
- opening and closing rents, flipping bike availability
- billing closed rents
"""

from datetime import datetime
from typing import Callable, Dict, List, Optional
from uuid import uuid4

from bikeledger import logger
from bikeledger.events import EventHub, EventList
from bikeledger.models import Bike, Location, Rent, User
from bikeledger.pricing import get_price
from bikeledger.service.crypt import CredentialHasher, BcryptHasher
from bikeledger.service.errors import UserNotFoundError, DuplicateUserError, UserHasOpenRentsError, \
    UserDoesNotExistError, BikeNotFoundError, UnavailableBikeError, RentNotFoundError
from bikeledger.store import RentStore, MemoryRentStore
from bikeledger.version import __version__, name


class UserEvent(EventList):

    def user_registered(self, user: User):
        """A new user was registered."""

    def user_removed(self, user: User):
        """A user was removed."""


class BikeEvent(EventList):

    def bike_registered(self, bike: Bike):
        """A new bike was registered."""

    def bike_moved(self, bike: Bike, location: Location):
        """A bike was moved to a new location."""


class RentalEvent(EventList):

    def rental_started(self, user: User, bike: Bike, location: Location, time: datetime):
        """A new rental was started."""

    def rental_ended(self, user: User, bike: Bike, location: Location, price: float, distance: float,
                     time: datetime):
        """A rental was ended."""


class Registry:
    """
    Handles the lifecycle of users, bikes and rents in the ledger.

    Also publishes events on its hub, so that other modules can stay up to date with the system.
    Events are only emitted once the change they describe has been made, and a failing
    subscriber is logged rather than undoing or failing the operation.
    """

    def __init__(self, rent_lookup: RentStore = None, hasher: CredentialHasher = None,
                 clock: Callable[[], datetime] = datetime.now):
        self._users: Dict[str, User] = {}
        """Maps emails to users."""

        self._bikes: Dict[str, Bike] = {}
        """Maps bike ids to bikes."""

        self._rents: List[Rent] = []
        self._open_rents: Dict[str, Rent] = {}
        """Maps bike ids to their open rent."""

        self._rent_lookup = rent_lookup if rent_lookup is not None else MemoryRentStore(self._rents)
        self._hasher = hasher if hasher is not None else BcryptHasher()
        self._clock = clock

        self.hub = EventHub(UserEvent, BikeEvent, RentalEvent)
        logger.debug("Starting %s %s registry", name, __version__)

    def find_user_by_email(self, email: str) -> User:
        """
        Gets the user with the given email.

        :raises UserNotFoundError: If there is no such user.
        """
        try:
            return self._users[email]
        except KeyError:
            raise UserNotFoundError(email) from None

    def get_user_by_email(self, email: str) -> Optional[User]:
        """Gets the user with the given email, or None."""
        return self._users.get(email)

    async def register_user(self, user: User) -> str:
        """
        Registers a new user, replacing their password with its hash.

        :return: The id of the new user.
        :raises DuplicateUserError: If a user with that email is already registered.
        """
        if user.email in self._users:
            raise DuplicateUserError(user.email)

        hashed = await self._hasher.encrypt(user.password)

        # another registration may have completed while hashing
        if user.email in self._users:
            raise DuplicateUserError(user.email)

        user.id = str(uuid4())
        user.password = hashed
        self._users[user.email] = user

        logger.info("Registered user %s", user.id)
        self._emit(UserEvent.user_registered, user)
        return user.id

    async def authenticate(self, email: str, password: str) -> bool:
        """
        Checks the password of the user with the given email.

        :raises UserNotFoundError: If there is no such user.
        """
        user = self.find_user_by_email(email)
        return await self._hasher.compare(password, user.password)

    def remove_user(self, email: str):
        """
        Removes a user from the ledger.

        :raises UserNotFoundError: If there is no such user.
        :raises UserHasOpenRentsError: If the user has not returned all their bikes.
        """
        if email not in self._users:
            raise UserNotFoundError(email)

        open_rents = self._rent_lookup.open_rents_for(email)
        if open_rents:
            raise UserHasOpenRentsError(email, open_rents)

        try:
            user = self._users.pop(email)
        except KeyError:
            raise UserDoesNotExistError(email) from None

        logger.info("Removed user %s", user.id)
        self._emit(UserEvent.user_removed, user)

    def register_bike(self, bike: Bike) -> str:
        """
        Registers a bike with the ledger.

        :return: The id of the new bike.
        """
        bike.id = str(uuid4())
        bike.location = bike.location.copy()
        self._bikes[bike.id] = bike

        logger.info("Registered bike %s", bike.id)
        self._emit(BikeEvent.bike_registered, bike)
        return bike.id

    def find_bike(self, bike_id: str) -> Bike:
        """
        Gets the bike with the given id.

        :raises BikeNotFoundError: If there is no such bike.
        """
        try:
            return self._bikes[bike_id]
        except KeyError:
            raise BikeNotFoundError(bike_id) from None

    def get_bike_by_id(self, bike_id: str) -> Bike:
        return self.find_bike(bike_id)

    def move_bike_to(self, bike_id: str, location: Location):
        """
        Moves a bike, copying the coordinates into its location.

        :raises BikeNotFoundError: If there is no such bike.
        """
        bike = self.find_bike(bike_id)
        bike.location.latitude = location.latitude
        bike.location.longitude = location.longitude

        if bike_id in self._open_rents:
            self._open_rents[bike_id].route.append(bike.location.copy())

        self._emit(BikeEvent.bike_moved, bike, bike.location)

    def rent_bike(self, bike_id: str, user_email: str):
        """
        Opens a new rent of a bike for a user.

        :raises BikeNotFoundError: If there is no such bike.
        :raises UnavailableBikeError: If the bike is already rented.
        :raises UserNotFoundError: If there is no such user.
        """
        bike = self.find_bike(bike_id)
        if not bike.available:
            raise UnavailableBikeError(bike_id)

        user = self.find_user_by_email(user_email)

        bike.available = False
        rent = Rent(bike, user, self._clock(), route=[bike.location.copy()])
        self._rents.append(rent)
        self._open_rents[bike_id] = rent

        logger.info("User %s rented bike %s", user.id, bike.id)
        self._emit(RentalEvent.rental_started, user, bike, bike.location.copy(), rent.start)

    def return_bike(self, bike_id: str, user_email: str) -> float:
        """
        Closes the open rent of a bike by a user.

        :return: The fee for the rent.
        :raises RentNotFoundError: If the user has no open rent on that bike.
        """
        now = self._clock()
        rent = self._open_rents.get(bike_id)
        if rent is None or rent.user.email != user_email:
            raise RentNotFoundError(bike_id, user_email)

        rent.end = now
        rent.bike.available = True
        rent.price = get_price(rent.start, rent.end, rent.bike.rate)
        del self._open_rents[bike_id]

        logger.info("User %s returned bike %s (fee %.2f)", rent.user.id, bike_id, rent.price)
        self._emit(RentalEvent.rental_ended, rent.user, rent.bike, rent.bike.location.copy(),
                   rent.price, rent.distance, rent.end)
        return rent.price

    def now(self) -> datetime:
        """The current time, according to the registry's clock."""
        return self._clock()

    def _emit(self, event, *args):
        """Emits an event on the hub. The change has already been made, so subscriber errors are only logged."""
        try:
            self.hub.emit(event, *args)
        except Exception:
            logger.exception("Subscriber to %s failed", event.__name__)

    def open_rents(self) -> List[Rent]:
        """Gets all the open rents."""
        return list(self._open_rents.values())

    def list_users(self) -> List[User]:
        return list(self._users.values())

    def list_bikes(self) -> List[Bike]:
        return list(self._bikes.values())

    def list_rents(self) -> List[Rent]:
        return list(self._rents)
