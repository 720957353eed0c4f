from datetime import datetime, timedelta

import pytest
from faker import Faker
from faker.providers import address, internet, misc, person

from bikeledger.models import Bike, Location, User
from bikeledger.service import BcryptHasher, Registry
from bikeledger.store import MemoryRentStore

fake = Faker()
fake.add_provider(address)
fake.add_provider(internet)
fake.add_provider(misc)
fake.add_provider(person)


class FakeClock:
    """A clock that only moves when told to."""

    def __init__(self, now: datetime = None):
        self.now = now or datetime(2018, 10, 19, 9, 0)

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def hasher():
    """A bcrypt hasher with the lowest cost, to keep the tests fast."""
    return BcryptHasher(rounds=4)


@pytest.fixture
def registry(hasher, clock) -> Registry:
    return Registry(hasher=hasher, clock=clock)


@pytest.fixture
def rent_store():
    return MemoryRentStore()


@pytest.fixture
def user_factory():
    def create_user(password=None):
        return User(
            email=fake.unique.email(), password=password or fake.password(),
            name=fake.name(), profile={"city": fake.city()}
        )

    return create_user


@pytest.fixture
def bike_factory():
    def create_bike(rate=10.0):
        return Bike(
            rate=rate, location=Location(float(fake.latitude()), float(fake.longitude())),
            description=fake.word()
        )

    return create_bike


@pytest.fixture
def random_registered_user_factory(registry, user_factory):
    async def create_user():
        user = user_factory()
        await registry.register_user(user)
        return user

    return create_user


@pytest.fixture
def random_bike(registry, bike_factory) -> Bike:
    """Creates a random bike in the registry."""
    bike = bike_factory()
    registry.register_bike(bike)
    return bike
