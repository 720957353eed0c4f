"""
Credentials
-----------

Hashes and verifies user passwords. Hashing is deliberately expensive,
so the work is done on an executor and awaited by the caller.

bcrypt only reads the first 72 bytes of a password, so passwords are
first reduced to the base64 of their SHA-256 digest (44 bytes).
"""

import abc
import asyncio
import base64
import hashlib
from concurrent.futures.thread import ThreadPoolExecutor
from functools import partial

import bcrypt

from bikeledger.config import bcrypt_rounds

BCRYPT_EXECUTOR = ThreadPoolExecutor(max_workers=4)


def _prehash(plaintext: str) -> bytes:
    return base64.b64encode(hashlib.sha256(plaintext.encode("utf-8")).digest())


class CredentialHasher(abc.ABC):

    @abc.abstractmethod
    async def encrypt(self, plaintext: str) -> str:
        """One way transforms a plaintext password into a salted hash."""

    @abc.abstractmethod
    async def compare(self, plaintext: str, hashed: str) -> bool:
        """Checks whether the plaintext matches the stored hash."""


class BcryptHasher(CredentialHasher):

    def __init__(self, rounds: int = None):
        """
        Creates a new instance of the BcryptHasher class.

        :param rounds: The bcrypt cost factor, defaulting to the configured one.
        """
        self.rounds = rounds if rounds is not None else bcrypt_rounds

    @staticmethod
    async def _run_in_executor(func, *args, **kwargs):
        pfunc = partial(func, *args, **kwargs)
        return await asyncio.get_event_loop().run_in_executor(
            BCRYPT_EXECUTOR,
            pfunc
        )

    async def encrypt(self, plaintext: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        hashed = await self._run_in_executor(bcrypt.hashpw, _prehash(plaintext), salt)
        return hashed.decode("utf-8")

    async def compare(self, plaintext: str, hashed: str) -> bool:
        return await self._run_in_executor(
            bcrypt.checkpw,
            _prehash(plaintext),
            hashed.encode("utf-8")
        )
