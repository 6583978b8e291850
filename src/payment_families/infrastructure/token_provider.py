from __future__ import annotations

from itertools import count
from threading import Lock
from uuid import uuid4

from payment_families.application.ports import TokenProvider
from payment_families.domain.value_objects.transaction_reference import TOKEN_LENGTH


class UuidTokenProvider(TokenProvider):
    """Token provider using the first characters of a random UUID4.

    uuid4() draws from os.urandom, so concurrent calls need no locking.
    """

    def new_token(self) -> str:
        return str(uuid4())[:TOKEN_LENGTH]


class SequenceTokenProvider(TokenProvider):
    """Deterministic token provider for tests.

    Produces prefix + zero-padded counter, e.g. "tok00001", "tok00002".
    A lock serializes the counter so tokens stay unique across threads.
    """

    def __init__(self, prefix: str = "tok", start: int = 1) -> None:
        if len(prefix) >= TOKEN_LENGTH:
            raise ValueError(f"prefix must be shorter than {TOKEN_LENGTH} characters")
        self._prefix = prefix
        self._width = TOKEN_LENGTH - len(prefix)
        self._counter = count(start)
        self._lock = Lock()

    def new_token(self) -> str:
        with self._lock:
            n = next(self._counter)
        token = f"{self._prefix}{n:0{self._width}d}"
        if len(token) != TOKEN_LENGTH:
            raise OverflowError(f"SequenceTokenProvider exhausted at {n}")
        return token
