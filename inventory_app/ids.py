import itertools
import secrets
import threading


class IdGenerator:
    """Produces opaque record identifiers.

    Each id is a process-local counter followed by a random suffix, so ids
    from one generator never repeat and are not guessable from each other.
    """

    def __init__(self, suffix_bytes: int = 6):
        self._counter = itertools.count(1)
        self._lock = threading.Lock()
        self._suffix_bytes = suffix_bytes

    def new_id(self) -> str:
        with self._lock:
            sequence = next(self._counter)
        return f"{sequence:08x}{secrets.token_hex(self._suffix_bytes)}"

    __call__ = new_id
