from dataclasses import dataclass


@dataclass
class User:
    id: str
    email: str
    # Stored as given; there is no hashing in this service.
    password: str
    name: str
