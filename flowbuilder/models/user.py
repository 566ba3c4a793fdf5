from .base import CamelModel


class InsertUser(CamelModel):
    username: str
    password: str  # plaintext, login is mocked client-side


class User(InsertUser):
    id: str
