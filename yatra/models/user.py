"""User accounts held by the store."""
from pydantic import BaseModel


class InsertUser(BaseModel):
    username: str
    password: str


class User(InsertUser):
    id: str
