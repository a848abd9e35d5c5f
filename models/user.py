from beanie import Document
from pydantic import EmailStr
from pymongo import ASCENDING, IndexModel


class User(Document):
    name: str
    email: EmailStr
    password: str  # bcrypt hash, never the plain password

    class Settings:
        name = "users"
        indexes = [IndexModel([("email", ASCENDING)], unique=True)]
