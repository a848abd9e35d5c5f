from pydantic import BaseModel, EmailStr, constr


class UserCreate(BaseModel):
    name: constr(min_length=1)  # type: ignore
    email: EmailStr
    password: constr(min_length=1)  # type: ignore


class UserLogin(BaseModel):
    email: EmailStr
    password: str


class PasswordReset(BaseModel):
    email: EmailStr
    password: constr(min_length=1)  # type: ignore


class UserPublic(BaseModel):
    name: str
    email: EmailStr


class SignInResponse(BaseModel):
    message: str
    user: UserPublic
