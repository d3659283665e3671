from pydantic import BaseModel, EmailStr, Field
from pydantic.alias_generators import to_camel


class UserCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(min_length=6, max_length=72)


class UserLogin(BaseModel):
    email: EmailStr
    password: str


class UserResponse(BaseModel):
    id: int
    name: str
    email: str
    is_admin: bool
    is_active: bool

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class TokenResponse(UserResponse):
    access_token: str
    token_type: str = "bearer"
