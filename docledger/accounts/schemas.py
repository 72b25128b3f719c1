"""Request schemas for account endpoints."""

from typing import Literal, Optional

from pydantic import EmailStr, Field

from docledger.core.schemas import RequestSchema


class LoginRequest(RequestSchema):
    email: EmailStr
    password: str = Field(min_length=1)


class RegisterRequest(RequestSchema):
    email: EmailStr
    password: str = Field(min_length=6)
    name: str = Field(min_length=1)


class ProfileUpdateRequest(RequestSchema):
    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None


class ChangePasswordRequest(RequestSchema):
    current_password: str = Field(min_length=1)
    new_password: str = Field(min_length=6)


class UserCreateRequest(RequestSchema):
    email: EmailStr
    password: str = Field(min_length=6)
    name: str = Field(min_length=1)
    role: Literal["admin", "user"] = "user"


class UserUpdateRequest(RequestSchema):
    email: Optional[EmailStr] = None
    name: Optional[str] = None
    role: Optional[Literal["admin", "user"]] = None
    password: Optional[str] = Field(default=None, min_length=6)
    is_active: Optional[bool] = None


class ResetPasswordRequest(RequestSchema):
    new_password: str = Field(min_length=6)


class SignatureTemplateRequest(RequestSchema):
    name: str = Field(min_length=1, max_length=100)
    signature_data: str = Field(min_length=1)
    is_default: bool = False


class SignatureTemplateUpdateRequest(RequestSchema):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    signature_data: Optional[str] = Field(default=None, min_length=1)
    is_default: Optional[bool] = None
