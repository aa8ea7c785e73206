from pydantic import BaseModel


class SignUpRequest(BaseModel):
    email: str
    password: str


class SignUpResponse(BaseModel):
    user_id: str
    email: str


class SignInRequest(BaseModel):
    email: str
    password: str


class SignInResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: str
    expires_in_seconds: int


class IdentityResponse(BaseModel):
    user_id: str
    email: str


class Identity(BaseModel):
    user_id: str
    email: str
