# taskboss/schemas/token.py
from pydantic import BaseModel

from taskboss.schemas.user import User


class AuthResponse(BaseModel):
    user: User
    token: str
    message: str
