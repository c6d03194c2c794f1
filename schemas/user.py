from pydantic import Field
from schemas.common import CamelModel, UtcDatetime


class UserCreate(CamelModel):
    email: str = Field(..., min_length=3, max_length=255)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)


class UserOut(CamelModel):
    id: int
    email: str
    first_name: str
    last_name: str
    created_at: UtcDatetime
