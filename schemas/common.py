from datetime import datetime
from decimal import Decimal
from typing import Annotated
from pydantic import AfterValidator, BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel
from utils.datetime_utils import to_utc

# Naive values (from clients or SQLite) are taken as UTC
UtcDatetime = Annotated[datetime, AfterValidator(to_utc)]

# Exact Decimal internally, plain JSON number on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
