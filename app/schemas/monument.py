from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from app.schemas.common import CamelOut


class MonumentCreate(BaseModel):
    title: str | None = None
    short_description: str | None = None
    long_description: str | None = None
    place: str | None = None
    state: str | None = None
    importance: str = ""
    past_condition: str = ""
    present_condition: str = ""
    architectural_importance: str = ""
    location: str = ""


class MonumentUpdate(BaseModel):
    title: str | None = None
    short_description: str | None = None
    long_description: str | None = None
    place: str | None = None
    state: str | None = None
    importance: str | None = None
    past_condition: str | None = None
    present_condition: str | None = None
    architectural_importance: str | None = None
    location: str | None = None


class Coordinates(CamelOut):
    latitude: str
    longitude: str


class MonumentOut(CamelOut):
    id: UUID
    title: str
    short_description: str
    long_description: str
    place: str
    state: str
    importance: str
    past_condition: str
    present_condition: str
    architectural_importance: str
    location: str
    status: int
    user_id: UUID
    created_at: datetime | None = None
    updated_at: datetime | None = None


class MonumentDetailOut(CamelOut):
    monument: MonumentOut
    user_name: str
    coordinates: Coordinates | None = None
    maps_url: str
