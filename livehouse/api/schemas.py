"""Request bodies for the JSON API."""
import datetime
import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from livehouse.models import Event

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class EventBody(BaseModel):
    """
    A full event as sent by the browser (camelCase keys).

    Used for both create and update. Update is a full replace, so any
    field left out of the body is stored empty.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)

    date: str = ""
    title: str = ""
    artists: Optional[str] = None
    description: Optional[str] = None
    open_time: Optional[str] = Field(None, alias="openTime")
    start_time: Optional[str] = Field(None, alias="startTime")
    ticket_price: Optional[str] = Field(None, alias="ticketPrice")
    door_price: Optional[str] = Field(None, alias="doorPrice")
    image_url: Optional[str] = Field(None, alias="imageUrl")

    def has_required_fields(self) -> bool:
        if not self.title.strip() or not _ISO_DATE.match(self.date):
            return False
        try:
            datetime.date.fromisoformat(self.date)
        except ValueError:
            return False
        return True

    def to_event(self) -> Event:
        return Event(
            date=self.date,
            title=self.title,
            artists=self.artists or "",
            description=self.description or "",
            open_time=self.open_time or "",
            start_time=self.start_time or "",
            ticket_price=self.ticket_price or "",
            door_price=self.door_price or "",
            image_url=self.image_url or "",
        )

    def submitted(self) -> dict:
        """The fields the caller actually sent, under their wire names."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class LoginBody(BaseModel):
    password: str = ""
