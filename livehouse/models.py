from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Event:
    date: str              # ISO date, YYYY-MM-DD
    title: str
    description: str = ""
    open_time: str = ""    # HH:MM
    start_time: str = ""   # HH:MM
    ticket_price: str = ""  # advance price, e.g. "¥2,000"
    artists: str = ""
    door_price: str = ""   # empty -> derived at display time
    image_url: str = ""
    # Assigned by the DB layer on insert
    id: Optional[int] = field(default=None)

    def to_dict(self) -> dict:
        """Wire form, keyed by the column names the API and browser use."""
        return {
            "id": self.id,
            "date": self.date,
            "title": self.title,
            "artists": self.artists,
            "description": self.description,
            "openTime": self.open_time,
            "startTime": self.start_time,
            "ticketPrice": self.ticket_price,
            "doorPrice": self.door_price,
            "imageUrl": self.image_url,
        }
