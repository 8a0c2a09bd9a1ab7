"""
Server-side rendering of the schedule view.

The browser keeps the editor state (which form is open, the admin token)
and asks for a freshly rendered fragment after every change; this module
turns that request into a consistent EditorState and renders it.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from jinja2 import Environment

from livehouse.models import Event
from livehouse.presentation import TIME_OPTIONS, is_past, is_today, next_event

VIEWING = "viewing"
ADDING = "adding"
EDITING = "editing"
MODES = (VIEWING, ADDING, EDITING)


@dataclass(frozen=True)
class EditorState:
    mode: str = VIEWING
    editing_id: Optional[int] = None
    is_admin: bool = False

    @classmethod
    def resolve(
        cls,
        mode: Optional[str],
        event_id: Optional[int],
        is_admin: bool,
        events: list[Event],
    ) -> "EditorState":
        """
        Normalise a requested state.

        Forms are only open for admins; editing needs an id that still
        exists. Anything else collapses back to viewing.
        """
        if not is_admin or mode not in MODES:
            return cls(VIEWING, None, is_admin)
        if mode == EDITING:
            if event_id is None or not any(e.id == event_id for e in events):
                return cls(VIEWING, None, is_admin)
            return cls(EDITING, event_id, is_admin)
        return cls(mode, None, is_admin)

    @property
    def is_adding(self) -> bool:
        return self.mode == ADDING

    def is_editing(self, event: Event) -> bool:
        return self.mode == EDITING and event.id == self.editing_id


def new_event_defaults(today: Optional[date] = None) -> Event:
    """Values the add form opens with."""
    return Event(
        date=(today or date.today()).isoformat(),
        title="",
        description="",
        open_time="18:00",
        start_time="19:00",
        ticket_price="¥2,000",
    )


def render_schedule(
    env: Environment,
    events: list[Event],
    state: EditorState,
    today: Optional[date] = None,
) -> str:
    today = today or date.today()
    cards = [
        {
            "event": e,
            "is_today": is_today(e.date, today),
            "is_past": is_past(e.date, today) and not is_today(e.date, today),
            "editing": state.is_editing(e),
        }
        for e in events
    ]
    template = env.get_template("schedule.html")
    return template.render(
        cards=cards,
        state=state,
        new_event=new_event_defaults(today),
        time_options=TIME_OPTIONS,
    )


def render_next_show(env: Environment, events: list[Event], today: Optional[date] = None) -> str:
    template = env.get_template("next_show.html")
    return template.render(event=next_event(events, today))
