"""CalendarEvent — transient notification from an external calendar."""

from dataclasses import dataclass

from tracker.domain.value_objects.enums import EventStatus


@dataclass(frozen=True)
class CalendarEvent:
    status: str
    address: str

    def is_confirmed(self) -> bool:
        # Anything other than "confirmed" (unknown strings included) means unscheduled
        return self.status == EventStatus.CONFIRMED.value
