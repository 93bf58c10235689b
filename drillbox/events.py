"""Event scheduling: add, cancel and list events kept in a records file.

Each record is one line ``id | name | date | time | status`` where status is
0 for an active event and 1 for a cancelled one. Events added in a session are
kept in memory; cancelling rewrites the records file from them. Listings read
the records file.
"""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass
from pathlib import Path

MAX_EVENTS = 200
DEFAULT_RECORDS_FILE = "event_records.txt"

_NAME_LIMIT = 99
_FIELD_LIMIT = 19

_RECORD = re.compile(
    r"\s*([+-]?\d+)\s*\|([^|]*)\|([^|]*)\|([^|]*)\|\s*([+-]?\d+)\s*"
)


class SchedulerError(Exception):
    """Raised when an event operation cannot be carried out."""


@dataclass
class Event:
    """A scheduled event."""

    event_id: int
    name: str
    date: str
    time: str
    cancelled: bool = False


def format_record(event: Event) -> str:
    """Return the records-file line for ``event``, without a line ending."""
    status = 1 if event.cancelled else 0
    return f"{event.event_id} | {event.name} | {event.date} | {event.time} | {status}"


def parse_record(line: str) -> Event:
    """Parse one records-file line; raise ValueError if it is malformed."""
    match = _RECORD.fullmatch(line)
    if match is None:
        raise ValueError(f"malformed event record: {line!r}")
    event_id, name, date, time, status = match.groups()
    name, date, time = name.strip(), date.strip(), time.strip()
    if not name or not date or not time:
        raise ValueError(f"malformed event record: {line!r}")
    if status not in {"0", "1", "+0", "+1", "-0"}:
        raise ValueError(f"unknown event status in record: {line!r}")
    return Event(int(event_id), name, date, time, int(status) == 1)


def _check_field(label: str, value: str, limit: int) -> None:
    if not value or value != value.strip():
        raise SchedulerError(f"event {label} must be non-empty without surrounding spaces")
    if "|" in value or "\n" in value or "\r" in value:
        raise SchedulerError(f"event {label} may not contain '|' or line breaks")
    if len(value) > limit:
        raise SchedulerError(f"event {label} is longer than {limit} characters")


class EventScheduler:
    """Events of the current session, persisted to a records file."""

    def __init__(self, path: str | Path = DEFAULT_RECORDS_FILE) -> None:
        self.path = Path(path)
        self._events: list[Event] = []

    @property
    def events(self) -> tuple[Event, ...]:
        return tuple(self._events)

    @property
    def is_full(self) -> bool:
        return len(self._events) >= MAX_EVENTS

    def add_event(self, event_id: int, name: str, date: str, time: str) -> Event:
        """Record a new active event and append it to the records file."""
        if self.is_full:
            raise SchedulerError("Cannot add more events! The event list is full")
        _check_field("name", name, _NAME_LIMIT)
        _check_field("date", date, _FIELD_LIMIT)
        _check_field("time", time, _FIELD_LIMIT)
        event = Event(int(event_id), name, date, time)
        try:
            with self.path.open("a", encoding="utf-8") as records:
                records.write(format_record(event) + "\n")
        except OSError as exc:
            raise SchedulerError("Could not add event to file") from exc
        self._events.append(event)
        return event

    def cancel_event(self, event_id: int) -> bool:
        """Cancel the first session event with ``event_id`` and rewrite the file.

        Returns True if the event was cancelled now, False if it already was.
        """
        event = next((e for e in self._events if e.event_id == event_id), None)
        if event is None:
            raise SchedulerError("EventID not found.")
        newly_cancelled = not event.cancelled
        event.cancelled = True
        try:
            with self.path.open("w", encoding="utf-8") as records:
                records.writelines(format_record(e) + "\n" for e in self._events)
        except OSError as exc:
            raise SchedulerError("Unable to save events to file.") from exc
        return newly_cancelled

    def _read_records(self) -> list[Event]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise SchedulerError(f"{self.path.name} file does not exist") from exc
        except OSError as exc:
            raise SchedulerError(f"Could not read {self.path.name}") from exc
        records = []
        for line in text.splitlines():
            if not line.strip():
                continue
            try:
                records.append(parse_record(line))
            except ValueError:
                break
        return records

    def upcoming_events(self) -> list[Event]:
        """Return the active events in the records file, in file order."""
        return [e for e in self._read_records() if not e.cancelled]

    def past_events(self) -> list[Event]:
        """Return the cancelled events in the records file, in file order."""
        return [e for e in self._read_records() if e.cancelled]


_MENU = (
    "1. Add Event\n"
    "2. Display Upcoming Events\n"
    "3. Cancel Event\n"
    "4. View Past Events\n"
    "5. Exit"
)


def _ask_word(prompt: str) -> str:
    while True:
        words = input(prompt).split()
        if words:
            return words[0]


def _ask_int(prompt: str) -> int | None:
    try:
        return int(_ask_word(prompt))
    except ValueError:
        return None


def _describe(event: Event) -> str:
    return f"ID: {event.event_id}, Name: {event.name}, Date: {event.date}, Time: {event.time}"


def _add(scheduler: EventScheduler) -> None:
    if scheduler.is_full:
        print("ERROR: Cannot add more events! The event list is full")
        return
    event_id = _ask_int("Enter event id: ")
    name = _ask_word("Enter event name: ")
    date = _ask_word("Enter event date (DD-MM-YYYY): ")
    time = _ask_word("Enter event time (HH:MM): ")
    if event_id is None:
        print("ERROR: Invalid event id\n")
        return
    try:
        scheduler.add_event(event_id, name, date, time)
    except SchedulerError as exc:
        print(f"ERROR: {exc}\n")
        return
    print("\nEvent added successfully!\n")


def _show_upcoming(scheduler: EventScheduler) -> None:
    try:
        events = scheduler.upcoming_events()
    except SchedulerError as exc:
        print(f"ERROR: {exc}\n")
        return
    print("\nUpcoming Events:\n")
    for event in events:
        print(_describe(event))
    if not events:
        print("No upcoming events found.")


def _cancel(scheduler: EventScheduler) -> None:
    event_id = _ask_int("Enter the event id to cancel: ")
    if event_id is None:
        print("EventID not found.")
        return
    try:
        if scheduler.cancel_event(event_id):
            print("Event cancelled successfully")
        else:
            print("Event is already cancelled")
    except SchedulerError as exc:
        print(f"Error: {exc}" if "save" in str(exc) else str(exc))


def _show_past(scheduler: EventScheduler) -> None:
    try:
        events = scheduler.past_events()
    except SchedulerError as exc:
        print(f"ERROR: {exc}\n")
        return
    print("Past Events:\n")
    for event in events:
        print(f"{_describe(event)} (Cancelled)")
    if not events:
        print("No past events found.")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive event scheduler menu."""
    parser = argparse.ArgumentParser(description="Schedule, cancel and list events.")
    parser.add_argument("--file", default=DEFAULT_RECORDS_FILE, help="records file")
    args = parser.parse_args(argv)

    scheduler = EventScheduler(args.file)
    try:
        scheduler.path.touch(exist_ok=True)
    except OSError:
        pass

    actions = {1: _add, 2: _show_upcoming, 3: _cancel, 4: _show_past}
    while True:
        print(_MENU)
        try:
            option = _ask_int("Enter an option (1-5): ")
        except EOFError:
            print()
            return 0
        print()
        if option == 5:
            print("EXITING!!!")
            return 0
        action = actions.get(option) if option is not None else None
        if action is None:
            print("ERROR: Invalid option, please try again\n")
            continue
        try:
            action(scheduler)
        except EOFError:
            print()
            return 0