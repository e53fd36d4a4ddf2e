#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2html/transforms/events.py
"""Expand ``<eventlist>`` tags into tables of birthdays and scheduled tasks.

Syntax:

- ``<eventlist />`` lists events from 3 days ago to 10 days ahead
- ``<eventlist daysafter="0" daysbefore="7" />`` lists today to 7 days ahead
- ``<eventlist year="2026" />`` lists every event of a year with ages

Events are collected from the whole repository: birthdays of contact pages
without a day of death, and open tasks whose schedule is a (possibly
partial) ``dd.mm.yyyy`` date.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

from wiki2html.ast.nodes import LinkPage, PageElement, Table, TableCell, TableRow, Task, TextOnly, XmlTag
from wiki2html.ast.utils import traverse_page_elements
from wiki2html.constants import (
    CONTACT_TAG_NAME,
    DEFAULT_EVENT_DAYS_AFTER,
    DEFAULT_EVENT_DAYS_BEFORE,
    EVENT_LIST_TAG_NAME,
    Tense,
)
from wiki2html.exceptions import PageNotFoundError
from wiki2html.messages import MessageCatalog, Messages
from wiki2html.repository import PageRepository
from wiki2html.transforms.base import Clock, PageTransform
from wiki2html.transforms.contacts import get_tag_text
from wiki2html.utils.dates import DateFields, format_date_fields, parse_date_fields
from wiki2html.utils.paths import extract_web_name

logger = logging.getLogger(__name__)


@dataclass
class Event:
    """A dated event found on a page."""

    page_path: str
    date_fields: DateFields
    description: Optional[str] = None


@dataclass
class EventEntry:
    """One row of an event table."""

    page_path: str
    date_fields: DateFields
    sort_date_fields: DateFields
    description: Optional[str] = None
    tense: Optional[Tense] = None
    age: Optional[int] = None


def _is_usable(date_fields: Optional[DateFields]) -> bool:
    # a day alone cannot be placed in the calendar
    return date_fields is not None and (date_fields.month is not None or date_fields.year is not None)


def _tense(compare_result: int) -> Tense:
    if compare_result < 0:
        return "past"
    if compare_result == 0:
        return "present"
    return "future"


def _compare_entries(a: EventEntry, b: EventEntry) -> int:
    return a.sort_date_fields.compare_to(b.sort_date_fields)


class EventListTransform(PageTransform):
    """Replace ``<eventlist>`` tags by event tables.

    Parameters
    ----------
    repository : PageRepository
        Pages scanned for events
    messages : Messages, optional
        Table headings
    clock : callable, optional
        Current time
    days_after : int, default 3
        Days an event stays listed after it happened
    days_before : int, default 10
        Days an event is listed before it happens

    Notes
    -----
    The repository scan is done once and cached; call :meth:`reset` after
    pages changed.

    """

    name = "event-list"

    def __init__(
        self,
        repository: PageRepository,
        messages: Optional[Messages] = None,
        clock: Optional[Clock] = None,
        days_after: int = DEFAULT_EVENT_DAYS_AFTER,
        days_before: int = DEFAULT_EVENT_DAYS_BEFORE,
    ):
        self.repository = repository
        self.messages: Messages = messages or MessageCatalog()
        self.clock: Clock = clock or datetime.now
        self.days_after = days_after
        self.days_before = days_before
        self._event_cache: Optional[list[Event]] = None

    def reset(self) -> None:
        """Drop the cached events so the next list rescans the repository."""
        self._event_cache = None

    @property
    def events(self) -> list[Event]:
        if self._event_cache is None:
            self._event_cache = self.scan_events()
            logger.debug(f"Event cache filled with {len(self._event_cache)} events")
        return self._event_cache

    def transform_element(self, element: PageElement) -> Optional[PageElement]:
        if not (
            isinstance(element, XmlTag)
            and element.prefix is None
            and element.name.lower() == EVENT_LIST_TAG_NAME
        ):
            return element

        options = element.options
        try:
            if "year" in options:
                return self.generate_year_list(int(options["year"]))
            days_after = int(options.get("daysafter", self.days_after))
            days_before = int(options.get("daysbefore", self.days_before))
        except ValueError:
            logger.warning(f"Ignoring event list with malformed options {options}")
            return element
        return self.generate_current_days_list(days_after, days_before)

    # -- scanning ----------------------------------------------------------

    def scan_events(self) -> list[Event]:
        events: list[Event] = []
        for page_path in self.repository.page_paths():
            try:
                page = self.repository.lookup_page(page_path)
            except PageNotFoundError:
                logger.warning(f"Error reading wiki page '{page_path}' to scan for events, ignoring it")
                continue
            self._read_birthday(page_path, page, events)
            self._read_tasks(page_path, page, events)
        return events

    def _read_birthday(self, page_path: str, page: PageElement, events: list[Event]) -> None:
        today = self.clock().date()
        state = {"contact": False, "birthday": None, "dead": False}

        def consume(xml_tag: XmlTag, context: dict) -> None:
            if xml_tag.prefix is not None:
                return
            if xml_tag.name == CONTACT_TAG_NAME:
                context["contact"] = True
            elif context["contact"] and xml_tag.name == "birthday":
                context["birthday"] = get_tag_text(xml_tag, today)
            elif context["contact"] and xml_tag.name == "dayofdeath":
                context["dead"] = True

        traverse_page_elements(page, XmlTag, consume, state)
        if state["birthday"] is None or state["dead"]:
            return
        date_fields = parse_date_fields(state["birthday"])
        if _is_usable(date_fields):
            events.append(Event(page_path, date_fields))  # type: ignore[arg-type]
        else:
            logger.warning(f"Ignoring malformed birthday '{state['birthday']}' on page '{page_path}'")

    def _read_tasks(self, page_path: str, page: PageElement, events: list[Event]) -> None:
        tasks: list[Task] = []
        traverse_page_elements(page, Task, lambda task, acc: acc.append(task), tasks)
        for task in tasks:
            if task.state == "closed":
                continue
            date_fields = parse_date_fields(task.schedule)
            if _is_usable(date_fields):
                events.append(Event(page_path, date_fields, task.description))  # type: ignore[arg-type]

    # -- lists -------------------------------------------------------------

    def generate_year_list(self, year: int) -> Table:
        """List every event of ``year`` with the age reached in that year."""
        entries = []
        for event in self.events:
            age = year - event.date_fields.year if event.date_fields.year is not None else None
            # nothing from before the event existed
            if age is not None and age < 0:
                continue
            shown = DateFields(event.date_fields.day, event.date_fields.month, year)
            entries.append(EventEntry(event.page_path, shown, shown, event.description, age=age))
        return self.generate_table(entries)

    def generate_current_days_list(self, days_after: int, days_before: int) -> Table:
        """List events from ``days_after`` days ago to ``days_before`` days ahead."""
        today_date = self.clock().date()
        today = DateFields.from_date(today_date)
        start = DateFields.from_date(today_date - timedelta(days=days_after))
        end = DateFields.from_date(today_date + timedelta(days=days_before))

        entries = []
        for event in self.events:
            # the range may cross a year boundary
            candidates = (
                DateFields(event.date_fields.day, event.date_fields.month, start.year),
                DateFields(event.date_fields.day, event.date_fields.month, end.year),
            )
            sort_date = next(
                (c for c in candidates if c.compare_to(start) >= 0 and c.compare_to(end) <= 0),
                None,
            )
            if sort_date is None:
                continue

            age = None
            if event.date_fields.year is not None:
                age = sort_date.year - event.date_fields.year  # type: ignore[operator]
                if age < 0:
                    continue

            entries.append(
                EventEntry(
                    event.page_path,
                    event.date_fields,
                    sort_date,
                    event.description,
                    _tense(sort_date.compare_to(today)),
                    age,
                )
            )
        return self.generate_table(entries)

    def generate_table(self, entries: list[EventEntry]) -> Table:
        entries = sorted(entries, key=functools.cmp_to_key(_compare_entries))

        table = Table("eventlist")
        header = TableRow()
        table.add_row(header)
        header.add_cell(TableCell(TextOnly(self.messages.get_message("eventlist.table.date")), True))
        header.add_cell(TableCell(TextOnly(self.messages.get_message("eventlist.table.name")), True))
        header.add_cell(TableCell(TextOnly(self.messages.get_message("eventlist.table.age")), True, "right"))

        for entry in entries:
            row = TableRow(entry.tense)
            table.add_row(row)
            date_params = "right" if entry.date_fields.year is not None else None
            row.add_cell(TableCell(TextOnly(format_date_fields(entry.date_fields)), False, date_params))
            link_text = entry.description or extract_web_name(entry.page_path)
            row.add_cell(TableCell(LinkPage(entry.page_path, None, TextOnly(link_text))))
            if entry.age is not None:
                row.add_cell(TableCell(TextOnly(str(entry.age)), False, "right"))
            else:
                row.add_cell(TableCell())
        return table
