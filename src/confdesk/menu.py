from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from .core import CapacityError, validate_capacity
from .prompts import ConsoleIO, InputClosedError
from .registry import EventRegistry

logger = logging.getLogger(__name__)

BANNER = "=== Conference Center Event Management System ==="
MENU = """
Menu:
1. Add a Workshop
2. Add a Seminar
3. View all events
4. Exit"""

CAPACITY_PROMPT = "Enter capacity (integer >= 0): "
SUMMARY_HEADER = "--- All Events (summary) ---"
SUMMARY_FOOTER = "-----------------------------"
DETAIL_HEADER = "--- Detailed Events ---"
DETAIL_DIVIDER = "---------------------"


class MenuState(Enum):
    RUNNING = "running"
    EXITED = "exited"


class MenuLoop:
    """The interactive menu: read a choice, dispatch it, repeat until exit."""

    def __init__(self, registry: EventRegistry | None = None, io: ConsoleIO | None = None) -> None:
        self.registry = registry if registry is not None else EventRegistry()
        self.io = io or ConsoleIO()
        self.state = MenuState.RUNNING

    def run(self) -> None:
        self.io.say(BANNER, style="bold")
        while self.state is MenuState.RUNNING:
            self.step()

    def step(self) -> None:
        """One pass through the menu inside the error boundary.

        Recoverable errors are reported and the loop carries on. A closed
        input stream is reported the same way and then re-raised.
        """
        try:
            self._dispatch()
        except CapacityError as exc:
            self._report_capacity(exc)
        except InputClosedError as exc:
            self.io.say(f"Unexpected error: {exc}", style="red")
            raise
        except ValueError as exc:
            self.io.say(f"Input format error: {exc}", style="red")
        except Exception as exc:
            logger.debug("Unexpected error in menu loop", exc_info=True)
            self.io.say(f"Unexpected error: {exc}", style="red")

    def _dispatch(self) -> None:
        for line in MENU.split("\n"):
            self.io.say(line)
        choice = self.io.read_int("Choose an option (1-4): ")

        outcome: Optional[CapacityError] = None
        if choice == 1:
            outcome = self.add_workshop()
        elif choice == 2:
            outcome = self.add_seminar()
        elif choice == 3:
            self.view_all()
        elif choice == 4:
            self.io.say("Exiting program. Goodbye!")
            self.state = MenuState.EXITED
        else:
            logger.info("Invalid menu choice %d", choice)
            self.io.say(f"Invalid menu choice: {choice}. Please choose 1-4.", style="yellow")

        if outcome is not None:
            self._report_capacity(outcome)

    def _report_capacity(self, exc: CapacityError) -> None:
        logger.info("Rejected capacity %d", exc.capacity)
        self.io.say(f"Capacity error: {exc.message}", style="red")

    # ------------------------------- Flows -------------------------------

    def add_workshop(self) -> Optional[CapacityError]:
        """Prompt for a workshop and register it.

        Returns the capacity error instead of reporting it, so the caller
        reports it the same way for every flow. Other failures are reported
        here as ``Failed to add workshop: ...``.
        """
        try:
            name = self.io.read_string("Enter workshop name: ")
            capacity = validate_capacity(self.io.read_int(CAPACITY_PROMPT))
            topic = self.io.read_string("Enter workshop topic: ")
            company = self.io.read_string("Enter company: ")
            self.registry.add_workshop(name, capacity, topic, company)
        except CapacityError as exc:
            return exc
        except InputClosedError:
            raise
        except Exception as exc:
            logger.debug("Workshop flow failed", exc_info=True)
            self.io.say(f"Failed to add workshop: {exc}", style="red")
            return None
        self.io.say("Workshop added successfully.", style="green")
        return None

    def add_seminar(self) -> Optional[CapacityError]:
        try:
            name = self.io.read_string("Enter seminar name: ")
            capacity = validate_capacity(self.io.read_int(CAPACITY_PROMPT))
            speaker = self.io.read_string("Enter speaker name: ")
            self.registry.add_seminar(name, capacity, speaker)
        except CapacityError as exc:
            return exc
        except InputClosedError:
            raise
        except Exception as exc:
            logger.debug("Seminar flow failed", exc_info=True)
            self.io.say(f"Failed to add seminar: {exc}", style="red")
            return None
        self.io.say("Seminar added successfully.", style="green")
        return None

    def view_all(self) -> None:
        if self.registry.is_empty():
            self.io.say("No events registered yet.", style="yellow")
            return

        self.io.say()
        self.io.say(SUMMARY_HEADER, style="bold")
        for event in self.registry.all():
            self.io.say(event.summary())
        self.io.say(SUMMARY_FOOTER)

        answer = self.io.read_string("Show detailed view of each event? (y/n): ")
        if not answer or answer[0] not in {"y", "Y"}:
            return
        self.io.say()
        self.io.say(DETAIL_HEADER, style="bold")
        for event in self.registry.all():
            for line in event.detail(verbose=True):
                self.io.say(line)
            self.io.say(DETAIL_DIVIDER)
