"""Walkthrough: a ``Period`` value object, derivation and structured logs.

Run with::

    pip install -e .
    VALUES_LOG_LEVEL=debug python docs/examples/period.py
"""

from __future__ import annotations

from valueobjects.kernel.ddd import Entity, ValueObject, value_object
from valueobjects.kernel.errors import ImmutableError, MissingFieldsError, SchemaMismatchError
from valueobjects.observability.logging import configure_logging, get_logger


@value_object("start", "end")
class Period(ValueObject):
    def length(self) -> int:
        return self.end - self.start


class Room(Entity):
    pass


@value_object("room", "period")
class Booking(ValueObject):
    pass


def main() -> None:
    configure_logging()
    log = get_logger("examples.period")

    week = Period(1, 7)
    fortnight = week.derive(end=14)
    log.info("period.derived", source=week, derived=fortnight, length=fortnight.length())
    assert fortnight.eql(Period(1, 14))

    booking = Booking(Room("r-101"), week)
    moved = booking.derive(room=Room("r-202"))
    log.info("booking.moved", same=booking.eql(moved))

    for attempt in (lambda: Period(1), lambda: Period(1, None), lambda: week.set(end=3)):
        try:
            attempt()
        except (SchemaMismatchError, MissingFieldsError, ImmutableError) as exc:
            log.warning("value_object.rejected", error=exc.to_dict())


if __name__ == "__main__":
    main()
