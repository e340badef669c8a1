from datetime import datetime
from typing import Literal

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, field_validator

from observer.models.discovery import PlaceType
from observer.models.observed_profile import ViewTimeTracking
from observer.utils import ensure_utc


class Idle(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["idle"] = "idle"


class Tracking(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["tracking"] = "tracking"
    place_type: PlaceType
    started_at: datetime

    @field_validator("started_at")
    @classmethod
    def _started_at_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)


class ViewTimeTracker(BaseModel):
    """
    Dwell-time tracking as an explicit state machine.

    States are ``Idle`` and ``Tracking(place_type, started_at)``. Every
    transition returns a new tracker; the caller owns the value and hands it
    back on the next event. Closing a session adds the elapsed seconds to
    the running total for its place type.

    Typical lifecycle::

        tracker = ViewTimeTracker()
        tracker = tracker.start(PlaceType.MUSEUM, now)
        tracker = tracker.switch_to(PlaceType.PARK, later)
        tracker = tracker.close(end)  # on teardown
    """

    model_config = ConfigDict(frozen=True)

    state: Idle | Tracking = Field(default_factory=Idle, discriminator="kind")
    totals: tuple[ViewTimeTracking, ...] = ()

    @property
    def is_tracking(self) -> bool:
        return isinstance(self.state, Tracking)

    def start(self, place_type: PlaceType, now: datetime) -> "ViewTimeTracker":
        """Open a session for ``place_type``, closing any session already open."""
        closed = self.stop(now)
        return closed.model_copy(update={"state": Tracking(place_type=place_type, started_at=now)})

    def switch_to(self, place_type: PlaceType | None, now: datetime) -> "ViewTimeTracker":
        """Close the open session and move to ``place_type`` (or to Idle for None)."""
        if place_type is None:
            return self.stop(now)
        return self.start(place_type, now)

    def stop(self, now: datetime) -> "ViewTimeTracker":
        """Close the open session. No-op when idle."""
        if not isinstance(self.state, Tracking):
            return self

        place_type = self.state.place_type
        now = ensure_utc(now)
        elapsed = max(0.0, (now - self.state.started_at).total_seconds())
        logger.debug(f"Viewed {place_type.value} for {elapsed:.1f}s")

        totals = []
        found = False
        for entry in self.totals:
            if entry.place_type == place_type:
                entry = ViewTimeTracking(
                    place_type=place_type,
                    total_seconds=entry.total_seconds + elapsed,
                    view_count=entry.view_count + 1,
                    last_viewed=now,
                )
                found = True
            totals.append(entry)
        if not found:
            totals.append(ViewTimeTracking(place_type=place_type, total_seconds=elapsed, view_count=1, last_viewed=now))

        return ViewTimeTracker(state=Idle(), totals=tuple(totals))

    def close(self, now: datetime) -> "ViewTimeTracker":
        """
        Teardown transition for the observing context.

        Same as ``stop``: a tracker that is already idle comes back unchanged,
        so an open session is only ever accumulated once.
        """
        return self.stop(now)

    def total_seconds(self) -> float:
        return sum(entry.total_seconds for entry in self.totals)

    def total_views(self) -> int:
        return sum(entry.view_count for entry in self.totals)

    def average_view_time(self) -> float:
        """Mean seconds per closed session, 0.0 when nothing was tracked."""
        views = self.total_views()
        if views == 0:
            return 0.0
        return self.total_seconds() / views
