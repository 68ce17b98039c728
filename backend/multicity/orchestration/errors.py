"""Trip planning exception types.

Raised inside the engine and converted to a failed MultiCityResult at the
orchestrator's operation boundary.
"""


class TripPlanningError(Exception):
    """Base class for expected planning failures."""

    pass


class TripValidationError(TripPlanningError):
    """Generation request rejected before any computation."""

    pass


class TripStructureError(TripPlanningError):
    """Mutation would break a trip invariant; the input trip is unchanged."""

    pass


class SequencingError(TripPlanningError):
    """Sequencer could not place every city."""

    pass
