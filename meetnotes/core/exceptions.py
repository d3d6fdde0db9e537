"""Exception hierarchy for meetnotes."""


class MeetNotesError(Exception):
    """Base exception for all meetnotes errors."""
    pass


class GenerationError(MeetNotesError):
    """Summary generation call failed or returned an unusable payload."""
    pass


class DeliveryError(MeetNotesError):
    """Email delivery call failed."""
    pass


class ConfigurationError(MeetNotesError):
    """Settings name a backend that does not exist or lack a required value."""
    pass
