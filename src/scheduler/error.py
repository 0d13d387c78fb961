# SPDX-License-Identifier: MIT


class SchedulerError(Exception):
    """Base class for every error the scheduler reports to the user."""

    pass


class StorageUnavailableError(SchedulerError):
    """Raised when the database file or its directory cannot be opened or created."""

    pass


class DuplicateNameError(SchedulerError):
    """Raised when an insert or update would give two events the same name."""

    pass


class MalformedInputError(SchedulerError):
    """Raised when date/time text does not have the expected structure."""

    pass


class UnknownOrdinalError(MalformedInputError):
    """Raised when a listing id does not refer to any current event."""

    pass


class QueryFailureError(SchedulerError):
    """Raised when the database rejects a statement."""

    pass
