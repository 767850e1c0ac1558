"""Fatal error taxonomy for animation runs.

None of these are recovered from inside the per-step pipeline; they abort the
run and leave any partially written output invalid.
"""

from __future__ import annotations


class SnowtrailError(Exception):
    """Base class for all run-aborting failures."""


class DataUnavailable(SnowtrailError):
    """The data provider failed or returned a malformed grid."""


class AssetMissing(SnowtrailError):
    """A required image could not be found or decoded."""


class SinkWriteFailure(SnowtrailError):
    """The output artifact could not be persisted."""
