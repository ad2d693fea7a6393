from __future__ import annotations

from typing import Any


class StorageError(Exception):
    """Base class for every failure surfaced by the storage layer."""

    code = "storage_error"

    def to_details_dict(self) -> dict[str, Any]:
        """Flatten the error for the caller's user-visible messaging."""

        cause = self.__cause__
        return {
            "reason": str(self),
            "reason_code": self.code,
            "exception_type": (cause or self).__class__.__name__,
        }


class StorageUnavailable(StorageError):
    """The database could not be opened, created or read."""

    code = "storage_unavailable"


class TransactionFailure(StorageError):
    """The replace-on-save unit of work did not commit; the prior row is intact."""

    code = "transaction_failure"


class EncodingFailure(StorageError):
    """The in-memory segments could not be serialized for storage."""

    code = "encoding_failure"


class DecodingFailure(StorageError):
    """The stored segments blob is not a valid segment sequence."""

    code = "decoding_failure"
