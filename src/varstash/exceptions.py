"""Exception hierarchy for varstash."""


class VarStashError(Exception):
    """Base exception for all varstash errors."""


class InvalidPathError(VarStashError, ValueError):
    """Raised at construction when the store path contains reserved characters."""


class MetadataCorruption(VarStashError):
    """The metadata record exists but cannot be read into the expected shape."""


class PersistenceError(VarStashError):
    """Raised when writing the metadata record or a blob fails."""


class MissingBlob(VarStashError, KeyError):
    """No blob exists for the requested entry name."""

    def __init__(self, name: str, path: object = None) -> None:
        super().__init__(f"No blob for entry {name!r} (path: {path})")
        self.name = name
        self.path = path

    def __str__(self) -> str:
        return str(self.args[0])


class SerializationError(VarStashError):
    """The serializer could not convert a value to or from bytes."""


class FingerprintError(VarStashError):
    """A value could not be fingerprinted (its serialization is unsupported)."""


class NonPersistableValue(VarStashError):
    """The value belongs to a kind that cannot be persisted at all."""


class InvalidEntryName(VarStashError, ValueError):
    """The entry name cannot be used as a single file name inside the store."""
