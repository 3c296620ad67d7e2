class TfcsvError(RuntimeError):
    """Base class for conversion failures."""


class PathNotFound(TfcsvError):
    """Raised when the dataset root is missing or is not a directory."""


class UnsupportedOrCorruptImage(TfcsvError):
    """Raised when an image header does not match its declared format."""


class IOWriteError(TfcsvError):
    """Raised when the output CSV cannot be created or written."""


class LabelMapError(TfcsvError):
    """Raised when a label classification file is missing or malformed."""
