class CVCoachError(Exception):
    """Base class for errors reported back to the caller."""


class InvalidInputError(CVCoachError):
    def __init__(self, message: str = "Resume text is required"):
        super().__init__(message)
        self.message = message


class UnsupportedFormatError(CVCoachError):
    def __init__(self, filename: str):
        super().__init__(f"Unsupported file format: {filename}")
        self.filename = filename


class ExtractionError(CVCoachError):
    def __init__(self, filename: str, reason: str):
        super().__init__(f"Failed to read file {filename}: {reason}")
        self.filename = filename
        self.reason = reason
