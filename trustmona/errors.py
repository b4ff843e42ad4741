class InvalidRequest(ValueError):
    """A required request field is missing or empty. Maps to HTTP 400."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
