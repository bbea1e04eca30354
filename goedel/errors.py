class InvalidArgument(ValueError):
    """Raised when ``n`` or ``offset`` is not a non-negative integer."""

    def __init__(self, name: str, value) -> None:
        super().__init__(f"{name} should be a non-negative integer, got {value!r}")
        self.name = name
        self.value = value
