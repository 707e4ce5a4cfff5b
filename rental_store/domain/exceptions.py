"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class UnknownFormatError(DomainException):
    """No statement renderer is registered under the requested name"""

    def __init__(self, name: str):
        super().__init__(f"No statement renderer registered for format {name!r}")
        self.name = name


class DuplicateFormatError(DomainException):
    """A statement renderer is already registered under this name"""

    def __init__(self, name: str):
        super().__init__(f"Statement format {name!r} is already registered")
        self.name = name
