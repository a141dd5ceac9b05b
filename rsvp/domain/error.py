"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ExpiredError(DomainError):
    """Raised when a resource exists but its validity window has lapsed."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} has expired: {identifier}")


class AlreadyAnsweredError(DomainError):
    """Raised when a response is submitted for a link that already has one."""

    def __init__(self, link_id: str):
        self.link_id = link_id
        super().__init__(f"Link has already been answered: {link_id}")


class DeliveryError(DomainError):
    """Raised when the notification email could not be delivered."""

    def __init__(self, details: str):
        self.details = details
        super().__init__(f"Failed to send notification: {details}")


class DuplicateLinkError(DomainError):
    """Raised when storing a link whose ID is already taken."""

    def __init__(self, link_id: str):
        self.link_id = link_id
        super().__init__(f"Link already exists: {link_id}")
