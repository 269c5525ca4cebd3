"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class MaxDepthExceededError(BusinessRuleViolationError):
    """Raised when a reply would nest deeper than allowed."""

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"Maximum nesting level ({max_depth}) reached")


class ParentPostMismatchError(BusinessRuleViolationError):
    """Raised when replying to a comment that belongs to another post."""

    def __init__(self) -> None:
        super().__init__("Parent comment belongs to different post")


class ContentDeletedError(BusinessRuleViolationError):
    """Raised when attempting to edit or delete deleted content."""

    def __init__(self, message: str = "Cannot edit deleted comment"):
        super().__init__(message)


class AlreadyLikedError(BusinessRuleViolationError):
    """Raised when a user likes a target they already like."""

    def __init__(self, target_label: str):
        super().__init__(f"{target_label} already liked")


class NotLikedError(BusinessRuleViolationError):
    """Raised when a user unlikes a target they never liked."""

    def __init__(self, target_label: str):
        super().__init__(f"{target_label} not liked")


class NotAuthorizedError(DomainError):
    """Raised when a user acts on content they don't own."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(f"You can only {action} your own {resource}s")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found")
