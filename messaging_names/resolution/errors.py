"""Errors raised by the resolvers and the channel registry."""


class ResolutionError(Exception):
    """Base resolution error."""


class ResolutionFailed(ResolutionError):
    """A SuiNS name had no usable target address."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Failed to resolve SuiNS name: {name}")


class NameNotFound(ResolutionError):
    """A channel name has no registered channel ID."""

    def __init__(self, name: str):
        self.name = name  # formatted, e.g. "#general"
        super().__init__(f"Channel name not found: {name}")


class AliasConflict(ResolutionError):
    """A channel name is already bound to a different channel ID."""

    def __init__(self, name: str, existing_id: str, requested_id: str):
        self.name = name
        self.existing_id = existing_id
        self.requested_id = requested_id
        super().__init__(f"Channel name {name} is already registered to {existing_id}")
