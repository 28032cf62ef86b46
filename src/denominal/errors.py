class DenominalError(ValueError):
    """Base class for every error raised while resolving or applying a denomination."""


class UnknownShortcut(DenominalError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown unit shortcut {name!r}")


class InvalidDenomination(DenominalError):
    pass
