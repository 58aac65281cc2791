"""Exceptions raised by the werewolf party engine."""


class WerewolfPartyError(Exception):
    """Base class for all engine errors."""

    pass


class ConfigurationError(WerewolfPartyError):
    """Raised when a game cannot be set up from its configuration.

    The only case today is an empty role bag for the configured player
    count. Unsupported counts fall back to the default bag instead.
    """

    pass


class SpeechProviderError(WerewolfPartyError):
    """Raised by a speech provider that could not produce usable text.

    Covers transport failures, error statuses, malformed payloads and empty
    completions. The engine always catches it at the speech call site and
    substitutes a canned line.
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
