"""Error taxonomy for practice sessions."""


class PracticeError(Exception):
    """Base class for practice session errors."""

    pass


class ConfigurationError(PracticeError):
    """Raised when a session is configured or run with invalid parameters."""

    pass


class VerificationError(PracticeError):
    """Raised when a submitted answer cannot be parsed or evaluated."""

    pass


class TimerStateError(PracticeError):
    """Raised when a tick timer is armed while another one is still live."""

    pass
