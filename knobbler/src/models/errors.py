"""Error types raised by the knob models."""


class ConfigurationError(ValueError):
    """Malformed range, arc, deadzone, geometry or step configuration.

    Raised eagerly when a config object is built, never while a drag is
    running.
    """
