"""Adaptor configuration.

AdaptorConfig is a frozen dataclass — immutable after creation and shared
safely between every invocation of an adaptor instance.
"""

from dataclasses import dataclass

from weave_adaptor.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class AdaptorConfig:
    """Adaptor configuration. Immutable after creation.

    The defaults reproduce the plain capability-probing behaviour::

        class Timing(Adaptor):
            ...

        Timing()                              # lenient
        Timing(AdaptorConfig(strict=True))    # reject bad next handlers up front
    """

    # Validate the next reference at the entry point instead of letting
    # the forwarding call fail with a "not callable" TypeError.
    strict: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.strict, bool):
            msg = f"AdaptorConfig.strict must be a bool, got {type(self.strict).__name__}"
            raise ConfigurationError(msg)
