"""Custom exceptions for cargo-aoc."""


class AocError(Exception):
    """Base exception for all cargo-aoc errors."""


class ConfigurationError(AocError):
    """Workspace or settings are unusable."""


class RegistryError(ConfigurationError):
    """A ``day*`` unit name has no parseable day number."""


class TemplateMissingError(ConfigurationError):
    """Solution template file does not exist."""


class ResolutionError(AocError):
    """Could not determine what a command should act on."""


class NoDayError(ResolutionError):
    """No explicit day was given and none could be inferred."""


class MissingSourceError(ResolutionError):
    """Resolved day has no solution unit in the workspace."""


class SourceExistsError(AocError):
    """Solution file already exists and overwriting was not requested."""


class CredentialError(AocError):
    """Session credential problem."""


class MissingCredentialError(CredentialError):
    """Input fetch attempted without a session credential."""


class NetworkError(AocError):
    """HTTP request failed at the transport or status level."""


class IoError(AocError):
    """Filesystem read/write/create failed."""


class LaunchError(AocError):
    """External program could not be started."""


class BuildError(AocError):
    """Build tool failed to describe the workspace."""
