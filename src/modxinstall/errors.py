"""Domain errors for modxinstall."""


class InstallerError(RuntimeError):
    """Raised when the installation cannot continue safely."""


class ValidationError(InstallerError):
    """Raised when a supplied value does not satisfy its field constraints."""


class DownloadError(InstallerError):
    """Raised when the MODX release cannot be fetched or unpacked."""


class ConfigWriteError(InstallerError):
    """Raised when the setup config file cannot be written."""
