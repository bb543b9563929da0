"""Exception hierarchy for nuka-code.

Every error the CLI reports with a non-zero exit code derives from
NukeError. Soft failures (missing ignore file, path already removed)
never raise; see the ignore and remover modules.
"""


class NukeError(Exception):
    """Base exception for all nuke errors."""


class DirtyWorkingTreeError(NukeError):
    """Raised when the working tree has uncommitted changes."""


class ManifestError(NukeError):
    """Base exception for package.json related errors."""


class ManifestNotFoundError(ManifestError):
    """Raised when no package.json exists at the project root."""


class ManifestParseError(ManifestError):
    """Raised when package.json cannot be parsed."""


class ConfigError(NukeError):
    """Base exception for user configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the user config file is not valid TOML."""
