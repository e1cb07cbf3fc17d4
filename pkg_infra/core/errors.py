"""Error types raised while adding infrastructure to a package.

Every error aborts the current operation. Nothing is rolled back: files
written before the failure stay on disk.
"""

from pathlib import Path

from pkg_infra.helpers.helpers_logging import print_error, print_info


class ScaffoldError(Exception):
    """Base error for scaffolding operations.

    Attributes:
        message: Human readable description.
        context: Where it happened (package, feature, path), when known.
    """

    def __init__(self, message: str, **context: object) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, object] = {
            key: str(value) if isinstance(value, Path) else value
            for key, value in context.items()
            if value is not None
        }

    def print_error(self) -> None:
        """Print the error message and its context using the logging helper."""
        print_error(self.message)
        for key, value in self.context.items():
            print_info(f"   {key}: {value}")


class AlreadyInitialized(ScaffoldError):
    """The feature is already present; remove it manually before retrying."""


class TargetAlreadyExists(ScaffoldError):
    """A file that would be written already exists."""


class ManifestUnreadable(ScaffoldError):
    """DESCRIPTION is missing or not valid DCF."""


class TemplateNotFound(ScaffoldError):
    """No template resource with the requested name."""


class MissingContextKey(ScaffoldError):
    """A template placeholder has no value in the render context."""


class MissingDependency(ScaffoldError):
    """A required external tool or resource is absent."""


class FeatureConfigError(ScaffoldError):
    """The bundled feature table is malformed."""
