"""SDK and plugin version information."""

from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version as dist_version

from pydantic import BaseModel, ConfigDict

from .config.settings import Settings

DISTRIBUTION = "aktis-plugin-sdk"


class VersionInfo(BaseModel):
    """
    Plugin version information.

    Immutable: each ``with_*`` call returns a new value with one field changed.
    """
    model_config = ConfigDict(frozen=True)

    version: str = "dev"
    build: str = "unknown"
    git_commit: str = "unknown"

    def with_version(self, version: str) -> "VersionInfo":
        return self.model_copy(update={"version": version})

    def with_build(self, build: str) -> "VersionInfo":
        return self.model_copy(update={"build": build})

    def with_git_commit(self, commit: str) -> "VersionInfo":
        return self.model_copy(update={"git_commit": commit})


class BuildInfo(VersionInfo):
    """Version information of the SDK itself, resolved once at process start."""


@lru_cache(maxsize=None)
def get_build_info() -> BuildInfo:
    """
    Resolve SDK build metadata.

    The version comes from the installed distribution; build and commit are
    stamped into the environment by the build pipeline.

    Returns:
        BuildInfo: Cached build metadata
    """
    try:
        sdk_version = dist_version(DISTRIBUTION)
    except PackageNotFoundError:
        sdk_version = "dev"

    settings = Settings()
    return BuildInfo(
        version=sdk_version,
        build=settings.BUILD,
        git_commit=settings.GIT_COMMIT,
    )
