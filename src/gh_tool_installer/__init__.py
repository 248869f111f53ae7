"""Top-level package for gh-tool-installer.

Installs a GitHub-hosted command-line tool from its latest release, or
builds it from source when no prebuilt binary fits the host.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("gh-tool-installer")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"
