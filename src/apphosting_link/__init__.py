"""Link App Hosting backends to GitHub repositories through Developer Connect."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("apphosting-link")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"
