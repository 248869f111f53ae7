"""File operations for placing an acquired binary."""

import shutil
from pathlib import Path

from gh_tool_installer.logger import get_logger

logger = get_logger(__name__)


class FileOperations:
    """File system operations utility."""

    def __init__(self, install_dir: Path) -> None:
        """Initialize file operations with install directory.

        Args:
            install_dir: Directory for installations

        """
        self.install_dir = install_dir

    def make_executable(self, path: Path) -> None:
        """Make file executable.

        Args:
            path: Path to file to make executable

        """
        logger.debug("Making executable: %s", path.name)
        path.chmod(0o755)

    def move_file(self, source: Path, destination: Path) -> Path:
        """Move file from source to destination, replacing any existing file.

        Args:
            source: Source file path
            destination: Destination file path

        Returns:
            Final destination path

        """
        if source == destination:
            return destination

        destination.parent.mkdir(parents=True, exist_ok=True)

        if destination.exists():
            logger.debug("Removing existing file: %s", destination)
            destination.unlink()

        logger.debug("Moving file: %s -> %s", source.name, destination)
        # Temp dirs may live on another filesystem than the install dir
        shutil.move(str(source), str(destination))
        return destination

    def move_to_install_dir(self, source: Path, filename: str) -> Path:
        """Move file into the install directory under a new name.

        Args:
            source: Source file path
            filename: Final filename

        Returns:
            Final installation path

        """
        return self.move_file(source, self.install_dir / filename)
