"""Stage an isolated, expanded copy of an OOXML package for reading."""

import logging
import shutil
import tempfile
import zipfile
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from comments2csv.errors import PackageReadError
from comments2csv.internals import constants
from comments2csv.internals.run_context import get_extraction_run_id

log = logging.getLogger("comments2csv")


# region ExpandedPackage
@dataclass(frozen=True)
class ExpandedPackage:
    """Handle to one input file's unzipped parts. Only valid inside open_package()."""

    root: Path
    source_path: Path

    @property
    def source_name(self) -> str:
        """File name of the original input, as shown in the File column."""
        return self.source_path.name

    def part(self, member: str) -> Path:
        """Filesystem path for a zip member name such as 'word/comments.xml'."""
        return self.root.joinpath(*member.split("/"))


# endregion


# region open_package
@contextmanager
def open_package(source_path: str | Path) -> Iterator[ExpandedPackage]:
    """
    Copy a package into a fresh temporary folder, unzip it there and yield a handle.

    The original file is only read once, by the copy, so it is never held open while we
    parse. Every call gets its own uniquely named folder, and the folder (copy included)
    is deleted when the block exits, whether it exits normally or by exception.

    Raises:
        PackageReadError: the source can't be read or isn't a zip container.
    """
    source = Path(source_path)
    run_id = get_extraction_run_id()

    with tempfile.TemporaryDirectory(
        prefix=f"{constants.TEMP_DIR_PREFIX}{run_id}_"
    ) as staging_dir:
        staging = Path(staging_dir)
        copy_path = staging / f"{source.stem}_copy.zip"
        expand_dir = staging / "expanded"

        try:
            shutil.copy2(source, copy_path)
        except OSError as e:
            log.error(f"Could not copy {source} for reading: {e}")
            raise PackageReadError(f"Could not read input file {source}: {e}") from e

        try:
            with zipfile.ZipFile(copy_path) as zf:
                zf.extractall(expand_dir)
        except zipfile.BadZipFile as e:
            log.error(f"{source.name} is not a valid zip package: {e}")
            raise PackageReadError(
                f"{source.name} is not a valid Office package (it may be corrupted or encrypted): {e}"
            ) from e
        except OSError as e:
            log.error(f"Failed to expand {source.name}: {e}")
            raise PackageReadError(f"Failed to expand {source.name}: {e}") from e

        log.debug(f"Expanded {source.name} into {expand_dir}")

        yield ExpandedPackage(root=expand_dir, source_path=source)

        log.debug(f"Removing expanded copy of {source.name}")


# endregion
