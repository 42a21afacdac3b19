from collections.abc import Iterator
import logging
import os
from pathlib import Path

from pybake.domain.entities import SourceEntry, SourceLanguage
from pybake.domain.errors import BakeError, MetadataUnavailable, MissingSourceDirectory

logger = logging.getLogger(__name__)


def _dir_entries(directory: Path, entries) -> Iterator[os.DirEntry]:
    with entries:
        while True:
            try:
                entry = next(entries)
            except StopIteration:
                return
            except OSError as e:
                raise BakeError(
                    f"Failed to access directory entry in '{directory}'"
                ) from e
            yield entry


def _source_entries(src: Path, entries) -> Iterator[SourceEntry]:
    for entry in _dir_entries(src, entries):
        path = Path(src, entry.name)
        try:
            if not entry.is_file():
                continue
        except OSError as e:
            raise MetadataUnavailable(path) from e

        language = SourceLanguage.from_extension(path.suffix.removeprefix("."))
        if language is None:
            logger.debug("Skipping '%s'", path)
            continue

        try:
            mtime_ns = entry.stat().st_mtime_ns
        except OSError as e:
            raise MetadataUnavailable(path) from e

        yield SourceEntry(path=path, language=language, mtime_ns=mtime_ns)


class SourceScan:
    """An open listing of the C and C++ sources directly inside 'src'.

    The directory is opened on creation so a missing 'src/' fails before any
    build output is created. Entries are read lazily while iterating. Use it
    as a context manager so the listing is closed even if iteration never
    starts.
    """

    def __init__(self, src: Path):
        self.src = src
        try:
            self._entries = os.scandir(src)
        except OSError as e:
            raise MissingSourceDirectory(src) from e

    def __iter__(self) -> Iterator[SourceEntry]:
        return _source_entries(self.src, self._entries)

    def close(self) -> None:
        self._entries.close()

    def __enter__(self) -> "SourceScan":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def scan_sources(src: Path) -> SourceScan:
    """Lists the sources in 'src', reading the directory again on every call."""
    return SourceScan(src)


def obj_file_path(output: Path, source: Path) -> Path:
    return output / f"{source.name}.o"


def needs_recompilation(source: SourceEntry, obj_file: Path) -> bool:
    """A source is stale if its object is missing or strictly older."""
    try:
        obj_mtime_ns = obj_file.stat().st_mtime_ns
    except FileNotFoundError:
        return True
    except OSError as e:
        raise MetadataUnavailable(obj_file) from e
    return source.mtime_ns > obj_mtime_ns


def collect_obj_files(output: Path) -> tuple[Path, ...]:
    """Every object file directly inside 'output', including ones left by earlier builds."""
    try:
        with os.scandir(output) as it:
            entries = tuple(it)
    except OSError as e:
        raise BakeError(f"Failed to read '{output}'") from e

    obj_files = []
    for entry in entries:
        path = Path(output, entry.name)
        try:
            is_file = entry.is_file()
        except OSError as e:
            raise MetadataUnavailable(path) from e
        if is_file and path.suffix == ".o":
            obj_files.append(path)
    return tuple(obj_files)


def create_path(*args) -> Path:
    """Creates the directory and all its parents."""
    path = Path(*args)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise BakeError(f"Failed to create '{path}'") from e
    return path
