#!/usr/bin/env python3
"""
Directory Listing Module for peek

Reads the entries of a single directory, classifies them into directories
and files, filters hidden entries and counts the immediate children of each
directory.
"""

import logging
import os
import pathlib
from dataclasses import dataclass, field
from typing import Union

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


class DirectoryReadError(Exception):
    """Raised when the target directory cannot be read"""

    def __init__(self, target: PathLike, error: OSError):
        self.target = str(target)
        self.error = error
        reason = error.strerror or str(error)
        super().__init__(f"{self.target}: {reason}")


@dataclass
class Entry:
    """A single directory entry"""

    name: str
    is_dir: bool = False
    is_symlink: bool = False
    size: int = 0
    hidden: bool = False
    extension: str = ""
    sub_dirs: int = 0
    sub_files: int = 0


@dataclass
class Listing:
    """Classified and sorted contents of one directory"""

    target: str
    dirs: list[Entry] = field(default_factory=list)
    files: list[Entry] = field(default_factory=list)
    show_all: bool = False
    files_only: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.dirs and not self.files

    @property
    def content_lines(self) -> int:
        """Lines needed by the taller panel: a name and a subtitle per entry"""
        return 2 * max(len(self.dirs), len(self.files))


def is_hidden(name: str) -> bool:
    return name.startswith(".")


def _extension(name: str) -> str:
    # ".bashrc" has no extension
    return pathlib.PurePath(name).suffix.lstrip(".")


def _resolves_to_dir(path: pathlib.Path) -> bool:
    """Return True if the symlink at path ultimately points to a directory"""
    try:
        return path.resolve(strict=True).is_dir()
    except (OSError, RuntimeError) as e:
        logger.debug("Could not resolve symlink %s: %s", path, e)
        return False


def count_children(directory: pathlib.Path, show_all: bool = False) -> tuple[int, int]:
    """Count immediate child directories and non-directories

    Hidden children are skipped unless show_all. Symlinks among the children
    are not followed. An unreadable directory counts as empty.
    """
    sub_dirs = 0
    sub_files = 0
    try:
        with os.scandir(directory) as it:
            for child in it:
                if not show_all and is_hidden(child.name):
                    continue
                try:
                    child_is_dir = child.is_dir(follow_symlinks=False)
                except OSError:
                    child_is_dir = False
                if child_is_dir:
                    sub_dirs += 1
                else:
                    sub_files += 1
    except OSError as e:
        logger.debug("Could not count children of %s: %s", directory, e)
        return 0, 0
    return sub_dirs, sub_files


def sort_dirs(entries: list[Entry]) -> list[Entry]:
    """Sort directories case-insensitively by name"""
    return sorted(entries, key=lambda e: e.name.lower())


def sort_files(entries: list[Entry]) -> list[Entry]:
    """Sort files by decreasing size, then case-insensitively by name"""
    return sorted(entries, key=lambda e: (-e.size, e.name.lower()))


def read_listing(target: PathLike = ".", show_all: bool = False, files_only: bool = False) -> Listing:
    """Read and classify the entries of target

    Args:
        target: Directory to list
        show_all: Include entries whose name starts with a dot
        files_only: Leave directories out entirely

    Returns:
        Listing with sorted dirs and files

    Raises:
        DirectoryReadError: If target cannot be read
    """
    root = pathlib.Path(target)
    try:
        with os.scandir(root) as it:
            raw_entries = list(it)
    except OSError as e:
        raise DirectoryReadError(target, e) from e

    dirs: list[Entry] = []
    files: list[Entry] = []

    for raw in raw_entries:
        name = raw.name
        hidden = is_hidden(name)
        if hidden and not show_all:
            continue

        try:
            stat = raw.stat(follow_symlinks=False)
            is_symlink = raw.is_symlink()
            is_dir = raw.is_dir(follow_symlinks=False)
        except OSError as e:
            logger.debug("Skipping %s: %s", name, e)
            continue

        if is_symlink:
            is_dir = _resolves_to_dir(root / name)

        entry = Entry(
            name=name,
            is_dir=is_dir,
            is_symlink=is_symlink,
            size=stat.st_size,
            hidden=hidden,
            extension="" if is_dir else _extension(name),
        )

        if is_dir:
            if files_only:
                continue
            entry.sub_dirs, entry.sub_files = count_children(root / name, show_all)
            dirs.append(entry)
        else:
            files.append(entry)

    logger.debug("Read %s: %d dirs, %d files", target, len(dirs), len(files))

    return Listing(
        target=str(target),
        dirs=sort_dirs(dirs),
        files=sort_files(files),
        show_all=show_all,
        files_only=files_only,
    )
