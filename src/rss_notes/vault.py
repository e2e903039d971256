"""Filesystem-backed vault of markdown notes."""

import logging
import os
from dataclasses import dataclass
from typing import List

from rss_notes.models import VaultPath


@dataclass(frozen=True)
class VaultFile:
    """
    A markdown document in the vault.
    """
    path: VaultPath # The vault-relative path of the document.


class FileSystemVault:
    """Vault stored as a directory tree on the local filesystem.

    Paths passed to and returned from the vault are relative to its base
    directory and always use "/" as the separator.
    """

    def __init__(self, base_dir: str):
        self.base_dir = os.path.abspath(base_dir)

    def _resolve(self, path: VaultPath) -> str:
        """Map a vault path onto the filesystem, refusing paths outside the vault."""
        full_path = os.path.abspath(os.path.join(self.base_dir, *path.split("/")))
        if os.path.commonpath([self.base_dir, full_path]) != self.base_dir:
            raise ValueError(f"Path \"{path}\" resolves outside the vault.")
        return full_path

    def get_markdown_files(self) -> List[VaultFile]:
        files = []
        for dir_path, dir_names, file_names in os.walk(self.base_dir):
            # Skip hidden folders such as .obsidian and .trash.
            dir_names[:] = sorted(name for name in dir_names if not name.startswith("."))
            relative_dir = os.path.relpath(dir_path, self.base_dir)
            for file_name in sorted(file_names):
                if not file_name.endswith(".md"):
                    continue
                relative_path = os.path.normpath(os.path.join(relative_dir, file_name))
                files.append(VaultFile(path=relative_path.replace(os.sep, "/")))
        return files

    def folder_exists(self, path: VaultPath) -> bool:
        return os.path.isdir(self._resolve(path))

    def create_folder(self, path: VaultPath) -> None:
        os.makedirs(self._resolve(path), exist_ok=True)
        logging.info(f"Created folder \"{path}\"")

    def file_exists(self, path: VaultPath) -> bool:
        return os.path.isfile(self._resolve(path))

    def create(self, path: VaultPath, text: str) -> None:
        # Exclusive mode raises FileExistsError when the note already exists.
        with open(self._resolve(path), "x", encoding="utf-8") as f:
            f.write(text)

    def read(self, path: VaultPath) -> str:
        with open(self._resolve(path), "r", encoding="utf-8") as f:
            return f.read()

    def modify(self, path: VaultPath, text: str) -> None:
        full_path = self._resolve(path)
        if not os.path.isfile(full_path):
            raise FileNotFoundError(f"Cannot modify missing note \"{path}\".")
        with open(full_path, "w", encoding="utf-8") as f:
            f.write(text)

    def rename(self, path: VaultPath, new_path: VaultPath) -> None:
        source = self._resolve(path)
        target = self._resolve(new_path)
        if source == target:
            return
        if os.path.exists(target):
            raise FileExistsError(f"Cannot rename \"{path}\": \"{new_path}\" already exists.")
        os.rename(source, target)
        logging.info(f"Renamed \"{path}\" to \"{new_path}\"")
