# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Filesystem store for generated enum records.

One record per file, ``<name><extension>``, directly inside a single
directory. The directory listing is the only state: a record exists exactly
when its file does.

Filesystem errors (``OSError``) are not caught here and reach the caller
unchanged. There is no locking; concurrent writers must coordinate.
"""

import logging
import os
from pathlib import Path
from typing import Callable, List, Optional, Union

from ..exceptions import DefinitionNotFoundError
from ..models.definition import WriteOutcome

logger = logging.getLogger(__name__)

RecordHook = Callable[[Path], None]


def normalize_extension(extension: str) -> str:
    if not extension:
        raise ValueError("Record file extension must not be empty")
    return extension if extension.startswith(".") else f".{extension}"


class RecordRepository:
    """Lists, reads, writes and deletes record files."""

    def __init__(
        self,
        directory: Union[str, Path],
        extension: str = ".cs",
        hook: Optional[RecordHook] = None,
        hook_root: Optional[Union[str, Path]] = None,
    ):
        """Initialize the repository.

        Args:
            directory: Directory holding the records
            extension: Record file extension, with or without the leading dot
            hook: Called with the record path after every write and delete
            hook_root: When set, the hook receives paths relative to this directory
        """
        self.directory = Path(directory)
        self.extension = normalize_extension(extension)
        self.hook = hook
        self.hook_root = Path(hook_root) if hook_root is not None else None

    def ensure_directory(self) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)

    def path_for(self, name: str) -> Path:
        """Path of the record for ``name``.

        Raises:
            DefinitionNotFoundError: If ``name`` would address a file outside
                the record directory.
        """
        separators = [sep for sep in (os.sep, os.altsep, "/") if sep]
        if not name or name in (".", "..") or any(sep in name for sep in separators):
            raise DefinitionNotFoundError(name)

        path = self.directory / f"{name}{self.extension}"
        if path.resolve().parent != self.directory.resolve():
            raise DefinitionNotFoundError(name, path)
        return path

    def exists(self, name: str) -> bool:
        try:
            return self.path_for(name).is_file()
        except DefinitionNotFoundError:
            return False

    def list_names(self) -> List[str]:
        """Names of all records, in directory enumeration order (not sorted)."""
        names = []
        with os.scandir(self.directory) as entries:
            for entry in entries:
                if entry.is_file() and entry.name.endswith(self.extension):
                    names.append(entry.name[: -len(self.extension)])
        return names

    def read(self, name: str) -> str:
        path = self.path_for(name)
        if not path.is_file():
            raise DefinitionNotFoundError(name, path)
        return path.read_text(encoding="utf-8")

    def write(self, name: str, content: str) -> WriteOutcome:
        """Create or overwrite the record for ``name``.

        Overwriting an existing record is not an error; the returned outcome
        tells the two cases apart.
        """
        path = self.path_for(name)
        outcome = WriteOutcome.OVERWRITTEN if path.is_file() else WriteOutcome.CREATED

        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)

        logger.info(f"Wrote record '{name}' ({outcome}): {path}")
        self._notify(path)
        return outcome

    def delete(self, name: str) -> Path:
        path = self.path_for(name)
        if not path.is_file():
            raise DefinitionNotFoundError(name, path)

        path.unlink()
        logger.info(f"Deleted record '{name}': {path}")
        self._notify(path)
        return path

    def _notify(self, path: Path) -> None:
        if self.hook is None:
            return
        if self.hook_root is not None:
            hook_path = Path(os.path.relpath(path, self.hook_root))
        else:
            hook_path = path.resolve()
        logger.debug(f"Notifying record hook: {hook_path}")
        self.hook(hook_path)
