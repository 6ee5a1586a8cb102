"""Base objects with unique identifiers and the asset base class."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from pathlib import Path, PureWindowsPath
from typing import Any

from .enums import AssetType

_next_id = itertools.count()


class Base:
    """An engine object with a unique id and a name."""

    def __init__(self, name: str = "") -> None:
        self._id = next(_next_id)
        self.name = name

    @property
    def id(self) -> int:
        """The object's unique identifier."""
        return self._id

    def __copy__(self) -> Base:
        duplicate = type(self).__new__(type(self))
        duplicate.__dict__.update(self.__dict__)
        duplicate._id = next(_next_id)
        return duplicate


class Asset(Base, ABC):
    """A named, keyed resource stored under the content directory."""

    def __init__(self, asset_type: AssetType) -> None:
        super().__init__()
        self.key = ""
        self.relative_path = ""
        self._asset_type = AssetType(asset_type)

    @property
    def asset_type(self) -> AssetType:
        return self._asset_type

    @abstractmethod
    def load(self, relative_path: str, manager: Any) -> None:
        """Read the asset from a file below the manager's content path."""

    def save(self, relative_path: str, manager: Any) -> None:
        """Write the asset; assets without a file format store nothing."""

    @staticmethod
    def _full_path(relative_path: str, manager: Any) -> Path:
        parts = PureWindowsPath(relative_path).parts
        return Path(manager.content_path).joinpath(*parts)