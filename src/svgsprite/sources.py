# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Asset content values stored in the build result mapping."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TypeAlias


class Source(ABC):
    """Immutable piece of output content."""

    @abstractmethod
    def source(self) -> str:
        """Return the textual content of the asset."""

    def size(self) -> int:
        """Return the UTF-8 encoded size of the asset in bytes."""

        return len(self.source().encode("utf-8"))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size()})"


class RawSource(Source):
    """Source backed by a single string."""

    __slots__ = ("_value",)

    def __init__(self, value: str) -> None:
        self._value = value

    def source(self) -> str:
        return self._value


SourceLike: TypeAlias = "Source | str"


class ConcatSource(Source):
    """Source formed by concatenating other sources and strings in order."""

    __slots__ = ("_parts",)

    def __init__(self, *parts: SourceLike) -> None:
        self._parts: tuple[SourceLike, ...] = parts

    @property
    def parts(self) -> tuple[SourceLike, ...]:
        """Return the concatenated parts."""

        return self._parts

    def source(self) -> str:
        return "".join(part if isinstance(part, str) else part.source() for part in self._parts)


__all__ = ["ConcatSource", "RawSource", "Source", "SourceLike"]
