# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Host build-tool surface used by the sprite injector.

The injector only needs a handful of capabilities from the host: the resolved
module list, a mutable asset mapping, an error list, and an ``emit`` lifecycle
hook that hands over a completion callback.  The protocols below capture that
surface; :class:`Compilation`, :class:`BuildCompiler`, and :class:`EmitHook`
provide a minimal in-process host used by the command line interface and the
test-suite.
"""

from __future__ import annotations

from collections.abc import Callable, MutableMapping, Sequence
from dataclasses import dataclass, field
from typing import Protocol, TypeAlias, runtime_checkable

from .models import ModuleRecord
from .sources import Source

DoneCallback: TypeAlias = Callable[..., None]


@runtime_checkable
class CompilationLike(Protocol):
    """Build result handed to emit-phase plugins."""

    modules: Sequence[ModuleRecord]
    assets: MutableMapping[str, Source]
    errors: list[Exception]


EmitTap: TypeAlias = Callable[[CompilationLike, DoneCallback], None]


class EmitHookLike(Protocol):
    """Lifecycle hook accepting asynchronous-style taps."""

    def tap_async(self, name: str, fn: EmitTap) -> None:
        """Register ``fn`` under ``name``."""
        ...


class CompilerHooksLike(Protocol):
    """Collection of lifecycle hooks exposed by a compiler."""

    @property
    def emit(self) -> EmitHookLike:
        """Return the asset-emission hook."""
        ...


class CompilerLike(Protocol):
    """Host compiler onto which plugins are applied."""

    @property
    def hooks(self) -> CompilerHooksLike:
        """Return the compiler lifecycle hooks."""
        ...


@dataclass(slots=True)
class _Tap:
    name: str
    fn: EmitTap


@dataclass(slots=True)
class CompletionRecorder:
    """Completion callback that remembers whether and how it was called."""

    called: bool = False
    error: Exception | None = None

    def __call__(self, error: Exception | None = None) -> None:
        self.called = True
        self.error = error


class EmitHook:
    """Run taps one after another, stopping at the first reported error."""

    def __init__(self) -> None:
        self._taps: list[_Tap] = []

    @property
    def tap_names(self) -> tuple[str, ...]:
        """Return tap names in registration order."""

        return tuple(tap.name for tap in self._taps)

    def tap_async(self, name: str, fn: EmitTap) -> None:
        """Register ``fn`` to run when the hook is called.

        Args:
            name: Plugin name shown in diagnostics.
            fn: Callable receiving the compilation and a completion callback.
        """

        self._taps.append(_Tap(name=name, fn=fn))

    def call_async(self, compilation: CompilationLike, callback: DoneCallback) -> None:
        """Invoke every tap in order and report the outcome to ``callback``.

        Each tap must call its completion callback exactly once.  The first
        error passed to a completion callback skips the remaining taps.

        Args:
            compilation: Build result handed to every tap.
            callback: Invoked once with ``None`` or the first error.
        """

        for tap in self._taps:
            done = CompletionRecorder()
            tap.fn(compilation, done)
            if not done.called:
                callback(RuntimeError(f"Plugin {tap.name} did not signal completion"))
                return
            if done.error is not None:
                callback(done.error)
                return
        callback(None)


@dataclass(slots=True)
class CompilerHooks:
    """Lifecycle hooks of :class:`BuildCompiler`."""

    emit: EmitHook = field(default_factory=EmitHook)


@dataclass(slots=True)
class BuildCompiler:
    """Minimal compiler exposing an ``emit`` hook."""

    hooks: CompilerHooks = field(default_factory=CompilerHooks)

    def emit(self, compilation: Compilation) -> Exception | None:
        """Run the emit hook for ``compilation`` and return the first error."""

        done = CompletionRecorder()
        self.hooks.emit.call_async(compilation, done)
        return done.error


@dataclass(slots=True)
class Compilation:
    """In-memory build result."""

    modules: list[ModuleRecord] = field(default_factory=list)
    assets: dict[str, Source] = field(default_factory=dict)
    errors: list[Exception] = field(default_factory=list)


__all__ = [
    "BuildCompiler",
    "Compilation",
    "CompilationLike",
    "CompilerHooks",
    "CompilerHooksLike",
    "CompilerLike",
    "CompletionRecorder",
    "DoneCallback",
    "EmitHook",
    "EmitHookLike",
    "EmitTap",
]
