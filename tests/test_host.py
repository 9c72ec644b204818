# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the in-process emit hook."""

from __future__ import annotations

from svgsprite.host import BuildCompiler, Compilation, CompletionRecorder, DoneCallback, EmitHook


def test_taps_run_in_order_and_report_success() -> None:
    hook = EmitHook()
    calls: list[str] = []

    def first(compilation: Compilation, done: DoneCallback) -> None:
        calls.append("first")
        done()

    def second(compilation: Compilation, done: DoneCallback) -> None:
        calls.append("second")
        done(None)

    hook.tap_async("first", first)
    hook.tap_async("second", second)
    recorder = CompletionRecorder()
    hook.call_async(Compilation(), recorder)

    assert calls == ["first", "second"]
    assert recorder.called and recorder.error is None


def test_first_error_stops_the_series() -> None:
    hook = EmitHook()
    calls: list[str] = []
    failure = ValueError("boom")

    def failing(compilation: Compilation, done: DoneCallback) -> None:
        calls.append("failing")
        done(failure)

    def never(compilation: Compilation, done: DoneCallback) -> None:
        calls.append("never")
        done()

    hook.tap_async("failing", failing)
    hook.tap_async("never", never)

    compiler = BuildCompiler()
    compiler.hooks.emit = hook
    assert compiler.emit(Compilation()) is failure
    assert calls == ["failing"]


def test_tap_without_completion_is_an_error() -> None:
    hook = EmitHook()
    hook.tap_async("silent", lambda compilation, done: None)
    recorder = CompletionRecorder()
    hook.call_async(Compilation(), recorder)
    assert isinstance(recorder.error, RuntimeError)
    assert "silent" in str(recorder.error)
