"""Shared fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from dialektmatch.processor import SwissGermanProcessor


@pytest.fixture
def processor() -> SwissGermanProcessor:
    return SwissGermanProcessor("ZH")


@pytest.fixture
def restaurant_processor(processor: SwissGermanProcessor) -> SwissGermanProcessor:
    processor.set_context("restaurant")
    return processor


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(
        "# test config\n"
        "processor:\n"
        "  dialect: be\n"
        "  default_context: restaurant\n"
        "search:\n"
        "  algorithm: combined\n"
        "  threshold: 0.5\n"
        "  weights:\n"
        "    soundex: 0.0\n"
        "matcher:\n"
        "  min_confidence: 0.6\n",
        encoding="utf-8",
    )
    return path
