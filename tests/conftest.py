"""Global test fixtures and configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
	from pathlib import Path

SAMPLE_LISTING = """\
[info]   FeatureA         dddeeee Random weird comments
[info]   FeatureD         ffff1111 [ahead 1] Random weird comments
[info]   FeatureB         eeee3333 [behind 3] Random weird comments
[info] * master           0000bbbb [behind 2] Random weird comments
[info]   FeatureC         dddd3333 [gone] Random weird comments
[info]   PERSON1/FeatureD eeee4444 [gone] Random weird comments
"""


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
	"""Keep tests away from the user's config files and BRANCHSCAN_ variables."""
	for env_var in list(os.environ):
		if env_var.startswith("BRANCHSCAN_"):
			monkeypatch.delenv(env_var)
	monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
	monkeypatch.setattr("branchscan.utils.config_loader.xdg_config_home", str(tmp_path / "xdg"))
	monkeypatch.chdir(tmp_path)


@pytest.fixture
def sample_listing() -> str:
	"""Branch listing lines carrying an '[info]' log prefix."""
	return SAMPLE_LISTING


@pytest.fixture
def listing_file(tmp_path: Path, sample_listing: str) -> Path:
	"""Write the sample listing to a file."""
	path = tmp_path / "branches.txt"
	path.write_text(sample_listing, encoding="utf-8")
	return path
