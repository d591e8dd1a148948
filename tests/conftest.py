"""Test setup for llmsdocs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from llmsdocs.catalog import DocsCatalog  # noqa: E402
from llmsdocs.schemas import SearchSettings, ServerConfig  # noqa: E402
from llmsdocs.section_parser import parse_sections  # noqa: E402

SAMPLE_DOC = "# Intro\nHello world\n## Details\nMore text\n# Next\nOther content\n"

GUIDE_DOC = """\
Preamble text that belongs to no section.

# Getting Started
Install the CLI and create a project.
## Installation
Run the installer with npm.
### Requirements
Node.js 20 or later.
## Configuration
Edit the project configuration file.

# Payment Providers
Payment providers process payments for orders.
## Stripe
Configure the Stripe payment provider.

# Empty Section

# Orders
Orders are created from carts.
"""


@pytest.fixture
def settings() -> SearchSettings:
    """Search settings used across index tests."""
    return SearchSettings(threshold=0.3, min_match_char_length=2, max_results=5, max_results_cap=20)


@pytest.fixture
def server_config() -> ServerConfig:
    """Server configuration with small limits for readable assertions."""
    return ServerConfig.model_validate(
        {
            "documentation": {"fallbackPaths": [], "previewLength": 20},
            "searchDefaults": {"threshold": 0.3, "minMatchCharLength": 2, "maxResults": 2, "maxResultsCap": 3},
            "listDefaults": {"maxSections": 3},
        }
    )


@pytest.fixture
def guide_catalog(settings: SearchSettings) -> DocsCatalog:
    """Loaded catalog built from the guide document."""
    return DocsCatalog.from_sections(parse_sections(GUIDE_DOC), settings, source="guide.txt")


@pytest.fixture
def sample_doc() -> str:
    """Small document with one sub-section."""
    return SAMPLE_DOC


@pytest.fixture
def guide_doc() -> str:
    """Larger document exercising every parser rule."""
    return GUIDE_DOC
