"""Local configuration for tiptoc."""

from __future__ import annotations

import os

DEFAULT_CONTAINER_WIDTH = 200.0
DEFAULT_HTTP_TIMEOUT_S = 15.0
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_TOC_TITLE = "TABLE OF CONTENTS"
PLACEHOLDER_HEADING_NAME = "Nameless"
PAGE_NUMBER_PLACEHOLDER = " TDB"

# Fallback width (in pixels) used when the caller does not pass one.
TIPTOC_CONTAINER_WIDTH = float(os.getenv("TIPTOC_CONTAINER_WIDTH", str(DEFAULT_CONTAINER_WIDTH)))
TIPTOC_HTTP_TIMEOUT_S = float(os.getenv("TIPTOC_HTTP_TIMEOUT_S", str(DEFAULT_HTTP_TIMEOUT_S)))
TIPTOC_LOG_LEVEL = os.getenv("TIPTOC_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
