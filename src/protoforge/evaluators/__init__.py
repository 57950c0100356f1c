# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Default template evaluators used by the expander."""

from __future__ import annotations

from .jsonnet import ParamImportEvaluator
from .snippet import SnippetEvaluator, SnippetTemplate

__all__ = ["ParamImportEvaluator", "SnippetEvaluator", "SnippetTemplate"]
