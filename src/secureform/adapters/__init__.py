"""Transport adapters that reduce a request to a single ``bind`` call."""

from __future__ import annotations

from secureform.adapters.dependencies import form_dependency
from secureform.adapters.parser import Parser, split_form

__all__ = ["Parser", "form_dependency", "split_form"]
