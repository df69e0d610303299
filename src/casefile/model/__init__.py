# Copyright 2026 CaseFile Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model for parsed test case documents and model checker settings."""

from casefile.model.document import ParsedDocument, SourceMap
from casefile.model.verification import GroupedNameSet, TargetSet, VerificationTarget

__all__ = [
    # Documents
    "SourceMap",
    "ParsedDocument",
    # Model checker settings
    "VerificationTarget",
    "TargetSet",
    "GroupedNameSet",
]
