# Copyright 2026 CaseFile Contributors
# SPDX-License-Identifier: Apache-2.0

"""Structured values of the model checker settings."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, PlainSerializer
from pydantic import Field as _Field

from casefile.model.document import read_only

# ###############
# Public Interface
# ###############

ReadOnlyGroupMap = Annotated[
    Mapping[str, frozenset[str]],
    AfterValidator(read_only),
    PlainSerializer(lambda value: dict(value), return_type=dict[str, frozenset[str]]),
]


class VerificationTarget(enum.Enum):
    """Categories of properties the model checker can be asked to verify."""

    CONSTANT_CONDITION = "constantCondition"
    UNDERFLOW = "underflow"
    OVERFLOW = "overflow"
    DIV_BY_ZERO = "divByZero"
    BALANCE = "balance"
    ASSERT = "assert"
    POP_EMPTY_ARRAY = "popEmptyArray"
    OUT_OF_BOUNDS = "outOfBounds"


class TargetSet(BaseModel):
    """A set of verification targets selected by the ``SMTTargets`` setting."""

    model_config = ConfigDict(frozen=True)

    targets: frozenset[VerificationTarget] = _Field(default_factory=frozenset)

    @classmethod
    def all(cls) -> TargetSet:
        """Return the set containing every known verification target."""
        return cls(targets=frozenset(VerificationTarget))

    def has(self, target: VerificationTarget) -> bool:
        return target in self.targets

    def names(self) -> list[str]:
        """Return the keywords of the selected targets in sorted order."""
        return sorted(t.value for t in self.targets)


class GroupedNameSet(BaseModel):
    """Contracts to analyze, grouped by the source unit that defines them.

    An empty mapping places no restriction on the analyzed contracts.
    """

    model_config = ConfigDict(frozen=True)

    groups: ReadOnlyGroupMap = _Field(default_factory=dict, validate_default=True)

    def members(self, group: str) -> frozenset[str]:
        """Return the member names of *group*, or an empty set if it is unknown."""
        return self.groups.get(group, frozenset())

    def has(self, group: str, member: str) -> bool:
        return member in self.members(group)
