# Copyright 2026 CaseFile Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parsers for the model checker setting values ``SMTTargets`` and ``SMTContracts``.

Both accept the literal ``default`` or a comma-separated list of tokens.  A
single invalid token rejects the whole value; no partial result is returned.
"""

from __future__ import annotations

from casefile.errors import ConfigurationError, FormatError
from casefile.model.verification import GroupedNameSet, TargetSet, VerificationTarget

# ###############
# Public Interface
# ###############

DEFAULT = "default"

TARGET_KEYWORDS: dict[str, VerificationTarget] = {target.value: target for target in VerificationTarget}


def parse_targets(value: str) -> TargetSet:
    """Parse a comma-separated list of verification target keywords.

    Args:
        value: ``default`` for all targets, or keywords such as
            ``overflow,divByZero``.  Tokens are not trimmed.

    Returns:
        The selected targets.

    Raises:
        ConfigurationError: If any token is not a known target keyword.
    """
    if value == DEFAULT:
        return TargetSet.all()

    chosen: set[VerificationTarget] = set()
    for token in _split(value):
        target = TARGET_KEYWORDS.get(token)
        if target is None:
            known = ", ".join(sorted(TARGET_KEYWORDS))
            raise ConfigurationError(f"Invalid verification target '{token}' (expected one of: {known})")
        chosen.add(target)
    return TargetSet(targets=frozenset(chosen))


def parse_grouped_names(value: str, default: GroupedNameSet | None = None) -> GroupedNameSet:
    """Parse a comma-separated list of ``source:contract`` tokens.

    Args:
        value: ``default``, or tokens such as ``a.sol:A,a.sol:B,b.sol:C``.
            Tokens are not trimmed.
        default: Value returned for the literal ``default``; an empty
            :class:`GroupedNameSet` when omitted.

    Returns:
        The member names grouped by group name.

    Raises:
        FormatError: If a token does not contain exactly one colon or has an
            empty group or member name.
    """
    if value == DEFAULT:
        return default if default is not None else GroupedNameSet()

    chosen: dict[str, set[str]] = {}
    for token in _split(value):
        if token.count(":") != 1:
            raise FormatError(f"Invalid contract specification '{token}': expected exactly one ':'")
        group, _, member = token.partition(":")
        if not group or not member:
            raise FormatError(f"Invalid contract specification '{token}': empty source or contract name")
        chosen.setdefault(group, set()).add(member)
    return GroupedNameSet(groups={group: frozenset(members) for group, members in chosen.items()})


# ################
# Implementation
# ################


def _split(value: str) -> list[str]:
    """Split on commas; an empty value has no tokens."""
    if not value:
        return []
    return value.split(",")
