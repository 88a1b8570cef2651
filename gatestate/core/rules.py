# gatestate/core/rules.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Any

from gatestate.core.errors import InvalidArgumentError
from gatestate.core.types import RuleFunc
from gatestate.interfaces.protocols import TransitionRule


def always_allowed() -> bool:
    """Default transition rule: the transition is always allowed."""
    return True


def as_rule(rule: Any) -> RuleFunc:
    """
    Normalise a host-supplied rule into a zero-argument predicate.

    :param rule: None (use the default), a zero-argument callable, or an
                 object implementing TransitionRule.evaluate().
    :raises InvalidArgumentError: If the rule is none of the above.
    """
    if rule is None:
        return always_allowed
    if callable(rule):
        return rule
    if isinstance(rule, TransitionRule):
        return rule.evaluate
    raise InvalidArgumentError(f"Transition rule must be callable or define evaluate(), got {type(rule).__name__}")
