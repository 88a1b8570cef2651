# gatestate/interfaces/__init__.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Runtime-checkable protocols for host-supplied rules, actions and trace
listeners. Plain callables are accepted wherever these are.
"""

from .protocols import Action, TraceListener, TransitionRule

__all__ = ["Action", "TraceListener", "TransitionRule"]
