# gatestate/runtime/__init__.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Runtime support: the synchronisation primitives used by the engine.
"""
