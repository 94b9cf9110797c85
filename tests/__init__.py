# Rooflet Test Suite
# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rooflet test suite.

Unit tests for the property calculator, portfolio aggregation, investment
helpers and reporting, with shared fixtures in conftest.
"""
