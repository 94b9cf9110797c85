# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for Rooflet components.

Every calculation is pure, so these tests need no fixtures beyond the
reference properties in the root conftest.
"""
