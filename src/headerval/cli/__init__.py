# Copyright 2026 headerval Contributors
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for headerval."""
