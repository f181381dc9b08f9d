# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""A small blog with username/password accounts and server-side sessions."""

__version__ = "0.1.0"
