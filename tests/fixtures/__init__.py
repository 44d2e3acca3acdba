# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Shared record types and builders for the test suite."""
