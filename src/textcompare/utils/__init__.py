#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Helper utilities shared by the textcompare API and CLI."""
