"""Strongly typed identifiers for FlowDeck domain entities."""

from typing import NewType

# Users are keyed by the directory's numeric id
UserId = NewType("UserId", int)

# Ids are positive and fit the BIGINT column
MAX_USER_ID = 2**63 - 1
