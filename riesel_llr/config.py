"""Run-time options for a single LLR test."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SeedMethod(Enum):
    RODSETH = "rodseth"
    RIESEL = "riesel"
    PENNE = "penne"


# Largest start value a signed 64-bit search would ever reach.
MAX_SEARCH = 2**63 - 1


@dataclass(frozen=True)
class LLRConfig:
    verbose: bool = False
    progress_bar: bool = False
    progress_interval: int = 1000
    seed_method: SeedMethod = SeedMethod.RODSETH
    search_limit: int = MAX_SEARCH

    def __post_init__(self) -> None:
        if self.progress_interval < 1:
            raise ValueError("progress_interval must be positive")
        if self.search_limit < 1:
            raise ValueError("search_limit must be positive")


DEFAULT_CONFIG = LLRConfig()
