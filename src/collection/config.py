"""config.py - Configuration for hash tables and sets."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, replace

from .constants import (
    DEFAULT_BUCKETS,
    DEFAULT_GROWTH_FACTOR,
    DEFAULT_LOAD_FACTOR,
    MAX_LOAD_FACTOR,
    MIN_BUCKETS,
    MIN_GROWTH_FACTOR,
)
from .exceptions import InvalidArgumentError

ENV_PREFIX = "COLLECTION_"


@dataclass(frozen=True)
class TableConfig:
    """Configuration for a ChainedHashTable.

    Immutable; derive variants with ``dataclasses.replace`` or the
    ``with_*`` helpers.
    """

    initial_buckets: int = DEFAULT_BUCKETS
    load_factor: float = DEFAULT_LOAD_FACTOR  # rehash once size/buckets exceeds this
    growth_factor: float = DEFAULT_GROWTH_FACTOR  # directory multiplier on automatic rehash
    strict: bool = False  # raise instead of returning Status.FAIL

    def __post_init__(self) -> None:
        if not isinstance(self.initial_buckets, int) or self.initial_buckets < 0:
            raise InvalidArgumentError(
                f"initial_buckets must be a non-negative int, got {self.initial_buckets!r}"
            )
        if not (
            isinstance(self.load_factor, (int, float))
            and math.isfinite(self.load_factor)
            and 0.0 < self.load_factor <= MAX_LOAD_FACTOR
        ):
            raise InvalidArgumentError(
                f"load_factor must be in (0, {MAX_LOAD_FACTOR}], got {self.load_factor!r}"
            )
        if not (
            isinstance(self.growth_factor, (int, float))
            and math.isfinite(self.growth_factor)
            and self.growth_factor >= MIN_GROWTH_FACTOR
        ):
            raise InvalidArgumentError(
                f"growth_factor must be >= {MIN_GROWTH_FACTOR}, got {self.growth_factor!r}"
            )

    @property
    def buckets(self) -> int:
        """Initial directory length after clamping to MIN_BUCKETS."""
        return max(self.initial_buckets, MIN_BUCKETS)

    def with_strict(self, strict: bool = True) -> "TableConfig":
        return replace(self, strict=strict)

    @classmethod
    def from_env(cls, environ=None) -> "TableConfig":
        """Build a config from ``COLLECTION_*`` environment variables.

        Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        kwargs = {}
        try:
            if f"{ENV_PREFIX}INITIAL_BUCKETS" in env:
                kwargs["initial_buckets"] = int(env[f"{ENV_PREFIX}INITIAL_BUCKETS"])
            if f"{ENV_PREFIX}LOAD_FACTOR" in env:
                kwargs["load_factor"] = float(env[f"{ENV_PREFIX}LOAD_FACTOR"])
            if f"{ENV_PREFIX}GROWTH_FACTOR" in env:
                kwargs["growth_factor"] = float(env[f"{ENV_PREFIX}GROWTH_FACTOR"])
        except ValueError as e:
            raise InvalidArgumentError(f"Malformed {ENV_PREFIX}* variable: {e}") from e
        if f"{ENV_PREFIX}STRICT" in env:
            kwargs["strict"] = env[f"{ENV_PREFIX}STRICT"].strip().lower() in (
                "1",
                "true",
                "yes",
                "on",
            )
        return cls(**kwargs)
