from __future__ import annotations

from dataclasses import dataclass, field

from ..core.constants import DEFAULT_DANGLING_START_POLICY, DEFAULT_REPEATED_START_POLICY
from ..core.exceptions import ConfigurationError
from .strategies.base import DanglingStartStrategy, RepeatedStartStrategy
from .strategies.dangling_start import AlwaysCloseStrategy, DiscardDanglingStrategy, StatusAuthoritativeStrategy
from .strategies.repeated_start import FirstStartWinsStrategy, LastStartWinsStrategy


@dataclass(frozen=True)
class IntervalPolicy:
    """How malformed logs are paired into intervals."""

    repeated_start: RepeatedStartStrategy = field(default_factory=LastStartWinsStrategy)
    dangling_start: DanglingStartStrategy = field(default_factory=StatusAuthoritativeStrategy)


@dataclass
class IntervalPolicyFactory:
    """Factory Pattern: build a policy from configured strategy names."""

    repeated_strategies: tuple[type[RepeatedStartStrategy], ...] = (LastStartWinsStrategy, FirstStartWinsStrategy)
    dangling_strategies: tuple[type[DanglingStartStrategy], ...] = (
        StatusAuthoritativeStrategy,
        AlwaysCloseStrategy,
        DiscardDanglingStrategy,
    )

    def from_names(
        self,
        repeated: str = DEFAULT_REPEATED_START_POLICY,
        dangling: str = DEFAULT_DANGLING_START_POLICY,
    ) -> IntervalPolicy:
        return IntervalPolicy(
            repeated_start=self._pick(self.repeated_strategies, repeated, "repeated start")(),
            dangling_start=self._pick(self.dangling_strategies, dangling, "dangling start")(),
        )

    @staticmethod
    def _pick(candidates, name: str, what: str):
        key = (name or "").strip().lower()
        for cls in candidates:
            if cls.name == key:
                return cls
        known = ", ".join(c.name for c in candidates)
        raise ConfigurationError(f"Unknown {what} policy {name!r} (expected one of: {known})")
