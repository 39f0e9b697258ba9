"""
Report configuration — default pool scenarios and logging level.

Defaults are the position sizes, APRs, fees and prices the report was built
around; override them by constructing the dataclasses with other values.
"""

import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class SingleAssetScenario:
    """Single-asset pool (rewards compound into the staked token)."""

    amount: float = 266.0  # USD in the pool
    apr: float = 114.94  # Pool APR (not APY)
    fee_per_period: float = 2.5  # Claim + deposit, in USD


@dataclass(frozen=True)
class AutoSplitScenario:
    """Auto-split pool paying 30% of the yield in a secondary reward token."""

    amount: float = 266.0
    apr_primary: float = 92.0  # Take the APR from the underlying pool, not the APY
    apr_secondary: float = 114.94
    fees_primary: float = 7.5  # Claim both tokens + deposit both, in USD
    fees_secondary: float = 2.5
    price_ref: float = 560.0  # Reference currency price, USD
    price_secondary: float = 430.0  # Secondary token price, USD


@dataclass(frozen=True)
class PairPoolScenario:
    """Liquidity-pair pool whose rewards feed the secondary single-asset pool."""

    amount: float = 266.0
    apr_pair: float = 142.0
    apr_secondary: float = 114.94
    fees_pair: float = 7.0
    fees_secondary_pool: float = 2.5


@dataclass(frozen=True)
class ReportConfig:
    """Full report configuration."""

    single_asset: SingleAssetScenario = field(default_factory=SingleAssetScenario)
    auto_split: AutoSplitScenario = field(default_factory=AutoSplitScenario)
    pair_pool: PairPoolScenario = field(default_factory=PairPoolScenario)

    # Banner titles
    single_asset_title: str = "BUNNY COMPOUNDING"
    auto_split_title: str = "CAKE COMPOUNDING"
    pair_pool_title: str = "BUNNY-BNB FLIP COMPOUNDING"

    # Token labels used in the "first compound" hint
    single_asset_reward_label: str = "BUNNY"
    auto_split_reward_label: str = "CAKE+BUNNY"
    pair_pool_reward_label: str = "BUNNY"

    log_level: str = field(
        default_factory=lambda: os.getenv("COMPOUNDER_LOG_LEVEL", "WARNING")
    )
