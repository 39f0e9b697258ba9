"""
Console report — best manual compounding interval for each pool scenario.

Runs the three scenario searches with the configured inputs and renders one
banner block per scenario:
- interval between manual compounds (days)
- projected balance after one year
- realized APY
- unclaimed rewards to wait for before the first compound
"""

from typing import Final, Optional

from loguru import logger

from src.core.domain.compounding_result import CompoundingResult
from src.optimizer.auto_split import two_asset_best_interval
from src.optimizer.pair_pool import pair_plus_secondary_best_interval
from src.optimizer.single_asset import single_asset_best_interval
from src.report.config import ReportConfig
from src.report.log_setup import setup_logging

BANNER_WIDTH: Final[int] = 115
BANNER_CHAR: Final[str] = "#"


def _banner(title: str) -> list[str]:
    rule = BANNER_CHAR * BANNER_WIDTH
    return [rule, f" {title} ".center(BANNER_WIDTH, BANNER_CHAR), rule]


def format_report(title: str, result: CompoundingResult, reward_label: str) -> str:
    """
    Render one scenario block.

    Args:
        title: Banner title (e.g. "BUNNY COMPOUNDING")
        result: Outcome of the scenario search
        reward_label: Token name(s) shown in the first-compound hint

    Returns:
        Multi-line block without trailing newline
    """
    if result.has_meaningful_apy:
        apy_text = f"{result.real_apy:.2f}%"
    else:
        apy_text = "n/a"

    lines = _banner(title) + [
        "",
        f"The best interval to manually compound your investment is "
        f"{result.frequency_in_days:.2f} days ({result.best_nr_periods} compounds per year)",
        f"Doing so, you should get to {result.final_amount:.2f}$ in 1 year.",
        f"The real APY is: {apy_text}.",
        f"The first time, wait until you have {result.value_of_first_compound:.2f}$ "
        f"in unclaimed {reward_label}",
    ]
    return "\n".join(lines)


def run_report(config: Optional[ReportConfig] = None) -> list[str]:
    """
    Run the three scenario searches and render their blocks.

    Args:
        config: Scenario inputs (default: ReportConfig())

    Returns:
        Blocks in order: single asset, auto-split, pair pool
    """
    if config is None:
        config = ReportConfig()

    single = config.single_asset
    single_result = single_asset_best_interval(
        single.amount, single.apr, single.fee_per_period
    )
    logger.info("Single-asset pool: every {:.2f} days", single_result.frequency_in_days)

    split = config.auto_split
    split_result = two_asset_best_interval(
        split.amount,
        split.apr_primary,
        split.apr_secondary,
        split.fees_primary,
        split.fees_secondary,
        split.price_ref,
        split.price_secondary,
    )
    logger.info("Auto-split pool: every {:.2f} days", split_result.frequency_in_days)

    pair = config.pair_pool
    pair_result = pair_plus_secondary_best_interval(
        pair.amount,
        pair.apr_pair,
        pair.apr_secondary,
        pair.fees_pair,
        pair.fees_secondary_pool,
    )
    logger.info("Pair pool: every {:.2f} days", pair_result.frequency_in_days)

    return [
        format_report(config.single_asset_title, single_result, config.single_asset_reward_label),
        format_report(config.auto_split_title, split_result, config.auto_split_reward_label),
        format_report(
            config.pair_pool_title, pair_result, config.pair_pool_reward_label
        ),
    ]


def main() -> None:
    """Console entry point."""
    config = ReportConfig()
    setup_logging(config.log_level)

    blocks = run_report(config)

    print("\n\n".join(blocks))
    print()
    print(BANNER_CHAR * BANNER_WIDTH)
