"""
Tests for the console report

Checks:
1. One banner block per scenario, in a fixed order
2. Block wording and number formatting
3. NaN APY rendered as "n/a"
4. main() prints all blocks to stdout
"""

import sys

import pytest
from loguru import logger

from src.core.domain import CompoundingResult
from src.report import (
    AutoSplitScenario,
    ReportConfig,
    SingleAssetScenario,
    format_report,
    main,
    run_report,
    setup_logging,
)
from src.report.console import BANNER_WIDTH


def _reinstate_default_sink():
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def restore_logger():
    """Reinstate a default stderr sink after tests that reconfigure loguru."""
    yield
    _reinstate_default_sink()


class TestFormatReport:
    """Tests for format_report"""

    def test_block_contents(self):
        result = CompoundingResult.from_search(
            amount=100.0, best_nr_periods=73, final_amount=150.0, value_of_first_compound=1.234
        )

        block = format_report("BUNNY COMPOUNDING", result, "BUNNY")
        lines = block.split("\n")

        assert lines[0] == "#" * BANNER_WIDTH
        assert " BUNNY COMPOUNDING " in lines[1]
        assert len(lines[1]) == BANNER_WIDTH
        assert lines[2] == "#" * BANNER_WIDTH
        assert lines[3] == ""
        assert "is 5.00 days (73 compounds per year)" in lines[4]
        assert "you should get to 150.00$ in 1 year." in lines[5]
        assert lines[6] == "The real APY is: 50.00%."
        assert lines[7] == "The first time, wait until you have 1.23$ in unclaimed BUNNY"

    def test_nan_apy_rendered_as_not_available(self):
        result = CompoundingResult.from_search(
            amount=0.0, best_nr_periods=1, final_amount=0.0, value_of_first_compound=0.0
        )

        block = format_report("EMPTY", result, "BUNNY")

        assert "The real APY is: n/a." in block

    def test_overflowed_apy_not_attributed_to_principal(self):
        """A finite principal whose APY overflows still prints a bare n/a"""
        result = CompoundingResult.from_search(
            amount=1.0, best_nr_periods=1, final_amount=1e308, value_of_first_compound=0.0
        )

        block = format_report("HUGE", result, "BUNNY")

        assert "The real APY is: n/a." in block
        assert "principal" not in block


class TestRunReport:
    """Tests for run_report"""

    def test_three_blocks_in_order(self):
        blocks = run_report()

        assert len(blocks) == 3
        assert " BUNNY COMPOUNDING " in blocks[0]
        assert " CAKE COMPOUNDING " in blocks[1]
        assert " BUNNY-BNB FLIP COMPOUNDING " in blocks[2]
        assert "unclaimed CAKE+BUNNY" in blocks[1]

    def test_custom_config(self):
        config = ReportConfig(
            single_asset=SingleAssetScenario(amount=0.0, apr=10.0, fee_per_period=0.0),
            auto_split=AutoSplitScenario(fees_primary=100.0, fees_secondary=100.0),
            single_asset_title="EMPTY POOL",
        )

        blocks = run_report(config)

        assert " EMPTY POOL " in blocks[0]
        assert "n/a" in blocks[0]
        assert "is 365.00 days (1 compounds per year)" in blocks[1]

    def test_invalid_config_raises(self):
        config = ReportConfig(single_asset=SingleAssetScenario(amount=-1.0))

        with pytest.raises(ValueError, match="amount"):
            run_report(config)


class TestMain:
    """Tests for the console entry point"""

    def test_prints_report(self, restore_logger, capsys, monkeypatch):
        monkeypatch.setenv("COMPOUNDER_LOG_LEVEL", "WARNING")

        main()

        out = capsys.readouterr().out
        assert out.count("The best interval to manually compound") == 3
        assert out.rstrip("\n").endswith("#" * BANNER_WIDTH)

    def test_setup_logging_accepts_lowercase_level(self, restore_logger):
        setup_logging("debug")
        logger.debug("logging ready")

    def test_reinstated_sink_receives_messages(self, restore_logger, capsys):
        """Loguru keeps a working sink after setup_logging has been undone"""
        setup_logging("ERROR")
        _reinstate_default_sink()

        logger.info("sink still attached")

        assert "sink still attached" in capsys.readouterr().err
