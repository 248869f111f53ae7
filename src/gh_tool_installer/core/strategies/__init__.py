"""Ordered binary acquisition strategies."""

from gh_tool_installer.core.strategies.base import (
    AcquisitionStrategy,
    StrategyContext,
    StrategyResult,
)
from gh_tool_installer.core.strategies.clone_build import CloneBuildStrategy
from gh_tool_installer.core.strategies.direct_build import DirectBuildStrategy
from gh_tool_installer.core.strategies.release_asset import (
    ReleaseAssetStrategy,
)

__all__ = [
    "AcquisitionStrategy",
    "CloneBuildStrategy",
    "DirectBuildStrategy",
    "ReleaseAssetStrategy",
    "StrategyContext",
    "StrategyResult",
]
