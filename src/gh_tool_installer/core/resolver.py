"""Installation resolver: the full pipeline from token to verified binary.

validate token -> auth probe -> repository check -> environment setup ->
latest release -> strategies in order -> verification

Everything up to the repository check aborts on failure. Strategy
failures only hand over to the next strategy; running out of strategies
is fatal, as is a failed verification.
"""

from collections.abc import Sequence

import aiohttp

from gh_tool_installer.config import ResolverConfig
from gh_tool_installer.constants import TOKEN_ENV_VAR
from gh_tool_installer.core.auth import GitHubAuthManager
from gh_tool_installer.core.build import CargoBuilder
from gh_tool_installer.core.commands import CommandRunner
from gh_tool_installer.core.download import DownloadService
from gh_tool_installer.core.environment import EnvironmentSetup
from gh_tool_installer.core.github import GitHubAPIClient
from gh_tool_installer.core.http_session import create_http_session
from gh_tool_installer.core.outcome import InstallOutcome, InstallStatus
from gh_tool_installer.core.platform import PlatformDescriptor
from gh_tool_installer.core.probes import AuthProbe, ResourceAccessChecker
from gh_tool_installer.core.releases import ReleaseResolver
from gh_tool_installer.core.strategies import (
    AcquisitionStrategy,
    CloneBuildStrategy,
    DirectBuildStrategy,
    ReleaseAssetStrategy,
    StrategyContext,
)
from gh_tool_installer.core.token import validate_github_token
from gh_tool_installer.core.verify import InstallationVerifier
from gh_tool_installer.exceptions import (
    BuildFailed,
    InstallerError,
    PackageNotFound,
)
from gh_tool_installer.logger import get_logger

logger = get_logger(__name__)


def build_default_strategies(
    config: ResolverConfig,
    session: aiohttp.ClientSession,
    auth_manager: GitHubAuthManager,
    runner: CommandRunner,
) -> list[AcquisitionStrategy]:
    """Return the acquisition strategies in priority order."""
    builder = CargoBuilder(config, runner)
    downloader = DownloadService(
        session, auth_manager, retry_attempts=config.retry_attempts
    )
    return [
        ReleaseAssetStrategy(downloader),
        DirectBuildStrategy(builder),
        CloneBuildStrategy(builder, runner),
    ]


class InstallResolver:
    """Run the installation pipeline and report an InstallOutcome."""

    def __init__(
        self,
        config: ResolverConfig,
        session: aiohttp.ClientSession | None = None,
        platform: PlatformDescriptor | None = None,
        runner: CommandRunner | None = None,
        strategies: Sequence[AcquisitionStrategy] | None = None,
        setup_environment: bool = True,  # noqa: FBT001, FBT002
    ) -> None:
        """Initialize the resolver.

        Args:
            config: Resolver configuration
            session: HTTP session; one is created per run when None
            platform: Target platform; the running host when None
            runner: External command runner
            strategies: Acquisition strategies replacing the defaults
            setup_environment: Whether to touch git, cargo and profiles

        """
        self.config = config
        self.session = session
        self.platform = platform or PlatformDescriptor.detect()
        self.runner = runner or CommandRunner()
        self.strategies = list(strategies) if strategies is not None else None
        self.setup_environment = setup_environment

    async def run(self) -> InstallOutcome:
        """Install the tool.

        Returns:
            InstallOutcome; fatal errors are reported and returned, never
            raised

        """
        tool = self.config.tool_name
        if not self.config.token:
            logger.warning(
                "%s not set, skipping %s installation", TOKEN_ENV_VAR, tool
            )
            return InstallOutcome(status=InstallStatus.SKIPPED)

        try:
            token = validate_github_token(self.config.token)
            if self.session is not None:
                return await self._install(token, self.session)
            async with create_http_session(self.config) as session:
                return await self._install(token, session)
        except InstallerError as e:
            self._report(e)
            return InstallOutcome(status=InstallStatus.FAILED, error=e)

    async def _install(
        self, token: str, session: aiohttp.ClientSession
    ) -> InstallOutcome:
        auth_manager = GitHubAuthManager(token)
        client = GitHubAPIClient(session, self.config, auth_manager)

        await AuthProbe(client).run()
        await ResourceAccessChecker(client).run()

        if self.setup_environment:
            await EnvironmentSetup(self.config, self.runner).apply(token)

        release = await ReleaseResolver(client).resolve()

        strategies = self.strategies
        if strategies is None:
            strategies = build_default_strategies(
                self.config, session, auth_manager, self.runner
            )
        context = StrategyContext(
            config=self.config, platform=self.platform, release=release
        )
        from_source = await self._acquire(strategies, context)

        verifier = InstallationVerifier(self.config, self.runner)
        binary_path, version_output = await verifier.verify()

        status = (
            InstallStatus.BUILT_FROM_SOURCE
            if from_source
            else InstallStatus.ACQUIRED_FROM_RELEASE
        )
        logger.info(
            "%s installation completed successfully", self.config.tool_name
        )
        return InstallOutcome(
            status=status,
            binary_path=binary_path,
            version_output=version_output,
        )

    async def _acquire(
        self,
        strategies: Sequence[AcquisitionStrategy],
        context: StrategyContext,
    ) -> bool:
        """Try each strategy in order until one installs the binary.

        Returns:
            Whether the successful strategy built from source

        Raises:
            PackageNotFound: If the last strategy could not find the package
            BuildFailed: If every strategy failed otherwise

        """
        attempts: list[str] = []
        last_error: InstallerError | None = None

        for strategy in strategies:
            logger.debug("Trying strategy: %s", strategy.name)
            result = await strategy.attempt(context)
            if result.succeeded:
                logger.info(
                    "Installed %s via %s",
                    self.config.tool_name,
                    strategy.name,
                )
                return strategy.from_source

            last_error = result.error
            attempts.append(f"{strategy.name}: {result.error}")
            logger.warning(
                "%s did not succeed: %s; trying next strategy",
                strategy.name,
                result.error,
            )

        if isinstance(last_error, PackageNotFound):
            last_error.hints = attempts + last_error.hints
            raise last_error
        raise BuildFailed(
            "every acquisition strategy failed",
            target=self.config.tool_name,
            hints=attempts,
        )

    @staticmethod
    def _report(error: InstallerError) -> None:
        logger.error("Error: %s", error)
        for hint in error.hints:
            logger.error("  - %s", hint)
