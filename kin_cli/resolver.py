"""Tiered identity resolution with graceful degradation.

Resolution runs bootstrap → instance → user. Each tier may fail (missing or
unparseable document); the first failure ends the pipeline and the remaining
tiers come from ``DEFAULT_IDENTITY``:

    bootstrap fails  → DEFAULT_IDENTITY                        ALL_DEFAULTED
    instance fails   → defaults + real display/system_paths    INSTANCE_DEFAULTED
    user fails       → real bootstrap + instance, default user USER_DEFAULTED
    all load         → merge(bootstrap, instance, user)        FULL

User loading only runs after the instance document loads, even though the
user path comes straight from the bootstrap.

``IdentityResolver`` owns its memoized result. Build one per process and
pass it to whatever needs identity; ``get_resolved()`` never raises and
never returns None.
"""

import enum
import logging
import threading
from dataclasses import dataclass
from pathlib import Path

from kin_cli._jsonc import Reader, read_document
from kin_cli._loading import LoadResult, load_bootstrap, load_instance, load_user
from kin_cli._mapping import merge, merge_instance
from kin_cli.config import BOOTSTRAP_FILE, CONFIG_DIR, DATA_DIR
from kin_cli.identity import (
    CreatorInfo,
    DegradationLevel,
    DisplayConfig,
    DocumentError,
    FullInstanceIdentity,
    FullUserIdentity,
    ResolvedIdentity,
    SystemPaths,
    UserView,
    WorkspaceInfo,
)

logger = logging.getLogger(__name__)


# Single source of fallback values for every degraded tier
DEFAULT_IDENTITY = ResolvedIdentity(
    name="Kin",
    emoji="✨",
    tagline="Personal Assistant Instance",
    pronouns="they/them",
    domain="Software Development & Systems",
    calling_short="Building careful, well-crafted software alongside the operator",
    creator=CreatorInfo(
        name="Operator",
        relationship="Creator & Working Partner",
    ),
    user=UserView(
        name="Operator",
        display_name="Operator",
        pronouns="they/them",
        age=0,
        is_religious=False,
        faith="",
        denomination="",
        practice_level="",
        faith_comm_prefs="Keep faith out of technical work unless the operator raises it.",
        organization="Independent",
        role="Owner",
        calling="Shipping useful software",
        passions=("software craft", "learning"),
        work_style="Focused blocks of deep work",
        timezone="UTC",
    ),
    workspace=WorkspaceInfo(primary_path=str(Path.home())),
    display=DisplayConfig(
        banner_title="Kin",
        banner_tagline="Personal Assistant Identity",
        footer_verse_ref="Proverbs 16:3",
        footer_verse_text="Commit thy works unto the LORD, and thy thoughts shall be established.",
    ),
    system_paths=SystemPaths(
        config_root=str(CONFIG_DIR),
        instance_config=str(CONFIG_DIR / "instance" / "config.jsonc"),
        user_config=str(CONFIG_DIR / "user" / "config.jsonc"),
        data_root=str(DATA_DIR),
        temporal_data=str(DATA_DIR / "temporal"),
        session_data=str(DATA_DIR / "session"),
        projects_data=str(DATA_DIR / "projects"),
        skills=str(CONFIG_DIR / "skills"),
        system_bin=str(DATA_DIR / "bin"),
    ),
)


class ResolutionState(enum.Enum):
    START = "start"
    BOOTSTRAP_ATTEMPTED = "bootstrap_attempted"
    INSTANCE_ATTEMPTED = "instance_attempted"
    USER_ATTEMPTED = "user_attempted"
    RESOLVED = "resolved"


@dataclass(frozen=True)
class TierOutcome:
    tier: str  # "bootstrap" | "instance" | "user"
    path: str
    ok: bool
    error: DocumentError | None = None


@dataclass(frozen=True)
class ResolutionDiagnostics:
    """What the pipeline did: level reached, states visited, tier outcomes."""

    level: DegradationLevel
    states: tuple[ResolutionState, ...]
    tiers: tuple[TierOutcome, ...]

    @property
    def degraded(self) -> bool:
        return self.level is not DegradationLevel.FULL


@dataclass(frozen=True)
class _Resolution:
    identity: ResolvedIdentity
    diagnostics: ResolutionDiagnostics
    full_instance: FullInstanceIdentity | None
    full_user: FullUserIdentity | None


class _Trace:
    """Records states and tier outcomes while the pipeline runs."""

    def __init__(self) -> None:
        self.states: list[ResolutionState] = [ResolutionState.START]
        self.tiers: list[TierOutcome] = []

    def attempted(self, state: ResolutionState, tier: str, path: str | Path, result: LoadResult) -> None:
        self.states.append(state)
        self.tiers.append(TierOutcome(tier=tier, path=str(path), ok=result.ok, error=result.error))

    def finish(self, level: DegradationLevel) -> ResolutionDiagnostics:
        self.states.append(ResolutionState.RESOLVED)
        return ResolutionDiagnostics(level=level, states=tuple(self.states), tiers=tuple(self.tiers))


class IdentityResolver:
    """Resolve the identity once and serve the cached result to every caller.

    Args:
        bootstrap_path: Bootstrap document location (default ``BOOTSTRAP_FILE``).
        reader: Document reader; injectable so tests can count reads.
    """

    def __init__(
        self,
        bootstrap_path: str | Path | None = None,
        *,
        reader: Reader = read_document,
    ) -> None:
        self.bootstrap_path = Path(bootstrap_path).expanduser() if bootstrap_path else BOOTSTRAP_FILE
        self._reader = reader
        self._lock = threading.Lock()
        self._resolution: _Resolution | None = None

    # -- Public API ------------------------------------------------------------

    def get_resolved(self) -> ResolvedIdentity:
        """Return the resolved identity, running the pipeline on first call."""
        return self._resolved().identity

    @property
    def diagnostics(self) -> ResolutionDiagnostics:
        return self._resolved().diagnostics

    @property
    def full_instance(self) -> FullInstanceIdentity | None:
        """Raw instance document, or None when that tier fell back to defaults."""
        return self._resolved().full_instance

    @property
    def full_user(self) -> FullUserIdentity | None:
        """Raw user document, or None when that tier fell back to defaults."""
        return self._resolved().full_user

    @property
    def is_resolved(self) -> bool:
        return self._resolution is not None

    # -- Resolution cache ------------------------------------------------------

    def _resolved(self) -> _Resolution:
        resolution = self._resolution
        if resolution is not None:
            return resolution
        with self._lock:
            # Another thread may have finished while we waited on the lock
            if self._resolution is None:
                self._resolution = self._resolve()
            return self._resolution

    # -- Degradation controller ------------------------------------------------

    def _resolve(self) -> _Resolution:
        trace = _Trace()

        bootstrap = load_bootstrap(self.bootstrap_path, self._reader)
        trace.attempted(ResolutionState.BOOTSTRAP_ATTEMPTED, "bootstrap", self.bootstrap_path, bootstrap)
        if not bootstrap.ok:
            return self._finish(trace, DegradationLevel.ALL_DEFAULTED, DEFAULT_IDENTITY)

        paths = bootstrap.value.system_paths
        instance = load_instance(paths.instance_config, self._reader)
        trace.attempted(ResolutionState.INSTANCE_ATTEMPTED, "instance", paths.instance_config, instance)
        if not instance.ok:
            identity = DEFAULT_IDENTITY.model_copy(update={
                "display": bootstrap.value.display,
                "system_paths": paths,
            })
            return self._finish(trace, DegradationLevel.INSTANCE_DEFAULTED, identity)

        user = load_user(paths.user_config, self._reader)
        trace.attempted(ResolutionState.USER_ATTEMPTED, "user", paths.user_config, user)
        if not user.ok:
            identity = merge_instance(bootstrap.value, instance.value, DEFAULT_IDENTITY.user)
            return self._finish(
                trace, DegradationLevel.USER_DEFAULTED, identity, full_instance=instance.value,
            )

        identity = merge(bootstrap.value, instance.value, user.value)
        return self._finish(
            trace, DegradationLevel.FULL, identity,
            full_instance=instance.value, full_user=user.value,
        )

    def _finish(
        self,
        trace: _Trace,
        level: DegradationLevel,
        identity: ResolvedIdentity,
        *,
        full_instance: FullInstanceIdentity | None = None,
        full_user: FullUserIdentity | None = None,
    ) -> _Resolution:
        diagnostics = trace.finish(level)
        if diagnostics.degraded:
            failed = next(t for t in diagnostics.tiers if not t.ok)
            logger.warning(
                "identity resolution degraded to %s: %s document %s (%s)",
                level.value, failed.tier, failed.error.value if failed.error else "failed", failed.path,
            )
        else:
            logger.info(
                "identity resolution complete (%s): instance=%s user=%s",
                level.value, identity.name, identity.user.name,
            )
        return _Resolution(
            identity=identity,
            diagnostics=diagnostics,
            full_instance=full_instance,
            full_user=full_user,
        )
