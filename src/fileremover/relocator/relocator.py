"""Relocation of deployed files into a timestamped quarantine directory."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path

from ..config.models import RelocationSettings
from ..host import LoggerHost, PostDeployActionHost
from ..utils.logging import get_logger
from .filesystem import FileSystemPort, LocalFileSystem

logger = get_logger(__name__)

PATH_SEPARATOR = "|"
DEFAULT_RUN_ID_FORMAT = "%Y%m%d%H%M%S"
PARENT_SEGMENT = ".."
INVALID_FOLDER_NAMES = {"", ".", PARENT_SEGMENT}


class InvalidRunIdError(ValueError):
    """Raised when a run identifier cannot be used as a folder name."""

    pass


class EntryStatus(str, Enum):
    """What happened to a single entry during a run."""

    MOVED = "moved"
    NOT_FOUND = "not_found"
    FAILED = "failed"
    ABANDONED = "abandoned"
    REJECTED = "rejected"


@dataclass(frozen=True)
class RelocationRequest:
    """Input for a single run."""

    base_path: Path
    parameter: str | None
    run_id: str


@dataclass
class EntryOutcome:
    """Outcome of processing one entry."""

    entry: str
    status: EntryStatus
    source: Path
    destination: Path | None = None
    error_message: str | None = None


@dataclass
class RelocationReport:
    """Summary of a run, in processing order."""

    run_id: str
    outcomes: list[EntryOutcome] = field(default_factory=list)
    quarantine_root: Path | None = None

    # Run-level status
    skipped: bool = False
    aborted: bool = False

    def _with_status(self, status: EntryStatus) -> list[EntryOutcome]:
        return [outcome for outcome in self.outcomes if outcome.status == status]

    @property
    def moved(self) -> list[EntryOutcome]:
        return self._with_status(EntryStatus.MOVED)

    @property
    def not_found(self) -> list[EntryOutcome]:
        return self._with_status(EntryStatus.NOT_FOUND)

    @property
    def failed(self) -> list[EntryOutcome]:
        return self._with_status(EntryStatus.FAILED)

    @property
    def abandoned(self) -> list[EntryOutcome]:
        return self._with_status(EntryStatus.ABANDONED)

    @property
    def rejected(self) -> list[EntryOutcome]:
        return self._with_status(EntryStatus.REJECTED)


def parse_file_paths(parameter: str | None) -> list[str]:
    """
    Split a pipe-delimited parameter into relative file paths.

    Entries are trimmed and leading separators removed; empty entries are
    dropped. Order and duplicates are preserved.

    Args:
        parameter: Raw parameter, e.g. ``"App_Config/old.config|Views/page.cshtml"``

    Returns:
        List of relative paths in the order given
    """
    if not parameter:
        return []

    entries = []
    for raw in parameter.split(PATH_SEPARATOR):
        entry = raw.strip().lstrip("/\\")
        if entry:
            entries.append(entry)
    return entries


def escapes_base(entry: str) -> bool:
    """Return True if a relative path climbs above its starting folder."""
    return PARENT_SEGMENT in entry.replace("\\", "/").split("/")


def is_valid_run_id(run_id: str | None) -> bool:
    """Return True if ``run_id`` can be used as a single folder name."""
    if not run_id or run_id.strip() in INVALID_FOLDER_NAMES:
        return False
    return "/" not in run_id and "\\" not in run_id


def new_run_id(now: datetime | None = None, fmt: str = DEFAULT_RUN_ID_FORMAT) -> str:
    """Build a sortable run identifier from a timestamp (second resolution by default)."""
    return (now or datetime.now()).strftime(fmt)


class FileRelocator:
    """
    Moves deployed files into ``<base>/temp/<namespace>/FileRemover/<run-id>``.

    Each file is handled independently: a missing file is skipped and a failed
    move is logged before continuing. Only a failure to create the quarantine
    directory stops the run, since no later move could succeed without it.
    """

    def __init__(
        self,
        host: PostDeployActionHost | None = None,
        filesystem: FileSystemPort | None = None,
        settings: RelocationSettings | None = None,
    ):
        """
        Initialize the relocator.

        Args:
            host: Receives progress messages (defaults to the package logger)
            filesystem: Filesystem implementation (defaults to the local disk)
            settings: Quarantine directory layout
        """
        self.host = host or LoggerHost()
        self.filesystem = filesystem or LocalFileSystem()
        self.settings = settings or RelocationSettings()

    def quarantine_path(self, base_path: Path, run_id: str) -> Path:
        """Get the quarantine directory for a run."""
        return Path(base_path).joinpath(*self.settings.parts(), run_id)

    def run(self, base_path: Path, parameter: str | None, run_id: str) -> RelocationReport:
        """
        Relocate every existing file listed in ``parameter``.

        Args:
            base_path: Root of the deployed application
            parameter: Pipe-delimited list of paths relative to ``base_path``
            run_id: Identifier of this run, used as the quarantine folder name

        Returns:
            RelocationReport describing each entry

        Raises:
            InvalidRunIdError: If a file has to be moved and ``run_id`` is not
                a usable folder name
        """
        return self.process(RelocationRequest(Path(base_path), parameter, run_id))

    def process(self, request: RelocationRequest) -> RelocationReport:
        """Process a RelocationRequest. See ``run``."""
        report = RelocationReport(run_id=request.run_id)

        if request.parameter is None or not request.parameter.strip():
            self.host.log_message(
                "[FileRemover] Invalid parameter provided: '%s'. Skipping post-deploy actions.",
                request.parameter,
            )
            report.skipped = True
            return report

        self.host.log_message(
            "[FileRemover] Starting FileRemover deploy action with parameter value: '%s'",
            request.parameter,
        )

        entries = parse_file_paths(request.parameter)
        quarantine_root: Path | None = None

        for index, entry in enumerate(entries):
            if escapes_base(entry):
                self.host.log_message(
                    "[FileRemover] File path '%s' points outside the application folder. "
                    "Skipping processing of file path.",
                    entry,
                )
                report.outcomes.append(
                    EntryOutcome(entry, EntryStatus.REJECTED, request.base_path / entry)
                )
                continue

            source = request.base_path / entry

            if not self.filesystem.exists(source):
                self.host.log_message(
                    "[FileRemover] Could not find a file with path '%s'. "
                    "Skipping processing of file path.",
                    entry,
                )
                report.outcomes.append(EntryOutcome(entry, EntryStatus.NOT_FOUND, source))
                continue

            self.host.log_message(
                "[FileRemover] A file with path '%s' has been found. "
                "Ensuring temp directory '%s' prior to move.",
                entry,
                request.run_id,
            )

            # Created once per run, then reused
            if quarantine_root is None:
                quarantine_root = self._ensure_quarantine_root(request)

                if quarantine_root is None:
                    self.host.log_message(
                        "[FileRemover] The temporary directory '%s' is not available. "
                        "Unable to proceed with file removals without a temp folder. "
                        "Check security permissions to ensure the application has "
                        "appropriate permissions to create directories in the local "
                        "application temp folder.",
                        request.run_id,
                    )
                    report.aborted = True
                    report.outcomes.extend(
                        EntryOutcome(remaining, EntryStatus.ABANDONED, request.base_path / remaining)
                        for remaining in entries[index:]
                    )
                    break

                report.quarantine_root = quarantine_root

            report.outcomes.append(self._move_entry(entry, source, quarantine_root))

        logger.debug(
            f"Run {request.run_id} finished: {len(report.moved)} moved, "
            f"{len(report.not_found)} not found, {len(report.failed)} failed, "
            f"{len(report.abandoned)} abandoned"
        )
        return report

    def _ensure_quarantine_root(self, request: RelocationRequest) -> Path | None:
        """
        Create the quarantine directory for this run.

        Returns:
            The directory, or None if it could not be created
        """
        run_id = request.run_id
        if not is_valid_run_id(run_id):
            self.host.log_message(
                "[FileRemover] Invalid folder name provided: '%s'. Aborting temp directory creation.",
                run_id,
            )
            raise InvalidRunIdError(
                f"Invalid run id {run_id!r}. Aborting creation of temp directory."
            )

        path = self.quarantine_path(request.base_path, run_id)
        result = self.filesystem.create_directories(path)

        if not result.success:
            self.host.log_message(
                "[FileRemover] Exception occurred while creating temp directory: %s. "
                "Aborting temp folder creation. Message: %s",
                run_id,
                result.error_message,
            )
            return None

        logger.debug(f"Quarantine directory ready: {path}")
        return path

    def _move_entry(self, entry: str, source: Path, quarantine_root: Path) -> EntryOutcome:
        """Move one file below the quarantine root, keeping its relative path."""
        destination = quarantine_root / entry

        self.host.log_message(
            "[FileRemover] Moving file: '%s' to temp directory '%s'.", entry, quarantine_root
        )

        result = self.filesystem.create_directories(destination.parent)
        if result.success:
            result = self.filesystem.move(source, destination)

        if not result.success:
            self.host.log_message(
                "[FileRemover] An error occurred while moving file '%s' to location '%s'. "
                "Error Message: %s",
                source,
                destination,
                result.error_message,
            )
            return EntryOutcome(
                entry,
                EntryStatus.FAILED,
                source,
                destination=destination,
                error_message=result.error_message,
            )

        logger.debug(f"Moved: {source} -> {destination}")
        return EntryOutcome(entry, EntryStatus.MOVED, source, destination=destination)
