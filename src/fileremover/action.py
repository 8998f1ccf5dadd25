"""Post-deploy step entry point called by the deployment host."""

from datetime import datetime
from typing import Any, Callable

from .config import FileRemoverConfig, get_config
from .host import PostDeployActionHost
from .relocator import FileRelocator, FileSystemPort, RelocationReport, new_run_id


class FileRemoverPostDeployAction:
    """
    Removes files from the website folder after a deployment.

    File paths are given in the parameter as a pipe (|) separated list. Each
    file is moved into a timestamped temp folder rather than deleted, so old
    views, config files and overrides can be cleaned up without removing the
    whole installation.
    """

    description = (
        "Removes files from the Website folder.\n"
        "File paths are specified in the Parameter as a pipe (|) separated list."
    )

    def __init__(
        self,
        config: FileRemoverConfig | None = None,
        filesystem: FileSystemPort | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.config = config
        self.filesystem = filesystem
        self.clock = clock

    def run_post_deploy_action(
        self, deployed_items: Any, host: PostDeployActionHost, parameter: str | None
    ) -> RelocationReport:
        """
        Run the step for one deployment.

        Args:
            deployed_items: Items deployed by the host (not used)
            host: Deployment host receiving progress messages
            parameter: Pipe-delimited list of file paths relative to the base path

        Returns:
            RelocationReport for the run
        """
        config = self.config or get_config()
        run_id = new_run_id(self.clock(), config.relocation.run_id_format)

        relocator = FileRelocator(
            host=host, filesystem=self.filesystem, settings=config.relocation
        )
        return relocator.run(config.resolve_base_path(), parameter, run_id)
