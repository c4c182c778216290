"""Deploy-time enhancer: main facade.

DeployTimeEnhancer receives one deployment event and runs the pipeline:
discovery -> parsing -> resolution -> invocation -> cleanup.
Composition-based: every collaborator is injected, defaults are provided
by the factory methods.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Self

from deployenhance.application.discovery import (
    collect_class_files,
    expand_archive,
    locate_descriptor,
)
from deployenhance.application.services.cleanup import CleanupManager
from deployenhance.application.services.descriptor_parser import DescriptorParser
from deployenhance.application.services.invoker import EnhancementInvoker
from deployenhance.application.services.resolver import build_entry
from deployenhance.domain.exceptions import EnhancementFailedError, OptionsConstructionError
from deployenhance.domain.model.configuration import EnhancerConfig
from deployenhance.domain.model.descriptor import DescriptorMapping
from deployenhance.domain.model.report import (
    DescriptorOutcome,
    EnhancementReport,
    OutcomeStatus,
)
from deployenhance.infrastructure.adapters import (
    ShutilFileDeleter,
    ZipArchive,
    probe_enhancer_tool,
)

if TYPE_CHECKING:
    from pathlib import Path

    from deployenhance.domain.model.deployment_event import DeploymentEvent
    from deployenhance.domain.model.descriptor import DescriptorEntry
    from deployenhance.domain.model.enhancement_unit import EnhancementUnit
    from deployenhance.domain.ports import (
        ArchivePort,
        EnhancerToolPort,
        FileDeleterPort,
        ReporterProtocol,
    )

logger = logging.getLogger(__name__)


class DeployTimeEnhancer:
    """Deployment-event handler enhancing persistent classes in place.

    Best effort: no error escapes enhance(), the deployment always proceeds.
    An unavailable tool (tool=None) turns every event into a no-op.

    Factory methods:
    - with_defaults(): Default config, tool probed by name
    - from_config(): Given config, tool probed by name

    Example:
        enhancer = DeployTimeEnhancer.with_defaults()
        report = enhancer.enhance(DeploymentEvent.of("/deploy/app.jar"))
        if report.failed_count:
            ...
    """

    def __init__(
        self,
        tool: EnhancerToolPort | None,
        *,
        config: EnhancerConfig | None = None,
        archive: ArchivePort | None = None,
        deleter: FileDeleterPort | None = None,
        parser: DescriptorParser | None = None,
        reporter: ReporterProtocol | None = None,
    ) -> None:
        """Initialize enhancer with dependencies.

        Args:
            tool: Resolved enhancer tool, None if unavailable
            config: Enhancer configuration (default EnhancerConfig())
            archive: Archive collaborator (default ZipArchive)
            deleter: Deletion collaborator (default ShutilFileDeleter)
            parser: Descriptor parser (default DescriptorParser())
            reporter: Optional reporter, called once per event
        """
        self._config = config or EnhancerConfig()
        self._tool = tool
        self._archive = archive if archive is not None else ZipArchive()
        self._parser = parser if parser is not None else DescriptorParser()
        self._cleanup = CleanupManager(deleter if deleter is not None else ShutilFileDeleter())
        self._reporter = reporter
        self._invoker = (
            EnhancementInvoker(tool, properties_file_property=self._config.properties_file_property)
            if tool is not None
            else None
        )

    @classmethod
    def with_defaults(cls, *, reporter: ReporterProtocol | None = None) -> Self:
        """Create enhancer with default config and probed tool."""
        return cls.from_config(EnhancerConfig(), reporter=reporter)

    @classmethod
    def from_config(
        cls,
        config: EnhancerConfig,
        *,
        reporter: ReporterProtocol | None = None,
    ) -> Self:
        """Create enhancer probing the tool named in config.

        Args:
            config: Enhancer configuration
            reporter: Optional reporter

        Returns:
            Enhancer; a no-op one if the tool cannot be resolved
        """
        return cls(probe_enhancer_tool(config), config=config, reporter=reporter)

    @property
    def available(self) -> bool:
        """True if the enhancer tool was resolved."""
        return self._invoker is not None

    def __call__(self, event: DeploymentEvent) -> EnhancementReport:
        """Observer-style entry point, same as enhance()."""
        return self.enhance(event)

    def enhance(self, event: DeploymentEvent) -> EnhancementReport:
        """Enhance all persistent classes of one deployment event.

        Cleanup of extraction directories runs whatever happens in between.

        Args:
            event: Artifact locations of the deployed application

        Returns:
            What happened, per descriptor
        """
        if self._invoker is None:
            logger.debug("enhancer is not available so no deploy-time enhancement will be done")
            report = EnhancementReport.skipped_for(event.locations)
            self._emit(report)
            return report

        invoker = self._invoker
        mapping = DescriptorMapping()
        outcomes: list[DescriptorOutcome] = []
        aborted = False

        try:
            mapping = self.discover(event)

            for index, entry in enumerate(mapping.entries):
                class_files, mapping = self._collect(entry, mapping)

                try:
                    unit = invoker.prepare(entry.descriptor, class_files)
                except OptionsConstructionError as e:
                    logger.error("can't create options for enhancing, giving up: %s", e)
                    outcomes.extend(
                        DescriptorOutcome(
                            descriptor=pending.descriptor,
                            class_roots=pending.class_roots,
                            class_file_count=0,
                            status=OutcomeStatus.NOT_ATTEMPTED,
                            error=str(e),
                        )
                        for pending in mapping.entries[index:]
                    )
                    aborted = True
                    break

                logger.info(
                    "enhancing %d class file(s) of %s", len(unit), entry.descriptor
                )
                outcomes.append(self._invoke(invoker, entry, unit))
        finally:
            cleaned = self.release(mapping)

        report = EnhancementReport(
            locations=event.locations,
            outcomes=tuple(outcomes),
            cleaned=cleaned,
            aborted=aborted,
        )
        self._emit(report)
        return report

    def discover(self, event: DeploymentEvent) -> DescriptorMapping:
        """Build the descriptor mapping of an event.

        Extracts archives that hold a descriptor. The returned mapping lists
        those extractions and the caller owns them: pass the mapping to
        release() once done. Never raises; a location that cannot be inspected
        is logged and skipped, extractions recorded before it are kept.

        Args:
            event: Artifact locations

        Returns:
            Descriptor -> class roots, in location order
        """
        mapping = DescriptorMapping()

        for location in event.locations:
            try:
                found = locate_descriptor(
                    location,
                    self._archive,
                    archive_extension=self._config.archive_extension,
                )
            except Exception:
                logger.warning("can't inspect %s, skipping it", location, exc_info=True)
                continue

            if found is None:
                continue

            if found.extraction is not None:
                mapping = mapping.with_extraction(found.extraction)

            try:
                references = self._parser.parse(found.path)
            except Exception:
                logger.error("can't read references of %s", found.path, exc_info=True)
                references = ()

            mapping = mapping.with_entry(build_entry(found, references))

        logger.debug(
            "found %d persistence descriptor(s) in %d location(s)",
            len(mapping),
            len(event.locations),
        )
        return mapping

    def release(self, mapping: DescriptorMapping) -> tuple[Path, ...]:
        """Delete the extraction directories recorded in mapping.

        Returns:
            Directories actually removed
        """
        return self._cleanup.cleanup(mapping.extractions)

    def _collect(
        self,
        entry: DescriptorEntry,
        mapping: DescriptorMapping,
    ) -> tuple[tuple[str, ...], DescriptorMapping]:
        """Class files of all roots of entry, duplicates removed.

        Roots naming a packed archive are expanded first; the returned
        mapping records those extractions.
        """
        files: list[str] = []

        for root in entry.class_roots:
            if root.suffix == self._config.archive_extension and root.is_file():
                try:
                    extraction = expand_archive(root, self._archive, self._config.archive_extension)
                except Exception as e:
                    logger.warning("skipping unreadable referenced archive %s: %s", root, e)
                    continue
                mapping = mapping.with_extraction(extraction)
                root = extraction.target

            try:
                files.extend(collect_class_files(root, self._config.class_extension))
            except OSError as e:
                logger.warning("can't collect classes under %s: %s", root, e)

        return tuple(dict.fromkeys(files)), mapping

    def _invoke(
        self,
        invoker: EnhancementInvoker,
        entry: DescriptorEntry,
        unit: EnhancementUnit,
    ) -> DescriptorOutcome:
        """Run the tool for one descriptor; failure stays with that descriptor."""
        try:
            invoker.invoke(unit)
        except EnhancementFailedError as e:
            logger.warning(
                "can't enhance entities at deploy-time for %s",
                entry.descriptor,
                exc_info=e.original,
            )
            return DescriptorOutcome(
                descriptor=entry.descriptor,
                class_roots=entry.class_roots,
                class_file_count=len(unit),
                status=OutcomeStatus.FAILED,
                error=str(e),
            )

        return DescriptorOutcome(
            descriptor=entry.descriptor,
            class_roots=entry.class_roots,
            class_file_count=len(unit),
            status=OutcomeStatus.ENHANCED,
        )

    def _emit(self, report: EnhancementReport) -> None:
        """Hand report to the reporter; reporter errors are logged only."""
        if self._reporter is None:
            return
        try:
            self._reporter.report(report)
        except Exception:
            logger.warning("reporter failed", exc_info=True)
