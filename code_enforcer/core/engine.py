import logging
from enum import Enum
from pathlib import Path

from code_enforcer.checks.docs import check_doc_report
from code_enforcer.checks.json_files import check_json_files
from code_enforcer.checks.lint import check_lint_results
from code_enforcer.checks.manifest import check_manifest
from code_enforcer.core.config import EnforcerConfig
from code_enforcer.plugins.interfaces import DocCoverageTool, JsonFormatter, LintEngine
from code_enforcer.reporting.types import Diagnostic, DiagnosticSink
from code_enforcer.rules.registry import RuleRegistry
from code_enforcer.source.fileset import FileSetBuilder, read_source
from code_enforcer.source.types import SourceFile
from code_enforcer.tools.esdoc import EsdocTool
from code_enforcer.tools.eslint import EslintEngine
from code_enforcer.tools.jsonfmt import DefaultJsonFormatter

logger = logging.getLogger(__name__)


class Stage(str, Enum):
    INIT = "init"
    RULES_LOADED = "rules_loaded"
    FILES_BUILT = "files_built"
    DOC_CHECKED = "doc_checked"
    RULES_RUN = "rules_run"
    LINT_RUN = "lint_run"
    JSON_CHECKED = "json_checked"
    MANIFEST_CHECKED = "manifest_checked"
    DONE = "done"


STAGE_ORDER: tuple[Stage, ...] = tuple(Stage)


class Enforcer:
    """
    The orchestrator. Owns the configuration, the rules, the loaded file
    sets and the diagnostic sink of one run, and walks the stages in a
    fixed order.

    External tools are injectable so the pipeline can run against fakes;
    by default ESLint and ESDoc are taken from the project's node_modules.
    """

    def __init__(
        self,
        config: EnforcerConfig | None = None,
        *,
        root: str | Path = ".",
        registry: RuleRegistry | None = None,
        lint_engine: LintEngine | None = None,
        doc_tool: DocCoverageTool | None = None,
        json_formatter: JsonFormatter | None = None,
    ) -> None:
        self.config = config if config is not None else EnforcerConfig()
        self.root = Path(root)

        self.registry = registry if registry is not None else RuleRegistry()
        self.lint_engine = lint_engine if lint_engine is not None else EslintEngine(command=self.config.eslint_command)
        self.doc_tool = (
            doc_tool
            if doc_tool is not None
            else EsdocTool(command=self.config.esdoc_command, config_file=self.config.esdoc_config)
        )
        self.json_formatter = json_formatter if json_formatter is not None else DefaultJsonFormatter()

        self.stage = Stage.INIT
        self.sink = DiagnosticSink()
        self.code_files: tuple[SourceFile, ...] = ()
        self.data_files: tuple[SourceFile, ...] = ()
        self._loaded_by_path: dict[Path, SourceFile] = {}
        self._diagnostics: tuple[Diagnostic, ...] | None = None

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Final diagnostics; available once the run is DONE."""
        if self._diagnostics is None:
            raise RuntimeError(f"Run is not finished (stage: {self.stage.value})")
        return self._diagnostics

    def _advance(self, stage: Stage) -> None:
        expected = STAGE_ORDER[STAGE_ORDER.index(self.stage) + 1] if self.stage != Stage.DONE else None
        if stage != expected:
            raise RuntimeError(f"Cannot enter stage {stage.value} from {self.stage.value}")
        logger.debug("stage %s -> %s (%d diagnostics)", self.stage.value, stage.value, len(self.sink))
        self.stage = stage

    async def run(self) -> tuple[Diagnostic, ...]:
        """
        Perform every check and return the diagnostics in collection order.

        Only ESDoc suspends the pipeline; every other stage runs to
        completion before the next starts. Fatal errors propagate.
        """
        if self.stage != Stage.INIT:
            raise RuntimeError("An Enforcer runs once; create a new instance for another run.")

        self.load_rules()
        self.build_file_list()
        await self.check_docs()
        self.run_rules()
        self.run_lint()
        self.check_json_files()
        self.check_manifest()

        self._advance(Stage.DONE)
        self._diagnostics = self.sink.freeze()
        logger.info("run finished with %d diagnostic(s)", len(self._diagnostics))
        return self._diagnostics

    # ----------------------------
    # Stages
    # ----------------------------

    def load_rules(self) -> None:
        self.registry.load()
        self._advance(Stage.RULES_LOADED)

    def build_file_list(self) -> None:
        builder = FileSetBuilder(root=self.root)
        self.code_files = builder.build([self.config.code_files])
        self.data_files = builder.build([self.config.data_files])
        self._loaded_by_path = {(self.root / f.name).resolve(): f for f in self.code_files}
        logger.info("selected %d code file(s) and %d data file(s)", len(self.code_files), len(self.data_files))
        self._advance(Stage.FILES_BUILT)

    async def check_docs(self) -> None:
        report = await self.doc_tool.run(self.root)
        before = len(self.sink)
        check_doc_report(report, ignore=self.config.esdoc_ignore, source_for=self.source_for, sink=self.sink)
        logger.info("documentation check: %d diagnostic(s)", len(self.sink) - before)
        self._advance(Stage.DOC_CHECKED)

    def run_rules(self) -> None:
        for rule in self.registry:
            before = len(self.sink)
            for file in self.code_files:
                if rule.is_suppressed(file.name, self.config):
                    continue
                if not rule.applies_to(file.name):
                    continue
                rule.check(file, self.config, self.sink)
            logger.debug("rule %s: %d diagnostic(s)", rule.id, len(self.sink) - before)
        self._advance(Stage.RULES_RUN)

    def run_lint(self) -> None:
        results = self.lint_engine.lint(self.root, [f.name for f in self.code_files])
        before = len(self.sink)
        check_lint_results(results, source_for=self.source_for, sink=self.sink)
        logger.info("lint: %d diagnostic(s)", len(self.sink) - before)
        self._advance(Stage.LINT_RUN)

    def check_json_files(self) -> None:
        check_json_files(self.data_files, self.json_formatter, self.sink)
        self._advance(Stage.JSON_CHECKED)

    def check_manifest(self) -> None:
        manifest = self.root / self.config.manifest_file
        if manifest.exists():
            check_manifest(read_source(self.root, self.config.manifest_file), self.sink)
        else:
            logger.info("no %s found, manifest check skipped", self.config.manifest_file)
        self._advance(Stage.MANIFEST_CHECKED)

    # ----------------------------
    # Helpers
    # ----------------------------

    def source_for(self, path: str) -> SourceFile:
        """
        Content for a path reported by an external tool.

        Loaded code files are reused when the path points at one of them;
        anything else is read from disk.
        """
        loaded = self._loaded_by_path.get((self.root / path).resolve())
        if loaded is None:
            return read_source(self.root, path)
        if loaded.name == path:
            return loaded
        return SourceFile(name=path, content=loaded.content)
