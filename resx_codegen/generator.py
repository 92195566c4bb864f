"""
Resource Code Generator Core

Turns the entries of a .resx file into a strongly typed ``SR`` accessor
class in C# or Visual Basic, plus the empty ``FxResources.<Assembly>.SR``
marker type the runtime resource manager uses to find the compiled
resources.
"""

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Set, TextIO, Tuple, Type, Union

import yaml

from resx_codegen.exceptions import (
    ConfigurationException,
    GenerationFailure,
    OutputNotWritableError,
)
from resx_codegen.reader import ResourceEntry, read_resources

logger = logging.getLogger(__name__)

DO_NOT_EDIT_COMMENT = (
    "Do not edit this file manually it is auto-generated during the build "
    "based on the .resx file for this project."
)
MARKER_TYPE_COMMENT = (
    "The type of this class is used to create the ResourceManager instance "
    "as the type name matches the name of the embedded resources file"
)
RESOURCES_NAMESPACE_PREFIX = "FxResources"
MARKER_TYPE_NAME = "SR"
FAILURE_MESSAGE = "Failed to generate the resource code with error:\n{message}"


class Dialect(Enum):
    """Supported output languages."""

    CSHARP = "csharp"
    VISUAL_BASIC = "vb"

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "Dialect":
        """Pick the dialect from the output file extension."""
        if Path(path).suffix.lower() == ".vb":
            return cls.VISUAL_BASIC
        return cls.CSHARP


def _to_bool(value: Any, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1", "yes"):
            return True
        if lowered in ("false", "0", "no", ""):
            return False
    if isinstance(value, int):
        return bool(value)
    raise ConfigurationException(f"Invalid boolean value for {key}: {value!r}", config_key=key)


@dataclass
class GeneratorConfig:
    """Inputs of a single generation run."""

    resx_file_path: str
    output_source_file_path: str
    assembly_name: str
    debug_only: bool = False

    # Build task parameter names accepted in config files
    KEY_ALIASES = {
        "ResxFilePath": "resx_file_path",
        "OutputSourceFilePath": "output_source_file_path",
        "AssemblyName": "assembly_name",
        "DebugOnly": "debug_only",
    }

    def __post_init__(self):
        for key in ("resx_file_path", "output_source_file_path", "assembly_name"):
            value = getattr(self, key)
            if isinstance(value, Path):
                value = str(value)
                setattr(self, key, value)
            if not isinstance(value, str) or not value.strip():
                raise ConfigurationException(f"{key} is required", config_key=key)

        self.debug_only = _to_bool(self.debug_only, "debug_only")

    @property
    def resources_name(self) -> str:
        """Namespace of the marker type, e.g. ``FxResources.System.Net``."""
        return f"{RESOURCES_NAMESPACE_PREFIX}.{self.assembly_name}"

    @property
    def resources_type_name(self) -> str:
        """Fully qualified name of the marker type."""
        return f"{self.resources_name}.{MARKER_TYPE_NAME}"

    @property
    def dialect(self) -> Dialect:
        return Dialect.from_path(self.output_source_file_path)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GeneratorConfig":
        """Build a config from a mapping using field or build task names."""
        if not isinstance(data, dict):
            raise ConfigurationException("Configuration must be a mapping")

        kwargs = {}
        for key, value in data.items():
            name = cls.KEY_ALIASES.get(key, key)
            if name not in ("resx_file_path", "output_source_file_path", "assembly_name", "debug_only"):
                raise ConfigurationException(f"Unknown configuration key: {key}", config_key=key)
            kwargs[name] = value

        missing = [
            key
            for key in ("resx_file_path", "output_source_file_path", "assembly_name")
            if kwargs.get(key) is None
        ]
        if missing:
            raise ConfigurationException(f"{missing[0]} is required", config_key=missing[0])

        return cls(**kwargs)

    @staticmethod
    def load_mapping(path: Union[str, Path]) -> Dict[str, Any]:
        """Read the raw mapping of a YAML or JSON file without validating it."""
        path = Path(path)

        if not path.is_file():
            raise ConfigurationException(f"Configuration file not found: {path}")

        try:
            with open(path, encoding="utf-8") as f:
                if path.suffix in [".yaml", ".yml"]:
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationException(f"Invalid configuration file {path}: {e}") from e

        data = data or {}
        if not isinstance(data, dict):
            raise ConfigurationException(f"Configuration file {path} must hold a mapping")
        return data

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "GeneratorConfig":
        """Load from a YAML or JSON file."""
        return cls.from_dict(cls.load_mapping(path))


class BaseDialect:
    """
    Token table for one output language.

    The emitter is language agnostic: every piece of text it writes comes
    from one of these templates. Templates use ``str.format`` fields:

    - ``class_header``: ``{resources_type_name}``
    - ``member`` / ``debug_member``: ``{key}``, ``{literal}``
    - ``resource_type_property``: ``{resources_type_name}``
    - ``marker_type``: ``{resources_name}``, ``{comment}``

    Member templates end with a newline; ``debug_member`` falls back to
    ``member`` when a language lays both out the same way.
    """

    dialect: Dialect = None

    comment_prefix: str = ""
    class_header: str = ""
    begin_release: str = ""
    begin_debug: str = ""
    end_conditional: str = ""
    null_literal: str = ""
    string_literal: str = '"{}"'
    member: str = ""
    debug_member: Optional[str] = None
    resource_type_property: str = ""
    class_footer: str = ""
    marker_type: str = ""

    def comment(self, text: str) -> str:
        return f"{self.comment_prefix}{text}"

    def quote(self, value: str) -> str:
        """Embed a raw resource value as a string literal."""
        # Both languages escape '"' by doubling it; nothing else is touched
        return self.string_literal.format(value.replace('"', '""'))

    def release_member(self, key: str) -> str:
        return self.member.format(key=key, literal=self.null_literal)

    def literal_member(self, key: str, value: str) -> str:
        template = self.debug_member if self.debug_member is not None else self.member
        return template.format(key=key, literal=self.quote(value))


_DIALECTS: Dict[Dialect, Type[BaseDialect]] = {}


def _register_dialects() -> None:
    """Register built-in dialects."""
    from resx_codegen.languages.csharp import CSharpDialect
    from resx_codegen.languages.visualbasic import VisualBasicDialect

    _DIALECTS.setdefault(Dialect.CSHARP, CSharpDialect)
    _DIALECTS.setdefault(Dialect.VISUAL_BASIC, VisualBasicDialect)


def register_dialect(dialect: Dialect, dialect_class: Type[BaseDialect]) -> None:
    """Register a custom token table for a dialect."""
    _DIALECTS[dialect] = dialect_class


def get_dialect(dialect: Dialect) -> BaseDialect:
    """Return the token table for a dialect."""
    _register_dialects()

    dialect_class = _DIALECTS.get(dialect)
    if not dialect_class:
        raise ValueError(f"No token table for dialect: {dialect}")
    return dialect_class()


@dataclass
class EmissionState:
    """Mutable state owned by one generation run."""

    tokens: BaseDialect
    stream: TextIO
    debug_only: bool
    keys: Set[str] = field(default_factory=set)
    debug_code: List[str] = field(default_factory=list)
    skipped_keys: List[str] = field(default_factory=list)

    def write_line(self, text: str = "") -> None:
        self.stream.write(text + "\n")

    def write(self, text: str) -> None:
        self.stream.write(text)


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of a generation run."""

    success: bool
    output_path: str
    dialect: Dialect
    member_count: int = 0
    skipped_keys: Tuple[str, ...] = ()
    failure: Optional[GenerationFailure] = None

    def __bool__(self) -> bool:
        return self.success

    @property
    def message(self) -> str:
        return self.failure.message if self.failure else ""

    @classmethod
    def ok(
        cls,
        output_path: str,
        dialect: Dialect,
        member_count: int,
        skipped_keys: Iterable[str] = (),
    ) -> "GenerationResult":
        return cls(True, output_path, dialect, member_count, tuple(skipped_keys))

    @classmethod
    def failed(
        cls,
        output_path: str,
        dialect: Dialect,
        failure: GenerationFailure,
    ) -> "GenerationResult":
        return cls(False, output_path, dialect, failure=failure)


class ResourceCodeGenerator:
    """
    Generates the ``SR`` accessor source file for one resource file.

    Every key becomes a read-only property returning
    ``SR.GetResourceString(key, literal)``. Unless ``debug_only`` is set,
    the properties are written twice inside a conditional block: the
    release form passes a null literal and relies on the compiled
    resources, the debug form (under ``DEBUGRESOURCES``) embeds the value.

    Example:
        config = GeneratorConfig("Strings.resx", "SR.cs", "System.Net")
        if not ResourceCodeGenerator(config).execute():
            ...
    """

    def __init__(self, config: GeneratorConfig):
        self.config = config
        self.dialect = config.dialect
        self.tokens = get_dialect(self.dialect)

    def execute(self) -> bool:
        """Run the generation and report success as a boolean."""
        return self.run().success

    def run(self) -> GenerationResult:
        """
        Run the generation.

        Any failure is logged once and returned as a failed result. The
        output file is created before the input is read, so a failed run
        leaves an empty or partial file behind, replacing whatever a
        previous run produced. Nothing is cleaned up.
        """
        output_path = self.config.output_source_file_path
        logger.debug(f"Generating {self.dialect.value} resource code: {output_path}")

        try:
            state = self._generate()
        except Exception as e:
            failure = GenerationFailure.from_exception(e)
            logger.error(FAILURE_MESSAGE.format(message=failure.message))
            return GenerationResult.failed(output_path, self.dialect, failure)

        logger.info(
            f"Generated {len(state.keys)} resource properties "
            f"({self.dialect.value}) in {output_path}"
        )
        return GenerationResult.ok(
            output_path, self.dialect, len(state.keys), state.skipped_keys
        )

    def _generate(self) -> EmissionState:
        path = self.config.output_source_file_path
        try:
            with open(path, "w", encoding="utf-8") as stream:
                state = EmissionState(self.tokens, stream, self.config.debug_only)
                self._write_class_header(state)
                self._write_members(state, read_resources(self.config.resx_file_path))
                self._write_debug_code(state)
                self._write_resource_type_property(state)
                self._write_class_end(state)
                self._write_marker_type(state)
        except OSError as e:
            raise OutputNotWritableError(
                f"Cannot write output file {path}: {e}", path=path
            ) from e
        return state

    def _write_class_header(self, state: EmissionState) -> None:
        state.write_line(state.tokens.comment(DO_NOT_EDIT_COMMENT))
        state.write(
            state.tokens.class_header.format(
                resources_type_name=self.config.resources_type_name
            )
        )
        if not state.debug_only:
            state.write_line(state.tokens.begin_release)

    def _write_members(
        self, state: EmissionState, entries: Iterable[ResourceEntry]
    ) -> None:
        for entry in entries:
            self._store_value(state, entry)

    def _store_value(self, state: EmissionState, entry: ResourceEntry) -> None:
        """Emit one entry; later duplicates of a key are dropped."""
        if entry.key in state.keys:
            logger.debug(f"Skipping duplicate resource key: {entry.key}")
            state.skipped_keys.append(entry.key)
            return
        state.keys.add(entry.key)

        state.debug_code.append(state.tokens.literal_member(entry.key, entry.value))

        if not state.debug_only:
            state.write(state.tokens.release_member(entry.key))

    def _write_debug_code(self, state: EmissionState) -> None:
        if not state.debug_only:
            state.write_line(state.tokens.begin_debug)
        state.write_line("".join(state.debug_code))
        if not state.debug_only:
            state.write_line(state.tokens.end_conditional)

    def _write_resource_type_property(self, state: EmissionState) -> None:
        state.write(
            state.tokens.resource_type_property.format(
                resources_type_name=self.config.resources_type_name
            )
        )

    def _write_class_end(self, state: EmissionState) -> None:
        state.write(state.tokens.class_footer)

    def _write_marker_type(self, state: EmissionState) -> None:
        state.write(
            state.tokens.marker_type.format(
                resources_name=self.config.resources_name,
                comment=state.tokens.comment(MARKER_TYPE_COMMENT),
            )
        )


def generate_resources_code(
    resx_file_path: Union[str, Path],
    output_source_file_path: Union[str, Path],
    assembly_name: str,
    debug_only: bool = False,
) -> bool:
    """Build task style entry point. Returns False on failure."""
    try:
        config = GeneratorConfig(
            resx_file_path=resx_file_path,
            output_source_file_path=output_source_file_path,
            assembly_name=assembly_name,
            debug_only=debug_only,
        )
    except ConfigurationException as e:
        logger.error(FAILURE_MESSAGE.format(message=e.message))
        return False
    return ResourceCodeGenerator(config).execute()
