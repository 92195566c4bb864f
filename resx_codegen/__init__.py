"""
Resource Code Generator

Generates the strongly typed ``SR`` resource accessor for a .resx file:
- C# or Visual Basic output, chosen by the output file extension
- Release properties resolved from compiled resources at runtime
- Debug properties with the resource values embedded inline
- The ``FxResources.<Assembly>.SR`` marker type used to locate the
  compiled resources

Usage:
    from resx_codegen import GeneratorConfig, ResourceCodeGenerator

    config = GeneratorConfig(
        resx_file_path="Resources/Strings.resx",
        output_source_file_path="obj/SR.cs",
        assembly_name="System.Net.Http",
    )
    ok = ResourceCodeGenerator(config).execute()
"""

from resx_codegen.exceptions import (
    ConfigurationException,
    GenerationFailure,
    InputNotFoundError,
    MalformedInputError,
    OutputNotWritableError,
    ResxCodegenException,
)
from resx_codegen.generator import (
    BaseDialect,
    Dialect,
    GenerationResult,
    GeneratorConfig,
    ResourceCodeGenerator,
    generate_resources_code,
    get_dialect,
    register_dialect,
)
from resx_codegen.reader import ResourceEntry, read_resources
from resx_codegen.languages.csharp import CSharpDialect
from resx_codegen.languages.visualbasic import VisualBasicDialect

__version__ = "1.0.0"

__all__ = [
    "BaseDialect",
    "ConfigurationException",
    "CSharpDialect",
    "Dialect",
    "GenerationFailure",
    "GenerationResult",
    "GeneratorConfig",
    "InputNotFoundError",
    "MalformedInputError",
    "OutputNotWritableError",
    "ResourceCodeGenerator",
    "ResourceEntry",
    "ResxCodegenException",
    "VisualBasicDialect",
    "generate_resources_code",
    "get_dialect",
    "read_resources",
    "register_dialect",
]
