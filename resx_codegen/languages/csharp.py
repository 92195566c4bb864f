"""
C# token table

Verbatim string literals (``@"..."``) carry the embedded values, so
newlines and backslashes in a resource need no escaping.
"""

from resx_codegen.generator import BaseDialect, Dialect


class CSharpDialect(BaseDialect):
    """C# output."""

    dialect = Dialect.CSHARP

    comment_prefix = "// "

    class_header = '''namespace System
{{
    internal static partial class SR
    {{
#pragma warning disable 0414
        private const string s_resourcesName = "{resources_type_name}";
#pragma warning restore 0414

'''

    begin_release = "#if !DEBUGRESOURCES"
    begin_debug = "#else"
    end_conditional = "#endif"

    null_literal = "null"
    string_literal = '@"{}"'

    member = '''        internal static string {key} {{
              get {{ return SR.GetResourceString("{key}", {literal}); }}
        }}
'''

    resource_type_property = '''        internal static Type ResourceType {{
              get {{ return typeof({resources_type_name}); }}
        }}
'''

    class_footer = '''    }
}
'''

    marker_type = '''namespace {resources_name}
{{
    {comment}
    internal static class SR
    {{
    }}
}}
'''
