"""
Visual Basic token table
"""

from resx_codegen.generator import BaseDialect, Dialect


class VisualBasicDialect(BaseDialect):
    """Visual Basic output."""

    dialect = Dialect.VISUAL_BASIC

    comment_prefix = "' "

    class_header = '''Namespace System
    Friend Partial Class SR
    
        Private Const s_resourcesName As String = "{resources_type_name}"

'''

    begin_release = "#If Not DEBUGRESOURCES Then"
    begin_debug = "#Else"
    end_conditional = "#End If"

    null_literal = "Nothing"

    # Release and debug properties are indented differently
    member = '''        Friend Shared ReadOnly Property {key} As String
           Get
                 Return SR.GetResourceString("{key}", {literal})
            End Get
        End Property
'''

    debug_member = '''        Friend Shared ReadOnly Property {key} As String
            Get
                Return SR.GetResourceString("{key}", {literal})
            End Get
        End Property
'''

    resource_type_property = '''        Friend Shared ReadOnly Property ResourceType As Type
           Get
                 Return GetType({resources_type_name})
            End Get
        End Property
'''

    class_footer = '''    End Class
End Namespace
'''

    marker_type = '''Namespace {resources_name}
    {comment}
    Friend Class SR
    
    End Class
End Namespace
'''
