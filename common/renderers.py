"""
common.renderers
~~~~~~~~~~~~~~~~
JSON renderer that pretty-prints responses unless the client asks for a
specific indent in its ``Accept`` header.
"""
from rest_framework.renderers import JSONRenderer


class IndentedJSONRenderer(JSONRenderer):
    indent = 4

    def get_indent(self, accepted_media_type, renderer_context):
        requested = super().get_indent(accepted_media_type, renderer_context)
        return self.indent if requested is None else requested
