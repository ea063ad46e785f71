"""Attachment value object shared by projects and certifications."""

from dataclasses import dataclass

PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
ATTACHMENT_MIME_TYPES = frozenset({PDF_MIME_TYPE, DOCX_MIME_TYPE})


@dataclass
class Attachment:
    """A downloadable document linked from a project or certification."""

    id: str
    label: str
    url: str
    mime_type: str = PDF_MIME_TYPE
