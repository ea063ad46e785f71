"""Contact form submission entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class ContactSubmission:
    """A message left through the public contact form."""

    name: str
    subject: str
    message_text: str
    message_html: str
    email: str = ""
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)
