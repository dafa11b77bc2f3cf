"""Contact form submissions.

Nothing is sent anywhere: a submission is validated and logged for the studio
to pick up.
"""

from protean.exceptions import ValidationError
from protean.fields import String, Text

from sokobo.domain import sokobo
from sokobo.utils.logging import get_logger

logger = get_logger(__name__)

ACKNOWLEDGEMENT = "Contact form submitted successfully"


@sokobo.value_object
class ContactMessage:
    first_name = String(required=True, max_length=100, sanitize=False)
    last_name = String(required=True, max_length=100, sanitize=False)
    email = String(required=True, max_length=254, sanitize=False)
    service = String(max_length=100, sanitize=False)
    message = Text(required=True, sanitize=False)


def submit_contact(**fields) -> str:
    """Validate and log a contact form submission, returning the acknowledgement."""
    missing = [name for name in ("first_name", "last_name", "email", "message") if not fields.get(name)]
    if missing:
        raise ValidationError({name: ["This field is required"] for name in missing})

    message = ContactMessage(**fields)
    logger.info(
        "contact_form_submitted",
        first_name=message.first_name,
        last_name=message.last_name,
        email=message.email,
        service=message.service,
        message=message.message,
    )
    return ACKNOWLEDGEMENT
