"""
Contact form endpoint.
Validates a submission, stores it in the senderInfo collection and relays it
to the receiver mailbox.
"""

from fastapi import APIRouter, Depends, status
from datetime import datetime, timezone
import logging
import re

from easysolutions.core.config import Settings, get_settings
from easysolutions.core.errors import DispatchError, ValidationError
from easysolutions.core.mailer import Mailer, build_contact_message, get_mailer
from easysolutions.db.mongo import CONTACT_COLLECTION, get_db
from easysolutions.models.contact import ContactSubmission, ContactResponse

router = APIRouter()
logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def validate_submission(form: ContactSubmission) -> None:
    """Raise ValidationError unless every field is present and the email looks valid"""
    if not (form.name and form.email and form.subject and form.message):
        raise ValidationError("All fields are required (name, email, subject, message)")
    if not EMAIL_PATTERN.fullmatch(form.email):
        raise ValidationError("Invalid email address")


@router.post("/api/send-email", status_code=status.HTTP_200_OK, response_model=ContactResponse)
async def send_email(
    form: ContactSubmission,
    db=Depends(get_db),
    mailer: Mailer = Depends(get_mailer),
    settings: Settings = Depends(get_settings),
):
    """
    Save a contact form submission and email it to the receiver.

    The document is written before the mail is sent; a failed send leaves
    the stored submission in place.
    """
    validate_submission(form)

    try:
        db_result = await db[CONTACT_COLLECTION].insert_one({
            "name": form.name,
            "email": form.email,
            "subject": form.subject,
            "message": form.message,
            "createdAt": datetime.now(timezone.utc),
        })
        logger.info(f"Saved contact to DB: {db_result.inserted_id}")

        message = build_contact_message(
            name=form.name,
            email=form.email,
            subject=form.subject,
            message=form.message,
            receiver=settings.receiver_email,
            company_name=settings.company_name,
        )
        message_id = await mailer.send(message)
    except Exception as e:
        logger.error(f"❌ Error in send-email: {str(e)}", exc_info=True)
        raise DispatchError(detail=str(e) if settings.is_development else None)

    return {
        "success": True,
        "message": "Email sent and saved to database successfully!",
        "messageId": message_id,
    }
