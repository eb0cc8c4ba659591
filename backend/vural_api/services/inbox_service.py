import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from vural_api.adapters.storage_mirror import CONTACT_MESSAGES, StorageMirror, get_mirror
from vural_api.models.inbox import ContactMessage, JobApplication, QuoteRequest
from vural_api.repositories.content_repo import (
    ContactMessageRepository,
    JobApplicationRepository,
    QuoteRepository,
)
from vural_api.schemas.inbox_schema import ContactMessageOut
from vural_api.services.errors import InvalidInput, NotFound
from vural_api.utils.text import is_valid_email, is_valid_phone, sanitize_text

log = logging.getLogger(__name__)

SENT_OK = "Mesajınız başarıyla gönderildi."
NEWSLETTER_OK = "Bültenimize başarıyla abone oldunuz."


def _check_contact(email: str, phone: Optional[str], phone_required: bool = True):
    if not is_valid_email(email):
        raise InvalidInput("Geçersiz e-posta adresi.")
    if phone or phone_required:
        if not is_valid_phone(phone or ""):
            raise InvalidInput("Geçersiz telefon numarası.")


class InboxService:
    """Quotes, contact messages and job applications sent in from the public site."""

    def __init__(self, db: Session, mirror: Optional[StorageMirror] = None):
        self.db = db
        self.quotes = QuoteRepository(db)
        self.messages = ContactMessageRepository(db)
        self.applications = JobApplicationRepository(db)
        self.mirror = mirror or get_mirror()

    # --- quotes ---

    def list_quotes(self, status: str = None) -> List[QuoteRequest]:
        return self.quotes.list(status=status)

    def add_quote(self, fields: dict) -> QuoteRequest:
        _check_contact(fields["email"], fields["phone"])
        fields["customer_name"] = sanitize_text(fields["customer_name"])
        fields["message"] = sanitize_text(fields["message"])
        if fields.get("company_name"):
            fields["company_name"] = sanitize_text(fields["company_name"])
        if fields.get("notes"):
            fields["notes"] = sanitize_text(fields["notes"])
        fields["status"] = "new"
        q = self.quotes.add(fields)
        self.db.commit()
        log.info("quote received id=%s sku=%s", q.id, q.product_sku)
        return q

    def set_quote_status(self, quote_id: str, status: str) -> QuoteRequest:
        q = self.quotes.get(quote_id)
        if not q:
            raise NotFound("Quote not found")
        self.quotes.update(q, {"status": status})
        self.db.commit()
        log.info("quote %s -> %s", quote_id, status)
        return q

    def delete_quote(self, quote_id: str) -> None:
        q = self.quotes.get(quote_id)
        if not q:
            raise NotFound("Quote not found")
        self.quotes.delete(q)
        self.db.commit()

    # --- contact messages ---

    def list_messages(self, status: str = None) -> List[ContactMessage]:
        return self.messages.list(status=status)

    def add_message(self, fields: dict) -> ContactMessage:
        _check_contact(fields["email"], fields.get("phone"), phone_required=False)
        for key in ("name", "subject", "message"):
            if fields.get(key):
                fields[key] = sanitize_text(fields[key])
        fields["status"] = "new"
        m = self.messages.add(fields)
        self.db.commit()
        self._mirror_messages()
        log.info("contact message received id=%s", m.id)
        return m

    def set_message_status(self, message_id: str, status: str) -> ContactMessage:
        m = self.messages.get(message_id)
        if not m:
            raise NotFound("Message not found")
        self.messages.update(m, {"status": status})
        self.db.commit()
        self._mirror_messages()
        return m

    def delete_message(self, message_id: str) -> None:
        m = self.messages.get(message_id)
        if not m:
            raise NotFound("Message not found")
        self.messages.delete(m)
        self.db.commit()
        self._mirror_messages()

    def _mirror_messages(self):
        rows = self.messages.list()
        self.mirror.safe_write(CONTACT_MESSAGES, [ContactMessageOut.model_validate(m).to_json() for m in rows])

    # --- job applications ---

    def list_applications(self, status: str = None) -> List[JobApplication]:
        return self.applications.list(status=status)

    def add_application(self, fields: dict) -> JobApplication:
        _check_contact(fields["email"], fields["phone"])
        for key in ("full_name", "position", "cover_letter"):
            fields[key] = sanitize_text(fields[key])
        fields["status"] = "new"
        a = self.applications.add(fields)
        self.db.commit()
        log.info("job application received id=%s position=%s", a.id, a.position)
        return a

    def set_application_status(self, application_id: str, status: str) -> JobApplication:
        a = self.applications.get(application_id)
        if not a:
            raise NotFound("Application not found")
        self.applications.update(a, {"status": status})
        self.db.commit()
        return a

    def delete_application(self, application_id: str) -> None:
        a = self.applications.get(application_id)
        if not a:
            raise NotFound("Application not found")
        self.applications.delete(a)
        self.db.commit()

    # --- newsletter ---

    def subscribe(self, email: str) -> str:
        # nothing is persisted; the address only goes to the log
        if not is_valid_email(email):
            raise InvalidInput("Geçersiz e-posta adresi.")
        log.info("newsletter subscription: %s", email.strip().lower())
        return NEWSLETTER_OK
