from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from vural_api.api.deps import require_admin
from vural_api.db import get_db
from vural_api.schemas.inbox_schema import (
    ApplicationStatusIn,
    ContactMessageIn,
    ContactMessageOut,
    JobApplicationIn,
    JobApplicationOut,
    MessageStatusIn,
    NewsletterIn,
    QuoteIn,
    QuoteOut,
    QuoteStatusIn,
)
from vural_api.services.inbox_service import SENT_OK, InboxService

router = APIRouter(tags=["inbox"])


# --- quotes ---

@router.get("/quotes", summary="List quote requests")
def list_quotes(status: Optional[str] = None, db: Session = Depends(get_db), _=Depends(require_admin)):
    return [QuoteOut.model_validate(q).to_json() for q in InboxService(db).list_quotes(status)]


@router.post("/quotes", status_code=201, summary="Request a quote")
def create_quote(payload: QuoteIn, db: Session = Depends(get_db)):
    q = InboxService(db).add_quote(payload.model_dump())
    return {"success": True, "id": q.id}


@router.put("/quotes/{quote_id}/status", summary="Change quote status")
def set_quote_status(
    quote_id: str, payload: QuoteStatusIn, db: Session = Depends(get_db), _=Depends(require_admin)
):
    q = InboxService(db).set_quote_status(quote_id, payload.status)
    return QuoteOut.model_validate(q).to_json()


@router.delete("/quotes/{quote_id}", summary="Delete quote request")
def delete_quote(quote_id: str, db: Session = Depends(get_db), _=Depends(require_admin)):
    InboxService(db).delete_quote(quote_id)
    return {"success": True}


# --- contact messages ---

@router.get("/messages", summary="List contact messages")
def list_messages(status: Optional[str] = None, db: Session = Depends(get_db), _=Depends(require_admin)):
    return [ContactMessageOut.model_validate(m).to_json() for m in InboxService(db).list_messages(status)]


@router.post("/messages", status_code=201, summary="Send a contact message")
def create_message(payload: ContactMessageIn, db: Session = Depends(get_db)):
    m = InboxService(db).add_message(payload.model_dump())
    return {"success": True, "id": m.id, "message": SENT_OK}


@router.put("/messages/{message_id}/status", summary="Change message status")
def set_message_status(
    message_id: str, payload: MessageStatusIn, db: Session = Depends(get_db), _=Depends(require_admin)
):
    m = InboxService(db).set_message_status(message_id, payload.status)
    return ContactMessageOut.model_validate(m).to_json()


@router.delete("/messages/{message_id}", summary="Delete contact message")
def delete_message(message_id: str, db: Session = Depends(get_db), _=Depends(require_admin)):
    InboxService(db).delete_message(message_id)
    return {"success": True}


# --- job applications ---

@router.get("/applications", summary="List job applications")
def list_applications(
    status: Optional[str] = None, db: Session = Depends(get_db), _=Depends(require_admin)
):
    return [
        JobApplicationOut.model_validate(a).to_json()
        for a in InboxService(db).list_applications(status)
    ]


@router.post("/applications", status_code=201, summary="Apply for a position")
def create_application(payload: JobApplicationIn, db: Session = Depends(get_db)):
    a = InboxService(db).add_application(payload.model_dump())
    return {"success": True, "id": a.id}


@router.put("/applications/{application_id}/status", summary="Change application status")
def set_application_status(
    application_id: str,
    payload: ApplicationStatusIn,
    db: Session = Depends(get_db),
    _=Depends(require_admin),
):
    a = InboxService(db).set_application_status(application_id, payload.status)
    return JobApplicationOut.model_validate(a).to_json()


@router.delete("/applications/{application_id}", summary="Delete job application")
def delete_application(application_id: str, db: Session = Depends(get_db), _=Depends(require_admin)):
    InboxService(db).delete_application(application_id)
    return {"success": True}


# --- newsletter ---

@router.post("/newsletter", summary="Subscribe to the newsletter")
def subscribe(payload: NewsletterIn, db: Session = Depends(get_db)):
    return {"success": True, "message": InboxService(db).subscribe(payload.email)}
