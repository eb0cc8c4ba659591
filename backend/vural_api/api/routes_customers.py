from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from vural_api.api.deps import require_admin
from vural_api.db import get_db
from vural_api.models.customer import Customer
from vural_api.repositories.customer_repo import CustomerRepository
from vural_api.schemas.customer_schema import CustomerCreate, CustomerOut, CustomerUpdate
from vural_api.services.auth_service import AuthService

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("", summary="List customers")
def list_customers(role: str = None, db: Session = Depends(get_db), _=Depends(require_admin)):
    return [CustomerOut.model_validate(c).to_json() for c in CustomerRepository(db).list(role=role)]


@router.post("", status_code=201, summary="Create customer")
def create_customer(payload: CustomerCreate, db: Session = Depends(get_db), _=Depends(require_admin)):
    user = AuthService(db).create_account(
        payload.name, payload.email, payload.password, role=payload.role, phone=payload.phone
    )
    return CustomerOut.model_validate(user).to_json()


@router.put("/{customer_id}", summary="Update customer")
def update_customer(
    customer_id: str,
    payload: CustomerUpdate,
    db: Session = Depends(get_db),
    _=Depends(require_admin),
):
    user = AuthService(db).update_account(customer_id, payload.changes())
    return CustomerOut.model_validate(user).to_json()


@router.delete("/{customer_id}", summary="Delete customer")
def delete_customer(
    customer_id: str,
    db: Session = Depends(get_db),
    admin: Customer = Depends(require_admin),
):
    if customer_id == admin.id:
        raise HTTPException(status_code=400, detail="You cannot delete your own account")
    AuthService(db).delete_account(customer_id)
    return {"success": True}
