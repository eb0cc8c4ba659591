from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from vural_api.db import get_db
from vural_api.schemas.calculator_schema import CalculatorQuoteIn, EstimateOut, Tariff
from vural_api.services import estimator
from vural_api.services.inbox_service import InboxService

router = APIRouter(prefix="/calculator", tags=["calculator"])


@router.get("/estimate", summary="Estimate system size, cost and payback from a monthly bill")
def estimate(
    bill: float = Query(..., gt=0, description="monthly bill in TL"),
    city: str = "İstanbul",
    tariff: Tariff = "home",
):
    return EstimateOut(**estimator.estimate(bill, city, tariff)).to_json()


@router.get("/cities", summary="Cities with known sun hours")
def cities():
    return estimator.list_cities()


@router.post("/quote", status_code=201, summary="Turn an estimate into a quote request")
def quote_from_estimate(payload: CalculatorQuoteIn, db: Session = Depends(get_db)):
    result = estimator.estimate(payload.bill, payload.city, payload.tariff)
    summary = (
        f"Aylık fatura: {payload.bill:g} TL ({payload.city}, {payload.tariff}). "
        f"Önerilen sistem: {result['size_kw']} kW, {result['panels']} panel. "
        f"Tahmini maliyet: {result['cost']} TL, geri ödeme: {result['payback_years']} yıl."
    )
    q = InboxService(db).add_quote(
        {
            "customer_name": payload.customer_name,
            "company_name": payload.company_name,
            "email": payload.email,
            "phone": payload.phone,
            "product_name": f"Solar Sistem ({result['size_kw']} kW)",
            "product_sku": "SOLAR-CALC",
            "message": summary,
            "notes": payload.notes,
        }
    )
    return {"success": True, "id": q.id, "estimate": EstimateOut(**result).to_json()}
