from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from vural_api.api.deps import require_admin
from vural_api.db import get_db
from vural_api.schemas.package_schema import SolarPackageIn, SolarPackageOut, SolarPackageUpdate
from vural_api.services.package_service import PackageService

router = APIRouter(prefix="/solar-packages", tags=["solar-packages"])


@router.get("", summary="List solar packages ordered by minimum bill")
def list_packages(status: Optional[str] = None, db: Session = Depends(get_db)):
    return [SolarPackageOut.model_validate(p).to_json() for p in PackageService(db).list_packages(status)]


# declared before /{package_id} so "recommend" is not taken for an id
@router.get("/recommend/{bill}", summary="Package matching a monthly bill")
def recommend(bill: float, db: Session = Depends(get_db)):
    pkg = PackageService(db).recommend(bill)
    if pkg is None:
        raise HTTPException(status_code=404, detail="Bu fatura tutarı için uygun paket bulunamadı")
    return SolarPackageOut.model_validate(pkg).to_json()


@router.get("/{package_id}", summary="Get a package with its product lines")
def get_package(package_id: str, db: Session = Depends(get_db)):
    return SolarPackageOut.model_validate(PackageService(db).get_package(package_id)).to_json()


@router.post("", status_code=201, summary="Create solar package")
def create_package(payload: SolarPackageIn, db: Session = Depends(get_db), _=Depends(require_admin)):
    pkg = PackageService(db).create_package(payload.model_dump())
    return SolarPackageOut.model_validate(pkg).to_json()


@router.put("/{package_id}", summary="Update solar package")
def update_package(
    package_id: str, payload: SolarPackageUpdate, db: Session = Depends(get_db), _=Depends(require_admin)
):
    pkg = PackageService(db).update_package(package_id, payload.changes())
    return SolarPackageOut.model_validate(pkg).to_json()


@router.delete("/{package_id}", summary="Delete solar package")
def delete_package(package_id: str, db: Session = Depends(get_db), _=Depends(require_admin)):
    PackageService(db).delete_package(package_id)
    return {"success": True}
