import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from vural_api.models.solar_package import PackageProduct, SolarPackage
from vural_api.repositories.content_repo import SolarPackageRepository
from vural_api.repositories.product_repo import ProductRepository
from vural_api.services.errors import InvalidInput, NotFound
from vural_api.utils.text import new_id

log = logging.getLogger(__name__)

PANEL_CATEGORY = "solar"


class PackageService:
    """
    Ready-made solar packages matched to a customer's monthly bill.

    Product lines are snapshots: name, unit price and image are copied from
    the catalog when the package is assembled and are not synced afterwards.
    """

    def __init__(self, db: Session):
        self.db = db
        self.packages = SolarPackageRepository(db)
        self.products = ProductRepository(db)

    def list_packages(self, status: Optional[str] = None) -> List[SolarPackage]:
        return self.packages.list(status=status)

    def get_package(self, package_id: str) -> SolarPackage:
        pkg = self.packages.get(package_id)
        if not pkg:
            raise NotFound("Paket bulunamadı")
        return pkg

    def _build_lines(self, lines: List[dict]):
        built, panel_count = [], 0
        for line in lines:
            product = self.products.get(line["product_id"])
            if not product:
                raise InvalidInput(f"Unknown product: {line['product_id']}")
            unit_price = line.get("unit_price")
            if unit_price is None:
                unit_price = product.price
            built.append(
                PackageProduct(
                    id=new_id("pp-"),
                    product_id=product.id,
                    product_name=product.name,
                    quantity=line["quantity"],
                    unit_price=unit_price,
                    image_url=product.image_url,
                )
            )
            if product.category == PANEL_CATEGORY:
                panel_count += line["quantity"]
        return built, panel_count

    def _apply(self, pkg: SolarPackage, fields: dict):
        lines = fields.pop("products", None)
        total_price = fields.pop("total_price", None)
        for attr, value in fields.items():
            setattr(pkg, attr, value)

        if lines is not None:
            built, panels = self._build_lines(lines)
            pkg.products = built
            if fields.get("panel_count") is None and panels:
                pkg.panel_count = panels

        if total_price is not None:
            pkg.total_price = total_price
        elif lines is not None or "installation_cost" in fields:
            line_sum = sum(p.quantity * p.unit_price for p in pkg.products)
            pkg.total_price = line_sum + (pkg.installation_cost or 0)

        if pkg.min_bill > pkg.max_bill:
            raise InvalidInput("minBill must not exceed maxBill")

    def create_package(self, fields: dict) -> SolarPackage:
        fields = dict(fields)
        fields.setdefault("products", [])
        pkg = SolarPackage(id=new_id("pkg-"), total_price=0)
        try:
            self._apply(pkg, fields)
            self.db.add(pkg)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        log.info("solar package created id=%s lines=%d", pkg.id, len(pkg.products))
        return pkg

    def update_package(self, package_id: str, changes: dict) -> SolarPackage:
        pkg = self.get_package(package_id)
        changes = {k: v for k, v in changes.items() if v is not None}
        try:
            self._apply(pkg, changes)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        log.info("solar package updated id=%s fields=%s", pkg.id, sorted(changes))
        return pkg

    def delete_package(self, package_id: str) -> None:
        pkg = self.get_package(package_id)
        self.packages.delete(pkg)
        self.db.commit()
        log.info("solar package deleted id=%s", package_id)

    def recommend(self, bill: float) -> Optional[SolarPackage]:
        """Active package whose bill range contains ``bill``, closest midpoint first."""
        if bill <= 0:
            raise InvalidInput("Bill must be greater than zero")
        candidates = [
            p for p in self.packages.list(status="active") if p.min_bill <= bill <= p.max_bill
        ]
        if not candidates:
            return None
        return min(candidates, key=lambda p: abs((p.min_bill + p.max_bill) / 2 - bill))
