from datetime import date

from sqlalchemy import Column, Date, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from vural_api.db import Base


class SolarPackage(Base):
    __tablename__ = "solar_packages"
    id = Column(String(32), primary_key=True, index=True)
    name = Column(String(256), nullable=False)
    description = Column(Text, nullable=True)
    min_bill = Column(Float, nullable=False)
    max_bill = Column(Float, nullable=False)
    system_power = Column(String(64), nullable=True)
    total_price = Column(Float, nullable=False, default=0)
    installation_cost = Column(Float, nullable=False, default=0)
    image_url = Column(String(512), nullable=True)
    savings = Column(String(128), nullable=True)
    payback_period = Column(String(128), nullable=True)
    panel_count = Column(Integer, nullable=True)
    status = Column(String(16), default="active", nullable=False)  # active, inactive
    created_date = Column(Date, default=date.today, nullable=False)

    products = relationship(
        "PackageProduct", back_populates="package", cascade="all, delete-orphan"
    )


class PackageProduct(Base):
    """Product line copied into a package when it is assembled; prices do not follow the catalog."""

    __tablename__ = "package_products"
    id = Column(String(32), primary_key=True)
    package_id = Column(String(32), ForeignKey("solar_packages.id"), nullable=False, index=True)
    product_id = Column(String(32), nullable=False)
    product_name = Column(String(256), nullable=True)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Float, nullable=False, default=0)
    image_url = Column(String(512), nullable=True)

    package = relationship("SolarPackage", back_populates="products")
