from sqlalchemy import JSON, Boolean, Column, Float, Integer, String, Text
from vural_api.db import Base

class Product(Base):
    __tablename__ = "products"

    id = Column(String(32), primary_key=True, index=True)
    sku = Column(String(64), unique=True, index=True, nullable=False)
    name = Column(String(256), nullable=False)
    category = Column(String(128), index=True, nullable=False)
    description = Column(Text, nullable=True)
    brand = Column(String(128), nullable=True)
    price = Column(Float, nullable=False, default=0)
    stock = Column(Integer, default=0, nullable=False)
    status = Column(String(16), default="active", nullable=False)  # active, draft, archived
    stock_status = Column(String(16), default="outstock", nullable=False)
    image_url = Column(String(512), nullable=True)
    images = Column(JSON, nullable=False, default=list)
    specs = Column(JSON, nullable=False, default=list)
    detailed_specs = Column(Text, nullable=True)
    is_new = Column(Boolean, default=False, nullable=False)
    is_premium = Column(Boolean, default=False, nullable=False)
    slug = Column(String(256), nullable=True, index=True)
    seo = Column(JSON, nullable=True)

    def __repr__(self):
        return f"<Product sku={self.sku} name={self.name}>"
