from sqlalchemy import Column, String
from vural_api.db import Base

class Category(Base):
    __tablename__ = "categories"

    id = Column(String(32), primary_key=True, index=True)
    name = Column(String(128), nullable=False)
    # products reference categories by slug, not by foreign key
    slug = Column(String(128), unique=True, index=True, nullable=False)

    def __repr__(self):
        return f"<Category slug={self.slug} name={self.name}>"
