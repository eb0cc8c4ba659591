from datetime import date

from sqlalchemy import func
from sqlalchemy.orm import Session

from vural_api.models.blog import BlogPost
from vural_api.models.customer import Customer
from vural_api.models.inbox import ContactMessage, JobApplication, QuoteRequest
from vural_api.models.product import Product
from vural_api.utils.stock import LOWSTOCK, OUTSTOCK

MONTHS = 6


def _month_keys(today: date, n: int = MONTHS):
    keys = []
    y, m = today.year, today.month
    for _ in range(n):
        keys.append(f"{y:04d}-{m:02d}")
        m -= 1
        if m == 0:
            y, m = y - 1, 12
    return list(reversed(keys))


class DashboardService:
    """Read-only aggregates for the admin overview page."""

    def __init__(self, db: Session):
        self.db = db

    def summary(self, today: date = None) -> dict:
        today = today or date.today()
        db = self.db

        quotes_by_status = dict(
            db.query(QuoteRequest.status, func.count(QuoteRequest.id)).group_by(QuoteRequest.status).all()
        )

        months = _month_keys(today)
        per_month = {k: 0 for k in months}
        for (d,) in db.query(QuoteRequest.date).filter(QuoteRequest.date >= date.fromisoformat(months[0] + "-01")):
            key = f"{d.year:04d}-{d.month:02d}"
            if key in per_month:
                per_month[key] += 1

        recent = db.query(QuoteRequest).order_by(QuoteRequest.date.desc()).limit(5).all()

        return {
            "counts": {
                "products": db.query(Product).count(),
                "lowStock": db.query(Product).filter(Product.stock_status == LOWSTOCK).count(),
                "outOfStock": db.query(Product).filter(Product.stock_status == OUTSTOCK).count(),
                "quotes": sum(quotes_by_status.values()),
                "quotesByStatus": quotes_by_status,
                "unreadMessages": db.query(ContactMessage).filter(ContactMessage.status == "new").count(),
                "newApplications": db.query(JobApplication).filter(JobApplication.status == "new").count(),
                "customers": db.query(Customer).count(),
                "blogPosts": db.query(BlogPost).count(),
                "totalLikes": db.query(func.coalesce(func.sum(BlogPost.likes), 0)).scalar(),
            },
            "quotesPerMonth": [{"month": k, "count": per_month[k]} for k in months],
            "recentQuotes": recent,
        }
