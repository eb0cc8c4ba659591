import importlib
import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from vural_api.config import settings

log = logging.getLogger(__name__)

DATABASE_URL = settings.DATABASE_URL
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, future=True, echo=False, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

# every model module must be imported before create_all so metadata is populated
MODEL_MODULES = [
    "vural_api.models.category",
    "vural_api.models.product",
    "vural_api.models.customer",
    "vural_api.models.inbox",
    "vural_api.models.blog",
    "vural_api.models.content",
    "vural_api.models.solar_package",
    "vural_api.models.app_setting",
    "vural_api.models.revoked_token",
]


def init_db(reset: bool = False, seed: bool = None):
    """
    Initialize DB schema.

    Behavior:
      - If ``reset`` (or the RESET_DB setting) is true, drop & recreate tables.
      - Create any missing tables.
      - Seed demo fixtures when the catalog is empty and SEED_DEMO_DATA is on
        (or ``seed`` is passed explicitly). The configured admin account is
        ensured on every start.
    """
    for mod in MODEL_MODULES:
        importlib.import_module(mod)

    if reset or settings.RESET_DB:
        log.info("Resetting database (dropping all tables)")
        Base.metadata.drop_all(bind=engine)

    Base.metadata.create_all(bind=engine)
    log.info("Database tables ready at %s", engine.url.render_as_string(hide_password=True))

    from vural_api.fixtures import ensure_admin, seed_fixtures
    from vural_api.models.category import Category

    do_seed = settings.SEED_DEMO_DATA if seed is None else seed
    s = SessionLocal()
    try:
        if do_seed and s.query(Category).count() == 0:
            created = seed_fixtures(s)
            log.info("Seeded demo data: %s", created)
        ensure_admin(s)
        s.commit()
    except Exception:
        s.rollback()
        log.exception("init_db: seeding failed")
        raise
    finally:
        s.close()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
