from sqlmodel import SQLModel, create_engine, Session

from .settings import settings

engine = create_engine(settings.database_url, echo=settings.DB_ECHO, pool_pre_ping=True)

def init_db(bind=None):
    # Registers every table on SQLModel.metadata before creating them
    import luct.models  # noqa: F401

    SQLModel.metadata.create_all(bind or engine)

def get_db():
    with Session(engine) as session:
        yield session
