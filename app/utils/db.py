# app/utils/db.py
import sqlite3

from sqlalchemy import create_engine, event, MetaData
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from app.core.config import settings


def make_engine(url: str, **kwargs) -> Engine:
    """pre-ping 엔진 생성. SQLite는 외래키 제약을 켭니다."""
    kwargs.setdefault("pool_pre_ping", True)
    kwargs.setdefault("echo", settings.DB_ECHO)
    new_engine = create_engine(url, **kwargs)

    @event.listens_for(new_engine, "connect")
    def _enable_sqlite_fk(dbapi_connection, connection_record):
        if isinstance(dbapi_connection, sqlite3.Connection):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return new_engine


# SQLAlchemy 엔진 (pre-ping으로 끊어진 연결 자동 감지)
engine = make_engine(settings.DB_URL)

# 세션 팩토리: 커밋 후에도 반환한 객체를 그대로 사용
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


# Base 클래스 (모든 모델이 상속)
class Base(DeclarativeBase):
    metadata = MetaData(schema=settings.DB_SCHEMA)


# 호출(요청)당 세션 제공
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine | None = None) -> None:
    """모델을 모두 등록한 뒤 테이블을 생성합니다."""
    from app.features.empresa import models as _empresa_models  # noqa: F401
    from app.features.user import models as _user_models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
