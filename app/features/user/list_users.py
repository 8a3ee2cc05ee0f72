# list_users.py
# DB에 저장된 사용자 목록을 출력하는 진단용 스크립트입니다.
# 실행: python -m app.features.user.list_users  (또는 list-users)

import logging

from sqlalchemy import select

from app.core.logging import configure_logging
from app.utils.db import SessionLocal, engine
from app.features.user.models import User

logger = logging.getLogger(__name__)


def list_users(session_factory=SessionLocal) -> int:
    """
    모든 사용자를 출력합니다.
    오류는 기록만 하고 삼키며, 세션은 어떤 경우에도 닫습니다.
    :return: 출력한 사용자 수 (실패 시 0)
    """
    db = session_factory()
    try:
        users = db.execute(select(User)).scalars().all()
        print("\n=== USUARIOS EN LA BASE DE DATOS ===")
        print(f"Total de usuarios: {len(users)}\n")

        for index, user in enumerate(users, start=1):
            print(f"{index}. ID: {user.id}")
            print(f"   Nombre: {user.name}")
            print(f"   Email: {user.email}")
            print(f"   Publicado: {user.published}")
            print(f"   Fecha: {user.created_at or 'No disponible'}")
            print("")
        return len(users)

    except Exception:
        logger.exception("사용자 목록 조회 실패")
        return 0
    finally:
        db.close()


def main() -> None:
    configure_logging()
    try:
        list_users()
    finally:
        engine.dispose()


if __name__ == "__main__":
    main()
