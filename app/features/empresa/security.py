# app/features/empresa/security.py

from passlib.context import CryptContext

from app.core.config import settings

# 비밀번호 해싱을 위한 설정 (bcrypt, 작업 계수는 설정값)
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def get_password_hash(password: str) -> str:
    """비밀번호를 솔트 포함 해시로 변환합니다. 평문은 저장하지 않습니다."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """일반 비밀번호와 해시된 비밀번호를 비교합니다."""
    return pwd_context.verify(plain_password, hashed_password)
