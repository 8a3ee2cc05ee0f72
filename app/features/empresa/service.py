# app/features/empresa/service.py
# 회사(empresa) 등록/조회/접근성 수정 로직.
# 세션은 호출자가 get_db()로 열고 닫습니다.
import logging
from typing import Any, List, Mapping, Optional, Tuple

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from .exceptions import DuplicateEntity, InvalidArgument, NotFound, StorageFailure
from .models import Accessibility, Company
from .schemas import DetallesAccesibilidad, ServiciosAccesibilidad
from .security import get_password_hash

logger = logging.getLogger(__name__)

# companies.id 는 32비트 Integer
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def _require_text(value: Any, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgument(f"{field}는 필수입니다.", field=field)
    return value


def _coerce_id(empresa_id: Any) -> int:
    """정수 또는 정수 문자열만 허용합니다 (Integer 컬럼 범위 내)."""
    value = None
    if isinstance(empresa_id, int) and not isinstance(empresa_id, bool):
        value = empresa_id
    elif isinstance(empresa_id, str):
        text = empresa_id.strip()
        digits = text[1:] if text[:1] in ("+", "-") else text
        if digits.isascii() and digits.isdigit():
            value = int(text)

    if value is None or not INT32_MIN <= value <= INT32_MAX:
        raise InvalidArgument(f"잘못된 회사 ID: {empresa_id!r}", field="id")
    return value


def _accessibility_columns(
    servicios_accesibilidad: Optional[Mapping[str, Any]],
    detalles_accesibilidad: Optional[Mapping[str, Any]],
) -> dict:
    """입력 매핑을 컬럼 딕셔너리로 변환합니다 (누락 플래그 False, 누락 정보 None)."""
    try:
        servicios = ServiciosAccesibilidad.from_input(servicios_accesibilidad)
        detalles = DetallesAccesibilidad.from_input(detalles_accesibilidad)
    except ValidationError as e:
        raise InvalidArgument(f"접근성 정보가 올바르지 않습니다: {e.error_count()}개 오류") from e
    return {**servicios.to_columns(), **detalles.to_columns()}


def _email_exists(db: Session, email: str) -> bool:
    stmt = select(Company.id).where(Company.email == email).limit(1)
    return db.execute(stmt).first() is not None


def register_empresa(
    db: Session,
    *,
    nombre: str,
    email: str,
    password: str,
    servicios_accesibilidad: Optional[Mapping[str, Any]] = None,
    detalles_accesibilidad: Optional[Mapping[str, Any]] = None,
) -> Tuple[Company, Accessibility]:
    """
    새 회사를 접근성 정보와 함께 등록합니다.
    회사와 접근성 행은 하나의 트랜잭션에서 함께 생성되거나 둘 다 생성되지 않습니다.

    :return: (Company, Accessibility)
    :raises DuplicateEntity: 이미 등록된 이메일 (사전 확인 또는 UNIQUE 제약 위반)
    :raises InvalidArgument: 필수 문자열 누락 또는 접근성 값 변환 실패
    :raises StorageFailure: 그 밖의 DB 오류
    """
    _require_text(nombre, "nombre")
    _require_text(email, "email")
    _require_text(password, "password")
    columns = _accessibility_columns(servicios_accesibilidad, detalles_accesibilidad)

    # 빠른 중복 확인 (최종 보장은 UNIQUE 제약)
    if find_by_email(db, email):
        raise DuplicateEntity("이미 등록된 회사입니다.", email=email)

    hashed_password = get_password_hash(password)

    try:
        empresa = Company(
            name=nombre,
            email=email,
            password_hash=hashed_password,
            published=False,
        )
        db.add(empresa)
        db.flush()  # empresa.id 확보

        accesibilidad = Accessibility(company_id=empresa.id, **columns)
        db.add(accesibilidad)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        # 동시 등록 경쟁에서 진 경우
        if _email_exists(db, email):
            logger.warning("duplicate email on insert", extra={"operation": "register"})
            raise DuplicateEntity("이미 등록된 회사입니다.", email=email) from e
        raise StorageFailure(f"회사 등록 실패: {e.orig}") from e
    except SQLAlchemyError as e:
        db.rollback()
        raise StorageFailure(f"회사 등록 실패: {e}") from e
    except Exception:
        db.rollback()
        raise

    logger.info(
        "empresa registered",
        extra={"company_id": empresa.id, "operation": "register"},
    )
    return empresa, accesibilidad


def find_by_email(db: Session, email: str) -> Optional[Company]:
    """이메일로 회사를 조회합니다 (접근성 정보 포함). 없으면 None."""
    stmt = (
        select(Company)
        .options(selectinload(Company.accessibility_details))
        .where(Company.email == email)
        .limit(1)
    )
    return db.execute(stmt).scalars().first()


def get_all_empresas(db: Session) -> List[Company]:
    """모든 회사를 최신 등록 순(id 내림차순)으로 반환합니다."""
    stmt = (
        select(Company)
        .options(selectinload(Company.accessibility_details))
        .order_by(Company.id.desc())
    )
    return list(db.execute(stmt).scalars().all())


def get_empresa_by_id(db: Session, empresa_id: Any) -> Optional[Company]:
    """ID로 회사를 조회합니다. ID가 정수로 변환되지 않으면 InvalidArgument."""
    stmt = (
        select(Company)
        .options(selectinload(Company.accessibility_details))
        .where(Company.id == _coerce_id(empresa_id))
    )
    return db.execute(stmt).scalars().first()


def update_empresa_accesibilidad(
    db: Session,
    empresa_id: Any,
    servicios_accesibilidad: Optional[Mapping[str, Any]] = None,
    detalles_accesibilidad: Optional[Mapping[str, Any]] = None,
) -> Accessibility:
    """
    회사의 접근성 정보를 덮어씁니다.
    부분 수정이 아닙니다: 전달하지 않은 플래그는 False, 추가 정보는 None 으로 돌아갑니다.
    """
    company_id = _coerce_id(empresa_id)
    columns = _accessibility_columns(servicios_accesibilidad, detalles_accesibilidad)

    accesibilidad = db.get(Accessibility, company_id)
    if accesibilidad is None:
        raise NotFound(
            f"회사 {company_id}의 접근성 정보를 찾을 수 없습니다.",
            entity_type="Accessibility",
            entity_id=company_id,
        )

    try:
        for key, value in columns.items():
            setattr(accesibilidad, key, value)
        db.commit()
        db.refresh(accesibilidad)
    except SQLAlchemyError as e:
        db.rollback()
        raise StorageFailure(f"접근성 정보 수정 실패: {e}") from e

    logger.info(
        "accessibility updated",
        extra={"company_id": company_id, "operation": "update_accessibility"},
    )
    return accesibilidad
