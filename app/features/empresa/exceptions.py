# app/features/empresa/exceptions.py
# 회사 도메인 오류. InvalidArgument/NotFound 는 ValueError/LookupError 로도 잡힙니다.


class EmpresaError(Exception):
    code = "EMPRESA_ERROR"

    def __init__(self, message: str, **context):
        self.message = message
        self.context = {k: v for k, v in context.items() if v is not None}
        super().__init__(message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        """API 응답용 직렬화"""
        return {"error": self.code, "message": self.message, **self.context}


class DuplicateEntity(EmpresaError):
    code = "DUPLICATE_ENTITY"

    def __init__(self, message: str, email: str = None):
        self.email = email
        super().__init__(message, email=email)


class NotFound(EmpresaError, LookupError):
    code = "NOT_FOUND"

    def __init__(self, message: str, entity_type: str = None, entity_id=None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, entity_type=entity_type, entity_id=entity_id)


class InvalidArgument(EmpresaError, ValueError):
    code = "INVALID_ARGUMENT"

    def __init__(self, message: str, field: str = None):
        self.field = field
        super().__init__(message, field=field)


class StorageFailure(EmpresaError):
    # 원인 DB 예외는 __cause__ 로 전달됩니다. 재시도하지 않습니다.
    code = "STORAGE_FAILURE"
