# app/features/empresa/schemas.py
# 외부 앱은 스페인어 camelCase 키(rampa, ascensor ...)로 값을 보내고,
# 코드/DB에서는 영문 컬럼명으로 접근합니다.
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ServiciosAccesibilidad(BaseModel):
    """접근성 플래그. 누락/None/빈 값은 False."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # 물리적 접근성
    hallways_min_90cm: bool = Field(default=False, alias="pasillosMin90cm")
    ramp: bool = Field(default=False, alias="rampa")
    door_80cm: bool = Field(default=False, alias="puerta80cm")
    non_slip_floors: bool = Field(default=False, alias="pisosAntideslizantes")
    accessible_bathroom: bool = Field(default=False, alias="banoAccesible")
    adapted_tables_chairs: bool = Field(default=False, alias="mesasSillasAdaptadas")
    elevator: bool = Field(default=False, alias="ascensor")
    # 적응형 접근성
    braille_signage: bool = Field(default=False, alias="senalizacionBraille")
    color_contrast: bool = Field(default=False, alias="contrasteColores")
    podotactile_guides: bool = Field(default=False, alias="guiasPodotactiles")
    emergency_alarms: bool = Field(default=False, alias="alarmasEmergencia")
    hearing_aid_system: bool = Field(default=False, alias="sistemaAudifonos")

    @field_validator("*", mode="before")
    @classmethod
    def _missing_to_false(cls, value: Any) -> Any:
        if value is None or value == "":
            return False
        return value

    @classmethod
    def from_input(
        cls, data: Union["ServiciosAccesibilidad", Mapping[str, Any], None]
    ) -> "ServiciosAccesibilidad":
        if isinstance(data, cls):
            return data
        return cls.model_validate(data or {})

    def to_columns(self) -> dict:
        return self.model_dump()


class DetallesAccesibilidad(BaseModel):
    """추가 접근성 정보. 누락되거나 falsy("", 0)인 값은 None."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    adapted_bathroom_quantity: Optional[int] = Field(default=None, alias="banoAdaptadoCantidad")
    adapted_bathroom_details: Optional[str] = Field(default=None, alias="banoAdaptadoDetalles")
    priority_attention_type: Optional[str] = Field(default=None, alias="atencionPrioritariaTipo")
    priority_attention_schedule: Optional[str] = Field(default=None, alias="atencionPrioritariaHorario")
    other_services: Optional[str] = Field(default=None, alias="otrosServicios")

    @field_validator("*", mode="before")
    @classmethod
    def _falsy_to_none(cls, value: Any) -> Any:
        return value if value else None

    @classmethod
    def from_input(
        cls, data: Union["DetallesAccesibilidad", Mapping[str, Any], None]
    ) -> "DetallesAccesibilidad":
        if isinstance(data, cls):
            return data
        return cls.model_validate(data or {})

    def to_columns(self) -> dict:
        return self.model_dump()
