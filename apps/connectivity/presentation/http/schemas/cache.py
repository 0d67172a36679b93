"""Cache HTTP Schemas."""

from pydantic import BaseModel, ConfigDict, Field


class WriteKeyRequest(BaseModel):
    """키 저장 요청.

    누락 여부는 Command에서 검사하므로 두 필드 모두 선택 값입니다.
    숫자 값은 문자열로 변환해서 저장합니다 ({"valor": 1} → "1").
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    chave: str | None = Field(None, description="키", examples=["usuario:1:nome"])
    valor: str | None = Field(None, description="값", examples=["Ana"])
