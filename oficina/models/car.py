from typing import Optional

from pydantic import Field, field_validator

from oficina.models.base import OficinaModel, Record


def normalize_plate(plate):
    if plate is None:
        return plate
    return plate.upper().strip()


class CarCreate(OficinaModel):
    client_id: str = Field(..., description="ID do cliente dono do veículo.")
    plate: str = Field(..., min_length=1)
    model: str = Field(..., min_length=1)
    brand: str = Field(..., min_length=1)
    year: int
    color: Optional[str] = None
    observations: Optional[str] = None

    # A placa é sempre gravada em caixa alta
    @field_validator("plate")
    @classmethod
    def plate_upper(cls, value):
        return normalize_plate(value)


class CarUpdate(OficinaModel):
    client_id: Optional[str] = None
    plate: Optional[str] = Field(None, min_length=1)
    model: Optional[str] = Field(None, min_length=1)
    brand: Optional[str] = Field(None, min_length=1)
    year: Optional[int] = None
    color: Optional[str] = None
    observations: Optional[str] = None

    @field_validator("plate")
    @classmethod
    def plate_upper(cls, value):
        return normalize_plate(value)


class Car(CarCreate, Record):
    pass


class CarView(Car):
    """Veículo com o nome do dono resolvido para exibição."""
    client_name: str
