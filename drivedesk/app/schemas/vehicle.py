"""Fleet schemas: vehicles, maintenance records and inspections."""

from datetime import date
from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

VehicleType = Literal["car", "truck", "bus", "motorcycle"]
VehicleStatus = Literal["available", "in_use", "maintenance"]
TruckKind = Literal["normal", "long_haul"]
MaintenanceStatus = Literal["scheduled", "completed"]
InspectionResult = Literal["passed", "failed", "pending"]


class VehicleBase(BaseModel):
    vehicle_type: VehicleType
    make: str = Field(min_length=1)
    model: str = Field(min_length=1)
    year: int = Field(ge=1950, le=2100)
    license_plate: str = Field(min_length=1, max_length=20)
    status: VehicleStatus = "available"
    truck_kind: Optional[TruckKind] = None
    capacity: Optional[int] = Field(default=None, gt=0)
    engine_displacement: Optional[int] = Field(default=None, gt=0)

    @model_validator(mode="after")
    def check_type_fields(self):
        if self.vehicle_type == "truck" and self.truck_kind is None:
            self.truck_kind = "normal"
        if self.vehicle_type == "bus" and self.capacity is None:
            raise ValueError("capacity is required for buses")
        if self.vehicle_type == "motorcycle" and self.engine_displacement is None:
            raise ValueError("engine_displacement is required for motorcycles")
        if self.vehicle_type != "truck":
            self.truck_kind = None
        if self.vehicle_type != "bus":
            self.capacity = None
        if self.vehicle_type != "motorcycle":
            self.engine_displacement = None
        return self


class VehicleCreate(VehicleBase):
    office_id: Optional[int] = None


class VehicleUpdate(BaseModel):
    make: Optional[str] = None
    model: Optional[str] = None
    year: Optional[int] = Field(default=None, ge=1950, le=2100)
    license_plate: Optional[str] = Field(default=None, min_length=1, max_length=20)
    status: Optional[VehicleStatus] = None


class VehicleRead(VehicleBase):
    id: int
    office_id: int
    display_name: str

    model_config = ConfigDict(from_attributes=True)


class MaintenanceCreate(BaseModel):
    maintenance_date: date
    description: str = Field(min_length=1)
    cost: Decimal = Field(default=Decimal("0.00"), ge=0, decimal_places=2)
    status: MaintenanceStatus = "scheduled"


class MaintenanceUpdate(BaseModel):
    status: MaintenanceStatus


class MaintenanceRead(MaintenanceCreate):
    id: int
    vehicle_id: int

    model_config = ConfigDict(from_attributes=True)


class InspectionCreate(BaseModel):
    inspection_date: date
    inspector_name: str = Field(min_length=1)
    result: InspectionResult = "pending"
    notes: Optional[str] = None


class InspectionRead(InspectionCreate):
    id: int
    vehicle_id: int

    model_config = ConfigDict(from_attributes=True)
