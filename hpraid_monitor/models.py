"""Data models for HP Smart Array controller reports"""

from dataclasses import dataclass, field
from typing import List, Optional

from .sizes import format_size

UNASSIGNED_ARRAY_ID = "U"
UNASSIGNED_ARRAY_TYPE = "unassigned"
UNAVAILABLE_LABEL = "NULL"


@dataclass
class Drive:
    """Represents a logical or physical drive listed under an array"""

    id: str                          # Logical drive number or port:box:bay id
    status: str                      # Raw status text (e.g. "OK, spun down")
    size: int                        # Size in bytes
    physical: bool = False           # Physical disk or logical volume

    raid_mode: str = ""              # Logical drives only (e.g. "RAID 1")

    # Physical drives only
    type: str = ""                   # Interface type (e.g. "SAS")
    port: str = ""                   # Controller port (e.g. "1I")
    box: int = 0                     # Box number on the port
    bay: int = 0                     # Bay number within the box

    @property
    def kind(self) -> str:
        return "physical" if self.physical else "logical"

    @property
    def mode(self) -> str:
        """Interface type for physical drives, RAID mode for logical drives"""
        return self.type if self.physical else self.raid_mode

    def describe(self) -> str:
        return f"{self.kind} {self.id} ({self.mode}, {format_size(self.size)})"

    def to_dict(self) -> dict:
        """Convert drive to dictionary representation"""
        data = {
            "id": self.id,
            "kind": self.kind,
            "status": self.status,
            "size": self.size,
        }
        if self.physical:
            data.update({
                "type": self.type,
                "port": self.port,
                "box": self.box,
                "bay": self.bay,
            })
        else:
            data["raid_mode"] = self.raid_mode
        return data


@dataclass
class Array:
    """Represents an array of drives on a controller"""

    id: str                          # Single letter label, "U" for unassigned
    type: str                        # Drive interface type or "unassigned"
    unused_space: int = 0            # Unused space in bytes
    drives: List[Drive] = field(default_factory=list)

    @property
    def is_unassigned(self) -> bool:
        return self.id == UNASSIGNED_ARRAY_ID and self.type == UNASSIGNED_ARRAY_TYPE

    def add(self, drive: Drive) -> None:
        self.drives.append(drive)

    def describe(self) -> str:
        return f"{self.id} ({self.type})"

    def to_dict(self) -> dict:
        """Convert array to dictionary representation"""
        return {
            "id": self.id,
            "type": self.type,
            "unused_space": self.unused_space,
            "drives": [drive.to_dict() for drive in self.drives]
        }


def unassigned_array() -> Array:
    """Create the placeholder array holding drives not part of any array"""
    return Array(id=UNASSIGNED_ARRAY_ID, type=UNASSIGNED_ARRAY_TYPE)


@dataclass
class Controller:
    """Represents a Smart Array controller and the arrays it manages

    A controller always starts with the unassigned array, which holds the
    drives listed under the report's 'unassigned' header.
    """

    name: str                        # Model name (e.g. "Smart Array P420i")
    slot: int                        # Slot number used to address the controller
    serial: str                      # Serial number
    type: str = ""                   # Text between slot and serial (e.g. "(Embedded)")
    arrays: List[Array] = field(default_factory=list)

    def __post_init__(self):
        if not self.arrays:
            self.arrays.append(unassigned_array())

    def add(self, array: Array) -> None:
        """Append an array, keeping array ids unique within the controller"""
        if self.get_array(array.id) is not None:
            raise ValueError(f"array {array.id} already defined on {self.describe()}")
        self.arrays.append(array)

    def get_array(self, array_id: str) -> Optional[Array]:
        for array in self.arrays:
            if array.id == array_id:
                return array
        return None

    def describe(self) -> str:
        return f"{self.name} in slot {self.slot}"

    def to_dict(self) -> dict:
        """Convert controller to dictionary representation"""
        return {
            "name": self.name,
            "type": self.type,
            "slot": self.slot,
            "serial": self.serial,
            "arrays": [array.to_dict() for array in self.arrays]
        }


@dataclass
class DriveRow:
    """Flattened controller/array/drive descriptions for one drive"""

    controller: str
    array: str
    drive: str
    status: str

    def to_dict(self) -> dict:
        return {
            "controller": self.controller,
            "array": self.array,
            "drive": self.drive,
            "status": self.status
        }


@dataclass
class StatusObservation:
    """A single labelled value found in a controller status report"""

    category: str                    # One of the status_codes categories
    value: str                       # Raw text captured from the report
    battery_count: Optional[str] = None  # Set on battery-status observations


@dataclass
class DriveStatus:
    """Drive status with its normalized code"""

    controller: str
    array: str
    drive: str
    status: str
    code: float

    @classmethod
    def unavailable(cls) -> "DriveStatus":
        """Placeholder row used when the configuration report is missing"""
        return cls(
            controller=UNAVAILABLE_LABEL,
            array=UNAVAILABLE_LABEL,
            drive=UNAVAILABLE_LABEL,
            status=UNAVAILABLE_LABEL,
            code=0
        )

    def to_dict(self) -> dict:
        return {
            "controller": self.controller,
            "array": self.array,
            "drive": self.drive,
            "status": self.status,
            "code": self.code
        }


@dataclass
class ControllerStatus:
    """Controller level health value with its normalized code"""

    controller: str
    category: str
    value: str
    code: float

    def to_dict(self) -> dict:
        return {
            "controller": self.controller,
            "category": self.category,
            "value": self.value,
            "code": self.code
        }


@dataclass
class BatteryStatus:
    """Battery/capacitor status with its normalized code"""

    controller: str
    battery_count: str
    status: str
    code: float

    def to_dict(self) -> dict:
        return {
            "controller": self.controller,
            "battery_count": self.battery_count,
            "status": self.status,
            "code": self.code
        }
