"""
Device Registry Configuration
"""

from pathlib import Path

from pydantic import BaseModel, Field

# ============================================================================
# Registry Limits
# ============================================================================

MAX_DEVICES = 15

DEFAULT_DEVICE_FILE = Path("data") / "input.txt"

CAPACITY_MESSAGE = "Storage capacity reached."

# ============================================================================
# Device Rules
# ============================================================================

# Smartwatch battery (percent)
BATTERY = {
    "min": 0,
    "max": 100,
    "low_threshold": 20,     # anything below this warns
    "min_turn_on": 11,       # turn_on refuses below this
    "turn_on_cost": 10,      # drained on every turn_on
}

LOW_BATTERY_MESSAGE = "Warning: Low battery!"

# Embedded devices only connect to the corporate network
CORPORATE_NETWORK_MARKER = "MD Ltd."

# Dotted quad, syntax only (999.999.999.999 passes)
IP_ADDRESS_PATTERN = r"^\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}$"

NO_OS_LABEL = "Not Installed"

# ============================================================================
# Input File Format
# ============================================================================

FIELD_SEPARATOR = ","

# Checked in this order, first match wins
DEVICE_PREFIXES = ("SW", "P", "ED")

# ============================================================================
# Runtime Settings
# ============================================================================

class RegistrySettings(BaseModel):
    device_file: Path = DEFAULT_DEVICE_FILE
    capacity: int = Field(default=MAX_DEVICES, gt=0)


# ============================================================================
# Helper Functions
# ============================================================================

def format_battery(level: int) -> str:
    """Format battery level as a percentage"""
    return f"{level}%"

def format_os(operating_system) -> str:
    """Operating system name, or the placeholder when there is none"""
    return NO_OS_LABEL if operating_system is None else operating_system
