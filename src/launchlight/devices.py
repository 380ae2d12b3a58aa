"""Catalog of the virtual devices a light show can target.

Each device names the firmware palette its velocity colors come from, so a
palette color recorded on one device renders the same in the editor.
"""

from pydantic import BaseModel, ConfigDict, Field

from launchlight.exceptions import DeviceNotFoundError
from launchlight.models import Color, PaletteColor


class VirtualDevice(BaseModel):
    """A supported grid controller."""

    model_config = ConfigDict(frozen=True)

    model: str = Field(min_length=1, description="Device model name (e.g., 'Launchpad X')")
    palette: str = Field(min_length=1, description="Name of the device's firmware palette")
    grid_size: int = Field(ge=1, description="Buttons per side including the edge row/column")
    supports_rgb: bool = Field(default=True, description="Whether device accepts RGB SysEx colors")

    def color(self, index: int) -> PaletteColor:
        """Palette color for velocity ``index`` on this device."""
        return Color.from_palette(self.palette, index)


DEVICES: tuple[VirtualDevice, ...] = (
    VirtualDevice(model="Launchpad Pro MK2", palette="launchpad", grid_size=10),
    VirtualDevice(model="Launchpad MK2", palette="launchpad", grid_size=9),
    VirtualDevice(model="Launchpad X", palette="launchpad", grid_size=9),
    VirtualDevice(model="Launchpad Pro MK3", palette="launchpad", grid_size=10),
    VirtualDevice(model="Mystrix", palette="launchpad", grid_size=8),
)


def get_device(name: str) -> VirtualDevice:
    """
    Look up a device by model name (case-insensitive).

    Raises:
        DeviceNotFoundError: If no device has that name
    """
    wanted = name.strip().lower()
    for device in DEVICES:
        if device.model.lower() == wanted:
            return device
    raise DeviceNotFoundError(name, [device.model for device in DEVICES])
