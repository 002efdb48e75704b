"""Register access to an LSM6DS inertial sensor over 16-bit SPI words."""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum

# Standard configuration values.
CTRL1_XL_HIGH_PERFORMANCE = 0xA0
CTRL2_G_HIGH_PERFORMANCE = 0xA0
CTRL10_C_ENABLE_PEDO = 0x14

READ_BIT = 0x80


class Register(IntEnum):
    """Register addresses of the sensor."""

    FUNC_CFG_ACCESS = 0x01
    SENSOR_SYNC_TIME_FRAME = 0x04
    SENSOR_SYNC_RES_RATIO = 0x05
    FIFO_CTRL1 = 0x06
    FIFO_CTRL2 = 0x07
    FIFO_CTRL3 = 0x08
    FIFO_CTRL4 = 0x09
    FIFO_CTRL5 = 0x0A
    DRDY_PULSE_CFG_G = 0x0B
    INT1_CTRL = 0x0D
    INT2_CTRL = 0x0E
    WHO_AM_I = 0x0F
    CTRL1_XL = 0x10
    CTRL2_G = 0x11
    CTRL3_C = 0x12
    CTRL4_C = 0x13
    CTRL5_C = 0x14
    CTRL6_C = 0x15
    CTRL7_G = 0x16
    CTRL8_XL = 0x17
    CTRL9_XL = 0x18
    CTRL10_C = 0x19
    MASTER_CONFIG = 0x1A
    WAKE_UP_SRC = 0x1B
    TAP_SRC = 0x1C
    D6D_SRC = 0x1D
    STATUS_REG = 0x1E
    OUT_TEMP_L = 0x20
    OUT_TEMP_H = 0x21
    OUTX_L_G = 0x22
    OUTX_H_G = 0x23
    OUTY_L_G = 0x24
    OUTY_H_G = 0x25
    OUTZ_L_G = 0x26
    OUTZ_H_G = 0x27
    OUTX_L_XL = 0x28
    OUTX_H_XL = 0x29
    OUTY_L_XL = 0x2A
    OUTY_H_XL = 0x2B
    OUTZ_L_XL = 0x2C
    OUTZ_H_XL = 0x2D
    SENSORHUB1_REG = 0x2E
    SENSORHUB2_REG = 0x2F
    SENSORHUB3_REG = 0x30
    SENSORHUB4_REG = 0x31
    SENSORHUB5_REG = 0x32
    SENSORHUB6_REG = 0x33
    SENSORHUB7_REG = 0x34
    SENSORHUB8_REG = 0x35
    SENSORHUB9_REG = 0x36
    SENSORHUB10_REG = 0x37
    SENSORHUB11_REG = 0x38
    SENSORHUB12_REG = 0x39
    FIFO_STATUS1 = 0x3A
    FIFO_STATUS2 = 0x3B
    FIFO_STATUS3 = 0x3C
    FIFO_STATUS4 = 0x3D
    FIFO_DATA_OUT_L = 0x3E
    FIFO_DATA_OUT_H = 0x3F
    TIMESTAMP0_REG = 0x40
    TIMESTAMP1_REG = 0x41
    TIMESTAMP2_REG = 0x42
    STEP_TIMESTAMP_L = 0x49
    STEP_TIMESTAMP_H = 0x4A
    STEP_COUNTER_L = 0x4B
    STEP_COUNTER_H = 0x4C
    SENSORHUB13_REG = 0x4D
    SENSORHUB14_REG = 0x4E
    SENSORHUB15_REG = 0x4F
    SENSORHUB16_REG = 0x50
    SENSORHUB17_REG = 0x51
    SENSORHUB18_REG = 0x52
    FUNC_SRC1 = 0x53
    FUNC_SRC2 = 0x54
    WRIST_TILT_IA = 0x55
    TAP_CFG = 0x58
    TAP_THS_6D = 0x59
    INT_DUR2 = 0x5A
    WAKE_UP_THS = 0x5B
    WAKE_UP_DUR = 0x5C
    FREE_FALL = 0x5D
    MD1_CFG = 0x5E
    MD2_CFG = 0x5F
    MASTER_CMD_CODE = 0x60
    SENS_SYNC_SPI_ERROR_CODE = 0x61
    OUT_MAG_RAW_X_L = 0x66
    OUT_MAG_RAW_X_H = 0x67
    OUT_MAG_RAW_Y_L = 0x68
    OUT_MAG_RAW_Y_H = 0x69
    OUT_MAG_RAW_Z_L = 0x6A
    OUT_MAG_RAW_Z_H = 0x6B
    X_OFS_USR = 0x73
    Y_OFS_USR = 0x74
    Z_OFS_USR = 0x75


class Lsm6ds:
    """Reads and writes sensor registers through a full-duplex word transfer.

    ``transfer`` sends one 16-bit word, most significant bit first, and
    returns the 16-bit word clocked in at the same time.
    """

    def __init__(self, transfer: Callable[[int], int]) -> None:
        self.transfer = transfer

    def write_byte(self, register: Register | int, value: int) -> None:
        """Write one byte: the address goes out first, then the value."""
        register = Register(register)
        if not isinstance(value, int) or not 0 <= value <= 0xFF:
            raise ValueError(f"value must be a byte: {value!r}")
        self.transfer((register << 8) | value)

    def read_byte(self, register: Register | int) -> int:
        """Read one byte: the address with the read bit set, then the data back."""
        register = Register(register)
        received = self.transfer((register | READ_BIT) << 8)
        return received & 0xFF