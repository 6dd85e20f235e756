from .constants import (
    STANDARD_PRESSURE,
    CHILLED_WATER_SUPPLY,
    CHILLED_WATER_RETURN
)

from .humid_air import HumidAir, AirState

from .liquid_water import LiquidWater

from .water_vapour import WaterVapour

from .ice import Ice

from .flow import FlowOfHumidAir, FlowOfLiquidWater, FlowOfWaterVapour
