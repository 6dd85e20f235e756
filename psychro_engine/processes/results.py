"""
Result records of the air-handling processes.

The `...Output` records carry the plain numbers computed by the numeric core
(P in Pa, temperatures in degC, W in kg/kg, mass flows in kg/s, Q in W). The
`...Result` records wrap them into flows and quantities. Both are frozen.
"""
from dataclasses import dataclass
from .. import Quantity
from ..fluids import HumidAir, AirState, FlowOfHumidAir, FlowOfLiquidWater


@dataclass(frozen=True)
class ProcessOutput:
    P: float
    T_out: float
    W_out: float
    m_da: float
    Q: float

    def air_out(self) -> FlowOfHumidAir:
        air = HumidAir.from_state(AirState(self.P, self.T_out, self.W_out))
        return FlowOfHumidAir.from_dry_air_flow(air, self.m_da)


@dataclass(frozen=True)
class CoolingOutput(ProcessOutput):
    T_cond: float
    m_cond: float
    BF: float | None


@dataclass(frozen=True)
class MixingOutput:
    P: float
    T_out: float
    W_out: float
    m_da_out: float
    m_da_in1: float
    m_da_in2: float

    def air_out(self) -> FlowOfHumidAir:
        air = HumidAir.from_state(AirState(self.P, self.T_out, self.W_out))
        return FlowOfHumidAir.from_dry_air_flow(air, self.m_da_out)


@dataclass(frozen=True)
class HeatingResult:
    """
    Attributes
    ----------
    air_out:
        Air flow leaving the heater.
    Q:
        Heat of process, positive when heat is added to the air.
    """
    air_out: FlowOfHumidAir
    Q: Quantity


@dataclass(frozen=True)
class CoolingResult:
    """
    Attributes
    ----------
    air_out:
        Air flow leaving the cooling coil.
    Q:
        Heat of process, negative when heat is removed from the air.
    condensate:
        Flow of water condensed on the coil surface.
    BF:
        Bypass factor of the coil; None for the dry cooling model.
    """
    air_out: FlowOfHumidAir
    Q: Quantity
    condensate: FlowOfLiquidWater
    BF: Quantity | None = None


@dataclass(frozen=True)
class MixingResult:
    stream_in1: FlowOfHumidAir
    stream_in2: FlowOfHumidAir
    air_out: FlowOfHumidAir


@dataclass(frozen=True)
class MultiStreamMixingResult:
    streams_in: tuple[FlowOfHumidAir, ...]
    air_out: FlowOfHumidAir
