"""
HEATING OF MOIST AIR

Sensible heating: the humidity ratio of the air does not change, only its
enthalpy and temperature. Three cases are distinguished, depending on what is
known besides the entering air flow:

1. the heat input,
2. the temperature of the leaving air,
3. the relative humidity of the leaving air.

The module level functions do the numeric work on plain floats. Class
`Heating` wraps them for flows and quantities.
"""
from .. import Quantity
from ..exceptions import InvalidArgumentError, PhysicallyImpossibleError
from ..fluids import AirState, FlowOfHumidAir
from ..fluids.equations import humid_air as ha
from ..logging import ModuleLogger
from .results import ProcessOutput, HeatingResult

Q_ = Quantity

logger = ModuleLogger.get_logger(__name__)
logger.setLevel(ModuleLogger.ERROR)


def sensible_heat_from_input(state: AirState, m_da: float, Q: float) -> ProcessOutput:
    """Outlet state after adding heat `Q` (W, negative for cooling) to the
    air at constant humidity ratio: `m_da * h_out = m_da * h_in + Q`.
    """
    P, T_in, W_in = state
    if Q == 0.0:
        return ProcessOutput(P, T_in, W_in, m_da, 0.0)
    if m_da == 0.0:
        raise PhysicallyImpossibleError(
            f"Heat of {Q} W cannot be transferred to an air flow of 0 kg/s."
        )
    h_in = ha.specific_enthalpy(T_in, W_in, P)
    h_out = (m_da * h_in + Q / 1.0e3) / m_da
    T_out = ha.dry_bulb_temperature_ix(h_out, W_in, P)
    return ProcessOutput(P, T_out, W_in, m_da, Q)


def sensible_heat_to_temperature(state: AirState, m_da: float, T_out: float) -> ProcessOutput:
    """Heat of process (W) to bring the air to temperature `T_out` at
    constant humidity ratio.
    """
    P, T_in, W_in = state
    if T_out == T_in:
        return ProcessOutput(P, T_in, W_in, m_da, 0.0)
    h_in = ha.specific_enthalpy(T_in, W_in, P)
    h_out = ha.specific_enthalpy(T_out, W_in, P)
    Q = m_da * (h_out - h_in) * 1.0e3
    return ProcessOutput(P, T_out, W_in, m_da, Q)


def heating_from_input_heat(state: AirState, m_da: float, Q: float) -> ProcessOutput:
    if Q < 0.0:
        raise InvalidArgumentError(
            f"Heat input must not be negative, got {Q} W."
        )
    return sensible_heat_from_input(state, m_da, Q)


def heating_to_temperature(state: AirState, m_da: float, T_out: float) -> ProcessOutput:
    if T_out < state.Tdb:
        raise InvalidArgumentError(
            f"Outlet temperature {T_out} degC is lower than the inlet "
            f"temperature {state.Tdb} degC: heating cannot cool the air."
        )
    return sensible_heat_to_temperature(state, m_da, T_out)


def heating_to_humidity(state: AirState, m_da: float, RH_out: float) -> ProcessOutput:
    """Heats the air until its relative humidity has dropped to `RH_out`
    (%).
    """
    P, T_in, W_in = state
    if not 0.0 < RH_out <= 100.0:
        raise InvalidArgumentError(
            f"Outlet relative humidity {RH_out} % is outside the range "
            f"0 % (excl.) .. 100 %."
        )
    RH_in = ha.relative_humidity(T_in, W_in, P)
    if RH_out == RH_in:
        return ProcessOutput(P, T_in, W_in, m_da, 0.0)
    if RH_out > RH_in:
        raise InvalidArgumentError(
            f"Outlet relative humidity {RH_out} % is higher than the inlet "
            f"relative humidity {RH_in} %: heating cannot raise it."
        )
    T_out = ha.dry_bulb_temperature_x_rh(W_in, RH_out, P)
    return sensible_heat_to_temperature(state, m_da, T_out)


class Heating:
    """
    Heating of an air flow.

    Exactly one of the following must be given:

    Parameters
    ----------
    Q:
        Heat added to the air flow.
    T_ao:
        Temperature of the air leaving the heater.
    RH_ao:
        Relative humidity of the air leaving the heater.

    Attributes
    ----------
    air_in:
        Air flow entering the heater.
    result:
        `HeatingResult` with the leaving air flow and the heat of process.
    """

    def __init__(
        self,
        air_in: FlowOfHumidAir,
        Q: Quantity | None = None,
        T_ao: Quantity | None = None,
        RH_ao: Quantity | None = None
    ) -> None:
        if sum(qty is not None for qty in (Q, T_ao, RH_ao)) != 1:
            raise InvalidArgumentError(
                "Specify exactly one of `Q`, `T_ao` or `RH_ao`."
            )
        self.air_in = air_in
        state = air_in.air.state
        m_da = air_in.m_da.to('kg / s').m
        if Q is not None:
            output = heating_from_input_heat(state, m_da, Q.to('W').m)
        elif T_ao is not None:
            output = heating_to_temperature(state, m_da, T_ao.to('degC').m)
        else:
            output = heating_to_humidity(state, m_da, RH_ao.to('pct').m)
        self.result = HeatingResult(
            air_out=output.air_out(),
            Q=Q_(output.Q, 'W')
        )
        logger.debug("Heating %s -> %s, Q = %.1f W", air_in, self.result.air_out, output.Q)

    @property
    def air_out(self) -> FlowOfHumidAir:
        return self.result.air_out

    @property
    def Q(self) -> Quantity:
        return self.result.Q
