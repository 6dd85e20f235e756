"""
COOLING OF MOIST AIR

Two models are available.

Dry cooling
    Sensible cooling only: the humidity ratio stays constant and no water
    condenses. This is a rough model; it is only valid as long as the coil
    surface remains above the dew point of the air.

Real coil (bypass factor model)
    The coil wall is at the mean temperature of the coolant. A fraction
    `1 - BF` of the air comes into contact with the wall and leaves it at
    wall temperature (saturated, when the wall is below the dew point of the
    entering air, in which case water condenses). The other fraction `BF`
    bypasses the coil unchanged. The leaving air is the blend of both
    fractions, at the requested outlet temperature:

        BF = (T_out - T_wall) / (T_in - T_wall)

    Given the entering air, the coil can be solved for the outlet
    temperature, the outlet relative humidity or the cooling power.

The module level functions work on plain floats (P in Pa, temperatures in
degC, W in kg/kg, RH in %, mass flows in kg/s, heat in W). Classes
`DryCooling` and `Cooling` wrap them for flows and quantities.
"""
from dataclasses import dataclass
from .. import Quantity
from ..exceptions import InvalidArgumentError, PhysicallyImpossibleError
from ..fluids import (
    AirState, FlowOfHumidAir, FlowOfLiquidWater, LiquidWater,
    CHILLED_WATER_SUPPLY, CHILLED_WATER_RETURN
)
from ..fluids.equations import humid_air as ha
from ..fluids.equations import liquid_water
from ..logging import ModuleLogger
from ..solvers import BrentSolver
from .heating import sensible_heat_from_input, sensible_heat_to_temperature
from .results import ProcessOutput, CoolingOutput, CoolingResult

Q_ = Quantity

logger = ModuleLogger.get_logger(__name__)
logger.setLevel(ModuleLogger.ERROR)

# above this outlet RH the coil would need an infinite heat transfer area
RH_OUT_MAX = 99.0


def average_wall_temperature(T_supply: float, T_return: float) -> float:
    return (T_supply + T_return) / 2.0


def coil_bypass_factor(T_wall: float, T_in: float, T_out: float) -> float:
    return (T_out - T_wall) / (T_in - T_wall)


def condensate_discharge(m_da: float, W_in: float, W_out: float) -> float:
    """Mass flow rate of water (kg/s) that condenses when the humidity ratio
    of a dry-air flow `m_da` drops from `W_in` to `W_out`.
    """
    if m_da < 0.0 or W_in < 0.0 or W_out < 0.0:
        raise InvalidArgumentError(
            "Mass flow rate and humidity ratios cannot be negative."
        )
    if W_in == 0.0:
        return 0.0
    return m_da * (W_in - W_out)


def _is_supersaturated(P: float, T: float, W: float) -> bool:
    return W > ha.max_humidity_ratio(ha.saturation_pressure(T), P)


def _dry_output(output: ProcessOutput) -> CoolingOutput:
    return CoolingOutput(
        output.P, output.T_out, output.W_out, output.m_da, output.Q,
        T_cond=output.T_out,
        m_cond=0.0,
        BF=None
    )


def dry_cooling_from_input_heat(state: AirState, m_da: float, Q: float) -> CoolingOutput:
    """Dry cooling with heat of process `Q` (W, negative)."""
    if Q > 0.0:
        raise InvalidArgumentError(
            f"Heat of process for cooling must not be positive, got {Q} W."
        )
    logger.warning("Dry cooling model (no condensation), use with caution.")
    output = sensible_heat_from_input(state, m_da, Q)
    if _is_supersaturated(output.P, output.T_out, output.W_out):
        logger.warning(
            "Dry cooling: the outlet temperature %.2f degC is below the dew "
            "point of the air.", output.T_out
        )
    return _dry_output(output)


def dry_cooling_to_temperature(state: AirState, m_da: float, T_out: float) -> CoolingOutput:
    """Dry cooling down to temperature `T_out`."""
    P, T_in, W_in = state
    if T_out > T_in:
        raise InvalidArgumentError(
            f"Outlet temperature {T_out} degC is higher than the inlet "
            f"temperature {T_in} degC: cooling cannot heat the air."
        )
    logger.warning("Dry cooling model (no condensation), use with caution.")
    T_dp = ha.dew_point_temperature(T_in, ha.relative_humidity(T_in, W_in, P), P)
    if T_out < T_dp:
        raise PhysicallyImpossibleError(
            f"Outlet temperature {T_out} degC is below the dew point "
            f"{T_dp:.2f} degC of the entering air; expected temperature must "
            f"be higher than dew point."
        )
    return _dry_output(sensible_heat_to_temperature(state, m_da, T_out))


def _check_wall(T_in: float, T_wall: float) -> None:
    if T_wall >= T_in:
        raise InvalidArgumentError(
            f"Coil wall temperature {T_wall} degC is not lower than the "
            f"inlet temperature {T_in} degC."
        )


def _inlet(state: AirState) -> tuple[float, float]:
    """Returns enthalpy and dew point of the entering air."""
    P, T_in, W_in = state
    h_in = ha.specific_enthalpy(T_in, W_in, P)
    T_dp = ha.dew_point_temperature(T_in, ha.relative_humidity(T_in, W_in, P), P)
    return h_in, T_dp


def _coil(
    state: AirState,
    h_in: float,
    T_dp_in: float,
    m_da: float,
    T_wall: float,
    T_out: float
) -> CoolingOutput:
    P, T_in, W_in = state
    if T_out == T_in:
        return CoolingOutput(P, T_in, W_in, m_da, 0.0, T_wall, 0.0, 1.0)
    BF = coil_bypass_factor(T_wall, T_in, T_out)
    m_da_direct = (1.0 - BF) * m_da
    m_da_bypass = m_da - m_da_direct
    if T_wall >= T_dp_in:
        W_wall = W_in
        m_cond = 0.0
    else:
        W_wall = min(W_in, ha.max_humidity_ratio(ha.saturation_pressure(T_wall), P))
        m_cond = condensate_discharge(m_da_direct, W_in, W_wall)
    h_wall = ha.specific_enthalpy(T_wall, W_wall, P)
    h_cond = liquid_water.specific_enthalpy(T_wall)
    Q = (m_da_direct * (h_wall - h_in) + m_cond * h_cond) * 1.0e3
    if m_da > 0.0:
        W_out = (W_wall * m_da_direct + W_in * m_da_bypass) / m_da
    else:
        W_out = W_in
    return CoolingOutput(P, T_out, W_out, m_da, Q, T_wall, m_cond, BF)


def coil_cooling_to_temperature(
    state: AirState,
    m_da: float,
    T_wall: float,
    T_out: float
) -> CoolingOutput:
    """Real coil with wall temperature `T_wall` cooling the air to
    `T_out`.
    """
    P, T_in, W_in = state
    if T_out > T_in:
        raise InvalidArgumentError(
            f"Outlet temperature {T_out} degC is higher than the inlet "
            f"temperature {T_in} degC: cooling cannot heat the air."
        )
    if T_out == T_in:
        return CoolingOutput(P, T_in, W_in, m_da, 0.0, T_wall, 0.0, 1.0)
    _check_wall(T_in, T_wall)
    if T_out < T_wall:
        raise PhysicallyImpossibleError(
            f"Outlet temperature {T_out} degC is below the coil wall "
            f"temperature {T_wall} degC."
        )
    h_in, T_dp_in = _inlet(state)
    return _coil(state, h_in, T_dp_in, m_da, T_wall, T_out)


def coil_cooling_to_humidity(
    state: AirState,
    m_da: float,
    T_wall: float,
    RH_out: float
) -> CoolingOutput:
    """Real coil with wall temperature `T_wall` cooling the air until its
    relative humidity has risen to `RH_out` (%).
    """
    P, T_in, W_in = state
    if not 0.0 <= RH_out <= 100.0:
        raise InvalidArgumentError(
            f"Outlet relative humidity {RH_out} % is outside the range "
            f"0 .. 100 %."
        )
    RH_in = ha.relative_humidity(T_in, W_in, P)
    if RH_out < RH_in:
        raise InvalidArgumentError(
            f"Outlet relative humidity {RH_out} % is lower than the inlet "
            f"relative humidity {RH_in} %: cooling cannot lower it."
        )
    if RH_out == RH_in:
        return CoolingOutput(P, T_in, W_in, m_da, 0.0, T_wall, 0.0, 1.0)
    if RH_out > RH_OUT_MAX:
        raise PhysicallyImpossibleError(
            f"Outlet relative humidity {RH_out} % is above {RH_OUT_MAX} %: "
            f"the coil area would be infinite."
        )
    _check_wall(T_in, T_wall)
    h_in, T_dp_in = _inlet(state)

    def _RH_out(T_out: float) -> float:
        output = _coil(state, h_in, T_dp_in, m_da, T_wall, T_out)
        return ha.relative_humidity(output.T_out, output.W_out, P)

    RH_out_max = _RH_out(T_wall)
    if RH_out > RH_out_max:
        raise PhysicallyImpossibleError(
            f"Outlet relative humidity {RH_out} % cannot be reached with a "
            f"coil wall at {T_wall} degC (at most {RH_out_max:.2f} %)."
        )
    solver = BrentSolver(
        name='CoolingToHumidity',
        counterpart_points=(T_in, max(T_dp_in, T_wall)),
        bounds=(T_wall, T_in)
    )
    T_out = solver.solve(lambda T_out: RH_out - _RH_out(T_out))
    return _coil(state, h_in, T_dp_in, m_da, T_wall, T_out)


def coil_cooling_from_input_heat(
    state: AirState,
    m_da: float,
    T_wall: float,
    Q: float
) -> CoolingOutput:
    """Real coil with wall temperature `T_wall` and heat of process `Q` (W,
    negative).
    """
    P, T_in, W_in = state
    if Q > 0.0:
        raise InvalidArgumentError(
            f"Heat of process for cooling must not be positive, got {Q} W."
        )
    if Q == 0.0:
        return CoolingOutput(P, T_in, W_in, m_da, 0.0, T_wall, 0.0, 1.0)
    _check_wall(T_in, T_wall)
    h_in, T_dp_in = _inlet(state)
    Q_max = _coil(state, h_in, T_dp_in, m_da, T_wall, T_wall).Q
    if Q < Q_max:
        raise PhysicallyImpossibleError(
            f"Heat of process {Q} W exceeds the capacity of the coil "
            f"({Q_max:.1f} W with the air leaving at wall temperature)."
        )
    # dry cooling with the same heat gives the lowest outlet temperature
    # a real coil can have
    T_dry = sensible_heat_from_input(state, m_da, Q).T_out
    solver = BrentSolver(
        name='CoolingFromInputHeat',
        counterpart_points=(T_in, max(T_dry, T_wall)),
        bounds=(T_wall, T_in)
    )
    T_out = solver.solve(
        lambda T_out: _coil(state, h_in, T_dp_in, m_da, T_wall, T_out).Q - Q
    )
    return _coil(state, h_in, T_dp_in, m_da, T_wall, T_out)


@dataclass(frozen=True)
class CoolantData:
    """Supply and return temperature of the coolant flowing through a
    cooling coil.
    """
    T_supply: Quantity = CHILLED_WATER_SUPPLY
    T_return: Quantity = CHILLED_WATER_RETURN

    @property
    def T_wall(self) -> Quantity:
        """Average coil wall temperature."""
        T_wall = average_wall_temperature(
            self.T_supply.to('degC').m,
            self.T_return.to('degC').m
        )
        return Q_(T_wall, 'degC')


def _cooling_result(output: CoolingOutput) -> CoolingResult:
    condensate = FlowOfLiquidWater(
        LiquidWater(T=Q_(output.T_cond, 'degC'), P=Q_(output.P, 'Pa')),
        m=Q_(output.m_cond, 'kg / s')
    )
    return CoolingResult(
        air_out=output.air_out(),
        Q=Q_(output.Q, 'W'),
        condensate=condensate,
        BF=None if output.BF is None else Q_(output.BF, 'frac')
    )


class _CoolingProcess:
    result: CoolingResult

    @property
    def air_out(self) -> FlowOfHumidAir:
        return self.result.air_out

    @property
    def Q(self) -> Quantity:
        return self.result.Q

    @property
    def condensate(self) -> FlowOfLiquidWater:
        return self.result.condensate


class DryCooling(_CoolingProcess):
    """
    Sensible cooling of an air flow, without condensation.

    Parameters
    ----------
    air_in:
        Air flow entering the coil.
    Q:
        Heat of process (negative), or
    T_ao:
        Temperature of the air leaving the coil.
    """

    def __init__(
        self,
        air_in: FlowOfHumidAir,
        Q: Quantity | None = None,
        T_ao: Quantity | None = None
    ) -> None:
        if (Q is None) == (T_ao is None):
            raise InvalidArgumentError("Specify exactly one of `Q` or `T_ao`.")
        self.air_in = air_in
        state = air_in.air.state
        m_da = air_in.m_da.to('kg / s').m
        if Q is not None:
            output = dry_cooling_from_input_heat(state, m_da, Q.to('W').m)
        else:
            output = dry_cooling_to_temperature(state, m_da, T_ao.to('degC').m)
        self.result = _cooling_result(output)


class Cooling(_CoolingProcess):
    """
    Cooling and dehumidification of an air flow by a real cooling coil.

    Parameters
    ----------
    air_in:
        Air flow entering the coil.
    coolant:
        Supply and return temperature of the coolant, which determine the
        coil wall temperature.

    Exactly one of the following must be given:

    T_ao:
        Temperature of the air leaving the coil.
    RH_ao:
        Relative humidity of the air leaving the coil.
    Q:
        Heat of process (negative).
    """

    def __init__(
        self,
        air_in: FlowOfHumidAir,
        coolant: CoolantData,
        T_ao: Quantity | None = None,
        RH_ao: Quantity | None = None,
        Q: Quantity | None = None
    ) -> None:
        if sum(qty is not None for qty in (T_ao, RH_ao, Q)) != 1:
            raise InvalidArgumentError(
                "Specify exactly one of `T_ao`, `RH_ao` or `Q`."
            )
        self.air_in = air_in
        self.coolant = coolant
        state = air_in.air.state
        m_da = air_in.m_da.to('kg / s').m
        T_wall = coolant.T_wall.to('degC').m
        if T_ao is not None:
            output = coil_cooling_to_temperature(state, m_da, T_wall, T_ao.to('degC').m)
        elif RH_ao is not None:
            output = coil_cooling_to_humidity(state, m_da, T_wall, RH_ao.to('pct').m)
        else:
            output = coil_cooling_from_input_heat(state, m_da, T_wall, Q.to('W').m)
        self.result = _cooling_result(output)
        logger.debug(
            "Cooling %s -> %s, Q = %.1f W, BF = %.3f, condensate = %.6f kg/s",
            air_in, self.result.air_out, output.Q, output.BF, output.m_cond
        )

    @property
    def BF(self) -> Quantity:
        return self.result.BF
