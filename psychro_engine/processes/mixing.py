"""
ADIABATIC MIXING OF AIR STREAMS

The leaving air follows from the mass balances of dry air and water and from
the energy balance: humidity ratio and enthalpy of the mixture are the
averages of the entering streams, weighted by their dry-air mass flow rates.
The temperature of the mixture is then found from its enthalpy and humidity
ratio (fog included).

Besides mixing given flows, `mix_for_target` searches the split between two
streams that gives a wanted outlet temperature for a wanted total flow rate,
with a minimum flow rate imposed on each stream.
"""
from typing import Sequence
import numpy as np
from .. import Quantity
from ..exceptions import InvalidArgumentError
from ..fluids import AirState, FlowOfHumidAir
from ..fluids.equations import humid_air as ha
from ..logging import ModuleLogger
from ..solvers import BrentSolver
from .results import ProcessOutput, MixingOutput, MixingResult, MultiStreamMixingResult

Q_ = Quantity

logger = ModuleLogger.get_logger(__name__)
logger.setLevel(ModuleLogger.ERROR)


def _mix(
    state1: AirState, h1: float, m1: float,
    state2: AirState, h2: float, m2: float
) -> MixingOutput:
    # a stream without flow leaves the other one unchanged
    if m1 == 0.0:
        return MixingOutput(state2.P, state2.Tdb, state2.W, m2, m1, m2)
    m3 = m1 + m2
    if m2 == 0.0 or m3 == 0.0:
        return MixingOutput(state1.P, state1.Tdb, state1.W, m3, m1, m2)
    P = max(state1.P, state2.P)
    W3 = (m1 * state1.W + m2 * state2.W) / m3
    h3 = (m1 * h1 + m2 * h2) / m3
    T3 = ha.dry_bulb_temperature_ix(h3, W3, P)
    return MixingOutput(P, T3, W3, m3, m1, m2)


def _enthalpy(state: AirState) -> float:
    return ha.specific_enthalpy(state.Tdb, state.W, state.P)


def _check_flows(*m: float) -> None:
    if any(m_ < 0.0 for m_ in m):
        raise InvalidArgumentError("Mass flow rates cannot be negative.")


def mix_two_streams(
    state1: AirState,
    m1: float,
    state2: AirState,
    m2: float
) -> MixingOutput:
    """Mixes dry-air mass flow `m1` of `state1` with `m2` of `state2`."""
    _check_flows(m1, m2)
    if m1 == 0.0 or m2 == 0.0:
        return _mix(state1, 0.0, m1, state2, 0.0, m2)
    return _mix(state1, _enthalpy(state1), m1, state2, _enthalpy(state2), m2)


def mix_multiple_streams(streams: Sequence[tuple[AirState, float]]) -> ProcessOutput:
    """Mixes any number of (state, dry-air mass flow) pairs. The pressure of
    the mixture is the highest inlet pressure.
    """
    if not streams:
        raise InvalidArgumentError("No streams to mix.")
    m = np.array([m_da for _, m_da in streams], dtype=float)
    _check_flows(*m)
    m_out = m.sum()
    if m_out == 0.0:
        raise InvalidArgumentError(
            "Streams cannot be mixed: their total flow rate is zero."
        )
    W = np.array([state.W for state, _ in streams])
    h = np.array([_enthalpy(state) for state, _ in streams])
    P = max(state.P for state, _ in streams)
    W_out = float(np.dot(m, W) / m_out)
    h_out = float(np.dot(m, h) / m_out)
    T_out = ha.dry_bulb_temperature_ix(h_out, W_out, P)
    return ProcessOutput(P, T_out, W_out, float(m_out), 0.0)


def mix_for_target(
    state1: AirState,
    state2: AirState,
    m_out: float,
    T_out: float,
    m1_min: float = 0.0,
    m2_min: float = 0.0
) -> MixingOutput:
    """
    Splits the total dry-air flow `m_out` between stream 1 and stream 2 so
    that the mixture has temperature `T_out`.

    Parameters
    ----------
    state1, state2:
        States of the entering air streams.
    m_out:
        Wanted dry-air mass flow rate of the mixture.
    T_out:
        Wanted temperature of the mixture.
    m1_min, m2_min:
        Minimum dry-air mass flow rate of each stream.

    Returns
    -------
    The mixture of the minimum flow rates, if these add up to more than
    `m_out`. The mixture with the largest possible share of stream 1 (or of
    stream 2), if `T_out` cannot be reached; when both extremes qualify, the
    one with the largest share of stream 1 is returned. Otherwise the
    mixture with temperature `T_out`.
    """
    _check_flows(m_out, m1_min, m2_min)
    m_min = m1_min + m2_min
    if m_min == 0.0 and m_out == 0.0:
        raise InvalidArgumentError(
            "Minimum flow rates and wanted flow rate are all zero."
        )
    if m_min > m_out:
        logger.debug(
            "Minimum flow rates (%.4f kg/s) exceed the wanted flow rate "
            "(%.4f kg/s).", m_min, m_out
        )
        return mix_two_streams(state1, m1_min, state2, m2_min)
    h1, h2 = _enthalpy(state1), _enthalpy(state2)

    def _mix_m1(m1: float) -> MixingOutput:
        return _mix(state1, h1, m1, state2, h2, m_out - m1)

    out_max1 = _mix_m1(m_out - m2_min)
    out_max2 = _mix_m1(m1_min)
    T_max1, T_max2 = out_max1.T_out, out_max2.T_out
    if (T_max1 <= T_max2 and T_out <= T_max1) or (T_max1 >= T_max2 and T_out >= T_max1):
        return out_max1
    if (T_max2 <= T_max1 and T_out <= T_max2) or (T_max2 >= T_max1 and T_out >= T_max2):
        return out_max2
    solver = BrentSolver(
        name='MixingForTarget',
        counterpart_points=(m1_min, m_out),
        bounds=(m1_min, m_out)
    )
    m1 = solver.solve(lambda m1: T_out - _mix_m1(m1).T_out)
    return _mix_m1(m1)


def _mixing_result(
    in1: FlowOfHumidAir,
    in2: FlowOfHumidAir,
    output: MixingOutput
) -> MixingResult:
    return MixingResult(
        stream_in1=FlowOfHumidAir.from_dry_air_flow(in1.air, output.m_da_in1),
        stream_in2=FlowOfHumidAir.from_dry_air_flow(in2.air, output.m_da_in2),
        air_out=output.air_out()
    )


class AdiabaticMixing:
    """
    Adiabatic mixing of two air flows.

    Attributes
    ----------
    in1, in2:
        Entering air flows.
    result:
        `MixingResult` with the entering flows and the leaving air flow.
    """

    def __init__(self, in1: FlowOfHumidAir, in2: FlowOfHumidAir) -> None:
        self.in1 = in1
        self.in2 = in2
        output = mix_two_streams(
            in1.air.state, in1.m_da.to('kg / s').m,
            in2.air.state, in2.m_da.to('kg / s').m
        )
        self.result = _mixing_result(in1, in2, output)

    @property
    def air_out(self) -> FlowOfHumidAir:
        return self.result.air_out


class MultiStreamMixing:
    """Adiabatic mixing of any number of air flows."""

    def __init__(self, streams: Sequence[FlowOfHumidAir]) -> None:
        self.streams = tuple(streams)
        output = mix_multiple_streams([
            (stream.air.state, stream.m_da.to('kg / s').m)
            for stream in self.streams
        ])
        self.result = MultiStreamMixingResult(
            streams_in=self.streams,
            air_out=output.air_out()
        )

    @property
    def air_out(self) -> FlowOfHumidAir:
        return self.result.air_out


class TargetMixing:
    """
    Mixing of two air streams in the ratio that gives the wanted outlet
    temperature `T_ao` at the wanted dry-air flow rate `m_da_out`. Only the
    states of `in1` and `in2` are used; their flow rates follow from the
    solution and are found in `result.stream_in1` and `result.stream_in2`.

    Parameters
    ----------
    m_da_min1, m_da_min2:
        Minimum dry-air flow rate of each stream (zero if omitted).
    """

    def __init__(
        self,
        in1: FlowOfHumidAir,
        in2: FlowOfHumidAir,
        m_da_out: Quantity,
        T_ao: Quantity,
        m_da_min1: Quantity | None = None,
        m_da_min2: Quantity | None = None
    ) -> None:
        self.in1 = in1
        self.in2 = in2
        m1_min = m_da_min1.to('kg / s').m if m_da_min1 is not None else 0.0
        m2_min = m_da_min2.to('kg / s').m if m_da_min2 is not None else 0.0
        output = mix_for_target(
            in1.air.state, in2.air.state,
            m_da_out.to('kg / s').m, T_ao.to('degC').m,
            m1_min, m2_min
        )
        self.result = _mixing_result(in1, in2, output)
        logger.debug(
            "Target mixing: %.4f kg/s of stream 1 and %.4f kg/s of stream 2 "
            "-> %s", output.m_da_in1, output.m_da_in2, self.result.air_out
        )

    @property
    def air_out(self) -> FlowOfHumidAir:
        return self.result.air_out
