import math
import pytest
from psychro_engine import Quantity
from psychro_engine.exceptions import InvalidArgumentError
from psychro_engine.fluids import (
    HumidAir, AirState, LiquidWater, Ice, WaterVapour, FlowOfHumidAir,
    FlowOfLiquidWater, FlowOfWaterVapour, STANDARD_PRESSURE
)

Q_ = Quantity


def test_state_from_temperature_and_relative_humidity(office_air):
    assert office_air.P == STANDARD_PRESSURE
    assert math.isclose(office_air.Tdb.to('degC').m, 20.0)
    assert math.isclose(office_air.RH.to('pct').m, 50.0, rel_tol=1e-9)
    assert math.isclose(office_air.W.to('g / kg').m, 7.26, abs_tol=0.02)
    assert math.isclose(office_air.h.to('kJ / kg').m, 38.5, abs_tol=0.2)
    assert math.isclose(office_air.Tdp.to('degC').m, 9.27, abs_tol=0.05)
    assert math.isclose(office_air.Twb.to('degC').m, 13.8, abs_tol=0.1)


@pytest.mark.parametrize('inputs', [
    {'Tdb': Q_(20.0, 'degC'), 'W': Q_(7.2622, 'g / kg')},
    {'W': Q_(7.2622, 'g / kg'), 'RH': Q_(50.0, 'pct')},
    {'Tdp': Q_(9.2704, 'degC'), 'RH': Q_(50.0, 'pct')},
    {'Tdb': Q_(20.0, 'degC'), 'Tdp': Q_(9.2704, 'degC')},
])
def test_equivalent_input_pairs(office_air, inputs):
    air = HumidAir(**inputs)
    assert math.isclose(air.Tdb.to('degC').m, 20.0, abs_tol=0.01)
    assert math.isclose(air.W.to('g / kg').m, office_air.W.to('g / kg').m, abs_tol=0.01)


@pytest.mark.parametrize('key', ['h', 'Twb'])
def test_input_pairs_round_trip(office_air, key):
    other = 'W' if key == 'h' else 'RH'
    air = HumidAir(**{key: getattr(office_air, key), other: getattr(office_air, other)})
    assert math.isclose(air.Tdb.to('degC').m, 20.0, abs_tol=1e-4)
    assert math.isclose(air.W.m, office_air.W.m, rel_tol=1e-5)


def test_pressure_is_carried_along():
    air = HumidAir(P=Q_(80, 'kPa'), Tdb=Q_(20, 'degC'), RH=Q_(50, 'pct'))
    ref = HumidAir(Tdb=Q_(20, 'degC'), RH=Q_(50, 'pct'))
    assert air.P.to('Pa').m == 80_000.0
    assert air.W > ref.W
    assert air.v > ref.v


@pytest.mark.parametrize('inputs', [
    {'Tdb': Q_(20.0, 'degC')},
    {'Tdb': Q_(20.0, 'degC'), 'RH': Q_(50.0, 'pct'), 'W': Q_(0.007, 'kg / kg')},
    {'Tdb': Q_(20.0, 'degC'), 'x': Q_(0.007, 'kg / kg')},
    {'Tdb': Q_(20.0, 'degC'), 'h': Q_(40.0, 'kJ / kg')},
    {'Tdb': Q_(20.0, 'degC'), 'RH': Q_(120.0, 'pct')},
    {'Tdb': Q_(20.0, 'degC'), 'RH': Q_(-10.0, 'pct')},
    {'Tdb': Q_(250.0, 'degC'), 'RH': Q_(10.0, 'pct')},
    {'Tdb': Q_(20.0, 'degC'), 'W': Q_(-0.001, 'kg / kg')},
    {'Tdb': Q_(float('nan'), 'degC'), 'W': Q_(0.007, 'kg / kg')},
])
def test_invalid_inputs(inputs):
    with pytest.raises(InvalidArgumentError):
        HumidAir(**inputs)


def test_invalid_pressure():
    with pytest.raises(InvalidArgumentError):
        HumidAir(P=Q_(0.0, 'Pa'), Tdb=Q_(20.0, 'degC'), W=Q_(0.007, 'kg / kg'))


def test_invalid_inputs_are_value_errors():
    with pytest.raises(ValueError):
        HumidAir(Tdb=Q_(20.0, 'degC'), RH=Q_(150.0, 'pct'))


def test_fog_state():
    air = HumidAir(Tdb=Q_(20, 'degC'), W=Q_(20, 'g / kg'))
    assert air.RH.to('pct').m == 100.0
    assert air.W > air.W_max
    assert math.isclose(air.Tdp.to('degC').m, 20.0)
    assert math.isclose(air.Twb.to('degC').m, 20.0)


def test_dry_state():
    air = HumidAir(Tdb=Q_(20, 'degC'), RH=Q_(0, 'pct'))
    assert air.W.m == 0.0
    assert air.RH.m == 0.0
    assert air.Tdp.m == -math.inf


def test_state_identity(office_air):
    same = HumidAir(Tdb=Q_(20, 'degC'), RH=Q_(50, 'pct'))
    assert same == office_air
    assert hash(same) == hash(office_air)
    assert len({same, office_air}) == 1
    assert HumidAir.from_state(office_air.state) == office_air
    assert isinstance(office_air.state, AirState)
    assert HumidAir(Tdb=Q_(21, 'degC'), RH=Q_(50, 'pct')) != office_air


def test_from_state_validates():
    with pytest.raises(InvalidArgumentError):
        HumidAir.from_state(AirState(101_325.0, 20.0, -0.1))
    with pytest.raises(InvalidArgumentError):
        HumidAir.from_state(AirState(-1.0, 20.0, 0.005))


def test_derived_properties(office_air):
    W = office_air.W.m
    assert math.isclose(office_air.rho.m, (1.0 + W) / office_air.v.m, rel_tol=1e-12)
    assert math.isclose(office_air.v.to('m ** 3 / kg').m, 0.8393, abs_tol=0.002)
    assert math.isclose(office_air.cp.to('kJ / kg / K').m, 1.019, abs_tol=0.003)
    assert math.isclose(office_air.mu.to('Pa * s').m, 18.1e-6, abs_tol=0.2e-6)
    assert math.isclose(office_air.k.to('W / m / K').m, 0.0256, abs_tol=0.0005)
    assert math.isclose(office_air.nu.m, office_air.mu.m / office_air.rho.m, rel_tol=1e-12)
    assert math.isclose(office_air.Pr.m, 0.72, abs_tol=0.02)
    assert math.isclose(office_air.alpha.to('m ** 2 / s').m, 2.1e-5, abs_tol=0.1e-5)
    assert office_air.W_max > office_air.W
    assert math.isclose(office_air.Ps.to('Pa').m, 2339.0, abs_tol=1.0)


def test_str(office_air):
    assert 'DB' in str(office_air)
    assert 'RH' in str(office_air)


def test_liquid_water():
    water = LiquidWater(T=Q_(20, 'degC'))
    assert math.isclose(water.rho.to('kg / m ** 3').m, 998.2, abs_tol=0.1)
    assert math.isclose(water.h.to('kJ / kg').m, 83.65, abs_tol=0.1)
    assert water.P == STANDARD_PRESSURE
    assert water == LiquidWater(T=Q_(20, 'degC'), P=Q_(101_325.0, 'Pa'))
    assert water != LiquidWater(T=Q_(25, 'degC'))


def test_ice():
    ice = Ice(T=Q_(-20, 'degC'))
    assert math.isclose(ice.rho.to('kg / m ** 3').m, 919.6, abs_tol=0.1)
    assert math.isclose(ice.h.to('kJ / kg').m, -372.71, abs_tol=0.01)
    with pytest.raises(InvalidArgumentError):
        Ice(T=Q_(5, 'degC'))
    assert ice == Ice(T=Q_(-20, 'degC'))
    assert hash(ice) == hash(Ice(T=Q_(-20, 'degC')))
    assert ice != Ice(T=Q_(-10, 'degC'))


def test_flow_of_humid_air(office_air):
    flow = FlowOfHumidAir(office_air, m_da=Q_(1.0, 'kg / s'))
    W = office_air.W.m
    assert math.isclose(flow.m.to('kg / s').m, 1.0 + W, rel_tol=1e-12)
    assert math.isclose(flow.V.to('m ** 3 / s').m, office_air.v.m, rel_tol=1e-9)
    by_mass = FlowOfHumidAir(office_air, m=flow.m)
    by_volume = FlowOfHumidAir(office_air, V=Q_(3600 * flow.V.m, 'm ** 3 / hr'))
    assert math.isclose(by_mass.m_da.m, 1.0, rel_tol=1e-12)
    assert math.isclose(by_volume.m_da.m, 1.0, rel_tol=1e-9)
    assert FlowOfHumidAir.from_dry_air_flow(office_air, 1.0) == flow


def test_flow_of_humid_air_invalid(office_air):
    with pytest.raises(InvalidArgumentError):
        FlowOfHumidAir(office_air)
    with pytest.raises(InvalidArgumentError):
        FlowOfHumidAir(office_air, m_da=Q_(1.0, 'kg / s'), m=Q_(1.0, 'kg / s'))
    with pytest.raises(InvalidArgumentError):
        FlowOfHumidAir(office_air, m_da=Q_(-1.0, 'kg / s'))


def test_flow_of_liquid_water():
    water = LiquidWater(T=Q_(20, 'degC'))
    flow = FlowOfLiquidWater(water, V=Q_(1.0, 'L / s'))
    assert math.isclose(flow.m.to('kg / s').m, 0.9982, abs_tol=1e-4)
    assert math.isclose(flow.V.to('L / s').m, 1.0, rel_tol=1e-12)
    with pytest.raises(InvalidArgumentError):
        FlowOfLiquidWater(water)


def test_water_vapour():
    vapour = WaterVapour(T=Q_(100, 'degC'))
    assert vapour.P == STANDARD_PRESSURE
    assert math.isclose(vapour.rho.to('kg / m ** 3').m, 0.5884, abs_tol=1e-4)
    assert math.isclose(vapour.h.to('kJ / kg').m, 2500.9 + 100.0 * vapour.cp.to('kJ / kg / K').m, rel_tol=1e-12)
    assert math.isclose(vapour.mu.to('Pa * s').m, 12.27e-6, rel_tol=0.02)
    assert vapour.k.to('W / m / K').m > 0.0
    low = WaterVapour(T=Q_(100, 'degC'), P=Q_(50_662.5, 'Pa'))
    assert math.isclose(low.rho.m, vapour.rho.m / 2.0, rel_tol=1e-12)
    assert low != vapour
    assert WaterVapour(T=Q_(100, 'degC')) == vapour
    with pytest.raises(InvalidArgumentError):
        WaterVapour(T=Q_(20, 'degC'), P=Q_(0, 'Pa'))
    with pytest.raises(InvalidArgumentError):
        WaterVapour(T=Q_(300, 'degC'))


def test_flow_of_water_vapour():
    vapour = WaterVapour(T=Q_(100, 'degC'))
    flow = FlowOfWaterVapour(vapour, m=Q_(0.5, 'kg / s'))
    assert math.isclose(flow.V.to('m ** 3 / s').m, 0.5 / vapour.rho.m, rel_tol=1e-12)
    by_volume = FlowOfWaterVapour(vapour, V=flow.V)
    assert math.isclose(by_volume.m.to('kg / s').m, 0.5, rel_tol=1e-12)
    assert FlowOfWaterVapour(vapour, m=Q_(0.5, 'kg / s')) == flow
    assert flow.vapour == vapour
    assert 'water vapour' in str(flow)
    with pytest.raises(InvalidArgumentError):
        FlowOfWaterVapour(vapour)
    with pytest.raises(InvalidArgumentError):
        FlowOfWaterVapour(vapour, m=Q_(1.0, 'kg / s'), V=Q_(1.0, 'm ** 3 / s'))
    with pytest.raises(InvalidArgumentError):
        FlowOfWaterVapour(vapour, m=Q_(6e9, 'kg / s'))
