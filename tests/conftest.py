# tests/conftest.py
import pytest
from psychro_engine import Quantity
from psychro_engine.fluids import HumidAir, FlowOfHumidAir
from psychro_engine.processes import CoolantData

Q_ = Quantity

P_ATM = 101_325.0


@pytest.fixture
def p_atm() -> float:
    return P_ATM


@pytest.fixture
def office_air() -> HumidAir:
    return HumidAir(Tdb=Q_(20.0, 'degC'), RH=Q_(50.0, 'pct'))


@pytest.fixture
def office_air_flow(office_air) -> FlowOfHumidAir:
    return FlowOfHumidAir(office_air, m_da=Q_(1.0, 'kg / s'))


@pytest.fixture
def summer_air_flow() -> FlowOfHumidAir:
    air = HumidAir(Tdb=Q_(28.0, 'degC'), RH=Q_(50.0, 'pct'))
    return FlowOfHumidAir(air, m_da=Q_(1.0, 'kg / s'))


@pytest.fixture
def coolant() -> CoolantData:
    # mean wall temperature 11.5 degC
    return CoolantData(T_supply=Q_(8.0, 'degC'), T_return=Q_(15.0, 'degC'))
