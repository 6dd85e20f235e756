import math
import pytest
from psychro_engine.fluids.equations import dry_air, water_vapour, liquid_water, ice


def test_dry_air_density():
    assert math.isclose(dry_air.density(20.0, 101_325.0), 1.0 / 0.8302, abs_tol=0.004)


@pytest.mark.parametrize('ta, mu', [(-75.0, 13.18e-6), (0.0, 17.15e-6), (20.0, 18.13e-6), (600.0, 38.25e-6)])
def test_dry_air_dynamic_viscosity(ta, mu):
    assert math.isclose(dry_air.dynamic_viscosity(ta), mu, abs_tol=1e-7)


def test_dry_air_thermal_conductivity():
    assert math.isclose(dry_air.thermal_conductivity(26.85), 0.02624, abs_tol=0.0006)


@pytest.mark.parametrize('ta, cp', [(-13.15, 1.003), (26.85, 1.005), (106.85, 1.011), (406.85, 1.070)])
def test_dry_air_specific_heat(ta, cp):
    assert math.isclose(dry_air.specific_heat(ta), cp, abs_tol=0.005)


def test_dry_air_specific_enthalpy_is_zero_at_zero_celsius():
    assert dry_air.specific_enthalpy(0.0) == 0.0
    assert math.isclose(dry_air.specific_enthalpy(20.0), 20.09, abs_tol=0.05)


@pytest.mark.parametrize('ta, cp', [(1.85, 1.859), (26.85, 1.864), (526.85, 2.147)])
def test_water_vapour_specific_heat(ta, cp):
    assert math.isclose(water_vapour.specific_heat(ta), cp, abs_tol=0.025)


def test_water_vapour_specific_enthalpy():
    assert math.isclose(water_vapour.specific_enthalpy(0.0), 2500.9, abs_tol=1e-9)
    assert math.isclose(water_vapour.specific_enthalpy(20.0), 2538.0, abs_tol=0.5)


def test_water_vapour_transport_properties():
    assert math.isclose(water_vapour.dynamic_viscosity(100.0), 12.27e-6, rel_tol=0.02)
    assert math.isclose(water_vapour.thermal_conductivity(0.0), 0.01762, abs_tol=1e-5)


def test_liquid_water_properties():
    assert math.isclose(liquid_water.density(20.0), 998.2, abs_tol=0.1)
    assert math.isclose(liquid_water.specific_heat(20.0), 4.182, abs_tol=0.005)
    assert math.isclose(liquid_water.specific_enthalpy(20.0), 83.8, abs_tol=0.5)
    assert math.isclose(liquid_water.dynamic_viscosity(20.0), 1.002e-3, rel_tol=0.02)
    assert math.isclose(liquid_water.thermal_conductivity(20.0), 0.598, rel_tol=0.02)


def test_ice_properties():
    assert math.isclose(ice.density(-20.0), 919.6, abs_tol=0.5)
    assert math.isclose(ice.specific_heat(-20.0), 1.958, abs_tol=0.005)
    assert math.isclose(ice.specific_enthalpy(-20.0), -372.7, abs_tol=0.1)
    assert math.isclose(ice.thermal_conductivity(-20.0), 2.32, abs_tol=0.1)


@pytest.mark.parametrize('ta', [0.0, -0.01, -20.0, -100.0])
def test_liquid_water_enthalpy_is_zero_where_water_freezes(ta):
    assert liquid_water.specific_enthalpy(ta) == 0.0


@pytest.mark.parametrize('ta', [0.01, 20.0, 90.0])
def test_ice_enthalpy_is_zero_where_ice_melts(ta):
    assert ice.specific_enthalpy(ta) == 0.0


def test_ice_enthalpy_includes_heat_of_fusion():
    assert math.isclose(ice.specific_enthalpy(0.0), -333.55, abs_tol=1e-9)


def test_water_vapour_density_is_ideal_gas_density():
    rho = 18.015268e-3 * 101_325.0 / (8.31446261815324 * 373.15)
    assert math.isclose(water_vapour.density(100.0, 101_325.0), rho, rel_tol=1e-12)
    assert math.isclose(water_vapour.density(100.0, 101_325.0), 0.5884, abs_tol=1e-4)
    assert math.isclose(water_vapour.density(100.0, 50_662.5), rho / 2.0, rel_tol=1e-12)
