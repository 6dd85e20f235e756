"""
Property equations on plain floats.

Temperatures in degC, pressures in Pa, humidity ratios in kg/kg, relative
humidity in %, specific enthalpy in kJ/kg and specific heat in kJ/(kg.K).
"""
from . import dry_air, water_vapour, liquid_water, ice, humid_air
