"""
Physical constants, validity limits and defaults.

The quantities at the top are meant for the typed (pint) layer. The plain
floats below them are used by the property equations, which work in degC, Pa,
kg/kg and kJ/kg.
"""
from .. import Quantity

Q_ = Quantity

STANDARD_PRESSURE = Q_(101_325.0, 'Pa')

# default chilled-water temperatures of a cooling coil
CHILLED_WATER_SUPPLY = Q_(6.0, 'degC')
CHILLED_WATER_RETURN = Q_(12.0, 'degC')

P_ATM = 101_325.0                     # Pa
T_ZERO = 273.15                       # K

R_UNIVERSAL = 8.31446261815324        # J/(mol.K)
M_DA = 28.96546                       # g/mol
M_WV = 18.015268                      # g/mol
R_DA = R_UNIVERSAL / M_DA * 1.0e3     # J/(kg.K)
R_WV = R_UNIVERSAL / M_WV * 1.0e3     # J/(kg.K)
WG_RATIO = M_WV / M_DA                # ~0.622

HEAT_OF_EVAPORATION = 2500.9          # kJ/kg, at 0 degC
HEAT_OF_FUSION = 333.55               # kJ/kg, at 0 degC

# Sutherland constant of dry air, for its dynamic viscosity
SUTHERLAND_VISCOSITY_DA = 110.4       # K
# Lindsay-Bromley mixing constants, 1.5 x normal boiling point
SUTHERLAND_DA = 1.5 * 78.8            # K
SUTHERLAND_WV = 1.5 * 373.15          # K

T_MIN = -150.0                        # degC
T_MAX = 200.0                         # degC
MASS_FLOW_MAX = 5.0e9                 # kg/s
