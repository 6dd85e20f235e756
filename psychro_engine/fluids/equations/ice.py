"""
Temperature-dependent properties of ice Ih.

`specific_enthalpy` returns 0 above 0 degC, where ice cannot exist; see
`liquid_water` for the counterpart convention.
"""
import math
from ..constants import T_ZERO, HEAT_OF_FUSION


def density(ta: float) -> float:
    """Density in kg/m3."""
    return 916.8 - 0.1403 * ta


def specific_heat(ta: float) -> float:
    """Specific heat in kJ/(kg.K). Above 0 degC the value at 0 degC is
    returned.
    """
    t = min(ta, 0.0)
    return 2.114 + 0.007789 * t


def specific_enthalpy(ta: float) -> float:
    """Specific enthalpy in kJ/kg, referenced to liquid water at 0 degC (the
    heat of fusion is included). Zero above 0 degC.
    """
    if ta > 0.0:
        return 0.0
    return specific_heat(ta) * ta - HEAT_OF_FUSION


def thermal_conductivity(ta: float) -> float:
    """Thermal conductivity in W/(m.K)."""
    return 9.828 * math.exp(-0.0057 * (ta + T_ZERO))
