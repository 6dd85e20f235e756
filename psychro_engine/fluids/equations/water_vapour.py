"""Temperature-dependent properties of water vapour (ideal gas)."""
import math
from ..constants import T_ZERO, R_WV, M_WV, HEAT_OF_EVAPORATION


def density(ta: float, Pat: float) -> float:
    """Density of pure water vapour at pressure `Pat`, in kg/m3."""
    return Pat / (R_WV * (ta + T_ZERO))


def specific_heat(ta: float) -> float:
    """Ideal gas specific heat in kJ/(kg.K), from the molar heat capacity
    polynomial tabulated by Cengel (273 K - 1800 K).
    """
    tk = ta + T_ZERO
    cp_molar = 32.24 + 0.1923e-2 * tk + 1.055e-5 * tk ** 2 - 3.595e-9 * tk ** 3
    return cp_molar / M_WV


def specific_enthalpy(ta: float) -> float:
    """Specific enthalpy in kJ/kg, referenced to saturated liquid at 0 degC."""
    return specific_heat(ta) * ta + HEAT_OF_EVAPORATION


def dynamic_viscosity(ta: float) -> float:
    """Dilute-gas dynamic viscosity in Pa.s (IAPWS 2008)."""
    t_ = (ta + T_ZERO) / 647.096
    denominator = (
        1.67752
        + 2.20462 / t_
        + 0.6366564 / t_ ** 2
        - 0.241605 / t_ ** 3
    )
    return 100.0 * math.sqrt(t_) / denominator * 1.0e-6


def thermal_conductivity(ta: float) -> float:
    """Thermal conductivity in W/(m.K) (Tsilingiris, 2008)."""
    return 1.761758242e-2 + 5.558941059e-5 * ta + 1.663336663e-7 * ta ** 2
