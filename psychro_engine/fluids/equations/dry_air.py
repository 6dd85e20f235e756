"""Temperature-dependent properties of dry air."""
from ..constants import T_ZERO, R_DA, SUTHERLAND_VISCOSITY_DA


def density(ta: float, Pat: float) -> float:
    """Ideal gas density in kg/m3."""
    return Pat / (R_DA * (ta + T_ZERO))


def specific_heat(ta: float) -> float:
    """Specific heat in kJ/(kg.K).

    Polynomial of Irvine & Liley, fitted between 250 K and 1050 K. Outside
    this range the value at the nearest limit is returned.
    """
    tk = min(max(ta + T_ZERO, 250.0), 1050.0)
    return (
        1.03409
        - 0.284887e-3 * tk
        + 0.7816818e-6 * tk ** 2
        - 0.4970786e-9 * tk ** 3
        + 0.1077024e-12 * tk ** 4
    )


def specific_enthalpy(ta: float) -> float:
    """Specific enthalpy in kJ/kg, zero at 0 degC."""
    return specific_heat(ta) * ta


def dynamic_viscosity(ta: float) -> float:
    """Dynamic viscosity in Pa.s (Sutherland's law)."""
    tk = ta + T_ZERO
    S = SUTHERLAND_VISCOSITY_DA
    return 1.716e-5 * (tk / T_ZERO) ** 1.5 * (T_ZERO + S) / (tk + S)


def thermal_conductivity(ta: float) -> float:
    """Thermal conductivity in W/(m.K) (Tsilingiris, 2008)."""
    tk = ta + T_ZERO
    return (
        -2.276501e-3
        + 1.2598485e-4 * tk
        - 1.4815235e-7 * tk ** 2
        + 1.73550646e-10 * tk ** 3
        - 1.066657e-13 * tk ** 4
        + 2.47663035e-17 * tk ** 5
    )
