"""
Temperature-dependent properties of liquid water at near-atmospheric
pressure.

`specific_enthalpy` returns 0 at and below 0 degC, where water is not liquid.
The fog branch of the moist air enthalpy adds the liquid and the ice terms
without testing the temperature, and relies on this convention (see also
`ice.specific_enthalpy`).
"""
from ..constants import T_ZERO


def density(ta: float) -> float:
    """Density in kg/m3 (Kell, 1975)."""
    numerator = (
        999.83952
        + 16.945176 * ta
        - 7.9870401e-3 * ta ** 2
        - 46.170461e-6 * ta ** 3
        + 105.56302e-9 * ta ** 4
        - 280.54253e-12 * ta ** 5
    )
    return numerator / (1.0 + 16.879850e-3 * ta)


def specific_heat(ta: float) -> float:
    """Specific heat in kJ/(kg.K), fitted between 0 and 100 degC. Below
    0 degC the value at 0 degC is returned.
    """
    t = max(ta, 0.0)
    return (
        4.2174356
        - 0.0056181625 * t
        + 0.0012992528 * t ** 1.5
        - 0.00011535353 * t ** 2
        + 4.14964e-6 * t ** 2.5
    )


def specific_enthalpy(ta: float) -> float:
    """Specific enthalpy in kJ/kg, zero at 0 degC and below."""
    if ta <= 0.0:
        return 0.0
    return specific_heat(ta) * ta


def dynamic_viscosity(ta: float) -> float:
    """Dynamic viscosity in Pa.s (Vogel equation)."""
    return 2.414e-5 * 10.0 ** (247.8 / (ta + T_ZERO - 140.0))


def thermal_conductivity(ta: float) -> float:
    """Thermal conductivity in W/(m.K)."""
    tk = ta + T_ZERO
    return -0.5752 + 6.397e-3 * tk - 8.151e-6 * tk ** 2
