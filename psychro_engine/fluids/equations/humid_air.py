"""
MOIST AIR EQUATIONS

Properties of moist air as pure functions of dry-bulb temperature `ta`
(degC), humidity ratio `x` (kg water per kg dry air), relative humidity `RH`
(%) and/or atmospheric pressure `Pat` (Pa). Specific enthalpies are returned
in kJ per kg of dry air.

Relations without a closed-form inverse are solved with a `BrentSolver`,
starting from an estimate of the root. Every call creates its own solver
instance, so that the functions can be called concurrently.

Boundary cases with a known answer (RH = 0 or 100 %, x = 0) are returned
directly, before any root search is started.
"""
import math
import sys
from ...exceptions import InvalidArgumentError
from ...solvers import BrentSolver
from ...solvers.brent import DEFAULT_ACCURACY
from ..constants import (
    T_ZERO, T_MIN, T_MAX, WG_RATIO, R_DA, M_DA, M_WV, SUTHERLAND_DA,
    SUTHERLAND_WV, HEAT_OF_EVAPORATION, P_ATM
)
from . import dry_air, water_vapour, liquid_water, ice


# counterpart points of a root search = estimate x coefficient
SOLVER_A_COEF = 0.8
SOLVER_B_COEF = 1.01

# Hyland & Wexler, saturation over ice (-100 degC .. 0 degC)
C1 = -5.6745359e+03
C2 = 6.3925247e+00
C3 = -9.6778430e-03
C4 = 6.2215701e-07
C5 = 2.0747825e-09
C6 = -9.4840240e-13
C7 = 4.1635019e+00

# Hyland & Wexler, saturation over liquid water (0 degC .. 200 degC)
C8 = -5.8002206e+03
C9 = 1.3914993e+00
C10 = -4.8640239e-02
C11 = 4.1764768e-05
C12 = -1.4452093e-08
C13 = 6.5459673e+00


def _check_temperature(ta: float) -> None:
    if not T_MIN <= ta <= T_MAX:
        raise InvalidArgumentError(
            f"Temperature {ta} degC is outside the range "
            f"{T_MIN} degC .. {T_MAX} degC."
        )


def _check_relative_humidity(RH: float) -> None:
    if RH < 0.0 or math.isnan(RH):
        raise InvalidArgumentError(
            f"Relative humidity {RH} % cannot be negative."
        )


def _buck_coefficients(t: float) -> tuple[float, float, float]:
    # Arden Buck (1996): over liquid water above 0 degC, over ice below
    if t > 0.0:
        return 18.678, 257.14, 234.50
    return 23.036, 279.82, 333.70


def _alfa(ta: float) -> float:
    """Exponent of the Arden Buck equation: Ps = a * exp(alfa(ta))."""
    b, c, d = _buck_coefficients(ta)
    return (b - ta / d) * (ta / (c + ta))


def _inverse_alfa(beta: float) -> float:
    """Returns the temperature t for which `_alfa(t) == beta`.

    `_alfa` is zero at 0 degC and increasing, so the sign of `beta` selects
    the coefficient set (below 0 degC the result is a frost point).
    """
    b, c, d = _buck_coefficients(beta)
    a = 2.0 / d
    b_beta = b - beta
    c_beta = -c * beta
    return (b_beta - math.sqrt(b_beta ** 2 + 2.0 * a * c_beta)) / a


def saturation_pressure(ta: float) -> float:
    """Saturation pressure of water vapour in Pa, over ice below 0 degC and
    over liquid water from 0 degC on.

    The Arden Buck equation supplies the estimate; the root of the
    Hyland-Wexler equation `ln(Ps) = f(T)` is then solved for.
    """
    _check_temperature(ta)
    tk = ta + T_ZERO
    if ta < 0.0:
        a = 6.1115
        ln_ps = (
            C1 / tk + C2 + C3 * tk + C4 * tk ** 2 + C5 * tk ** 3
            + C6 * tk ** 4 + C7 * math.log(tk)
        )
    else:
        a = 6.1121
        ln_ps = (
            C8 / tk + C9 + C10 * tk + C11 * tk ** 2 + C12 * tk ** 3
            + C13 * math.log(tk)
        )
    # wider upper counterpart point at high temperatures
    n = 1.1 if ta > 50.0 else 1.0
    ps_est = a * math.exp(_alfa(ta)) * 100.0
    solver = BrentSolver(
        name='SaturationPressure',
        accuracy=min(DEFAULT_ACCURACY, ps_est * 1.0e-10),
        counterpart_points=(ps_est * SOLVER_A_COEF, ps_est * SOLVER_B_COEF * n),
        bounds=(sys.float_info.min, math.inf)
    )
    return solver.solve(lambda ps: math.log(ps) - ln_ps)


def saturation_pressure_x_rh(x: float, RH: float, Pat: float) -> float:
    """Saturation pressure in Pa of air with humidity ratio `x` at relative
    humidity `RH`.
    """
    if RH <= 0.0:
        raise InvalidArgumentError(
            "Saturation pressure cannot be derived from a relative "
            "humidity of 0 %."
        )
    return x * Pat / ((WG_RATIO * RH / 100.0) + x * RH / 100.0)


def humidity_ratio(RH: float, Ps: float, Pat: float) -> float:
    """Humidity ratio in kg/kg at relative humidity `RH` and saturation
    pressure `Ps`.

    Returns infinity when the partial vapour pressure reaches the
    atmospheric pressure (above the boiling point).
    """
    if RH == 0.0:
        return 0.0
    pv = RH / 100.0 * Ps
    if pv >= Pat:
        return math.inf
    return WG_RATIO * pv / (Pat - pv)


def max_humidity_ratio(Ps: float, Pat: float) -> float:
    """Humidity ratio of saturated air in kg/kg."""
    return humidity_ratio(100.0, Ps, Pat)


def relative_humidity(ta: float, x: float, Pat: float) -> float:
    """Relative humidity in %, clamped to 100 % in the fog regime."""
    if x == 0.0:
        return 0.0
    ps = saturation_pressure(ta)
    rh = x * Pat / (WG_RATIO * ps + x * ps)
    if rh > 1.0:
        return 100.0
    return rh * 100.0


def relative_humidity_tdp(tdp: float, ta: float) -> float:
    """Relative humidity in % from dew point and dry-bulb temperature."""
    if tdp == -math.inf:
        return 0.0
    rh = math.exp(_alfa(tdp) - _alfa(ta)) * 100.0
    return min(rh, 100.0)


def dew_point_temperature(ta: float, RH: float, Pat: float) -> float:
    """Dew point temperature in degC (frost point below 0 degC).

    Below 25 % RH the Arden Buck inversion only serves as estimate for
    matching the saturation humidity ratio with the humidity ratio of the
    air.
    """
    _check_relative_humidity(RH)
    if RH >= 100.0:
        return ta
    if RH == 0.0:
        return -math.inf
    tdp_est = _inverse_alfa(math.log(RH / 100.0) + _alfa(ta))
    if RH >= 25.0:
        return tdp_est
    x = humidity_ratio(RH, saturation_pressure(ta), Pat)
    solver = BrentSolver(
        name='DewPointTemperature',
        counterpart_points=(tdp_est * SOLVER_A_COEF, tdp_est * SOLVER_B_COEF),
        bounds=(T_MIN, ta)
    )
    return solver.solve(
        lambda t: max_humidity_ratio(saturation_pressure(t), Pat) - x
    )


def wet_bulb_temperature(ta: float, RH: float, Pat: float) -> float:
    """Thermodynamic wet-bulb temperature in degC.

    Solves the adiabatic saturation balance
    `h + (x_sat - x) * h_w = h_sat`, where `h_w` is the enthalpy of the
    evaporating water: ice at or below 0 degC, liquid water above. The
    estimate comes from the correlation of Stull (2011).
    """
    _check_relative_humidity(RH)
    if RH >= 100.0:
        return ta
    x = humidity_ratio(RH, saturation_pressure(ta), Pat)
    h = specific_enthalpy(ta, x, Pat)
    twb_est = (
        ta * math.atan(0.151977 * (RH + 8.313659) ** 0.5)
        + math.atan(ta + RH)
        - math.atan(RH - 1.676331)
        + 0.00391838 * RH ** 1.5 * math.atan(0.023101 * RH)
        - 4.686035
    )

    def _residual(t: float) -> float:
        x_sat = max_humidity_ratio(saturation_pressure(t), Pat)
        h_sat = specific_enthalpy(t, x_sat, Pat)
        if t <= 0.0:
            h_w = ice.specific_enthalpy(t)
        else:
            h_w = liquid_water.specific_enthalpy(t)
        return h + (x_sat - x) * h_w - h_sat

    solver = BrentSolver(
        name='WetBulbTemperature',
        counterpart_points=(twb_est * SOLVER_A_COEF, twb_est * SOLVER_B_COEF),
        bounds=(T_MIN, ta)
    )
    return solver.solve(_residual)


def dynamic_viscosity(ta: float, x: float) -> float:
    """Dynamic viscosity in Pa.s, mixture rule of Wilke."""
    mu_da = dry_air.dynamic_viscosity(ta)
    if x == 0.0:
        return mu_da
    mu_wv = water_vapour.dynamic_viscosity(ta)
    xm = 1.61 * x
    fi_av = (
        (1.0 + (mu_da / mu_wv) ** 0.5 * (M_WV / M_DA) ** 0.25) ** 2
        / (2.0 * 2.0 ** 0.5 * (1.0 + M_DA / M_WV) ** 0.5)
    )
    fi_va = (
        (1.0 + (mu_wv / mu_da) ** 0.5 * (M_DA / M_WV) ** 0.25) ** 2
        / (2.0 * 2.0 ** 0.5 * (1.0 + M_WV / M_DA) ** 0.5)
    )
    return mu_da / (1.0 + fi_av * xm) + mu_wv / (1.0 + fi_va / xm)


def kinematic_viscosity(ta: float, x: float, rho: float) -> float:
    """Kinematic viscosity in m2/s."""
    return dynamic_viscosity(ta, x) / rho


def thermal_conductivity(ta: float, x: float) -> float:
    """Thermal conductivity in W/(m.K), mixture rule of Mason & Saxena with
    the interaction coefficients of Lindsay & Bromley.
    """
    k_da = dry_air.thermal_conductivity(ta)
    if x == 0.0:
        return k_da
    k_wv = water_vapour.thermal_conductivity(ta)
    mu_da = dry_air.dynamic_viscosity(ta)
    mu_wv = water_vapour.dynamic_viscosity(ta)
    tk = ta + T_ZERO
    xm = 1.61 * x
    s_da, s_wv = SUTHERLAND_DA, SUTHERLAND_WV
    s_av = 0.733 * (s_da * s_wv) ** 0.5
    alfa_av = (mu_da / mu_wv) * WG_RATIO ** 0.75 * ((1.0 + s_da / tk) / (1.0 + s_wv / tk))
    alfa_va = (mu_wv / mu_da) * WG_RATIO ** -0.75 * ((1.0 + s_wv / tk) / (1.0 + s_da / tk))
    beta_av = (1.0 + s_av / tk) / (1.0 + s_da / tk)
    beta_va = (1.0 + s_av / tk) / (1.0 + s_wv / tk)
    A_av = 0.25 * (1.0 + alfa_av ** 0.5) ** 2 * beta_av
    A_va = 0.25 * (1.0 + alfa_va ** 0.5) ** 2 * beta_va
    return k_da / (1.0 + A_av * xm) + k_wv / (1.0 + A_va / xm)


def specific_enthalpy(ta: float, x: float, Pat: float) -> float:
    """Specific enthalpy in kJ/kg of dry air.

    Three regimes:
    - dry air (x = 0),
    - unsaturated air (x <= x_max): dry air + water vapour,
    - fog (x > x_max): dry air + saturated vapour + the excess water as
      liquid mist (ta > 0 degC) or as ice mist (ta <= 0 degC). Both mist
      terms are added; the substance equation outside its own regime
      contributes zero.
    """
    i_da = dry_air.specific_enthalpy(ta)
    if x == 0.0:
        return i_da
    x_max = max_humidity_ratio(saturation_pressure(ta), Pat)
    if x <= x_max:
        return i_da + x * water_vapour.specific_enthalpy(ta)
    i_wv = x_max * water_vapour.specific_enthalpy(ta)
    i_wt = (x - x_max) * liquid_water.specific_enthalpy(ta)
    i_ice = (x - x_max) * ice.specific_enthalpy(ta)
    return i_da + i_wv + i_wt + i_ice


def specific_heat(ta: float, x: float) -> float:
    """Specific heat in kJ/(kg.K), per kg of dry air."""
    return dry_air.specific_heat(ta) + x * water_vapour.specific_heat(ta)


def density(ta: float, x: float, Pat: float) -> float:
    """Dry-air density of the mixture in kg/m3, i.e. the inverse of the
    specific volume per kg of dry air.
    """
    if x == 0.0:
        return dry_air.density(ta, Pat)
    return Pat / (R_DA * (ta + T_ZERO) * (1.0 + x / WG_RATIO))


def thermal_diffusivity(rho: float, k: float, cp: float) -> float:
    """Thermal diffusivity in m2/s; `cp` in kJ/(kg.K)."""
    return k / (rho * cp * 1.0e3)


def prandtl_number(mu: float, k: float, cp: float) -> float:
    """Prandtl number; `cp` in kJ/(kg.K)."""
    return mu * cp * 1.0e3 / k


def dry_bulb_temperature_tdp_rh(tdp: float, RH: float, Pat: float) -> float:
    """Dry-bulb temperature in degC of air with dew point `tdp` and relative
    humidity `RH`. Returns infinity for RH = 0.
    """
    _check_relative_humidity(RH)
    if RH >= 100.0:
        return tdp
    if RH == 0.0:
        return math.inf
    ta_est = _inverse_alfa(_alfa(tdp) - math.log(RH / 100.0))
    solver = BrentSolver(
        name='DryBulbTemperatureTdpRH',
        counterpart_points=(ta_est - 1.0, ta_est + 1.0),
        bounds=(tdp, T_MAX)
    )
    return solver.solve(lambda t: tdp - dew_point_temperature(t, RH, Pat))


def dry_bulb_temperature_x_rh(x: float, RH: float, Pat: float) -> float:
    """Dry-bulb temperature in degC at which air with humidity ratio `x`
    has relative humidity `RH`.
    """
    _check_relative_humidity(RH)
    if RH == 0.0 or x <= 0.0:
        raise InvalidArgumentError(
            "Dry-bulb temperature is undefined for a relative humidity "
            "or humidity ratio of zero."
        )
    ps = saturation_pressure_x_rh(x, RH, Pat)
    ps_zero = 611.21 if ps >= 611.21 else 611.15
    ta_est = _inverse_alfa(math.log(ps / ps_zero))
    solver = BrentSolver(
        name='DryBulbTemperatureXRH',
        counterpart_points=(ta_est - 1.0, ta_est + 1.0),
        bounds=(T_MIN, T_MAX)
    )
    return solver.solve(lambda t: ps - saturation_pressure(t))


def dry_bulb_temperature_ix(ix: float, x: float, Pat: float) -> float:
    """Dry-bulb temperature in degC of air with specific enthalpy `ix` and
    humidity ratio `x`, fog included.
    """
    ta_est = (ix - HEAT_OF_EVAPORATION * x) / (1.005 + 1.86 * x)
    ta_est = min(max(ta_est, T_MIN), T_MAX)
    solver = BrentSolver(
        name='DryBulbTemperatureIX',
        counterpart_points=(ta_est - 5.0, ta_est + 5.0),
        bounds=(T_MIN, T_MAX)
    )
    return solver.solve(lambda t: ix - specific_enthalpy(t, x, Pat))


def dry_bulb_temperature_wbt_rh(wbt: float, RH: float, Pat: float) -> float:
    """Dry-bulb temperature in degC of air with wet-bulb temperature `wbt`
    and relative humidity `RH`.
    """
    _check_relative_humidity(RH)
    if RH >= 100.0:
        return wbt
    solver = BrentSolver(
        name='DryBulbTemperatureWbtRH',
        counterpart_points=(wbt, wbt + 10.0),
        bounds=(wbt, T_MAX)
    )
    return solver.solve(lambda t: wbt - wet_bulb_temperature(t, RH, Pat))


def dry_bulb_temperature_max(Pat: float) -> float:
    """Dry-bulb temperature in degC at which the saturation pressure equals
    `Pat`; above it, air at this pressure cannot be saturated.
    """
    ln_p = math.log(0.001638 * Pat)
    ta_est = -237300.0 * ln_p / (1000.0 * ln_p - 17269.0)
    solver = BrentSolver(
        name='DryBulbTemperatureMax',
        counterpart_points=(
            ta_est * SOLVER_A_COEF,
            ta_est * SOLVER_B_COEF * 1.5
        ),
        bounds=(T_MIN, T_MAX)
    )
    return solver.solve(lambda t: Pat - saturation_pressure(t))


def pressure_at_altitude(altitude: float) -> float:
    """Atmospheric pressure in Pa at `altitude` in m (standard atmosphere)."""
    return P_ATM * (1.0 - 2.25577e-5 * altitude) ** 5.2559


def temperature_at_altitude(ta_sea: float, altitude: float) -> float:
    """Air temperature in degC at `altitude` in m, with a lapse rate of
    6.5 K per km.
    """
    return ta_sea - 0.0065 * altitude
