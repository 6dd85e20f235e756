"""
Immutable state of moist air.

A state is fully determined by the triple (P, Tdb, W): atmospheric pressure,
dry-bulb temperature and humidity ratio. All other properties are derived
from this triple when they are requested.
"""
import math
from typing import NamedTuple
from .. import Quantity
from ..exceptions import InvalidArgumentError
from .constants import STANDARD_PRESSURE, T_MIN, T_MAX
from .equations import humid_air as ha

Q_ = Quantity


class AirState(NamedTuple):
    """Numeric state of moist air: P in Pa, Tdb in degC, W in kg/kg."""
    P: float
    Tdb: float
    W: float


class HumidAir:
    """
    State of moist air.

    The state is created from the atmospheric pressure `P` (standard
    pressure if omitted) and two other quantities, passed as keyword
    arguments, e.g.::

        HumidAir(Tdb=Q_(28, 'degC'), RH=Q_(50, 'pct'))

    Accepted combinations are (Tdb, W), (Tdb, RH), (Tdb, Tdp), (h, W),
    (W, RH), (Tdp, RH) and (Twb, RH).

    The object never changes once it is created; a different state is a
    new `HumidAir` object.
    """
    _units: dict[str, str] = {
        'Tdb': 'degC',
        'W': 'kg / kg',
        'RH': 'pct',
        'h': 'kJ / kg',
        'Tdp': 'degC',
        'Twb': 'degC'
    }

    def __init__(self, P: Quantity | None = None, **input_qties: Quantity):
        if P is None:
            P = STANDARD_PRESSURE
        if len(input_qties) != 2:
            raise InvalidArgumentError(
                "Humid air state needs exactly two quantities besides "
                f"pressure, got {list(input_qties.keys())}."
            )
        try:
            inputs = {
                key: qty.to(self._units[key]).m
                for key, qty in input_qties.items()
            }
        except KeyError as err:
            raise InvalidArgumentError(
                f"Unknown humid air quantity: {err.args[0]}."
            ) from None
        for key, value in inputs.items():
            if value is None or math.isnan(value):
                raise InvalidArgumentError(
                    f"Humid air state cannot be determined: "
                    f"parameter {key} is NaN or None."
                )
        P = P.to('Pa').m
        self._state = self._validate(AirState(P, *self._resolve(P, inputs)))

    @staticmethod
    def _resolve(P: float, inputs: dict[str, float]) -> tuple[float, float]:
        """Returns the dry-bulb temperature and humidity ratio that belong to
        the given pair of inputs.
        """
        RH = inputs.get('RH')
        if RH is not None and not 0.0 <= RH <= 100.0:
            raise InvalidArgumentError(
                f"Relative humidity {RH} % is outside the range 0 .. 100 %."
            )
        match sorted(inputs.keys()):
            case ['Tdb', 'W']:
                return inputs['Tdb'], inputs['W']
            case ['RH', 'Tdb']:
                Tdb = inputs['Tdb']
            case ['Tdb', 'Tdp']:
                Tdb = inputs['Tdb']
                RH = ha.relative_humidity_tdp(inputs['Tdp'], Tdb)
            case ['W', 'h']:
                W = inputs['W']
                return ha.dry_bulb_temperature_ix(inputs['h'], W, P), W
            case ['RH', 'W']:
                W = inputs['W']
                return ha.dry_bulb_temperature_x_rh(W, RH, P), W
            case ['RH', 'Tdp']:
                Tdb = ha.dry_bulb_temperature_tdp_rh(inputs['Tdp'], RH, P)
            case ['RH', 'Twb']:
                Tdb = ha.dry_bulb_temperature_wbt_rh(inputs['Twb'], RH, P)
            case _:
                raise InvalidArgumentError(
                    "Humid air state cannot be determined from "
                    f"{list(inputs.keys())}."
                )
        W = ha.humidity_ratio(RH, ha.saturation_pressure(Tdb), P)
        return Tdb, W

    @staticmethod
    def _validate(state: AirState) -> AirState:
        if not state.P > 0.0:
            raise InvalidArgumentError(
                f"Pressure must be positive, got {state.P} Pa."
            )
        if not T_MIN <= state.Tdb <= T_MAX:
            raise InvalidArgumentError(
                f"Dry-bulb temperature {state.Tdb} degC is outside the range "
                f"{T_MIN} degC .. {T_MAX} degC."
            )
        if not 0.0 <= state.W < math.inf:
            raise InvalidArgumentError(
                f"Humidity ratio must be finite and not negative, "
                f"got {state.W} kg/kg."
            )
        return state

    @classmethod
    def from_state(cls, state: AirState) -> 'HumidAir':
        """Creates `HumidAir` directly from a numeric state."""
        obj = cls.__new__(cls)
        obj._state = cls._validate(AirState(*state))
        return obj

    @property
    def state(self) -> AirState:
        return self._state

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HumidAir):
            return self._state == other._state
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._state)

    def __repr__(self) -> str:
        P, Tdb, W = self._state
        return f"HumidAir(P={P} Pa, Tdb={Tdb} degC, W={W} kg/kg)"

    def __str__(self):
        return (
            f"{self.Tdb.to('degC'):~P.2f} DB, "
            f"{self.W.to('g/kg'):~P.2f} AH "
            f"({self.RH.to('pct'):~P.0f} RH)"
        )

    @property
    def P(self) -> Quantity:
        return Q_(self._state.P, 'Pa')

    @property
    def Tdb(self) -> Quantity:
        return Q_(self._state.Tdb, 'degC')

    @property
    def W(self) -> Quantity:
        return Q_(self._state.W, 'kg / kg')

    @property
    def Ps(self) -> Quantity:
        """Saturation pressure at the dry-bulb temperature."""
        return Q_(ha.saturation_pressure(self._state.Tdb), 'Pa')

    @property
    def W_max(self) -> Quantity:
        """Humidity ratio of saturated air at the same temperature and
        pressure.
        """
        P, Tdb, _ = self._state
        return Q_(ha.max_humidity_ratio(ha.saturation_pressure(Tdb), P), 'kg / kg')

    @property
    def RH(self) -> Quantity:
        P, Tdb, W = self._state
        return Q_(ha.relative_humidity(Tdb, W, P), 'pct')

    @property
    def Tdp(self) -> Quantity:
        P, Tdb, _ = self._state
        return Q_(ha.dew_point_temperature(Tdb, self.RH.to('pct').m, P), 'degC')

    @property
    def Twb(self) -> Quantity:
        P, Tdb, _ = self._state
        return Q_(ha.wet_bulb_temperature(Tdb, self.RH.to('pct').m, P), 'degC')

    @property
    def h(self) -> Quantity:
        P, Tdb, W = self._state
        return Q_(ha.specific_enthalpy(Tdb, W, P), 'kJ / kg')

    @property
    def v(self) -> Quantity:
        """Specific volume per kg of dry air."""
        P, Tdb, W = self._state
        return Q_(1.0 / ha.density(Tdb, W, P), 'm ** 3 / kg')

    @property
    def rho(self) -> Quantity:
        """Density of the moist air (dry air and water vapour)."""
        return (1.0 + self._state.W) / self.v

    @property
    def cp(self) -> Quantity:
        _, Tdb, W = self._state
        return Q_(ha.specific_heat(Tdb, W), 'kJ / kg / K')

    @property
    def mu(self) -> Quantity:
        _, Tdb, W = self._state
        return Q_(ha.dynamic_viscosity(Tdb, W), 'Pa * s')

    @property
    def nu(self) -> Quantity:
        _, Tdb, W = self._state
        rho = self.rho.to('kg / m ** 3').m
        return Q_(ha.kinematic_viscosity(Tdb, W, rho), 'm ** 2 / s')

    @property
    def k(self) -> Quantity:
        _, Tdb, W = self._state
        return Q_(ha.thermal_conductivity(Tdb, W), 'W / m / K')

    @property
    def alpha(self) -> Quantity:
        """Thermal diffusivity."""
        rho = self.rho.to('kg / m ** 3').m
        k = self.k.to('W / m / K').m
        cp = self.cp.to('kJ / kg / K').m
        return Q_(ha.thermal_diffusivity(rho, k, cp), 'm ** 2 / s')

    @property
    def Pr(self) -> Quantity:
        """Prandtl number."""
        mu = self.mu.to('Pa * s').m
        k = self.k.to('W / m / K').m
        cp = self.cp.to('kJ / kg / K').m
        return Q_(ha.prandtl_number(mu, k, cp), '')
