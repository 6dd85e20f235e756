from typing import Dict
from .. import Quantity
from ..exceptions import InvalidArgumentError
from .constants import STANDARD_PRESSURE, T_MIN, T_MAX
from .equations import water_vapour as wv

Q_ = Quantity


class WaterVapour:
    """Water vapour at temperature `T` and pressure `P`, treated as an ideal
    gas. Only the density depends on pressure.
    """
    units: Dict[str, str] = {
        'T': 'degC',
        'P': 'Pa',
        'rho': 'kg / m ** 3',
        'h': 'kJ / kg',
        'cp': 'kJ / kg / K',
        'k': 'W / m / K',
        'mu': 'Pa * s'
    }

    def __init__(self, T: Quantity, P: Quantity | None = None):
        if P is None:
            P = STANDARD_PRESSURE
        self._T = T.to(self.units['T']).m
        self._P = P.to(self.units['P']).m
        if not self._P > 0.0:
            raise InvalidArgumentError(f"Pressure must be positive, got {self._P} Pa.")
        if not T_MIN <= self._T <= T_MAX:
            raise InvalidArgumentError(
                f"Water vapour temperature {self._T} degC is outside the range "
                f"{T_MIN} degC .. {T_MAX} degC."
            )

    def __eq__(self, other: object) -> bool:
        if isinstance(other, WaterVapour):
            return (self._T, self._P) == (other._T, other._P)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._T, self._P))

    @property
    def T(self) -> Quantity:
        return Q_(self._T, self.units['T'])

    @property
    def P(self) -> Quantity:
        return Q_(self._P, self.units['P'])

    @property
    def rho(self) -> Quantity:
        return Q_(wv.density(self._T, self._P), self.units['rho'])

    @property
    def h(self) -> Quantity:
        """Specific enthalpy, referenced to liquid water at 0 degC."""
        return Q_(wv.specific_enthalpy(self._T), self.units['h'])

    @property
    def cp(self) -> Quantity:
        return Q_(wv.specific_heat(self._T), self.units['cp'])

    @property
    def k(self) -> Quantity:
        return Q_(wv.thermal_conductivity(self._T), self.units['k'])

    @property
    def mu(self) -> Quantity:
        return Q_(wv.dynamic_viscosity(self._T), self.units['mu'])
