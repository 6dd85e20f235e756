from typing import Dict
from .. import Quantity
from ..exceptions import InvalidArgumentError
from .constants import STANDARD_PRESSURE, T_MIN
from .equations import ice as ic

Q_ = Quantity


class Ice:
    units: Dict[str, str] = {
        'T': 'degC',
        'P': 'Pa',
        'rho': 'kg / m ** 3',
        'h': 'kJ / kg',
        'cp': 'kJ / kg / K',
        'k': 'W / m / K'
    }

    def __init__(self, T: Quantity, P: Quantity | None = None):
        if P is None:
            P = STANDARD_PRESSURE
        self._T = T.to(self.units['T']).m
        self._P = P.to(self.units['P']).m
        if not T_MIN <= self._T <= 0.0:
            raise InvalidArgumentError(
                f"Ice temperature must lie between {T_MIN} degC and 0 degC, "
                f"got {self._T} degC."
            )

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Ice):
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
        return Q_(ic.density(self._T), self.units['rho'])

    @property
    def h(self) -> Quantity:
        return Q_(ic.specific_enthalpy(self._T), self.units['h'])

    @property
    def cp(self) -> Quantity:
        return Q_(ic.specific_heat(self._T), self.units['cp'])

    @property
    def k(self) -> Quantity:
        return Q_(ic.thermal_conductivity(self._T), self.units['k'])
