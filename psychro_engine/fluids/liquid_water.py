from typing import Dict
from .. import Quantity
from ..exceptions import InvalidArgumentError
from .constants import STANDARD_PRESSURE
from .equations import liquid_water as lw

Q_ = Quantity


class LiquidWater:
    """Liquid water at temperature `T` and pressure `P`. The correlations
    only depend on temperature; pressure is carried along for the flows
    built on it.
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

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LiquidWater):
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
        return Q_(lw.density(self._T), self.units['rho'])

    @property
    def h(self) -> Quantity:
        return Q_(lw.specific_enthalpy(self._T), self.units['h'])

    @property
    def cp(self) -> Quantity:
        return Q_(lw.specific_heat(self._T), self.units['cp'])

    @property
    def k(self) -> Quantity:
        return Q_(lw.thermal_conductivity(self._T), self.units['k'])

    @property
    def mu(self) -> Quantity:
        return Q_(lw.dynamic_viscosity(self._T), self.units['mu'])
