"""
Flows of moist air, liquid water and water vapour.

A flow couples one fluid state with a mass flow rate. The volume flow rate
is never stored; it is always derived from the mass flow rate and the
density of the state.
"""
from .. import Quantity
from ..exceptions import InvalidArgumentError
from .constants import MASS_FLOW_MAX
from .humid_air import HumidAir
from .liquid_water import LiquidWater
from .water_vapour import WaterVapour

Q_ = Quantity


def _check_mass_flow(m: float) -> float:
    if not 0.0 <= m <= MASS_FLOW_MAX:
        raise InvalidArgumentError(
            f"Mass flow rate {m} kg/s is outside the range "
            f"0 .. {MASS_FLOW_MAX} kg/s."
        )
    return m


class FlowOfHumidAir:
    """
    Flow of moist air.

    Exactly one of `m_da` (mass flow rate of dry air), `m` (mass flow rate of
    the moist air, i.e. dry air and water) or `V` (volume flow rate) must be
    given.
    """

    def __init__(
        self,
        air: HumidAir,
        m_da: Quantity | None = None,
        m: Quantity | None = None,
        V: Quantity | None = None
    ) -> None:
        given = [q for q in (m_da, m, V) if q is not None]
        if len(given) != 1:
            raise InvalidArgumentError(
                "Specify exactly one of `m_da`, `m` or `V`."
            )
        self._air = air
        W = air.state.W
        if m_da is not None:
            m_da = m_da.to('kg / s').m
        elif m is not None:
            m_da = m.to('kg / s').m / (1.0 + W)
        else:
            m_da = (V / air.v).to('kg / s').m
        self._m_da = _check_mass_flow(m_da)
        _check_mass_flow(self._m_da * (1.0 + W))

    @classmethod
    def from_dry_air_flow(cls, air: HumidAir, m_da: float) -> 'FlowOfHumidAir':
        """Creates the flow from a dry-air mass flow rate in kg/s."""
        return cls(air, m_da=Q_(m_da, 'kg / s'))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FlowOfHumidAir):
            return (self._air, self._m_da) == (other._air, other._m_da)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._air, self._m_da))

    def __str__(self):
        return f"{self._air}, {self.m_da.to('kg / s'):~P.4f} dry air"

    @property
    def air(self) -> HumidAir:
        return self._air

    @property
    def m_da(self) -> Quantity:
        """Mass flow rate of dry air."""
        return Q_(self._m_da, 'kg / s')

    @property
    def m(self) -> Quantity:
        """Mass flow rate of moist air."""
        return Q_(self._m_da * (1.0 + self._air.state.W), 'kg / s')

    @property
    def V(self) -> Quantity:
        """Volume flow rate."""
        return (self.m / self._air.rho).to('m ** 3 / s')


class FlowOfLiquidWater:
    """Flow of liquid water, given either by its mass flow rate `m` or by
    its volume flow rate `V`.
    """

    def __init__(
        self,
        water: LiquidWater,
        m: Quantity | None = None,
        V: Quantity | None = None
    ) -> None:
        if (m is None) == (V is None):
            raise InvalidArgumentError("Specify exactly one of `m` or `V`.")
        self._water = water
        if m is None:
            m = V * water.rho
        self._m = _check_mass_flow(m.to('kg / s').m)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FlowOfLiquidWater):
            return (self._water, self._m) == (other._water, other._m)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._water, self._m))

    @property
    def water(self) -> LiquidWater:
        return self._water

    @property
    def m(self) -> Quantity:
        return Q_(self._m, 'kg / s')

    @property
    def V(self) -> Quantity:
        return (self.m / self._water.rho).to('m ** 3 / s')


class FlowOfWaterVapour:
    """Flow of water vapour, given either by its mass flow rate `m` or by
    its volume flow rate `V`.
    """

    def __init__(
        self,
        vapour: WaterVapour,
        m: Quantity | None = None,
        V: Quantity | None = None
    ) -> None:
        if (m is None) == (V is None):
            raise InvalidArgumentError("Specify exactly one of `m` or `V`.")
        self._vapour = vapour
        if m is None:
            m = V * vapour.rho
        self._m = _check_mass_flow(m.to('kg / s').m)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FlowOfWaterVapour):
            return (self._vapour, self._m) == (other._vapour, other._m)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._vapour, self._m))

    def __str__(self):
        return (
            f"{self._vapour.T.to('degC'):~P.2f}, "
            f"{self.m.to('kg / s'):~P.4f} water vapour"
        )

    @property
    def vapour(self) -> WaterVapour:
        return self._vapour

    @property
    def m(self) -> Quantity:
        return Q_(self._m, 'kg / s')

    @property
    def V(self) -> Quantity:
        return (self.m / self._vapour.rho).to('m ** 3 / s')
