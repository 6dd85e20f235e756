import pint

UNITS = pint.UnitRegistry()
Quantity = UNITS.Quantity

# relative humidity and bypass factor are expressed in `frac` or `pct`
unit_definitions = [
    'fraction = [] = frac',
    'pct = 1e-2 frac'
]
for ud in unit_definitions:
    UNITS.define(ud)

pint.set_application_registry(UNITS)
